"""Core building blocks shared across the clinic package."""
