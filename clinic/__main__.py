"""
Console entry point.

Run with ``python -m clinic`` or the ``clinic`` script.
"""

import logging

from clinic.application import ClinicRegistry, seed_sample_data
from clinic.cli import ClinicMenu
from clinic.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=settings.LOG_FORMAT,
    )

    registry = ClinicRegistry(currency_symbol=settings.CURRENCY_SYMBOL)
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(registry)

    logger.info(f"{settings.PROJECT_NAME} started")
    ClinicMenu(registry, settings=settings).run()


if __name__ == "__main__":
    main()
