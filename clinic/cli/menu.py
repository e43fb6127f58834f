"""
Interactive Console Menu

Text menu through which an operator registers patients and doctors,
books appointments, bills patients and discharges them. All record
keeping is delegated to the ClinicRegistry; this module only reads,
parses and prints.
"""

import logging
from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from clinic.application.registry import ClinicRegistry
from clinic.cli.parsing import parse_amount, parse_date, parse_int, parse_yes_no
from clinic.config.settings import Settings, get_settings
from clinic.core.domain import DomainException
from clinic.domain.entities import Patient

logger = logging.getLogger(__name__)

MENU_OPTIONS: list[tuple[int, str]] = [
    (1, "Add Patient"),
    (2, "Add Doctor"),
    (3, "Schedule Appointment"),
    (4, "View All Patients"),
    (5, "View All Doctors"),
    (6, "View Appointments for a Patient"),
    (7, "Generate Bill"),
    (8, "View All Bills"),
    (9, "Mark Bill as Paid"),
    (10, "Discharge Patient"),
    (0, "Exit"),
]

EXIT_CHOICE = 0


class ClinicMenu:
    """
    Console front end for a ClinicRegistry.

    Input comes from `stream` when given (one answer per line) and from
    standard input otherwise. Running out of input ends the session.

    Example:
        ```python
        registry = ClinicRegistry()
        seed_sample_data(registry)
        ClinicMenu(registry).run()
        ```
    """

    def __init__(
        self,
        registry: ClinicRegistry,
        console: Console | None = None,
        stream: TextIO | None = None,
        settings: Settings | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.registry = registry
        self.console = console or Console()
        self.stream = stream
        self.settings = settings or get_settings()
        self.today = today

        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_patient,
            2: self.add_doctor,
            3: self.schedule_appointment,
            4: self.view_all_patients,
            5: self.view_all_doctors,
            6: self.view_appointments_for_patient,
            7: self.generate_bill,
            8: self.view_all_bills,
            9: self.mark_bill_as_paid,
            10: self.discharge_patient,
        }

    def run(self) -> None:
        """Show the menu until the operator exits or input runs out."""
        while True:
            self.print_menu()
            try:
                choice = self._read_int("Enter your choice: ")
            except EOFError:
                logger.info("Input closed, leaving menu")
                self._say("Exiting system. Goodbye!")
                return

            if choice == EXIT_CHOICE:
                self._say("Exiting system. Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self._error("Invalid choice. Please try again.")
                continue

            try:
                action()
            except DomainException as e:
                self._error(e.message)
            except EOFError:
                logger.info("Input closed in the middle of an action")
                self._say("Exiting system. Goodbye!")
                return

    def print_menu(self) -> None:
        table = Table(show_header=False, box=None, padding=(0, 1))
        for number, label in MENU_OPTIONS:
            table.add_row(f"{number}.", label)
        self.console.print()
        self.console.print(Panel(table, title=self.settings.PROJECT_NAME.upper(), expand=False))

    # Actions

    def add_patient(self) -> None:
        self._heading("Add Patient")
        name = self._read("Name: ")
        age = self._read_int("Age: ")
        gender = self._read("Gender: ")
        contact = self._read("Contact: ")
        disease = self._read("Disease: ")
        admitted = parse_yes_no(self._read("Is admitted? (yes/no): "))
        admission_date = None
        if admitted:
            admission_date = self._read_date(
                "Admission date (yyyy-mm-dd): ",
                "Invalid date format. Setting admission date to today.",
            )

        patient = self.registry.register_patient(
            name, age, gender, contact, disease, admitted=admitted, admission_date=admission_date
        )
        self._success(f"Patient added successfully. ID: {patient.id}")

    def add_doctor(self) -> None:
        self._heading("Add Doctor")
        name = self._read("Name: ")
        age = self._read_int("Age: ")
        gender = self._read("Gender: ")
        contact = self._read("Contact: ")
        specialization = self._read("Specialization: ")
        available = parse_yes_no(self._read("Is available? (yes/no): "))

        doctor = self.registry.register_doctor(name, age, gender, contact, specialization, available=available)
        self._success(f"Doctor added successfully. ID: {doctor.id}")

    def schedule_appointment(self) -> None:
        self._heading("Schedule Appointment")
        patients = self.registry.list_patients()
        if not patients:
            self._error("No patients registered. Please add a patient first.")
            return
        doctors = self.registry.list_doctors()
        if not doctors:
            self._error("No doctors registered. Please add a doctor first.")
            return

        self._say("Select patient by ID:")
        for patient in patients:
            self._plain(f"{patient.id}: {patient.name}")
        patient = self.registry.find_patient(self._read_int(""))
        if patient is None:
            self._error("Patient not found.")
            return

        self._say("Select doctor by ID:")
        for doctor in doctors:
            self._plain(f"{doctor.id}: {doctor.name} ({doctor.specialization})")
        doctor = self.registry.find_doctor(self._read_int(""))
        if doctor is None:
            self._error("Doctor not found.")
            return
        if not doctor.can_accept_appointments():
            self._error("Doctor is not available. Appointment cannot be scheduled.")
            return

        appointment_date = self._read_date("Appointment date (yyyy-mm-dd): ", "Invalid date. Using current date.")
        time_label = self._read("Appointment time (e.g., 10:30 AM): ")

        appointment = self.registry.schedule_appointment(patient.id, doctor.id, appointment_date, time_label)
        self._success(f"Appointment scheduled successfully. ID: {appointment.id}")

    def view_all_patients(self) -> None:
        self._heading("List of Patients")
        patients = self.registry.list_patients()
        if not patients:
            self._say("No patients registered.")
        for patient in patients:
            self._plain(patient.summary())

    def view_all_doctors(self) -> None:
        self._heading("List of Doctors")
        doctors = self.registry.list_doctors()
        if not doctors:
            self._say("No doctors registered.")
        for doctor in doctors:
            self._plain(doctor.summary())

    def view_appointments_for_patient(self) -> None:
        self._heading("View Appointments for Patient")
        patient = self._select_patient(self.registry.list_patients())
        if patient is None:
            return

        appointments = self.registry.appointments_for_patient(patient.id)
        if not appointments:
            self._say("No appointments found for this patient.")
        for appointment in appointments:
            self._plain(self.registry.describe_appointment(appointment))

    def generate_bill(self) -> None:
        self._heading("Generate Bill")
        patient = self._select_patient(self.registry.list_patients())
        if patient is None:
            return

        amount = self._read_amount(f"Bill amount: {self.settings.CURRENCY_SYMBOL}")
        bill = self.registry.generate_bill(patient.id, amount, self.today())
        self._success(f"Bill generated successfully. Bill ID: {bill.id}")

    def view_all_bills(self) -> None:
        self._heading("List of Bills")
        bills = self.registry.list_bills()
        if not bills:
            self._say("No bills generated.")
        for bill in bills:
            self._plain(self.registry.describe_bill(bill))

    def mark_bill_as_paid(self) -> None:
        self._heading("Mark Bill as Paid")
        if not self.registry.list_bills():
            self._say("No bills to mark.")
            return

        bill_id = self._read_int("Enter Bill ID: ")
        outcome = self.registry.mark_bill_paid(bill_id)
        self._success(outcome.message)

    def discharge_patient(self) -> None:
        self._heading("Discharge Patient")
        patient = self._select_patient(self.registry.admitted_patients())
        if patient is None:
            return

        self.registry.discharge_patient(patient.id)
        self._success("Patient discharged successfully.")

    # Helpers

    def _select_patient(self, candidates: tuple[Patient, ...]) -> Patient | None:
        """List `candidates`, read an id and resolve it against all registered patients."""
        if not self.registry.list_patients():
            self._say("No patients registered.")
            return None

        self._say("Select patient by ID:")
        for patient in candidates:
            self._plain(f"{patient.id}: {patient.name}")
        patient = self.registry.find_patient(self._read_int(""))
        if patient is None:
            self._error("Patient not found.")
        return patient

    def _read(self, prompt: str) -> str:
        line = self.console.input(prompt, markup=False, stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        text = self._read(prompt)
        while True:
            try:
                return parse_int(text)
            except ValueError:
                text = self._read("Invalid input. Please enter a number: ")

    def _read_amount(self, prompt: str) -> Decimal:
        text = self._read(prompt)
        while True:
            try:
                return parse_amount(text)
            except ValueError:
                text = self._read("Invalid input. Please enter a number: ")

    def _read_date(self, prompt: str, fallback_message: str) -> date:
        text = self._read(prompt)
        try:
            return parse_date(text, self.settings.DATE_FORMAT)
        except ValueError:
            logger.debug(f"Unparseable date {text!r}, using today")
            self._warn(fallback_message)
            return self.today()

    def _heading(self, title: str) -> None:
        self.console.print()
        self.console.print(f"--- {title} ---", style="bold cyan", markup=False)

    def _plain(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False)

    def _success(self, text: str) -> None:
        self.console.print(text, style="green", markup=False)

    def _warn(self, text: str) -> None:
        self.console.print(text, style="yellow", markup=False)

    def _error(self, text: str) -> None:
        self.console.print(text, style="red", markup=False)
