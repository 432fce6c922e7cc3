"""
Console channel: nine-command text menu driving the HotelSystem.
Input and output streams are injectable so the shell can be scripted.
"""
from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Optional, Sequence, TextIO, TypeVar

from pydantic import ValidationError as PydanticValidationError

from hotelres.exceptions import (
    AlreadyPaidError,
    PersistenceError,
    ReservationError,
    ValidationError,
)
from hotelres.models import Guest, PaymentMethod, RoomCategory, StayInput
from hotelres.services import HotelSystem

logger = logging.getLogger(__name__)

T = TypeVar("T")

WIDE = 70
NARROW = 50


class InputClosed(Exception):
    """Girdi akışı kapandı; menü döngüsü sonlanır."""


class ConsoleShell:
    """Menüyü gösterir, girdiyi toplar, HotelSystem operasyonlarını çağırır ve sonucu yazar."""

    def __init__(self, system: HotelSystem, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 hotel_name: str = "Hotel Reservation System"):
        self.system = system
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.hotel_name = hotel_name
        self._commands: Dict[str, Callable[[], None]] = {
            "1": self.search_available_rooms,
            "2": self.book_room,
            "3": self.view_all_reservations,
            "4": self.view_booking_details,
            "5": self.cancel_reservation,
            "6": self.process_payment,
            "7": self.add_guest,
            "8": self.view_all_rooms,
        }

    # ------------------------------------
    # IO helpers
    # ------------------------------------
    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _prompt(self, text: str) -> str:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise InputClosed()
        return line.strip()

    def _header(self, title: str) -> None:
        self._print()
        self._print("=" * NARROW)
        self._print(title.center(NARROW).rstrip())
        self._print("=" * NARROW)

    def _choose(self, prompt: str, options: Sequence[T]) -> T:
        """1 tabanlı seçim ister; geçersizse ValidationError fırlatır."""
        raw = self._prompt(prompt)
        try:
            index = int(raw) - 1
        except ValueError as e:
            raise ValidationError("Invalid input.") from e
        if not 0 <= index < len(options):
            raise ValidationError("Invalid selection.")
        return options[index]

    # ------------------------------------
    # Main loop
    # ------------------------------------
    def display_menu(self) -> None:
        self._header("HOTEL RESERVATION SYSTEM MENU")
        self._print("1. Search Available Rooms")
        self._print("2. Book a Room")
        self._print("3. View All Reservations")
        self._print("4. View Booking Details")
        self._print("5. Cancel Reservation")
        self._print("6. Process Payment")
        self._print("7. Add Guest")
        self._print("8. View All Rooms")
        self._print("9. Exit")
        self._print("=" * NARROW)

    def run(self) -> None:
        self._header(f"Welcome to the {self.hotel_name}")
        while True:
            self.display_menu()
            try:
                choice = self._prompt("Enter your choice (1-9): ")
            except InputClosed:
                logger.info("Input closed, leaving menu loop.")
                return

            if not choice:
                self._print("Please enter a valid choice.")
                continue
            if choice == "9":
                self._header(f"Thank you for using {self.hotel_name}!")
                return

            command = self._commands.get(choice)
            if command is None:
                self._print("Invalid choice. Please enter a number between 1 and 9.")
                continue

            try:
                command()
            except InputClosed:
                logger.info("Input closed during command, leaving menu loop.")
                return
            except PersistenceError as e:
                self._print(f"Warning: changes could not be saved: {e}")
            except ReservationError as e:
                self._print(f"Error: {e}")

    # ------------------------------------
    # Commands
    # ------------------------------------
    def search_available_rooms(self) -> None:
        self._header("SEARCH AVAILABLE ROOMS")
        category = None
        if self._prompt("Filter by category? (Y/N): ").upper() == "Y":
            categories = list(RoomCategory)
            self._print("\nSelect category:")
            for i, cat in enumerate(categories, 1):
                self._print(f"{i}. {cat.name} (${cat.base_rate:.2f}/night)")
            try:
                category = self._choose("Enter choice: ", categories)
            except ValidationError:
                self._print("Invalid choice. Showing all categories.")

        self._print("\nAvailable Rooms:")
        self._print("-" * WIDE)
        rooms = self.system.catalog.list_available(category)
        for room in rooms:
            self._print(str(room))
        if not rooms:
            self._print("No available rooms found.")
        self._print("-" * WIDE)

    def book_room(self) -> None:
        self._header("BOOK A ROOM")
        guest = self._select_or_create_guest()
        if guest is None:
            self._print("Booking cancelled.")
            return

        available = self.system.catalog.list_available()
        self._print("\nAvailable Rooms:")
        self._print("-" * WIDE)
        for i, room in enumerate(available, 1):
            self._print(f"{i}. {room}")
        self._print("-" * WIDE)
        if not available:
            self._print("No rooms available.")
            return

        room = self._choose(f"\nSelect room number (1-{len(available)}): ", available)
        stay = self._read_stay()

        reservation = self.system.ledger.book(guest, room, stay.check_in, stay.check_out)
        self._header("RESERVATION CREATED SUCCESSFULLY!")
        self._print(str(reservation))
        self._print("=" * NARROW)

    def _read_stay(self) -> StayInput:
        check_in = self._prompt("Check-in date (yyyy-MM-dd): ")
        check_out = self._prompt("Check-out date (yyyy-MM-dd): ")
        try:
            return StayInput(check_in=check_in, check_out=check_out)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid date format. Please use yyyy-MM-dd (e.g., 2024-12-25)"
            ) from e

    def _select_or_create_guest(self) -> Optional[Guest]:
        self._print("\nGuest Information:")
        self._print("1. Existing Guest")
        self._print("2. New Guest")
        choice = self._prompt("Enter choice (1 or 2): ")

        if choice == "1":
            guests: List[Guest] = self.system.guests.list_all()
            if not guests:
                self._print("No existing guests found. Please create a new guest.")
                return self._create_guest()
            self._print("\nExisting Guests:")
            self._print("-" * WIDE)
            for i, guest in enumerate(guests, 1):
                self._print(f"{i}. {guest}")
            self._print("-" * WIDE)
            try:
                return self._choose(f"Select guest (1-{len(guests)}): ", guests)
            except ValidationError as e:
                self._print(str(e))
                return None
        if choice == "2":
            return self._create_guest()

        self._print("Invalid choice.")
        return None

    def _create_guest(self) -> Optional[Guest]:
        self._print("\nEnter Guest Details:")
        name = self._prompt("Name: ")
        email = self._prompt("Email: ")
        phone = self._prompt("Phone: ")
        try:
            guest = self.system.guests.register(name, email, phone)
        except ValidationError as e:
            self._print(str(e))
            return None
        self._print("\nGuest added successfully!")
        self._print(str(guest))
        return guest

    def view_all_reservations(self) -> None:
        self._header("ALL RESERVATIONS")
        reservations = self.system.ledger.list_all()
        if not reservations:
            self._print("No reservations found.")
            return
        for i, reservation in enumerate(reservations, 1):
            self._print(f"\nReservation #{i}")
            self._print("-" * NARROW)
            self._print(str(reservation))
        self._print("=" * NARROW)

    def view_booking_details(self) -> None:
        self._header("VIEW BOOKING DETAILS")
        reservation = self.system.ledger.get(self._prompt("Enter Reservation ID: "))
        self._print()
        self._print("=" * NARROW)
        self._print(str(reservation))
        if reservation.payment_method:
            self._print(f"Payment Method: {reservation.payment_method.value}")
        self._print("=" * NARROW)

    def cancel_reservation(self) -> None:
        self._header("CANCEL RESERVATION")
        reservation_id = self._prompt("Enter Reservation ID to cancel: ")
        reservation = self.system.ledger.get(reservation_id)
        if reservation.is_cancelled():
            self._print("This reservation is already cancelled.")
            return

        self._print("\nReservation Details:")
        self._print(str(reservation))
        confirmed = self._prompt("\nAre you sure you want to cancel? (Y/N): ").upper() == "Y"
        if self.system.ledger.cancel(reservation_id, confirmed=confirmed) is None:
            self._print("Cancellation aborted.")
            return
        self._print("\nReservation cancelled successfully!")

    def process_payment(self) -> None:
        self._header("PROCESS PAYMENT")
        reservation_id = self._prompt("Enter Reservation ID: ")
        reservation = self.system.ledger.get(reservation_id)
        if reservation.is_cancelled():
            self._print("Cannot process payment for cancelled reservation.")
            return
        if reservation.payment_completed:
            self._print("Payment already completed for this reservation.")
            self._print(f"Amount Paid: ${reservation.total_amount:.2f}")
            return

        self._print("\n--- Payment Details ---")
        self._print(f"Total Amount: ${reservation.total_amount:.2f}")
        methods = list(PaymentMethod)
        self._print("\nPayment Methods:")
        for i, method in enumerate(methods, 1):
            self._print(f"{i}. {method.value}")
        try:
            method = self._choose(f"Select payment method (1-{len(methods)}): ", methods)
        except ValidationError:
            self._print("Invalid payment method.")
            return

        self._print("\nProcessing payment...")
        try:
            reservation = self.system.ledger.pay(reservation_id, method)
        except AlreadyPaidError as e:
            self._print(str(e))
            self._print(f"Amount Paid: ${e.amount:.2f}")
            return

        self._header("PAYMENT SUCCESSFUL!")
        self._print(f"Amount Paid: ${reservation.total_amount:.2f}")
        self._print(f"Payment Method: {method.value}")
        self._print(f"Reservation Status: {reservation.status.value}")
        self._print("=" * NARROW)

    def add_guest(self) -> None:
        self._header("ADD NEW GUEST")
        self._create_guest()

    def view_all_rooms(self) -> None:
        self._header("ALL ROOMS")
        rooms = self.system.catalog.list_all()
        self._print("-" * WIDE)
        for room in rooms:
            self._print(str(room))
        self._print("-" * WIDE)
        available = self.system.catalog.count_available()
        self._print(
            f"\nTotal Rooms: {len(rooms)} | Available: {available} | Occupied: {len(rooms) - available}"
        )


def run_console(system: HotelSystem, hotel_name: str = "Hotel Reservation System") -> None:
    ConsoleShell(system, hotel_name=hotel_name).run()
