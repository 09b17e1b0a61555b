"""
Interactive text menu for the train booking manager.

Reads a numbered menu choice, prompts for the fields that option needs,
calls the booking registry and prints the outcome. Registry errors are
reported and the loop carries on; only option 10 ends the session.
"""

from decimal import Decimal, InvalidOperation
from typing import Callable, Dict, Optional, TextIO

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import InvalidResponse, IntPrompt, Prompt, PromptBase

from .models.train import TrainModel
from .services.booking_registry import BookingRegistry
from .services.exceptions import TrainbookError, BookingFileError

MENU_OPTIONS = [
    "Add Train",
    "Display Trains",
    "Book Ticket",
    "Cancel Ticket",
    "Display Bookings",
    "Display Available Seats",
    "Save Bookings to File",
    "Load Bookings from File",
    "Display Total Bookings",
    "Exit",
]

EXIT_OPTION = len(MENU_OPTIONS)


class EndOfInputMixin:
    """Raise EOFError when a scripted input stream runs dry.

    rich's Console.input returns "" at the end of a stream instead of raising.
    """

    @classmethod
    def get_input(cls, console, prompt, password, stream=None) -> str:
        value = super().get_input(console, prompt, password, stream=stream)
        if stream is not None and value == "":
            raise EOFError("end of input")
        return value


class TextPrompt(EndOfInputMixin, Prompt):
    pass


class WholeNumberPrompt(EndOfInputMixin, IntPrompt):
    pass


class DecimalPrompt(EndOfInputMixin, PromptBase[Decimal]):
    """Prompt for an exact decimal amount."""

    response_type = Decimal
    validate_error_message = "[prompt.invalid]Please enter a valid decimal number"

    def process_response(self, value: str) -> Decimal:
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise InvalidResponse(self.validate_error_message)


class BookingShell:
    """Menu loop driving a BookingRegistry from line-oriented input."""

    def __init__(
        self,
        registry: BookingRegistry,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        bookings_file: str = "bookings.txt",
    ):
        """
        Args:
            registry: Registry the menu operates on
            console: Rich console for output (defaults to the terminal)
            stream: Input source for prompts (defaults to stdin)
            bookings_file: File name offered by the save/load prompts
        """
        self.registry = registry
        self.console = console or Console()
        self.stream = stream
        self.bookings_file = bookings_file

        self.handlers: Dict[int, Callable[[], None]] = {
            1: self.add_train,
            2: self.display_trains,
            3: self.book_ticket,
            4: self.cancel_ticket,
            5: self.display_bookings,
            6: self.display_available_seats,
            7: self.save_bookings,
            8: self.load_bookings,
            9: self.display_total_bookings,
        }

    # Prompt helpers

    def _ask(self, prompt: str, default: Optional[str] = None) -> str:
        if default is None:
            return TextPrompt.ask(prompt, console=self.console, stream=self.stream)
        return TextPrompt.ask(prompt, console=self.console, stream=self.stream, default=default)

    def _ask_int(self, prompt: str) -> int:
        return WholeNumberPrompt.ask(prompt, console=self.console, stream=self.stream)

    def _ask_price(self, prompt: str) -> Decimal:
        return DecimalPrompt.ask(prompt, console=self.console, stream=self.stream)

    def _say(self, text: str) -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    # Menu

    def print_menu(self) -> None:
        self.console.print()
        self.console.print("[bold cyan]Train Management System:[/bold cyan]")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.console.print(f"{number}. {label}")

    def run(self) -> None:
        """Show the menu and dispatch choices until the user exits."""
        try:
            while True:
                self.print_menu()
                choice = self._ask_int("Choose an option")

                if choice == EXIT_OPTION:
                    self.console.print("Exiting system. Goodbye!")
                    return

                handler = self.handlers.get(choice)
                if handler is None:
                    self.console.print("[yellow]Invalid option. Please try again.[/yellow]")
                    continue

                try:
                    handler()
                except TrainbookError as e:
                    self.console.print(f"[red]{escape(str(e))}[/red]")
        except (KeyboardInterrupt, EOFError):
            self.console.print("\nExiting system. Goodbye!")

    # Options

    def add_train(self) -> None:
        name = self._ask("Enter Train Name")
        route = self._ask("Enter Route(e.g.,A-B)")
        schedule = self._ask("Enter Schedule(e.g.,10:00 AM)")
        price = self._ask_price("Enter Price")
        luxury = self._ask("Luxury Train? (yes/no)")

        try:
            if luxury.lower() == "yes":
                surcharge = self._ask_price("Enter Luxury Charge")
                train = TrainModel.luxury(name, route, schedule, price, surcharge)
            else:
                train = TrainModel.standard(name, route, schedule, price)
        except ValidationError as e:
            self.console.print(f"[red]Invalid train details: {escape(str(e))}[/red]")
            return

        self.registry.add_train(train)
        self.console.print("[green]Train added successfully![/green]")

    def display_trains(self) -> None:
        self.console.print("Available Trains:")
        for line in self.registry.iter_train_details():
            self._say(line)

    def book_ticket(self) -> None:
        name = self._ask("Enter Passenger Name")
        age = self._ask_int("Enter Passenger Age")
        seat_type = self._ask("Enter Seat Type(e.g.,Window/Aisle)")
        route = self._ask("Enter Route for Booking(e.g.,A-B)")

        self.registry.book_ticket(name, age, seat_type, route)
        self.console.print("[green]Ticket booked successfully![/green]")

    def cancel_ticket(self) -> None:
        name = self._ask("Enter Passenger Name")
        route = self._ask("Enter Route for Cancellation")

        self.registry.cancel_ticket(name, route)
        self.console.print("[green]Ticket canceled successfully![/green]")

    def display_bookings(self) -> None:
        self.console.print("Current Bookings:")
        for line in self.registry.iter_booking_details():
            self._say(line)

    def display_available_seats(self) -> None:
        route = self._ask("Enter Route to Check Seats")
        seats = self.registry.seats_remaining(route)
        self._say(f"Available Seats for {route}: {seats}")

    def save_bookings(self) -> None:
        file_name = self._ask("Enter File Name to Save Bookings", default=self.bookings_file)
        try:
            self.registry.save_bookings(file_name)
        except BookingFileError as e:
            self.console.print(f"[red]Error saving to file: {escape(str(e))}[/red]")
            return
        self.console.print("[green]Bookings saved to file successfully.[/green]")

    def load_bookings(self) -> None:
        file_name = self._ask("Enter File Name to Load Bookings", default=self.bookings_file)
        try:
            lines = self.registry.load_bookings(file_name)
        except BookingFileError as e:
            self.console.print(f"[red]Error loading from file: {escape(str(e))}[/red]")
            return
        for line in lines:
            self._say(line)

    def display_total_bookings(self) -> None:
        self.console.print(f"Total Bookings: {self.registry.total_bookings}")
