"""Interactive menu shell."""

from typing import Callable, Optional

from rich.console import Console

from devfeedback.developers.registry import DeveloperRegistry
from devfeedback.errors import DuplicateDeveloperError, StoreError
from devfeedback.feedback.log import FeedbackLog
from devfeedback.logging.config import get_logger

logger = get_logger(__name__)

MENU_TITLE = "=== Real-Time Feedback Loop for Developers ==="
MENU_ITEMS = [
    "Add Developer",
    "Display Developers",
    "Add Feedback",
    "Display All Feedback",
    "Exit",
]
EXIT_CHOICE = len(MENU_ITEMS)


class InteractiveShell:
    """
    Menu loop over the developer registry and feedback log.

    Input is read line by line through ``read_line(prompt)``; by default
    that is ``console.input``.
    """

    def __init__(
        self,
        developers: DeveloperRegistry,
        feedback: FeedbackLog,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.developers = developers
        self.feedback = feedback
        self.console = console or Console()
        self.read_line = read_line or self.console.input

    def run(self) -> None:
        """Show the menu and dispatch choices until Exit or end of input."""
        actions = {
            1: self.add_developer,
            2: self.display_developers,
            3: self.add_feedback,
            4: self.display_feedback,
        }

        while True:
            self.show_menu()
            try:
                choice = self.read_choice()
                if choice == EXIT_CHOICE:
                    self.console.print("Exiting Real-Time Feedback Loop...")
                    return

                action = actions.get(choice)
                if action is None:
                    self.console.print("[red]Invalid choice![/red]")
                    continue

                try:
                    action()
                except StoreError as e:
                    logger.error(f"Menu action {choice} failed: {e}")
                    self.console.print(f"Store error: {e}", style="red", markup=False)
                except DuplicateDeveloperError as e:
                    self.console.print(str(e), style="yellow", markup=False)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                self.console.print("Exiting Real-Time Feedback Loop...")
                return

    def show_menu(self) -> None:
        self.console.print()
        self.console.print(f"[bold cyan]{MENU_TITLE}[/bold cyan]")
        for number, label in enumerate(MENU_ITEMS, start=1):
            self.console.print(f"{number}. {label}")

    def read_choice(self) -> int:
        """
        Read lines until one parses as an integer.

        Blank lines are skipped without a message; anything else that is not
        an integer re-prompts with a warning.
        """
        line = self.read_line("Enter your choice: ")
        while True:
            if not line.strip():
                line = self.read_line("")
                continue
            try:
                return int(line.strip())
            except ValueError:
                line = self.read_line("Invalid input. Enter a number: ")

    def add_developer(self) -> None:
        dev_id = self.read_line("Enter Developer ID: ")
        name = self.read_line("Enter Name: ")
        project = self.read_line("Enter Project: ")
        self.developers.add_developer(dev_id, name, project)
        self.console.print("[green]Developer added successfully![/green]")

    def display_developers(self) -> None:
        for line in self.developers.display_developers():
            self.console.print(line, markup=False, highlight=False)

    def add_feedback(self) -> None:
        dev_id = self.read_line("Enter Developer ID: ")
        if self.developers.search_developer(dev_id) is None:
            logger.warning(f"Feedback rejected, unknown developer: {dev_id}")
            self.console.print("[yellow]Developer not found![/yellow]")
            return

        text = self.read_line("Enter Feedback: ")
        self.feedback.add_feedback(dev_id, text)
        self.console.print("[green]Feedback added successfully![/green]")

    def display_feedback(self) -> None:
        for line in self.feedback.display_feedback():
            self.console.print(line, markup=False, highlight=False)
