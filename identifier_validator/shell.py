"""Interactive shell — menu-driven loop over the validation engine.

The shell owns all console I/O. It reads a category choice and an
identifier per round, prints the result, and loops until the exit command,
menu option 6, or end of input.
"""

import sys
from typing import Optional, TextIO

import structlog
from rich.console import Console

from identifier_validator.config import Settings, get_settings
from identifier_validator.exceptions import UnknownCategoryError
from identifier_validator.validators import Category, ValidationEngine, ValidationResult, validation_engine

logger = structlog.get_logger()

TITLE = "Java Identifier Validator"
EXIT_CHOICE = str(len(Category) + 1)
CHOICE_PROMPT = f"Enter your choice (1-{EXIT_CHOICE}): "
IDENTIFIER_PROMPT = "Enter the identifier to validate: "
INVALID_CHOICE = f"Invalid choice. Please enter a number between 1 and {EXIT_CHOICE}."
GOODBYE = f"Thank you for using the {TITLE}!"


def render_result(console: Console, result: ValidationResult) -> None:
    """Print warnings and the success line, or the failure reason."""
    if not result.valid:
        console.print(f"Error: {result.failure.message}", style="red", markup=False, soft_wrap=True)
        return

    for advisory in result.advisories:
        line = f"Warning: {advisory.message}"
        if advisory.segment is not None:
            line += f" (segment '{advisory.segment}')"
        console.print(line, style="yellow", markup=False, soft_wrap=True)

    console.print(
        f"'{result.identifier}' is a valid {result.category.kind}.",
        style="green",
        markup=False,
        soft_wrap=True,
    )


class IdentifierShell:
    """Console loop reproducing the classic numbered-menu validator."""

    def __init__(
        self,
        engine: Optional[ValidationEngine] = None,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        settings: Optional[Settings] = None,
    ):
        self.engine = engine or validation_engine
        self.console = console or Console()
        self.stdin = stdin or sys.stdin
        self.settings = settings or get_settings()
        self.validations = 0

    def run(self) -> int:
        """Run until the user exits. Returns the process exit status."""
        logger.info("shell_started")
        self.print_banner()
        try:
            while self.step():
                pass
        except KeyboardInterrupt:
            self.console.print()
        self.console.print(GOODBYE, markup=False)
        logger.info("shell_stopped", validations=self.validations)
        return 0

    def step(self) -> bool:
        """Run one menu round. Returns False when the session should end."""
        self.print_menu()

        choice = self.read(CHOICE_PROMPT)
        if choice is None or choice == EXIT_CHOICE or self.is_exit(choice):
            return False

        identifier = self.read(IDENTIFIER_PROMPT)
        if identifier is None or self.is_exit(identifier):
            return False

        try:
            result = self.engine.validate(choice, identifier)
        except UnknownCategoryError:
            logger.debug("invalid_menu_choice", choice=choice)
            self.console.print(INVALID_CHOICE, markup=False)
            return True

        self.validations += 1
        render_result(self.console, result)
        return True

    def print_banner(self) -> None:
        self.console.print(TITLE, style="bold", markup=False)
        self.console.print("=" * len(TITLE), markup=False)
        self.console.print("This program checks if a string is valid as a Java identifier", markup=False)
        self.console.print(f"Type '{self.settings.EXIT_COMMAND}' to quit", markup=False)
        self.console.print()

    def print_menu(self) -> None:
        self.console.print()
        self.console.print("What would you like to validate?", markup=False)
        for category in self.engine.categories:
            self.console.print(f"{category.number}. {category.kind.capitalize()}", markup=False)
        self.console.print(f"{EXIT_CHOICE}. Exit", markup=False)

    def read(self, prompt: str) -> Optional[str]:
        """Prompt and read one line. Returns None at end of input."""
        self.console.print(prompt, end="", markup=False)
        line = self.stdin.readline()
        if not line:
            self.console.print()
            return None
        line = line.rstrip("\r\n")
        return line.strip() if self.settings.TRIM_INPUT else line

    def is_exit(self, text: str) -> bool:
        return text.strip().lower() == self.settings.EXIT_COMMAND.lower()
