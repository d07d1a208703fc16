from typing import Protocol

from rich.console import Console


class Reporter(Protocol):
    """Sink for the per-file report lines."""

    def line(self, text: str) -> None: ...


class ConsoleReporter:
    """Write report lines to a rich console as plain text."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    def line(self, text: str) -> None:
        # File names may contain "[" or ":name:", which rich would otherwise interpret
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
