"""
Console reporting of round-trip results
"""

from datetime import datetime
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from date_roundtrip.services.round_trip_service import RoundTripResult
from date_roundtrip.utils.helpers import to_date_string, to_iso_string

TITLE = "🔍 Postgres Date Round-Trip Reproduction Test"


def _iso(value) -> str:
    if isinstance(value, datetime):
        return to_iso_string(value)
    return escape(repr(value))


class Reporter:
    """Writes the title, per-date headers and one line per round trip"""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, text: str = ""):
        self.console.print(text, highlight=False, soft_wrap=True)

    def title(self):
        self._print()
        self._print(f"[bold blue]{TITLE}[/bold blue]")
        self._print()

    def header(self, date: datetime):
        self._print(f"[bold yellow]Testing {to_date_string(date)}:[/bold yellow]")

    def result(self, result: RoundTripResult):
        operation = result.operation.value
        if not result.succeeded:
            self._print(
                f"  ❌ {operation} [red]{_iso(result.input_date)}[/red] => Error: {escape(result.error)}"
            )
            return

        emoji = "✅" if result.matched else "❌"
        color = "green" if result.matched else "red"
        self._print(
            f"  {emoji} {operation} "
            f"[{color}]{_iso(result.input_date)}[/{color}] => "
            f"[{color}]{_iso(result.retrieved_date)}[/{color}] "
            f"({result.original_year} -> {result.retrieved_year})"
        )

    def separator(self):
        self._print()

    def summary(self, results: Iterable[RoundTripResult]):
        results = list(results)
        matched = sum(1 for r in results if r.matched)
        errors = sum(1 for r in results if not r.succeeded)
        color = "green" if matched == len(results) else "red"
        line = f"[{color}]{matched}/{len(results)} round trips preserved the year[/{color}]"
        if errors:
            line += f" ({errors} failed with errors)"
        self._print(line)
