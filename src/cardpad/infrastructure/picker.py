"""Interactive pick-one-of-N prompt for the terminal."""

from collections.abc import Sequence

from rich.console import Console
from rich.prompt import IntPrompt
from rich.table import Table


class RichPicker:
    """Numbered list picker rendered with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def pick(self, title: str, choices: Sequence[str]) -> str | None:
        """Show ``choices`` and return the selected one; 0 cancels."""
        if not choices:
            return None

        table = Table(title=title, show_header=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Name")
        for number, choice in enumerate(choices, start=1):
            table.add_row(str(number), choice)
        self.console.print(table)

        selected = IntPrompt.ask(
            "Select (0 to cancel)",
            console=self.console,
            choices=[str(n) for n in range(len(choices) + 1)],
            show_choices=False,
            default=0,
        )
        if selected == 0:
            return None
        return choices[selected - 1]
