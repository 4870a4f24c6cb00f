"""CLI renderer for taskman."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskman.core.types import Command


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()
        self._prompt_session: PromptSession[str] | None = None

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def welcome(self, message: str = "[bold blue]taskman[/bold blue] - type [cyan]quit[/cyan] to exit") -> None:
        self.console.print(message)

    def command(self, command: Command) -> None:
        """Render a parsed command as a table."""
        instruction = command.instruction
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(style="bold")
        table.add_column()
        table.add_row("instruction", escape(str(instruction.name)))
        table.add_row("id", str(instruction.id) if instruction.id else "[dim](default)[/dim]")
        table.add_row("file", escape(instruction.file) if instruction.file else "[dim](none)[/dim]")
        if instruction.is_empty:
            table.add_row("kind", "[dim](empty)[/dim]")
        elif len(command.argv):
            table.add_row("kind", "[yellow]external command[/yellow]")
            for index, token in enumerate(command.argv):
                table.add_row(f"argv[{index}]", escape(token))
        else:
            table.add_row("kind", "[green]builtin[/green]")
        self.console.print(table)

    def get_user_input(self, prompt: str) -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        return self._prompt_session.prompt(prompt)
