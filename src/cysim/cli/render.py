"""CLI renderer for cysim."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from prompt_toolkit import PromptSession
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.types import CommandSpec, Help, Outcome, OutcomeKind

RUNNING_MESSAGE = "Running... Please wait."
LOGIN_GREETING = "Let's get started!"

_STYLES: dict[OutcomeKind, str] = {
    OutcomeKind.SUCCESS: "bold green",
    OutcomeKind.ERROR: "bold red",
    OutcomeKind.WARNING: "bold yellow",
    OutcomeKind.HELP: "bold blue",
}


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or Console()
        self._prompt_session: PromptSession[str] | None = None
        self._print_lock = threading.Lock()

    def info(self, message: str) -> None:
        self._print(message)

    def error(self, message: str) -> None:
        self._print(f"[bold red]Error:[/bold red] {escape(message)}")

    def login_screen(self) -> None:
        self._print(f"[bold blue]Cypress Simulator[/bold blue] - {LOGIN_GREETING}")
        self._print("[dim]Press Enter to log in.[/dim]")

    def captcha_question(self, prompt: str, error: str | None = None) -> None:
        if error:
            self._print(f"[red]{escape(error)}[/red]")
        self._print(f"[bold]Captcha:[/bold] {escape(prompt)}")

    def cookie_banner(self) -> None:
        self._print("[bold]We use cookies.[/bold] Type [cyan]accept[/cyan] or [cyan]decline[/cyan].")

    def menu(self, is_open: bool) -> None:
        if is_open:
            self._print("[dim]Menu:[/dim] :logout  :expand  :quit")
        else:
            self._print("[dim]Menu closed[/dim]")

    @contextmanager
    def running(self) -> Iterator[None]:
        with self.console.status(RUNNING_MESSAGE):
            yield

    def outcome(self, outcome: Outcome, *, expanded: bool = False) -> None:
        if isinstance(outcome, Help):
            self.help(outcome, expanded=expanded)
            return
        style = _STYLES[outcome.kind]
        text = f"[{style}]{outcome.label}[/{style}] {escape(outcome.message)}"
        if expanded:
            with self._print_lock:
                self.console.print(Panel(text, title="Output", border_style=style.split()[-1]))
            return
        self._print(text)

    def help(self, outcome: Help, *, expanded: bool = False) -> None:
        lines = [f"[bold]{escape(outcome.heading)}[/bold]"]
        lines.extend(f"  [cyan]{escape(entry.name)}[/cyan] - {escape(entry.description)}" for entry in outcome.entries)
        link = f"[link={outcome.link.href}]{escape(outcome.link.text)}[/link]"
        lines.append(f"{escape(outcome.closing_prefix)}{link}{escape(outcome.closing_suffix)}")
        text = "\n".join(lines)
        with self._print_lock:
            if expanded:
                self.console.print(Panel(text, title="Help", border_style="blue"))
            else:
                self.console.print(text)

    def command_table(self, specs: list[CommandSpec]) -> None:
        table = Table(title="Cypress commands")
        table.add_column("Command", style="cyan")
        table.add_column("Status")
        table.add_column("Example")
        for spec in specs:
            status = "[green]implemented[/green]" if spec.implemented else "[yellow]not implemented[/yellow]"
            table.add_row(spec.name, status, escape(spec.example))
        with self._print_lock:
            self.console.print(table)

    def get_user_input(self, prompt: str = "> ") -> str:
        """Prompt user for input."""
        if self._prompt_session is None:
            self._prompt_session = PromptSession()
        with patch_stdout(raw=True):
            return self._prompt_session.prompt(prompt)

    def _print(self, message: str) -> None:
        with self._print_lock:
            self.console.print(message)
