"""CLI main module for cysim."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from loguru import logger

from ..config import Settings, get_settings
from ..core.grammar import GRAMMAR
from ..core.help import render_help
from ..core.interpreter import evaluate
from ..core.types import Outcome, OutcomeKind
from ..errors import CysimError
from ..logging_utils import configure_logging
from ..session import SimulatorSession
from .live import run_shell
from .render import Renderer

app = typer.Typer(
    name="cysim",
    help="Type a Cypress command and see what it would do.",
    add_completion=False,
    rich_markup_mode="rich",
)


def _load_settings(**overrides: object) -> Settings:
    try:
        settings = get_settings(**overrides)
    except CysimError as exc:
        Renderer().error(str(exc))
        raise typer.Exit(1) from exc
    configure_logging(profile=settings.log_profile, level=settings.log_level)
    return settings


def exit_code_for(outcome: Outcome) -> int:
    return 1 if outcome.kind is OutcomeKind.ERROR else 0


async def _delayed(outcome: Outcome, delay_seconds: float) -> Outcome:
    await asyncio.sleep(delay_seconds)
    return outcome


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        shell(skip_captcha=None, delay=None)


@app.command()
def run(
    command: str,
    expanded: Optional[bool] = typer.Option(None, "--expanded/--collapsed", help="Output panel variant"),
    delay: Optional[float] = typer.Option(None, "--delay", help="Seconds to show the running indicator"),
) -> None:
    """Simulate a single Cypress command."""
    settings = _load_settings(run_delay_seconds=delay, expanded=expanded)
    renderer = Renderer()

    outcome = evaluate(command)
    logger.debug("run command={!r} outcome={}", command, outcome.kind.value)
    with renderer.running():
        outcome = asyncio.run(_delayed(outcome, settings.run_delay_seconds))
    renderer.outcome(outcome, expanded=settings.expanded)
    code = exit_code_for(outcome)
    if code:
        raise typer.Exit(code)


@app.command("help")
def help_command() -> None:
    """Show common Cypress commands and examples."""
    _load_settings()
    Renderer().help(render_help())


@app.command()
def commands() -> None:
    """List every known command and whether it is simulated."""
    _load_settings()
    Renderer().command_table(list(GRAMMAR.values()))


@app.command()
def shell(
    skip_captcha: Optional[bool] = typer.Option(None, "--skip-captcha", help="Log in without the captcha"),
    delay: Optional[float] = typer.Option(None, "--delay", help="Seconds to show the running indicator"),
) -> None:
    """Start the interactive simulator."""
    settings = _load_settings(skip_captcha=skip_captcha, run_delay_seconds=delay)
    session = SimulatorSession.from_settings(settings)
    renderer = Renderer()
    try:
        run_shell(session, renderer)
    except CysimError as exc:
        renderer.error(str(exc))
        raise typer.Exit(1) from exc


if __name__ == "__main__":
    app()
