"""Outcome classification for parsed command lines."""

from __future__ import annotations

from collections.abc import Mapping

from loguru import logger

from .grammar import GRAMMAR, lookup
from .help import render_help
from .simulator import simulate
from .types import CommandSpec, Error, HelpRequest, Outcome, ParsedCommand, Warning


def missing_parentheses(name: str) -> Error:
    return Error(message=f"Missing parentheses on `{name}` command")


def invalid_command(raw: str) -> Error:
    return Error(message=f"Invalid Cypress command: {raw}")


def not_implemented(name: str) -> Warning:
    return Warning(message=f"The `{name}` command has not been implemented yet.")


def classify(parsed: ParsedCommand | HelpRequest, *, table: Mapping[str, CommandSpec] = GRAMMAR) -> Outcome:
    """Return exactly one outcome for a parsed line; first matching rule wins."""

    outcome = _classify(parsed, table)
    logger.debug("classified {!r} as {}", parsed.raw, outcome.kind.value)
    return outcome


def _classify(parsed: ParsedCommand | HelpRequest, table: Mapping[str, CommandSpec]) -> Outcome:
    if isinstance(parsed, HelpRequest):
        return render_help()
    if not parsed.has_parens:
        return missing_parentheses(parsed.name)

    spec = lookup(parsed.name, table)
    if spec is None:
        if not parsed.is_cypress_shaped:
            logger.debug("name {!r} is not a cy.<command> call", parsed.name)
        return invalid_command(parsed.raw)
    if not spec.implemented:
        return not_implemented(parsed.name)
    return simulate(spec, parsed)
