"""Deterministic rendering of implemented commands."""

from __future__ import annotations

from .types import CommandSpec, ParsedCommand, Success

ANNOTATION_SEPARATOR = " // "


def simulate(spec: CommandSpec, parsed: ParsedCommand) -> Success:
    """Echo the invocation followed by the annotation from the command's template."""

    if spec.template is None:
        raise ValueError(f"command {spec.name} has no simulation template")
    annotation = spec.template(parsed.args_text)
    return Success(message=f"{parsed.raw}{ANNOTATION_SEPARATOR}{annotation}")
