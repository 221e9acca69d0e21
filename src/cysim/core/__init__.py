"""Command interpreter core."""

from .classifier import classify
from .grammar import GRAMMAR
from .help import render_help
from .interpreter import evaluate
from .parser import parse_input
from .simulator import simulate
from .types import (
    CommandSpec,
    DocLink,
    Error,
    Help,
    HelpEntry,
    HelpRequest,
    Outcome,
    OutcomeKind,
    ParsedCommand,
    Success,
    Warning,
)

__all__ = [
    "GRAMMAR",
    "CommandSpec",
    "DocLink",
    "Error",
    "Help",
    "HelpEntry",
    "HelpRequest",
    "Outcome",
    "OutcomeKind",
    "ParsedCommand",
    "Success",
    "Warning",
    "classify",
    "evaluate",
    "parse_input",
    "render_help",
    "simulate",
]
