"""Single entry point of the command interpreter."""

from __future__ import annotations

from collections.abc import Mapping

from .classifier import classify
from .grammar import GRAMMAR
from .parser import parse_input
from .types import CommandSpec, Outcome


def evaluate(text: str, *, table: Mapping[str, CommandSpec] = GRAMMAR) -> Outcome:
    """Parse and classify one command line.

    Total for any input: structural problems, unknown names and pending
    commands are reported through the returned outcome, never raised.
    """

    return classify(parse_input(text), table=table)
