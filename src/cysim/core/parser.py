"""Command line parsing."""

from __future__ import annotations

from loguru import logger

from .types import HelpRequest, ParsedCommand

HELP_LITERAL = "help"


def parse_input(text: str) -> ParsedCommand | HelpRequest:
    """Split one input line into a candidate command name and argument text.

    Parsing never fails. The literal ``help`` short-circuits into a
    ``HelpRequest``. Everything else becomes a ``ParsedCommand`` whose
    ``has_parens`` flag is False when the opening or closing parenthesis
    is missing. A single trailing `;` after the closing parenthesis is
    accepted.
    """

    if text == HELP_LITERAL:
        return HelpRequest(raw=text)

    stripped = text.strip()
    head, sep, tail = stripped.partition("(")
    if not sep:
        parsed = ParsedCommand(raw=text, name=stripped)
    else:
        # one trailing statement terminator is allowed after the closing paren
        body = tail[:-1].rstrip() if tail.endswith(";") else tail
        if body.endswith(")"):
            parsed = ParsedCommand(raw=text, name=head.strip(), args_text=body[:-1], has_parens=True)
        else:
            parsed = ParsedCommand(raw=text, name=head.strip(), args_text=tail)

    logger.debug("parsed input name={!r} has_parens={}", parsed.name, parsed.has_parens)
    return parsed
