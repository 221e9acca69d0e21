"""Shared core dataclasses."""

from __future__ import annotations

import html
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

CYPRESS_NAME_RE = re.compile(r"^cy\.\w+$")


@dataclass(frozen=True)
class ParsedCommand:
    """Command line split into a candidate name and its argument text."""

    raw: str
    name: str
    args_text: str = ""
    has_parens: bool = False

    @property
    def is_cypress_shaped(self) -> bool:
        return CYPRESS_NAME_RE.fullmatch(self.name) is not None


@dataclass(frozen=True)
class HelpRequest:
    """Marker for the reserved `help` input."""

    raw: str = "help"


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    HELP = "help"


@dataclass(frozen=True)
class Success:
    message: str
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS
    label: ClassVar[str] = "Success:"


@dataclass(frozen=True)
class Error:
    message: str
    kind: ClassVar[OutcomeKind] = OutcomeKind.ERROR
    label: ClassVar[str] = "Error:"


@dataclass(frozen=True)
class Warning:  # noqa: A001
    message: str
    kind: ClassVar[OutcomeKind] = OutcomeKind.WARNING
    label: ClassVar[str] = "Warning:"


@dataclass(frozen=True)
class HelpEntry:
    """One example line of the help catalog."""

    name: str
    description: str


@dataclass(frozen=True)
class DocLink:
    """Hyperlink to the external API documentation."""

    text: str
    href: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"

    def to_html(self) -> str:
        return (
            f'<a href="{html.escape(self.href)}" target="{html.escape(self.target)}" '
            f'rel="{html.escape(self.rel)}">{html.escape(self.text)}</a>'
        )


@dataclass(frozen=True)
class Help:
    """Static command catalog shown for the `help` input."""

    heading: str
    entries: tuple[HelpEntry, ...]
    closing_prefix: str
    link: DocLink
    closing_suffix: str = "."
    kind: ClassVar[OutcomeKind] = OutcomeKind.HELP
    label: ClassVar[str] = ""

    @property
    def closing(self) -> str:
        return f"{self.closing_prefix}{self.link.text}{self.closing_suffix}"

    @property
    def message(self) -> str:
        lines = [self.heading]
        lines.extend(f"{entry.name} - {entry.description}" for entry in self.entries)
        lines.append(self.closing)
        return "\n".join(lines)

    def to_html(self) -> str:
        items = "".join(
            f"<li><code>{html.escape(entry.name)}</code> - {html.escape(entry.description)}</li>"
            for entry in self.entries
        )
        return (
            f"<p>{html.escape(self.heading)}</p>"
            f"<ul>{items}</ul>"
            f"<p>{html.escape(self.closing_prefix)}{self.link.to_html()}{html.escape(self.closing_suffix)}</p>"
        )


Outcome = Success | Error | Warning | Help


@dataclass(frozen=True)
class CommandSpec:
    """Grammar table entry for one command name."""

    name: str
    implemented: bool
    example: str
    description: str
    template: Callable[[str], str] | None = field(default=None, compare=False, repr=False)
