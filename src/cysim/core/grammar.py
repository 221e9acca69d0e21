"""Static grammar table of known Cypress commands."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

from .types import CommandSpec

QUOTED_LITERAL_RE = re.compile(r"""(["'`])(.*?)\1""", re.DOTALL)
NUMBER_RE = re.compile(r"^\d+(\.\d+)?$")


def quoted_literal(args_text: str) -> str:
    """Return the first quoted literal in the argument text, or the text itself."""

    match = QUOTED_LITERAL_RE.search(args_text)
    if match is None:
        return args_text.strip()
    return match.group(2)


def _log(args_text: str) -> str:
    return f'Logged message "{quoted_literal(args_text)}"'


def _visit(args_text: str) -> str:
    return f'Visited URL "{quoted_literal(args_text)}"'


def _wait(args_text: str) -> str:
    value = quoted_literal(args_text)
    if NUMBER_RE.match(value):
        return f"Waited for {value} milliseconds"
    return f'Waited for alias "{value}"'


def _reload(_args_text: str) -> str:
    return "Reloaded the page"


def _implemented(name: str, example: str, description: str, template: Callable[[str], str]) -> CommandSpec:
    return CommandSpec(name=name, implemented=True, example=example, description=description, template=template)


def _pending(name: str, example: str, description: str) -> CommandSpec:
    return CommandSpec(name=name, implemented=False, example=example, description=description)


_COMMANDS: tuple[CommandSpec, ...] = (
    _implemented("cy.log", 'cy.log("Hello, world!")', "Print a message to the Command Log", _log),
    _implemented("cy.visit", 'cy.visit("https://example.com")', "Visit a remote URL", _visit),
    _implemented("cy.wait", "cy.wait(1000)", "Wait for a number of milliseconds or an aliased request", _wait),
    _implemented("cy.reload", "cy.reload()", "Reload the page", _reload),
    _pending("cy.get", 'cy.get(".selector")', "Get one or more DOM elements by selector"),
    _pending("cy.contains", 'cy.contains("Submit")', "Get the DOM element containing the text"),
    _pending("cy.click", "cy.click()", "Click a DOM element"),
    _pending("cy.type", 'cy.type("Hello")', "Type into a DOM element"),
    _pending("cy.should", 'cy.should("be.visible")', "Create an assertion"),
    _pending("cy.request", 'cy.request("https://api.example.com")', "Make an HTTP request"),
    _pending("cy.intercept", 'cy.intercept("GET", "/users")', "Spy and stub network requests"),
    _pending("cy.fixture", 'cy.fixture("users.json")', "Load a fixed set of data from a file"),
    _pending("cy.url", "cy.url()", "Get the current URL of the page"),
    _pending("cy.title", "cy.title()", "Get the document title of the page"),
    _pending("cy.go", 'cy.go("back")', "Navigate back or forward in the browser history"),
    _pending("cy.screenshot", "cy.screenshot()", "Take a screenshot of the application under test"),
    _pending("cy.viewport", "cy.viewport(1280, 720)", "Control the size of the application viewport"),
    _pending("cy.clearCookies", "cy.clearCookies()", "Clear all browser cookies"),
)


def build_table(specs: Iterable[CommandSpec]) -> Mapping[str, CommandSpec]:
    """Build a read-only name lookup, rejecting duplicate names."""

    table: dict[str, CommandSpec] = {}
    for spec in specs:
        if spec.name in table:
            raise ValueError(f"duplicate command name: {spec.name}")
        if spec.implemented and spec.template is None:
            raise ValueError(f"implemented command without template: {spec.name}")
        table[spec.name] = spec
    return MappingProxyType(table)


GRAMMAR: Mapping[str, CommandSpec] = build_table(_COMMANDS)


def lookup(name: str, table: Mapping[str, CommandSpec] = GRAMMAR) -> CommandSpec | None:
    return table.get(name)
