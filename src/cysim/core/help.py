"""Static help catalog."""

from __future__ import annotations

from .types import DocLink, Help, HelpEntry

DOCS_URL = "https://docs.cypress.io/api/table-of-contents"

HELP_HEADING = "Common Cypress commands and examples:"

HELP_ENTRIES: tuple[HelpEntry, ...] = (
    HelpEntry("cy.visit(url)", "Visits a given URL. Example: cy.visit('https://example.com')"),
    HelpEntry("cy.get(selector)", "Gets a DOM element. Example: cy.get('.button')"),
    HelpEntry("cy.contains(text)", "Finds an element containing the text. Example: cy.contains('Submit')"),
    HelpEntry("cy.click()", "Clicks on an element. Example: cy.get('button').click()"),
    HelpEntry("cy.type(text)", "Types into an input. Example: cy.get('input').type('Hello')"),
    HelpEntry("cy.should(assertion)", "Makes an assertion. Example: cy.get('h1').should('be.visible')"),
    HelpEntry("cy.wait(ms)", "Waits for a number of milliseconds. Example: cy.wait(1000)"),
    HelpEntry("cy.log(message)", "Logs a message to the Command Log. Example: cy.log('Hello')"),
)

DOC_LINK = DocLink(text="official Cypress API documentation", href=DOCS_URL)

_HELP = Help(
    heading=HELP_HEADING,
    entries=HELP_ENTRIES,
    closing_prefix="For more commands and details, visit the ",
    link=DOC_LINK,
)


def render_help() -> Help:
    return _HELP
