from cysim.core.help import DOCS_URL, render_help


def test_help_catalog_is_stable() -> None:
    first = render_help()
    second = render_help()
    assert first == second
    assert [entry.name for entry in first.entries][:2] == ["cy.visit(url)", "cy.get(selector)"]


def test_help_text() -> None:
    help_outcome = render_help()
    assert help_outcome.message.startswith("Common Cypress commands and examples:")
    assert help_outcome.message.endswith(
        "For more commands and details, visit the official Cypress API documentation."
    )


def test_help_link_attributes() -> None:
    link = render_help().link
    assert link.text == "official Cypress API documentation"
    assert link.href == DOCS_URL == "https://docs.cypress.io/api/table-of-contents"
    assert link.target == "_blank"
    assert link.rel == "noopener noreferrer"


def test_help_html_contains_anchor() -> None:
    fragment = render_help().to_html()
    assert (
        '<a href="https://docs.cypress.io/api/table-of-contents" target="_blank" '
        'rel="noopener noreferrer">official Cypress API documentation</a>'
    ) in fragment
    assert "<li><code>cy.log(message)</code>" in fragment
