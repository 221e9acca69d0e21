"""Interactive shell for cysim."""

from __future__ import annotations

import asyncio

from ..session import SimulatorSession
from .render import Renderer

META_PREFIX = ":"


def run_shell(session: SimulatorSession, renderer: Renderer) -> None:
    """Drive login, consent and the command prompt until the user quits."""
    try:
        while True:
            if not session.auth.is_logged_in() and not _login(session, renderer):
                return
            _consent(session, renderer)
            if not _command_loop(session, renderer):
                return
    except (KeyboardInterrupt, EOFError):
        renderer.info("\nGoodbye!")


def _login(session: SimulatorSession, renderer: Renderer) -> bool:
    renderer.login_screen()
    if renderer.get_user_input("login> ").strip() == f"{META_PREFIX}quit":
        return False
    if session.auth.login():
        return True

    captcha = session.auth.captcha
    while captcha is not None:
        renderer.captcha_question(captcha.question.prompt, captcha.error)
        answer = renderer.get_user_input("answer> ")
        if not captcha.can_verify(answer):
            continue
        if session.auth.verify_captcha(answer):
            return True
    return session.auth.is_logged_in()


def _consent(session: SimulatorSession, renderer: Renderer) -> None:
    while session.banner_visible:
        renderer.cookie_banner()
        choice = renderer.get_user_input("cookies> ").strip().lower()
        if choice == "accept":
            session.consent.accept()
        elif choice == "decline":
            session.consent.decline()


def _command_loop(session: SimulatorSession, renderer: Renderer) -> bool:
    """Return False to quit, True after a logout."""
    while True:
        text = renderer.get_user_input()
        action = _handle_meta(text.strip(), session, renderer)
        if action == "quit":
            return False
        if action == "logout":
            return True
        if action == "handled":
            continue

        session.workspace.code_input = text
        if not session.can_run():
            continue
        with renderer.running():
            outcome = asyncio.run(session.submit(text))
        if outcome is not None:
            renderer.outcome(outcome, expanded=session.workspace.expanded)


def _handle_meta(text: str, session: SimulatorSession, renderer: Renderer) -> str | None:
    """Handle `:` commands; None means the line is a command to run."""
    if not text.startswith(META_PREFIX):
        return None
    name = text[len(META_PREFIX) :]
    if name == "quit":
        return "quit"
    if name == "logout":
        if not session.workspace.menu_open:
            renderer.error("Open the menu with :menu to log out")
            return "handled"
        session.logout()
        return "logout"
    if name == "menu":
        renderer.menu(session.workspace.toggle_menu())
    elif name == "expand":
        session.workspace.toggle_expanded()
        if session.workspace.output is not None:
            renderer.outcome(session.workspace.output, expanded=session.workspace.expanded)
    else:
        renderer.error(f"Unknown shell command: {text}")
    return "handled"
