import asyncio

import pytest

from cysim import Success
from cysim.errors import NotLoggedInError, RunRejectedError
from cysim.session import AuthGate, RunTrigger, SimulatorSession


def test_can_run_requires_text_and_login() -> None:
    auth = AuthGate(skip_captcha=True)
    trigger = RunTrigger(auth)
    assert trigger.can_run('cy.log("Yay!")') is False

    auth.login()
    assert trigger.can_run('cy.log("Yay!")') is True
    assert trigger.can_run("") is False
    assert trigger.can_run("   ") is False


@pytest.mark.asyncio
async def test_run_delivers_outcome_after_delay() -> None:
    auth = AuthGate(skip_captcha=True)
    auth.login()
    trigger = RunTrigger(auth, delay_seconds=0.01)

    outcome = await trigger.run('cy.log("Yay!")')

    assert outcome == Success('cy.log("Yay!") // Logged message "Yay!"')
    assert trigger.running is False


@pytest.mark.asyncio
async def test_run_is_disabled_while_in_flight() -> None:
    auth = AuthGate(skip_captcha=True)
    auth.login()
    trigger = RunTrigger(auth, delay_seconds=0.05)

    task = asyncio.create_task(trigger.run('cy.log("a")'))
    await asyncio.sleep(0)
    assert trigger.running is True
    assert trigger.can_run('cy.log("b")') is False
    with pytest.raises(RunRejectedError):
        await trigger.run('cy.log("b")')

    await task
    assert trigger.can_run('cy.log("b")') is True


@pytest.mark.asyncio
async def test_evaluation_happens_before_the_delay() -> None:
    auth = AuthGate(skip_captcha=True)
    auth.login()
    seen: list[str] = []

    def evaluator(text: str) -> Success:
        seen.append(text)
        return Success(text)

    trigger = RunTrigger(auth, delay_seconds=0.05, evaluator=evaluator)
    task = asyncio.create_task(trigger.run("cy.x()"))
    await asyncio.sleep(0)
    assert seen == ["cy.x()"]
    assert await task == Success("cy.x()")


@pytest.mark.asyncio
async def test_logout_discards_in_flight_outcome(session: SimulatorSession) -> None:
    session.auth.login()
    session.trigger = RunTrigger(session.auth, delay_seconds=0.05)

    task = asyncio.create_task(session.submit('cy.log("Yay!")'))
    await asyncio.sleep(0)
    session.workspace.menu_open = True
    session.logout()

    assert await task is None
    assert session.workspace.output is None
    assert session.workspace.code_input == ""


@pytest.mark.asyncio
async def test_submit_keeps_outcome(session: SimulatorSession) -> None:
    session.auth.login()
    outcome = await session.submit('cy.log("Yay!")')
    assert session.workspace.output == outcome
    assert session.workspace.code_input == 'cy.log("Yay!")'


@pytest.mark.asyncio
async def test_submit_requires_login(session: SimulatorSession) -> None:
    with pytest.raises(NotLoggedInError):
        await session.submit('cy.log("Yay!")')


@pytest.mark.asyncio
async def test_rejected_submit_keeps_previous_outcome(session: SimulatorSession) -> None:
    session.auth.login()
    outcome = await session.submit('cy.log("Yay!")')

    with pytest.raises(RunRejectedError):
        await session.submit("   ")

    assert session.workspace.output == outcome
    assert session.workspace.code_input == 'cy.log("Yay!")'


@pytest.mark.asyncio
async def test_submit_while_running_keeps_workspace(session: SimulatorSession) -> None:
    session.auth.login()
    session.trigger = RunTrigger(session.auth, delay_seconds=0.05)

    task = asyncio.create_task(session.submit('cy.log("a")'))
    await asyncio.sleep(0)
    with pytest.raises(RunRejectedError):
        await session.submit('cy.log("b")')
    assert session.workspace.code_input == 'cy.log("a")'

    await task
    assert session.workspace.output == Success('cy.log("a") // Logged message "a"')
