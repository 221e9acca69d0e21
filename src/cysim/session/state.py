"""Session aggregate used by the front ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from ..config import Settings
from ..core.types import Outcome
from ..errors import RunRejectedError
from .auth import AuthGate
from .consent import CookieConsent
from .runner import RunTrigger
from .workspace import Workspace


@dataclass
class SimulatorSession:
    auth: AuthGate
    trigger: RunTrigger
    consent: CookieConsent = field(default_factory=CookieConsent)
    workspace: Workspace = field(default_factory=Workspace)

    @classmethod
    def from_settings(cls, settings: Settings) -> SimulatorSession:
        auth = AuthGate(skip_captcha=settings.skip_captcha)
        return cls(
            auth=auth,
            trigger=RunTrigger(auth, delay_seconds=settings.run_delay_seconds),
            workspace=Workspace(expanded=settings.expanded),
        )

    @property
    def banner_visible(self) -> bool:
        return self.consent.banner_visible(self.auth.is_logged_in())

    def can_run(self) -> bool:
        return self.trigger.can_run(self.workspace.code_input)

    async def submit(self, text: str) -> Outcome | None:
        """Run ``text`` and keep the outcome as the current output."""
        self.auth.require_login()
        if not self.trigger.can_run(text):
            raise RunRejectedError("run is disabled for the current input")
        self.workspace.code_input = text
        self.workspace.output = None
        outcome = await self.trigger.run(text)
        if outcome is not None:
            self.workspace.output = outcome
        return outcome

    def logout(self) -> None:
        self.auth.logout()
        self.workspace.reset()
        logger.debug("workspace cleared after logout")
