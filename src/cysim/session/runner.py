"""Run trigger with an artificial delay before the outcome is revealed."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from loguru import logger

from ..core.interpreter import evaluate
from ..core.types import Outcome
from ..errors import RunRejectedError
from .auth import AuthGate


class RunTrigger:
    """Gate submissions and deliver each outcome after a fixed delay."""

    def __init__(
        self,
        auth: AuthGate,
        *,
        delay_seconds: float = 0.0,
        evaluator: Callable[[str], Outcome] = evaluate,
    ) -> None:
        self._auth = auth
        self._delay_seconds = delay_seconds
        self._evaluator = evaluator
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def can_run(self, text: str) -> bool:
        return bool(text.strip()) and self._auth.is_logged_in() and not self._running

    async def run(self, text: str) -> Outcome | None:
        """Evaluate ``text`` now and return the outcome once the delay elapses.

        Returns None when the session logged out while waiting.
        """
        if not self.can_run(text):
            raise RunRejectedError("run is disabled for the current input")

        generation = self._auth.generation
        outcome = self._evaluator(text)
        self._running = True
        try:
            await asyncio.sleep(self._delay_seconds)
        finally:
            self._running = False

        if generation != self._auth.generation:
            logger.info("discarding outcome computed before logout")
            return None
        return outcome
