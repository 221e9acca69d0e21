"""Login gate in front of the simulator."""

from __future__ import annotations

from loguru import logger

from ..errors import NotLoggedInError
from .captcha import CaptchaChallenge


class AuthGate:
    """Track login state; every logout starts a new generation."""

    def __init__(self, *, skip_captcha: bool = False, captcha: CaptchaChallenge | None = None) -> None:
        self._skip_captcha = skip_captcha
        self._captcha = captcha
        self._logged_in = False
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def captcha(self) -> CaptchaChallenge | None:
        return self._captcha

    def is_logged_in(self) -> bool:
        return self._logged_in

    def login(self) -> bool:
        """Log in, or open a captcha challenge and return False."""
        if self._skip_captcha:
            self._complete_login()
            return True
        self._captcha = self._captcha or CaptchaChallenge()
        return False

    def verify_captcha(self, answer: str) -> bool:
        if self._captcha is None:
            self._captcha = CaptchaChallenge()
        if not self._captcha.verify(answer):
            return False
        self._complete_login()
        return True

    def logout(self) -> None:
        if not self._logged_in:
            return
        self._logged_in = False
        self._generation += 1
        self._captcha = None
        logger.info("logged out generation={}", self._generation)

    def require_login(self) -> None:
        if not self._logged_in:
            raise NotLoggedInError("log in before running commands")

    def _complete_login(self) -> None:
        self._logged_in = True
        logger.info("logged in generation={}", self._generation)
