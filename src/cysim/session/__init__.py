"""Session collaborators around the interpreter."""

from .auth import AuthGate
from .captcha import INCORRECT_ANSWER, CaptchaChallenge
from .consent import CookieConsent
from .runner import RunTrigger
from .state import SimulatorSession
from .workspace import Workspace

__all__ = [
    "INCORRECT_ANSWER",
    "AuthGate",
    "CaptchaChallenge",
    "CookieConsent",
    "RunTrigger",
    "SimulatorSession",
    "Workspace",
]
