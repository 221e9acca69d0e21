from __future__ import annotations

import random

import pytest

from cysim.session import AuthGate, CaptchaChallenge, RunTrigger, SimulatorSession


@pytest.fixture
def session() -> SimulatorSession:
    auth = AuthGate(skip_captcha=True)
    return SimulatorSession(auth=auth, trigger=RunTrigger(auth, delay_seconds=0))


@pytest.fixture
def captcha() -> CaptchaChallenge:
    return CaptchaChallenge(random.Random(7))
