"""Arithmetic captcha shown before login."""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger

INCORRECT_ANSWER = "Incorrect answer, please try again."
OPERAND_RANGE = (1, 10)


@dataclass(frozen=True)
class Question:
    left: int
    right: int

    @property
    def prompt(self) -> str:
        return f"What is {self.left} + {self.right}?"

    @property
    def answer(self) -> int:
        return self.left + self.right


class CaptchaChallenge:
    """Ask `a + b` and track the last wrong-answer error."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.error: str | None = None
        self.question = self._new_question()

    def _new_question(self) -> Question:
        low, high = OPERAND_RANGE
        return Question(self._rng.randint(low, high), self._rng.randint(low, high))

    @staticmethod
    def can_verify(answer: str) -> bool:
        return bool(answer.strip())

    def verify(self, answer: str) -> bool:
        if not self.can_verify(answer):
            return False
        try:
            value = int(answer.strip())
        except ValueError:
            value = None
        if value == self.question.answer:
            self.error = None
            logger.info("captcha solved")
            return True

        logger.info("captcha answer rejected")
        self.error = INCORRECT_ANSWER
        self.question = self._new_question()
        return False
