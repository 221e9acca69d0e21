"""Cookie consent banner state."""

from __future__ import annotations

from collections.abc import MutableMapping

from loguru import logger

CONSENT_KEY = "cookieConsent"
ACCEPTED = "accepted"
DECLINED = "declined"


class CookieConsent:
    """Store the user's cookie choice in a local-storage style mapping."""

    def __init__(self, storage: MutableMapping[str, str] | None = None) -> None:
        self.storage: MutableMapping[str, str] = storage if storage is not None else {}

    @property
    def choice(self) -> str | None:
        return self.storage.get(CONSENT_KEY)

    def banner_visible(self, logged_in: bool) -> bool:
        return logged_in and self.choice is None

    def accept(self) -> None:
        self._store(ACCEPTED)

    def decline(self) -> None:
        self._store(DECLINED)

    def _store(self, value: str) -> None:
        self.storage[CONSENT_KEY] = value
        logger.info("cookie consent {}", value)
