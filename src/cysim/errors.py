"""Application-level exception types for cysim."""

from __future__ import annotations


class CysimError(Exception):
    """Base exception for cysim."""


class ConfigurationError(CysimError):
    """Raised when settings fail validation at startup."""


class SessionError(CysimError):
    """Base exception for misuse of the interactive session."""


class NotLoggedInError(SessionError):
    """Raised when an action requires a logged-in session."""


class RunRejectedError(SessionError):
    """Raised when a run is submitted while the run trigger is disabled."""
