"""cysim - a Cypress command simulator."""

from .core import Error, Help, Outcome, OutcomeKind, Success, Warning, evaluate

__version__ = "0.1.0"

__all__ = ["Error", "Help", "Outcome", "OutcomeKind", "Success", "Warning", "evaluate"]
