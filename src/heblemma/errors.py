"""Exception types raised by heblemma."""

from __future__ import annotations


class HeblemmaError(Exception):
    """Base class for heblemma failures."""


class DictionaryLoadError(HeblemmaError):
    """Raised when the morphology dictionary cannot be located or loaded."""
