"""Exception types raised by lcs-similarity."""

from __future__ import annotations

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when an input sequence is absent (``None``) or not a sequence.

    Subclasses ``ValueError`` so callers that already guard against bad
    arguments with ``except ValueError`` keep working.
    """
