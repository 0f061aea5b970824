"""Input coercion helpers shared by the engine and the public API.

``as_input`` is the single gate every public entry point passes its
arguments through.  Built-in sequences (``str``, ``bytes``, ``list``,
``tuple``) are returned untouched so slicing keeps their native type and
speed.  Any other ``SimilarityInput`` (e.g. ``range``, ``array.array`` or a
user-defined token view) is materialised into a ``tuple`` once, because the
divide-and-conquer recursion slices and reverses its inputs.
"""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any

from lcs_similarity.errors import InvalidArgumentError
from lcs_similarity.protocols import SimilarityInput

__all__ = ["as_input", "assemble", "reverse"]

_NATIVE_SEQUENCES = (str, bytes, list, tuple)


def as_input(value: Any) -> Any:
    """Validate ``value`` and return a sliceable sequence with the same elements.

    Args:
        value: A ``str``, ``bytes``, ``list``, ``tuple`` or any other object
            satisfying the ``SimilarityInput`` Protocol.

    Returns:
        ``value`` itself for built-in sequences, otherwise a ``tuple`` copy.

    Raises:
        InvalidArgumentError: If ``value`` is ``None``, a mapping, a set, or
            does not support ``len()`` and integer indexing.
    """
    if value is None:
        msg = "Inputs must not be None"
        raise InvalidArgumentError(msg)
    if isinstance(value, _NATIVE_SEQUENCES):
        return value
    # Mappings and sets have __len__/__getitem__ (or neither) but no positions.
    if isinstance(value, (Mapping, Set)) or not isinstance(value, SimilarityInput):
        msg = f"Unsupported input type: {type(value).__name__}"
        raise InvalidArgumentError(msg)
    return tuple(value[i] for i in range(len(value)))


def reverse(seq: Any) -> Any:
    """Return an eagerly reversed copy of a sliceable sequence."""
    return seq[::-1]


def assemble(elements: list[Any], left: Any, right: Any) -> Any:
    """Build the result sequence for ``elements`` in the caller's own type.

    ``str`` when both inputs are ``str``, ``bytes`` when both are ``bytes``,
    ``tuple`` when ``left`` is a tuple, otherwise a ``list``.
    """
    if isinstance(left, str) and isinstance(right, str):
        return "".join(elements)
    if isinstance(left, bytes) and isinstance(right, bytes):
        return bytes(elements)
    if isinstance(left, tuple):
        return tuple(elements)
    return elements
