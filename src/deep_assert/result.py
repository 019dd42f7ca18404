"""Result types returned by compare() calls.

A comparison produces exactly one of two frozen dataclasses:

- ``Pass``: every value matched.
- ``Mismatch``: the first structural difference found, with its kind, the
  key path to it, both observed values and a formatted description.

``ComparisonResult`` is the union of the two.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Literal

from deep_assert.path import KeyPath

__all__ = ["ComparisonResult", "Mismatch", "MismatchKind", "Pass"]


class MismatchKind(StrEnum):
    """Taxonomy of comparison failures."""

    TYPE_MISMATCH = "TypeMismatch"
    SHAPE_MISMATCH = "ShapeMismatch"
    LENGTH_MISMATCH = "LengthMismatch"
    MISSING_KEY = "MissingKey"
    UNEXPECTED_KEY = "UnexpectedKey"
    VALUE_MISMATCH = "ValueMismatch"
    MISSING_VALUE = "MissingValue"


@dataclass(frozen=True, slots=True)
class Pass:
    """Successful comparison.

    Attributes:
        message: The label passed to compare().
    """

    message: str
    ok: Literal[True] = field(default=True, init=False)

    def describe(self) -> str:
        return f"{self.message}: Pass!"

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True, slots=True)
class Mismatch:
    """First difference found by a comparison.

    Attributes:
        message: The label passed to compare().
        kind: Which check failed (see MismatchKind).
        path: Key path from the root to the differing position.  Empty when
            the roots themselves differ.
        expected: Value found on the expected side at ``path`` (or the
            ``MISSING`` sentinel).
        actual: Value found on the actual side at ``path`` (or ``MISSING``).
        detail: Human-readable description without the message label.
    """

    message: str
    kind: MismatchKind
    path: KeyPath
    expected: Any
    actual: Any
    detail: str
    ok: Literal[False] = field(default=False, init=False)

    def describe(self) -> str:
        return f"{self.message}: {self.detail}"

    def __str__(self) -> str:
        return self.describe()


ComparisonResult = Pass | Mismatch
