"""CompareConfig and CyclePolicy for comparator configuration.

CompareConfig is a frozen (immutable) dataclass holding the comparator
options.  CyclePolicy selects how previously-entered composite values are
recognised by the cycle guard.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class CyclePolicy(StrEnum):
    """How the cycle guard decides a composite pair was already entered.

    - PAIR:        The exact (expected, actual) reference pair was entered.
    - EITHER_SIDE: Either operand was already entered as an expected value.
                   Only expected operands are recorded.  This is more
                   permissive and matches legacy behaviour.
    """

    PAIR = auto()
    EITHER_SIDE = auto()


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for the deep comparator.

    Attributes:
        cycle_policy: Rule used by the cycle guard.  Default ``PAIR``.
        type_coercion: When True, numeric strings are coerced to numbers before
            leaf comparison (e.g. "123" == 123).  Default False.
        null_equals_missing: When True, mapping entries whose value is None
            are treated as absent keys.  Default False.
        path_separator: Separator used when rendering key paths in
            diagnostics.  Must be non-empty.
    """

    cycle_policy: CyclePolicy = CyclePolicy.PAIR
    type_coercion: bool = False
    null_equals_missing: bool = False
    path_separator: str = "."

    def __post_init__(self) -> None:
        if not isinstance(self.cycle_policy, CyclePolicy):
            msg = f"cycle_policy must be a CyclePolicy, got {self.cycle_policy!r}"
            raise ValueError(msg)
        if not self.path_separator:
            msg = f"path_separator must be non-empty, got {self.path_separator!r}"
            raise ValueError(msg)
