"""deep-assert - structural deep-equality assertions with first-difference diagnostics."""

from __future__ import annotations

from deep_assert.api import assert_equals, compare, is_equal
from deep_assert.comparator import DeepComparator
from deep_assert.config import CompareConfig, CyclePolicy
from deep_assert.errors import DeepAssertionError
from deep_assert.kinds import MISSING
from deep_assert.path import KeyPath
from deep_assert.result import ComparisonResult, Mismatch, MismatchKind, Pass
from deep_assert.runner import Case, run, run_all

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "Case",
    "CompareConfig",
    "ComparisonResult",
    "CyclePolicy",
    "DeepAssertionError",
    "DeepComparator",
    "KeyPath",
    "Mismatch",
    "MismatchKind",
    "Pass",
    "assert_equals",
    "compare",
    "is_equal",
    "run",
    "run_all",
]
