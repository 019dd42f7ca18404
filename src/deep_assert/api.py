"""Public API functions for deep-assert.

This module provides the three user-facing functions: compare, is_equal and
assert_equals.  Each call builds its own traversal state, so no state is
shared between calls.
"""

from __future__ import annotations

from typing import Any

from deep_assert.comparator import DeepComparator
from deep_assert.config import CompareConfig
from deep_assert.errors import DeepAssertionError
from deep_assert.result import ComparisonResult, Mismatch

__all__ = ["assert_equals", "compare", "is_equal"]


def compare(
    message: str,
    expected: Any,
    actual: Any,
    config: CompareConfig | None = None,
) -> ComparisonResult:
    """Compare two values and return the result.

    Args:
        message:  Label echoed in the result description.
        expected: The reference value.
        actual:   The value under test.
        config:   Comparator options. Defaults to ``CompareConfig()`` when None.

    Returns:
        ``Pass`` when the values are structurally equal, otherwise the
        ``Mismatch`` for the first difference found.
    """
    return DeepComparator(config=config).compare(message, expected, actual)


def is_equal(
    expected: Any,
    actual: Any,
    config: CompareConfig | None = None,
) -> bool:
    """Return True if the two values are structurally equal."""
    return compare("", expected, actual, config=config).ok


def assert_equals(
    message: str,
    expected: Any,
    actual: Any,
    config: CompareConfig | None = None,
) -> str:
    """Assert that two values are structurally equal.

    Returns:
        The pass confirmation, e.g. ``"Test 01: Pass!"``.

    Raises:
        DeepAssertionError: When a difference is found.  The exception
            message is the mismatch description and ``.result`` holds the
            ``Mismatch``.
    """
    result = compare(message, expected, actual, config=config)
    if isinstance(result, Mismatch):
        raise DeepAssertionError(result)
    return result.describe()
