"""Runner: turns comparison cases into display strings.

The runner is the boundary where a comparison result is flattened into
plain text.  It never raises for a comparison outcome: a pass becomes the
pass confirmation and a mismatch becomes its description.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from deep_assert.comparator import DeepComparator
from deep_assert.config import CompareConfig
from deep_assert.result import ComparisonResult

__all__ = ["Case", "run", "run_all"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Case:
    """One comparison to run.

    Attributes:
        message:  Label echoed in the result string.
        expected: The reference value.
        actual:   The value under test.
    """

    message: str
    expected: Any
    actual: Any


def run(case: Case, config: CompareConfig | None = None) -> str:
    """Run one case and return its result string."""
    return _run_with(DeepComparator(config=config), case).describe()


def run_all(cases: Iterable[Case], config: CompareConfig | None = None) -> list[str]:
    """Run every case in order and return their result strings.

    A single comparator is shared across cases; each comparison still gets
    its own traversal state.
    """
    comparator = DeepComparator(config=config)
    results = [_run_with(comparator, case) for case in cases]
    failed = sum(1 for result in results if not result.ok)
    logger.info(
        "ran %d case(s): %d passed, %d failed", len(results), len(results) - failed, failed
    )
    return [result.describe() for result in results]


def _run_with(comparator: DeepComparator, case: Case) -> ComparisonResult:
    result = comparator.compare(case.message, case.expected, case.actual)
    if result.ok:
        logger.debug("%s: pass", case.message)
    else:
        logger.debug("%s: %s at %r", case.message, result.kind, result.path.dotted())
    return result
