"""DeepComparator: depth-first structural equality with a cycle guard.

Architecture:
- ``DeepComparator.compare()`` creates a fresh ``_Traversal`` for every
  top-level call.  The traversal owns the visited-pairs table and is thrown
  away when the call returns, so no state leaks between comparisons.
- ``_Traversal.walk()`` drives a depth-first loop over an explicit stack of
  (expected, actual, path) frames, so deep or long cyclic structures never
  hit the interpreter recursion limit.
- ``_Traversal._check()`` runs the ordered checks on one pair: identity,
  cycle guard, runtime type, shape, then either a primitive value check or
  the expansion of a sequence/mapping into child frames.
- Children are visited in expected's key order.  Children that are both
  primitives are compared as leaves; anything else goes through
  ``_check()``.
- The first difference found is returned as a ``Mismatch`` and ends the
  loop immediately.  Nothing is raised.

The cycle guard records composite reference pairs by ``id()``.  A pair
seen a second time is *assumed* equal; this is what ends the walk on
self-referential structures and is not a proof of equality.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from deep_assert import messages
from deep_assert.config import CompareConfig, CyclePolicy
from deep_assert.kinds import MISSING, Shape, ValueType, shape_of, type_name, value_type_of
from deep_assert.path import KeyPath
from deep_assert.result import ComparisonResult, Mismatch, MismatchKind, Pass

__all__ = ["DeepComparator"]

logger = logging.getLogger(__name__)

_CONTAINERS = frozenset({Shape.SEQUENCE, Shape.MAPPING})

# (expected, actual, path) still to be visited
_Frame = tuple[Any, Any, KeyPath]


class DeepComparator:
    """Structural deep-equality comparator.

    A comparator is immutable and holds only its configuration, so one
    instance can be shared freely.  Every ``compare()`` call is independent.

    Example::

        from deep_assert.comparator import DeepComparator

        cmp = DeepComparator()
        result = cmp.compare("t", {"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}})
        print(result.kind)         # ValueMismatch
        print(result.describe())   # t: Expected b.c "2" but found "3"
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        self._config: CompareConfig = config if config is not None else CompareConfig()

    @property
    def config(self) -> CompareConfig:
        return self._config

    def compare(self, message: str, expected: Any, actual: Any) -> ComparisonResult:
        """Compare *expected* against *actual*.

        Args:
            message:  Label echoed in the result description.
            expected: The reference value.
            actual:   The value under test.

        Returns:
            ``Pass(message)`` when no difference is found, otherwise the
            ``Mismatch`` describing the first difference.
        """
        mismatch = _Traversal(message, self._config).walk(expected, actual, KeyPath())
        if mismatch is None:
            return Pass(message)
        return mismatch


class _Traversal:
    """State for one top-level comparison."""

    def __init__(self, message: str, config: CompareConfig) -> None:
        self._message = message
        self._config = config
        # id pair -> referents; holding the referents keeps ids from being reused
        self._pairs: dict[tuple[int, int], tuple[Any, Any]] = {}
        # expected id -> expected referent
        self._seen: dict[int, Any] = {}

    # ------------------------------------------------------------------
    # Traversal loop
    # ------------------------------------------------------------------

    def walk(self, expected: Any, actual: Any, path: KeyPath) -> Mismatch | None:
        """Walk the pair depth-first and return the first mismatch, if any.

        Pending child frames live on an explicit stack, so nesting depth is
        bounded by memory rather than the interpreter recursion limit.
        Children are pushed in reverse so they pop in expected's key order.
        """
        outcome = self._check(expected, actual, path)
        pending: list[_Frame] = []
        while True:
            if isinstance(outcome, Mismatch):
                return outcome
            pending.extend(reversed(outcome))
            if not pending:
                return None
            outcome = self._check_child(*pending.pop())

    # ------------------------------------------------------------------
    # Pair checks
    # ------------------------------------------------------------------

    def _check(
        self, expected: Any, actual: Any, path: KeyPath
    ) -> Mismatch | list[_Frame]:
        """Run the ordered checks on one pair.

        Returns the mismatch, or the child frames still to visit.
        """
        if expected is actual:
            return []

        if self._entered(expected, actual):
            logger.debug("cycle guard: re-entered pair at %r treated as equal", path.dotted())
            return []

        expected_type = type_name(expected)
        actual_type = type_name(actual)
        if expected_type != actual_type:
            if self._config.type_coercion and _coerced_equal(expected, actual):
                return []
            return self._mismatch(
                MismatchKind.TYPE_MISMATCH,
                path,
                expected,
                actual,
                messages.type_mismatch(expected_type, actual_type, self._render(path)),
            )

        expected_shape = shape_of(expected)
        actual_shape = shape_of(actual)
        match expected_shape, actual_shape:
            case Shape.PRIMITIVE, Shape.PRIMITIVE:
                if expected == actual:
                    return []
                return self._value_mismatch(path, expected, actual)
            case Shape.NULL, Shape.NULL:
                return []
            case Shape.SEQUENCE, Shape.SEQUENCE:
                return self._expand_sequence(expected, actual, path)
            case Shape.MAPPING, Shape.MAPPING:
                return self._expand_mapping(expected, actual, path)
            case _:
                return self._mismatch(
                    MismatchKind.SHAPE_MISMATCH,
                    path,
                    expected,
                    actual,
                    messages.shape_mismatch(
                        expected_shape.label, actual_shape.label, self._render(path)
                    ),
                )

    def _check_child(
        self, expected: Any, actual: Any, path: KeyPath
    ) -> Mismatch | list[_Frame]:
        if actual is MISSING and expected is not MISSING:
            return self._mismatch(
                MismatchKind.MISSING_VALUE,
                path,
                expected,
                actual,
                messages.missing_key(self._render(path)),
            )
        if shape_of(expected) is Shape.PRIMITIVE and shape_of(actual) is Shape.PRIMITIVE:
            # Leaf check: a type difference between two leaves is a value mismatch.
            if expected is actual or self._leaf_equal(expected, actual):
                return []
            return self._value_mismatch(path, expected, actual)
        return self._check(expected, actual, path)

    # ------------------------------------------------------------------
    # Cycle guard
    # ------------------------------------------------------------------

    def _entered(self, expected: Any, actual: Any) -> bool:
        """Return True if this pair was entered before; otherwise record it."""
        expected_is_container = shape_of(expected) in _CONTAINERS
        actual_is_container = shape_of(actual) in _CONTAINERS

        if self._config.cycle_policy is CyclePolicy.PAIR:
            if not (expected_is_container and actual_is_container):
                return False
            key = (id(expected), id(actual))
            if key in self._pairs:
                return True
            self._pairs[key] = (expected, actual)
            return False

        # CyclePolicy.EITHER_SIDE
        if (expected_is_container and id(expected) in self._seen) or (
            actual_is_container and id(actual) in self._seen
        ):
            return True
        # Only the expected side is recorded; an actual value reused across
        # positions is still compared against each expected partner.
        if expected_is_container:
            self._seen[id(expected)] = expected
        return False

    # ------------------------------------------------------------------
    # Composite expansion
    # ------------------------------------------------------------------

    def _expand_sequence(
        self, expected: Sequence[Any], actual: Sequence[Any], path: KeyPath
    ) -> Mismatch | list[_Frame]:
        if len(expected) != len(actual):
            return self._mismatch(
                MismatchKind.LENGTH_MISMATCH,
                path,
                expected,
                actual,
                messages.length_mismatch(len(expected), len(actual), self._render(path)),
            )
        return [
            (exp_item, act_item, path.child(index))
            for index, (exp_item, act_item) in enumerate(zip(expected, actual, strict=True))
        ]

    def _expand_mapping(
        self, expected: Mapping[Any, Any], actual: Mapping[Any, Any], path: KeyPath
    ) -> Mismatch | list[_Frame]:
        expected_keys = self._own_keys(expected)
        actual_keys = self._own_keys(actual)

        # Key counts differ: report only the first key found on the larger side
        # that the smaller side lacks.
        if len(expected_keys) > len(actual_keys):
            for key in expected_keys:
                if self._lookup(actual, key) is MISSING:
                    key_path = path.child(key)
                    return self._mismatch(
                        MismatchKind.MISSING_KEY,
                        key_path,
                        expected[key],
                        MISSING,
                        messages.missing_key(self._render(key_path)),
                    )
        elif len(expected_keys) < len(actual_keys):
            for key in actual_keys:
                if self._lookup(expected, key) is MISSING:
                    key_path = path.child(key)
                    return self._mismatch(
                        MismatchKind.UNEXPECTED_KEY,
                        key_path,
                        MISSING,
                        actual[key],
                        messages.unexpected_key(self._render(key_path)),
                    )

        return [
            (expected[key], self._lookup(actual, key), path.child(key))
            for key in expected_keys
        ]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _own_keys(self, mapping: Mapping[Any, Any]) -> list[Any]:
        if self._config.null_equals_missing:
            return [key for key, value in mapping.items() if value is not None]
        return list(mapping.keys())

    def _lookup(self, mapping: Mapping[Any, Any], key: Any) -> Any:
        """Return ``mapping[key]``, or MISSING when the key counts as absent."""
        if key not in mapping:
            return MISSING
        value = mapping[key]
        if value is None and self._config.null_equals_missing:
            return MISSING
        return value

    def _leaf_equal(self, expected: Any, actual: Any) -> bool:
        if type_name(expected) == type_name(actual):
            return bool(expected == actual)
        return self._config.type_coercion and _coerced_equal(expected, actual)

    def _render(self, path: KeyPath) -> str:
        return path.dotted(self._config.path_separator)

    def _value_mismatch(self, path: KeyPath, expected: Any, actual: Any) -> Mismatch:
        return self._mismatch(
            MismatchKind.VALUE_MISMATCH,
            path,
            expected,
            actual,
            messages.value_mismatch(expected, actual, self._render(path)),
        )

    def _mismatch(
        self,
        kind: MismatchKind,
        path: KeyPath,
        expected: Any,
        actual: Any,
        detail: str,
    ) -> Mismatch:
        return Mismatch(
            message=self._message,
            kind=kind,
            path=path,
            expected=expected,
            actual=actual,
            detail=detail,
        )


def _coerced_equal(expected: Any, actual: Any) -> bool:
    """Compare a numeric string against a number.

    Only a (string, number) pair in either order is coerced.  Strings that
    do not parse as numbers compare unequal.
    """
    kinds = (value_type_of(expected), value_type_of(actual))
    if kinds == (ValueType.STRING, ValueType.NUMBER):
        text, number = expected, actual
    elif kinds == (ValueType.NUMBER, ValueType.STRING):
        number, text = expected, actual
    else:
        return False
    try:
        return float(text) == float(number)
    except ValueError:
        return False
