"""pytest plugin for deep-assert.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from deep_assert import CompareConfig, compare


@pytest.fixture(scope="session")
def assert_deep_equal() -> Any:
    """Fixture that returns a callable deep-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which builds fresh traversal state per call).

    Usage in tests::

        def test_payload(assert_deep_equal):
            assert_deep_equal({"user": {"id": 1}}, {"user": {"id": 1}})

        def test_payload_changed(assert_deep_equal):
            with pytest.raises(AssertionError, match=r"user\\.id"):
                assert_deep_equal({"user": {"id": 1}}, {"user": {"id": 2}})

    Returns:
        A callable ``_assert(expected, actual, message="", config=None) -> None``
        that raises ``AssertionError`` when the values differ.
    """

    def _assert(
        expected: Any,
        actual: Any,
        message: str = "",
        config: CompareConfig | None = None,
    ) -> None:
        """Assert that two values are structurally equal.

        Args:
            expected: The expected/reference value.
            actual:   The actual value produced by the code under test.
            message:  Optional label prefixed to the failure description.
            config:   Optional CompareConfig for custom comparator options.

        Raises:
            AssertionError: When a difference is found, with a message
                including the description, mismatch kind and JSON Pointer
                path of the first difference.
        """
        result = compare(message or "values differ", expected, actual, config=config)
        if not result.ok:
            raise AssertionError(
                f"{result.describe()}\n"
                f"  kind:     {result.kind}\n"
                f"  pointer:  {result.path.as_pointer() or '(root)'}\n"
                f"  expected: {result.expected!r}\n"
                f"  actual:   {result.actual!r}"
            )

    return _assert
