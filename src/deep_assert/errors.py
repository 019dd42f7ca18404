"""Exception raised by the assert-style API."""

from __future__ import annotations

from deep_assert.result import Mismatch

__all__ = ["DeepAssertionError"]


class DeepAssertionError(AssertionError):
    """Raised by ``assert_equals`` when a comparison finds a difference.

    Subclasses ``AssertionError`` so that pytest and unittest report it as
    an ordinary test failure.

    Attributes:
        result: The ``Mismatch`` describing the first difference.
    """

    def __init__(self, result: Mismatch) -> None:
        super().__init__(result.describe())
        self.result = result

    @property
    def kind(self) -> str:
        return str(self.result.kind)
