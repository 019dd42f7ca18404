"""Diagnostic text for each MismatchKind.

Every formatter returns the *detail* part of a description; the message
label prefix is added by ``Mismatch.describe()``.  Paths are rendered
with the configured separator before they reach these functions.
"""

from __future__ import annotations

from typing import Any


def _at(path: str) -> str:
    return f" at {path}" if path else ""


def type_mismatch(expected_type: str, actual_type: str, path: str) -> str:
    return f'Expected type "{expected_type}" but found type "{actual_type}"{_at(path)}'


def shape_mismatch(expected_shape: str, actual_shape: str, path: str) -> str:
    return f'Expected type "{expected_shape}" but found type "{actual_shape}"{_at(path)}'


def value_mismatch(expected: Any, actual: Any, path: str) -> str:
    if path:
        return f'Expected {path} "{expected}" but found "{actual}"'
    return f'Expected "{expected}" but found "{actual}"'


def length_mismatch(expected_len: int, actual_len: int, path: str) -> str:
    return (
        f'Expected array length "{expected_len}" '
        f'but found length "{actual_len}"{_at(path)}'
    )


def missing_key(path: str) -> str:
    """Key present in expected but absent from actual."""
    return f"Expected {path} but was not found"


def unexpected_key(path: str) -> str:
    """Key present in actual but absent from expected."""
    return f"Found unexpected {path}"
