"""Value kinds: Shape and ValueType enums plus per-class classification.

The comparator dispatches on a closed set of shapes:

- NULL       -> ``None``
- SEQUENCE   -> ``list``, ``tuple`` and any non-string ``Sequence``
- MAPPING    -> ``dict`` and any ``Mapping``
- PRIMITIVE  -> everything else (str, numbers, bools, arbitrary scalars)

``ValueType`` is the coarser runtime type checked before shapes.  Null,
sequences and mappings all share ``ValueType.OBJECT`` so that a null vs
mapping pair is reported as a shape problem rather than a type problem.

Classification is done per *class*, not per value, and memoised in a
bounded LRU cache because ``isinstance`` against the ``collections.abc``
ABCs is comparatively slow on large documents.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import StrEnum, auto
from numbers import Real
from typing import Any, Final

from cachetools import LRUCache, cached

__all__ = ["MISSING", "Shape", "ValueType", "shape_of", "type_name", "value_type_of"]


class _Missing:
    """Sentinel type for an absent key (JavaScript's ``undefined``)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class Shape(StrEnum):
    """Structural shape of a value.

    StrEnum values are the lowercased member names; ``label`` gives the
    capitalised name used in diagnostics ("Null", "Array", "Object").
    """

    NULL = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    PRIMITIVE = auto()

    @property
    def label(self) -> str:
        """Capitalised name used in diagnostics."""
        return _SHAPE_LABELS[self]

    @property
    def is_composite(self) -> bool:
        """True for every shape except PRIMITIVE."""
        return self is not Shape.PRIMITIVE


_SHAPE_LABELS: Final[dict[Shape, str]] = {
    Shape.NULL: "Null",
    Shape.SEQUENCE: "Array",
    Shape.MAPPING: "Object",
    Shape.PRIMITIVE: "Primitive",
}


class ValueType(StrEnum):
    """Coarse runtime type of a value.

    - STRING    -> "string"    : ``str``
    - NUMBER    -> "number"    : ``int``, ``float`` and other ``numbers.Real``
    - BOOLEAN   -> "boolean"   : ``bool``
    - UNDEFINED -> "undefined" : the ``MISSING`` sentinel
    - OBJECT    -> "object"    : null, sequences and mappings
    - OTHER     -> "other"     : any other class (reported by class name)
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    UNDEFINED = auto()
    OBJECT = auto()
    OTHER = auto()


@cached(cache=LRUCache(maxsize=256))
def _classify(cls: type) -> tuple[Shape, ValueType]:
    # bool MUST be checked before Real: bool subclasses int
    if issubclass(cls, bool):
        return Shape.PRIMITIVE, ValueType.BOOLEAN
    if cls is type(None):
        return Shape.NULL, ValueType.OBJECT
    if cls is _Missing:
        return Shape.PRIMITIVE, ValueType.UNDEFINED
    if issubclass(cls, str):
        return Shape.PRIMITIVE, ValueType.STRING
    if issubclass(cls, Real):
        return Shape.PRIMITIVE, ValueType.NUMBER
    if issubclass(cls, Mapping):
        return Shape.MAPPING, ValueType.OBJECT
    # bytes-like values are Sequences but not supported as arrays
    if issubclass(cls, Sequence) and not issubclass(cls, (bytes, bytearray)):
        return Shape.SEQUENCE, ValueType.OBJECT
    return Shape.PRIMITIVE, ValueType.OTHER


def shape_of(value: Any) -> Shape:
    """Return the structural shape of *value*."""
    return _classify(type(value))[0]


def value_type_of(value: Any) -> ValueType:
    """Return the coarse runtime type of *value*."""
    return _classify(type(value))[1]


def type_name(value: Any) -> str:
    """Return the type name shown in diagnostics.

    Known types use their ``ValueType`` value; anything else falls back to
    the Python class name so that e.g. ``Decimal`` vs ``datetime`` stays
    readable.
    """
    vtype = value_type_of(value)
    if vtype is ValueType.OTHER:
        return type(value).__name__
    return str(vtype)
