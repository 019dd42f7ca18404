"""KeyPath: the descent route from the comparison root to the current value.

Paths are immutable.  Each recursive step calls ``child(key)`` which
returns a new, one-longer path, so a path held by a ``Mismatch`` can never
be altered by later recursion.

Two renderings are provided:

- dotted form (``str(path)``), e.g. ``"propB.propA.1.propB"``
- JSON Pointer form (RFC 6901), e.g. ``"/propB/propA/1/propB"``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["KeyPath"]


@dataclass(frozen=True, slots=True)
class KeyPath:
    """Ordered key/index tokens from the root to the current position.

    Attributes:
        tokens: Mapping keys and sequence indices, outermost first.  The
            root path has no tokens.
    """

    tokens: tuple[Any, ...] = ()

    def child(self, key: Any) -> KeyPath:
        """Return a new path with *key* appended."""
        return KeyPath((*self.tokens, key))

    def dotted(self, separator: str = ".") -> str:
        """Join the tokens with *separator*; the root renders as ``""``."""
        return separator.join(str(token) for token in self.tokens)

    def as_pointer(self) -> str:
        """Render as a JSON Pointer.

        ``~`` and ``/`` inside tokens are escaped as ``~0`` and ``~1``.
        The root renders as ``""``.
        """
        return "".join(
            "/" + str(token).replace("~", "~0").replace("/", "~1")
            for token in self.tokens
        )

    @property
    def depth(self) -> int:
        """Number of tokens; equals the nesting depth of the addressed value."""
        return len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __str__(self) -> str:
        return self.dotted()
