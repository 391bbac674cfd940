"""
Filter tree model.

These are the read-only values a filter parser hands to the converter:
a :class:`Filter` is an ordered run of :class:`Statement` objects, each
holding either a :class:`Clause` or a nested :class:`Filter`.  Clause
operands are :class:`Target` references, plain literals (``str``,
``int``, ``float``, ``bool`` or ``None`` as the null sentinel),
:class:`Range` bounds, :class:`Like` patterns, or lists of literals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .operators import Conjunction, FilterOperator

if TYPE_CHECKING:
    from collections.abc import Iterator

# Characters the regular-expression engine treats as syntax.
_REGEX_RESERVED = frozenset('.?+*|{}[]()"\\#@&<>~^$')

_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")
_POINTER_ESCAPE = re.compile(r"~(.?)")


def decode_pointer_segment(raw: str) -> str:
    """
    Undo RFC 6901 escaping (``~1`` → ``/``, ``~0`` → ``~``) in one segment.

    Raises:
        ValueError: A ``~`` is not followed by ``0`` or ``1``.
    """

    def _unescape(match: re.Match[str]) -> str:
        code = match.group(1)
        if code == "0":
            return "~"
        if code == "1":
            return "/"
        raise ValueError(f"Invalid escape in JSON pointer segment: {raw!r}")

    return _POINTER_ESCAPE.sub(_unescape, raw)


@dataclass(frozen=True)
class Target:
    """Reference to a document field, expressed as an ordered path."""

    path: tuple[str | int, ...]

    def __post_init__(self) -> None:
        path = (self.path,) if isinstance(self.path, str | int) else tuple(self.path)
        if not path:
            raise ValueError("Target path must contain at least one segment")
        object.__setattr__(self, "path", path)

    @classmethod
    def from_json_pointer(cls, pointer: str) -> Target:
        """
        Build a target from an RFC 6901 pointer such as ``/foo/bar``.

        Canonical array indices (``0``, ``12``) become ``int`` segments;
        anything else, ``007`` included, stays a string.

        Raises:
            ValueError: The pointer lacks a leading ``/`` or holds a ``~``
                not followed by ``0`` or ``1``.
        """
        if not pointer.startswith("/"):
            raise ValueError(f"JSON pointer must start with '/': {pointer!r}")
        segments: list[str | int] = []
        for raw in pointer[1:].split("/"):
            segment = decode_pointer_segment(raw)
            if _ARRAY_INDEX.fullmatch(segment):
                segments.append(int(segment))
            else:
                segments.append(segment)
        return cls(tuple(segments))

    @property
    def field(self) -> str:
        """The top-level document field this target points into."""
        return str(self.path[0])

    def to_json_pointer(self) -> str:
        return "".join(
            "/" + str(seg).replace("~", "~0").replace("/", "~1") for seg in self.path
        )

    def __str__(self) -> str:
        return self.to_json_pointer()


@dataclass(frozen=True)
class Range:
    """Inclusive lower/upper bounds for ``between`` comparisons."""

    lower: Any
    upper: Any


@dataclass(frozen=True)
class Like:
    """
    Wildcard pattern for ``like`` comparisons.

    ``*`` matches any run of characters, ``_`` matches exactly one, and a
    backslash makes the following character literal.
    """

    value: Any

    def to_regex_string(self) -> str:
        """Render the pattern as an anchored regular expression."""
        parts: list[str] = ["^"]
        escaped = False
        for char in str(self.value):
            if escaped:
                parts.append(_escape_char(char))
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == "*":
                parts.append(".*")
            elif char == "_":
                parts.append(".{1}")
            else:
                parts.append(_escape_char(char))
        if escaped:
            parts.append(_escape_char("\\"))
        parts.append("$")
        return "".join(parts)


def _escape_char(char: str) -> str:
    return "\\" + char if char in _REGEX_RESERVED else char


@dataclass(frozen=True)
class Clause:
    """A single comparison: ``subject operator object``."""

    subject: Any
    operator: FilterOperator | str
    object: Any


@dataclass(frozen=True)
class Statement:
    """One member of a filter, joined to its predecessor by ``conjunction``."""

    value: Clause | Filter
    conjunction: Conjunction | str = Conjunction.AND


@dataclass(frozen=True)
class Filter:
    """Ordered run of statements; AND binds tighter than OR."""

    statements: tuple[Statement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)
