"""Pattern operators -> regexp."""

from __future__ import annotations

from typing import Any

from ..ast import Like
from ..exceptions import ConvertError
from ..operators import FilterOperator
from .fragments import negate


def like_to_regexp(like: Like) -> str:
    """
    Render *like* for the ``regexp`` query.

    ``regexp`` patterns are always anchored, so the explicit ``^`` and
    ``$`` anchors are dropped.
    """
    regex = like.to_regex_string()
    if regex.startswith("^"):
        regex = regex[1:]
    if regex.endswith("$"):
        regex = regex[:-1]
    return regex


def check_pattern_operand(op: FilterOperator, val: Any) -> None:
    """Raise ConvertError if a like / nlike operand is not a string Like."""
    if op not in (FilterOperator.LIKE, FilterOperator.NLIKE):
        return
    if not isinstance(val, Like) or not isinstance(val.value, str):
        raise ConvertError()


def compile_string(field: str, op: FilterOperator, val: Any) -> dict[str, Any] | None:
    """Compile like / nlike. Returns None if not a pattern op."""
    if op not in (FilterOperator.LIKE, FilterOperator.NLIKE):
        return None
    check_pattern_operand(op, val)
    fragment = {"regexp": {field: like_to_regexp(val)}}
    return fragment if op == FilterOperator.LIKE else negate(fragment)
