"""Membership operators -> terms."""

from __future__ import annotations

from typing import Any

from ..exceptions import ConvertError
from ..operators import FilterOperator
from .fragments import negate


def check_set_operand(op: FilterOperator, val: Any) -> None:
    """Raise ConvertError if an in / nin operand is not a list or tuple."""
    if op in (FilterOperator.IN, FilterOperator.NIN) and not isinstance(
        val, list | tuple
    ):
        raise ConvertError()


def compile_set(field: str, op: FilterOperator, val: Any) -> dict[str, Any] | None:
    """Compile in / nin. Returns None if not a membership op."""
    if op not in (FilterOperator.IN, FilterOperator.NIN):
        return None
    check_set_operand(op, val)
    fragment = {"terms": {field: list(val)}}
    return fragment if op == FilterOperator.IN else negate(fragment)
