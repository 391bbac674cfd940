"""Equality, ordering and between comparisons -> term / range."""

from __future__ import annotations

from typing import Any

from ..ast import Range
from ..exceptions import ConvertError
from ..operators import FilterOperator
from .fragments import negate

_RANGE_BOUNDS: dict[FilterOperator, str] = {
    FilterOperator.GT: "gt",
    FilterOperator.GTE: "gte",
    FilterOperator.LT: "lt",
    FilterOperator.LTE: "lte",
}


def compile_standard(
    field: str, op: FilterOperator, val: Any
) -> dict[str, Any] | None:
    """Compile standard comparisons. Returns None if not a standard op."""
    if op == FilterOperator.EQ:
        return {"term": {field: val}}
    if op == FilterOperator.NEQ:
        return negate({"term": {field: val}})

    bound = _RANGE_BOUNDS.get(op)
    if bound:
        return {"range": {field: {bound: val}}}

    if op == FilterOperator.BETWEEN:
        return _between(field, val)
    if op == FilterOperator.NBETWEEN:
        return negate(_between(field, val))

    return None


def check_range_operand(op: FilterOperator, val: Any) -> None:
    """Raise ConvertError if a between / nbetween operand is not a Range."""
    if op in (FilterOperator.BETWEEN, FilterOperator.NBETWEEN) and not isinstance(
        val, Range
    ):
        raise ConvertError()


def _between(field: str, val: Any) -> dict[str, Any]:
    check_range_operand(FilterOperator.BETWEEN, val)
    return {"range": {field: {"gte": val.lower, "lte": val.upper}}}
