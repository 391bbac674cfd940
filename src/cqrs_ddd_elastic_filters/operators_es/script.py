"""Comparisons with no single field side -> script queries."""

from __future__ import annotations

from typing import Any

from ..exceptions import ConvertError
from ..operators import FilterOperator

_SCRIPT_OPERATORS: dict[FilterOperator, str] = {
    FilterOperator.EQ: "==",
    FilterOperator.NEQ: "!=",
    FilterOperator.GT: ">",
    FilterOperator.GTE: ">=",
    FilterOperator.LT: "<",
    FilterOperator.LTE: "<=",
}


def script_operator(op: FilterOperator) -> str:
    """Return the Painless comparison symbol for *op*."""
    try:
        return _SCRIPT_OPERATORS[op]
    except KeyError:
        raise ConvertError() from None


def compile_target_script(
    subject: str, op: FilterOperator, obj: str
) -> dict[str, Any]:
    """Compare the stored values of two fields."""
    symbol = script_operator(op)
    return {
        "script": {
            "script": f"doc['{subject}'].value {symbol} doc['{obj}'].value",
        },
    }


def compile_literal_script(
    op: FilterOperator, subject: Any, obj: Any
) -> dict[str, Any]:
    """Compare two literals, passed as script parameters."""
    symbol = script_operator(op)
    return {
        "script": {
            "script": {
                "source": f"params.subject {symbol} params.object",
                "params": {
                    "subject": subject,
                    "object": obj,
                },
            },
        },
    }
