"""Comparisons against the null sentinel -> exists / must_not exists."""

from __future__ import annotations

from typing import Any

from ..operators import FilterOperator
from .fragments import exists, negate

# True: the field must exist; False: the field must be missing.
_NULL_POLARITY: dict[FilterOperator, bool] = {
    FilterOperator.EQ: False,
    FilterOperator.NEQ: True,
    FilterOperator.GT: True,
    FilterOperator.GTE: True,
    FilterOperator.LT: False,
    FilterOperator.LTE: False,
}


def compile_null(field: str, op: FilterOperator, val: Any) -> dict[str, Any] | None:
    """Compile a comparison with ``None``. Returns None if not applicable."""
    if val is not None or op not in _NULL_POLARITY:
        return None
    fragment = exists(field)
    return fragment if _NULL_POLARITY[op] else negate(fragment)
