"""Shared fixtures for filter conversion tests."""

from __future__ import annotations

from typing import Any

import pytest

from cqrs_ddd_elastic_filters import (
    Clause,
    Filter,
    FilterBuilder,
    Statement,
    convert,
    target,
)


@pytest.fixture
def builder() -> FilterBuilder:
    return FilterBuilder()


@pytest.fixture
def fragment_for():
    """
    Convert a single clause and return its query fragment.

    ``/``-prefixed string operands are read as targets.
    """

    def _fragment_for(subject: Any, op: str, obj: Any) -> dict[str, Any]:
        clause = Clause(_operand(subject), op, _operand(obj))
        result = convert(Filter((Statement(clause),)))
        return result.value["filter"]["bool"]["must"][0]

    return _fragment_for


def _operand(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("/"):
        return target(value)
    return value
