"""Query-document building blocks shared by the operator compilers."""

from __future__ import annotations

from typing import Any


def negate(fragment: dict[str, Any]) -> dict[str, Any]:
    """Wrap *fragment* so it matches documents the fragment does not."""
    return {"bool": {"must_not": fragment}}


def exists(field: str) -> dict[str, Any]:
    return {"exists": {"field": field}}
