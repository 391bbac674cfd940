"""
Fluent builder for constructing filter trees.

Example::

    flt = (
        FilterBuilder()
        .where("/status", "eq", "active")
        .where("/age", "gt", 18)
        .build()
    )
    # → /status eq "active" and /age gt 18

    flt = (
        FilterBuilder()
        .where("/active", "eq", True)
        .and_group()
            .where("/role", "eq", "admin")
            .or_where("/role", "eq", "superuser")
        .end_group()
        .build()
    )
    # → /active eq true and (/role eq "admin" or /role eq "superuser")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .ast import Clause, Filter, Statement, Target
from .operators import Conjunction, FilterOperator


def target(path: Target | str | Sequence[str | int]) -> Target:
    """
    Coerce *path* to a :class:`Target`.

    Strings starting with ``/`` are read as JSON pointers; any other string
    names a top-level field.
    """
    if isinstance(path, Target):
        return path
    if isinstance(path, str):
        if path.startswith("/"):
            return Target.from_json_pointer(path)
        return Target((path,))
    return Target(tuple(path))


class FilterBuilder:
    """
    Fluent builder for composing filter trees.

    ``where`` joins a clause to the previous statement with AND and
    ``or_where`` with OR.  ``and_group()`` / ``or_group()`` open a
    parenthesised sub-filter joined the same way; ``end_group()`` closes
    it.
    """

    def __init__(self) -> None:
        self._statements: list[Statement] = []
        self._stack: list[tuple[Conjunction, list[Statement]]] = []

    # -- leaf clauses --------------------------------------------------------

    def where(
        self,
        attr: Target | str | Sequence[str | int],
        op: FilterOperator | str,
        val: Any = None,
    ) -> FilterBuilder:
        """AND a ``attr op val`` clause onto the current group."""
        return self.add(Clause(target(attr), FilterOperator(op), val))

    def or_where(
        self,
        attr: Target | str | Sequence[str | int],
        op: FilterOperator | str,
        val: Any = None,
    ) -> FilterBuilder:
        """OR a ``attr op val`` clause onto the current group."""
        return self.add(
            Clause(target(attr), FilterOperator(op), val), Conjunction.OR
        )

    def add(
        self,
        value: Clause | Filter,
        conjunction: Conjunction | str = Conjunction.AND,
    ) -> FilterBuilder:
        """Add an already-constructed clause or filter to the current group."""
        self._current_list().append(Statement(value, Conjunction(conjunction)))
        return self

    # -- grouping ------------------------------------------------------------

    def and_group(self) -> FilterBuilder:
        """Open a sub-filter ANDed onto the current group."""
        self._stack.append((Conjunction.AND, []))
        return self

    def or_group(self) -> FilterBuilder:
        """Open a sub-filter ORed onto the current group."""
        self._stack.append((Conjunction.OR, []))
        return self

    def end_group(self) -> FilterBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ValueError("No open group to close")
        conjunction, statements = self._stack.pop()
        if not statements:
            raise ValueError("Cannot create an empty group")
        return self.add(Filter(tuple(statements)), conjunction)

    # -- build ---------------------------------------------------------------

    def build(self) -> Filter:
        """
        Finalise and return the filter.

        Raises:
            ValueError: If groups are still open or nothing was added.
        """
        if self._stack:
            raise ValueError(
                f"{len(self._stack)} group(s) still open; "
                f"call end_group() before build()"
            )
        if not self._statements:
            raise ValueError("No clauses added to builder")
        return Filter(tuple(self._statements))

    def reset(self) -> FilterBuilder:
        """Clear all statements and return ``self`` for reuse."""
        self._statements.clear()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _current_list(self) -> list[Statement]:
        if self._stack:
            return self._stack[-1][1]
        return self._statements
