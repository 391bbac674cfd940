"""Elasticsearch bool-query builder from filter trees."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .ast import Clause, Filter, Statement, Target
from .exceptions import ConvertError, RequiredFieldError
from .operators import INVERSE_OPERATORS, Conjunction, FilterOperator
from .operators_es import (
    check_pattern_operand,
    check_range_operand,
    check_set_operand,
    compile_literal_script,
    compile_null,
    compile_set,
    compile_standard,
    compile_string,
    compile_target_script,
)
from .paths import FieldResolver
from .policy import UNRESTRICTED_POLICY, FieldPolicy

logger = logging.getLogger(__name__)

_COMPILERS = [
    compile_null,
    compile_standard,
    compile_string,
    compile_set,
]

# Operand shapes are checked before the field is resolved; a malformed
# operand outranks governance and path errors.
_OPERAND_CHECKS = [
    check_range_operand,
    check_pattern_operand,
    check_set_operand,
]


@dataclass(frozen=True)
class CompiledQuery:
    """
    Result of converting a filter.

    Attributes:
        fields: Distinct top-level fields the filter references, in the
            order they were first encountered.
        value: The query document, ``{"filter": {"bool": {...}}}``.
    """

    fields: list[str] = field(default_factory=list)
    value: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"fields": list(self.fields), "value": self.value}


def _operator(clause: Clause) -> FilterOperator:
    try:
        return FilterOperator(clause.operator)
    except (TypeError, ValueError):
        raise ConvertError(f"Unknown operator: {clause.operator!r}") from None


def normalize_clause(clause: Clause) -> Clause:
    """
    Move a target object into the subject position.

    Ordering operators are inverted so the comparison keeps its meaning
    (``5 gt /age`` becomes ``/age lt 5``); the rest are symmetric.
    """
    if not isinstance(clause.object, Target):
        return clause
    op = _operator(clause)
    return Clause(clause.object, INVERSE_OPERATORS.get(op, op), clause.subject)


def _compile_clause(clause: Clause, resolver: FieldResolver) -> dict[str, Any]:
    """Compile a single comparison to a query fragment."""
    subject_is_target = isinstance(clause.subject, Target)
    object_is_target = isinstance(clause.object, Target)

    if subject_is_target and object_is_target:
        subject = resolver.resolve(clause.subject)
        obj = resolver.resolve(clause.object)
        return compile_target_script(subject, _operator(clause), obj)

    if not subject_is_target and not object_is_target:
        return compile_literal_script(_operator(clause), clause.subject, clause.object)

    clause = normalize_clause(clause)
    op = _operator(clause)
    for check in _OPERAND_CHECKS:
        check(op, clause.object)
    field_key = resolver.resolve(clause.subject)
    for compiler in _COMPILERS:
        result = compiler(field_key, op, clause.object)
        if result is not None:
            return result
    raise ConvertError(f"Unknown operator: {clause.operator!r}")


def _conjunction(statement: Statement) -> Conjunction:
    try:
        return Conjunction(statement.conjunction)
    except (TypeError, ValueError):
        raise ConvertError(
            f"Unknown conjunction: {statement.conjunction!r}"
        ) from None


def _compile_filter(filter_: Filter, resolver: FieldResolver) -> dict[str, Any]:
    """
    Recursively compile a filter to a bool query.

    AND binds tighter than OR: each OR starts a new conjunction group,
    and the groups are joined under ``should``.
    """
    groups: list[dict[str, Any]] = []
    must: list[dict[str, Any]] = []

    for statement in filter_.statements:
        if not isinstance(statement, Statement):
            raise ConvertError()

        if _conjunction(statement) == Conjunction.OR and must:
            groups.append({"bool": {"must": must}})
            must = []

        value = statement.value
        if isinstance(value, Filter):
            must.append(_compile_filter(value, resolver))
            continue
        if not isinstance(value, Clause):
            raise ConvertError()
        must.append(_compile_clause(value, resolver))

    if not groups:
        return {"bool": {"must": must}}

    groups.append({"bool": {"must": must}})
    return {"bool": {"should": groups}}


class ElasticQueryBuilder:
    """
    Compiles filter trees to Elasticsearch query documents.

    The builder only holds its policy; every :meth:`build` call gets its
    own field-discovery state, so one builder may serve many filters.
    """

    def __init__(self, policy: FieldPolicy | None = None) -> None:
        self.policy = policy if policy is not None else UNRESTRICTED_POLICY

    def build(self, filter_: Filter) -> CompiledQuery:
        """
        Build the query document for *filter_*.

        Raises:
            ConvertError: The filter tree is malformed.
            InvalidTargetError: A target path cannot be used as a field key.
            DeniedFieldError: A field on the deny list is referenced.
            NonallowedFieldError: A field outside the allow list is referenced.
            RequiredFieldError: A required field is never referenced.
        """
        resolver = FieldResolver(self.policy)
        value = {"filter": _compile_filter(filter_, resolver)}
        self._validate_required(resolver)
        logger.debug(
            "Compiled filter with %d statement(s) referencing %s",
            len(filter_.statements),
            resolver.fields,
        )
        return CompiledQuery(fields=list(resolver.fields), value=value)

    def _validate_required(self, resolver: FieldResolver) -> None:
        for required in self.policy.required_fields():
            if not resolver.has_field(required):
                raise RequiredFieldError(required)
