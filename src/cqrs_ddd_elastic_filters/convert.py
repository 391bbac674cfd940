from __future__ import annotations

from .ast import Filter
from .policy import UNRESTRICTED_POLICY, FieldPolicy
from .query_builder import CompiledQuery, ElasticQueryBuilder


def convert(filter_: Filter, policy: FieldPolicy | None = None) -> CompiledQuery:
    """
    Convert a filter tree to an Elasticsearch bool-query document.

    Example::

        result = convert(
            FilterBuilder().where("/status", "eq", "active").build(),
            FieldPolicy(deny=["secret"]),
        )
        result.value
        # {"filter": {"bool": {"must": [{"term": {"status": "active"}}]}}}
        result.fields  # ["status"]

    Raises:
        TypeError: *filter_* is not a :class:`Filter` or *policy* is not a
            :class:`FieldPolicy`.
        FilterConversionError: Any conversion failure; see
            :meth:`ElasticQueryBuilder.build`.
    """
    if not isinstance(filter_, Filter):
        raise TypeError('Argument "filter_" must be an instance of Filter')
    if policy is None:
        policy = UNRESTRICTED_POLICY
    elif not isinstance(policy, FieldPolicy):
        raise TypeError('Argument "policy" must be an instance of FieldPolicy')
    return ElasticQueryBuilder(policy).build(filter_)
