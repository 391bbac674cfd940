"""Unit tests for the Elasticsearch operator compilers."""

from __future__ import annotations

import pytest

from cqrs_ddd_elastic_filters import ConvertError, Like, Range
from cqrs_ddd_elastic_filters.operators import FilterOperator
from cqrs_ddd_elastic_filters.operators_es import (
    check_pattern_operand,
    check_range_operand,
    check_set_operand,
    compile_literal_script,
    compile_null,
    compile_set,
    compile_standard,
    compile_string,
    compile_target_script,
    exists,
    like_to_regexp,
    negate,
    script_operator,
)


class TestFragments:
    def test_negate(self):
        assert negate({"term": {"a": 1}}) == {"bool": {"must_not": {"term": {"a": 1}}}}

    def test_exists(self):
        assert exists("a.b") == {"exists": {"field": "a.b"}}


class TestNullOperators:
    def test_skips_non_null_values(self):
        assert compile_null("f", FilterOperator.EQ, 0) is None

    def test_skips_non_comparison_operators(self):
        assert compile_null("f", FilterOperator.IN, None) is None

    def test_eq_null(self):
        assert compile_null("f", FilterOperator.EQ, None) == negate(exists("f"))

    def test_gte_null(self):
        assert compile_null("f", FilterOperator.GTE, None) == exists("f")


class TestStandardOperators:
    def test_eq(self):
        assert compile_standard("f", FilterOperator.EQ, "x") == {"term": {"f": "x"}}

    def test_neq(self):
        assert compile_standard("f", FilterOperator.NEQ, "x") == negate(
            {"term": {"f": "x"}}
        )

    def test_lte(self):
        assert compile_standard("f", FilterOperator.LTE, 5) == {
            "range": {"f": {"lte": 5}}
        }

    def test_between(self):
        assert compile_standard("f", FilterOperator.BETWEEN, Range(1, 5)) == {
            "range": {"f": {"gte": 1, "lte": 5}}
        }

    def test_between_rejects_non_range(self):
        with pytest.raises(ConvertError):
            compile_standard("f", FilterOperator.NBETWEEN, (1, 5))

    def test_skips_other_operators(self):
        assert compile_standard("f", FilterOperator.LIKE, Like("x")) is None


class TestStringOperators:
    def test_like_to_regexp_strips_anchors(self):
        assert like_to_regexp(Like("ab_")) == "ab.{1}"

    def test_like(self):
        assert compile_string("f", FilterOperator.LIKE, Like("a*")) == {
            "regexp": {"f": "a.*"}
        }

    def test_skips_other_operators(self):
        assert compile_string("f", FilterOperator.EQ, "a") is None


class TestSetOperators:
    def test_in_copies_values(self):
        values = ["a", "b"]
        fragment = compile_set("f", FilterOperator.IN, values)
        assert fragment == {"terms": {"f": ["a", "b"]}}
        assert fragment["terms"]["f"] is not values

    def test_nin(self):
        expected = negate({"terms": {"f": [1]}})
        assert compile_set("f", FilterOperator.NIN, [1]) == expected

    def test_rejects_scalar(self):
        with pytest.raises(ConvertError):
            compile_set("f", FilterOperator.IN, 1)

    def test_skips_other_operators(self):
        assert compile_set("f", FilterOperator.EQ, [1]) is None


class TestScriptOperators:
    def test_script_operator(self):
        assert script_operator(FilterOperator.GTE) == ">="

    @pytest.mark.parametrize(
        "op",
        [
            FilterOperator.LIKE,
            FilterOperator.NLIKE,
            FilterOperator.BETWEEN,
            FilterOperator.NBETWEEN,
            FilterOperator.IN,
            FilterOperator.NIN,
        ],
    )
    def test_script_operator_rejects_non_comparisons(self, op):
        with pytest.raises(ConvertError):
            script_operator(op)

    def test_target_script(self):
        assert compile_target_script("a", FilterOperator.LT, "b") == {
            "script": {"script": "doc['a'].value < doc['b'].value"}
        }

    def test_literal_script_passes_params(self):
        fragment = compile_literal_script(FilterOperator.EQ, "x'; drop", None)
        assert fragment["script"]["script"]["source"] == (
            "params.subject == params.object"
        )
        assert fragment["script"]["script"]["params"] == {
            "subject": "x'; drop",
            "object": None,
        }


class TestOperandChecks:
    @pytest.mark.parametrize(
        ("check", "op", "val"),
        [
            (check_range_operand, FilterOperator.BETWEEN, Range(1, 2)),
            (check_range_operand, FilterOperator.EQ, [1, 2]),
            (check_pattern_operand, FilterOperator.NLIKE, Like("a*")),
            (check_pattern_operand, FilterOperator.IN, "a*"),
            (check_set_operand, FilterOperator.NIN, (1, 2)),
            (check_set_operand, FilterOperator.LIKE, "abc"),
        ],
    )
    def test_accepts_or_ignores(self, check, op, val):
        assert check(op, val) is None

    @pytest.mark.parametrize(
        ("check", "op", "val"),
        [
            (check_range_operand, FilterOperator.NBETWEEN, (1, 2)),
            (check_pattern_operand, FilterOperator.LIKE, "a*"),
            (check_pattern_operand, FilterOperator.LIKE, Like(None)),
            (check_set_operand, FilterOperator.IN, "abc"),
            (check_set_operand, FilterOperator.NIN, None),
        ],
    )
    def test_rejects_malformed(self, check, op, val):
        with pytest.raises(ConvertError):
            check(op, val)
