"""Elasticsearch operator compilers for filter clauses."""

from __future__ import annotations

from .fragments import exists, negate
from .null import compile_null
from .script import compile_literal_script, compile_target_script, script_operator
from .set import check_set_operand, compile_set
from .standard import check_range_operand, compile_standard
from .string import check_pattern_operand, compile_string, like_to_regexp

__all__ = [
    "compile_null",
    "compile_standard",
    "compile_string",
    "compile_set",
    "compile_target_script",
    "compile_literal_script",
    "check_range_operand",
    "check_pattern_operand",
    "check_set_operand",
    "script_operator",
    "like_to_regexp",
    "exists",
    "negate",
]
