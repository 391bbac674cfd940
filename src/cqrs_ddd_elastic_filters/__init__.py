from .ast import Clause, Filter, Like, Range, Statement, Target
from .builder import FilterBuilder, target
from .convert import convert
from .exceptions import (
    ConfigError,
    ConvertError,
    DeniedFieldError,
    FilterConversionError,
    InvalidTargetError,
    NonallowedFieldError,
    RequiredFieldError,
)
from .operators import Conjunction, FilterOperator
from .paths import FieldResolver
from .policy import UNRESTRICTED_POLICY, FieldPolicy
from .query_builder import CompiledQuery, ElasticQueryBuilder

__all__ = [
    # Filter tree model
    "FilterOperator",
    "Conjunction",
    "Target",
    "Range",
    "Like",
    "Clause",
    "Statement",
    "Filter",
    # Builder
    "FilterBuilder",
    "target",
    # Governance
    "FieldPolicy",
    "UNRESTRICTED_POLICY",
    # Conversion
    "convert",
    "CompiledQuery",
    "ElasticQueryBuilder",
    "FieldResolver",
    # Exceptions
    "FilterConversionError",
    "ConfigError",
    "ConvertError",
    "InvalidTargetError",
    "DeniedFieldError",
    "NonallowedFieldError",
    "RequiredFieldError",
]
