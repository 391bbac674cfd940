from enum import Enum


class FilterOperator(str, Enum):
    """Comparison operators a filter clause may use."""

    # Standard comparison
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"

    # Pattern matching
    LIKE = "like"
    NLIKE = "nlike"

    # Ranges and sets
    BETWEEN = "between"
    NBETWEEN = "nbetween"
    IN = "in"
    NIN = "nin"


class Conjunction(str, Enum):
    """Logical connective joining a statement to the one before it."""

    AND = "and"
    OR = "or"


# Operators whose meaning flips when subject and object trade places.
INVERSE_OPERATORS: dict[FilterOperator, FilterOperator] = {
    FilterOperator.GT: FilterOperator.LT,
    FilterOperator.GTE: FilterOperator.LTE,
    FilterOperator.LT: FilterOperator.GT,
    FilterOperator.LTE: FilterOperator.GTE,
}
