"""
Core math modules для numera

Математические примитивы над raw int: подмножества, предикаты, точная
checked-арифметика, матрица операторов и приведение дробей.
Модули этого пакета не зависят от numera.core.domain.
"""

# Sets & widths
from numera.core.math.sets import (
    ALL_WIDTHS,
    Storage,
    Subset,
    Width,
    storage_range,
    subset_bounds,
)

# Invariant Predicate
from numera.core.math.predicates import (
    check_raw,
    is_raw_int,
    validate,
)

# Checked arithmetic
from numera.core.math.checked import (
    div_trunc,
    fit_power,
    fit_result,
    guard_division,
    negate_signed,
    rem_trunc,
)

# Rounding division
from numera.core.math.rounding import (
    Rounding,
    divide,
    remainder,
)

# Operator Resolver
from numera.core.math.resolver import (
    Operator,
    OperatorRule,
    evaluate,
    resolve,
    supported_rules,
)

# Number theory
from numera.core.math.number_theory import (
    exact_quotient,
    gcd,
    is_even,
    is_multiple_of,
    is_square,
    lcm,
    sqrt_ceil,
    sqrt_floor,
    sqrt_round,
)

# Rational Reducer
from numera.core.math.reducer import (
    fit_parts,
    is_reduced_parts,
    lowest_terms,
    reduce_parts,
)

__all__ = [
    # Sets — Types
    "Storage",
    "Subset",
    "Width",
    # Sets — Constants
    "ALL_WIDTHS",
    # Sets — Functions
    "storage_range",
    "subset_bounds",
    # Predicates
    "check_raw",
    "is_raw_int",
    "validate",
    # Checked arithmetic
    "div_trunc",
    "fit_power",
    "fit_result",
    "guard_division",
    "negate_signed",
    "rem_trunc",
    # Rounding division
    "Rounding",
    "divide",
    "remainder",
    # Resolver — Types
    "Operator",
    "OperatorRule",
    # Resolver — Functions
    "evaluate",
    "resolve",
    "supported_rules",
    # Number theory
    "exact_quotient",
    "gcd",
    "is_even",
    "is_multiple_of",
    "is_square",
    "lcm",
    "sqrt_ceil",
    "sqrt_floor",
    "sqrt_round",
    # Reducer
    "fit_parts",
    "is_reduced_parts",
    "lowest_terms",
    "reduce_parts",
]
