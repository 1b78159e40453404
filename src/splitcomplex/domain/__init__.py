"""
Domain model: the SplitComplex value type and its construction API.
"""

from src.splitcomplex.domain.split_complex import (
    J,
    ONE,
    UNIT_SYMBOL,
    ZERO,
    SplitComplex,
    equals,
    format_split_complex,
    inf,
    is_inf,
    is_nan,
    nan,
    new,
)

__all__ = [
    # Model
    "SplitComplex",
    # Constants
    "ZERO",
    "ONE",
    "J",
    "UNIT_SYMBOL",
    # Construction
    "new",
    "inf",
    "nan",
    # Equality & classification
    "equals",
    "is_inf",
    "is_nan",
    # Formatting
    "format_split_complex",
]
