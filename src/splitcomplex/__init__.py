"""
splitcomplex — split-complex number arithmetic

Split-complex numbers z = a + b·j with j² = +1: an immutable value type,
its algebra (with zero divisors, so division is partial), idempotents and
hyperbolic polar coordinates.
"""

import logging as _logging

# Tolerance primitives
from src.splitcomplex.math.numerical_safeguards import (
    EPS_SPLIT_COMPARE,
    is_close,
    not_equals,
)

# Value model & construction
from src.splitcomplex.domain.split_complex import (
    J,
    ONE,
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

# Arithmetic
from src.splitcomplex.math.arithmetic import (
    ZeroDivisorError,
    add,
    conjugate,
    divide,
    idempotent,
    invert,
    is_zero_divisor,
    multiply,
    negate,
    quadrance,
    scale,
    subtract,
)

# Curvilinear coordinates
from src.splitcomplex.math.curvilinear import (
    CurvilinearCoordinates,
    curv,
    rect,
)

# Silent unless the host application configures logging
_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    # Tolerance
    "EPS_SPLIT_COMPARE",
    "is_close",
    "not_equals",
    # Model
    "SplitComplex",
    "ZERO",
    "ONE",
    "J",
    "new",
    "inf",
    "nan",
    "equals",
    "is_inf",
    "is_nan",
    "format_split_complex",
    # Arithmetic — Exceptions
    "ZeroDivisorError",
    # Arithmetic — Functions
    "scale",
    "negate",
    "conjugate",
    "add",
    "subtract",
    "multiply",
    "quadrance",
    "is_zero_divisor",
    "invert",
    "divide",
    "idempotent",
    # Curvilinear
    "CurvilinearCoordinates",
    "rect",
    "curv",
]
