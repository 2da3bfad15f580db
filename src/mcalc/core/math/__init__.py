"""
Core math modules для mcalc

Точная десятичная арифметика, элементарные, тригонометрические
и гиперболические функции, гиперкомплексные числа.
"""

# Decimal representation & arithmetic
from mcalc.core.math.component import Component

# Constants
from mcalc.core.math.constants import (
    E,
    EIGHT,
    FIVE,
    FOUR,
    HALF,
    LN10,
    LN2,
    NINE,
    ONE,
    PI,
    SEVEN,
    SIX,
    TEN,
    THREE,
    TWO,
    ZERO,
    e,
    ln2,
    ln10,
    pi,
)

# Numerical Safeguards
from mcalc.core.math.numerical_safeguards import (
    GUARD_DIGITS,
    MAX_NEWTON_ITERATIONS,
    MAX_SERIES_TERMS,
    working_context,
)

# Hypercomplex numbers
from mcalc.core.math.bignum import BigNum

# Numerical utilities
from mcalc.core.math.numerical import kronecker, levi_civita, newton_raphson

# Generic functions (int/float/Component/BigNum)
from mcalc.core.math.functions import (
    abs,
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    ceil,
    cos,
    cosh,
    exp,
    floor,
    ln,
    log,
    neg,
    power,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

__all__ = [
    # Types
    "BigNum",
    "Component",
    # Constants
    "E",
    "EIGHT",
    "FIVE",
    "FOUR",
    "HALF",
    "LN10",
    "LN2",
    "NINE",
    "ONE",
    "PI",
    "SEVEN",
    "SIX",
    "TEN",
    "THREE",
    "TWO",
    "ZERO",
    # Constant providers
    "e",
    "ln10",
    "ln2",
    "pi",
    # Numerical Safeguards
    "GUARD_DIGITS",
    "MAX_NEWTON_ITERATIONS",
    "MAX_SERIES_TERMS",
    "working_context",
    # Numerical utilities
    "kronecker",
    "levi_civita",
    "newton_raphson",
    # Generic functions
    "abs",
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "ceil",
    "cos",
    "cosh",
    "exp",
    "floor",
    "ln",
    "log",
    "neg",
    "power",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
]
