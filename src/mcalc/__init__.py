"""
mcalc — arbitrary-precision decimal arithmetic.

Exact decimal values (Component), Cayley-Dickson hypercomplex numbers
(BigNum), eight rounding modes and a configurable MathContext.

Examples:
    >>> from mcalc import Component
    >>> str(Component.create("0.1") + Component.create("0.2"))
    '0.3'
"""

import logging

from mcalc.core.domain import (
    DEFAULT_CONTEXT,
    HIGH_PRECISION,
    HIGH_PRECISION_SCIENTIFIC,
    SCIENTIFIC,
    MathContext,
    RoundingMode,
    context_from_env,
    get_default_context,
    local_context,
    set_default_context,
)
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.logging_config import setup_logging
from mcalc.core.math import (
    E,
    EIGHT,
    FIVE,
    FOUR,
    LN10,
    LN2,
    NINE,
    ONE,
    PI,
    SEVEN,
    SIX,
    THREE,
    TWO,
    ZERO,
    BigNum,
    Component,
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

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Context
    "DEFAULT_CONTEXT",
    "HIGH_PRECISION",
    "HIGH_PRECISION_SCIENTIFIC",
    "SCIENTIFIC",
    "MathContext",
    "RoundingMode",
    "context_from_env",
    "get_default_context",
    "local_context",
    "set_default_context",
    # Errors
    "NumericError",
    "NumericErrorKind",
    # Logging
    "setup_logging",
    # Types
    "BigNum",
    "Component",
    # Constants
    "E",
    "EIGHT",
    "FIVE",
    "FOUR",
    "LN10",
    "LN2",
    "NINE",
    "ONE",
    "PI",
    "SEVEN",
    "SIX",
    "THREE",
    "TWO",
    "ZERO",
    # Functions
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
