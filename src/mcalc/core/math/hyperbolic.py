"""
Hyperbolic — sinh, cosh, tanh, asinh, acosh, atanh

sinh/cosh — собственные ряды (как sin/cos, без знакочередования).
Обратные функции выражаются через ln:
    asinh(x) = ln(x + √(x²+1))
    acosh(x) = ln(x + √(x²-1)),  x >= 1
    atanh(x) = ½(ln(1+x) - ln(1-x)),  |x| < 1
"""

from typing import Iterator, Optional

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.math.component import Component, NumberLike
from mcalc.core.math.constants import HALF, ONE
from mcalc.core.math.exponential import _ln, sqrt
from mcalc.core.math.numerical_safeguards import (
    finalize,
    sum_series,
    validate_in_range,
    working_context,
)


def _sinh_terms(x: Component, context: MathContext) -> Iterator[Component]:
    x_squared = x.mul(x, context)
    term = x
    n = 0
    while True:
        yield term
        term = term.mul(x_squared, context).div(
            Component.from_int((2 * n + 2) * (2 * n + 3)), context
        )
        n += 1


def _cosh_terms(x: Component, context: MathContext) -> Iterator[Component]:
    x_squared = x.mul(x, context)
    term = ONE
    n = 0
    while True:
        yield term
        term = term.mul(x_squared, context).div(
            Component.from_int((2 * n + 1) * (2 * n + 2)), context
        )
        n += 1


def _sinh(x: Component, context: MathContext) -> Component:
    return sum_series(_sinh_terms(x, context), context, "sinh")


def _cosh(x: Component, context: MathContext) -> Component:
    return sum_series(_cosh_terms(x, context), context, "cosh")


def _tanh(x: Component, context: MathContext) -> Component:
    if x.sign < 0:
        return _tanh(x.neg(), context).neg()
    return _sinh(x, context).div(_cosh(x, context), context)


def _asinh(x: Component, context: MathContext) -> Component:
    if x.sign < 0:
        return _asinh(x.neg(), context).neg()
    root = sqrt(x.mul(x, context).add(ONE, context), context)
    return _ln(x.add(root, context), context)


def _acosh(x: Component, context: MathContext) -> Component:
    root = sqrt(x.mul(x, context).sub(ONE, context), context)
    return _ln(x.add(root, context), context)


def _atanh(x: Component, context: MathContext) -> Component:
    difference = _ln(ONE.add(x, context), context).sub(_ln(ONE.sub(x, context), context), context)
    return difference.mul(HALF, context)


# =============================================================================
# PUBLIC API
# =============================================================================


def sinh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Гиперболический синус."""
    context = resolve_context(context)
    return finalize(_sinh(Component.create(x), working_context(context)), context)


def cosh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Гиперболический косинус."""
    context = resolve_context(context)
    return finalize(_cosh(Component.create(x), working_context(context)), context)


def tanh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Гиперболический тангенс, tanh(-x) = -tanh(x)."""
    context = resolve_context(context)
    return finalize(_tanh(Component.create(x), working_context(context)), context)


def asinh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Обратный гиперболический синус."""
    context = resolve_context(context)
    return finalize(_asinh(Component.create(x), working_context(context)), context)


def acosh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Обратный гиперболический косинус.

    Raises:
        NumericError: UNDEFINED_VALUE при x < 1
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_in_range(x, "x", "acosh", lower=ONE)
    return finalize(_acosh(x, working_context(context)), context)


def atanh(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Обратный гиперболический тангенс.

    Raises:
        NumericError: UNDEFINED_VALUE при |x| >= 1
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_in_range(x, "x", "atanh", ONE.neg(), ONE, inclusive=False)
    return finalize(_atanh(x, working_context(context)), context)
