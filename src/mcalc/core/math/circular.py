"""
Circular — sin, cos, tan, asin, acos, atan, atan2

sin/cos: редукция x mod 2π в (-π, π], затем ряд Тейлора с рекуррентой
    term_{n+1} = -term_n · x² / ((2n+k)(2n+k+1)), k = 2 (sin) или 1 (cos).
asin: прямой гипергеометрический ряд при |x| < 0.5,
    иначе asin(x) = π/2 - 2·asin(√((1-x)/2)).
atan: три режима — прямой ряд для малых x, π/4 + atan((x-1)/(x+1))
    при (x-1)² < 2, иначе π/2 - atan(1/x).

Функции с префиксом "_" работают в переданном рабочем контексте.
"""

from typing import Final, Iterator, Optional

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.logging_config import get_logger
from mcalc.core.math.component import Component, NumberLike
from mcalc.core.math.constants import HALF, ONE, TWO, ZERO, pi
from mcalc.core.math.exponential import sqrt
from mcalc.core.math.numerical_safeguards import (
    finalize,
    sum_series,
    validate_in_range,
    working_context,
)

logger = get_logger(__name__)

# Граница прямого ряда atan: дальше сходимость медленная
ATAN_SERIES_LIMIT: Final[Component] = HALF

_MINUS_ONE: Final[Component] = ONE.neg()


# =============================================================================
# REDUCTION & SERIES
# =============================================================================


def _reduce(x: Component, context: MathContext) -> Component:
    """x mod 2π, перенесённый в (-π, π]."""
    # Каждая цифра целой части x съедает цифру точности 2π
    integer_digits = len(x.integer.lstrip("-"))
    precise = context.with_precision(context.precision + integer_digits)

    half_turn = pi(precise)
    full_turn = half_turn.mul(TWO, precise)
    r = x.mod(full_turn, precise)
    if r.more_than(half_turn):
        r = r.sub(full_turn, precise)
    return r.round(context)


def _sin_terms(x: Component, context: MathContext) -> Iterator[Component]:
    x_squared = x.mul(x, context)
    term = x
    n = 0
    while True:
        yield term
        term = term.mul(x_squared, context).neg().div(
            Component.from_int((2 * n + 2) * (2 * n + 3)), context
        )
        n += 1


def _cos_terms(x: Component, context: MathContext) -> Iterator[Component]:
    x_squared = x.mul(x, context)
    term = ONE
    n = 0
    while True:
        yield term
        term = term.mul(x_squared, context).neg().div(
            Component.from_int((2 * n + 1) * (2 * n + 2)), context
        )
        n += 1


def _sin(x: Component, context: MathContext) -> Component:
    return sum_series(_sin_terms(_reduce(x, context), context), context, "sin")


def _cos(x: Component, context: MathContext) -> Component:
    return sum_series(_cos_terms(_reduce(x, context), context), context, "cos")


def _asin_terms(x: Component, context: MathContext) -> Iterator[Component]:
    # (2n-1)!!/(2^n·n!) · x^(2n+1) накапливается в coefficient
    x_squared = x.mul(x, context)
    coefficient = x
    n = 0
    while True:
        yield coefficient.div(Component.from_int(2 * n + 1), context)
        coefficient = (
            coefficient.mul(x_squared, context)
            .mul(Component.from_int(2 * n + 1), context)
            .div(Component.from_int(2 * n + 2), context)
        )
        n += 1


def _asin_series(x: Component, context: MathContext) -> Component:
    return sum_series(_asin_terms(x, context), context, "asin")


def _atan_terms(x: Component, context: MathContext) -> Iterator[Component]:
    minus_x_squared = x.mul(x, context).neg()
    power = x
    n = 0
    while True:
        yield power.div(Component.from_int(2 * n + 1), context)
        power = power.mul(minus_x_squared, context)
        n += 1


def _half_pi(context: MathContext) -> Component:
    return pi(context).mul(HALF, context)


def _asin(x: Component, context: MathContext) -> Component:
    """asin(x), |x| <= 1."""
    if x.sign < 0:
        return _asin(x.neg(), context).neg()
    if x.less_than(HALF):
        return _asin_series(x, context)
    s = sqrt(ONE.sub(x, context).mul(HALF, context), context)
    return _half_pi(context).sub(_asin_series(s, context).mul(TWO, context), context)


def _acos(x: Component, context: MathContext) -> Component:
    """acos(x), |x| <= 1."""
    if x.abs().less_than(HALF):
        return _half_pi(context).sub(_asin_series(x, context), context)
    s = sqrt(ONE.sub(x, context).mul(HALF, context), context)
    return _asin(s, context).mul(TWO, context)


def _atan(x: Component, context: MathContext) -> Component:
    if x.sign < 0:
        return _atan(x.neg(), context).neg()
    if x.is_zero():
        return ZERO
    if not x.more_than(ATAN_SERIES_LIMIT):
        return sum_series(_atan_terms(x, context), context, "atan")

    shifted = x.sub(ONE, context)
    if shifted.mul(shifted, context).less_than(TWO):
        quarter_pi = pi(context).mul(HALF, context).mul(HALF, context)
        return quarter_pi.add(_atan(shifted.div(x.add(ONE, context), context), context), context)

    return _half_pi(context).sub(_atan(ONE.div(x, context), context), context)


def _atan2(y: Component, x: Component, context: MathContext) -> Component:
    if x.is_zero():
        if y.is_zero():
            raise NumericError(
                NumericErrorKind.UNDEFINED_VALUE, "atan2 is undefined for x = y = 0"
            )
        half_pi = _half_pi(context)
        return half_pi if y.sign > 0 else half_pi.neg()

    angle = _atan(y.div(x, context), context)
    if x.sign > 0:
        return angle
    if y.sign >= 0:
        return angle.add(pi(context), context)
    return angle.sub(pi(context), context)


# =============================================================================
# PUBLIC API
# =============================================================================


def sin(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Синус.

    Если редуцированный аргумент равен ±π с точностью контекста,
    возвращается точный ноль.
    """
    context = resolve_context(context)
    working = working_context(context)
    r = _reduce(Component.create(x), working)
    if r.abs().equals(pi(working), context):
        return ZERO
    return finalize(sum_series(_sin_terms(r, working), working, "sin"), context)


def cos(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Косинус."""
    context = resolve_context(context)
    working = working_context(context)
    return finalize(_cos(Component.create(x), working), context)


def tan(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Тангенс sin/cos в удвоенной точности.

    Вблизи полюса |cos x| = 10^-k, и частное теряет около 2k цифр:
    рабочая точность увеличивается на 2k, cos x пересчитывается.

    Raises:
        NumericError: UNDEFINED_VALUE, если cos(x) обращается в ноль
    """
    context = resolve_context(context)
    working = working_context(context)
    x = Component.create(x)
    cosine = _cos(x, working)
    if cosine.is_zero():
        raise NumericError(NumericErrorKind.UNDEFINED_VALUE, f"tan is undefined for x={x}")

    # ведущие нули после точки у |cos x|
    leading_zeros = cosine.precision - len(str(abs(cosine.as_big_int)))
    if leading_zeros > 0:
        working = working.with_precision(working.precision + 2 * leading_zeros)
        logger.debug("tan near a pole: working precision raised to %d", working.precision)
        cosine = _cos(x, working)
    return finalize(_sin(x, working).div(cosine, working), context)


def asin(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Арксинус, x ∈ [-1, 1].

    Raises:
        NumericError: UNDEFINED_VALUE при |x| > 1
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_in_range(x, "x", "asin", _MINUS_ONE, ONE)
    return finalize(_asin(x, working_context(context)), context)


def acos(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Арккосинус, x ∈ [-1, 1].

    Raises:
        NumericError: UNDEFINED_VALUE при |x| > 1
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_in_range(x, "x", "acos", _MINUS_ONE, ONE)
    return finalize(_acos(x, working_context(context)), context)


def atan(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """Арктангенс."""
    context = resolve_context(context)
    return finalize(_atan(Component.create(x), working_context(context)), context)


def atan2(y: NumberLike, x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Угол точки (x, y) в (-π, π].

    Raises:
        NumericError: UNDEFINED_VALUE при x = y = 0
    """
    context = resolve_context(context)
    working = working_context(context)
    return finalize(_atan2(Component.create(y), Component.create(x), working), context)
