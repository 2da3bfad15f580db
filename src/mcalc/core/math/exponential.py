"""
Exponential — exp, ln, log, power, sqrt

Все функции принимают (x, context) и считают в рабочем контексте
(2·precision + GUARD_DIGITS, усечение), округляя итог до контекста вызывающего.

exp: редукция x = k·ln2 + r, |r| <= ln2/2; ряд Тейлора по r; умножение на 2^k.
ln:  x = 2^k·m, m² ∈ [0.5, 2]; ln m = 2·Σ s^(2n+1)/(2n+1), s = (m-1)/(m+1).

Функции с префиксом "_" работают прямо в переданном рабочем контексте
и не округляют результат; их используют circular/hyperbolic.
"""

import math
from typing import Iterator, Optional

from mcalc.core.domain.context import MathContext, RoundingMode, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.component import Component, NumberLike
from mcalc.core.math.constants import HALF, ONE, TWO, ZERO, ln2, ln10
from mcalc.core.math.numerical_safeguards import (
    exact_context,
    finalize,
    sum_series,
    validate_non_negative,
    validate_positive,
    working_context,
)

# log10(2) с запасом: число десятичных цифр в 2^k не больше k·LOG10_2 + 1
_LOG10_2_NUM = 30103
_LOG10_2_DEN = 100000


# =============================================================================
# EXP
# =============================================================================


def _exp_terms(r: Component, context: MathContext) -> Iterator[Component]:
    term = ONE
    n = 0
    while True:
        yield term
        n += 1
        term = term.mul(r, context).div(Component.from_int(n), context)


def _exp(x: Component, context: MathContext) -> Component:
    """exp(x) в рабочем контексте context (режим DOWN)."""
    if x.is_zero():
        return ONE

    nearest = MathContext(precision=0, rounding=RoundingMode.HALF_UP)
    k = int(x.div(ln2(context), MathContext(precision=1, rounding=RoundingMode.DOWN)).round(nearest))

    extra = k * _LOG10_2_NUM // _LOG10_2_DEN + 2 if k > 0 else 0
    reduced = context.with_precision(context.precision + extra)
    precise = context.with_precision(reduced.precision + len(str(abs(k))) + 1)

    log2 = ln2(precise)
    half_log2 = log2.mul(HALF, precise)
    r = x.sub(log2.mul(Component.from_int(k), precise), precise)
    while r.more_than(half_log2):
        k += 1
        r = r.sub(log2, precise)
    while r.less_than(half_log2.neg()):
        k -= 1
        r = r.add(log2, precise)

    result = sum_series(_exp_terms(r.round(reduced), reduced), reduced, "exp")

    if k > 0:
        result = result.mul(Component.from_int(2**k), reduced)
    elif k < 0:
        result = result.div(Component.from_int(2 ** (-k)), reduced)

    return result.round(context)


def exp(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Экспонента e^x.

    Examples:
        >>> from mcalc.core.domain.context import MathContext, RoundingMode
        >>> str(exp(1, MathContext(precision=10, rounding=RoundingMode.HALF_UP)))
        '2.7182818285'
    """
    context = resolve_context(context)
    x = Component.create(x)
    if x.is_zero():
        return ONE
    return finalize(_exp(x, working_context(context)), context)


# =============================================================================
# LN / LOG
# =============================================================================


def _square(value: Component) -> Component:
    return value.mul(value, exact_context(value, value))


def _ln_terms(s: Component, context: MathContext) -> Iterator[Component]:
    s_squared = s.mul(s, context)
    power = s
    n = 0
    while True:
        yield power.div(Component.from_int(2 * n + 1), context)
        power = power.mul(s_squared, context)
        n += 1


def _ln(x: Component, context: MathContext) -> Component:
    """ln(x), x > 0, в рабочем контексте context."""
    if x == ONE:
        return ZERO

    # Точное деление/умножение на 2 до (1+f)² ∈ [0.5, 2]
    k = 0
    m = x
    while _square(m).more_than(TWO):
        m = m.mul(HALF, exact_context(m, HALF))
        k += 1
    while _square(m).less_than(HALF):
        m = m.mul(TWO, exact_context(m))
        k -= 1

    f = m.round(context).sub(ONE, context)
    s = f.div(TWO.add(f, context), context)
    series = sum_series(_ln_terms(s, context), context, "ln").mul(TWO, context)

    if k == 0:
        return series

    precise = context.with_precision(context.precision + len(str(abs(k))) + 1)
    scaled = ln2(precise).mul(Component.from_int(k), precise)
    return scaled.add(series, context)


def ln(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Натуральный логарифм.

    Raises:
        NumericError: UNDEFINED_VALUE при x <= 0
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_positive(x, "x", "ln")
    if x == ONE:
        return ZERO
    return finalize(_ln(x, working_context(context)), context)


def log(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Десятичный логарифм ln(x)/ln(10).

    Raises:
        NumericError: UNDEFINED_VALUE при x <= 0
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_positive(x, "x", "log")
    working = working_context(context)
    return finalize(_ln(x, working).div(ln10(working), working), context)


# =============================================================================
# SQRT / POWER
# =============================================================================


def sqrt(x: NumberLike, context: Optional[MathContext] = None) -> Component:
    """
    Квадратный корень через точный целочисленный корень.

    Точные корни (0.25 → 0.5) возвращаются без погрешности;
    неточный остаток отмечается липкой цифрой перед округлением.

    Raises:
        NumericError: UNDEFINED_VALUE при x < 0
    """
    context = resolve_context(context)
    x = Component.create(x)
    validate_non_negative(x, "x", "sqrt")
    if x.is_zero():
        return x

    scale = max(context.precision + 1, (x.precision + 1) // 2)
    radicand = x.as_big_int * 10 ** (2 * scale - x.precision)
    root = math.isqrt(radicand)
    if root * root != radicand:
        root = root * 10 + 1
        scale += 1
    return Component.from_scaled_int(root, scale).round(context)


def power(
    base: NumberLike, exponent: NumberLike, context: Optional[MathContext] = None
) -> Component:
    """
    Степень base^exponent.

    - Целый показатель (точно, без дробных цифр): intpow,
      отрицательный — обратная величина
    - Показатель 0.5: точный sqrt
    - Иначе exp(exponent·ln(base)) в удвоенной рабочей точности

    Raises:
        NumericError: INDETERMINATE_FORM (0^0), DIVISION_BY_ZERO (0^-n),
            DOMAIN_VIOLATION (отрицательное основание, дробный показатель)

    Examples:
        >>> str(power(2, 10))
        '1024.0'
    """
    context = resolve_context(context)
    base = Component.create(base)
    exponent = Component.create(exponent)

    if base.is_zero():
        if exponent.is_zero():
            raise NumericError(NumericErrorKind.INDETERMINATE_FORM, "Cannot determine 0^0.")
        if exponent.sign < 0:
            raise NumericError(
                NumericErrorKind.DIVISION_BY_ZERO, "Cannot raise zero to a negative power."
            )
        return ZERO

    if exponent.is_integer():
        n = exponent.as_big_int
        if n >= 0:
            return base.intpow(n, context)
        working = working_context(context)
        return finalize(ONE.div(base.intpow(-n, working), working), context)

    if base.sign < 0:
        raise NumericError(
            NumericErrorKind.DOMAIN_VIOLATION,
            f"Negative base {base} with non-integer exponent {exponent} has no real value",
            {"base": str(base), "exponent": str(exponent)},
        )

    if exponent == HALF:
        return sqrt(base, context)

    working = working_context(context)
    return finalize(_exp(exponent.mul(_ln(base, working), working), working), context)
