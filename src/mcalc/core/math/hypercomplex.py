"""
Hypercomplex — Transcendental Functions on BigNum

Любое q = a + v (a — вещественная часть, v — мнимые компоненты) лежит
в коммутативной подалгебре span{1, v̂}, v̂ = v/|v|, v̂² = -1.
Поэтому f(q) для аналитической f вычисляется как комплексная функция
в точке a + iθ (θ = |v|), а результат x + iy собирается обратно
как x + y·v̂.

Вещественный аргумент внутри вещественной области определения
обрабатывается вещественной функцией; вне её результат комплексный
вдоль первой мнимой единицы.

asin/acos используют замкнутую форму через α/β:
    α = ½(√((x+1)²+y²) + √((x-1)²+y²))
    β = ½(√((x+1)²+y²) - √((x-1)²+y²))
    asin(x+iy) = asin(β) + i·ln(α + √(α²-1))
"""

from typing import Callable, Optional, Tuple

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.bignum import BigNum
from mcalc.core.math.circular import _acos, _asin, _atan, _atan2, _cos, _half_pi, _sin
from mcalc.core.math.component import Component
from mcalc.core.math.constants import HALF, ONE, TWO, ZERO, ln10
from mcalc.core.math.exponential import _exp, _ln
from mcalc.core.math.exponential import sqrt as _real_sqrt
from mcalc.core.math.hyperbolic import _acosh, _asinh, _atanh, _cosh, _sinh, _tanh
from mcalc.core.math.numerical_safeguards import finalize, working_context

Pair = Tuple[Component, Component]
Axis = Optional[Tuple[Component, ...]]

_MINUS_ONE = ONE.neg()


# =============================================================================
# LIFT / LOWER
# =============================================================================


def _split(q: BigNum, context: MathContext) -> Tuple[Component, Component, Axis]:
    """(a, θ, v̂); v̂ = None для вещественного q."""
    imaginary = q.imaginary_parts
    squared = ZERO
    for c in imaginary:
        squared = squared.add(c.mul(c, context), context)
    if squared.is_zero():
        return q.real_part, ZERO, None
    theta = _real_sqrt(squared, context)
    return q.real_part, theta, tuple(c.div(theta, context) for c in imaginary)


def _join(value: Pair, axis: Axis, context: MathContext, target: MathContext) -> BigNum:
    re, im = value
    directions = axis if axis is not None else (ONE,)
    components = [re] + [im.mul(u, context) for u in directions]
    return BigNum(tuple(finalize(c, target) for c in components))


def _apply(
    q,
    context: Optional[MathContext],
    real_fn: Callable[[Component, MathContext], Component],
    complex_fn: Callable[[Pair, MathContext], Pair],
    real_domain: Optional[Callable[[Component], bool]] = None,
) -> BigNum:
    context = resolve_context(context)
    q = BigNum._coerce(q)
    working = working_context(context)

    if q.is_real() and (real_domain is None or real_domain(q.real_part)):
        return BigNum(finalize(real_fn(q.real_part, working), context))

    a, theta, axis = _split(q, working)
    return _join(complex_fn((a, theta), working), axis, working, context)


# =============================================================================
# COMPLEX ARITHMETIC ON PAIRS
# =============================================================================


def _c_add(z: Pair, w: Pair, context: MathContext) -> Pair:
    return z[0].add(w[0], context), z[1].add(w[1], context)


def _c_sub(z: Pair, w: Pair, context: MathContext) -> Pair:
    return z[0].sub(w[0], context), z[1].sub(w[1], context)


def _c_mul(z: Pair, w: Pair, context: MathContext) -> Pair:
    (a, b), (c, d) = z, w
    return (
        a.mul(c, context).sub(b.mul(d, context), context),
        a.mul(d, context).add(b.mul(c, context), context),
    )


def _c_div(z: Pair, w: Pair, context: MathContext) -> Pair:
    (a, b), (c, d) = z, w
    denominator = c.mul(c, context).add(d.mul(d, context), context)
    if denominator.is_zero():
        raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero.")
    return (
        a.mul(c, context).add(b.mul(d, context), context).div(denominator, context),
        b.mul(c, context).sub(a.mul(d, context), context).div(denominator, context),
    )


def _c_modulus(z: Pair, context: MathContext) -> Component:
    x, y = z
    return _real_sqrt(x.mul(x, context).add(y.mul(y, context), context), context)


# =============================================================================
# COMPLEX ELEMENTARY FUNCTIONS
# =============================================================================


def _c_exp(z: Pair, context: MathContext) -> Pair:
    x, y = z
    scale = _exp(x, context)
    return scale.mul(_cos(y, context), context), scale.mul(_sin(y, context), context)


def _c_ln(z: Pair, context: MathContext) -> Pair:
    x, y = z
    if x.is_zero() and y.is_zero():
        raise NumericError(NumericErrorKind.UNDEFINED_VALUE, "Logarithm undefined for zero")
    return _ln(_c_modulus(z, context), context), _atan2(y, x, context)


def _c_sqrt(z: Pair, context: MathContext) -> Pair:
    x, y = z
    modulus = _c_modulus(z, context)
    re = _real_sqrt(modulus.add(x, context).mul(HALF, context), context)
    im = _real_sqrt(modulus.sub(x, context).mul(HALF, context), context)
    return re, im.neg() if y.sign < 0 else im


def _c_sin(z: Pair, context: MathContext) -> Pair:
    x, y = z
    return (
        _sin(x, context).mul(_cosh(y, context), context),
        _cos(x, context).mul(_sinh(y, context), context),
    )


def _c_cos(z: Pair, context: MathContext) -> Pair:
    x, y = z
    return (
        _cos(x, context).mul(_cosh(y, context), context),
        _sin(x, context).mul(_sinh(y, context), context).neg(),
    )


def _c_sinh(z: Pair, context: MathContext) -> Pair:
    x, y = z
    return (
        _sinh(x, context).mul(_cos(y, context), context),
        _cosh(x, context).mul(_sin(y, context), context),
    )


def _c_cosh(z: Pair, context: MathContext) -> Pair:
    x, y = z
    return (
        _cosh(x, context).mul(_cos(y, context), context),
        _sinh(x, context).mul(_sin(y, context), context),
    )


def _c_tan(z: Pair, context: MathContext) -> Pair:
    return _c_div(_c_sin(z, context), _c_cos(z, context), context)


def _c_tanh(z: Pair, context: MathContext) -> Pair:
    return _c_div(_c_sinh(z, context), _c_cosh(z, context), context)


def _alpha_beta(z: Pair, context: MathContext) -> Pair:
    x, y = z
    y_squared = y.mul(y, context)
    plus = x.add(ONE, context)
    minus = x.sub(ONE, context)
    r1 = _real_sqrt(plus.mul(plus, context).add(y_squared, context), context)
    r2 = _real_sqrt(minus.mul(minus, context).add(y_squared, context), context)
    alpha = r1.add(r2, context).mul(HALF, context)
    beta = r1.sub(r2, context).mul(HALF, context)
    # Усечение может вывести α и β за [1, ∞) и [-1, 1] на единицу младшего разряда
    if alpha.less_than(ONE):
        alpha = ONE
    if beta.more_than(ONE):
        beta = ONE
    elif beta.less_than(_MINUS_ONE):
        beta = _MINUS_ONE
    return alpha, beta


def _c_asin(z: Pair, context: MathContext) -> Pair:
    alpha, beta = _alpha_beta(z, context)
    root = _real_sqrt(alpha.mul(alpha, context).sub(ONE, context), context)
    im = _ln(alpha.add(root, context), context)
    return _asin(beta, context), im.neg() if z[1].sign < 0 else im


def _c_acos(z: Pair, context: MathContext) -> Pair:
    re, im = _c_asin(z, context)
    return _half_pi(context).sub(re, context), im.neg()


def _c_atan(z: Pair, context: MathContext) -> Pair:
    x, y = z
    if x.is_zero():
        if y.abs().compare_to(ONE) >= 0:
            raise NumericError(
                NumericErrorKind.UNDEFINED_VALUE,
                f"atan is undefined for a purely imaginary value of magnitude {y.abs()}",
            )
        return ZERO, _atanh(y, context)

    x_squared = x.mul(x, context)
    y_plus = y.add(ONE, context)
    y_minus = y.sub(ONE, context)
    re = _atan2(
        x.mul(TWO, context),
        ONE.sub(x_squared, context).sub(y.mul(y, context), context),
        context,
    ).mul(HALF, context)
    ratio = x_squared.add(y_plus.mul(y_plus, context), context).div(
        x_squared.add(y_minus.mul(y_minus, context), context), context
    )
    im = _ln(ratio, context).mul(HALF, context).mul(HALF, context)
    return re, im


def _c_asinh(z: Pair, context: MathContext) -> Pair:
    radicand = _c_add(_c_mul(z, z, context), (ONE, ZERO), context)
    return _c_ln(_c_add(z, _c_sqrt(radicand, context), context), context)


def _c_acosh(z: Pair, context: MathContext) -> Pair:
    product = _c_mul(
        _c_sqrt(_c_add(z, (ONE, ZERO), context), context),
        _c_sqrt(_c_sub(z, (ONE, ZERO), context), context),
        context,
    )
    return _c_ln(_c_add(z, product, context), context)


def _c_atanh(z: Pair, context: MathContext) -> Pair:
    upper = _c_ln(_c_add((ONE, ZERO), z, context), context)
    lower = _c_ln(_c_sub((ONE, ZERO), z, context), context)
    re, im = _c_sub(upper, lower, context)
    return re.mul(HALF, context), im.mul(HALF, context)


def _c_log(z: Pair, context: MathContext) -> Pair:
    re, im = _c_ln(z, context)
    base = ln10(context)
    return re.div(base, context), im.div(base, context)


# =============================================================================
# REAL DOMAINS
# =============================================================================


def _positive(x: Component) -> bool:
    return x.sign > 0


def _non_negative(x: Component) -> bool:
    return x.sign >= 0


def _unit_interval(x: Component) -> bool:
    return x.abs().compare_to(ONE) <= 0


def _open_unit_interval(x: Component) -> bool:
    return x.abs().less_than(ONE)


def _at_least_one(x: Component) -> bool:
    return x.compare_to(ONE) >= 0


def _real_tan(x: Component, context: MathContext) -> Component:
    return _sin(x, context).div(_cos(x, context), context)


def _real_log(x: Component, context: MathContext) -> Component:
    return _ln(x, context).div(ln10(context), context)


# =============================================================================
# PUBLIC API
# =============================================================================


def exp(q, context: Optional[MathContext] = None) -> BigNum:
    """e^q = e^a·(cos θ + v̂·sin θ)."""
    return _apply(q, context, _exp, _c_exp)


def ln(q, context: Optional[MathContext] = None) -> BigNum:
    """
    ln q = ln|q| + v̂·atan2(θ, a).

    Raises:
        NumericError: UNDEFINED_VALUE для нуля
    """
    return _apply(q, context, _ln, _c_ln, _positive)


def log(q, context: Optional[MathContext] = None) -> BigNum:
    """Десятичный логарифм ln(q)/ln(10)."""
    return _apply(q, context, _real_log, _c_log, _positive)


def sqrt(q, context: Optional[MathContext] = None) -> BigNum:
    """Главный квадратный корень."""
    return _apply(q, context, _real_sqrt, _c_sqrt, _non_negative)


def sin(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _sin, _c_sin)


def cos(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _cos, _c_cos)


def tan(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _real_tan, _c_tan)


def asin(q, context: Optional[MathContext] = None) -> BigNum:
    """Арксинус через α/β; вещественный при |q| <= 1."""
    return _apply(q, context, _asin, _c_asin, _unit_interval)


def acos(q, context: Optional[MathContext] = None) -> BigNum:
    """Арккосинус π/2 - asin(q)."""
    return _apply(q, context, _acos, _c_acos, _unit_interval)


def atan(q, context: Optional[MathContext] = None) -> BigNum:
    """
    Арктангенс.

    Raises:
        NumericError: UNDEFINED_VALUE для чисто мнимого q с |v| >= 1
    """
    return _apply(q, context, _atan, _c_atan)


def sinh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _sinh, _c_sinh)


def cosh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _cosh, _c_cosh)


def tanh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _tanh, _c_tanh)


def asinh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _asinh, _c_asinh)


def acosh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _acosh, _c_acosh, _at_least_one)


def atanh(q, context: Optional[MathContext] = None) -> BigNum:
    return _apply(q, context, _atanh, _c_atanh, _open_unit_interval)


def power(q, exponent, context: Optional[MathContext] = None) -> BigNum:
    """
    Степень q^p.

    - Целый вещественный показатель: повторное умножение Кэли-Диксона
      (отрицательный — обратный элемент); для отрицательного вещественного
      основания знак определяется чётностью показателя
    - Иначе exp(p·ln q)

    Raises:
        NumericError: INDETERMINATE_FORM (0^0), DIVISION_BY_ZERO (0^-p)
    """
    context = resolve_context(context)
    q = BigNum._coerce(q)
    p = BigNum._coerce(exponent)
    working = working_context(context)

    if q.is_zero():
        if p.is_zero():
            raise NumericError(NumericErrorKind.INDETERMINATE_FORM, "Cannot determine 0^0.")
        if not p.is_real() or p.real_part.sign < 0:
            raise NumericError(
                NumericErrorKind.DIVISION_BY_ZERO, "Cannot raise zero to a negative power."
            )
        return q

    if p.is_real() and p.real_part.is_integer():
        n = p.real_part.as_big_int

        if q.is_real():
            base = q.real_part
            magnitude = base.abs().intpow(abs(n), working)
            if base.sign < 0 and n % 2 == 1:
                magnitude = magnitude.neg()
            if n < 0:
                magnitude = ONE.div(magnitude, working)
            return BigNum(finalize(magnitude, context))

        result = BigNum(ONE)
        for _ in range(abs(n)):
            result = result.mul(q, working)
        if n < 0:
            result = result.inv(working)
        return BigNum(tuple(finalize(c, context) for c in result.components))

    return exp(p.mul(ln(q, working), working), context)
