"""
Constants — Canonical Values & Precision-Aware Providers

Именованные константы (ZERO..NINE, PI, E, LN2, LN10) — точные Component,
трансцендентные константы хранятся со 100 знаками после точки и служат
эталоном для редукции аргумента.

Провайдеры pi/e/ln2/ln10(context) возвращают константу, округлённую
до контекста. Если запрошено больше 100 знаков, цифры вычисляются
целочисленными рядами с фиксированной точкой и кэшируются.
"""

from functools import lru_cache
from typing import Final, Optional

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.logging_config import get_logger
from mcalc.core.math.component import Component

logger = get_logger(__name__)


# =============================================================================
# INTEGER CONSTANTS
# =============================================================================

ZERO: Final[Component] = Component.from_int(0)
ONE: Final[Component] = Component.from_int(1)
TWO: Final[Component] = Component.from_int(2)
THREE: Final[Component] = Component.from_int(3)
FOUR: Final[Component] = Component.from_int(4)
FIVE: Final[Component] = Component.from_int(5)
SIX: Final[Component] = Component.from_int(6)
SEVEN: Final[Component] = Component.from_int(7)
EIGHT: Final[Component] = Component.from_int(8)
NINE: Final[Component] = Component.from_int(9)
TEN: Final[Component] = Component.from_int(10)

HALF: Final[Component] = Component.create("0.5")


# =============================================================================
# TRANSCENDENTAL CONSTANTS (100 ЗНАКОВ)
# =============================================================================

STORED_DIGITS: Final[int] = 100

PI: Final[Component] = Component.create(
    "3",
    "1415926535897932384626433832795028841971693993751058209749445923078164062862089986280348253421170679",
)

E: Final[Component] = Component.create(
    "2",
    "7182818284590452353602874713526624977572470936999595749669676277240766303535475945713821785251664274",
)

LN2: Final[Component] = Component.create(
    "0",
    "6931471805599453094172321214581765680755001343602552541206800094933936219696947156058633269964186875",
)

LN10: Final[Component] = Component.create(
    "2",
    "3025850929940456840179914546843642076011014886287729760333279009675726096773524802359972050895982983",
)

# Дополнительные цифры при вычислении сверх STORED_DIGITS
_SERIES_GUARD_DIGITS: Final[int] = 10


# =============================================================================
# FIXED-POINT SERIES
# =============================================================================


def _atan_inverse(n: int, unity: int) -> int:
    """atan(1/n)·unity (ряд Грегори, усечение)."""
    power = unity // n
    n_squared = n * n
    total = power
    k = 1
    sign = -1
    while power:
        power //= n_squared
        total += sign * (power // (2 * k + 1))
        sign = -sign
        k += 1
    return total


def _atanh_inverse(n: int, unity: int) -> int:
    """atanh(1/n)·unity (без знакочередования)."""
    power = unity // n
    n_squared = n * n
    total = power
    k = 1
    while power:
        power //= n_squared
        total += power // (2 * k + 1)
        k += 1
    return total


@lru_cache(maxsize=None)
def _pi_digits(precision: int) -> Component:
    # Формула Мачина: pi = 16·atan(1/5) - 4·atan(1/239)
    scale = precision + _SERIES_GUARD_DIGITS
    unity = 10**scale
    value = 16 * _atan_inverse(5, unity) - 4 * _atan_inverse(239, unity)
    logger.debug("Computed pi to %d digits", precision)
    return Component.from_scaled_int(value, scale)


@lru_cache(maxsize=None)
def _ln2_digits(precision: int) -> Component:
    # ln 2 = 2·atanh(1/3)
    scale = precision + _SERIES_GUARD_DIGITS
    value = 2 * _atanh_inverse(3, 10**scale)
    logger.debug("Computed ln2 to %d digits", precision)
    return Component.from_scaled_int(value, scale)


@lru_cache(maxsize=None)
def _ln10_digits(precision: int) -> Component:
    # ln 10 = 3·ln 2 + ln 1.25 = 6·atanh(1/3) + 2·atanh(1/9)
    scale = precision + _SERIES_GUARD_DIGITS
    unity = 10**scale
    value = 6 * _atanh_inverse(3, unity) + 2 * _atanh_inverse(9, unity)
    logger.debug("Computed ln10 to %d digits", precision)
    return Component.from_scaled_int(value, scale)


@lru_cache(maxsize=None)
def _e_digits(precision: int) -> Component:
    # e = sum(1/k!)
    scale = precision + _SERIES_GUARD_DIGITS
    term = 10**scale
    total = 0
    k = 0
    while term:
        total += term
        k += 1
        term //= k
    logger.debug("Computed e to %d digits", precision)
    return Component.from_scaled_int(total, scale)


def _provide(stored: Component, compute, context: Optional[MathContext]) -> Component:
    context = resolve_context(context)
    if context.precision <= STORED_DIGITS:
        return stored.round(context)
    return compute(context.precision).round(context)


# =============================================================================
# PROVIDERS
# =============================================================================


def pi(context: Optional[MathContext] = None) -> Component:
    """
    Число pi, округлённое до контекста.

    Examples:
        >>> from mcalc.core.domain.context import MathContext, RoundingMode
        >>> str(pi(MathContext(precision=4, rounding=RoundingMode.DOWN)))
        '3.1415'
    """
    return _provide(PI, _pi_digits, context)


def e(context: Optional[MathContext] = None) -> Component:
    """Число e, округлённое до контекста."""
    return _provide(E, _e_digits, context)


def ln2(context: Optional[MathContext] = None) -> Component:
    """Натуральный логарифм 2, округлённый до контекста."""
    return _provide(LN2, _ln2_digits, context)


def ln10(context: Optional[MathContext] = None) -> Component:
    """Натуральный логарифм 10, округлённый до контекста."""
    return _provide(LN10, _ln10_digits, context)
