"""
Numerical Safeguards — Working Precision & Convergence Guards

Общие примитивы для итерационных алгоритмов:
- Рабочий контекст (повышенная точность, усечение) для промежуточных шагов
- Суммирование рядов с остановкой на нулевом члене и защитой от зацикливания
- Валидация области определения аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные вычисления выполняются в режиме DOWN: члены ряда
   монотонно доходят до точного нуля
2. Режим округления вызывающего применяется один раз, к итоговому результату
3. Ряд, не сошедшийся за MAX_SERIES_TERMS членов, поднимает CONVERGENCE_FAILURE
"""

from typing import Final, Iterable, Optional

from mcalc.core.domain.context import MathContext, RoundingMode
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.logging_config import get_logger
from mcalc.core.math.component import Component

logger = get_logger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Дополнительные цифры сверх удвоенной точности вызывающего
GUARD_DIGITS: Final[int] = 5

# Верхняя граница числа членов ряда
MAX_SERIES_TERMS: Final[int] = 100_000

# Верхняя граница итераций метода Ньютона
MAX_NEWTON_ITERATIONS: Final[int] = 200


# =============================================================================
# РАБОЧАЯ ТОЧНОСТЬ
# =============================================================================


def working_context(context: MathContext, extra_digits: int = 0) -> MathContext:
    """
    Рабочий контекст: 2·precision + GUARD_DIGITS (+ extra_digits), режим DOWN.

    Examples:
        >>> working_context(MathContext(precision=17, rounding=RoundingMode.UP)).precision
        39
    """
    if extra_digits < 0:
        raise ValueError(f"extra_digits must be non-negative, got {extra_digits}")
    return MathContext(
        precision=2 * context.precision + GUARD_DIGITS + extra_digits,
        rounding=RoundingMode.DOWN,
    )


def exact_context(*values: Component, extra_digits: int = 0) -> MathContext:
    """Контекст, не теряющий цифр при операциях над values (без деления)."""
    precision = sum(value.precision for value in values) + extra_digits
    return MathContext(precision=precision, rounding=RoundingMode.DOWN)


def finalize(value: Component, context: MathContext) -> Component:
    """
    Округлить результат рабочей точности до контекста вызывающего.

    Сначала HALF_EVEN до precision + GUARD_DIGITS (снимает погрешность
    усечения рядов), затем режим вызывающего.
    """
    guarded = MathContext(precision=context.precision + GUARD_DIGITS, rounding=RoundingMode.HALF_EVEN)
    return value.round(guarded).round(context)


# =============================================================================
# СУММИРОВАНИЕ РЯДОВ
# =============================================================================


def sum_series(
    terms: Iterable[Component],
    context: MathContext,
    name: str,
    max_terms: int = MAX_SERIES_TERMS,
) -> Component:
    """
    Сумма ряда до первого нулевого члена.

    Цикл: взять член → проверить на ноль → добавить к сумме.

    Args:
        terms: Члены ряда (уже округлённые до context)
        context: Рабочий контекст суммирования
        name: Имя функции (для логов и ошибок)
        max_terms: Защита от зацикливания

    Returns:
        Сумма ряда

    Raises:
        NumericError: CONVERGENCE_FAILURE, если ряд не сошёлся
    """
    total = Component()
    count = 0
    for term in terms:
        if term.is_zero():
            logger.debug("%s series converged after %d terms at precision %d", name, count, context.precision)
            return total
        if count >= max_terms:
            raise NumericError(
                NumericErrorKind.CONVERGENCE_FAILURE,
                f"{name} series did not converge within {max_terms} terms",
                {"function": name, "precision": context.precision},
            )
        total = total.add(term, context)
        count += 1
    return total


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _undefined(name: str, function: str, value: Component, condition: str) -> NumericError:
    return NumericError(
        NumericErrorKind.UNDEFINED_VALUE,
        f"{function} is undefined for {name}={value}: {condition}",
        {"function": function, "argument": str(value)},
    )


def validate_positive(value: Component, name: str, function: str) -> None:
    """
    Проверка value > 0.

    Raises:
        NumericError: UNDEFINED_VALUE, если value <= 0
    """
    if value.sign <= 0:
        raise _undefined(name, function, value, "must be positive")


def validate_non_negative(value: Component, name: str, function: str) -> None:
    """
    Проверка value >= 0.

    Raises:
        NumericError: UNDEFINED_VALUE, если value < 0
    """
    if value.sign < 0:
        raise _undefined(name, function, value, "must be non-negative")


def validate_in_range(
    value: Component,
    name: str,
    function: str,
    lower: Optional[Component] = None,
    upper: Optional[Component] = None,
    inclusive: bool = True,
) -> None:
    """
    Проверка value в диапазоне [lower, upper] (или (lower, upper)).

    Args:
        value: Проверяемое значение
        name: Имя аргумента
        function: Имя функции (для сообщения)
        lower: Нижняя граница (None = без ограничения)
        upper: Верхняя граница (None = без ограничения)
        inclusive: Включать ли границы

    Raises:
        NumericError: UNDEFINED_VALUE при выходе за диапазон
    """
    if lower is not None:
        comparison = value.compare_to(lower)
        if comparison < 0 or (comparison == 0 and not inclusive):
            bound = "[" if inclusive else "("
            raise _undefined(name, function, value, f"must be in {bound}{lower}, {upper}")
    if upper is not None:
        comparison = value.compare_to(upper)
        if comparison > 0 or (comparison == 0 and not inclusive):
            bound = "]" if inclusive else ")"
            raise _undefined(name, function, value, f"must be in {lower}, {upper}{bound}")
