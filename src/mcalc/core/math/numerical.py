"""
Numerical — Newton-Raphson, Levi-Civita & Kronecker symbols
"""

from typing import Callable, Optional

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.logging_config import get_logger
from mcalc.core.math.component import Component, NumberLike
from mcalc.core.math.numerical_safeguards import (
    MAX_NEWTON_ITERATIONS,
    finalize,
    working_context,
)

logger = get_logger(__name__)

RealFunction = Callable[[Component], Component]


def newton_raphson(
    f: RealFunction,
    df: RealFunction,
    x0: NumberLike,
    context: Optional[MathContext] = None,
    max_iterations: int = MAX_NEWTON_ITERATIONS,
) -> Component:
    """
    Корень f методом Ньютона: x_{n+1} = x_n - f(x_n)/f'(x_n).

    Итерации идут в рабочем контексте; остановка, когда f(x) = 0
    или шаг перестаёт менять x.

    Args:
        f: Функция
        df: Производная
        x0: Начальное приближение
        context: Контекст результата
        max_iterations: Защита от зацикливания

    Returns:
        Корень, округлённый до контекста

    Raises:
        NumericError: UNDEFINED_VALUE при f'(x) = 0,
            CONVERGENCE_FAILURE, если итерации не сошлись

    Examples:
        >>> from mcalc.core.domain.context import MathContext, RoundingMode
        >>> ctx = MathContext(precision=6, rounding=RoundingMode.HALF_UP)
        >>> str(newton_raphson(lambda x: x * x - 2, lambda x: x * 2, 1, ctx))
        '1.414214'
    """
    context = resolve_context(context)
    working = working_context(context)
    x = Component.create(x0)
    previous: Optional[Component] = None

    for iteration in range(max_iterations):
        fx = Component.create(f(x)).round(working)
        if fx.is_zero():
            logger.debug("Newton-Raphson hit an exact root after %d iterations", iteration)
            return finalize(x, context)

        slope = Component.create(df(x)).round(working)
        if slope.is_zero():
            raise NumericError(
                NumericErrorKind.UNDEFINED_VALUE,
                f"Newton-Raphson derivative vanished at x={x}",
                {"x": str(x), "iteration": iteration},
            )

        step = fx.div(slope, working)
        next_x = x.sub(step, working)
        if next_x == x or next_x == previous:
            logger.debug("Newton-Raphson converged after %d iterations", iteration + 1)
            return finalize(next_x, context)
        previous, x = x, next_x

    raise NumericError(
        NumericErrorKind.CONVERGENCE_FAILURE,
        f"Newton-Raphson did not converge within {max_iterations} iterations",
        {"x": str(x), "precision": working.precision},
    )


def levi_civita(*indices: int) -> int:
    """
    Символ Леви-Чивиты ε_{i1...in} (индексы с 1).

    Returns:
        1 для чётной перестановки, -1 для нечётной, 0 при повторе индекса

    Raises:
        NumericError: INVALID_INDEX, если индекс вне [1, n]

    Examples:
        >>> levi_civita(1, 2, 3), levi_civita(2, 1, 3), levi_civita(1, 1, 3)
        (1, -1, 0)
    """
    size = len(indices)
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int) or not 1 <= index <= size:
            raise NumericError(
                NumericErrorKind.INVALID_INDEX,
                f"Levi-Civita index {index!r} out of range [1, {size}]",
                {"indices": list(indices)},
            )

    if len(set(indices)) < size:
        return 0

    inversions = sum(
        1
        for i in range(size)
        for j in range(i + 1, size)
        if indices[i] > indices[j]
    )
    return -1 if inversions % 2 else 1


def kronecker(i: int, j: int) -> int:
    """Символ Кронекера δ_ij."""
    return 1 if i == j else 0
