"""
Rounding Engine — Round Exact Integers to a Target Scale

Несущий контракт всей библиотеки: таблица решений по 8 режимам
воспроизводится побитово.

Алгоритм для num (все цифры значения, со знаком) и diff отбрасываемых цифр:
1. rounded = num / 10^diff  (деление с усечением к нулю)
2. last    = num % 10^diff  (остаток со знаком num)
3. ONE = 10^(diff-1), FIVE = 5·10^(diff-1)
4. Корректировка rounded на ±1 по таблице режима

Внимание: UP/CEILING/FLOOR сравнивают last с ONE, т.е. учитывают только
первую отброшенную цифру. Это часть контракта, а не упрощение.
"""

from typing import Tuple

from mcalc.core.domain.context import RoundingMode
from mcalc.core.errors import NumericError, NumericErrorKind


def truncating_divmod(num: int, divider: int) -> Tuple[int, int]:
    """
    Деление с усечением к нулю; остаток имеет знак делимого.

    Examples:
        >>> truncating_divmod(-55, 10)
        (-5, -5)
        >>> truncating_divmod(55, 10)
        (5, 5)
    """
    quotient = abs(num) // divider
    if num < 0:
        quotient = -quotient
    return quotient, num - quotient * divider


def round_unscaled(num: int, diff: int, mode: RoundingMode) -> int:
    """
    Отбросить diff младших цифр num по правилу mode.

    Args:
        num: Немасштабированное значение (все цифры, со знаком)
        diff: Количество отбрасываемых цифр (> 0)
        mode: Режим округления

    Returns:
        Округлённое немасштабированное значение

    Raises:
        NumericError: ROUNDING_NECESSARY для UNNECESSARY при ненулевом остатке
        ValueError: Если diff <= 0

    Examples:
        >>> round_unscaled(25, 1, RoundingMode.HALF_EVEN)
        2
        >>> round_unscaled(-25, 1, RoundingMode.HALF_UP)
        -3
    """
    if diff <= 0:
        raise ValueError(f"diff must be positive, got {diff}")

    rounded, last = truncating_divmod(num, 10**diff)
    one = 10 ** (diff - 1)
    five = 5 * one

    if mode is RoundingMode.UP:
        if last >= one:
            rounded += 1
        elif last <= -one:
            rounded -= 1
    elif mode is RoundingMode.DOWN:
        pass
    elif mode is RoundingMode.CEILING:
        if last >= one:
            rounded += 1
    elif mode is RoundingMode.FLOOR:
        if last <= -one:
            rounded -= 1
    elif mode is RoundingMode.HALF_UP:
        if last >= five:
            rounded += 1
        elif last <= -five:
            rounded -= 1
    elif mode is RoundingMode.HALF_DOWN:
        if last > five:
            rounded += 1
        elif last < -five:
            rounded -= 1
    elif mode is RoundingMode.HALF_EVEN:
        if last > five:
            rounded += 1
        elif last < -five:
            rounded -= 1
        elif abs(rounded) % 2 == 1:
            if last == five:
                rounded += 1
            elif last == -five:
                rounded -= 1
    elif mode is RoundingMode.UNNECESSARY:
        if last != 0:
            raise NumericError(
                NumericErrorKind.ROUNDING_NECESSARY,
                "Rounding necessary: discarded digits are not zero.",
                {"value": num, "digits": diff},
            )
    else:
        raise ValueError(f"Unknown rounding mode: {mode!r}")

    return rounded
