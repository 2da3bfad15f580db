"""
Parsers — Decimal Literal Parsing & Digit-String Helpers

Разбор десятичных и научных литералов в нормализованную пару
(integer, decimal) и вспомогательные операции над строками цифр
и последовательностями.

Нормализованная форма:
- integer: знак + цифры целой части без ведущих нулей ("-" для -0.x, "" для 0.x)
- decimal: цифры дробной части без завершающих нулей
- ноль: ("", "")
"""

import re
from typing import Final, List, Sequence, Tuple, TypeVar

from mcalc.core.errors import NumericError, NumericErrorKind

T = TypeVar("T")

# Знак, цифры целой части, дробная часть, экспонента
NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"^([+-]?)(\d*)(?:\.(\d*))?(?:[eE]([+-]?\d+))?$"
)


# =============================================================================
# VALIDATION & PARSING
# =============================================================================


def is_valid_number(text: str) -> bool:
    """Проверка литерала: знак, цифры, одна точка, одна экспонента, хотя бы одна цифра."""
    match = NUMBER_PATTERN.match(text)
    if match is None:
        return False
    return bool(match.group(2) or match.group(3))


def parse_number(text: str) -> Tuple[str, str]:
    """
    Разобрать десятичный или научный литерал.

    Args:
        text: Литерал ("123.45", "-1.23e-4", "1e2", ".5")

    Returns:
        Нормализованная пара (integer, decimal)

    Raises:
        NumericError: ILLEGAL_NUMBER_FORMAT при невалидном литерале

    Examples:
        >>> parse_number("4.001e1")
        ('40', '01')
        >>> parse_number("1e2")
        ('100', '')
        >>> parse_number("-0.50")
        ('-', '5')
    """
    match = NUMBER_PATTERN.match(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise NumericError(
            NumericErrorKind.ILLEGAL_NUMBER_FORMAT,
            f"Illegal number format: {text!r}",
            {"value": text},
        )

    sign, integer_digits, fraction_digits, exponent = match.groups()
    fraction_digits = fraction_digits or ""

    unscaled = int((integer_digits + fraction_digits) or "0")
    if sign == "-":
        unscaled = -unscaled

    scale = len(fraction_digits) - int(exponent or "0")
    return split_scaled(unscaled, scale)


def split_scaled(value: int, scale: int) -> Tuple[str, str]:
    """
    Разложить value·10^(-scale) в нормализованную пару (integer, decimal).

    Examples:
        >>> split_scaled(4001, 2)
        ('40', '01')
        >>> split_scaled(-5, 1)
        ('-', '5')
        >>> split_scaled(0, 7)
        ('', '')
    """
    if scale < 0:
        value *= 10 ** (-scale)
        scale = 0

    if value == 0:
        return "", ""

    sign = "-" if value < 0 else ""
    digits = str(abs(value))

    if scale:
        digits = pad(digits, scale + 1 - len(digits), "0", "start")
        integer, decimal = digits[:-scale], digits[-scale:]
    else:
        integer, decimal = digits, ""

    return sign + integer.lstrip("0"), decimal.rstrip("0")


# =============================================================================
# DIGIT-STRING & SEQUENCE HELPERS
# =============================================================================


def pad(seq, count: int, element, position: str = "end"):
    """
    Дополнить строку или последовательность count элементами.

    Args:
        seq: Строка или последовательность
        count: Сколько элементов добавить (<= 0 — без изменений)
        element: Элемент-заполнитель
        position: "start" или "end"

    Returns:
        Дополненная строка (для str) или список

    Examples:
        >>> pad("12", 3, "0")
        '12000'
        >>> pad([1], 2, 0, "start")
        [0, 0, 1]
    """
    if position not in ("start", "end"):
        raise ValueError(f"position must be 'start' or 'end', got {position!r}")

    if isinstance(seq, str):
        filler = element * max(count, 0)
        return filler + seq if position == "start" else seq + filler

    items: List = list(seq)
    filler = [element] * max(count, 0)
    return filler + items if position == "start" else items + filler


def trim_zeroes(seq: Sequence[T], zero: T, position: str = "end") -> List[T]:
    """
    Удалить нулевые элементы с одного края последовательности.

    Examples:
        >>> trim_zeroes([1, 2, 0, 0], 0)
        [1, 2]
        >>> trim_zeroes([0, 0, 3], 0, "start")
        [3]
    """
    items = list(seq)
    if position == "end":
        while items and items[-1] == zero:
            items.pop()
    elif position == "start":
        start = 0
        while start < len(items) and items[start] == zero:
            start += 1
        items = items[start:]
    else:
        raise ValueError(f"position must be 'start' or 'end', got {position!r}")
    return items


def decimate(digits: str, index: int) -> Tuple[str, str]:
    """
    Вставить десятичную точку за index цифр до конца строки.

    Знак сохраняется в целой части; результат нормализуется.

    Examples:
        >>> decimate("-4001", 2)
        ('-40', '01')
        >>> decimate("5", 3)
        ('', '005')
    """
    return split_scaled(int(digits or "0"), index)


def next_power_of_two(n: int) -> int:
    """Наименьшая степень двойки >= n (минимум 1)."""
    size = 1
    while size < n:
        size <<= 1
    return size
