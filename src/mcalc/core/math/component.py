"""
Component — Exact Arbitrary-Precision Decimal

Неизменяемое точное десятичное число: строка цифр целой части (со знаком)
и строка цифр дробной части. precision = длина дробной части.

Арифметика выполняется точно на целых числах Python, затем результат
округляется по MathContext (Rounding Engine).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ведущие нули integer и завершающие нули decimal удалены
2. Ноль хранится как ("", ""); отрицательного нуля нет
3. Значение точное, приближения не хранятся
4. Равенство/порядок — только через сравнение значений, не строк
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple, Union

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.parsers import decimate, pad, parse_number, split_scaled
from mcalc.core.math.rounding import round_unscaled, truncating_divmod

NumberLike = Union["Component", str, int, float, Decimal]


@dataclass(frozen=True)
class Component:
    """
    Точное десятичное число.

    Создаётся через Component.create (валидирующая фабрика).
    Прямой вызов конструктора предполагает уже нормализованные строки.

    Attributes:
        integer: Знак + цифры целой части ("" для 0, "-" для -0.x)
        decimal: Цифры дробной части
    """

    integer: str = ""
    decimal: str = ""

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create(cls, value: NumberLike, fraction: Optional[str] = None) -> "Component":
        """
        Создать Component из литерала, числа или пары строк.

        Args:
            value: Строка ("123.45", "1.23e-4"), int, float, Decimal, Component
                или строка целой части (если задан fraction)
            fraction: Строка дробной части (для формы пары)

        Returns:
            Нормализованный Component

        Raises:
            NumericError: ILLEGAL_NUMBER_FORMAT при невалидном литерале
            TypeError: При неподдерживаемом типе аргумента

        Examples:
            >>> str(Component.create("1e2"))
            '100.0'
            >>> str(Component.create("40", "01"))
            '40.01'
        """
        if fraction is not None:
            if not isinstance(value, str) or not isinstance(fraction, str):
                raise TypeError("Illegal argument type: integer and fraction parts must be str")
            if fraction.startswith(("+", "-")):
                raise NumericError(
                    NumericErrorKind.ILLEGAL_NUMBER_FORMAT,
                    f"Illegal number format: {value!r}, {fraction!r}",
                )
            return cls(*parse_number(f"{value}.{fraction}"))

        if isinstance(value, Component):
            return value
        if isinstance(value, bool):
            raise TypeError("Illegal argument type: bool")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, (str, float, Decimal)):
            return cls(*parse_number(str(value)))

        raise TypeError(f"Illegal argument type: {type(value).__name__}")

    @classmethod
    def from_int(cls, value: int) -> "Component":
        """Целое число без разбора строки."""
        return cls(*split_scaled(value, 0))

    @classmethod
    def from_scaled_int(cls, value: int, scale: int) -> "Component":
        """Значение value·10^(-scale)."""
        return cls(*split_scaled(value, scale))

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def precision(self) -> int:
        return len(self.decimal)

    @property
    def as_string(self) -> str:
        """Все цифры значения со знаком (без точки)."""
        return self.integer + self.decimal

    @property
    def as_big_int(self) -> int:
        """Немасштабированное целое (value·10^precision)."""
        digits = self.as_string
        if digits in ("", "-"):
            return 0
        return int(digits)

    @property
    def sign(self) -> int:
        if not self.integer and not self.decimal:
            return 0
        return -1 if self.integer.startswith("-") else 1

    def is_zero(self) -> bool:
        return self.sign == 0

    def is_integer(self) -> bool:
        """Точное целое (нет дробных цифр)."""
        return not self.decimal

    def _aligned(self, that: "Component") -> Tuple[int, int, int]:
        """Оба значения, выровненные по большей точности, и эта точность."""
        precision = max(self.precision, that.precision)
        a = int(pad(str(self.as_big_int), precision - self.precision, "0"))
        b = int(pad(str(that.as_big_int), precision - that.precision, "0"))
        return a, b, precision

    # =========================================================================
    # ROUNDING
    # =========================================================================

    def round(self, context: Optional[MathContext] = None) -> "Component":
        """
        Округлить до context.precision цифр после точки.

        Если precision уже не больше целевой — возвращается self.

        Raises:
            NumericError: ROUNDING_NECESSARY для режима UNNECESSARY
        """
        context = resolve_context(context)
        if self.precision <= context.precision:
            return self

        rounded = round_unscaled(
            self.as_big_int, self.precision - context.precision, context.rounding
        )
        return Component(*decimate(str(rounded), context.precision))

    def floor(self) -> "Component":
        """Наибольшее целое <= self (точно)."""
        return Component.from_int(self.as_big_int // 10**self.precision)

    def ceil(self) -> "Component":
        """Наименьшее целое >= self (точно)."""
        return Component.from_int(-((-self.as_big_int) // 10**self.precision))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, that: NumberLike, context: Optional[MathContext] = None) -> "Component":
        that = Component.create(that)
        a, b, precision = self._aligned(that)
        return Component.from_scaled_int(a + b, precision).round(context)

    def sub(self, that: NumberLike, context: Optional[MathContext] = None) -> "Component":
        that = Component.create(that)
        a, b, precision = self._aligned(that)
        return Component.from_scaled_int(a - b, precision).round(context)

    def mul(self, that: NumberLike, context: Optional[MathContext] = None) -> "Component":
        that = Component.create(that)
        return Component.from_scaled_int(
            self.as_big_int * that.as_big_int, self.precision + that.precision
        ).round(context)

    def div(self, that: NumberLike, context: Optional[MathContext] = None) -> "Component":
        """
        Деление с округлением по контексту.

        Числитель дополняется нулями так, чтобы целочисленное деление дало
        context.precision цифр частного (или естественную точность p1 - p2,
        если она больше). Частное усекается, затем округляется по контексту.

        Raises:
            NumericError: DIVISION_BY_ZERO (x/0), INDETERMINATE_FORM (0/0)

        Examples:
            >>> str(Component.create(144).div(Component.create(-12)))
            '-12.0'
        """
        context = resolve_context(context)
        that = Component.create(that)

        if that.is_zero():
            if self.is_zero():
                raise NumericError(NumericErrorKind.INDETERMINATE_FORM, "Cannot determine 0/0.")
            raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero.")

        if self.is_zero():
            return self

        scale = max(context.precision, self.precision - that.precision)
        shift = scale - self.precision + that.precision
        numerator = int(pad(str(self.as_big_int), shift, "0"))
        divisor = that.as_big_int

        quotient = truncating_divmod(numerator, abs(divisor))[0]
        if divisor < 0:
            quotient = -quotient

        return Component.from_scaled_int(quotient, scale).round(context)

    def mod(self, that: NumberLike, context: Optional[MathContext] = None) -> "Component":
        """
        Вещественный остаток a - b·floor(a/b).

        floor частного вычисляется точно (целочисленно).
        """
        that = Component.create(that)
        if that.is_zero():
            if self.is_zero():
                raise NumericError(NumericErrorKind.INDETERMINATE_FORM, "Cannot determine 0 mod 0.")
            raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero.")

        a, b, precision = self._aligned(that)
        quotient = a // b
        return Component.from_scaled_int(a - b * quotient, precision).round(context)

    def intpow(self, index: int, context: Optional[MathContext] = None) -> "Component":
        """
        Целая неотрицательная степень (итеративное умножение).

        Raises:
            NumericError: DOMAIN_VIOLATION для отрицательного/нецелого index
        """
        context = resolve_context(context)
        if isinstance(index, Component):
            if not index.is_integer():
                raise NumericError(
                    NumericErrorKind.DOMAIN_VIOLATION,
                    f"Integer power requires an integer index, got {index}",
                )
            index = index.as_big_int
        if isinstance(index, bool) or not isinstance(index, int):
            raise NumericError(
                NumericErrorKind.DOMAIN_VIOLATION,
                f"Integer power requires an integer index, got {index!r}",
            )
        if index < 0:
            raise NumericError(
                NumericErrorKind.DOMAIN_VIOLATION,
                f"Integer power requires a non-negative index, got {index}",
            )

        result = Component.from_int(1)
        for _ in range(index):
            result = result.mul(self, context)
        return result

    def pow(self, exponent: NumberLike, context: Optional[MathContext] = None) -> "Component":
        """Степень с произвольным показателем (см. exponential.power)."""
        from mcalc.core.math.exponential import power

        return power(self, Component.create(exponent), context)

    def neg(self) -> "Component":
        if self.is_zero():
            return self
        return Component.from_scaled_int(-self.as_big_int, self.precision)

    def abs(self) -> "Component":
        return self.neg() if self.sign < 0 else self

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def compare_to(self, that: NumberLike) -> int:
        """Точное сравнение: -1, 0 или 1."""
        a, b, _ = self._aligned(Component.create(that))
        return (a > b) - (a < b)

    def equals(self, that: NumberLike, context: Optional[MathContext] = None) -> bool:
        """Равенство после округления обоих значений до контекста."""
        context = resolve_context(context)
        that = Component.create(that)
        return self.round(context).compare_to(that.round(context)) == 0

    def less_than(self, that: NumberLike) -> bool:
        return self.compare_to(that) < 0

    def more_than(self, that: NumberLike) -> bool:
        return self.compare_to(that) > 0

    def less_equals(self, that: NumberLike, context: Optional[MathContext] = None) -> bool:
        return self.less_than(that) or self.equals(that, context)

    def more_equals(self, that: NumberLike, context: Optional[MathContext] = None) -> bool:
        return self.more_than(that) or self.equals(that, context)

    # =========================================================================
    # PYTHON PROTOCOL
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Component):
            return self.compare_to(other) == 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.integer, self.decimal))

    def __lt__(self, other: NumberLike) -> bool:
        return self.less_than(other)

    def __le__(self, other: NumberLike) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: NumberLike) -> bool:
        return self.more_than(other)

    def __ge__(self, other: NumberLike) -> bool:
        return self.compare_to(other) >= 0

    def __add__(self, other: NumberLike) -> "Component":
        return self.add(other)

    def __radd__(self, other: NumberLike) -> "Component":
        return Component.create(other).add(self)

    def __sub__(self, other: NumberLike) -> "Component":
        return self.sub(other)

    def __rsub__(self, other: NumberLike) -> "Component":
        return Component.create(other).sub(self)

    def __mul__(self, other: NumberLike) -> "Component":
        return self.mul(other)

    def __rmul__(self, other: NumberLike) -> "Component":
        return Component.create(other).mul(self)

    def __truediv__(self, other: NumberLike) -> "Component":
        return self.div(other)

    def __rtruediv__(self, other: NumberLike) -> "Component":
        return Component.create(other).div(self)

    def __mod__(self, other: NumberLike) -> "Component":
        return self.mod(other)

    def __pow__(self, other: NumberLike) -> "Component":
        return self.pow(other)

    def __neg__(self) -> "Component":
        return self.neg()

    def __pos__(self) -> "Component":
        return self

    def __abs__(self) -> "Component":
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        """Целая часть (усечение к нулю)."""
        return truncating_divmod(self.as_big_int, 10**self.precision)[0]

    def __float__(self) -> float:
        return float(str(self))

    def __str__(self) -> str:
        if self.integer == "-":
            return f"-0.{self.decimal}" if self.decimal else "0.0"
        return f"{self.integer or '0'}.{self.decimal or '0'}"

    def __repr__(self) -> str:
        return f"Component('{self}')"
