"""
BigNum — Cayley-Dickson Hypercomplex Numbers

Упорядоченный набор компонент Component длиной 2^n: первая — вещественная
часть, остальные — мнимые единицы конструкции Кэли-Диксона
(комплексные, кватернионы, октонионы, ...).

Умножение рекурсивно по половинам:
    (a, b)·(c, d) = (a·c - d*·b,  d·a + b·c*)
где x* — сопряжение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Завершающие нулевые компоненты удаляются, затем длина дополняется
   нулями до ближайшей степени двойки (ноль имеет dim = 1)
2. Значение неизменяемо
"""

from typing import Final, Optional, Sequence, Tuple

from mcalc.core.domain.context import MathContext, resolve_context
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.component import Component, NumberLike
from mcalc.core.math.constants import ZERO
from mcalc.core.math.exponential import sqrt
from mcalc.core.math.numerical_safeguards import finalize, working_context
from mcalc.core.math.parsers import next_power_of_two, pad, trim_zeroes

Components = Tuple[Component, ...]

DIVISION_SIDES: Final[Tuple[str, str]] = ("right", "left")


# =============================================================================
# CAYLEY-DICKSON PRIMITIVES
# =============================================================================


def _conj(x: Components) -> Components:
    return (x[0],) + tuple(c.neg() for c in x[1:])


def _add(x: Components, y: Components, context: MathContext) -> Components:
    return tuple(a.add(b, context) for a, b in zip(x, y))


def _sub(x: Components, y: Components, context: MathContext) -> Components:
    return tuple(a.sub(b, context) for a, b in zip(x, y))


def _scale(x: Components, factor: Component, context: MathContext) -> Components:
    return tuple(c.mul(factor, context) for c in x)


def _multiply(x: Components, y: Components, context: MathContext) -> Components:
    """Произведение Кэли-Диксона для наборов одинаковой длины 2^n."""
    size = len(x)
    if size == 1:
        return (x[0].mul(y[0], context),)

    half = size // 2
    a, b = x[:half], x[half:]
    c, d = y[:half], y[half:]

    left = _sub(_multiply(a, c, context), _multiply(_conj(d), b, context), context)
    right = _add(_multiply(d, a, context), _multiply(b, _conj(c), context), context)
    return left + right


def _normalize(values: Sequence[Component]) -> Components:
    trimmed = trim_zeroes(values, ZERO)
    size = next_power_of_two(len(trimmed))
    return tuple(pad(trimmed, size - len(trimmed), ZERO))


# =============================================================================
# BIGNUM
# =============================================================================


class BigNum:
    """
    Гиперкомплексное число конструкции Кэли-Диксона.

    Examples:
        >>> q = BigNum.hyper("1", "2", "3")
        >>> q.dim
        4
        >>> str(BigNum.complex(0, 1).mul(BigNum.complex(0, 1)))
        '(-1.0)'
    """

    __slots__ = ("_components",)

    def __init__(self, *values: NumberLike) -> None:
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])
        if not values:
            raise TypeError("BigNum requires at least one component")
        self._components = _normalize([Component.create(value) for value in values])

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def real(cls, value: NumberLike) -> "BigNum":
        return cls(value)

    @classmethod
    def complex(cls, re: NumberLike, im: NumberLike) -> "BigNum":
        return cls(re, im)

    @classmethod
    def hyper(cls, *values: NumberLike) -> "BigNum":
        return cls(*values)

    @classmethod
    def _coerce(cls, value) -> "BigNum":
        if isinstance(value, BigNum):
            return value
        return cls(value)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def components(self) -> Components:
        return self._components

    @property
    def dim(self) -> int:
        return len(self._components)

    @property
    def real_part(self) -> Component:
        return self._components[0]

    @property
    def imaginary_parts(self) -> Components:
        return self._components[1:]

    def is_real(self) -> bool:
        return self.dim == 1

    def is_zero(self) -> bool:
        return self.dim == 1 and self._components[0].is_zero()

    def _padded(self, size: int) -> Components:
        return tuple(pad(self._components, size - self.dim, ZERO))

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    def neg(self) -> "BigNum":
        return BigNum(tuple(c.neg() for c in self._components))

    def conj(self) -> "BigNum":
        """Сопряжение: мнимые части меняют знак."""
        return BigNum(_conj(self._components))

    def re(self) -> "BigNum":
        """Вещественная часть."""
        return BigNum(self._components[0])

    def im(self) -> "BigNum":
        """Мнимая часть (вещественная компонента обнулена)."""
        return BigNum((ZERO,) + self._components[1:])

    def round(self, context: Optional[MathContext] = None) -> "BigNum":
        return BigNum(tuple(c.round(context) for c in self._components))

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def add(self, that, context: Optional[MathContext] = None) -> "BigNum":
        that = BigNum._coerce(that)
        size = max(self.dim, that.dim)
        return BigNum(_add(self._padded(size), that._padded(size), context))

    def sub(self, that, context: Optional[MathContext] = None) -> "BigNum":
        that = BigNum._coerce(that)
        size = max(self.dim, that.dim)
        return BigNum(_sub(self._padded(size), that._padded(size), context))

    def mul(self, that, context: Optional[MathContext] = None) -> "BigNum":
        """Произведение Кэли-Диксона (некоммутативно при dim >= 4)."""
        that = BigNum._coerce(that)
        if that.dim == 1:
            return BigNum(_scale(self._components, that.real_part, context))
        if self.dim == 1:
            return BigNum(_scale(that._components, self.real_part, context))
        size = max(self.dim, that.dim)
        return BigNum(_multiply(self._padded(size), that._padded(size), context))

    def _squared_magnitude(self, context: MathContext) -> Component:
        total = ZERO
        for c in self._components:
            total = total.add(c.mul(c, context), context)
        return total

    def magnitude(self, context: Optional[MathContext] = None) -> Component:
        """Евклидова норма √Σc²."""
        context = resolve_context(context)
        working = working_context(context)
        return finalize(sqrt(self._squared_magnitude(working), working), context)

    def abs(self, context: Optional[MathContext] = None) -> "BigNum":
        return BigNum(self.magnitude(context))

    def norm(self, context: Optional[MathContext] = None) -> Component:
        """√ вещественной части conj(q)·q."""
        context = resolve_context(context)
        working = working_context(context)
        product = self.conj().mul(self, working)
        return finalize(sqrt(product.real_part, working), context)

    def inv(self, context: Optional[MathContext] = None) -> "BigNum":
        """
        Обратный элемент conj(q)/|q|².

        Raises:
            NumericError: DIVISION_BY_ZERO для нуля
        """
        context = resolve_context(context)
        if self.is_zero():
            raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot invert zero.")
        working = working_context(context)
        squared = self._squared_magnitude(working)
        return BigNum(
            tuple(finalize(c.div(squared, working), context) for c in _conj(self._components))
        )

    def div(self, that, context: Optional[MathContext] = None, side: str = "right") -> "BigNum":
        """
        Деление: side="right" — q·that⁻¹, side="left" — that⁻¹·q.

        Raises:
            NumericError: DIVISION_BY_ZERO/INDETERMINATE_FORM при делении на ноль
            ValueError: При неизвестном side
        """
        if side not in DIVISION_SIDES:
            raise ValueError(f"side must be one of {DIVISION_SIDES}, got {side!r}")
        context = resolve_context(context)
        that = BigNum._coerce(that)
        if that.is_zero():
            if self.is_zero():
                raise NumericError(NumericErrorKind.INDETERMINATE_FORM, "Cannot determine 0/0.")
            raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero.")

        working = working_context(context)
        if that.is_real():
            quotient = BigNum(tuple(c.div(that.real_part, working) for c in self._components))
        elif side == "right":
            quotient = self.mul(that.inv(working), working)
        else:
            quotient = that.inv(working).mul(self, working)
        return BigNum(tuple(finalize(c, context) for c in quotient.components))

    # =========================================================================
    # COMPARISON & PROTOCOL
    # =========================================================================

    def equals(self, that, context: Optional[MathContext] = None) -> bool:
        """Покомпонентное равенство с округлением до контекста."""
        that = BigNum._coerce(that)
        size = max(self.dim, that.dim)
        return all(
            a.equals(b, context) for a, b in zip(self._padded(size), that._padded(size))
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigNum):
            return self._components == other._components
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._components)

    def __add__(self, other) -> "BigNum":
        return self.add(other)

    def __sub__(self, other) -> "BigNum":
        return self.sub(other)

    def __mul__(self, other) -> "BigNum":
        return self.mul(other)

    def __truediv__(self, other) -> "BigNum":
        return self.div(other)

    def __neg__(self) -> "BigNum":
        return self.neg()

    def __str__(self) -> str:
        return "(" + ", ".join(str(c) for c in self._components) + ")"

    def __repr__(self) -> str:
        return "BigNum(" + ", ".join(f"'{c}'" for c in self._components) + ")"
