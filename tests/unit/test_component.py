"""
Тесты Component — точное десятичное число и арифметика

Проверяемые инварианты:
1. Фабрика нормализует все формы ввода к одной паре (integer, decimal)
2. add/sub/mul/div/mod/intpow/pow дают точный результат с округлением по контексту
3. Ошибки: формат, деление на ноль, неопределённость 0/0, 0^0
4. Алгебраические тождества в пределах контекста
"""

from decimal import Decimal

import pytest

from mcalc.core.domain.context import (
    DEFAULT_CONTEXT,
    MathContext,
    RoundingMode,
    local_context,
)
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.component import Component
from mcalc.core.math.constants import FOUR, ONE, TWO, ZERO


def c(value) -> Component:
    return Component.create(value)


# =============================================================================
# ТЕСТЫ: Создание и строковая форма
# =============================================================================


class TestCreate:
    """Тесты фабрики Component.create"""

    def test_integer_forms(self) -> None:
        """100 во всех формах ввода."""
        for value in (c(100), c("100"), c("1e2"), Component.create("100", "0")):
            assert str(value) == "100.0"

    def test_decimal_forms(self) -> None:
        """40.01 во всех формах ввода."""
        for value in (c(40.01), c("4.001e1"), c("4001e-2"), Component.create("40", "01")):
            assert str(value) == "40.01"

    def test_normalization(self) -> None:
        """Ведущие и завершающие нули удаляются."""
        value = c("007.2500")
        assert value.integer == "7"
        assert value.decimal == "25"
        assert value.precision == 2

    def test_zero_is_empty(self) -> None:
        """Ноль хранится как пустые строки, -0 не существует."""
        for value in (c("0"), c("-0.000"), c("0e5"), c(0)):
            assert (value.integer, value.decimal) == ("", "")
            assert value.sign == 0
            assert str(value) == "0.0"

    def test_negative_fraction(self) -> None:
        """-0.5 хранится как ('-', '5')."""
        value = c("-0.50")
        assert (value.integer, value.decimal) == ("-", "5")
        assert str(value) == "-0.5"
        assert value.sign == -1

    def test_lone_sign_renders_zero(self) -> None:
        """Знак без дробной части печатается как 0.0."""
        assert str(Component("-", "")) == "0.0"

    def test_scientific_small(self) -> None:
        """Отрицательная экспонента и float в научной записи."""
        assert str(c("1.23e-4")) == "0.000123"
        assert str(c(1e-05)) == "0.00001"
        assert str(c("+.5")) == "0.5"

    def test_decimal_input(self) -> None:
        """decimal.Decimal принимается через строковую форму."""
        assert str(c(Decimal("1.50"))) == "1.5"

    def test_derived_values(self) -> None:
        """as_big_int и as_string."""
        value = c("-12.345")
        assert value.as_big_int == -12345
        assert value.as_string == "-12345"
        assert ZERO.as_big_int == 0

    @pytest.mark.parametrize("literal", ["1.1.1", "abc", "", "-", ".", "1e", "1,5", "--1", "1e2.5"])
    def test_illegal_format(self, literal: str) -> None:
        """Невалидные литералы отклоняются."""
        with pytest.raises(NumericError, match="Illegal number format") as exc_info:
            c(literal)
        assert exc_info.value.kind is NumericErrorKind.ILLEGAL_NUMBER_FORMAT

    def test_illegal_pair(self) -> None:
        """Знак в дробной части пары запрещён."""
        with pytest.raises(NumericError):
            Component.create("1", "-5")

    def test_illegal_types(self) -> None:
        """Неподдерживаемые типы — TypeError."""
        with pytest.raises(TypeError):
            Component.create([1, 2])
        with pytest.raises(TypeError):
            Component.create(True)
        with pytest.raises(TypeError):
            Component.create(1, "5")


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты add/sub/mul/div/intpow"""

    def test_integers(self) -> None:
        """144 и -12."""
        a, b = c(144), c(-12)
        assert a.add(b) == c(132)
        assert a.sub(b) == c(156)
        assert a.mul(b) == c(-1728)
        assert a.div(b) == c(-12)
        assert b.intpow(2) == c(144)
        assert b.intpow(3) == c(-1728)

    def test_decimals(self) -> None:
        """0.144 и 1.2."""
        a, b = c("0.144"), c("1.2")
        assert a.add(b) == c("1.344")
        assert a.sub(b) == c("-1.056")
        assert a.mul(b) == c("0.1728")
        assert a.div(b) == c("0.12")
        assert b.intpow(2) == c("1.44")
        assert b.intpow(3) == c("1.728")

    def test_mixed_scales(self) -> None:
        """Выравнивание точностей при сложении."""
        assert str(c(120).add(c("0.123"))) == "120.123"

    def test_small_quotient(self) -> None:
        """1/10000 и округление частного."""
        assert str(c(1).div(c(10000))) == "0.0001"
        result = c("0.0001").div(c(1), MathContext(precision=2, rounding=RoundingMode.HALF_UP))
        assert result.is_zero()

    def test_division_truncates_before_rounding(self) -> None:
        """Частное усекается до context.precision цифр, затем округляется."""
        ctx = MathContext(precision=5, rounding=RoundingMode.HALF_UP)
        assert str(c(1).div(c(3), ctx)) == "0.33333"
        assert str(c(2).div(c(3), ctx)) == "0.66666"
        assert str(c(-2).div(c(3), ctx.with_rounding(RoundingMode.UP))) == "-0.66666"
        assert str(c(1).div(c(3), DEFAULT_CONTEXT)) == "0.33333333333333333"

    def test_division_natural_precision_is_rounded(self) -> None:
        """Если p1 - p2 больше точности контекста, частное округляется."""
        ctx = MathContext(precision=2, rounding=RoundingMode.HALF_UP)
        assert str(c("1.2345").div(c(1), ctx)) == "1.23"
        assert str(c("1.2355").div(c(1), ctx)) == "1.24"
        assert str(c("0.125").div(c(1), ctx.with_rounding(RoundingMode.HALF_DOWN))) == "0.12"

    def test_division_unnecessary(self) -> None:
        """UNNECESSARY проверяет только цифры за пределами естественной точности."""
        ctx = MathContext(precision=2, rounding=RoundingMode.UNNECESSARY)
        assert str(c(1).div(c(4), ctx)) == "0.25"
        assert str(c(1).div(c(3), ctx)) == "0.33"
        with pytest.raises(NumericError) as exc_info:
            c("0.125").div(c(1), ctx)
        assert exc_info.value.kind is NumericErrorKind.ROUNDING_NECESSARY

    def test_division_by_zero(self) -> None:
        """1/0 и 0/0."""
        with pytest.raises(NumericError, match="Cannot divide by zero") as exc_info:
            c(1).div(ZERO)
        assert exc_info.value.kind is NumericErrorKind.DIVISION_BY_ZERO

        with pytest.raises(NumericError, match="0/0") as exc_info:
            ZERO.div(ZERO)
        assert exc_info.value.kind is NumericErrorKind.INDETERMINATE_FORM

    def test_mod(self) -> None:
        """a - b·floor(a/b) со знаком делителя."""
        assert c(7).mod(c(3)) == c(1)
        assert c(-7).mod(c(3)) == c(2)
        assert c(7).mod(c(-3)) == c(-2)
        assert c("5.5").mod(c(2)) == c("1.5")
        assert c("-0.25").mod(c(1)) == c("0.75")

    def test_mod_by_zero(self) -> None:
        """Остаток от деления на ноль."""
        with pytest.raises(NumericError):
            c(1).mod(ZERO)

    def test_intpow_domain(self) -> None:
        """Отрицательный и дробный индекс отклоняются."""
        with pytest.raises(NumericError) as exc_info:
            c(2).intpow(-1)
        assert exc_info.value.kind is NumericErrorKind.DOMAIN_VIOLATION
        with pytest.raises(NumericError):
            c(2).intpow(c("1.5"))
        assert c(2).intpow(c(10)) == c(1024)
        assert c(5).intpow(0) == ONE

    def test_neg_abs(self) -> None:
        """neg/abs и ноль."""
        assert c("1.5").neg() == c("-1.5")
        assert c("-1.5").abs() == c("1.5")
        assert ZERO.neg() is ZERO

    def test_floor_ceil(self) -> None:
        """Точные floor/ceil."""
        assert c("-0.01").floor() == c(-1)
        assert c("-0.01").ceil().is_zero()
        assert c("2.5").floor() == c(2)
        assert c("2.5").ceil() == c(3)
        assert c(4).floor() == c(4)


# =============================================================================
# ТЕСТЫ: Степень
# =============================================================================


class TestPow:
    """Тесты pow"""

    def test_two_squared(self) -> None:
        """TWO.pow(TWO) == FOUR точно."""
        assert TWO.pow(TWO) == FOUR

    def test_negative_integer_exponent(self) -> None:
        """2^-2 = 0.25."""
        assert c(2).pow(-2) == c("0.25")

    def test_negative_base_integer_exponent(self) -> None:
        """(-2)^3 = -8."""
        assert c(-2).pow(3) == c(-8)
        assert c(-2).pow("2.0") == c(4)

    def test_square_root_exponent(self) -> None:
        """x^0.5 — точный корень."""
        assert c(4).pow("0.5") == c(2)
        assert str(c(2).pow("0.5")) == "1.41421356237309505"

    def test_fractional_exponent(self) -> None:
        """8^(1/3) через exp/ln."""
        ctx = MathContext(precision=10, rounding=RoundingMode.HALF_UP)
        assert str(c(8).pow(c(1).div(c(3), DEFAULT_CONTEXT), ctx)) == "2.0"
        assert str(c(10).pow("1.5", ctx)) == "31.6227766017"

    def test_zero_base(self) -> None:
        """0^0, 0^-1, 0^2."""
        with pytest.raises(NumericError) as exc_info:
            ZERO.pow(ZERO)
        assert exc_info.value.kind is NumericErrorKind.INDETERMINATE_FORM
        with pytest.raises(NumericError) as exc_info:
            ZERO.pow(-1)
        assert exc_info.value.kind is NumericErrorKind.DIVISION_BY_ZERO
        assert ZERO.pow(2).is_zero()

    def test_negative_base_fractional_exponent(self) -> None:
        """Отрицательное основание с дробным показателем."""
        with pytest.raises(NumericError) as exc_info:
            c(-8).pow("0.5")
        assert exc_info.value.kind is NumericErrorKind.DOMAIN_VIOLATION


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestComparison:
    """Тесты compare_to/equals/less_than/..."""

    def test_ordering(self) -> None:
        """Базовые сравнения."""
        assert c(1).less_than(c(2))
        assert c("0.25").less_than(c("0.26"))
        assert c("1.23").less_than(c("1.234"))
        assert c("4.75").equals(c("4.75"))
        assert not c("3.22").equals(c("0.322"))
        assert c(2).more_than(c("-3"))
        assert c("-0.5").compare_to(c("-0.50")) == 0

    def test_equals_uses_context(self) -> None:
        """20 и 20.1 равны только при precision 0."""
        assert not c(20).equals(c("20.1"))
        assert c(20).equals(c("20.1"), MathContext(precision=0, rounding=RoundingMode.HALF_UP))

    def test_less_more_equals(self) -> None:
        """less_equals/more_equals."""
        assert c(1).less_equals(c(1))
        assert c(1).less_equals(c(2))
        assert c(3).more_equals(c(2))
        assert not c(1).more_equals(c(2))

    def test_python_protocol(self) -> None:
        """Операторы Python используют контекст по умолчанию."""
        a, b = c("1.5"), c("0.5")
        assert a + b == c(2)
        assert a - b == ONE
        assert a * b == c("0.75")
        assert a / b == c(3)
        assert a % b == ZERO
        assert b**2 == c("0.25")
        assert -a == c("-1.5")
        assert abs(-a) == a
        assert 1 + b == c("1.5")
        assert b < a and a > b and a >= a and b <= a
        assert int(c("-2.7")) == -2
        assert float(c("0.25")) == 0.25
        assert not ZERO
        assert {c("1.50"), c("1.5")} == {c("1.5")}

    def test_operators_follow_default_context(self) -> None:
        """Деление через / использует текущий контекст."""
        with local_context(MathContext(precision=2, rounding=RoundingMode.DOWN)):
            assert str(c(2) / c(3)) == "0.66"


# =============================================================================
# ТЕСТЫ: Алгебраические тождества
# =============================================================================


class TestIdentities:
    """a + b - b = a, a·b/b = a, b² = b·b"""

    @pytest.mark.parametrize(
        "a, b",
        [("1.5", "2.25"), ("-12.125", "0.5"), ("3.14159", "-2.71828"), ("1000", "0.001")],
    )
    def test_identities(self, a: str, b: str) -> None:
        """Тождества в пределах контекста по умолчанию."""
        x, y = c(a), c(b)
        assert x.add(y).sub(y).equals(x)
        assert x.mul(y).div(y).equals(x)
        assert y.intpow(2).equals(y.mul(y))
