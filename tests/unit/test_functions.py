"""
Тесты обобщённых функций с выбором реализации по типу аргумента
"""

import math

import pytest

from mcalc.core.domain.context import SCIENTIFIC
from mcalc.core.math import functions
from mcalc.core.math.bignum import BigNum
from mcalc.core.math.component import Component

UNARY = [
    "exp", "ln", "log", "sqrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
]


class TestDispatch:
    """Тесты выбора реализации"""

    def test_native_numbers(self) -> None:
        """int/float → math, результат float."""
        assert functions.sqrt(16) == 4.0
        assert functions.exp(0.0) == 1.0
        assert math.isclose(functions.atan2(1, 1), math.pi / 4)
        assert functions.floor(-1.5) == -2
        assert functions.ceil(1.2) == 2
        assert functions.abs(-3) == 3
        assert functions.neg(2.5) == -2.5
        assert functions.power(2, 10) == 1024

    def test_component(self) -> None:
        """Component → точные функции."""
        assert functions.sqrt(Component.create("0.25")) == Component.create("0.5")
        assert functions.floor(Component.create("-1.5")) == Component.create(-2)
        assert functions.ceil(Component.create("1.2")) == Component.create(2)
        assert functions.abs(Component.create(-3)) == Component.create(3)
        assert functions.neg(Component.create("2.5")) == Component.create("-2.5")
        assert functions.power(Component.create(2), 10) == Component.create(1024)
        assert isinstance(functions.sin(Component.create(1), SCIENTIFIC), Component)

    def test_bignum(self) -> None:
        """BigNum → гиперкомплексные функции."""
        assert functions.sqrt(BigNum(-4)) == BigNum.complex(0, 2)
        assert functions.abs(BigNum.complex(3, 4)) == BigNum(5)
        assert functions.neg(BigNum(1, 2)) == BigNum(-1, -2)
        assert functions.power(BigNum.complex(0, 1), 2) == BigNum(-1)

    def test_atan2_component(self, assert_close) -> None:
        """atan2 для Component."""
        assert_close(functions.atan2(Component.create(1), 1, SCIENTIFIC), "0.78539816339744830961")

    @pytest.mark.parametrize("name", UNARY)
    def test_all_types_agree(self, name: str, assert_close) -> None:
        """Три реализации согласованы в общей точке."""
        x = 2.0 if name == "acosh" else 0.5
        function = getattr(functions, name)
        native = function(x)
        decimal = function(Component.create(x), SCIENTIFIC)
        hyper = function(BigNum(x), SCIENTIFIC)
        assert_close(decimal, repr(native), "1e-14")
        assert hyper.equals(BigNum(decimal), SCIENTIFIC)

    @pytest.mark.parametrize("name", UNARY + ["neg", "abs", "floor", "ceil"])
    def test_unsupported_type(self, name: str) -> None:
        """Неподдерживаемый тип — TypeError."""
        with pytest.raises(TypeError, match=f"Operation {name} not defined for object of type str"):
            getattr(functions, name)("1.0")

    def test_floor_bignum_unsupported(self) -> None:
        """floor не определён для BigNum."""
        with pytest.raises(TypeError, match="BigNum"):
            functions.floor(BigNum(1, 1))

    def test_binary_unsupported(self) -> None:
        """atan2/power для неподдерживаемых типов."""
        with pytest.raises(TypeError, match="atan2"):
            functions.atan2("1", 1)
        with pytest.raises(TypeError, match="pow"):
            functions.power("2", 2)

    def test_metadata(self) -> None:
        """Имя и документация обобщённой функции."""
        assert functions.sin.__name__ == "sin"
        assert "BigNum" in functions.sin.__doc__
