"""
Тесты Rounding Engine

Проверяемые инварианты:
1. Таблица 8 режимов при precision 0 воспроизводится побитово
2. UNNECESSARY поднимает ROUNDING_NECESSARY при ненулевом остатке
3. Значение с precision <= целевой не изменяется
4. Пороги ONE/FIVE учитывают только отброшенную часть
"""

import pytest

from mcalc.core.domain.context import MathContext, RoundingMode
from mcalc.core.errors import NumericError, NumericErrorKind
from mcalc.core.math.component import Component
from mcalc.core.math.rounding import round_unscaled, truncating_divmod

INPUTS = ["5.5", "2.5", "1.6", "1.1", "1.0", "-1.0", "-1.1", "-1.6", "-2.5", "-5.5"]

EXPECTED = {
    RoundingMode.UP: ["6", "3", "2", "2", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.DOWN: ["5", "2", "1", "1", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.CEILING: ["6", "3", "2", "2", "1", "-1", "-1", "-1", "-2", "-5"],
    RoundingMode.FLOOR: ["5", "2", "1", "1", "1", "-1", "-2", "-2", "-3", "-6"],
    RoundingMode.HALF_UP: ["6", "3", "2", "1", "1", "-1", "-1", "-2", "-3", "-6"],
    RoundingMode.HALF_DOWN: ["5", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-5"],
    RoundingMode.HALF_EVEN: ["6", "2", "2", "1", "1", "-1", "-1", "-2", "-2", "-6"],
}


def _round(value: str, precision: int, mode: RoundingMode) -> Component:
    return Component.create(value).round(MathContext(precision=precision, rounding=mode))


# =============================================================================
# ТЕСТЫ: Таблица режимов
# =============================================================================


class TestRoundingTable:
    """Литеральная таблица округления до precision 0."""

    @pytest.mark.parametrize("mode", list(EXPECTED))
    def test_mode_table(self, mode: RoundingMode) -> None:
        """Каждый режим даёт ожидаемую строку результатов."""
        results = [_round(value, 0, mode) for value in INPUTS]
        expected = [Component.create(value) for value in EXPECTED[mode]]
        assert results == expected

    @pytest.mark.parametrize("value", ["5.5", "2.5", "1.6", "1.1", "-1.1", "-1.6", "-2.5", "-5.5"])
    def test_unnecessary_raises_on_inexact(self, value: str) -> None:
        """UNNECESSARY отказывает при ненулевой отброшенной части."""
        with pytest.raises(NumericError, match="Rounding necessary") as exc_info:
            _round(value, 0, RoundingMode.UNNECESSARY)
        assert exc_info.value.kind is NumericErrorKind.ROUNDING_NECESSARY

    def test_unnecessary_passes_exact(self) -> None:
        """1.0 и -1.0 точны при precision 0."""
        assert _round("1.0", 0, RoundingMode.UNNECESSARY) == Component.create("1")
        assert _round("-1.0", 0, RoundingMode.UNNECESSARY) == Component.create("-1")

    def test_unnecessary_five_point_zero_one(self) -> None:
        """5.01 при precision 0 требует округления."""
        with pytest.raises(NumericError):
            _round("5.01", 0, RoundingMode.UNNECESSARY)

    def test_half_values_distinguish_modes(self) -> None:
        """2.5 и -2.5 различают все 7 режимов кроме UNNECESSARY."""
        pairs = {mode: (str(_round("2.5", 0, mode)), str(_round("-2.5", 0, mode))) for mode in EXPECTED}
        assert pairs[RoundingMode.UP] == ("3.0", "-3.0")
        assert pairs[RoundingMode.DOWN] == ("2.0", "-2.0")
        assert pairs[RoundingMode.CEILING] == ("3.0", "-2.0")
        assert pairs[RoundingMode.FLOOR] == ("2.0", "-3.0")
        assert pairs[RoundingMode.HALF_UP] == ("3.0", "-3.0")
        assert pairs[RoundingMode.HALF_DOWN] == ("2.0", "-2.0")
        assert pairs[RoundingMode.HALF_EVEN] == ("2.0", "-2.0")


# =============================================================================
# ТЕСТЫ: Детали алгоритма
# =============================================================================


class TestRoundingDetails:
    """Пороги, no-op и вставка точки."""

    def test_half_even_at_precision_one(self) -> None:
        """5.15 → 5.2 и 5.25 → 5.2 (HALF_EVEN)."""
        assert str(_round("5.15", 1, RoundingMode.HALF_EVEN)) == "5.2"
        assert str(_round("5.25", 1, RoundingMode.HALF_EVEN)) == "5.2"

    def test_no_op_when_precision_fits(self) -> None:
        """Значение с меньшей точностью возвращается тем же объектом."""
        value = Component.create("1.25")
        assert value.round(MathContext(precision=5, rounding=RoundingMode.UNNECESSARY)) is value

    def test_up_inspects_first_discarded_digit(self) -> None:
        """UP сравнивает остаток с 10^(diff-1): 1.001 при precision 0 не растёт."""
        assert str(_round("1.001", 0, RoundingMode.UP)) == "1.0"
        assert str(_round("1.001", 1, RoundingMode.UP)) == "1.0"
        assert str(_round("1.1", 0, RoundingMode.UP)) == "2.0"

    def test_rounding_to_zero_keeps_no_sign(self) -> None:
        """Округление -0.4 к нулю даёт ноль без знака."""
        result = _round("-0.4", 0, RoundingMode.HALF_UP)
        assert result.is_zero()
        assert str(result) == "0.0"

    def test_point_reinserted_at_precision(self) -> None:
        """Округление до 2 знаков."""
        assert str(_round("3.14159", 2, RoundingMode.HALF_UP)) == "3.14"
        assert str(_round("-3.14159", 3, RoundingMode.FLOOR)) == "-3.142"

    def test_round_unscaled_rejects_non_positive_diff(self) -> None:
        """diff должен быть положительным."""
        with pytest.raises(ValueError, match="diff must be positive"):
            round_unscaled(15, 0, RoundingMode.UP)

    def test_truncating_divmod_sign(self) -> None:
        """Остаток имеет знак делимого."""
        assert truncating_divmod(-55, 10) == (-5, -5)
        assert truncating_divmod(55, 10) == (5, 5)
        assert truncating_divmod(-5, 10) == (0, -5)
