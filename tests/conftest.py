"""
Общие фикстуры тестов mcalc
"""

import pytest

from mcalc.core.domain.context import DEFAULT_CONTEXT, MathContext, RoundingMode, set_default_context
from mcalc.core.math.component import Component


def _assert_close(actual, expected, tolerance: str = "1e-15") -> None:
    actual = Component.create(actual)
    expected = Component.create(expected)
    exact = MathContext(precision=max(actual.precision, expected.precision), rounding=RoundingMode.DOWN)
    difference = actual.sub(expected, exact).abs()
    assert difference.compare_to(Component.create(tolerance)) <= 0, (
        f"{actual} differs from {expected} by {difference} (> {tolerance})"
    )


@pytest.fixture
def assert_close():
    """Проверка |actual - expected| <= tolerance по точной разности."""
    return _assert_close


@pytest.fixture(autouse=True)
def reset_default_context():
    """Каждый тест начинается и заканчивается с DEFAULT_CONTEXT."""
    set_default_context(DEFAULT_CONTEXT)
    yield
    set_default_context(DEFAULT_CONTEXT)
