"""
MathContext — Precision & Rounding Policy

Пара (precision, rounding), передаваемая в каждую операцию, которая может
потерять информацию.

precision — количество цифр ПОСЛЕ десятичной точки (не значащие цифры).

Текущий контекст по умолчанию — единственная изменяемая ячейка процесса.
Её следует задавать один раз при старте приложения (single-writer);
конкурентная запись из нескольких потоков не поддерживается.
Ячейка читается только на границе публичного API (resolve_context),
внутренние алгоритмы всегда получают контекст явно.
"""

import os
from contextlib import contextmanager
from enum import Enum
from typing import Final, Iterator, Optional

from pydantic import BaseModel, Field

from mcalc.core.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления (8 вариантов)"""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"


# =============================================================================
# MATH CONTEXT MODEL
# =============================================================================


class MathContext(BaseModel):
    """
    Контекст вычислений.

    Immutable модель (frozen=True): изменение контекста создаёт новый экземпляр.
    Строковые значения rounding ("HALF_EVEN") приводятся к RoundingMode.
    """

    precision: int = Field(..., ge=0, description="Цифр после десятичной точки")
    rounding: RoundingMode = Field(..., description="Режим округления")

    model_config = {"frozen": True}

    def with_precision(self, precision: int) -> "MathContext":
        """Копия контекста с другой точностью."""
        return MathContext(precision=precision, rounding=self.rounding)

    def with_rounding(self, rounding: RoundingMode) -> "MathContext":
        """Копия контекста с другим режимом округления."""
        return MathContext(precision=self.precision, rounding=rounding)


# =============================================================================
# PRESETS
# =============================================================================

DEFAULT_CONTEXT: Final[MathContext] = MathContext(precision=17, rounding=RoundingMode.UP)

HIGH_PRECISION: Final[MathContext] = MathContext(precision=50, rounding=RoundingMode.UP)

SCIENTIFIC: Final[MathContext] = MathContext(precision=20, rounding=RoundingMode.HALF_EVEN)

HIGH_PRECISION_SCIENTIFIC: Final[MathContext] = MathContext(
    precision=50, rounding=RoundingMode.HALF_EVEN
)

ENV_PREFIX: Final[str] = "MCALC_"


# =============================================================================
# DEFAULT CONTEXT CELL
# =============================================================================

_default_context: MathContext = DEFAULT_CONTEXT


def get_default_context() -> MathContext:
    """Текущий контекст по умолчанию."""
    return _default_context


def set_default_context(context: MathContext) -> MathContext:
    """
    Заменить контекст по умолчанию.

    Args:
        context: Новый контекст

    Returns:
        Предыдущий контекст (для восстановления)

    Raises:
        TypeError: Если context не MathContext
    """
    global _default_context

    if not isinstance(context, MathContext):
        raise TypeError(f"context must be MathContext, got {type(context).__name__}")

    previous = _default_context
    _default_context = context
    logger.info(
        "Default math context changed: precision=%d rounding=%s",
        context.precision,
        context.rounding.value,
    )
    return previous


@contextmanager
def local_context(context: MathContext) -> Iterator[MathContext]:
    """
    Временно заменить контекст по умолчанию.

    Examples:
        >>> with local_context(HIGH_PRECISION):
        ...     get_default_context().precision
        50
    """
    previous = set_default_context(context)
    try:
        yield context
    finally:
        set_default_context(previous)


def resolve_context(context: Optional[MathContext]) -> MathContext:
    """Явный контекст или текущий контекст по умолчанию."""
    if context is None:
        return _default_context
    return context


def context_from_env(prefix: str = ENV_PREFIX) -> MathContext:
    """
    Построить контекст из переменных окружения.

    Читает <prefix>PRECISION и <prefix>ROUNDING; отсутствующие значения
    берутся из DEFAULT_CONTEXT.

    Raises:
        pydantic.ValidationError: Если значения невалидны
    """
    precision = os.getenv(f"{prefix}PRECISION", str(DEFAULT_CONTEXT.precision))
    rounding = os.getenv(f"{prefix}ROUNDING", DEFAULT_CONTEXT.rounding.value)
    return MathContext.model_validate({"precision": precision, "rounding": rounding.upper()})
