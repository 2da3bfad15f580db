"""
Errors — Numeric Error Taxonomy

Единый тип исключения для всего численного ядра.

Вместо иерархии классов используется закрытый набор тегов (NumericErrorKind):
вызывающий код различает ошибки по полю `kind`, а не по типу исключения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка поднимается синхронно в точке нарушения
2. Ядро не выполняет локального восстановления
3. Операция либо возвращает валидное значение, либо поднимает ошибку
"""

from enum import Enum
from typing import Any, Mapping, Optional


class NumericErrorKind(str, Enum):
    """Вид численной ошибки"""

    ILLEGAL_NUMBER_FORMAT = "illegal_number_format"
    DIVISION_BY_ZERO = "division_by_zero"
    INDETERMINATE_FORM = "indeterminate_form"
    UNDEFINED_VALUE = "undefined_value"
    ROUNDING_NECESSARY = "rounding_necessary"
    DOMAIN_VIOLATION = "domain_violation"
    CONVERGENCE_FAILURE = "convergence_failure"
    INVALID_INDEX = "invalid_index"


class NumericError(Exception):
    """
    Исключение численного ядра.

    Args:
        kind: Вид ошибки
        message: Человекочитаемое описание
        details: Дополнительные данные (аргументы, контекст)

    Examples:
        >>> try:
        ...     raise NumericError(NumericErrorKind.DIVISION_BY_ZERO, "Cannot divide by zero.")
        ... except NumericError as exc:
        ...     exc.kind is NumericErrorKind.DIVISION_BY_ZERO
        True
    """

    def __init__(
        self,
        kind: NumericErrorKind,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def __reduce__(self):
        return (type(self), (self.kind, self.message, self.details))
