"""
Domain models: MathContext, RoundingMode and the default-context cell.
"""

from mcalc.core.domain.context import (
    DEFAULT_CONTEXT,
    ENV_PREFIX,
    HIGH_PRECISION,
    HIGH_PRECISION_SCIENTIFIC,
    SCIENTIFIC,
    MathContext,
    RoundingMode,
    context_from_env,
    get_default_context,
    local_context,
    resolve_context,
    set_default_context,
)

__all__ = [
    # Enums
    "RoundingMode",
    # Models
    "MathContext",
    # Presets
    "DEFAULT_CONTEXT",
    "HIGH_PRECISION",
    "HIGH_PRECISION_SCIENTIFIC",
    "SCIENTIFIC",
    "ENV_PREFIX",
    # Default context cell
    "context_from_env",
    "get_default_context",
    "local_context",
    "resolve_context",
    "set_default_context",
]
