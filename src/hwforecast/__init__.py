"""hwforecast: online Holt-Winters exponential smoothing."""

from .modeling import (
    HoltWintersBase,
    HoltWintersDouble,
    HoltWintersError,
    HoltWintersSimple,
    HoltWintersTriple,
    InvalidHorizonError,
    InvalidPeriodError,
    ModelKind,
    create_model,
)

__version__ = "0.1.0"

__all__ = [
    "ModelKind",
    "HoltWintersBase",
    "HoltWintersSimple",
    "HoltWintersDouble",
    "HoltWintersTriple",
    "HoltWintersError",
    "InvalidHorizonError",
    "InvalidPeriodError",
    "create_model",
]
