"""src/hwforecast/modeling/__init__.py"""

from .base import (
    HoltWintersBase,
    HoltWintersError,
    InvalidHorizonError,
    InvalidPeriodError,
    ModelKind,
)
from .factory import create_model, create_model_from_config, model_factory_from_config
from .holt_winters import HoltWintersDouble, HoltWintersSimple, HoltWintersTriple

__all__ = [
    "ModelKind",
    "HoltWintersBase",
    "HoltWintersError",
    "InvalidHorizonError",
    "InvalidPeriodError",
    "HoltWintersSimple",
    "HoltWintersDouble",
    "HoltWintersTriple",
    "create_model",
    "create_model_from_config",
    "model_factory_from_config",
]
