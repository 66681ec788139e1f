"""src/hwforecast/forecasting/__init__.py"""

from .registry import ModelRegistry
from .trace import DeviationSummary, forecast_horizon, replay, score_trace

__all__ = [
    "DeviationSummary",
    "ModelRegistry",
    "replay",
    "forecast_horizon",
    "score_trace",
]
