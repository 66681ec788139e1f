"""src/hwforecast/forecasting/trace.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
import pandas as pd

from hwforecast.modeling.base import HoltWintersBase, check_horizon


TRACE_COLUMNS = ["Step", "Value", "Forecast", "Deviation", "Baseline", "Slope"]


def _nan_if_none(x: float | None) -> float:
    return float("nan") if x is None else float(x)


def replay(model: HoltWintersBase, values: Iterable[float]) -> pd.DataFrame:
    """
    Feed ``values`` through ``model`` one at a time and record its state.

    One row per value:
      Step: model.num_seen after the update (1-based)
      Forecast: one-step forecast made before the value was seen
      Deviation: |Value - Forecast|
      Baseline/Slope: state after the update
    Absent quantities are NaN. The model is mutated in place.
    """
    rows: list[dict[str, float]] = []
    for v in values:
        model.add_next_value(v)
        rows.append(
            {
                "Step": model.num_seen,
                "Value": _nan_if_none(model.last_value),
                "Forecast": _nan_if_none(model.last_forecast),
                "Deviation": _nan_if_none(model.get_deviation()),
                "Baseline": _nan_if_none(model.baseline),
                "Slope": _nan_if_none(model.slope),
            }
        )
    if not rows:
        return pd.DataFrame(columns=TRACE_COLUMNS)
    return pd.DataFrame(rows, columns=TRACE_COLUMNS)


def forecast_horizon(model: HoltWintersBase, steps: int) -> np.ndarray | None:
    """Forecasts for h = 1..steps, or None while the model is warming up."""
    steps = check_horizon(steps)
    if not model.warmed_up:
        return None
    return np.array([model.get_forecast(h) for h in range(1, steps + 1)], dtype=float)


@dataclass(frozen=True)
class DeviationSummary:
    """One-step absolute deviations of a trace, warm-up rows excluded."""
    n: int
    mean: float
    rms: float
    max: float

    def as_dict(self) -> dict[str, float]:
        return {"N": int(self.n), "Mean_Deviation": self.mean, "RMS_Deviation": self.rms, "Max_Deviation": self.max}


def score_trace(trace: pd.DataFrame) -> DeviationSummary:
    if "Deviation" not in trace.columns:
        raise KeyError(f"trace missing column 'Deviation'; found {list(trace.columns)}")
    dev = trace["Deviation"].to_numpy(dtype=float)
    # NaN marks steps where no forecast existed yet
    dev = dev[np.isfinite(dev)]
    if dev.size == 0:
        nan = float("nan")
        return DeviationSummary(n=0, mean=nan, rms=nan, max=nan)
    return DeviationSummary(
        n=int(dev.size),
        mean=float(dev.mean()),
        rms=float(np.sqrt(np.mean(dev ** 2))),
        max=float(dev.max()),
    )
