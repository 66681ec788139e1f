"""
src/hwforecast/modeling/holt_winters.py

Online Holt-Winters exponential smoothing, three variants:

- HoltWintersSimple: level only
- HoltWintersDouble: level + trend (Holt's linear method)
- HoltWintersTriple: level + trend + additive seasonality

See Brutlag, "Aberrant Behavior Detection in Time Series for Network
Monitoring" (LISA 2000) for the seasonal recurrence.
"""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

from hwforecast.modeling.base import HoltWintersBase, InvalidPeriodError, ModelKind

logger = logging.getLogger(__name__)


class HoltWintersSimple(HoltWintersBase):
    """Level-only smoothing; flat forecast for every horizon."""

    kind = ModelKind.SIMPLE
    min_seen = 2

    def __init__(self, alpha: float) -> None:
        super().__init__(alpha)
        logger.debug("HoltWintersSimple created (alpha=%s)", alpha)

    def _update(self, value: float) -> None:
        if self._num_seen == 0:
            self._baseline = value
        else:
            old_baseline = self._baseline
            self._baseline = self._alpha * value + (1.0 - self._alpha) * old_baseline

    def _forecast(self, h: int) -> float:
        return self._baseline


class HoltWintersDouble(HoltWintersBase):
    """Level + trend; linear forecast ``baseline + h * slope``."""

    kind = ModelKind.DOUBLE
    min_seen = 3

    def __init__(self, alpha: float, beta: float) -> None:
        super().__init__(alpha, beta)
        logger.debug("HoltWintersDouble created (alpha=%s, beta=%s)", alpha, beta)

    def _update(self, value: float) -> None:
        if self._num_seen == 0:
            self._baseline = value
        elif self._num_seen == 1:
            self._slope = value - self._baseline
            self._baseline = value
        else:
            old_baseline = self._baseline
            old_slope = self._slope
            self._baseline = self._alpha * value + (1.0 - self._alpha) * (old_baseline + old_slope)
            self._slope = self._beta * (self._baseline - old_baseline) + (1.0 - self._beta) * old_slope

    def _forecast(self, h: int) -> float:
        return self._baseline + h * self._slope

    def _repr_params(self) -> str:
        return f"alpha={self._alpha!r}, beta={self._beta!r}"


class HoltWintersTriple(HoltWintersBase):
    """
    Level + trend + additive seasonality over a season of ``period`` steps.

    Seasonal values live in a fixed-size ring buffer. Logical index 0 is the
    physical slot at ``_head`` and always holds the component observed one
    full period before the next observation; a steady-state update overwrites
    that slot with the new estimate and advances the head, which is the same
    as dropping index 0 and appending at the end.

    Warm-up:
      - 1st value: baseline and seasonal[0]
      - 2nd value: slope, baseline and seasonal[1]
      - up to ``period`` values: raw values recorded in seasonal[n]
      - afterwards: full Holt-Winters recurrence

    Forecasts are available from the 3rd value on; until ``period`` values were
    seen they combine the bootstrap baseline/slope with raw or still-zero
    seasonal entries.
    """

    kind = ModelKind.TRIPLE
    min_seen = 3

    def __init__(self, alpha: float, beta: float, gamma: float, period: int) -> None:
        if isinstance(period, bool) or not isinstance(period, Integral) or period < 1:
            raise InvalidPeriodError(f"period must be a positive integer, got {period!r}")
        super().__init__(alpha, beta, gamma)
        self._period = int(period)
        self._seasonal = np.zeros(self._period, dtype=float)
        self._head = 0
        logger.debug(
            "HoltWintersTriple created (alpha=%s, beta=%s, gamma=%s, period=%d)",
            alpha, beta, gamma, self._period,
        )

    @property
    def period(self) -> int:
        return self._period

    @property
    def seasonal_values(self) -> np.ndarray:
        """Snapshot of the seasonal buffer in logical order (index 0 = oldest phase)."""
        return np.roll(self._seasonal, -self._head)

    def _slot(self, i: int) -> int:
        return (self._head + i) % self._period

    def _update(self, value: float) -> None:
        n = self._num_seen
        season = self._period

        if n == 0:
            self._baseline = value
            self._seasonal[self._slot(0)] = value
        elif n == 1:
            self._slope = value - self._baseline
            self._baseline = value
            if season > 1:
                self._seasonal[self._slot(1)] = value
        elif n < season:
            self._seasonal[self._slot(n)] = value
        else:
            old_baseline = self._baseline
            old_slope = self._slope
            slot = self._head
            old_seasonal = float(self._seasonal[slot])
            self._head = (self._head + 1) % season

            self._baseline = self._alpha * (value - old_seasonal) + (1.0 - self._alpha) * (old_baseline + old_slope)
            self._slope = self._beta * (self._baseline - old_baseline) + (1.0 - self._beta) * old_slope
            # slot of the dropped index 0 is the new last index
            self._seasonal[slot] = self._gamma * (value - self._baseline) + (1.0 - self._gamma) * old_seasonal

    def _forecast(self, h: int) -> float:
        season = self._period
        idx = (season - 1 + (h - 1) % season) % season
        return self._baseline + h * self._slope + float(self._seasonal[self._slot(idx)])

    def _repr_params(self) -> str:
        return f"alpha={self._alpha!r}, beta={self._beta!r}, gamma={self._gamma!r}, period={self._period}"

    def __repr__(self) -> str:
        base = super().__repr__()
        return f"{base[:-1]}, seasonal_values={self.seasonal_values.tolist()!r})"
