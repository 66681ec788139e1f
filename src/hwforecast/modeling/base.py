"""
src/hwforecast/modeling/base.py

Shared state and lifecycle of the online Holt-Winters models.

Each model is fed one observation at a time through ``add_next_value`` and
answers ``get_forecast(h)`` / ``get_deviation()`` from its current state.
Absent values (not yet warmed up) are ``None``, never a placeholder number.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from numbers import Integral
from typing import ClassVar

import numpy as np


class ModelKind(IntEnum):
    SIMPLE = 1
    DOUBLE = 2
    TRIPLE = 3


class HoltWintersError(ValueError):
    """Base class for caller precondition violations."""


class InvalidPeriodError(HoltWintersError):
    pass


class InvalidHorizonError(HoltWintersError):
    pass


def check_horizon(h: int) -> int:
    """Return ``h`` as int, or raise InvalidHorizonError unless it is an integer >= 1."""
    if isinstance(h, bool) or not isinstance(h, Integral) or h < 1:
        raise InvalidHorizonError(f"horizon must be an integer >= 1, got {h!r}")
    return int(h)


class HoltWintersBase(ABC):
    """
    Common lifecycle for the three smoothing variants.

    Subclasses implement the update recurrence (``_update``) and the forecast
    formula (``_forecast``) and declare how many observations the forecast
    needs (``min_seen``).
    """

    kind: ClassVar[ModelKind]
    min_seen: ClassVar[int]

    def __init__(self, alpha: float, beta: float | None = None, gamma: float | None = None) -> None:
        self._alpha = alpha
        self._beta = beta
        self._gamma = gamma

        self._num_seen = 0
        self._value: float | None = None
        self._last_forecast: float | None = None
        self._baseline: float | None = None
        self._slope: float | None = None

    # ---- read accessors ----
    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def beta(self) -> float | None:
        return self._beta

    @property
    def gamma(self) -> float | None:
        return self._gamma

    @property
    def period(self) -> int | None:
        return None

    @property
    def seasonal_values(self) -> np.ndarray | None:
        return None

    @property
    def num_seen(self) -> int:
        return self._num_seen

    @property
    def last_value(self) -> float | None:
        return self._value

    @property
    def last_forecast(self) -> float | None:
        return self._last_forecast

    @property
    def baseline(self) -> float | None:
        return self._baseline

    @property
    def slope(self) -> float | None:
        return self._slope

    @property
    def warmed_up(self) -> bool:
        return self._num_seen >= self.min_seen

    # ---- operations ----
    def add_next_value(self, value: float) -> None:
        value = float(value)
        # forecast for this very point, made from the state before the update
        forecast = self.get_forecast(1)
        self._update(value)
        self._last_forecast = forecast
        self._value = value
        self._num_seen += 1

    def get_forecast(self, h: int) -> float | None:
        h = check_horizon(h)
        if not self.warmed_up:
            return None
        return self._forecast(h)

    def get_deviation(self) -> float | None:
        if self._value is None or self._last_forecast is None:
            return None
        return abs(self._value - self._last_forecast)

    @abstractmethod
    def _update(self, value: float) -> None: ...

    @abstractmethod
    def _forecast(self, h: int) -> float: ...

    def _repr_params(self) -> str:
        return f"alpha={self._alpha!r}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._repr_params()}, num_seen={self._num_seen}, "
            f"baseline={self._baseline!r}, slope={self._slope!r}, last_value={self._value!r})"
        )
