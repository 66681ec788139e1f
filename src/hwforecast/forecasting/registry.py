"""
src/hwforecast/forecasting/registry.py

Keeps one model per series id. A model is spawned from the factory on the
first value received for an id; values for an id must come from a single
writer, distinct ids are independent.
"""

from __future__ import annotations

import logging
from typing import Iterator

from hwforecast.modeling.base import HoltWintersBase
from hwforecast.modeling.factory import ModelFactory

logger = logging.getLogger(__name__)


class ModelRegistry:
    def __init__(self, factory: ModelFactory) -> None:
        self._factory = factory
        self._models: dict[str, HoltWintersBase] = {}

    def __contains__(self, series_id: object) -> bool:
        return series_id in self._models

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    @property
    def series_ids(self) -> list[str]:
        return list(self._models)

    def get(self, series_id: str) -> HoltWintersBase:
        try:
            return self._models[series_id]
        except KeyError:
            raise KeyError(f"Unknown series: {series_id!r}") from None

    def add_next_value(self, series_id: str, value: float) -> HoltWintersBase:
        model = self._models.get(series_id)
        if model is None:
            model = self._factory()
            self._models[series_id] = model
            logger.info("New series %r -> %s", series_id, type(model).__name__)
        model.add_next_value(value)
        return model

    def get_forecast(self, series_id: str, h: int) -> float | None:
        return self.get(series_id).get_forecast(h)

    def get_deviation(self, series_id: str) -> float | None:
        return self.get(series_id).get_deviation()
