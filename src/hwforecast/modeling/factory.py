"""src/hwforecast/modeling/factory.py"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable

from hwforecast.common.config import AppConfig
from hwforecast.modeling.base import HoltWintersBase, HoltWintersError
from hwforecast.modeling.holt_winters import HoltWintersDouble, HoltWintersSimple, HoltWintersTriple
from hwforecast.validation.checks import check_param_types, check_smoothing_params

logger = logging.getLogger(__name__)

ModelFactory = Callable[[], HoltWintersBase]

_PARAM_KEYS = ("alpha", "beta", "gamma", "period")


def create_model(
    alpha: float,
    *,
    beta: float | None = None,
    gamma: float | None = None,
    period: int | None = None,
) -> HoltWintersBase:
    """
    Pick the variant from the parameters that are present:
      beta + gamma + period -> HoltWintersTriple
      beta                  -> HoltWintersDouble
      none of them          -> HoltWintersSimple

    The seasonal condition is checked first, so a full parameter set always
    yields the seasonal model. gamma/period without beta, or one of them
    without the other, is rejected.
    """
    if beta is not None and gamma is not None and period is not None:
        model: HoltWintersBase = HoltWintersTriple(alpha, beta, gamma, period)
    elif gamma is not None or period is not None:
        raise HoltWintersError(
            "seasonal smoothing needs beta, gamma and period together "
            f"(got beta={beta!r}, gamma={gamma!r}, period={period!r})"
        )
    elif beta is not None:
        model = HoltWintersDouble(alpha, beta)
    else:
        model = HoltWintersSimple(alpha)

    logger.info("Selected %s model: %s", model.kind.name.lower(), type(model).__name__)
    return model


def model_params_from_config(cfg: AppConfig) -> dict[str, Any]:
    section = cfg.model

    unknown = sorted(set(section) - set(_PARAM_KEYS))
    if unknown:
        logger.warning("Ignoring unknown model config keys: %s", ", ".join(unknown))

    params = {k: section.get(k) for k in _PARAM_KEYS}

    types = check_param_types(**params)
    if not types.ok:
        raise HoltWintersError("Invalid model config:\n" + "\n".join(types.errors))

    # out-of-range constants only warn
    for err in check_smoothing_params(**params).errors:
        logger.warning("Model config: %s", err)
    return params


def model_factory_from_config(cfg: AppConfig) -> ModelFactory:
    """Zero-argument factory producing a fresh model per call (one per series)."""
    params = model_params_from_config(cfg)
    alpha = params.pop("alpha")
    return partial(create_model, alpha, **params)


def create_model_from_config(cfg: AppConfig) -> HoltWintersBase:
    return model_factory_from_config(cfg)()
