"""src/hwforecast/validation/__init__.py"""

from __future__ import annotations

from .checks import (
    CheckResult,
    check_param_types,
    check_period,
    check_real,
    check_smoothing_params,
    check_unit_interval,
)

__all__ = [
    "CheckResult",
    "check_param_types",
    "check_real",
    "check_period",
    "check_smoothing_params",
    "check_unit_interval",
]
