"""src/hwforecast/validation/checks.py"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def check_real(name: str, value: Any) -> list[str]:
    if value is None or (not isinstance(value, bool) and isinstance(value, Real)):
        return []
    return [f"{name}: expected a real number, got {type(value).__name__}"]


def check_unit_interval(name: str, value: Any) -> list[str]:
    """Smoothing constants are conventionally in (0, 1]."""
    errs = check_real(name, value)
    if errs or value is None:
        return errs
    v = float(value)
    if not math.isfinite(v) or not (0.0 < v <= 1.0):
        errs.append(f"{name}: expected a value in (0, 1], got {v!r}")
    return errs


def check_period(value: Any) -> list[str]:
    errs: list[str] = []
    if value is None:
        return errs
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        errs.append(f"period: expected a positive integer, got {value!r}")
    return errs


def check_smoothing_params(
    alpha: Any,
    *,
    beta: Any = None,
    gamma: Any = None,
    period: Any = None,
) -> CheckResult:
    errors: list[str] = []
    if alpha is None:
        errors.append("alpha: required")
    errors += check_unit_interval("alpha", alpha)
    errors += check_unit_interval("beta", beta)
    errors += check_unit_interval("gamma", gamma)
    errors += check_period(period)
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


def check_param_types(
    alpha: Any,
    *,
    beta: Any = None,
    gamma: Any = None,
    period: Any = None,
) -> CheckResult:
    """Structural checks only: real constants and an integer period >= 1, ranges not inspected."""
    errors: list[str] = []
    if alpha is None:
        errors.append("alpha: required")
    for name, value in (("alpha", alpha), ("beta", beta), ("gamma", gamma)):
        errors += check_real(name, value)
    errors += check_period(period)
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))
