"""tests/unit/test_simple.py"""

from __future__ import annotations

import math

import pytest

from hwforecast.modeling import HoltWintersSimple, InvalidHorizonError, ModelKind


def test_first_value_sets_baseline_and_no_forecast() -> None:
    m = HoltWintersSimple(0.5)
    assert m.baseline is None
    assert m.get_forecast(1) is None

    m.add_next_value(7.0)
    assert m.baseline == 7.0
    assert m.num_seen == 1
    assert m.get_forecast(1) is None

    m.add_next_value(9.0)
    assert m.get_forecast(1) is not None


def test_baseline_recurrence_uses_previous_baseline() -> None:
    m = HoltWintersSimple(0.5)
    for v in (10.0, 20.0):
        m.add_next_value(v)
    # 0.5*20 + 0.5*10
    assert m.baseline == 15.0

    m.add_next_value(31.0)
    assert m.baseline == 23.0


def test_constant_stream_flat_forecast() -> None:
    m = HoltWintersSimple(0.3)
    for _ in range(20):
        m.add_next_value(4.0)
    assert m.baseline == pytest.approx(4.0)
    for h in range(1, 12):
        assert m.get_forecast(h) == m.baseline


def test_deviation_against_forecast_made_before_value() -> None:
    m = HoltWintersSimple(0.5)
    m.add_next_value(10.0)
    assert m.get_deviation() is None

    # forecast before the 2nd value is not available yet
    m.add_next_value(20.0)
    assert m.last_forecast is None
    assert m.get_deviation() is None

    # forecast before the 3rd value is baseline 15
    m.add_next_value(30.0)
    assert m.last_forecast == 15.0
    assert m.get_deviation() == 15.0

    m.add_next_value(0.0)
    assert m.last_forecast == 22.5
    assert m.get_deviation() == 22.5


def test_num_seen_counts_calls() -> None:
    m = HoltWintersSimple(0.2)
    for k in range(1, 8):
        m.add_next_value(float(k))
        assert m.num_seen == k


@pytest.mark.parametrize("h", [0, -1, 1.5, True, "1"])
def test_invalid_horizon_rejected(h) -> None:
    m = HoltWintersSimple(0.5)
    m.add_next_value(1.0)
    m.add_next_value(2.0)
    with pytest.raises(InvalidHorizonError):
        m.get_forecast(h)


def test_invalid_horizon_is_value_error() -> None:
    with pytest.raises(ValueError):
        HoltWintersSimple(0.5).get_forecast(0)


def test_non_finite_input_propagates_without_error() -> None:
    m = HoltWintersSimple(0.5)
    m.add_next_value(1.0)
    m.add_next_value(float("nan"))
    assert math.isnan(m.baseline)
    m.add_next_value(2.0)
    assert math.isnan(m.get_forecast(1))
    assert math.isnan(m.get_deviation())


def test_accessors() -> None:
    m = HoltWintersSimple(0.25)
    assert m.kind is ModelKind.SIMPLE
    assert m.alpha == 0.25
    assert m.beta is None
    assert m.gamma is None
    assert m.period is None
    assert m.seasonal_values is None
    assert m.slope is None
    assert "HoltWintersSimple" in repr(m)


@pytest.mark.parametrize("bad", [None, "abc", object()])
def test_rejected_input_leaves_state_untouched(bad) -> None:
    m = HoltWintersSimple(0.5)
    for v in (10.0, 20.0, 30.0):
        m.add_next_value(v)
    before = (m.num_seen, m.baseline, m.last_value, m.last_forecast, m.get_deviation())
    assert before == (3, 22.5, 30.0, 15.0, 15.0)

    with pytest.raises((TypeError, ValueError)):
        m.add_next_value(bad)

    assert (m.num_seen, m.baseline, m.last_value, m.last_forecast, m.get_deviation()) == before
