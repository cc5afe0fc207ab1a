from __future__ import annotations

import math

import pytest

from sleepscreen.core.calculators import (
    HeightUnit,
    NeckUnit,
    bmi_over_35,
    compute_age_over_50,
    compute_bmi,
    compute_neck_over_16,
    evaluate_body_metrics,
    neck_in_inches,
)
from sleepscreen.core.errors import InvalidMeasurement


def test_metric_bmi():
    bmi = compute_bmi(170, "cm", 70, "kg")
    assert bmi == 24.2
    assert bmi_over_35(bmi) is False


def test_imperial_bmi_uses_inches():
    # 70 in = 1.778 m, 200 lbs = 90.72 kg
    result = evaluate_body_metrics(70, "in", 200, "lbs")
    assert result.bmi == 28.7
    assert result.over_35 is False


def test_imperial_bmi_over_35():
    result = evaluate_body_metrics(65, "in", 250, "lbs")
    assert result.bmi == 41.6
    assert result.over_35 is True


def test_ft_label_is_read_as_inches():
    assert HeightUnit("ft") is HeightUnit.IN
    assert compute_bmi(70, "ft", 200, "lbs") == compute_bmi(70, "in", 200, "lbs")


def test_bmi_exactly_35_is_not_over():
    assert bmi_over_35(35.0) is False
    assert bmi_over_35(35.1) is True


def test_bmi_rounds_half_up():
    # 125 / 2.0**2 = 31.25 exactly; round() would give 31.2
    assert compute_bmi(200, "cm", 125, "kg") == 31.3


@pytest.mark.parametrize(
    "height, weight",
    [(0, 70), (170, 0), (-170, 70), (None, 70), ("tall", 70), (float("nan"), 70), (170, math.inf), (True, 70)],
)
def test_bmi_rejects_invalid_measurements(height, weight):
    with pytest.raises(InvalidMeasurement):
        compute_bmi(height, "cm", weight, "kg")


def test_bmi_rejects_unknown_unit():
    with pytest.raises(InvalidMeasurement) as exc_info:
        compute_bmi(170, "m", 70, "kg")
    assert exc_info.value.field == "height_unit"


def test_neck_in_cm():
    assert neck_in_inches(40, "cm") == pytest.approx(15.748, abs=1e-3)
    assert compute_neck_over_16(40, "cm") is False
    assert compute_neck_over_16(41, "cm") is True


def test_neck_in_inches():
    assert compute_neck_over_16(17, "inches") is True
    assert compute_neck_over_16(16, "inches") is False
    assert NeckUnit("in") is NeckUnit.INCHES


@pytest.mark.parametrize("size", [0, -3, None, "wide"])
def test_neck_rejects_invalid_size(size):
    with pytest.raises(InvalidMeasurement):
        compute_neck_over_16(size, "cm")


def test_age_over_50():
    assert compute_age_over_50(51) is True
    assert compute_age_over_50(50) is False
    with pytest.raises(InvalidMeasurement):
        compute_age_over_50(0)


@pytest.mark.parametrize("height, weight", [(1e-200, 70), (170, 1e308)])
def test_bmi_out_of_range_is_an_invalid_measurement(height, weight):
    with pytest.raises(InvalidMeasurement) as exc_info:
        compute_bmi(height, "cm", weight, "kg")
    assert exc_info.value.field == "bmi"


def test_age_above_120_is_rejected():
    assert compute_age_over_50(120) is True
    with pytest.raises(InvalidMeasurement) as exc_info:
        compute_age_over_50(121)
    assert str(exc_info.value) == "Please enter a valid age"
