"""Unit-converting calculators feeding the derived STOP-BANG answers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidMeasurement

__all__ = [
    "BMIResult",
    "HeightUnit",
    "NeckUnit",
    "WeightUnit",
    "bmi_over_35",
    "compute_age_over_50",
    "compute_bmi",
    "compute_neck_over_16",
    "evaluate_body_metrics",
    "neck_in_inches",
]

METERS_PER_INCH = 0.0254
KG_PER_LB = 0.453592
CM_PER_INCH = 2.54

BMI_THRESHOLD = 35
NECK_THRESHOLD_IN = 16
AGE_THRESHOLD = 50
MAX_AGE = 120


class HeightUnit(str, Enum):
    CM = "cm"
    IN = "in"

    @classmethod
    def _missing_(cls, value: object):
        # The imperial toggle is labelled "ft" but reads inches.
        if value == "ft":
            return cls.IN
        return None


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class NeckUnit(str, Enum):
    CM = "cm"
    INCHES = "inches"

    @classmethod
    def _missing_(cls, value: object):
        if value == "in":
            return cls.INCHES
        return None


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    over_35: bool


def _to_positive(field: str, value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidMeasurement(field, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidMeasurement(field, value) from None
    if not math.isfinite(number) or number <= 0:
        raise InvalidMeasurement(field, value)
    return number


def _unit(enum_cls, field: str, value: Any):
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidMeasurement(field, value, f"Unsupported {field}: {value!r}") from None


def _round_half_up(value: float, places: int = 1) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def compute_bmi(height: Any, height_unit: Any, weight: Any, weight_unit: Any) -> float:
    """Return BMI rounded to one decimal place.

    Imperial height is given in inches, metric height in centimetres.
    """

    h = _to_positive("height", height)
    w = _to_positive("weight", weight)
    h_unit = _unit(HeightUnit, "height_unit", height_unit)
    w_unit = _unit(WeightUnit, "weight_unit", weight_unit)

    meters = h * METERS_PER_INCH if h_unit is HeightUnit.IN else h / 100
    kilograms = w * KG_PER_LB if w_unit is WeightUnit.LBS else w
    try:
        bmi = _round_half_up(kilograms / (meters * meters))
    except (ZeroDivisionError, OverflowError):
        raise InvalidMeasurement("bmi", None, "Height and weight do not give a usable BMI") from None
    if not math.isfinite(bmi):
        raise InvalidMeasurement("bmi", bmi, "Height and weight do not give a usable BMI")
    return bmi


def bmi_over_35(bmi: float) -> bool:
    return bmi > BMI_THRESHOLD


def evaluate_body_metrics(height: Any, height_unit: Any, weight: Any, weight_unit: Any) -> BMIResult:
    bmi = compute_bmi(height, height_unit, weight, weight_unit)
    return BMIResult(bmi=bmi, over_35=bmi_over_35(bmi))


def neck_in_inches(neck_size: Any, neck_unit: Any) -> float:
    size = _to_positive("neck_size", neck_size)
    unit = _unit(NeckUnit, "neck_unit", neck_unit)
    return size / CM_PER_INCH if unit is NeckUnit.CM else size


def compute_neck_over_16(neck_size: Any, neck_unit: Any) -> bool:
    return neck_in_inches(neck_size, neck_unit) > NECK_THRESHOLD_IN


def compute_age_over_50(age: Any) -> bool:
    years = _to_positive("age", age)
    if years > MAX_AGE:
        raise InvalidMeasurement("age", age, "Please enter a valid age")
    return years > AGE_THRESHOLD
