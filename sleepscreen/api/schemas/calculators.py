"""Schemas for the calculator and field-validation endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from ...core.calculators import HeightUnit, NeckUnit, WeightUnit
from ...core.validators import ValidationErrorCode


class BMIRequest(BaseModel):
    height: float
    height_unit: HeightUnit = HeightUnit.CM
    weight: float
    weight_unit: WeightUnit = WeightUnit.KG


class BMIResponse(BaseModel):
    bmi: float
    bmi_over_35: bool


class NeckRequest(BaseModel):
    neck_size: float
    neck_unit: NeckUnit = NeckUnit.INCHES


class NeckResponse(BaseModel):
    neck_inches: float
    neck_over_16: bool


class AgeRequest(BaseModel):
    age: float


class AgeResponse(BaseModel):
    age_over_50: bool


class FieldValue(BaseModel):
    value: str = ""


class FieldValidationResponse(BaseModel):
    field: str
    valid: bool
    code: Optional[ValidationErrorCode] = None
    message: Optional[str] = None
