"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

import math
from pydantic import BaseModel, field_validator


class ConvertRequest(BaseModel):
    value: str
    unit: str


class ValueRequest(BaseModel):
    value: str


class UnitRequest(BaseModel):
    unit: str

    @field_validator("unit")
    @classmethod
    def unit_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Unit cannot be empty")
        return v


class FormatRequest(BaseModel):
    value: float

    @field_validator("value")
    @classmethod
    def must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Value must be a finite number")
        return v


class UnitResponse(BaseModel):
    name: str
    explanation: str
    conversion_factor: float


class CategoryResponse(BaseModel):
    name: str
    units: list[UnitResponse]


class ConversionLine(BaseModel):
    name: str
    value: float
    formatted: str


class ConvertResponse(BaseModel):
    unit: str
    value: float
    results: list[ConversionLine]


class ValidateResponse(BaseModel):
    sanitized_value: str
    error: str
    valid: bool


class SessionResponse(BaseModel):
    selected_unit: str
    explanation: str
    value: str
    error: str
    units: list[str]
    results: list[ConversionLine]
    sources: list[str]
