"""Stateless endpoints — convert, validate and format single values."""

from fastapi import APIRouter, HTTPException

from astroconv.models.schemas import (
    ConvertRequest,
    ConvertResponse,
    FormatRequest,
    ValidateResponse,
    ValueRequest,
)
from astroconv.core.catalog import get_unit, UnknownUnitError
from astroconv.core.conversion import convert
from astroconv.core.formatting import format_number
from astroconv.core.validation import parse_value, validate, InvalidInputError

router = APIRouter(tags=["convert"])


@router.post("/convert", response_model=ConvertResponse)
async def convert_value(req: ConvertRequest):
    """Convert a raw value typed in ``unit`` into every catalog unit."""
    try:
        unit = get_unit(req.unit)
    except UnknownUnitError as e:
        raise HTTPException(422, detail=[{"message": str(e), "field": "unit"}])

    try:
        value = parse_value(req.value)
    except InvalidInputError as e:
        raise HTTPException(422, detail=[{"message": str(e), "field": "value"}])

    return {
        "unit": unit.name,
        "value": value,
        "results": [
            {"name": r.name, "value": r.value, "formatted": format_number(r.value)}
            for r in convert(value, unit)
        ],
    }


@router.post("/validate", response_model=ValidateResponse)
async def validate_value(req: ValueRequest):
    """Run the input check used by the form without touching the session."""
    result = validate(req.value)
    return {
        "sanitized_value": result.sanitized_value,
        "error": result.error,
        "valid": result.valid,
    }


@router.post("/format")
async def format_value(req: FormatRequest):
    return {"formatted": format_number(req.value)}
