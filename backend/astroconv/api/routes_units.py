"""Catalog endpoint — lists unit categories and their units."""

from fastapi import APIRouter

from astroconv.models.schemas import CategoryResponse
from astroconv.core.catalog import CATALOG

router = APIRouter(tags=["units"])


@router.get("/units", response_model=list[CategoryResponse])
async def list_units():
    """Return every category with its units, in display order."""
    return [
        {
            "name": category.name,
            "units": [
                {
                    "name": unit.name,
                    "explanation": unit.explanation,
                    "conversion_factor": unit.conversion_factor,
                }
                for unit in category.units
            ],
        }
        for category in CATALOG
    ]
