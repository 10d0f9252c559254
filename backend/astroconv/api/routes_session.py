"""Converter session API endpoints — desktop single-session."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from astroconv.models.schemas import SessionResponse, UnitRequest, ValueRequest
from astroconv.core.catalog import UnknownUnitError
from astroconv.core.session import ConverterSession

router = APIRouter(tags=["session"])

# Desktop-only: one session per process (single form).
_session = ConverterSession()


def get_session() -> ConverterSession:
    return _session


@router.get("/session", response_model=SessionResponse)
async def session_state():
    """Return the current form state and its conversion results."""
    return _session.snapshot()


@router.post("/session/value", response_model=SessionResponse)
async def change_value(req: ValueRequest):
    """Apply an edit of the value field."""
    _session.on_value_changed(req.value)
    return _session.snapshot()


@router.post("/session/unit", response_model=SessionResponse)
async def change_unit(req: UnitRequest):
    """Select another unit; the value and error are cleared."""
    try:
        _session.on_unit_changed(req.unit)
    except UnknownUnitError as exc:
        raise HTTPException(404, detail=str(exc))
    return _session.snapshot()


@router.post("/session/reset", response_model=SessionResponse)
async def reset_session():
    _session.reset()
    return _session.snapshot()
