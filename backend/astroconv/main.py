"""Astronomical distance converter — FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from astroconv.config import settings
from astroconv.api.routes_units import router as units_router
from astroconv.api.routes_convert import router as convert_router
from astroconv.api.routes_session import router as session_router, get_session
from astroconv.ui.view import render_page, render_results

VERSION = "0.1.0"

app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="Convert a distance into every astronomical unit of the catalog at once.",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(units_router, prefix="/api")
app.include_router(convert_router, prefix="/api")
app.include_router(session_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}


# ── Form pages ───────────────────────────────────────────────────────────────

@app.get("/", response_class=HTMLResponse)
async def index():
    """Render the converter form from the current session."""
    return render_page(get_session().snapshot())


@app.get("/partials/results", response_class=HTMLResponse)
async def results_partial():
    """Results fragment swapped in by the page after each edit."""
    return render_results(get_session().snapshot())
