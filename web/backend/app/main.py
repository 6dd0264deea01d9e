"""FastAPI application for the Fixer screening service.

Provides REST API endpoints wrapping the ``fixer`` package for:
- Job content screening
- Payment amount validation
- Full job posting screening with fee totals
- Inspecting the active moderation rule set
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixer import __version__
from web.backend.app.routers import screening

app = FastAPI(
    title="Fixer Screening API",
    description=(
        "REST API for screening Fixer job postings. "
        "Provides endpoints for content moderation, payment amount "
        "validation and rule inspection."
    ),
    version=__version__,
)

# ---------------------------------------------------------------------------
# CORS middleware (allow all origins for development)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Include routers
# ---------------------------------------------------------------------------
app.include_router(screening.router)


# ---------------------------------------------------------------------------
# Root and health-check endpoints
# ---------------------------------------------------------------------------


@app.get("/", tags=["meta"])
async def root():
    """Return basic API information."""
    return {
        "name": "Fixer Screening API",
        "version": __version__,
        "description": "Job posting moderation and payment validation",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


@app.get("/health", tags=["meta"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
