"""
Top‑level router for version 1 of the API.

This router aggregates the endpoint routers under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import books, health

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(health.router, tags=["health"])
