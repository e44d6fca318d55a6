"""
Top‑level API router.

Aggregates the greeting page and the user endpoints.  Routes are
mounted at the site root so that the public paths are ``/`` and
``/users``.
"""

from fastapi import APIRouter

from .endpoints import root, users

router = APIRouter()

router.include_router(root.router, tags=["info"])
router.include_router(users.router, prefix="/users", tags=["users"])
