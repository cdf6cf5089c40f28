"""
Top-level API router.

Aggregates the domain routers under their prefixes.  ``main.create_app``
mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import health, tasks, users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(health.router, prefix="/health", tags=["health"])
