"""
Top‑level router.

Aggregates the domain routers.  When a new domain is added, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import health, issues, users

router = APIRouter()

# The issue router defines both "/issue" and "/issues" paths itself, so
# it is included without a prefix.
router.include_router(issues.router, tags=["issues"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
