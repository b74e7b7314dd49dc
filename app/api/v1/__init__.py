"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, communities, health, members, roles

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(roles.router, prefix="/role", tags=["role"])
router.include_router(communities.router, prefix="/community", tags=["community"])
router.include_router(members.router, prefix="/member", tags=["member"])
