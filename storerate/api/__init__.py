"""API routes."""

from fastapi import APIRouter

from storerate.api import auth, dashboard, health, ratings, stores, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(stores.router, prefix="/stores", tags=["stores"])
router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
