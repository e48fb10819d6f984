"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from thingful.api.endpoints import health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
