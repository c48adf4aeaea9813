from fastapi import APIRouter

from .endpoints import proctoring, ai, tests, health

api_router = APIRouter()

api_router.include_router(proctoring.router, tags=["proctoring"])
api_router.include_router(ai.router, tags=["ai"])
api_router.include_router(tests.router, tags=["tests"])
api_router.include_router(health.router, tags=["health"])
