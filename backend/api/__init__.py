from fastapi import APIRouter

from backend.api.healthcheck import router as healthcheck_router
from backend.api.flavor import router as flavor_router

api_router = APIRouter(prefix='/api')

api_router.include_router(healthcheck_router)
api_router.include_router(flavor_router)
