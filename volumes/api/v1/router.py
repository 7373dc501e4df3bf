from fastapi import APIRouter

from volumes.api.routers import volumes

api_router = APIRouter()

api_router.include_router(volumes.router)
