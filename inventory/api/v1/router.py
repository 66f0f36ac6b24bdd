from fastapi import APIRouter

from inventory.domains.device.api.device_api import router as device_router

api_router = APIRouter()
api_router.include_router(device_router, prefix="/devices", tags=["Devices"])
