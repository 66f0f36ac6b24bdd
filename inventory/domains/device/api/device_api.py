import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from inventory.api.deps import get_device_service
from inventory.domains.device.models.device_model import DeviceStatus, DeviceType
from inventory.domains.device.models.dto import (
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
)
from inventory.domains.device.services.device_service import DeviceService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=List[DeviceResponse])
async def read_devices(
    device_service: DeviceService = Depends(get_device_service),
    type: Optional[str] = Query(None, description="Filter by device type"),
    status_: Optional[str] = Query(
        None, alias="status", description="Filter by device status"
    ),
) -> Any:
    """
    獲取設備列表，可按類型或狀態過濾（兩者擇一）。
    """
    logger.info(f"API: Received request to read devices (type={type}, status={status_})")
    if type and status_:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filter by either type or status, not both.",
        )
    if type:
        return await device_service.filter_by_type(DeviceType.from_input(type))
    if status_:
        return await device_service.filter_by_status(DeviceStatus.from_input(status_))
    return await device_service.get_all_devices()


@router.get("/search", response_model=List[DeviceResponse])
async def search_devices(
    q: str = Query("", description="Keyword matched against name, IP and location"),
    device_service: DeviceService = Depends(get_device_service),
) -> Any:
    logger.info(f"API: Received request to search devices for '{q}'")
    return await device_service.search(q)


@router.get("/{device_id}", response_model=DeviceResponse)
async def read_device_by_id(
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
) -> Any:
    """
    根據 ID 獲取設備。
    """
    device = await device_service.find_by_id(device_id)
    if device is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Device not found"
        )
    return device


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=DeviceResponse)
async def create_new_device(
    *,
    device_service: DeviceService = Depends(get_device_service),
    device_in: DeviceCreate,
) -> Any:
    """
    創建一個新的設備。
    """
    logger.info(f"API: Received request to create device: {device_in.name}")
    return await device_service.add_device(
        name=device_in.name,
        device_type=device_in.type,
        status=device_in.status,
        ip_address=device_in.ip_address,
        location=device_in.location,
    )


@router.patch("/{device_id}", response_model=DeviceResponse)
async def update_existing_device(
    *,
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
    device_in: DeviceUpdate,
) -> Any:
    """
    部分更新設備，只有請求中出現的欄位會被變更。
    """
    logger.info(f"API: Received request to update device {device_id}")
    return await device_service.update_device(device_id, device_in)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(
    device_id: str,
    device_service: DeviceService = Depends(get_device_service),
) -> Response:
    """
    刪除設備。
    """
    logger.info(f"API: Received request to delete device {device_id}")
    if not await device_service.remove_device(device_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Device not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
