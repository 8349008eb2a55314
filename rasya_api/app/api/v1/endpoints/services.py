"""
Endpoints for services (layanan).

The public list and the admin list return the same data; closed
services are rendered as closed by the site rather than hidden.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rasya_api.app.core.errors import NotFoundError
from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.common import CloseRequest, CloseResponse, OkResponse
from rasya_api.app.schemas.service import ServiceCreate, ServiceListResponse, ServiceResponse, ServiceUpdate
from rasya_api.app.services.layanan_service import LayananService

router = APIRouter()
admin_router = APIRouter()


@router.get("/services", response_model=ServiceListResponse, summary="List services")
async def list_services() -> ServiceListResponse:
    return ServiceListResponse(services=await LayananService.list_services())


@admin_router.get("/services", response_model=ServiceListResponse, summary="List services (admin)")
async def admin_list_services(admin: dict = Depends(require_admin)) -> ServiceListResponse:
    return ServiceListResponse(services=await LayananService.list_services())


@admin_router.post("/services", response_model=ServiceResponse, summary="Add a service")
async def add_service(data: ServiceCreate, admin: dict = Depends(require_admin)) -> ServiceResponse:
    try:
        service = await LayananService.add_service(data, actor=admin.get("email"))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ServiceResponse(service=service)


@admin_router.put("/services", response_model=ServiceResponse, summary="Edit a service")
async def update_service(data: ServiceUpdate, admin: dict = Depends(require_admin)) -> ServiceResponse:
    """Update texts and discount.  A blank ``price_after_discount`` with a
    discount set is computed from ``price_awal``.
    """
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        service = await LayananService.update_service(data, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ServiceResponse(service=service)


@admin_router.post("/services/close", response_model=CloseResponse, summary="Close or reopen a service")
async def close_service(data: CloseRequest, admin: dict = Depends(require_admin)) -> CloseResponse:
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await LayananService.set_closed(data.id, data.closed, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CloseResponse(closed=data.closed)


@admin_router.delete("/services", response_model=OkResponse, summary="Delete a service")
async def delete_service(
    service_id: str = Query("", alias="id"),
    admin: dict = Depends(require_admin),
) -> OkResponse:
    if not service_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await LayananService.delete_service(service_id, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OkResponse()
