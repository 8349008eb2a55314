"""Analytics dashboard items (public overlay and admin management)."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rasya_api.app.core.errors import NotFoundError
from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.analitik import (
    AnalitikCreate,
    AnalitikGroupedResponse,
    AnalitikListResponse,
    AnalitikResponse,
    AnalitikUpdate,
)
from rasya_api.app.schemas.common import CloseRequest, CloseResponse, OkResponse
from rasya_api.app.services.analitik_service import AnalitikService

router = APIRouter()
admin_router = APIRouter()


@router.get("/analitik", response_model=AnalitikGroupedResponse, summary="Open items grouped by category")
async def list_analitik() -> AnalitikGroupedResponse:
    return AnalitikGroupedResponse(items=await AnalitikService.list_grouped())


@admin_router.get("/analitik", response_model=AnalitikListResponse, summary="All items")
async def admin_list_analitik(admin: dict = Depends(require_admin)) -> AnalitikListResponse:
    return AnalitikListResponse(items=await AnalitikService.list_items())


@admin_router.post("/analitik", response_model=AnalitikResponse, summary="Add an item")
async def add_analitik(data: AnalitikCreate, admin: dict = Depends(require_admin)) -> AnalitikResponse:
    try:
        item = await AnalitikService.add_item(data, actor=admin.get("email"))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return AnalitikResponse(item=item)


@admin_router.put("/analitik", response_model=OkResponse, summary="Edit an item")
async def update_analitik(data: AnalitikUpdate, admin: dict = Depends(require_admin)) -> OkResponse:
    try:
        await AnalitikService.update_item(data, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return OkResponse()


@admin_router.post("/analitik/close", response_model=CloseResponse, summary="Hide or show an item")
async def close_analitik(data: CloseRequest, admin: dict = Depends(require_admin)) -> CloseResponse:
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await AnalitikService.set_closed(data.id, data.closed, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CloseResponse(closed=data.closed)


@admin_router.delete("/analitik", response_model=OkResponse, summary="Delete an item")
async def delete_analitik(
    item_id: str = Query("", alias="id"),
    admin: dict = Depends(require_admin),
) -> OkResponse:
    if not item_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await AnalitikService.delete_item(item_id, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OkResponse()
