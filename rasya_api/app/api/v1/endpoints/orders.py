"""
Order endpoints.

The public queue (``/orders/antrian``) only exposes the service names
of orders in progress; everything else is admin only.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from rasya_api.app.core.errors import NotFoundError
from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.common import OkResponse
from rasya_api.app.schemas.order import (
    AntrianResponse,
    OrderCompleteRequest,
    OrderCompleteResponse,
    OrderCreate,
    OrderListResponse,
    OrderResponse,
)
from rasya_api.app.services.order_service import OrderService

router = APIRouter()
admin_router = APIRouter()


@router.get("/orders/antrian", response_model=AntrianResponse, summary="Public work queue")
async def antrian() -> AntrianResponse:
    return AntrianResponse(antrian=await OrderService.antrian())


@admin_router.get("/orders", response_model=OrderListResponse, summary="List orders")
async def list_orders(admin: dict = Depends(require_admin)) -> OrderListResponse:
    return OrderListResponse(orders=await OrderService.list_orders())


@admin_router.post("/orders", response_model=OrderResponse, summary="Add an order")
async def add_order(data: OrderCreate, admin: dict = Depends(require_admin)) -> OrderResponse:
    try:
        order = await OrderService.add_order(data, actor=admin.get("email"))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return OrderResponse(order=order)


@admin_router.patch("/orders", response_model=OrderCompleteResponse, summary="Complete an order")
async def complete_order(data: OrderCompleteRequest, admin: dict = Depends(require_admin)) -> OrderCompleteResponse:
    """Mark the order completed and return its revision tickets."""
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        order, tickets = await OrderService.complete_order(data.id, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OrderCompleteResponse(order=order, tickets=tickets)


@admin_router.delete("/orders", response_model=OkResponse, summary="Delete an order")
async def delete_order(
    order_id: str = Query("", alias="id"),
    admin: dict = Depends(require_admin),
) -> OkResponse:
    if not order_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await OrderService.delete_order(order_id, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OkResponse()
