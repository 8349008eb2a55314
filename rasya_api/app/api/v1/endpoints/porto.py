"""
Portfolio endpoints.

Items are created from a multipart form because they may carry an
image; ``layanan`` and ``tools_used`` are JSON arrays sent as form
fields.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status

from rasya_api.app.core.errors import NotFoundError
from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.common import CloseRequest, CloseResponse, OkResponse
from rasya_api.app.schemas.porto import PortoListResponse, PortoResponse
from rasya_api.app.services.porto_service import MAX_IMAGE_BYTES, PortoService, parse_layanan, parse_tools_used

router = APIRouter()
admin_router = APIRouter()


@router.get("/porto", response_model=PortoListResponse, summary="Published portfolio items")
async def list_porto() -> PortoListResponse:
    return PortoListResponse(porto=await PortoService.list_porto())


@admin_router.get("/porto", response_model=PortoListResponse, summary="All portfolio items")
async def admin_list_porto(admin: dict = Depends(require_admin)) -> PortoListResponse:
    return PortoListResponse(porto=await PortoService.list_porto(include_closed=True))


@admin_router.post("/porto", response_model=PortoResponse, summary="Add a portfolio item")
async def add_porto(
    title: str = Form(""),
    tag: str = Form(""),
    description: str = Form(""),
    url: str = Form(""),
    layanan: str = Form("[]"),
    tools_used: str = Form("[]"),
    image: Optional[UploadFile] = File(None),
    admin: dict = Depends(require_admin),
) -> PortoResponse:
    if not title.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="title required")
    try:
        image_url = ""
        if image is not None and image.filename:
            # one byte past the limit is enough to reject an oversized upload
            image_url = PortoService.save_image(image.filename, await image.read(MAX_IMAGE_BYTES + 1))
        item = await PortoService.add_porto(
            title,
            tag=tag,
            description=description,
            link_url=url,
            layanan=parse_layanan(layanan),
            tools_used=parse_tools_used(tools_used),
            image_url=image_url,
            actor=admin.get("email"),
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return PortoResponse(porto=item)


@admin_router.post("/porto/close", response_model=CloseResponse, summary="Hide or show a portfolio item")
async def close_porto(data: CloseRequest, admin: dict = Depends(require_admin)) -> CloseResponse:
    if not data.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await PortoService.set_closed(data.id, data.closed, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CloseResponse(closed=data.closed)


@admin_router.delete("/porto", response_model=OkResponse, summary="Delete a portfolio item")
async def delete_porto(
    porto_id: str = Query("", alias="id"),
    admin: dict = Depends(require_admin),
) -> OkResponse:
    if not porto_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="id required")
    try:
        await PortoService.delete_porto(porto_id, actor=admin.get("email"))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return OkResponse()
