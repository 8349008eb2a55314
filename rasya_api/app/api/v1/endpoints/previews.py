"""Metadata of the service preview pages shown on the public site."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from rasya_api.app.schemas.preview import PreviewListResponse, PreviewOptionsResponse, PreviewResponse
from rasya_api.app.services.preview_service import (
    get_all_previews,
    get_fitur_demo_options_by_category,
    get_preview,
    get_previews_by_tag,
)

router = APIRouter()


@router.get("/previews", response_model=PreviewListResponse, summary="List preview pages")
async def list_previews(tag: Optional[str] = Query(None, description="Only service previews of this lane")) -> PreviewListResponse:
    previews = get_previews_by_tag(tag) if tag else get_all_previews()
    return PreviewListResponse(previews=previews)


@router.get("/previews/options", response_model=PreviewOptionsResponse, summary="Fitur & Demo options")
async def preview_options(category: str = Query("")) -> PreviewOptionsResponse:
    return PreviewOptionsResponse(options=get_fitur_demo_options_by_category(category))


@router.get("/previews/{slug}", response_model=PreviewResponse, summary="One preview page")
async def get_preview_page(slug: str) -> PreviewResponse:
    preview = get_preview(slug)
    if preview is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="not found")
    return PreviewResponse(preview=preview)
