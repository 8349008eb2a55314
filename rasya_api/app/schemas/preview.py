"""Pydantic models for service preview pages."""

from typing import List, Optional

from pydantic import BaseModel

from .common import OkResponse


class PreviewMeta(BaseModel):
    slug: str
    title: str
    description: str
    tag: Optional[str] = None
    preview_type: str


class PreviewListResponse(OkResponse):
    previews: List[PreviewMeta]


class PreviewResponse(OkResponse):
    preview: PreviewMeta


class PreviewOptionsResponse(OkResponse):
    options: List[PreviewMeta]
