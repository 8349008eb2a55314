"""Pydantic models for portfolio (porto) items."""

from datetime import datetime
from typing import List

from pydantic import BaseModel

from .common import OkResponse


class ToolUsed(BaseModel):
    name: str = ""
    desc: str = ""


class PortoRead(BaseModel):
    id: str
    title: str
    tag: str = ""
    description: str = ""
    image_url: str = ""
    link_url: str = ""
    layanan: List[str] = []
    tools_used: List[ToolUsed] = []
    closed: bool = False
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class PortoListResponse(OkResponse):
    porto: List[PortoRead]


class PortoResponse(OkResponse):
    porto: PortoRead
