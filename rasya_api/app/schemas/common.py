"""Shared response envelope and small request bodies."""

from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    ok: bool = True


class CloseRequest(BaseModel):
    """Body of the ``/close`` endpoints (toggle closed/open)."""

    id: str = Field("", examples=["20250301101010ab12"])
    closed: bool = False


class CloseResponse(OkResponse):
    closed: bool
