"""
Pydantic models for donations.

A donation is either recorded directly (bank transfer, the donor is
shown the bank details) or created from a Midtrans notification after
a GoPay payment.  ``highlighted`` donations are the large ones; the
rest with a comment are shown publicly as reviews.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from .common import OkResponse


class DonationCreate(BaseModel):
    amount: int = Field(..., examples=[25000], description="Jumlah donasi dalam rupiah")
    comment: str = Field("", examples=["Semangat terus!"])
    name: str = ""
    email: str = ""


class DonationRead(BaseModel):
    id: str
    order_id: Optional[str] = None
    amount: int
    comment: str = ""
    name: str = ""
    email: str = ""
    highlighted: bool = False
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class DonateResponse(OkResponse):
    message: str
    bank_name: str
    bank_number: str
    bank_account: str
    highlighted: bool


class TransactionCreate(BaseModel):
    """Request for a Midtrans Snap transaction (GoPay)."""

    amount: int = Field(..., examples=[50000])
    name: str = ""
    email: str = ""
    comment: str = ""


class TransactionResponse(OkResponse):
    snap_token: str
    order_id: str
    client_key: str


class MidtransNotification(BaseModel):
    """Subset of the Midtrans HTTP notification used by the webhook.

    ``gross_amount`` arrives either as a string (``"50000.00"``) or as a
    number.
    """

    transaction_status: str = ""
    order_id: str = ""
    gross_amount: Any = None
    custom_field1: str = ""
    custom_field2: str = ""
    custom_field3: str = ""

    @field_validator(
        "transaction_status", "order_id", "custom_field1", "custom_field2", "custom_field3", mode="before"
    )
    @classmethod
    def null_as_empty(cls, value):
        # Midtrans sends null for fields it has no value for
        return "" if value is None else value


class DonationListResponse(OkResponse):
    donations: List[DonationRead]


class ReviewListResponse(OkResponse):
    reviews: List[DonationRead]
