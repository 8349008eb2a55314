"""
Donation endpoints: bank transfer pledges, GoPay payments through
Midtrans Snap, the Midtrans notification webhook and public reviews.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from rasya_api.app.core.config import settings
from rasya_api.app.core.errors import GatewayError
from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.common import OkResponse
from rasya_api.app.schemas.donation import (
    DonateResponse,
    DonationCreate,
    DonationListResponse,
    MidtransNotification,
    ReviewListResponse,
    TransactionCreate,
    TransactionResponse,
)
from rasya_api.app.services.donation_service import MIN_TRANSACTION_AMOUNT, DonationService

GATEWAY_NOT_CONFIGURED = (
    "GoPay/Midtrans belum dikonfigurasi. Isi MIDTRANS_SERVER_KEY dan MIDTRANS_CLIENT_KEY di backend."
)

router = APIRouter()
admin_router = APIRouter()


@router.post("/donate", response_model=DonateResponse, summary="Record a bank transfer donation")
async def donate(data: DonationCreate) -> DonateResponse:
    """Store the pledge and answer with the bank account to transfer to."""
    try:
        donation = await DonationService.record_donation(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return DonateResponse(
        message="Terima kasih. Silakan transfer ke rekening di bawah.",
        bank_name=settings.bank_name,
        bank_number=settings.bank_number,
        bank_account=settings.bank_account,
        highlighted=donation.highlighted,
    )


@router.post(
    "/donate/create-transaction",
    response_model=TransactionResponse,
    summary="Create a Midtrans Snap transaction for GoPay",
)
async def create_transaction(data: TransactionCreate):
    if data.amount < MIN_TRANSACTION_AMOUNT:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"amount minimal {MIN_TRANSACTION_AMOUNT}")
    if not DonationService.gateway_configured():
        return JSONResponse({"ok": False, "message": GATEWAY_NOT_CONFIGURED})
    try:
        result = await DonationService.create_transaction(data)
    except GatewayError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return TransactionResponse(**result)


@router.post("/donate/webhook", response_model=OkResponse, summary="Midtrans payment notification")
async def midtrans_webhook(notification: MidtransNotification) -> OkResponse:
    """Always acknowledged so that Midtrans stops retrying."""
    await DonationService.handle_notification(notification)
    return OkResponse()


@router.get("/reviews", response_model=ReviewListResponse, summary="Public donor comments")
async def list_reviews() -> ReviewListResponse:
    return ReviewListResponse(reviews=await DonationService.list_reviews())


@admin_router.get("/donations", response_model=DonationListResponse, summary="All donations")
async def list_donations(admin: dict = Depends(require_admin)) -> DonationListResponse:
    return DonationListResponse(donations=await DonationService.list_donations())
