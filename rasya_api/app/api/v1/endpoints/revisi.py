"""Revision ticket redemption for clients."""

from fastapi import APIRouter, HTTPException, status

from rasya_api.app.core.errors import ConflictError, NotFoundError
from rasya_api.app.schemas.revision import RevisiKlaimRequest, RevisiKlaimResponse
from rasya_api.app.services.revision_service import RevisionService

router = APIRouter()


@router.post("/revisi/klaim", response_model=RevisiKlaimResponse, summary="Redeem a revision ticket")
async def klaim_revisi(data: RevisiKlaimRequest) -> RevisiKlaimResponse:
    try:
        ticket, remaining = await RevisionService.redeem(data.code, data.note)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return RevisiKlaimResponse(
        message="Klaim revisi berhasil.",
        order_id=ticket.order_id,
        revisi_ke=ticket.sequence,
        sisa_revisi=remaining,
    )
