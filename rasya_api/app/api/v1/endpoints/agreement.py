"""Agreement PDF generation for the admin panel."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from rasya_api.app.core.security import require_admin
from rasya_api.app.schemas.agreement import AgreementData
from rasya_api.app.services.agreement_service import AgreementService, agreement_filename, sample_data

admin_router = APIRouter()


def _pdf_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@admin_router.post("/agreement/pdf", response_class=Response, summary="Generate an agreement PDF")
async def agreement_pdf(data: AgreementData, admin: dict = Depends(require_admin)) -> Response:
    return _pdf_response(AgreementService.generate_pdf(data), agreement_filename(data.nomor_perjanjian))


@admin_router.get("/agreement/sample", response_class=Response, summary="Agreement filled with sample data")
async def agreement_sample(
    tier: str = Query("standar", description="standar | profesional"),
    admin: dict = Depends(require_admin),
) -> Response:
    data = sample_data(tier)
    return _pdf_response(AgreementService.generate_pdf(data), agreement_filename(data.nomor_perjanjian))
