"""
Taper endpoints: OTP issuing (admin), OTP verification and document
signing (client) and the archive of signed documents (admin).
"""

import re
from typing import Optional, Tuple
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import Response
from starlette.datastructures import UploadFile

from rasya_api.app.core.errors import SigningError
from rasya_api.app.core.security import create_taper_token, require_admin, require_taper_token
from rasya_api.app.schemas.taper import (
    OtpCreate,
    OtpResponse,
    OtpVerifyRequest,
    OtpVerifyResponse,
    SignedDocListResponse,
)
from rasya_api.app.services.taper_service import SignaturePlacement, TaperService, parse_bool

SIGNING_FAILED = (
    "Gagal menempatkan tanda tangan pada PDF. Pastikan file PDF tidak terkunci "
    "dan format tanda tangan PNG/JPG valid."
)
_SIGNATURE_EXTENSIONS = (".png", ".jpg", ".jpeg")
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")

router = APIRouter()
admin_router = APIRouter()


def request_base_url(request: Request) -> str:
    """Public origin of the request, honouring reverse proxy headers."""
    forwarded_host = request.headers.get("x-forwarded-host")
    if forwarded_host:
        proto = request.headers.get("x-forwarded-proto") or "https"
        return f"{proto}://{forwarded_host}"
    return f"{request.url.scheme}://{request.url.netloc}"


def content_disposition(disposition: str, filename: str) -> str:
    """Build a ``Content-Disposition`` value that survives latin-1 header encoding.

    Names outside ``[A-Za-z0-9._-]`` get an ASCII fallback ``filename``
    plus the exact name as an RFC 5987 ``filename*``.
    """
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename)
    if fallback == filename:
        return f'{disposition}; filename="{filename}"'
    return f"{disposition}; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _text_field(form, name: str) -> Optional[str]:
    value = form.get(name)
    return value if isinstance(value, str) else None


def _pick_files(form) -> Tuple[Optional[UploadFile], Optional[UploadFile]]:
    """Find the PDF and the signature image among the uploaded files."""
    pdf_file = signature_file = None
    for name, value in form.multi_items():
        if not isinstance(value, UploadFile):
            continue
        filename = (value.filename or "").lower()
        if pdf_file is None and (name in ("pdf", "document") or filename.endswith(".pdf")):
            pdf_file = value
        elif signature_file is None and (name in ("signature", "sign") or filename.endswith(_SIGNATURE_EXTENSIONS)):
            signature_file = value
    return pdf_file, signature_file


@admin_router.post("/taper/otp", response_model=OtpResponse, summary="Issue an OTP for a client")
async def create_otp(
    request: Request,
    data: Optional[OtpCreate] = None,
    admin: dict = Depends(require_admin),
) -> OtpResponse:
    code, expires_at = await TaperService.create_otp(data.label if data else "", actor=admin.get("email"))
    return OtpResponse(otp=code, expires_at=expires_at, url=f"{request_base_url(request)}/taper")


@router.post("/taper/verify", response_model=OtpVerifyResponse, summary="Exchange an OTP for a signing token")
async def verify_otp(data: OtpVerifyRequest) -> OtpVerifyResponse:
    code = data.otp.strip()
    if not code:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="OTP wajib diisi")
    ok, _ = await TaperService.verify_otp(code)
    if not ok:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="OTP tidak valid atau sudah kedaluwarsa",
        )
    return OtpVerifyResponse(token=create_taper_token(code))


@router.post("/taper/sign", summary="Sign an agreement PDF", response_class=Response)
async def sign_document(request: Request, otp_code: str = Depends(require_taper_token)) -> Response:
    """Place the uploaded signature on the last page of the uploaded PDF.

    Multipart fields: the PDF (``pdf``/``document`` or any ``.pdf``), the
    signature (``signature``/``sign`` or any PNG/JPG), and optionally
    ``preview_only``, ``x_ratio``, ``y_ratio`` and ``scale_ratio``.
    """
    form = await request.form()
    pdf_file, signature_file = _pick_files(form)
    if pdf_file is None or signature_file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Butuh file PDF dan gambar tanda tangan",
        )
    placement = SignaturePlacement.from_form(
        _text_field(form, "x_ratio"),
        _text_field(form, "y_ratio"),
        _text_field(form, "scale_ratio"),
    )
    preview_only = parse_bool(_text_field(form, "preview_only"))
    try:
        signed, filename = await TaperService.sign_document(
            otp_code,
            await pdf_file.read(),
            pdf_file.filename,
            await signature_file.read(),
            placement,
            preview_only=preview_only,
        )
    except SigningError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=SIGNING_FAILED)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    disposition = "inline" if preview_only else "attachment"
    return Response(
        content=signed,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(disposition, filename)},
    )


@admin_router.get("/taper/signed", response_model=SignedDocListResponse, summary="Signed documents")
async def list_signed(request: Request, admin: dict = Depends(require_admin)) -> SignedDocListResponse:
    return SignedDocListResponse(docs=await TaperService.list_signed_docs(request_base_url(request)))
