"""
Taper: OTP‑gated signing of agreement PDFs.

Flow
----
1. The admin issues a six digit OTP (valid 20 minutes), optionally
   labelled with the agreement number, and shares it with the client.
2. The client exchanges the OTP for a taper token
   (``core.security.create_taper_token``).
3. With that token the client uploads the agreement PDF and a picture of
   their signature.  The signature is cleaned up (grayscale, light
   background made transparent) and stamped on the last page.  Unless
   only a preview is requested the signed PDF is archived under
   ``{UPLOAD_DIR}/signed`` and listed in the admin panel.
"""

import asyncio
import io
import logging
import secrets
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional, Tuple

from fpdf import FPDF
from PIL import Image, ImageChops, UnidentifiedImageError
from pypdf import PdfReader, PdfWriter, Transformation
from pypdf.errors import PyPdfError

from ..core.config import settings
from ..core.errors import SigningError
from ..schemas.taper import SignedDocRead

logger = logging.getLogger(__name__)

OTP_LENGTH = 6
OTP_EXPIRY_MINUTES = 20
DEFAULT_SIGNED_NAME = "perjanjian-ditandatangani"

# pixels lighter than this (and with every channel above _CHANNEL_THRESHOLD)
# are treated as paper and made transparent
_GRAY_THRESHOLD = 240
_CHANNEL_THRESHOLD = 235


@dataclass
class SignaturePlacement:
    """Position of the signature as ratios of the page size.

    ``x_ratio``/``y_ratio`` are measured from the top‑left corner as the
    client drags the signature on a preview; ``scale_ratio`` is the
    signature width relative to the page width.
    """

    x_ratio: float = 0.72
    y_ratio: float = 0.82
    scale_ratio: float = 0.20

    @classmethod
    def from_form(cls, x_raw: Optional[str], y_raw: Optional[str], scale_raw: Optional[str]) -> "SignaturePlacement":
        placement = cls()
        x = _parse_float(x_raw)
        if x is not None:
            placement.x_ratio = _clamp(x, 0.0, 1.0)
        y = _parse_float(y_raw)
        if y is not None:
            placement.y_ratio = _clamp(y, 0.0, 1.0)
        scale = _parse_float(scale_raw)
        if scale is not None:
            placement.scale_ratio = _clamp(scale, 0.08, 0.5)
        return placement


def _parse_float(raw: Optional[str]) -> Optional[float]:
    try:
        return float((raw or "").strip())
    except ValueError:
        return None


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def parse_bool(raw: Optional[str]) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes", "y")


def signed_base_name(filename: Optional[str]) -> str:
    """``"perjanjian.pdf"`` -> ``"perjanjian-ditandatangani"``."""
    stem = Path(filename or "").stem
    if not stem:
        return DEFAULT_SIGNED_NAME
    return f"{stem}-ditandatangani"


def _threshold(band: Image.Image, limit: int) -> Image.Image:
    return band.point(lambda v: 255 if v > limit else 0)


def process_signature(data: bytes) -> Image.Image:
    """Return the signature as a grayscale RGBA image with a transparent background.

    Raises ``ValueError`` when the bytes are not a decodable image.
    """
    try:
        source = Image.open(io.BytesIO(data))
        source = source.convert("RGBA")
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
        raise ValueError("Gambar tanda tangan tidak valid") from exc
    r, g, b, alpha = source.split()
    gray = source.convert("RGB").convert("L", matrix=(1 / 3, 1 / 3, 1 / 3, 0))
    paper = _threshold(gray, _GRAY_THRESHOLD)
    for band in (r, g, b):
        paper = ImageChops.multiply(paper, _threshold(band, _CHANNEL_THRESHOLD))
    alpha = ImageChops.subtract(alpha, paper)
    return Image.merge("RGBA", (gray, gray, gray, alpha))


def overlay_signature(pdf_bytes: bytes, signature: Image.Image, placement: SignaturePlacement) -> bytes:
    """Stamp ``signature`` on the last page of ``pdf_bytes``.

    The image's bottom‑left corner is placed at ``x_ratio * width`` from
    the left and ``(1 - y_ratio) * height`` from the bottom of the page;
    its width is ``scale_ratio * width``.
    """
    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        if reader.is_encrypted:
            raise SigningError("PDF is encrypted")
        writer = PdfWriter(clone_from=reader)
        page = writer.pages[-1]
        box = page.mediabox
        page_w, page_h = float(box.width), float(box.height)

        img_w = placement.scale_ratio * page_w
        img_h = img_w * signature.height / max(signature.width, 1)
        left = placement.x_ratio * page_w
        bottom = (1.0 - placement.y_ratio) * page_h

        stamp_pdf = FPDF(unit="pt", format=(page_w, page_h))
        stamp_pdf.set_auto_page_break(False)
        stamp_pdf.add_page()
        stamp_pdf.image(signature, x=left, y=page_h - bottom - img_h, w=img_w, h=img_h)
        stamp = PdfReader(io.BytesIO(bytes(stamp_pdf.output()))).pages[0]

        page.merge_transformed_page(stamp, Transformation().translate(float(box.left), float(box.bottom)))
        out = io.BytesIO()
        writer.write(out)
    except (PyPdfError, ValueError, KeyError, IndexError, OSError) as exc:
        raise SigningError(str(exc)) from exc
    return out.getvalue()


class TaperService:
    """OTP issuing and verification, signing and the signed document archive."""

    @classmethod
    async def create_otp(cls, label: str = "", actor: Optional[str] = None) -> Tuple[str, datetime]:
        """Issue a new unique OTP.  Expired codes are purged first."""
        from rasya_api.app.core.db import get_connection, utcnow
        from rasya_api.app.services.audit_service import AuditService
        now = utcnow()
        expires_at = now + timedelta(minutes=OTP_EXPIRY_MINUTES)
        label = (label or "").strip()
        conn = get_connection()
        try:
            conn.execute("DELETE FROM taper_otps WHERE expires_at < ?", (now.isoformat(),))
            for _ in range(20):
                code = "".join(secrets.choice("0123456789") for _ in range(OTP_LENGTH))
                try:
                    conn.execute(
                        "INSERT INTO taper_otps (code, label, expires_at, created_at) VALUES (?, ?, ?, ?)",
                        (code, label, expires_at.isoformat(), now.isoformat()),
                    )
                    break
                except sqlite3.IntegrityError:
                    continue
            else:
                raise RuntimeError("could not allocate a unique OTP")
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "create", "taper_otp", code, {"label": label})
        return code, expires_at

    @classmethod
    async def verify_otp(cls, code: str) -> Tuple[bool, str]:
        """Return ``(True, label)`` for a known, unexpired OTP, else ``(False, "")``."""
        from rasya_api.app.core.db import get_connection, utcnow_iso
        code = (code or "").strip()
        if not code:
            return False, ""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT label FROM taper_otps WHERE code = ? AND expires_at > ?",
                (code, utcnow_iso()),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return False, ""
        return True, row["label"]

    @classmethod
    async def sign_document(
        cls,
        otp_code: str,
        pdf_bytes: bytes,
        pdf_filename: Optional[str],
        signature_bytes: bytes,
        placement: SignaturePlacement,
        preview_only: bool = False,
    ) -> Tuple[bytes, str]:
        """Sign the PDF and, unless previewing, archive it.

        Returns the signed PDF and the download file name.
        """
        from rasya_api.app.core.db import generate_id, get_connection, utcnow
        from rasya_api.app.services.audit_service import AuditService
        signature = await asyncio.to_thread(process_signature, signature_bytes)
        try:
            signed = await asyncio.to_thread(overlay_signature, pdf_bytes, signature, placement)
        except SigningError:
            logger.exception("Signature overlay failed for OTP %s", otp_code)
            raise
        base_name = signed_base_name(pdf_filename)
        if preview_only:
            return signed, f"preview-{base_name}.pdf"

        _, label = await cls.verify_otp(otp_code)
        now = utcnow()
        stored_name = f"{now.strftime('%Y%m%d%H%M%S')}-{base_name}.pdf"
        signed_dir = Path(settings.upload_dir) / "signed"
        signed_dir.mkdir(parents=True, exist_ok=True)
        (signed_dir / stored_name).write_bytes(signed)

        doc_id = generate_id()
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO taper_signed_docs (id, otp_code, label, filename, stored_path, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (doc_id, otp_code, label, stored_name, f"signed/{stored_name}", now.isoformat()),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Signed document %s stored for OTP %s", stored_name, otp_code)
        await AuditService.log(None, "sign", "taper_document", doc_id, {"otp_code": otp_code, "label": label})
        return signed, f"{base_name}.pdf"

    @classmethod
    async def list_signed_docs(cls, base_url: str) -> List[SignedDocRead]:
        """Archived documents, newest first, with absolute download links."""
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.core.formatting import parse_date
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM taper_signed_docs ORDER BY created_at DESC").fetchall()
        finally:
            conn.close()
        base_url = base_url.rstrip("/")
        docs = []
        for row in rows:
            created = parse_date(row["created_at"])
            docs.append(
                SignedDocRead(
                    id=row["id"],
                    otp_code=row["otp_code"],
                    label=row["label"],
                    filename=row["filename"],
                    created_at=created.strftime("%Y-%m-%d %H:%M:%S") if created else row["created_at"],
                    download_url=f"{base_url}/uploads/{row['stored_path']}",
                )
            )
        return docs
