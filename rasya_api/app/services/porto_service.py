"""
Business logic for portfolio (porto) items.

A portfolio entry links a finished project to the services it used
(``layanan``) and the tools involved.  Images are written to
``{UPLOAD_DIR}/porto`` and served back under ``/uploads/porto``.
"""

import json
import logging
import sqlite3
from pathlib import Path
from typing import List, Optional

from ..core.config import settings
from ..core.errors import NotFoundError
from ..schemas.porto import PortoRead, ToolUsed

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 10 * 1024 * 1024
ALLOWED_IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "webp"}


def parse_layanan(raw: str) -> List[str]:
    """Decode a JSON array of service names; anything invalid yields ``[]``."""
    try:
        value = json.loads(raw) if raw else []
    except ValueError:
        return []
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if isinstance(item, str) and item.strip()]


def parse_tools_used(raw: str) -> List[ToolUsed]:
    """Decode a JSON array of ``{"name", "desc"}`` objects; invalid input yields ``[]``."""
    try:
        value = json.loads(raw) if raw else []
    except ValueError:
        return []
    if not isinstance(value, list):
        return []
    tools = []
    for item in value:
        if isinstance(item, dict) and str(item.get("name", "")).strip():
            tools.append(ToolUsed(name=str(item["name"]).strip(), desc=str(item.get("desc", "")).strip()))
    return tools


def image_extension(filename: str) -> str:
    ext = Path(filename or "").suffix.lower().lstrip(".")
    return ext if ext in ALLOWED_IMAGE_EXTENSIONS else "jpg"


class PortoService:
    """CRUD operations for the ``porto`` table and its images."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> PortoRead:
        return PortoRead(
            id=row["id"],
            title=row["title"],
            tag=row["tag"],
            description=row["description"],
            image_url=row["image_url"],
            link_url=row["link_url"],
            layanan=json.loads(row["layanan"] or "[]"),
            tools_used=json.loads(row["tools_used"] or "[]"),
            closed=bool(row["closed"]),
            created_at=row["created_at"],
        )

    @classmethod
    def save_image(cls, filename: str, content: bytes) -> str:
        """Store an uploaded image and return its public URL."""
        from rasya_api.app.core.db import generate_id
        if len(content) > MAX_IMAGE_BYTES:
            raise ValueError("invalid form or file too large (max 10MB)")
        target_dir = Path(settings.upload_dir) / "porto"
        target_dir.mkdir(parents=True, exist_ok=True)
        name = f"{generate_id()}.{image_extension(filename)}"
        (target_dir / name).write_bytes(content)
        logger.info("Saved portfolio image %s (%d bytes)", name, len(content))
        return f"/uploads/porto/{name}"

    @classmethod
    async def list_porto(cls, include_closed: bool = False) -> List[PortoRead]:
        """Portfolio newest first; closed items only when ``include_closed``."""
        from rasya_api.app.core.db import get_connection
        query = "SELECT * FROM porto"
        if not include_closed:
            query += " WHERE closed = 0"
        query += " ORDER BY created_at DESC, rowid DESC"
        conn = get_connection()
        try:
            return [cls._row_to_read(row) for row in conn.execute(query).fetchall()]
        finally:
            conn.close()

    @classmethod
    async def add_porto(
        cls,
        title: str,
        tag: str = "",
        description: str = "",
        link_url: str = "",
        layanan: Optional[List[str]] = None,
        tools_used: Optional[List[ToolUsed]] = None,
        image_url: str = "",
        actor: Optional[str] = None,
    ) -> PortoRead:
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        from rasya_api.app.services.audit_service import AuditService
        title = title.strip()
        if not title:
            raise ValueError("title required")
        item = PortoRead(
            id=generate_id(),
            title=title,
            tag=tag.strip(),
            description=description.strip(),
            image_url=image_url,
            link_url=link_url.strip(),
            layanan=layanan or [],
            tools_used=tools_used or [],
            closed=False,
            created_at=utcnow_iso(),
        )
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO porto (id, title, tag, description, image_url, link_url, layanan, tools_used, closed, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, 0, ?)
                """,
                (
                    item.id,
                    item.title,
                    item.tag,
                    item.description,
                    item.image_url,
                    item.link_url,
                    json.dumps(item.layanan),
                    json.dumps([tool.model_dump() for tool in item.tools_used]),
                    item.created_at.isoformat(),
                ),
            )
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "create", "porto", item.id, {"title": item.title})
        return item

    @classmethod
    async def set_closed(cls, porto_id: str, closed: bool, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("UPDATE porto SET closed = ? WHERE id = ?", (int(closed), porto_id))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "close" if closed else "open", "porto", porto_id)

    @classmethod
    async def delete_porto(cls, porto_id: str, actor: Optional[str] = None) -> None:
        """Delete an item and its uploaded image (when stored locally)."""
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            row = conn.execute("SELECT image_url FROM porto WHERE id = ?", (porto_id,)).fetchone()
            if not row:
                raise NotFoundError()
            conn.execute("DELETE FROM porto WHERE id = ?", (porto_id,))
            conn.commit()
        finally:
            conn.close()
        image_url = row["image_url"] or ""
        if image_url.startswith("/uploads/porto/"):
            (Path(settings.upload_dir) / "porto" / Path(image_url).name).unlink(missing_ok=True)
        await AuditService.log(actor, "delete", "porto", porto_id)
