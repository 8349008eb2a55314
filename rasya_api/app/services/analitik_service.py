"""
Business logic for the analytics dashboard items.

Items are grouped into four fixed categories.  Labels coming from the
admin panel (service tags such as ``"Web & Digital"``) and the category
slugs themselves are both accepted; anything else lands in
``lain_lain``.
"""

import logging
import sqlite3
from typing import Dict, List, Optional

from ..core.errors import NotFoundError
from ..schemas.analitik import AnalitikCreate, AnalitikRead, AnalitikUpdate

logger = logging.getLogger(__name__)

CATEGORY_WEB_DIGITAL = "web_digital"
CATEGORY_DESIGN = "design"
CATEGORY_KONTEN_KREATIF = "konten_kreatif"
CATEGORY_LAIN_LAIN = "lain_lain"

CATEGORIES = [CATEGORY_WEB_DIGITAL, CATEGORY_DESIGN, CATEGORY_KONTEN_KREATIF, CATEGORY_LAIN_LAIN]

_CATEGORY_LABELS = {
    "Web & Digital": CATEGORY_WEB_DIGITAL,
    "Design": CATEGORY_DESIGN,
    "Konten & Kreatif": CATEGORY_KONTEN_KREATIF,
    "Lain-lain": CATEGORY_LAIN_LAIN,
}


def normalize_category(value: str) -> str:
    value = (value or "").strip()
    if value in CATEGORIES:
        return value
    return _CATEGORY_LABELS.get(value, CATEGORY_LAIN_LAIN)


class AnalitikService:
    """CRUD operations for the ``analitik_items`` table."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> AnalitikRead:
        return AnalitikRead(
            id=row["id"],
            category=row["category"],
            name=row["name"],
            desc=row["desc"],
            order=row["order"],
            closed=bool(row["closed"]),
            created_at=row["created_at"],
        )

    @classmethod
    async def list_items(cls, include_closed: bool = True) -> List[AnalitikRead]:
        from rasya_api.app.core.db import get_connection
        query = 'SELECT * FROM analitik_items'
        if not include_closed:
            query += " WHERE closed = 0"
        conn = get_connection()
        try:
            rows = conn.execute(query + ' ORDER BY "order", created_at').fetchall()
        finally:
            conn.close()
        return [cls._row_to_read(row) for row in rows]

    @classmethod
    async def list_grouped(cls) -> Dict[str, List[AnalitikRead]]:
        """Open items by category; every category key is present."""
        grouped: Dict[str, List[AnalitikRead]] = {category: [] for category in CATEGORIES}
        for item in await cls.list_items(include_closed=False):
            grouped.setdefault(item.category, []).append(item)
        return grouped

    @classmethod
    async def get_item(cls, item_id: str) -> AnalitikRead:
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM analitik_items WHERE id = ?", (item_id,)).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFoundError()
        return cls._row_to_read(row)

    @classmethod
    async def add_item(cls, data: AnalitikCreate, actor: Optional[str] = None) -> AnalitikRead:
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        from rasya_api.app.services.audit_service import AuditService
        name = data.name.strip()
        if not name:
            raise ValueError("name required")
        category = normalize_category(data.category)
        item_id = generate_id()
        conn = get_connection()
        try:
            next_order = conn.execute('SELECT COALESCE(MAX("order"), 0) + 1 AS n FROM analitik_items').fetchone()["n"]
            conn.execute(
                'INSERT INTO analitik_items (id, category, name, "desc", "order", closed, created_at) VALUES (?, ?, ?, ?, ?, 0, ?)',
                (item_id, category, name, data.desc, next_order, utcnow_iso()),
            )
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "create", "analitik", item_id, {"category": category, "name": name})
        return await cls.get_item(item_id)

    @classmethod
    async def update_item(cls, data: AnalitikUpdate, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        name = data.name.strip()
        if not data.id or not name:
            raise ValueError("id and name required")
        conn = get_connection()
        try:
            cursor = conn.execute(
                'UPDATE analitik_items SET category = ?, name = ?, "desc" = ? WHERE id = ?',
                (normalize_category(data.category), name, data.desc, data.id),
            )
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "update", "analitik", data.id)

    @classmethod
    async def set_closed(cls, item_id: str, closed: bool, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("UPDATE analitik_items SET closed = ? WHERE id = ?", (int(closed), item_id))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "close" if closed else "open", "analitik", item_id)

    @classmethod
    async def delete_item(cls, item_id: str, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM analitik_items WHERE id = ?", (item_id,))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "delete", "analitik", item_id)
