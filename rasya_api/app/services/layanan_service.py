"""
Business logic for services (layanan) offered on the public site.

Services are ordered by the ``order`` column; new ones are appended at
the end.  Closing a service keeps it in the list (the public site shows
it as closed) until it is opened again or deleted.  An empty table is
seeded with the default catalogue on startup.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.catalog import SEED_SERVICES, normalize_service_tag, service_slug
from ..core.errors import NotFoundError
from ..core.formatting import discounted_price
from ..schemas.service import ServiceCreate, ServiceRead, ServiceUpdate

logger = logging.getLogger(__name__)

_COLUMNS = 'id, title, tag, "desc", price_awal, discount_percent, price_after_discount, "order", closed, created_at'


class LayananService:
    """CRUD operations for the ``services`` table."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> ServiceRead:
        return ServiceRead(
            id=row["id"],
            title=row["title"],
            tag=row["tag"],
            desc=row["desc"],
            price_awal=row["price_awal"],
            discount_percent=row["discount_percent"],
            price_after_discount=row["price_after_discount"],
            order=row["order"],
            closed=bool(row["closed"]),
            created_at=row["created_at"],
            slug=service_slug(row["title"]),
        )

    @classmethod
    def seed_if_empty(cls) -> int:
        """Insert the default services when the table is empty.

        Returns the number of inserted rows (0 when data already exists).
        Seeded ids share one generated prefix with the index appended.
        """
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        conn = get_connection()
        try:
            count = conn.execute("SELECT COUNT(*) AS n FROM services").fetchone()["n"]
            if count:
                return 0
            base_id = generate_id()
            created_at = utcnow_iso()
            conn.executemany(
                f"INSERT INTO services ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, 0, '', ?, 0, ?)",
                [
                    (f"{base_id}-{i}", title, tag, desc, price, i + 1, created_at)
                    for i, (title, tag, desc, price) in enumerate(SEED_SERVICES)
                ],
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Seeded %d services (table was empty)", len(SEED_SERVICES))
        return len(SEED_SERVICES)

    @classmethod
    async def list_services(cls) -> List[ServiceRead]:
        """All services, open and closed, ordered by ``order``."""
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            rows = conn.execute(f'SELECT {_COLUMNS} FROM services ORDER BY "order", created_at').fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def get_service(cls, service_id: str) -> ServiceRead:
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            row = conn.execute(f"SELECT {_COLUMNS} FROM services WHERE id = ?", (service_id,)).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFoundError()
        return cls._row_to_read(row)

    @classmethod
    async def add_service(cls, data: ServiceCreate, actor: Optional[str] = None) -> ServiceRead:
        """Append a new open service.  ``title`` must not be blank."""
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        from rasya_api.app.services.audit_service import AuditService
        title = data.title.strip()
        if not title:
            raise ValueError("title required")
        service_id = generate_id()
        conn = get_connection()
        try:
            next_order = conn.execute('SELECT COALESCE(MAX("order"), 0) + 1 AS n FROM services').fetchone()["n"]
            conn.execute(
                f"INSERT INTO services ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, 0, '', ?, 0, ?)",
                (service_id, title, normalize_service_tag(data.tag), data.desc, data.price_awal, next_order, utcnow_iso()),
            )
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "create", "service", service_id, {"title": title})
        return await cls.get_service(service_id)

    @classmethod
    async def update_service(cls, data: ServiceUpdate, actor: Optional[str] = None) -> ServiceRead:
        """Edit a service.

        ``title`` must not be blank; a blank or unknown ``tag`` keeps the
        stored value; ``desc``, ``price_awal`` and ``price_after_discount``
        are overwritten; a ``discount_percent`` outside 0..100 is ignored.
        When a discount is set and no discounted price text is given, it
        is derived from ``price_awal``.
        """
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        title = data.title.strip()
        if not title:
            raise ValueError("title required")
        current = await cls.get_service(data.id)
        discount = data.discount_percent if 0 <= data.discount_percent <= 100 else current.discount_percent
        price_after = data.price_after_discount.strip()
        if discount > 0 and not price_after:
            price_after = discounted_price(data.price_awal, discount) or ""
        conn = get_connection()
        try:
            conn.execute(
                """
                UPDATE services SET title = ?, tag = ?, "desc" = ?, price_awal = ?,
                    discount_percent = ?, price_after_discount = ?
                WHERE id = ?
                """,
                (
                    title,
                    normalize_service_tag(data.tag, default=current.tag),
                    data.desc,
                    data.price_awal,
                    discount,
                    price_after,
                    data.id,
                ),
            )
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "update", "service", data.id, {"discount_percent": discount})
        return await cls.get_service(data.id)

    @classmethod
    async def set_closed(cls, service_id: str, closed: bool, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("UPDATE services SET closed = ? WHERE id = ?", (int(closed), service_id))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "close" if closed else "open", "service", service_id)

    @classmethod
    async def delete_service(cls, service_id: str, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM services WHERE id = ?", (service_id,))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "delete", "service", service_id)
