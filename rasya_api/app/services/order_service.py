"""
Business logic for client orders.

Orders are free‑text records maintained by the admin.  Completing an
order issues its revision tickets in the same transaction; deleting an
order removes its tickets through the foreign key cascade.
"""

import logging
import sqlite3
from datetime import datetime
from typing import List, Optional, Tuple

from ..core.errors import NotFoundError
from ..core.formatting import countdown, format_countdown, parse_date
from ..schemas.order import OrderCreate, OrderRead
from ..schemas.revision import RevisionTicketRead
from .revision_service import RevisionService

logger = logging.getLogger(__name__)

_TEXT_FIELDS = (
    "layanan",
    "pemesan",
    "deskripsi_pekerjaan",
    "deadline",
    "mulai_tanggal",
    "kesepakatan_brief_uang",
    "kapan_uang_masuk",
)


def sisa_waktu(deadline: str, completed: bool, now: Optional[datetime] = None) -> Optional[str]:
    """Remaining time until ``deadline`` as text, ``None`` when not a date."""
    if completed:
        return "selesai"
    parsed = parse_date(deadline)
    if parsed is None:
        return None
    return format_countdown(countdown(parsed, now))


class OrderService:

    @staticmethod
    def _row_to_read(row: sqlite3.Row, tickets: Optional[List[RevisionTicketRead]] = None) -> OrderRead:
        completed = bool(row["completed"])
        return OrderRead(
            id=row["id"],
            completed=completed,
            completed_at=row["completed_at"],
            created_at=row["created_at"],
            sisa_waktu=sisa_waktu(row["deadline"], completed),
            revision_tickets=tickets or [],
            **{field: row[field] for field in _TEXT_FIELDS},
        )

    @classmethod
    async def list_orders(cls) -> List[OrderRead]:
        """All orders, newest first, each with its revision tickets."""
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM orders ORDER BY created_at DESC, id DESC").fetchall()
        finally:
            conn.close()
        tickets = await RevisionService.tickets_by_order()
        return [cls._row_to_read(row, tickets.get(row["id"])) for row in rows]

    @classmethod
    async def get_order(cls, order_id: str) -> OrderRead:
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM orders WHERE id = ?", (order_id,)).fetchone()
        finally:
            conn.close()
        if not row:
            raise NotFoundError()
        tickets = await RevisionService.tickets_by_order([order_id])
        return cls._row_to_read(row, tickets.get(order_id))

    @classmethod
    async def antrian(cls) -> List[str]:
        """Service names of the orders still in progress, newest first."""
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT layanan FROM orders WHERE completed = 0 AND TRIM(layanan) != '' ORDER BY created_at DESC, id DESC"
            ).fetchall()
        finally:
            conn.close()
        return [row["layanan"] for row in rows]

    @classmethod
    async def add_order(cls, data: OrderCreate, actor: Optional[str] = None) -> OrderRead:
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        from rasya_api.app.services.audit_service import AuditService
        values = {field: (getattr(data, field) or "").strip() for field in _TEXT_FIELDS}
        if not values["layanan"]:
            raise ValueError("layanan required")
        order_id = generate_id()
        columns = ", ".join(_TEXT_FIELDS)
        placeholders = ", ".join("?" for _ in _TEXT_FIELDS)
        conn = get_connection()
        try:
            conn.execute(
                f"INSERT INTO orders (id, {columns}, completed, created_at) VALUES (?, {placeholders}, 0, ?)",
                (order_id, *values.values(), utcnow_iso()),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Order %s created for %s", order_id, values["layanan"])
        await AuditService.log(actor, "create", "order", order_id, {"layanan": values["layanan"]})
        return await cls.get_order(order_id)

    @classmethod
    async def complete_order(cls, order_id: str, actor: Optional[str] = None) -> Tuple[OrderRead, List[RevisionTicketRead]]:
        """Mark an order completed and issue its revision tickets.

        Calling it again for a completed order keeps the original
        completion time and returns the tickets issued the first time.
        """
        from rasya_api.app.core.db import get_connection, utcnow_iso
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            row = conn.execute("SELECT completed FROM orders WHERE id = ?", (order_id,)).fetchone()
            if row is None:
                raise NotFoundError()
            if not row["completed"]:
                conn.execute(
                    "UPDATE orders SET completed = 1, completed_at = ? WHERE id = ?",
                    (utcnow_iso(), order_id),
                )
            tickets = RevisionService.issue_for_order(conn, order_id)
            conn.commit()
        finally:
            conn.close()
        await AuditService.log(actor, "complete", "order", order_id, {"tickets": len(tickets)})
        return await cls.get_order(order_id), tickets

    @classmethod
    async def delete_order(cls, order_id: str, actor: Optional[str] = None) -> None:
        from rasya_api.app.core.db import get_connection
        from rasya_api.app.services.audit_service import AuditService
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM orders WHERE id = ?", (order_id,))
            conn.commit()
            if cursor.rowcount == 0:
                raise NotFoundError()
        finally:
            conn.close()
        await AuditService.log(actor, "delete", "order", order_id)
