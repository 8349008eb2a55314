"""
Revision tickets.

When an order is completed the client receives ``TICKETS_PER_ORDER``
codes.  Each code can be redeemed exactly once to claim a revision
round.  Codes are stored in their normalised form (uppercase, no
whitespace) so that whatever the client types can be normalised the
same way and matched directly.
"""

import logging
import re
import secrets
import sqlite3
from typing import Dict, List, Optional, Tuple

from ..core.errors import ConflictError, NotFoundError
from ..schemas.revision import RevisionTicketRead

logger = logging.getLogger(__name__)

TICKETS_PER_ORDER = 2
CODE_PREFIX = "RV-"

_WHITESPACE = re.compile(r"\s+")


def generate_code() -> str:
    """``RV-`` followed by ten uppercase hex characters."""
    return CODE_PREFIX + secrets.token_hex(5).upper()


def normalize_code(code: str) -> str:
    return _WHITESPACE.sub("", code or "").upper()


class RevisionService:
    """Issue and redeem revision tickets."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> RevisionTicketRead:
        return RevisionTicketRead(
            id=row["id"],
            order_id=row["order_id"],
            code=row["code"],
            sequence=row["sequence"],
            status=row["status"],
            used_at=row["used_at"],
            note=row["note"],
            created_at=row["created_at"],
        )

    @classmethod
    def issue_for_order(cls, conn: sqlite3.Connection, order_id: str, count: int = TICKETS_PER_ORDER) -> List[RevisionTicketRead]:
        """Create the missing tickets of an order inside the caller's transaction.

        Sequences already present are kept, so an order never has more
        than ``count`` tickets no matter how often this is called.
        """
        from rasya_api.app.core.db import generate_id, utcnow_iso
        existing = {
            row["sequence"]
            for row in conn.execute("SELECT sequence FROM revision_tickets WHERE order_id = ?", (order_id,))
        }
        for sequence in range(1, count + 1):
            if sequence in existing:
                continue
            while True:
                code = generate_code()
                try:
                    conn.execute(
                        """
                        INSERT INTO revision_tickets (id, order_id, code, sequence, status, note, created_at)
                        VALUES (?, ?, ?, ?, 'unused', '', ?)
                        """,
                        (f"{generate_id()}{sequence}", order_id, code, sequence, utcnow_iso()),
                    )
                    break
                except sqlite3.IntegrityError:
                    # code collision; draw a new one
                    continue
        rows = conn.execute(
            "SELECT * FROM revision_tickets WHERE order_id = ? ORDER BY sequence", (order_id,)
        ).fetchall()
        return [cls._row_to_read(row) for row in rows]

    @classmethod
    async def tickets_by_order(cls, order_ids: Optional[List[str]] = None) -> Dict[str, List[RevisionTicketRead]]:
        from rasya_api.app.core.db import get_connection
        query = "SELECT * FROM revision_tickets"
        params: List[str] = []
        if order_ids is not None:
            query += f" WHERE order_id IN ({', '.join('?' for _ in order_ids)})"
            params = list(order_ids)
        conn = get_connection()
        try:
            rows = conn.execute(query + " ORDER BY order_id, sequence", params).fetchall()
        finally:
            conn.close()
        result: Dict[str, List[RevisionTicketRead]] = {}
        for row in rows:
            result.setdefault(row["order_id"], []).append(cls._row_to_read(row))
        return result

    @classmethod
    async def redeem(cls, code: str, note: str = "") -> Tuple[RevisionTicketRead, int]:
        """Mark a ticket as used.

        Returns the updated ticket and the number of unused tickets left
        for the same order.  Raises ``ValueError`` for an empty code,
        ``NotFoundError`` for an unknown one and ``ConflictError`` when
        the code was already redeemed.
        """
        from rasya_api.app.core.db import get_connection, utcnow_iso
        code = normalize_code(code)
        if not code:
            raise ValueError("kode wajib diisi")
        conn = get_connection()
        try:
            cursor = conn.execute(
                "UPDATE revision_tickets SET status = 'used', used_at = ?, note = ? WHERE code = ? AND status = 'unused'",
                (utcnow_iso(), note.strip(), code),
            )
            conn.commit()
            row = conn.execute("SELECT * FROM revision_tickets WHERE code = ?", (code,)).fetchone()
            if row is None:
                raise NotFoundError("kode tidak ditemukan")
            if cursor.rowcount == 0:
                raise ConflictError("kode sudah digunakan")
            remaining = conn.execute(
                "SELECT COUNT(*) AS n FROM revision_tickets WHERE order_id = ? AND status = 'unused'",
                (row["order_id"],),
            ).fetchone()["n"]
        finally:
            conn.close()
        logger.info("Revision ticket %s redeemed for order %s", row["sequence"], row["order_id"])
        return cls._row_to_read(row), remaining
