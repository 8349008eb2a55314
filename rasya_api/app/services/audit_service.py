"""
Audit trail for admin actions.

Every mutation performed from the admin panel (creating or closing a
service, completing an order, issuing an OTP, ...) is written to the
``audit_logs`` table together with the admin e‑mail taken from the
token.  Writing the audit record never fails the request itself.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Any, Dict, List, Optional

from rasya_api.app.core.db import get_connection

logger = logging.getLogger(__name__)


class AuditService:
    """Service class for writing and reading audit records."""

    @classmethod
    async def log(
        cls,
        actor: Optional[str],
        action: str,
        object_type: str,
        object_id: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        """Insert a new audit record.

        Parameters
        ----------
        actor : Optional[str]
            E‑mail of the admin, ``None`` for system or client actions.
        action : str
            Short verb such as ``"create"``, ``"update"``, ``"close"``.
        object_type : str
            Affected domain object (``"service"``, ``"order"``, ...).
        object_id : Optional[str]
            Identifier of the affected record.
        details : Optional[dict]
            Extra structured data stored as JSON.
        """
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO audit_logs (actor, action, object_type, object_id, details)
                VALUES (?, ?, ?, ?, ?)
                """,
                (actor, action, object_type, object_id, json.dumps(details) if details else None),
            )
            conn.commit()
        except sqlite3.Error:
            logger.exception("Failed to write audit log for %s %s %s", action, object_type, object_id)
        finally:
            conn.close()

    @classmethod
    async def list_logs(cls, object_type: Optional[str] = None, limit: int = 100) -> List[Dict[str, Any]]:
        """Most recent audit records, optionally for one object type."""
        conn = get_connection()
        try:
            query = "SELECT id, actor, action, object_type, object_id, details, timestamp FROM audit_logs"
            params: list = []
            if object_type:
                query += " WHERE object_type = ?"
                params.append(object_type)
            query += " ORDER BY id DESC LIMIT ?"
            params.append(limit)
            rows = conn.execute(query, tuple(params)).fetchall()
            return [
                {
                    "id": row["id"],
                    "actor": row["actor"],
                    "action": row["action"],
                    "object_type": row["object_type"],
                    "object_id": row["object_id"],
                    "details": json.loads(row["details"]) if row["details"] else None,
                    "timestamp": row["timestamp"],
                }
                for row in rows
            ]
        finally:
            conn.close()
