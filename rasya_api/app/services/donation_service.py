"""
Business logic for donations.

Donations reach the database in two ways:

* ``record_donation`` – the donor fills in the form and pays by manual
  bank transfer; the response carries the bank details from settings.
* ``handle_notification`` – Midtrans calls the webhook after a GoPay
  payment started with ``create_transaction``.  Notifications are
  idempotent on ``order_id``.

Donations at or above the highlight threshold are "highlighted";
smaller ones with a comment are listed publicly as reviews.
"""

import logging
import re
import secrets
import sqlite3
import time
from typing import Any, List, Optional

import httpx

from ..core.config import settings
from ..core.errors import GatewayError
from ..schemas.donation import DonationCreate, DonationRead, MidtransNotification, TransactionCreate

logger = logging.getLogger(__name__)

MIN_TRANSACTION_AMOUNT = 1000
MIDTRANS_TIMEOUT_SECONDS = 15
ACCEPTED_NOTIFICATION_STATUSES = {"settlement", "pending"}
TRANSFER_MESSAGE = "Terima kasih. Silakan transfer ke rekening di bawah."

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def parse_gross_amount(value: Any) -> int:
    """Read Midtrans ``gross_amount`` (``"50000.00"`` or a number) as whole rupiah."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


class DonationService:
    """Donation storage, Midtrans Snap transactions and public reviews."""

    @staticmethod
    def _row_to_read(row: sqlite3.Row) -> DonationRead:
        return DonationRead(
            id=row["id"],
            order_id=row["order_id"],
            amount=row["amount"],
            comment=row["comment"],
            name=row["name"],
            email=row["email"],
            highlighted=bool(row["highlighted"]),
            created_at=row["created_at"],
        )

    @classmethod
    def _insert(cls, amount: int, comment: str, name: str, email: str, order_id: Optional[str] = None) -> DonationRead:
        from rasya_api.app.core.db import generate_id, get_connection, utcnow_iso
        donation_id = generate_id()
        created_at = utcnow_iso()
        highlighted = amount >= settings.highlight_threshold()
        conn = get_connection()
        try:
            conn.execute(
                """
                INSERT INTO donations (id, order_id, amount, comment, name, email, highlighted, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (donation_id, order_id, amount, comment, name, email, int(highlighted), created_at),
            )
            conn.commit()
        finally:
            conn.close()
        logger.info("Donation %s stored: amount=%s highlighted=%s order_id=%s", donation_id, amount, highlighted, order_id)
        return DonationRead(
            id=donation_id,
            order_id=order_id,
            amount=amount,
            comment=comment,
            name=name,
            email=email,
            highlighted=highlighted,
            created_at=created_at,
        )

    @classmethod
    async def record_donation(cls, data: DonationCreate) -> DonationRead:
        """Store a bank‑transfer donation.  Raises ``ValueError`` on a negative amount."""
        if data.amount < 0:
            raise ValueError("amount must be >= 0")
        return cls._insert(data.amount, data.comment.strip(), data.name.strip(), data.email.strip())

    @staticmethod
    def gateway_configured() -> bool:
        return bool(settings.midtrans_server_key)

    @staticmethod
    def new_order_id() -> str:
        return f"donate-{int(time.time())}-{secrets.token_hex(3)}"

    @classmethod
    async def create_transaction(cls, data: TransactionCreate) -> dict:
        """Create a Midtrans Snap transaction restricted to GoPay.

        Returns ``{"snap_token", "order_id", "client_key"}``.  Raises
        ``ValueError`` for an amount below the minimum or when Midtrans
        answers without a token, and ``GatewayError`` when the request
        itself fails.  The caller checks ``gateway_configured`` first.
        """
        if data.amount < MIN_TRANSACTION_AMOUNT:
            raise ValueError(f"amount minimal {MIN_TRANSACTION_AMOUNT}")
        order_id = cls.new_order_id()
        name = data.name.strip() or "Donatur"
        payload = {
            "transaction_details": {"order_id": order_id, "gross_amount": data.amount},
            "customer_details": {"first_name": name, "email": data.email.strip()},
            "enabled_payments": ["gopay"],
            "custom_field1": data.name.strip(),
            "custom_field2": data.email.strip(),
            "custom_field3": data.comment.strip(),
        }
        try:
            response = httpx.post(
                settings.midtrans_snap_url(),
                json=payload,
                auth=(settings.midtrans_server_key, ""),
                headers={"Accept": "application/json"},
                timeout=MIDTRANS_TIMEOUT_SECONDS,
            )
        except httpx.HTTPError as e:
            logger.error("Midtrans request failed for %s: %s", order_id, e)
            raise GatewayError("request to payment gateway failed") from e
        try:
            body = response.json()
        except ValueError:
            body = {}
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            logger.warning(
                "Midtrans returned no token for %s (status %s): %s",
                order_id,
                response.status_code,
                body.get("error_messages") if isinstance(body, dict) else body,
            )
            raise ValueError("payment gateway tidak mengembalikan token")
        logger.info("Midtrans transaction %s created for %s", order_id, data.amount)
        return {"snap_token": token, "order_id": order_id, "client_key": settings.midtrans_client_key}

    @classmethod
    async def find_by_order_id(cls, order_id: str) -> Optional[DonationRead]:
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM donations WHERE order_id = ?", (order_id,)).fetchone()
            return cls._row_to_read(row) if row else None
        finally:
            conn.close()

    @classmethod
    async def handle_notification(cls, notification: MidtransNotification) -> Optional[DonationRead]:
        """Record a donation from a Midtrans notification.

        Returns the stored donation, or ``None`` when the notification is
        ignored (already recorded, status other than settlement/pending,
        non‑positive amount).
        """
        order_id = notification.order_id.strip()
        if order_id and await cls.find_by_order_id(order_id):
            logger.info("Midtrans notification for %s already recorded", order_id)
            return None
        status = notification.transaction_status.strip().lower()
        if status not in ACCEPTED_NOTIFICATION_STATUSES:
            logger.info("Ignoring Midtrans notification %s with status %r", order_id, status)
            return None
        amount = parse_gross_amount(notification.gross_amount)
        if amount <= 0:
            return None
        try:
            return cls._insert(
                amount,
                notification.custom_field3,
                notification.custom_field1,
                notification.custom_field2,
                order_id=order_id or None,
            )
        except sqlite3.IntegrityError:
            # Concurrent delivery of the same notification
            logger.info("Duplicate Midtrans notification for %s", order_id)
            return None

    @classmethod
    async def list_reviews(cls) -> List[DonationRead]:
        """Non‑highlighted donations that carry a comment, newest first."""
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            rows = conn.execute(
                """
                SELECT * FROM donations
                WHERE highlighted = 0 AND TRIM(comment) <> ''
                ORDER BY created_at DESC, rowid DESC
                """
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def list_donations(cls) -> List[DonationRead]:
        from rasya_api.app.core.db import get_connection
        conn = get_connection()
        try:
            rows = conn.execute("SELECT * FROM donations ORDER BY created_at DESC, rowid DESC").fetchall()
            return [cls._row_to_read(row) for row in rows]
        finally:
            conn.close()
