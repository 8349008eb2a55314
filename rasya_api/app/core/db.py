"""
SQLite database integration and simple migration system.

Provides ``get_connection`` for services, ``init_db`` which applies
pending migrations on application start, and small helpers shared by
all services (string ids and UTC timestamps).  Applied migration
versions are stored in the ``migrations`` table; new migrations are
appended to ``MIGRATIONS`` with an incremented version number.
"""

import logging
import os
import secrets
import sqlite3
import string
from datetime import datetime, timezone
from pathlib import Path

from .config import settings

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS donations (
            id TEXT PRIMARY KEY,
            order_id TEXT UNIQUE,
            amount INTEGER NOT NULL,
            comment TEXT NOT NULL DEFAULT '',
            name TEXT NOT NULL DEFAULT '',
            email TEXT NOT NULL DEFAULT '',
            highlighted INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS services (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            tag TEXT NOT NULL DEFAULT 'Lain-lain',
            "desc" TEXT NOT NULL DEFAULT '',
            price_awal TEXT NOT NULL DEFAULT '',
            discount_percent INTEGER NOT NULL DEFAULT 0,
            price_after_discount TEXT NOT NULL DEFAULT '',
            "order" INTEGER NOT NULL DEFAULT 0,
            closed INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS porto (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            tag TEXT NOT NULL DEFAULT '',
            description TEXT NOT NULL DEFAULT '',
            image_url TEXT NOT NULL DEFAULT '',
            link_url TEXT NOT NULL DEFAULT '',
            layanan TEXT NOT NULL DEFAULT '[]',
            tools_used TEXT NOT NULL DEFAULT '[]',
            closed INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS orders (
            id TEXT PRIMARY KEY,
            layanan TEXT NOT NULL,
            pemesan TEXT NOT NULL DEFAULT '',
            deskripsi_pekerjaan TEXT NOT NULL DEFAULT '',
            deadline TEXT NOT NULL DEFAULT '',
            mulai_tanggal TEXT NOT NULL DEFAULT '',
            kesepakatan_brief_uang TEXT NOT NULL DEFAULT '',
            kapan_uang_masuk TEXT NOT NULL DEFAULT '',
            completed INTEGER NOT NULL DEFAULT 0,
            completed_at TEXT,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS revision_tickets (
            id TEXT PRIMARY KEY,
            order_id TEXT NOT NULL,
            code TEXT NOT NULL UNIQUE,
            sequence INTEGER NOT NULL,
            status TEXT NOT NULL DEFAULT 'unused',
            used_at TEXT,
            note TEXT NOT NULL DEFAULT '',
            created_at TEXT NOT NULL,
            UNIQUE(order_id, sequence),
            FOREIGN KEY(order_id) REFERENCES orders(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS analitik_items (
            id TEXT PRIMARY KEY,
            category TEXT NOT NULL,
            name TEXT NOT NULL,
            "desc" TEXT NOT NULL DEFAULT '',
            "order" INTEGER NOT NULL DEFAULT 0,
            closed INTEGER NOT NULL DEFAULT 0,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS taper_otps (
            code TEXT PRIMARY KEY,
            label TEXT NOT NULL DEFAULT '',
            expires_at TEXT NOT NULL,
            created_at TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS taper_signed_docs (
            id TEXT PRIMARY KEY,
            otp_code TEXT NOT NULL,
            label TEXT NOT NULL DEFAULT '',
            filename TEXT NOT NULL,
            stored_path TEXT NOT NULL,
            created_at TEXT NOT NULL
        );
        """,
    ),
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS audit_logs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            actor TEXT,
            action TEXT NOT NULL,
            object_type TEXT NOT NULL,
            object_id TEXT,
            details TEXT,
            timestamp TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE INDEX IF NOT EXISTS idx_donations_created_at ON donations(created_at);
        CREATE INDEX IF NOT EXISTS idx_orders_created_at ON orders(created_at);
        CREATE INDEX IF NOT EXISTS idx_revision_tickets_order ON revision_tickets(order_id);
        CREATE INDEX IF NOT EXISTS idx_analitik_category ON analitik_items(category);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Absolute paths from ``settings.database_url`` are used as is;
    relative ones are resolved against the working directory.  A
    ``sqlite:///`` prefix is tolerated so the same variable can hold a
    URL.
    """
    db_url = settings.database_url
    if db_url.startswith("sqlite:///"):
        db_url = db_url[len("sqlite:///"):]
    if os.path.isabs(db_url):
        return db_url
    return str(Path(db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  Foreign keys are enabled per connection so that deleting an
    order cascades to its revision tickets.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def init_db() -> None:
    """Create the database file if needed and apply pending migrations."""
    db_path = Path(get_database_path())
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current = row["version"] or 0
        for version, sql in MIGRATIONS:
            if version <= current:
                continue
            logger.info("Applying migration %s", version)
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        conn.commit()
    finally:
        conn.close()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utcnow_iso() -> str:
    """Current UTC time as an ISO‑8601 string (storage format for timestamps)."""
    return utcnow().isoformat()


def generate_id() -> str:
    """Return ``YYYYmmddHHMMSS`` (UTC) followed by four random characters."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(4))
    return utcnow().strftime("%Y%m%d%H%M%S") + suffix
