"""
Formatting helpers for rupiah amounts, Indonesian price texts, dates and
countdowns.

Prices of services are stored as free text written by the admin
("400 ribu (harga awal)", "1,5 jt", "Sesuai brief").  The helpers here
parse such texts into numbers where possible so that a discounted price
can be derived, and format numbers back into the same style.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

HARI = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]
BULAN = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]

_PARENTHESISED = re.compile(r"\s*\([^)]*\)\s*")
_PRICE = re.compile(r"^([\d,.]+)\s*(rb|ribu|jt|juta)?$")


def _round_half_up(value: float, places: int = 0) -> Decimal:
    quant = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quant, rounding=ROUND_HALF_UP)


def format_idr(amount: int) -> str:
    """``1500000`` -> ``"Rp 1.500.000"``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {abs(int(amount)):,}".replace(",", ".")


def parse_price_idr(text: str) -> Optional[float]:
    """Parse an Indonesian price text into a number of rupiah.

    Notes in parentheses are ignored; ``rb``/``ribu`` multiply by a
    thousand and ``jt``/``juta`` by a million.  Returns ``None`` for
    texts that are not a plain amount (e.g. ``"Sesuai brief"``).
    """
    cleaned = _PARENTHESISED.sub("", text or "").strip().lower()
    match = _PRICE.match(cleaned)
    if not match:
        return None
    digits, unit = match.group(1), match.group(2)
    if "," in digits:
        digits = digits.replace(".", "").replace(",", ".", 1)
    elif digits.count(".") > 1:
        digits = digits.replace(".", "")
    try:
        number = float(digits)
    except ValueError:
        return None
    if unit in ("rb", "ribu"):
        number *= 1000
    elif unit in ("jt", "juta"):
        number *= 1000000
    return number


def format_price_idr(number: float) -> str:
    """``360000`` -> ``"360 ribu"``, ``1350000`` -> ``"1,35 jt"``."""
    if number >= 1000000:
        millions = _round_half_up(number / 1000000, 2).normalize()
        return format(millions, "f").replace(".", ",") + " jt"
    if number >= 1000:
        return f"{_round_half_up(number / 1000)} ribu"
    return str(int(_round_half_up(number)))


def discounted_price(price_text: str, percent: int) -> Optional[str]:
    """Price text after applying ``percent`` discount, or ``None``.

    ``None`` is returned when there is no discount or the original price
    cannot be parsed.
    """
    if percent <= 0:
        return None
    number = parse_price_idr(price_text)
    if number is None or number <= 0:
        return None
    percent = min(percent, 100)
    after = int(_round_half_up(number * (1 - percent / 100)))
    return format_price_idr(after)


def parse_date(text: str) -> Optional[datetime]:
    """Parse ``YYYY-MM-DD`` or an ISO‑8601 timestamp into an aware datetime."""
    text = (text or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            parsed_date = date.fromisoformat(text[:10])
        except ValueError:
            return None
        parsed = datetime(parsed_date.year, parsed_date.month, parsed_date.day)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class Countdown:
    days: int
    hours: int
    minutes: int
    seconds: int
    expired: bool


def countdown(deadline: datetime, now: Optional[datetime] = None) -> Countdown:
    """Split the time left until ``deadline`` into days/hours/minutes/seconds."""
    now = now or datetime.now(timezone.utc)
    remaining = int((deadline - now).total_seconds())
    if remaining <= 0:
        return Countdown(0, 0, 0, 0, True)
    days, rest = divmod(remaining, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return Countdown(days, hours, minutes, seconds, False)


def format_countdown(value: Countdown) -> str:
    if value.expired:
        return "selesai"
    return f"{value.days} hari {value.hours} jam {value.minutes} menit {value.seconds} detik"


def format_tanggal(moment: datetime) -> str:
    """Indonesian long date, e.g. ``"5 Maret 2025"``."""
    return f"{moment.day} {BULAN[moment.month - 1]} {moment.year}"


def nama_hari(moment: datetime) -> str:
    return HARI[moment.weekday()]


def nama_bulan(moment: datetime) -> str:
    return BULAN[moment.month - 1]
