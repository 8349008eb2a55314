"""
Tests for price, date and countdown formatting helpers
"""

from datetime import datetime, timedelta, timezone

import pytest

from rasya_api.app.core.formatting import (
    countdown,
    discounted_price,
    format_countdown,
    format_idr,
    format_price_idr,
    format_tanggal,
    nama_bulan,
    nama_hari,
    parse_date,
    parse_price_idr,
)


class TestPriceParsing:
    """Parsing of free-text Indonesian prices"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("400 ribu (harga awal)", 400000),
            ("500rb", 500000),
            ("1,5 jt (harga awal)", 1500000),
            ("2 juta", 2000000),
            ("1.500.000", 1500000),
            ("75000", 75000),
        ],
    )
    def test_parse_price(self, text, expected):
        assert parse_price_idr(text) == expected

    @pytest.mark.parametrize("text", ["Sesuai brief (harga awal)", "", "mulai dari 1 jt"])
    def test_unparseable_price(self, text):
        assert parse_price_idr(text) is None


class TestPriceFormatting:

    def test_format_idr(self):
        assert format_idr(1500000) == "Rp 1.500.000"
        assert format_idr(0) == "Rp 0"

    def test_format_thousands(self):
        assert format_price_idr(360000) == "360 ribu"

    def test_format_millions(self):
        assert format_price_idr(1350000) == "1,35 jt"
        assert format_price_idr(1000000) == "1 jt"
        assert format_price_idr(2250000) == "2,25 jt"

    def test_discounted_price(self):
        assert discounted_price("400 ribu (harga awal)", 10) == "360 ribu"
        assert discounted_price("1,5 jt (harga awal)", 10) == "1,35 jt"

    def test_no_discount_or_unparseable(self):
        assert discounted_price("400 ribu", 0) is None
        assert discounted_price("Sesuai brief", 20) is None


class TestDates:

    def test_parse_plain_date(self):
        parsed = parse_date("2025-04-30")
        assert parsed == datetime(2025, 4, 30, tzinfo=timezone.utc)

    def test_parse_iso_timestamp_with_z(self):
        parsed = parse_date("2025-04-30T10:15:00Z")
        assert parsed == datetime(2025, 4, 30, 10, 15, tzinfo=timezone.utc)

    def test_parse_invalid(self):
        assert parse_date("besok") is None
        assert parse_date("") is None

    def test_indonesian_names(self):
        moment = datetime(2025, 3, 5)
        assert nama_hari(moment) == "Rabu"
        assert nama_bulan(moment) == "Maret"
        assert format_tanggal(moment) == "5 Maret 2025"


class TestCountdown:

    def test_remaining_time(self):
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)
        deadline = now + timedelta(days=2, hours=3, minutes=4, seconds=5)
        value = countdown(deadline, now)
        assert (value.days, value.hours, value.minutes, value.seconds) == (2, 3, 4, 5)
        assert not value.expired
        assert format_countdown(value) == "2 hari 3 jam 4 menit 5 detik"

    def test_past_deadline_is_expired(self):
        now = datetime(2025, 1, 2, tzinfo=timezone.utc)
        value = countdown(datetime(2025, 1, 1, tzinfo=timezone.utc), now)
        assert value.expired
        assert format_countdown(value) == "selesai"
