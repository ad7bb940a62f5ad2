"""Tests for shared string and id helpers."""

import re
from datetime import datetime, timezone

from knowledge.utils import format_date, generate_id, parse_date, slugify, truncate


def test_generate_id_shape():
    assert re.fullmatch(r"\d{13}-[0-9a-z]{9}", generate_id())


def test_generate_id_unique():
    assert len({generate_id() for _ in range(100)}) == 100


def test_slugify():
    assert slugify("  Hello, World! ") == "hello-world"
    assert slugify("snake_case and--dashes") == "snake-case-and-dashes"


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("abcdefghijkl", 8) == "abcde..."


def test_date_round_trip_accepts_z_suffix():
    dt = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    assert parse_date(format_date(dt)) == dt
    assert parse_date("2024-05-01T12:00:00Z") == dt
