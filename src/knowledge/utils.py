"""String and id helpers shared by the API and the CLI."""

import random
import re
import string
import time
from datetime import datetime

_BASE36 = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Timestamp-prefixed id used for CLI knowledge files, e.g. ``1718000000000-k3j9x0a2b``."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"{millis}-{suffix}"


def slugify(text: str) -> str:
    slug = re.sub(r"[^\w\s-]", "", text.lower())
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length chars, ending in ``...`` when shortened."""
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


def format_date(dt: datetime) -> str:
    return dt.isoformat()


def parse_date(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
