"""Human-readable invoice numbers."""

import random
from datetime import datetime

from frontdesk.config import settings


def generate_bill_number(prefix: str | None = None, now: datetime | None = None) -> str:
    """Return ``<prefix><YYMMDD><3 random digits>``, e.g. ``MH250501042``.

    Not cryptographic and not strictly unique: two bills issued on the same
    day collide with probability 1/1000. Good enough for a single property.
    """
    if prefix is None:
        prefix = settings.bill_number_prefix
    now = now or datetime.now()
    suffix = random.randint(0, 999)
    return f"{prefix}{now:%y%m%d}{suffix:03d}"
