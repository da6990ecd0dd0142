# quotegen/services/quote_numbers.py
from __future__ import annotations

import random
from datetime import date

PREFIX = "C"


def generate_quote_number(today: date | None = None, rng: random.Random | None = None) -> str:
    """
    'C' + two-digit year + four random digits, e.g. C264821.
    """
    today = today or date.today()
    rng = rng or random.Random()
    return f"{PREFIX}{today.strftime('%y')}{rng.randint(1000, 9999)}"
