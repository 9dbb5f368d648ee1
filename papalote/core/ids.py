"""
Identifier helpers

Generated IDs follow the front end's format: a base36 millisecond
timestamp plus a short random base36 suffix.
"""
import random
import string
from datetime import datetime
from typing import Optional

from .dates import utc_now


BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def random_base36(length: int) -> str:
    return "".join(random.choice(BASE36_ALPHABET) for _ in range(length))


def timestamp_id(prefix: str, random_length: int = 6, now: Optional[datetime] = None, upper: bool = True) -> str:
    """
    Build "<prefix>-<base36 ms>-<random>"

    Example:
        timestamp_id("ORD") -> "ORD-M1D2QX8K-9TR4BN"
    """
    now = now or utc_now()
    value = f"{prefix}-{to_base36(int(now.timestamp() * 1000))}-{random_base36(random_length)}"
    return value.upper() if upper else value
