"""
Date helpers

Timestamps are stored as ISO-8601 UTC strings with milliseconds
("2025-10-14T18:20:00.000Z") and shown to buyers in Mexican Spanish.
"""
from datetime import date, datetime, timezone

from dateutil.parser import isoparse


WEEKDAYS_ES = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time, e.g. "2025-10-14T18:20:00.000Z" """
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_long_date_es(value: date) -> str:
    """
    Long Spanish date without year

    Example:
        format_long_date_es(date(2025, 10, 20)) -> "lunes, 20 de octubre"
    """
    return f"{WEEKDAYS_ES[value.weekday()]}, {value.day} de {MONTHS_ES[value.month - 1]}"


def parse_iso(value: str) -> datetime:
    """
    Parse an ISO-8601 date or timestamp; naive values are taken as UTC

    Accepts "2023-01-01", "2025-10-14T18:20:00.000Z" and offsets.
    """
    parsed = isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
