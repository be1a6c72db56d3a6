from datetime import datetime, timedelta

from app.core.errors import FormatError

_REFERENCE_DAY = datetime(2000, 1, 1)

DAY_START = "09:00"
DAY_END = "17:00"


def parse_hhmm(value: str) -> tuple[int, int]:
    parts = str(value).split(":")
    if len(parts) != 2:
        raise FormatError(f"Expected HH:MM, got {value!r}")
    try:
        hour, minute = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise FormatError(f"Expected HH:MM, got {value!r}") from exc
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise FormatError(f"Time out of range: {value!r}")
    return hour, minute


def end_time(start: str, hours: float) -> str:
    """Return ``start + hours`` as HH:MM. Times past midnight wrap without a day marker."""
    hour, minute = parse_hhmm(start)
    moment = _REFERENCE_DAY.replace(hour=hour, minute=minute) + timedelta(hours=hours)
    return moment.strftime("%H:%M")
