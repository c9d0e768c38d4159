import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_base36(number: int) -> str:
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def make_id(prefix: str = "res") -> str:
    # Unique enough for a single local profile
    millis = int(_utcnow().timestamp() * 1000)
    suffix = "".join(secrets.choice(BASE36_ALPHABET) for _ in range(8))
    return f"{prefix}_{to_base36(millis)}_{suffix}"


def format_iso(value: datetime) -> str:
    value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def now_iso() -> str:
    return format_iso(_utcnow())


def parse_iso(value) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def next_timestamp(previous: Optional[str]) -> str:
    """Current time, nudged forward so it is strictly later than `previous`."""
    now = _utcnow()
    prev = parse_iso(previous)
    if prev is not None and now <= prev:
        now = prev + timedelta(milliseconds=1)
    return format_iso(now)
