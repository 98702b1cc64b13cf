"""
Temporal status of a scheduled match.

Every function here takes the reference instant ``now`` explicitly; nothing
reads the clock. All datetimes are naive local wall-clock time.
"""
import math
import re
from datetime import datetime, timedelta
from typing import Optional, Tuple

from app.models.schemas import Countdown, EventRecord, MatchStatus

DEFAULT_DURATION_MINUTES = 150

# malformed dates collapse here: sorts first, never live
EPOCH = datetime(1970, 1, 1)

def _to_int(part: str) -> Optional[int]:
    part = part.strip()
    if not re.fullmatch(r"-?[0-9]+", part):
        return None
    return int(part)

def _parts(value: str, sep: str, n: int) -> list[Optional[int]]:
    pieces = value.split(sep)
    pieces += [""] * (n - len(pieces))
    return [_to_int(p) for p in pieces[:n]]

def start_instant(record: EventRecord) -> datetime:
    if not record.date or not record.time:
        return EPOCH

    y, m, d = _parts(record.date, "-", 3)
    hh, mm = _parts(record.time, ":", 2)
    if not y or not m or not d:
        return EPOCH

    # out-of-range month/day/hour roll over into the next unit
    year = y + (m - 1) // 12
    month = (m - 1) % 12 + 1
    try:
        first = datetime(year, month, 1)
    except ValueError:
        return EPOCH
    try:
        return first + timedelta(days=d - 1, hours=hh or 0, minutes=mm or 0)
    except OverflowError:
        return EPOCH

def end_instant(record: EventRecord, duration_minutes: int = DEFAULT_DURATION_MINUTES) -> datetime:
    return start_instant(record) + timedelta(minutes=duration_minutes)

def is_live(record: EventRecord, now: datetime, duration_minutes: int = DEFAULT_DURATION_MINUTES) -> bool:
    start = start_instant(record)
    if start == EPOCH:
        return False
    return start <= now <= start + timedelta(minutes=duration_minutes)

def status(record: EventRecord, now: datetime, duration_minutes: int = DEFAULT_DURATION_MINUTES) -> MatchStatus:
    start = start_instant(record)
    if now < start:
        return MatchStatus.UPCOMING
    if is_live(record, now, duration_minutes):
        return MatchStatus.LIVE
    return MatchStatus.ENDED

def minutes_between(start: datetime, end: datetime) -> int:
    minutes = (end - start).total_seconds() / 60
    return max(0, math.floor(minutes + 0.5))

def format_duration(minutes: float) -> str:
    """45 -> "45 min", 60 -> "1h", 90 -> "1h 30min". Negative input shows as 0."""
    total = max(0, math.floor(minutes + 0.5))
    if total < 60:
        return f"{total} min"
    h, m = divmod(total, 60)
    return f"{h}h" if m == 0 else f"{h}h {m}min"

def countdown(record: EventRecord, now: datetime, duration_minutes: int = DEFAULT_DURATION_MINUTES) -> Optional[Countdown]:
    current = status(record, now, duration_minutes)
    if current == MatchStatus.UPCOMING:
        mins = minutes_between(now, start_instant(record))
        return Countdown(label=f"Starts in {format_duration(mins)}", kind=current)
    if current == MatchStatus.LIVE:
        mins = minutes_between(now, end_instant(record, duration_minutes))
        return Countdown(label=f"Ends in {format_duration(mins)}", kind=current)
    return None

def day_bounds(now: datetime) -> Tuple[datetime, datetime]:
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = now.replace(hour=23, minute=59, second=59, microsecond=999999)
    return start, end

def format_date_br(iso: str) -> str:
    parts = iso.split("-")
    if len(parts) != 3:
        return iso
    y, m, d = parts
    return f"{d}/{m}/{y}"
