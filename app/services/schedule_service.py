import logging
import re
import unicodedata
from datetime import datetime
from typing import List, Optional, Tuple

from app.core.config import settings
from app.models.schemas import CategoryListResponse, EventRecord, MatchView, ScheduleResponse
from app.services import timeline
from app.sources.sheet_feed import FeedUnavailable, SheetFeedSource

logger = logging.getLogger(__name__)

def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))

def collation_key(text: str) -> Tuple[str, str, str]:
    # letters first, then accents (bare before accented), then case (lower before upper)
    return (
        _strip_accents(text).casefold(),
        unicodedata.normalize("NFD", text).casefold(),
        text.swapcase(),
    )

def team_slug(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", _strip_accents(name.lower()))
    return slug.strip("-")

def crest_path(name: str, base_path: Optional[str] = None) -> str:
    base = (base_path if base_path is not None else settings.CREST_BASE_PATH).rstrip("/")
    return f"{base}/{team_slug(name)}.svg"

def categories(records: List[EventRecord]) -> List[str]:
    return sorted({r.category for r in records if r.category}, key=collation_key)

def is_unfiltered(selected: Optional[str], all_label: str = "All") -> bool:
    return not selected or selected == all_label

def filter_by_category(records: List[EventRecord], selected: Optional[str], all_label: str = "All") -> List[EventRecord]:
    if is_unfiltered(selected, all_label):
        return list(records)
    return [r for r in records if r.category == selected]

def chronological(records: List[EventRecord]) -> List[EventRecord]:
    # sorted() is stable, equal start times keep feed order
    return sorted(records, key=timeline.start_instant)

def split_days(records: List[EventRecord], now: datetime) -> Tuple[List[EventRecord], List[EventRecord]]:
    """
    Partition chronologically ordered records into (today, upcoming).

    Records from earlier days belong to neither bucket and are left out.
    """
    day_start, day_end = timeline.day_bounds(now)
    today: List[EventRecord] = []
    upcoming: List[EventRecord] = []
    for r in records:
        start = timeline.start_instant(r)
        if day_start <= start <= day_end:
            today.append(r)
        elif start > day_end:
            upcoming.append(r)
    return today, upcoming

def live_first(records: List[EventRecord], now: datetime, duration_minutes: int = timeline.DEFAULT_DURATION_MINUTES) -> List[EventRecord]:
    return sorted(
        records,
        key=lambda r: (not timeline.is_live(r, now, duration_minutes), timeline.start_instant(r)),
    )

def to_view(
    record: EventRecord,
    now: datetime,
    duration_minutes: int = timeline.DEFAULT_DURATION_MINUTES,
    crest_base: Optional[str] = None,
) -> MatchView:
    return MatchView(
        **record.model_dump(),
        status=timeline.status(record, now, duration_minutes),
        live=timeline.is_live(record, now, duration_minutes),
        countdown=timeline.countdown(record, now, duration_minutes),
        date_display=timeline.format_date_br(record.date),
        home_crest=crest_path(record.home, crest_base),
        away_crest=crest_path(record.away, crest_base),
    )

def build_schedule(
    records: List[EventRecord],
    now: datetime,
    selected: Optional[str] = None,
    duration_minutes: int = timeline.DEFAULT_DURATION_MINUTES,
    all_label: str = "All",
    crest_base: Optional[str] = None,
) -> ScheduleResponse:
    selected = (selected or "").strip()
    kept = filter_by_category(records, selected, all_label)
    today, upcoming = split_days(chronological(kept), now)
    today = live_first(today, now, duration_minutes)

    return ScheduleResponse(
        generated_at=now,
        selected_category="" if is_unfiltered(selected, all_label) else selected,
        categories=categories(records),
        today=[to_view(r, now, duration_minutes, crest_base) for r in today],
        upcoming=[to_view(r, now, duration_minutes, crest_base) for r in upcoming],
        empty=not upcoming,
    )

class ScheduleService:
    def __init__(self, source: Optional[SheetFeedSource] = None):
        self.source = source or SheetFeedSource()

    async def get_schedule(self, now: datetime, category: Optional[str] = None) -> ScheduleResponse:
        try:
            records = await self.source.fetch_records()
        except FeedUnavailable as e:
            logger.error(f"Schedule feed unavailable: {e}")
            resp = build_schedule([], now, category, settings.DEFAULT_DURATION_MINUTES, settings.ALL_CATEGORIES)
            return resp.model_copy(update={"feed_ok": False, "error": str(e)})

        return build_schedule(
            records,
            now,
            selected=category,
            duration_minutes=settings.DEFAULT_DURATION_MINUTES,
            all_label=settings.ALL_CATEGORIES,
            crest_base=settings.CREST_BASE_PATH,
        )

    async def get_categories(self, now: datetime) -> CategoryListResponse:
        try:
            records = await self.source.fetch_records()
        except FeedUnavailable as e:
            logger.error(f"Schedule feed unavailable: {e}")
            return CategoryListResponse(generated_at=now, categories=[], feed_ok=False)
        return CategoryListResponse(generated_at=now, categories=categories(records))
