from enum import Enum
from typing import Optional, List
from pydantic import BaseModel
from datetime import datetime

class MatchStatus(str, Enum):
    UPCOMING = "UPCOMING"
    LIVE = "LIVE"
    ENDED = "ENDED"

class EventRecord(BaseModel):
    """One row of the schedule feed. Dates and times stay as the feed wrote them."""
    id: str = ""
    category: str = ""
    date: str          # YYYY-MM-DD
    time: str          # HH:MM
    home: str
    away: str
    where_to_watch: str = ""
    link: str = ""

class Countdown(BaseModel):
    label: str
    kind: MatchStatus

class MatchView(EventRecord):
    status: MatchStatus
    live: bool = False
    countdown: Optional[Countdown] = None
    date_display: str = ""

    home_crest: Optional[str] = None
    away_crest: Optional[str] = None

class ScheduleResponse(BaseModel):
    generated_at: datetime
    selected_category: str = ""
    categories: List[str] = []

    today: List[MatchView] = []
    upcoming: List[MatchView] = []

    empty: bool = True
    feed_ok: bool = True
    error: Optional[str] = None

class CategoryListResponse(BaseModel):
    generated_at: datetime
    categories: List[str]
    feed_ok: bool = True
