import logging
from typing import List, Optional

import httpx

from app.core.config import settings
from app.core.http import fetch_text
from app.models.schemas import EventRecord
from app.sources.parsing import parse_feed

logger = logging.getLogger(__name__)

class FeedUnavailable(RuntimeError):
    """The schedule sheet could not be retrieved."""

class SheetFeedSource:
    name = "sheet"

    def __init__(self, url: Optional[str] = None):
        self.url = url or settings.FEED_URL

    async def fetch_records(self) -> List[EventRecord]:
        # always a fresh copy of the sheet, nothing is cached
        try:
            text = await fetch_text(self.url)
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {self.name} feed: {type(e).__name__}: {e}")
            raise FeedUnavailable(f"schedule feed could not be retrieved ({type(e).__name__})") from e

        records = parse_feed(text)
        logger.info(f"Parsed {len(records)} matches from {self.name} feed")
        return records
