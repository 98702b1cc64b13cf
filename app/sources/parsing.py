import logging
from enum import Enum
from typing import Dict, List

from app.models.schemas import EventRecord

logger = logging.getLogger(__name__)

BOM = "\ufeff"

# some sheet exports put a row of column letters above the real header
DECOY_PREFIX = "a,b,c"
HEADER_PREFIX = "id,"

class Column(str, Enum):
    ID = "id"
    CATEGORY = "competicao"
    DATE = "data"
    TIME = "hora"
    HOME = "mandante"
    AWAY = "visitante"
    WHERE_TO_WATCH = "ondeassistir"
    LINK = "link"

FIELD_BY_COLUMN: Dict[Column, str] = {
    Column.ID: "id",
    Column.CATEGORY: "category",
    Column.DATE: "date",
    Column.TIME: "time",
    Column.HOME: "home",
    Column.AWAY: "away",
    Column.WHERE_TO_WATCH: "where_to_watch",
    Column.LINK: "link",
}

REQUIRED_FIELDS = ("date", "time", "home", "away")

def _trim(value: str) -> str:
    # sheet exports may prefix a line with a BOM, which str.strip() keeps
    return value.strip().strip(BOM).strip()

def _clean_cell(cell: str) -> str:
    return _trim(cell.replace("\r", ""))

def _header_name(cell: str) -> str:
    return _clean_cell(cell).lower()

def _non_empty_lines(text: str) -> List[str]:
    lines = (_trim(ln) for ln in text.split("\n"))
    return [ln for ln in lines if ln]

def has_decoy_header(lines: List[str]) -> bool:
    if len(lines) < 2:
        return False
    first = _clean_cell(lines[0]).lower()
    second = _clean_cell(lines[1]).lower()
    return first.startswith(DECOY_PREFIX) and second.startswith(HEADER_PREFIX)

def parse_header(line: str) -> List[str]:
    return [_header_name(c) for c in line.split(",")]

def row_to_record(header: List[str], line: str) -> EventRecord:
    cells = [_clean_cell(c) for c in line.split(",")]
    raw = {name: (cells[i] if i < len(cells) else "") for i, name in enumerate(header)}

    fields: Dict[str, str] = {}
    for name, value in raw.items():
        try:
            column = Column(name)
        except ValueError:
            continue
        fields[FIELD_BY_COLUMN[column]] = value

    for field in FIELD_BY_COLUMN.values():
        fields.setdefault(field, "")
    return EventRecord(**fields)

def is_complete(record: EventRecord) -> bool:
    return all(getattr(record, f) for f in REQUIRED_FIELDS)

def parse_feed(text: str) -> List[EventRecord]:
    """
    Turn the raw CSV export of the schedule sheet into records.

    Never raises: rows missing date, time, home or away are dropped and
    short rows are padded with empty strings. Commas inside values are
    not supported by the feed format.
    """
    lines = _non_empty_lines(text or "")
    if len(lines) < 2:
        return []

    if has_decoy_header(lines):
        logger.debug(f"Discarding decoy header row: {lines[0]!r}")
        lines = lines[1:]

    header = parse_header(lines[0])
    records = [row_to_record(header, ln) for ln in lines[1:]]
    kept = [r for r in records if is_complete(r)]

    dropped = len(records) - len(kept)
    if dropped:
        logger.debug(f"Dropped {dropped} incomplete rows out of {len(records)}")
    return kept
