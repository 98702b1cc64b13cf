"""Shared fixtures for the schedule tests."""
from datetime import datetime

import pytest

from app.models.schemas import EventRecord


HEADER = "id,competicao,data,hora,mandante,visitante,ondeassistir,link"


def make_record(**overrides) -> EventRecord:
    fields = {
        "id": "1",
        "category": "Brasileirão",
        "date": "2024-05-01",
        "time": "20:00",
        "home": "Flamengo",
        "away": "Palmeiras",
        "where_to_watch": "CazéTV",
        "link": "https://example.com/live/1",
    }
    fields.update(overrides)
    return EventRecord(**fields)


@pytest.fixture
def now():
    """Reference instant used across the schedule tests."""
    return datetime(2024, 5, 1, 12, 0)


@pytest.fixture
def sample_feed():
    """A sheet export with a decoy letter row, a BOM and CRLF line endings."""
    rows = [
        "A,B,C,D,E,F,G,H",
        "\ufeff" + HEADER,
        "1,Brasileirão,2024-05-01,20:00,Flamengo,Palmeiras,CazéTV,https://example.com/1",
        "2,Copa do Brasil,2024-05-01,11:00,Grêmio,Internacional,CazéTV,https://example.com/2",
        "3,Brasileirão,2024-05-02,16:00,São Paulo,Santos,YouTube,",
        "4,,2024-05-03,21:30,Bahia,Vitória,CazéTV,",
        "5,Libertadores,2024-04-30,21:00,Fluminense,Cerro Porteño,CazéTV,",
        "6,Brasileirão,2024-05-04,18:00,,Cruzeiro,CazéTV,",
    ]
    return "\r\n".join(rows) + "\r\n"
