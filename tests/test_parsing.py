"""Unit tests for the schedule feed parser."""
from app.sources.parsing import Column, has_decoy_header, parse_feed, parse_header

from tests.conftest import HEADER


class TestParseFeed:
    """Test cases for parse_feed."""

    def test_decoy_header_is_discarded(self):
        """A letter row above the real header is skipped."""
        text = (
            "a,b,c,d\n"
            "id,competicao,data,hora,mandante,visitante,ondeassistir,link\n"
            "1,X,2024-05-01,20:00,A,B,TV,http://x"
        )

        records = parse_feed(text)

        assert len(records) == 1
        record = records[0]
        assert record.id == "1"
        assert record.category == "X"
        assert record.date == "2024-05-01"
        assert record.time == "20:00"
        assert record.home == "A"
        assert record.away == "B"
        assert record.where_to_watch == "TV"
        assert record.link == "http://x"

    def test_letter_row_without_id_header_is_kept_as_header(self):
        """Without an id header on the second line the first line is the header."""
        text = "a,b,c\ndata,hora,mandante,visitante\n2024-05-01,20:00,A,B"

        assert parse_feed(text) == []

    def test_empty_and_short_input(self):
        """Fewer than two non-empty lines yield nothing."""
        assert parse_feed("") == []
        assert parse_feed("\n\n   \n") == []
        assert parse_feed(HEADER) == []
        assert parse_feed(HEADER + "\n\n\n") == []

    def test_bom_and_carriage_returns(self, sample_feed):
        """Sheet exports with a BOM and CRLF endings parse cleanly."""
        records = parse_feed(sample_feed)

        assert [r.id for r in records] == ["1", "2", "3", "4", "5"]
        assert records[0].link == "https://example.com/1"
        assert all("\r" not in r.link for r in records)

    def test_bom_before_decoy_row(self):
        """A BOM at the start of the file does not hide the letter row."""
        text = "\ufeffA,B,C,D,E,F,G,H\r\n" + HEADER + "\r\n1,X,2024-05-01,20:00,A,B,TV,\r\n"

        records = parse_feed(text)

        assert len(records) == 1
        assert records[0].home == "A"
        assert records[0].away == "B"

    def test_bom_on_header_without_decoy_row(self):
        """A BOM on the real header line is stripped from the first column name."""
        text = "\ufeff" + HEADER + "\r\n9,X,2024-05-01,20:00,A,B,TV,\r\n"

        records = parse_feed(text)

        assert len(records) == 1
        assert records[0].id == "9"
        assert records[0].category == "X"

    def test_header_is_case_insensitive_and_reorderable(self):
        """Columns are matched by lower-cased name, not position."""
        text = "Mandante , VISITANTE,Hora,Data\nA,B,18:30,2024-05-01"

        records = parse_feed(text)

        assert len(records) == 1
        assert records[0].home == "A"
        assert records[0].away == "B"
        assert records[0].time == "18:30"
        assert records[0].date == "2024-05-01"
        assert records[0].id == ""
        assert records[0].category == ""
        assert records[0].link == ""

    def test_short_row_pads_missing_cells(self):
        """Cells missing at the end of a row become empty strings."""
        text = HEADER + "\n7,Copa,2024-05-01,20:00,A,B"

        records = parse_feed(text)

        assert len(records) == 1
        assert records[0].where_to_watch == ""
        assert records[0].link == ""

    def test_unrecognized_and_extra_columns_are_ignored(self):
        """Unknown header names and trailing cells do not leak into records."""
        text = "id,estadio,data,hora,mandante,visitante\n1,Maracanã,2024-05-01,20:00,A,B,extra"

        records = parse_feed(text)

        assert len(records) == 1
        assert records[0].id == "1"
        assert records[0].home == "A"
        assert "estadio" not in records[0].model_dump()

    def test_cells_are_trimmed(self):
        """Whitespace around values is removed."""
        text = HEADER + "\n 1 ,  Copa ,2024-05-01 , 20:00,  A ,B  ,TV,"

        record = parse_feed(text)[0]

        assert record.id == "1"
        assert record.category == "Copa"
        assert record.home == "A"
        assert record.away == "B"

    def test_incomplete_rows_are_dropped(self):
        """Rows missing date, time, home or away never come out."""
        text = "\n".join([
            HEADER,
            "1,Copa,,20:00,A,B,TV,",
            "2,Copa,2024-05-01,,A,B,TV,",
            "3,Copa,2024-05-01,20:00,,B,TV,",
            "4,Copa,2024-05-01,20:00,A, ,TV,",
            ",,,,,,,",
            "5,,2024-05-01,20:00,A,B,,",
        ])

        records = parse_feed(text)

        assert [r.id for r in records] == ["5"]
        for r in records:
            assert r.date and r.time and r.home and r.away

    def test_parsing_is_idempotent(self, sample_feed):
        """Parsing the same text twice gives identical records."""
        assert parse_feed(sample_feed) == parse_feed(sample_feed)


class TestHeaderHelpers:
    """Test cases for header detection helpers."""

    def test_has_decoy_header(self):
        assert has_decoy_header(["A,B,C,D", "ID,data"])
        assert not has_decoy_header(["A,B,C,D", "data,hora"])
        assert not has_decoy_header(["id,data", "1,2024-05-01"])
        assert not has_decoy_header(["a,b,c"])
        assert has_decoy_header(["\ufeffA,B,C,D", "\ufeffid,data"])

    def test_parse_header_strips_bom(self):
        names = parse_header("\ufeffId,Competicao,OndeAssistir\r")

        assert names == ["id", "competicao", "ondeassistir"]
        assert Column(names[2]) is Column.WHERE_TO_WATCH
