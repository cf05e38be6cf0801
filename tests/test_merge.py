"""Tests for programa.merge module."""

from pathlib import Path

import pytest

from programa import IngestResult, MergeLayer
from programa.merge import (
    entry_key,
    horse_key,
    meeting_key,
    person_key,
    race_key,
    track_key,
)
from programa.models import ParsedDocument
from programa.parsers import DocumentParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class InMemoryMergeLayer:
    """自然キーでupsertするテスト用のマージ層"""

    def __init__(self):
        self.tracks = {}
        self.meetings = {}
        self.races = {}
        self.entries = {}
        self.horses = {}
        self.people = {}

    def ingest(self, document: ParsedDocument) -> IngestResult:
        meeting = document.meeting
        self.tracks[track_key(meeting.track)] = meeting.track
        self.meetings[meeting_key(meeting)] = meeting

        entries_upserted = 0
        for parsed in document.races:
            self.races[race_key(meeting, parsed.race)] = parsed.race
            for entry in parsed.entries:
                self.entries[entry_key(meeting, parsed.race, entry)] = entry
                self.horses[horse_key(entry.horse)] = entry.horse
                self.people[person_key(entry.jockey)] = entry.jockey
                self.people[person_key(entry.trainer)] = entry.trainer
                entries_upserted += 1

        return IngestResult(
            track_id=str(track_key(meeting.track)),
            meeting_id=str(meeting_key(meeting)),
            races_upserted=len(document.races),
            entries_upserted=entries_upserted,
            warnings=document.warnings,
        )


@pytest.fixture
def document():
    text = (FIXTURES_DIR / "format_a.txt").read_text(encoding="utf-8")
    return DocumentParser().parse(text)


class TestMergeLayerContract:
    """マージ層の冪等性"""

    def test_fake_satisfies_protocol(self):
        layer: MergeLayer = InMemoryMergeLayer()
        assert callable(layer.ingest)

    def test_repeated_ingestion_is_idempotent(self, document):
        layer = InMemoryMergeLayer()
        first = layer.ingest(document)
        sizes = (len(layer.meetings), len(layer.races), len(layer.entries))

        second = layer.ingest(DocumentParser().parse(
            (FIXTURES_DIR / "format_a.txt").read_text(encoding="utf-8")
        ))

        assert first == second
        assert (len(layer.meetings), len(layer.races), len(layer.entries)) == sizes
        assert sizes == (1, 2, 6)

    def test_ingest_result_carries_parser_warnings(self, document):
        result = InMemoryMergeLayer().ingest(document)
        assert result.warnings == document.warnings


class TestNaturalKeys:
    def test_entry_key_nests_race_and_meeting(self, document):
        parsed = document.races[0]
        key = entry_key(document.meeting, parsed.race, parsed.entries[0])

        assert key == (race_key(document.meeting, parsed.race), 1)
        assert key[0] == (meeting_key(document.meeting), 1)

    def test_meeting_key(self, document):
        track, date, number = meeting_key(document.meeting)
        assert track == ("LA RINCONADA", "VE")
        assert date.year == 2026
        assert number == 9
