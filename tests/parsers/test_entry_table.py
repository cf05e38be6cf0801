"""Tests for programa.parsers.entry_table module."""

import pytest

from programa.parsers.entry_table import (
    ColumnEntryExtractor,
    EntryRejected,
    VerticalEntryExtractor,
    parse_post_position,
    table_lines,
)
from programa.validation import ValidationCollector

COLUMN_HEADER = "N°  Ejemplar  Medic.  Kilos  Jinete  Implementos  Entrenador  P.P."


def _column_line(dorsal):
    return f"{dorsal}  HORSE {dorsal}  BUT  53  JOCKEY {dorsal}  L.  TRAINER {dorsal}  {dorsal}"


class TestTableLines:
    """テーブル境界の状態遷移"""

    def test_only_rows_between_header_and_end(self):
        lines = ["Premio", COLUMN_HEADER, "1  A", "  2  B  ", "OBSERVACIONES", "3  C"]
        assert table_lines(lines) == ["1  A", "2  B"]

    def test_repeated_header_is_skipped(self):
        lines = [COLUMN_HEADER, "1  A", COLUMN_HEADER, "2  B"]
        assert table_lines(lines) == ["1  A", "2  B"]

    def test_no_header(self):
        assert table_lines(["1  A", "2  B"]) == []


class TestParsePostPosition:
    def test_valid(self):
        assert parse_post_position(" 3 ") == 3

    @pytest.mark.parametrize("token", ["0", "31", "45"])
    def test_out_of_range(self, token):
        with pytest.raises(EntryRejected, match="out of range"):
            parse_post_position(token)

    def test_not_a_number(self):
        with pytest.raises(EntryRejected, match="is not a number"):
            parse_post_position("P.P.")


class TestColumnEntryExtractor:
    """カラム形式のエントリ抽出"""

    def test_literal_line(self):
        line = "5  SUNSET RIDER  BUT  54  PEREZ JUAN  L.BZ.  GOMEZ ANA  3"
        entry = ColumnEntryExtractor().parse_line(line, ValidationCollector(), "Race 1")

        assert entry.dorsal_number == 5
        assert entry.horse.name == "SUNSET RIDER"
        assert entry.medication == "BUT"
        assert entry.weight == 54.0
        assert entry.weight_raw == "54"
        assert entry.jockey.name == "PEREZ JUAN"
        assert entry.equipment_codes == "L.BZ."
        assert entry.trainer.name == "GOMEZ ANA"
        assert entry.post_position == 3

    def test_trainer_split_by_double_space(self):
        line = "3  EL CATIRE  LAX  53,5  CAPOTE EMISAEL  L.V.  PARRA  LOPEZ CARLOS  1"
        entry = ColumnEntryExtractor().parse_line(line, ValidationCollector(), "Race 1")

        assert entry.trainer.name == "PARRA LOPEZ CARLOS"
        assert entry.weight == 53.5

    def test_too_few_columns(self):
        with pytest.raises(EntryRejected, match="expected at least 7 columns, got 4"):
            ColumnEntryExtractor().parse_line(
                "2  MALA LINEA  BUT  52", ValidationCollector(), "Race 1"
            )

    def test_one_bad_line_among_nine(self):
        rows = [_column_line(d) for d in range(1, 11)]
        rows[4] = "5  BROKEN LINE  BUT"
        block = "\n".join([COLUMN_HEADER, *rows, "OBSERVACIONES"])
        collector = ValidationCollector()

        entries = ColumnEntryExtractor().extract(block, collector, "Race 1")

        assert len(entries) == 9
        assert 5 not in [e.dorsal_number for e in entries]
        assert len(collector) == 1
        assert "5  BROKEN LINE  BUT" in collector.warnings[0]

    def test_duplicate_dorsal_keeps_first(self):
        block = "\n".join(
            [
                COLUMN_HEADER,
                "1  FIRST HORSE  BUT  53  JOCKEY A  L.  TRAINER A  1",
                "1  SECOND HORSE  BUT  54  JOCKEY B  L.  TRAINER B  2",
            ]
        )
        collector = ValidationCollector()

        entries = ColumnEntryExtractor().extract(block, collector, "Race 1")

        assert [e.horse.name for e in entries] == ["FIRST HORSE"]
        assert collector.warnings == ("Race 1: duplicate dorsal 1 ignored.",)

    def test_unparseable_weight_defaults_to_zero(self):
        line = "5  SUNSET RIDER  BUT  XX  PEREZ JUAN  L.BZ.  GOMEZ ANA  3"
        collector = ValidationCollector()

        entry = ColumnEntryExtractor().parse_line(line, collector, "Race 1")

        assert entry.weight == 0.0
        assert entry.weight_raw == "XX"
        assert collector.warnings == (
            "Race 1: unparseable weight 'XX' for dorsal 5; using 0.",
        )

    def test_free_text_and_section_rows_are_skipped(self):
        block = "\n".join(
            [
                COLUMN_HEADER,
                "RETIRADO",
                "JUEGOS: | GANADOR | PLACE |",
                _column_line(1),
            ]
        )
        collector = ValidationCollector()

        entries = ColumnEntryExtractor().extract(block, collector, "Race 1")

        assert len(entries) == 1
        assert collector.warnings == ()

    def test_pipe_artifacts_become_separators(self):
        line = "5 | SUNSET RIDER | BUT | 54 | PEREZ JUAN | L.BZ. | GOMEZ ANA | 3"
        block = f"{COLUMN_HEADER}\n{line}"

        entries = ColumnEntryExtractor().extract(block, ValidationCollector(), "Race 1")

        assert entries[0].horse.name == "SUNSET RIDER"
        assert entries[0].post_position == 3


VERTICAL_RECORD = [
    "1",
    "RAYO DE LUZ",
    "SIRE UNO - DAM UNO",
    "B.L",
    "0,00",
    "55",
    "GARCIA PEDRO",
    "L.V.LA.",
    "MARTINEZ LUIS",
    "2",
]


class TestScanForWeight:
    """価格プレースホルダーの前方スキャン"""

    def test_with_medication_marker(self):
        assert VerticalEntryExtractor.scan_for_weight(["B.L", "0,00", "55"], 0) == (
            2,
            "B.L",
        )

    def test_without_medication_marker(self):
        assert VerticalEntryExtractor.scan_for_weight(["0,00", "55"], 0) == (1, None)

    def test_sentinel_beyond_limit(self):
        lines = ["A", "B", "C", "0,00", "55"]
        assert VerticalEntryExtractor.scan_for_weight(lines, 0) is None

    def test_runs_off_the_end(self):
        assert VerticalEntryExtractor.scan_for_weight(["A"], 0) is None


class TestVerticalEntryExtractor:
    """縦型レイアウトのエントリ抽出"""

    def test_parse_record(self):
        entry, next_index = VerticalEntryExtractor().parse_record(
            VERTICAL_RECORD, 0, ValidationCollector(), "Race 3"
        )

        assert next_index == len(VERTICAL_RECORD)
        assert entry.dorsal_number == 1
        assert entry.horse.name == "RAYO DE LUZ"
        assert entry.horse.sire == "SIRE UNO"
        assert entry.horse.dam == "DAM UNO"
        assert entry.medication == "B.L"
        assert entry.weight == 55.0
        assert entry.jockey.name == "GARCIA PEDRO"
        assert entry.equipment_codes == "L.V.LA."
        assert entry.trainer.name == "MARTINEZ LUIS"
        assert entry.post_position == 2

    def test_pedigree_without_separator(self):
        lines = ["1", "ESTRELLA", "SIN PEDIGREE", "0,00", "52", "A", "L.", "B", "1"]
        entry, _ = VerticalEntryExtractor().parse_record(
            lines, 0, ValidationCollector(), "Race 1"
        )

        assert entry.horse.sire is None
        assert entry.horse.dam is None

    def test_truncated_record(self):
        with pytest.raises(EntryRejected, match="record truncated"):
            VerticalEntryExtractor().parse_record(
                VERTICAL_RECORD[:7], 0, ValidationCollector(), "Race 3"
            )

    def test_extract_skips_front_matter(self):
        block = "\n".join(
            [
                "NºEJEMPLARBsKgsJINETEENTRENADORP.P",
                "CARRERA DEL DIA",
                "3",
                "% 1º",
                "60",
                "% 2º",
                "28",
                *VERTICAL_RECORD,
                "MED:",
                "2021",
                "PROP: STUD EL SOL",
                "OBSERVACIONES",
            ]
        )
        collector = ValidationCollector()

        entries = VerticalEntryExtractor().extract(block, collector, "Race 3")

        assert [e.dorsal_number for e in entries] == [1]
        assert collector.warnings == ()

    def test_missing_sentinel_rejects_record(self):
        lines = ["1", "HORSE", "S - D", "A", "B", "C", "0,00", "52", "J", "L.", "T", "1"]
        collector = ValidationCollector()

        entries = VerticalEntryExtractor()._extract_entries(lines, collector, "Race 1")

        assert entries == []
        assert collector.warnings == (
            "Race 1: dorsal 1 rejected (price placeholder 0,00 not found).",
        )

    def test_rejected_record_does_not_hide_next_one(self):
        """不正なレコードの後ろのレコードも読み取れる"""
        lines = [
            "1", "HORSE", "S - D", "A", "B", "C", "0,00", "52", "J", "L.", "T", "1",
            "2", *VERTICAL_RECORD[1:],
        ]
        collector = ValidationCollector()

        entries = VerticalEntryExtractor()._extract_entries(lines, collector, "Race 1")

        assert [(e.dorsal_number, e.horse.name) for e in entries] == [(2, "RAYO DE LUZ")]
        assert collector.warnings == (
            "Race 1: dorsal 1 rejected (price placeholder 0,00 not found).",
        )

    def test_out_of_range_record_followed_by_valid_one(self):
        lines = VERTICAL_RECORD[:-1] + ["45", "2", *VERTICAL_RECORD[1:]]
        collector = ValidationCollector()

        entries = VerticalEntryExtractor()._extract_entries(lines, collector, "Race 4")

        assert [e.dorsal_number for e in entries] == [2]
        assert entries[0].post_position == 2
        assert collector.warnings == (
            "Race 4: dorsal 1 rejected (post position 45 out of range).",
        )

    def test_post_position_out_of_range(self):
        lines = VERTICAL_RECORD[:-1] + ["45"]
        collector = ValidationCollector()

        entries = VerticalEntryExtractor()._extract_entries(lines, collector, "Race 4")

        assert entries == []
        assert collector.warnings == (
            "Race 4: dorsal 1 rejected (post position 45 out of range).",
        )
