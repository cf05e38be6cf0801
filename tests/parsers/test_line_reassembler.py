"""Tests for programa.parsers.line_reassembler module."""

from programa.parsers.line_reassembler import (
    is_entry_start,
    reassemble_lines,
    reassemble_text,
)


class TestIsEntryStart:
    """エントリ行の開始判定"""

    def test_dorsal_followed_by_name(self):
        assert is_entry_start("5  SUNSET RIDER  BUT  54")

    def test_single_space_is_not_entry(self):
        assert not is_entry_start("5 SUNSET RIDER")

    def test_three_digit_index_is_not_entry(self):
        assert not is_entry_start("140  METROS")

    def test_day_marker_is_not_entry(self):
        """"9  DOMINGO" は開催番号と曜日の行でありエントリではない"""
        assert not is_entry_start("9  DOMINGO")

    def test_accented_leading_letter(self):
        assert is_entry_start("7  ÑANDU VELOZ  BUT  53")


class TestReassembleLines:
    """折り返し行の結合"""

    def test_joins_continuation_until_section_keyword(self):
        lines = [
            "5  SUNSET RIDER",
            "CONTINUATION TEXT",
            "JUEGOS: | GANADOR | PLACE |",
        ]
        assert reassemble_lines(lines) == [
            "5  SUNSET RIDER CONTINUATION TEXT",
            "JUEGOS: | GANADOR | PLACE |",
        ]

    def test_new_entry_ends_previous(self):
        lines = ["1  ALFA  BUT  53", "2  BETA  BUT  54"]
        assert reassemble_lines(lines) == lines

    def test_blank_line_does_not_end_entry(self):
        lines = ["3  EL CATIRE  LAX  53  CAPOTE  L.V.  PARRA", "", "LOPEZ  1"]
        assert reassemble_lines(lines) == [
            "3  EL CATIRE  LAX  53  CAPOTE  L.V.  PARRA LOPEZ  1"
        ]

    def test_strips_leading_continuation_marker(self):
        lines = ["3  EL CATIRE  LAX  53", ". L.V.  PARRA  1"]
        assert reassemble_lines(lines) == ["3  EL CATIRE  LAX  53 L.V.  PARRA  1"]

    def test_day_marker_ends_entry(self):
        lines = ["1  ALFA  BUT  53", "9  DOMINGO", "HANDICAP LIBRE"]
        assert reassemble_lines(lines) == lines

    def test_table_header_ends_entry(self):
        lines = ["1  ALFA  BUT  53", "N°  Ejemplar  Medic.  Kilos"]
        assert reassemble_lines(lines) == lines

    def test_lines_outside_entries_pass_through(self):
        lines = ["Carrera Programada:", "", "1400 mts.  1  4  76"]
        assert reassemble_lines(lines) == lines

    def test_never_more_lines_than_input(self):
        lines = ["1  ALFA", "x", "y", "2  BETA", "z", "OBSERVACIONES"]
        result = reassemble_lines(lines)
        assert len(result) <= len(lines)
        assert result == ["1  ALFA x y", "2  BETA z", "OBSERVACIONES"]

    def test_empty_input(self):
        assert reassemble_lines([]) == []


class TestReassembleText:
    def test_round_trips_text(self):
        text = "Carrera Programada:\n1  ALFA  BUT\n53 JUAN  L.  ANA  1\nJUEGOS: | PLACE |"
        assert reassemble_text(text) == (
            "Carrera Programada:\n1  ALFA  BUT 53 JUAN  L.  ANA  1\nJUEGOS: | PLACE |"
        )
