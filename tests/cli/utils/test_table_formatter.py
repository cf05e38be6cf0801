"""table_formatter ユーティリティのテスト"""

from programa.cli.utils.table_formatter import (
    format_table,
    get_display_width,
    pad_to_width,
)


class TestGetDisplayWidth:
    """get_display_width のテスト"""

    def test_ascii(self):
        """ASCII文字の幅は全て1"""
        assert get_display_width("hello") == 5
        assert get_display_width("") == 0

    def test_accented_latin(self):
        """アクセント付きラテン文字の幅は1"""
        assert get_display_width("DOÑA BÁRBARA") == 12

    def test_combining_characters(self):
        """結合文字は幅に数えない"""
        assert get_display_width("A\u0301") == 1

    def test_cjk(self):
        """全角文字の幅は2"""
        assert get_display_width("日本") == 4


class TestPadToWidth:
    """pad_to_width のテスト"""

    def test_left(self):
        assert pad_to_width("abc", 6) == "abc   "

    def test_right(self):
        assert pad_to_width("abc", 6, align_right=True) == "   abc"

    def test_no_padding_needed(self):
        assert pad_to_width("hello", 3) == "hello"


class TestFormatTable:
    """format_table のテスト"""

    def test_layout(self):
        result = format_table(("No", "Horse"), [("1", "ALFA"), ("12", "BETA GAMMA")], right_aligned=(0,))

        assert result.splitlines() == [
            "+----+------------+",
            "| No | Horse      |",
            "+----+------------+",
            "|  1 | ALFA       |",
            "| 12 | BETA GAMMA |",
            "+----+------------+",
        ]

    def test_no_rows(self):
        lines = format_table(("No",), []).splitlines()
        assert len(lines) == 4
