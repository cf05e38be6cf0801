"""Tests for programa.utils.date_parser module."""

from datetime import datetime, timezone

import pytest

from programa.utils.date_parser import find_date_token, parse_meeting_date


class TestParseMeetingDate:
    """正常系テスト: 日-月-年の文字列を変換"""

    def test_slash_separated(self):
        assert parse_meeting_date("22/02/2026") == datetime(
            2026, 2, 22, 12, tzinfo=timezone.utc
        )

    def test_dash_separated(self):
        assert parse_meeting_date("5-3-2026") == datetime(
            2026, 3, 5, 12, tzinfo=timezone.utc
        )

    def test_two_digit_year(self):
        """2桁の年は2000年代として扱う"""
        assert parse_meeting_date("22/02/26").year == 2026

    def test_fixed_at_noon_utc(self):
        result = parse_meeting_date("01/01/2026")
        assert result.hour == 12
        assert result.tzinfo == timezone.utc


class TestParseMeetingDateErrors:
    """異常系テスト"""

    def test_no_date_token(self):
        with pytest.raises(ValueError, match="Invalid date string"):
            parse_meeting_date("DOMINGO")

    def test_nonexistent_day(self):
        with pytest.raises(ValueError):
            parse_meeting_date("31/02/2026")


class TestFindDateToken:
    def test_returns_first_token(self):
        assert find_date_token("Hora: 01:25 p. m.  22/02/2026  23/02/2026") == "22/02/2026"

    def test_no_token(self):
        assert find_date_token("sin fecha") is None
