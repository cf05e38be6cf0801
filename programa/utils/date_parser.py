"""日付解析ユーティリティ"""

import re
from datetime import datetime, timezone

# 日-月-年の順（ベネズエラのロケール）
DATE_TOKEN_PATTERN = re.compile(r"(\d{1,2})[/\-](\d{1,2})[/\-](\d{4}|\d{2})\b")

# 後段のタイムゾーン変換で日付がずれないよう正午に固定する
MEETING_HOUR = 12


def find_date_token(text: str) -> str | None:
    """テキスト中の最初の D/M/Y トークンを返す"""
    match = DATE_TOKEN_PATTERN.search(text)
    return match.group(0) if match else None


def parse_meeting_date(date_str: str) -> datetime:
    """開催日文字列を datetime（UTC 12:00）に変換する

    対応形式:
        - "22/02/2026"
        - "22-02-2026"
        - "22/02/26"（2桁の年は20YY）

    Args:
        date_str: 日付文字列

    Returns:
        タイムゾーン付きの datetime

    Raises:
        ValueError: 日付として解釈できない場合
    """
    match = DATE_TOKEN_PATTERN.search(date_str)
    if not match:
        raise ValueError(f"Invalid date string: {date_str}")

    day = int(match.group(1))
    month = int(match.group(2))
    year_text = match.group(3)
    year = int(year_text) + 2000 if len(year_text) == 2 else int(year_text)

    # 存在しない日付（31/02 など）は datetime が ValueError を送出する
    return datetime(year, month, day, MEETING_HOUR, tzinfo=timezone.utc)
