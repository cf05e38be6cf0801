"""テーブルフォーマッタユーティリティ

出走表などを整形されたテーブル形式で出力するための関数群。
全角文字・結合文字の表示幅を考慮した動的幅計算に対応。
"""

import unicodedata
from collections.abc import Sequence


def get_display_width(text: str) -> int:
    """文字列の表示幅を計算（全角文字は2、結合文字は0、半角は1）

    Args:
        text: 計算対象の文字列

    Returns:
        int: 表示幅
    """
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        if unicodedata.east_asian_width(char) in ("F", "W"):
            width += 2
        else:
            width += 1
    return width


def pad_to_width(text: str, target_width: int, align_right: bool = False) -> str:
    """文字列を指定の表示幅にパディング

    Args:
        text: パディング対象の文字列
        target_width: 目標の表示幅
        align_right: True なら右揃え、False なら左揃え

    Returns:
        str: パディングされた文字列
    """
    padding_needed = target_width - get_display_width(text)
    if padding_needed <= 0:
        return text
    padding = " " * padding_needed
    if align_right:
        return padding + text
    return text + padding


def format_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    right_aligned: Sequence[int] = (),
) -> str:
    """罫線付きテーブルを動的幅で生成

    Args:
        headers: ヘッダ
        rows: 各行のセル（文字列）
        right_aligned: 右揃えにする列のインデックス

    Returns:
        str: フォーマット済みテーブル文字列
    """
    # 各列の最大表示幅を計算（ヘッダ含む）
    col_widths = []
    for col_idx, header in enumerate(headers):
        max_width = get_display_width(header)
        for row in rows:
            max_width = max(max_width, get_display_width(row[col_idx]))
        col_widths.append(max_width)

    def make_border() -> str:
        return "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    def make_row(cells: Sequence[str]) -> str:
        parts = []
        for i, cell in enumerate(cells):
            padded = pad_to_width(cell, col_widths[i], align_right=i in right_aligned)
            parts.append(f" {padded} ")
        return "|" + "|".join(parts) + "|"

    lines = [make_border(), make_row(headers), make_border()]
    for row in rows:
        lines.append(make_row(row))
    lines.append(make_border())

    return "\n".join(lines)
