"""テキスト正規化ユーティリティ"""

import re
import unicodedata

from programa.constants import LICENSE_PREFIX_JOCKEY, LICENSE_PREFIX_TRAINER


def clean(text: str) -> str:
    """連続する空白を1つにまとめ、前後の空白を除去する

    Args:
        text: 対象文字列

    Returns:
        正規化された文字列
    """
    return re.sub(r"\s+", " ", text).strip()


def normalize_name(name: str) -> str:
    """名前を同一性判定用に正規化する（大文字化・空白圧縮）"""
    return clean(name).upper()


def fold_accents(text: str) -> str:
    """アクセント記号を除去する（"MÁRQUEZ" -> "MARQUEZ"）"""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def make_license_id(name: str, role: str) -> str:
    """ライセンスIDを名前と役割から決定的に生成する

    Args:
        name: 騎手または調教師の名前
        role: "jockey" または "trainer"

    Returns:
        "J-PEREZJUAN" のようなID
    """
    prefix = LICENSE_PREFIX_JOCKEY if role == "jockey" else LICENSE_PREFIX_TRAINER
    key = re.sub(r"[^A-Z0-9]", "", fold_accents(name).upper())
    return f"{prefix}-{key}"


def parse_amount(raw: str) -> float | None:
    """金額文字列を数値に変換する

    対応形式:
        - "3600"
        - "4.500,00"（ピリオド区切りの千の位、カンマの小数点）
        - "37.180"（千の位のみ）
        - "1200.50"

    Args:
        raw: 金額文字列

    Returns:
        数値。解析できない場合はNone
    """
    s = raw.strip()
    if not re.fullmatch(r"\d[\d.,]*", s):
        return None

    if "," in s:
        s = s.replace(".", "").replace(",", ".")
    elif re.fullmatch(r"\d{1,3}(?:\.\d{3})+", s):
        s = s.replace(".", "")

    try:
        return float(s)
    except ValueError:
        return None
