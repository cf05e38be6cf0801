"""フォーマット設定

各ソースフォーマットのブロックアンカー、既定の競馬場、フォーマット指定の別名を定義する。
"""

import re

from programa.constants import COUNTRY_CODE
from programa.models import SourceFormat, Track

# レースブロックの先頭を示すアンカー
BLOCK_ANCHORS: dict[SourceFormat, re.Pattern] = {
    SourceFormat.FORMAT_A: re.compile(r"Carrera Programada:", re.IGNORECASE),
    SourceFormat.FORMAT_B: re.compile(r"^REUNION:", re.MULTILINE),
}

# 自動判定でアンカーを調べる順序
DETECTION_ORDER: tuple[SourceFormat, ...] = (
    SourceFormat.FORMAT_A,
    SourceFormat.FORMAT_B,
)

# どのアンカーも見つからない場合に使うフォーマット
FALLBACK_FORMAT = SourceFormat.FORMAT_A

# 競馬場名が見つからない場合の既定値
DEFAULT_TRACKS: dict[SourceFormat, Track] = {
    SourceFormat.FORMAT_A: Track(
        name="LA RINCONADA", location="LA RINCONADA", country=COUNTRY_CODE
    ),
    SourceFormat.FORMAT_B: Track(
        name="NACIONAL DE VALENCIA", location="VALENCIA", country=COUNTRY_CODE
    ),
}

# フォーマット指定の受け付け値（None は自動判定）
FORMAT_HINT_ALIASES: dict[str, SourceFormat | None] = {
    "auto": None,
    "format-a": SourceFormat.FORMAT_A,
    "format-b": SourceFormat.FORMAT_B,
    "inh": SourceFormat.FORMAT_A,
    "hinava": SourceFormat.FORMAT_B,
}
