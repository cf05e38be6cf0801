"""Constants for race program parsing."""

# 開催国（両フォーマットともベネズエラの競馬場）
COUNTRY_CODE = "VE"

# 曜日トークン（アクセントの有無どちらにも対応）
DAY_OF_WEEK_PATTERN = (
    r"LUNES|MARTES|MI[EÉ]RCOLES|JUEVES|VIERNES|S[AÁ]BADO|DOMINGO"
)

# 馬番・ゲート番号の有効範囲
MIN_DORSAL = 1
MAX_DORSAL = 30
MIN_POST_POSITION = 1
MAX_POST_POSITION = 30

# 列指向フォーマットの最小列数
MIN_ENTRY_COLUMNS = 7

# 縦並びフォーマットの価格プレースホルダ（"価格なし"）
PRICE_SENTINEL = "0,00"

# 血統行の後ろでセンチネルを探す最大行数
SENTINEL_SCAN_LIMIT = 3

# 縦並びフォーマットで1頭ぶんの体重行から数えた固定フィールド数
# weight, jockey, equipment, trainer, post position
VERTICAL_FIELDS_AFTER_SENTINEL = 5

# 賞金配分のサニティチェック上限（%）
MAX_PRIZE_PERCENT_TOTAL = 100

# 配分とみなす最小トークン数
MIN_PRIZE_PERCENT_TOKENS = 3

# ライセンスIDの接頭辞
LICENSE_PREFIX_JOCKEY = "J"
LICENSE_PREFIX_TRAINER = "T"
