"""
識別模組

判斷一段文字是否為分詞時應整段保留的片段（英文、數字、小數、數量詞）。
"""

from .quantifier import (
    DEFAULT_QUANTIFIERS,
    QuantifierTable,
    get_default_quantifiers,
    is_quantifier_unit,
)
from .recognition_tool import (
    CHINESE_NUMBERS,
    is_chinese_number,
    is_english,
    is_fraction,
    is_number,
    is_quantifier,
    recog,
)

__all__ = [
    # 識別
    "recog",
    "is_english",
    "is_number",
    "is_chinese_number",
    "is_fraction",
    "is_quantifier",
    "CHINESE_NUMBERS",

    # 量詞表
    "QuantifierTable",
    "DEFAULT_QUANTIFIERS",
    "get_default_quantifiers",
    "is_quantifier_unit",
]
