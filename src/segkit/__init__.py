"""
segkit - 中文分詞查詢核心 (Chinese Word Segmentation Lookup Core)

核心概念：
- 詞典以前綴樹存放，查詢一段字串是否為詞的耗時與字串長度成正比
- 數字、小數、數量詞、英文單詞等片段先由識別函數判斷，避免被逐字切開
- 分詞演算法（最大匹配系列）只依賴以上兩者

官方入口（穩定 API）：
- `segkit.TrieDictionary` / `segkit.load_dictionary`
- `segkit.recog` 與各個 is_xxx 識別函數
- `segkit.get_segmentation` / `segkit.SegmentationAlgorithm`
"""

# =============================================================================
# 詞典
# =============================================================================
from segkit.dictionary import Dictionary, TrieDictionary, load_dictionary, load_words

# =============================================================================
# 識別
# =============================================================================
from segkit.recognition import (
    DEFAULT_QUANTIFIERS,
    QuantifierTable,
    is_chinese_number,
    is_english,
    is_fraction,
    is_number,
    is_quantifier,
    is_quantifier_unit,
    recog,
)

# =============================================================================
# 分詞演算法
# =============================================================================
from segkit.segmentation import (
    BidirectionalMaximumMatching,
    MaximumMatching,
    ReverseMaximumMatching,
    Segmentation,
    SegmentationAlgorithm,
    get_segmentation,
)

# =============================================================================
# 配置與日誌
# =============================================================================
from segkit.config import DEFAULT_CONFIG, SegmentationConfig
from segkit.utils.logger import enable_debug_logging, enable_timing_logging, get_logger

__all__ = [
    # Dictionary
    "Dictionary",
    "TrieDictionary",
    "load_dictionary",
    "load_words",
    # Recognition
    "recog",
    "is_english",
    "is_number",
    "is_chinese_number",
    "is_fraction",
    "is_quantifier",
    "is_quantifier_unit",
    "QuantifierTable",
    "DEFAULT_QUANTIFIERS",
    # Segmentation
    "Segmentation",
    "MaximumMatching",
    "ReverseMaximumMatching",
    "BidirectionalMaximumMatching",
    "SegmentationAlgorithm",
    "get_segmentation",
    # Config
    "SegmentationConfig",
    "DEFAULT_CONFIG",
    # Logging
    "get_logger",
    "enable_debug_logging",
    "enable_timing_logging",
]

__version__ = "0.1.0"
