"""
全域配置模組

提供統一的配置類別，控制日誌、計時、分詞演算法與量詞表。

使用方式:
    from segkit.config import SegmentationConfig

    # 簡單開啟 verbose 模式
    config = SegmentationConfig(verbose=True, extra_quantifiers="秒")
    segmentation = config.create_segmentation(dictionary)

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("segkit").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .dictionary.interface import Dictionary
from .dictionary.loader import WordSource, load_dictionary
from .recognition.quantifier import QuantifierTable
from .segmentation.factory import get_segmentation, resolve_algorithm
from .segmentation.interface import Segmentation
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    verbose=False 時不主動設定，讓使用者可以透過標準 logging 控制。

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)


@dataclass
class SegmentationConfig:
    """
    分詞配置類別

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        algorithm: 分詞演算法名稱，見 SegmentationAlgorithm
        extra_quantifiers: 額外加入預設量詞表的量詞字元

    使用範例:
        config = SegmentationConfig(algorithm="BidirectionalMaximumMatching")
        words = config.create_segmentation(dictionary).seg("我有3/4杯水")
    """

    # 日誌控制
    verbose: bool = False

    # 計時回呼
    on_timing: Optional[Callable[[str, float], None]] = None

    # 分詞
    algorithm: str = "MaximumMatching"
    extra_quantifiers: str = ""

    def __post_init__(self):
        """初始化後設定 logger，並提早檢查演算法名稱"""
        configure_logging(self.verbose)
        resolve_algorithm(self.algorithm)

    def build_quantifiers(self) -> QuantifierTable:
        """預設量詞 + extra_quantifiers"""
        table = QuantifierTable()
        if self.extra_quantifiers:
            table.add(self.extra_quantifiers)
        return table

    def load_dictionary(self, source: WordSource, *, freeze: bool = True) -> Dictionary:
        """載入詞典，計時結果交給 on_timing"""
        return load_dictionary(source, freeze=freeze, on_timing=self.on_timing)

    def create_segmentation(self, dictionary: Dictionary) -> Segmentation:
        quantifiers = self.build_quantifiers() if self.extra_quantifiers else None
        return get_segmentation(self.algorithm, dictionary, quantifiers)


# 預設配置實例 (靜默模式)
DEFAULT_CONFIG = SegmentationConfig(verbose=False)
