"""
分詞演算法工廠

以封閉的列舉 SegmentationAlgorithm 對應到實作類別，
不做任何以類別名稱字串動態載入的動作。
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, Union

from segkit.dictionary.interface import Dictionary
from segkit.recognition.quantifier import QuantifierTable
from segkit.utils.logger import get_logger

from .interface import Segmentation
from .maximum_matching import (
    BidirectionalMaximumMatching,
    MaximumMatching,
    ReverseMaximumMatching,
)

logger = get_logger("segmentation.factory")


class SegmentationAlgorithm(str, Enum):
    MAXIMUM_MATCHING = "MaximumMatching"
    REVERSE_MAXIMUM_MATCHING = "ReverseMaximumMatching"
    BIDIRECTIONAL_MAXIMUM_MATCHING = "BidirectionalMaximumMatching"


_REGISTRY: Dict[SegmentationAlgorithm, Type[Segmentation]] = {
    SegmentationAlgorithm.MAXIMUM_MATCHING: MaximumMatching,
    SegmentationAlgorithm.REVERSE_MAXIMUM_MATCHING: ReverseMaximumMatching,
    SegmentationAlgorithm.BIDIRECTIONAL_MAXIMUM_MATCHING: BidirectionalMaximumMatching,
}


def resolve_algorithm(algorithm: Union[SegmentationAlgorithm, str]) -> SegmentationAlgorithm:
    """
    把演算法名稱轉成列舉

    Raises:
        ValueError: 未知的演算法名稱
    """
    if isinstance(algorithm, SegmentationAlgorithm):
        return algorithm
    try:
        return SegmentationAlgorithm(algorithm)
    except ValueError:
        known = ", ".join(a.value for a in SegmentationAlgorithm)
        raise ValueError(f"未知的分詞演算法: {algorithm!r}（可用: {known}）") from None


def get_segmentation(
    algorithm: Union[SegmentationAlgorithm, str],
    dictionary: Dictionary,
    quantifiers: Optional[QuantifierTable] = None,
) -> Segmentation:
    """
    根據指定的分詞演算法回傳分詞實作

    Args:
        algorithm: SegmentationAlgorithm 或其字串值，如 "MaximumMatching"
        dictionary: 分詞用詞典
        quantifiers: 量詞表，預設使用全域表

    Returns:
        Segmentation: 分詞實作
    """
    resolved = resolve_algorithm(algorithm)
    cls = _REGISTRY[resolved]
    logger.info(f"分詞實作類別：{cls.__name__}")
    return cls(dictionary, quantifiers)
