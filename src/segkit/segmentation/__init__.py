"""
分詞演算法模組

主要類別:
- Segmentation: 分詞演算法抽象基類
- MaximumMatching / ReverseMaximumMatching / BidirectionalMaximumMatching

工廠:
- SegmentationAlgorithm: 可用演算法列舉
- get_segmentation: 依列舉建立分詞實作
"""

from .factory import SegmentationAlgorithm, get_segmentation, resolve_algorithm
from .interface import Segmentation
from .maximum_matching import (
    BidirectionalMaximumMatching,
    MaximumMatching,
    ReverseMaximumMatching,
)

__all__ = [
    "Segmentation",
    "MaximumMatching",
    "ReverseMaximumMatching",
    "BidirectionalMaximumMatching",
    "SegmentationAlgorithm",
    "get_segmentation",
    "resolve_algorithm",
]
