"""
分詞演算法抽象基類

所有分詞演算法只依賴詞典查詢（contains / get_max_length）與識別函數（recog）。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from segkit.dictionary.interface import Dictionary
from segkit.recognition.quantifier import QuantifierTable
from segkit.recognition.recognition_tool import recog
from segkit.utils.logger import get_logger


class Segmentation(ABC):
    """
    分詞演算法抽象基類 (Abstract Base Class)

    職責:
    - 持有共享的詞典與量詞表
    - 提供 seg() 把文本切成詞列表
    """

    _algorithm_name: str = "base"

    def __init__(self, dictionary: Dictionary, quantifiers: Optional[QuantifierTable] = None):
        self._dictionary = dictionary
        self._quantifiers = quantifiers
        self._logger = get_logger(f"segmentation.{self._algorithm_name}")

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @abstractmethod
    def seg(self, text: str) -> List[str]:
        pass

    def _max_window(self) -> int:
        return max(self._dictionary.get_max_length(), 1)

    def _is_word(self, text: str, start: int, length: int) -> bool:
        return (
            recog(text, start, length, self._quantifiers)
            or self._dictionary.contains(text, start, length)
        )

    @staticmethod
    def _drop_blank(words: List[str]) -> List[str]:
        return [w for w in words if not w.isspace()]
