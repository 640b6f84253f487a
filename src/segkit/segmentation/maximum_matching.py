"""
最大匹配分詞

- MaximumMatching: 正向最大匹配，由左往右
- ReverseMaximumMatching: 逆向最大匹配，由右往左
- BidirectionalMaximumMatching: 兩者都跑，挑較好的結果

每個位置先取最長視窗（詞典最大詞長），不是詞就縮短一個字，
直到識別成功、查到詞、或只剩一個字。
"""

from __future__ import annotations

from typing import List, Optional

from segkit.dictionary.interface import Dictionary
from segkit.recognition.quantifier import QuantifierTable

from .interface import Segmentation


class MaximumMatching(Segmentation):
    _algorithm_name = "MaximumMatching"

    def seg(self, text: str) -> List[str]:
        if not text:
            return []

        result: List[str] = []
        max_window = self._max_window()
        text_len = len(text)
        start = 0
        while start < text_len:
            length = min(max_window, text_len - start)
            while length > 1 and not self._is_word(text, start, length):
                length -= 1
            result.append(text[start:start + length])
            start += length

        return self._drop_blank(result)


class ReverseMaximumMatching(Segmentation):
    _algorithm_name = "ReverseMaximumMatching"

    def seg(self, text: str) -> List[str]:
        if not text:
            return []

        result: List[str] = []
        max_window = self._max_window()
        end = len(text)
        while end > 0:
            length = min(max_window, end)
            while length > 1 and not self._is_word(text, end - length, length):
                length -= 1
            result.append(text[end - length:end])
            end -= length

        result.reverse()
        return self._drop_blank(result)


class BidirectionalMaximumMatching(Segmentation):
    """
    雙向最大匹配

    選擇規則：
    1. 詞數較少者
    2. 詞數相同時，單字詞較少者
    3. 仍相同時取逆向結果
    """

    _algorithm_name = "BidirectionalMaximumMatching"

    def __init__(self, dictionary: Dictionary, quantifiers: Optional[QuantifierTable] = None):
        super().__init__(dictionary, quantifiers)
        self._forward = MaximumMatching(dictionary, quantifiers)
        self._reverse = ReverseMaximumMatching(dictionary, quantifiers)

    def seg(self, text: str) -> List[str]:
        forward = self._forward.seg(text)
        reverse = self._reverse.seg(text)

        if len(forward) != len(reverse):
            chosen = forward if len(forward) < len(reverse) else reverse
        else:
            forward_singles = sum(1 for w in forward if len(w) == 1)
            reverse_singles = sum(1 for w in reverse if len(w) == 1)
            chosen = forward if forward_singles < reverse_singles else reverse

        self._logger.debug(f"正向: {forward} 逆向: {reverse} -> {chosen}")
        return chosen
