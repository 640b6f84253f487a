"""
量詞表

量詞（單位字）跟在數字後面時，分詞器應把「數字 + 量詞」視為一個詞，
例如 "5米"、"三斤"、"十二月"。

量詞集合是一張可擴充的表，而不是寫死在識別邏輯裡：
- DEFAULT_QUANTIFIERS: 內建的常用量詞
- QuantifierTable: 可加入自訂量詞的表
- is_quantifier_unit(): 以全域預設表判斷
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Set

# 時間
_TIME_UNITS = "年月日天时分秒周刻"
# 長度 / 面積 / 容量 / 重量
_MEASURE_UNITS = "米里尺寸丈厘毫码亩顷升克斤两吨磅度"
# 貨幣
_CURRENCY_UNITS = "元角块毛圆镑"
# 個體與集合量詞
_COUNTER_UNITS = (
    "个只次岁号页本张件位条台辆部头匹层名倍份届楼栋篇首双对套瓶杯碗"
    "斗户口人家所座艘架棵朵句章节集场轮批期股项根支枝把颗粒滴片封盒箱包袋代"
)

DEFAULT_QUANTIFIERS: FrozenSet[str] = frozenset(
    _TIME_UNITS + _MEASURE_UNITS + _CURRENCY_UNITS + _COUNTER_UNITS
)


class QuantifierTable:
    """
    量詞表

    範例:
        >>> table = QuantifierTable()
        >>> table.is_quantifier("米")
        True
        >>> table.add("厘")
    """

    def __init__(self, chars: Optional[Iterable[str]] = None) -> None:
        self._chars: Set[str] = set(DEFAULT_QUANTIFIERS if chars is None else ())
        if chars is not None:
            self.add(chars)

    def add(self, chars: Iterable[str]) -> None:
        """
        加入量詞

        Args:
            chars: 單一字元、多字元字串（逐字加入）或字元的 iterable；空白會略過
        """
        for item in chars:
            for char in item:
                if not char.isspace():
                    self._chars.add(char)

    def is_quantifier(self, char: str) -> bool:
        return len(char) == 1 and char in self._chars

    def chars(self) -> FrozenSet[str]:
        return frozenset(self._chars)

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.is_quantifier(char)

    def __len__(self) -> int:
        return len(self._chars)


_default_table = QuantifierTable()


def get_default_quantifiers() -> QuantifierTable:
    """取得全域共用的預設量詞表"""
    return _default_table


def is_quantifier_unit(char: str) -> bool:
    return _default_table.is_quantifier(char)
