"""
分詞特殊情況識別

分詞時需要整段保留、不可逐字切開的片段：
- 英文單詞（ASCII 字母）
- 阿拉伯數字
- 中文數字（含大寫）
- 小數與分數（3.14、3/4）
- 數量詞（5米、三斤）

所有判斷函數的參數都是 (text, start, length)，即 text[start:start+length]。
判斷「完整」：片段前後相鄰的字元不可與片段同類，否則只是較長片段的一部分。
視窗超出 text 範圍時一律回傳 False，不拋例外。
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Optional

from segkit.utils.logger import get_logger

from .quantifier import QuantifierTable, get_default_quantifiers

logger = get_logger("recognition")

# '〇' 不常用，放到最後
CHINESE_NUMBERS = (
    "一", "二", "三", "四", "五", "六", "七", "八", "九", "十", "百", "千", "万", "亿", "零",
    "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖", "拾", "佰", "仟", "〇",
)
_CHINESE_NUMBER_SET: FrozenSet[str] = frozenset(CHINESE_NUMBERS)

_FRACTION_SEPARATORS = ("/", ".")


def _is_ascii_letter(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_chinese_number_char(c: str) -> bool:
    return c in _CHINESE_NUMBER_SET


def _valid_window(text: str, start: int, length: int) -> bool:
    return bool(text) and start >= 0 and length >= 1 and start + length <= len(text)


def _is_complete(text: str, start: int, length: int, predicate) -> bool:
    """所有字元符合 predicate，且前後相鄰字元都不符合"""
    end = start + length
    for i in range(start, end):
        if not predicate(text[i]):
            return False
    if start > 0 and predicate(text[start - 1]):
        return False
    if end < len(text) and predicate(text[end]):
        return False
    return True


def _debug(kind: str, text: str, start: int, length: int) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"識別出{kind}：{text[start:start + length]}")


def is_english(text: str, start: int, length: int) -> bool:
    """
    英文單詞識別

    範例:
        >>> is_english("cat dog", 0, 3)
        True
        >>> is_english("cats", 0, 3)
        False
    """
    if not _valid_window(text, start, length):
        return False
    if not _is_complete(text, start, length, _is_ascii_letter):
        return False
    _debug("英文單詞", text, start, length)
    return True


def is_number(text: str, start: int, length: int) -> bool:
    """
    阿拉伯數字識別

    範例:
        >>> is_number("12a34", 0, 2)
        True
        >>> is_number("123", 0, 2)
        False
    """
    if not _valid_window(text, start, length):
        return False
    if not _is_complete(text, start, length, _is_ascii_digit):
        return False
    _debug("數字", text, start, length)
    return True


def is_chinese_number(text: str, start: int, length: int) -> bool:
    """中文數字識別，包括大寫"""
    if not _valid_window(text, start, length):
        return False
    if not _is_complete(text, start, length, _is_chinese_number_char):
        return False
    _debug("中文數字", text, start, length)
    return True


def is_fraction(text: str, start: int, length: int) -> bool:
    """
    小數和分數識別

    以視窗內第一個 '/' 或 '.' 切成兩段，兩段都必須是完整的阿拉伯數字。

    範例:
        >>> is_fraction("3/4", 0, 3)
        True
        >>> is_fraction("/45", 0, 3)
        False
    """
    if length < 3 or not _valid_window(text, start, length):
        return False

    end = start + length
    index = -1
    for i in range(start, end):
        if text[i] in _FRACTION_SEPARATORS:
            index = i
            break

    if index == -1 or index == start or index == end - 1:
        return False

    before = index - start
    return is_number(text, start, before) and is_number(text, index + 1, length - before - 1)


def is_quantifier(
    text: str,
    start: int,
    length: int,
    quantifiers: Optional[QuantifierTable] = None,
) -> bool:
    """
    數量詞識別，如日期、時間、長度、重量等

    最後一個字必須是量詞，前面的字必須是完整的阿拉伯數字或中文數字。
    前一個字元是 '.' 或 '/' 時不識別，避免把不完整小數的尾數和量詞接在一起。

    Args:
        text: 識別文本
        start: 視窗起始 index
        length: 視窗長度
        quantifiers: 量詞表，預設使用全域表
    """
    if length < 2 or not _valid_window(text, start, length):
        return False
    if start > 0 and text[start - 1] in _FRACTION_SEPARATORS:
        return False

    table = quantifiers if quantifiers is not None else get_default_quantifiers()
    last = text[start + length - 1]
    if not table.is_quantifier(last):
        return False

    if is_number(text, start, length - 1) or is_chinese_number(text, start, length - 1):
        _debug("數量詞", text, start, length)
        return True
    return False


def recog(
    text: str,
    start: int = 0,
    length: Optional[int] = None,
    quantifiers: Optional[QuantifierTable] = None,
) -> bool:
    """
    識別文本（英文單詞、小數分數、數量詞、數字、中文數字）

    依固定順序判斷，任一成立即回傳 True：
    小數分數與數量詞涵蓋數字，必須排在 is_number 之前。

    Args:
        text: 識別文本
        start: 視窗起始 index
        length: 視窗長度，預設到文本結尾
        quantifiers: 量詞表，預設使用全域表
    """
    if not text:
        return False
    if length is None:
        length = len(text) - start
    return (
        is_english(text, start, length)
        or is_fraction(text, start, length)
        or is_quantifier(text, start, length, quantifiers)
        or is_number(text, start, length)
        or is_chinese_number(text, start, length)
    )
