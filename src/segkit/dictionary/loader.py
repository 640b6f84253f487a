"""
詞典載入

把詞表（檔案路徑或逐行的 iterable）餵進 Dictionary。
每行一個詞，首尾空白會去除，空行略過。
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, Iterator, Optional, Union

from segkit.utils.logger import TimingContext, get_logger

from .interface import Dictionary
from .trie import TrieDictionary

logger = get_logger("dictionary.loader")

WordSource = Union[str, "os.PathLike[str]", Iterable[str]]


def load_words(source: WordSource, encoding: str = "utf-8") -> Iterator[str]:
    """
    逐一取出詞表中的詞

    Args:
        source: 檔案路徑，或逐行字串的 iterable
        encoding: 讀檔編碼

    Yields:
        str: 去除首尾空白後的非空行

    Raises:
        FileNotFoundError: 路徑不存在
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, encoding=encoding) as f:
            for line in f:
                word = line.strip()
                if word:
                    yield word
        return

    for line in source:
        word = line.strip()
        if word:
            yield word


def load_dictionary(
    source: WordSource,
    dictionary: Optional[Dictionary] = None,
    *,
    freeze: bool = False,
    encoding: str = "utf-8",
    on_timing: Optional[Callable[[str, float], None]] = None,
) -> Dictionary:
    """
    建立（或補充）詞典

    Args:
        source: 檔案路徑或逐行 iterable
        dictionary: 既有詞典；None 時建立新的 TrieDictionary
        freeze: 載入後是否切換為唯讀
        encoding: 讀檔編碼
        on_timing: 計時回呼 (operation, elapsed)

    Returns:
        Dictionary: 載入完成的詞典

    Raises:
        NotImplementedError: freeze=True 但詞典不支援唯讀模式
    """
    if dictionary is None:
        dictionary = TrieDictionary()

    label = os.fspath(source) if isinstance(source, (str, os.PathLike)) else "<iterable>"
    count = 0

    def _counted(words: Iterable[str]) -> Iterator[str]:
        nonlocal count
        for word in words:
            count += 1
            yield word

    with TimingContext(f"load_dictionary({label})", logger, logging.DEBUG, on_timing):
        dictionary.add_all(_counted(load_words(source, encoding=encoding)))

    if freeze:
        dictionary.freeze()

    logger.info(f"詞典載入完成：{label}，{count} 行，最大詞長 {dictionary.get_max_length()}")
    return dictionary
