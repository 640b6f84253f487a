"""
前綴樹詞典（無第三方依賴）

用途：
- 判斷一段字串是否為詞典中的詞（contains），耗時與字串長度成正比
- 列出某個前綴在詞典中所有「再多一個字」的延伸（prefix）

每個節點的子節點以字元排序存放在 list 中，查找用二分搜尋；
分詞詞典每個節點的分支數很少，比固定大小的字母表陣列省記憶體。
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from typing import Iterable, List, Optional

from segkit.utils.logger import TimingContext, get_logger

from .interface import Dictionary

logger = get_logger("dictionary.trie")


class _TrieNode:
    __slots__ = ("character", "terminal", "children", "_keys")

    def __init__(self, character: str = "") -> None:
        self.character = character
        self.terminal = False
        self.children: List[_TrieNode] = []
        # 與 children 對齊的字元列表，供 bisect 使用
        self._keys: List[str] = []

    def get_child(self, character: str) -> Optional["_TrieNode"]:
        index = bisect_left(self._keys, character)
        if index < len(self._keys) and self._keys[index] == character:
            return self.children[index]
        return None

    def get_or_create_child(self, character: str) -> "_TrieNode":
        index = bisect_left(self._keys, character)
        if index < len(self._keys) and self._keys[index] == character:
            return self.children[index]

        child = _TrieNode(character)
        self._keys.insert(index, character)
        self.children.insert(index, child)
        return child


class TrieDictionary(Dictionary):
    """
    前綴樹詞典

    功能:
    - add / add_all: 加入詞（去除首尾空白，空字串忽略）
    - contains: 精確詞查詢，支援 (text, start, length) 視窗
    - prefix: 列出前綴的一字延伸
    - freeze: 切換為唯讀，之後可安全地被多執行緒查詢

    範例:
        >>> trie = TrieDictionary()
        >>> trie.add_all(["中华", "中华人民共和国", "中心思想"])
        >>> trie.contains("中华")
        True
        >>> trie.prefix("中华")
        ['中华人']
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self._root = _TrieNode()
        self._max_length = 0
        self._size = 0
        self._frozen = False
        if words is not None:
            self.add_all(words)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """切換為唯讀模式；之後 add / add_all / clear 會拋出 RuntimeError"""
        self._frozen = True

    def _check_mutable(self, operation: str) -> None:
        if self._frozen:
            raise RuntimeError(f"TrieDictionary 已 freeze()，不可再 {operation}()")

    def add(self, word: str) -> None:
        self._check_mutable("add")
        word = word.strip()
        if not word:
            return

        node = self._root
        for character in word:
            node = node.get_or_create_child(character)

        if not node.terminal:
            node.terminal = True
            self._size += 1
        if len(word) > self._max_length:
            self._max_length = len(word)

    def add_all(self, words: Iterable[str]) -> None:
        self._check_mutable("add_all")
        with TimingContext("TrieDictionary.add_all", logger, logging.DEBUG):
            for word in words:
                self.add(word)

    def _walk(self, text: str, start: int, end: int) -> Optional[_TrieNode]:
        node = self._root
        for i in range(start, end):
            node = node.get_child(text[i])
            if node is None:
                return None
        return node

    def contains(self, text: str, start: int = 0, length: Optional[int] = None) -> bool:
        """
        判斷 text[start:start+length] 是否為詞典中的詞

        Args:
            text: 待查文本
            start: 視窗起始 index
            length: 視窗長度，預設到文本結尾

        Returns:
            bool: 視窗超出範圍、長度小於 1、或只是前綴時皆為 False
        """
        if text is None:
            return False
        if length is None:
            length = len(text) - start
        if start < 0 or length < 1 or start + length > len(text):
            return False

        node = self._walk(text, start, start + length)
        if node is None or not node.terminal:
            return False

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"在詞典中查到詞：{text[start:start + length]}")
        return True

    def prefix(self, text: str) -> List[str]:
        """
        列出 text 在詞典中所有的一字延伸

        注意：回傳的是「前綴 + 一個子節點字元」，不是完整的詞。

        Returns:
            List[str]: 依字元排序；前綴為空或不存在時回傳空列表
        """
        if text is None:
            return []
        text = text.strip()
        if not text:
            return []

        node = self._walk(text, 0, len(text))
        if node is None:
            return []
        return [text + child.character for child in node.children]

    def clear(self) -> None:
        """清空整棵樹，max_length 一併歸零"""
        self._check_mutable("clear")
        self._root = _TrieNode()
        self._max_length = 0
        self._size = 0

    def get_max_length(self) -> int:
        return self._max_length

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return (
            f"TrieDictionary(words={self._size}, max_length={self._max_length}, "
            f"frozen={self._frozen})"
        )
