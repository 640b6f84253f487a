"""
詞典抽象基類

定義分詞演算法所依賴的詞典介面：建置（add / add_all / clear）
與查詢（contains / prefix / get_max_length）。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class Dictionary(ABC):
    """
    詞典抽象基類 (Abstract Base Class)

    生命週期:
    - 啟動時由 loader 一次性載入詞表
    - 之後只做查詢（可先 freeze() 再交給多執行緒共用）

    查詢方法對不合法的範圍一律回傳 False / 空列表，不拋例外。
    """

    @abstractmethod
    def add(self, word: str) -> None:
        pass

    def add_all(self, words: Iterable[str]) -> None:
        for word in words:
            self.add(word)

    @abstractmethod
    def contains(self, text: str, start: int = 0, length: Optional[int] = None) -> bool:
        pass

    @abstractmethod
    def prefix(self, text: str) -> List[str]:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def get_max_length(self) -> int:
        pass

    @property
    def frozen(self) -> bool:
        return False

    def freeze(self) -> None:
        """
        切換為唯讀模式

        Raises:
            NotImplementedError: 此詞典實作不支援唯讀模式
        """
        raise NotImplementedError(f"{type(self).__name__} 不支援 freeze()")

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)
