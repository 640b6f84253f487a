"""
詞典模組

主要類別:
- Dictionary: 詞典抽象基類
- TrieDictionary: 前綴樹詞典（二分搜尋子節點）

載入工具:
- load_words: 讀取詞表
- load_dictionary: 建立並載入詞典
"""

from .interface import Dictionary
from .loader import load_dictionary, load_words
from .trie import TrieDictionary

__all__ = [
    "Dictionary",
    "TrieDictionary",
    "load_dictionary",
    "load_words",
]
