"""
前綴樹詞典測試

驗證：
1. add / contains 往返
2. (text, start, length) 視窗查詢與邊界
3. prefix 只回傳一字延伸
4. max_length 追蹤、clear、freeze
"""

import pytest

from segkit.dictionary import Dictionary, TrieDictionary


class TestTrieDictionaryBasics:
    """基本插入與查詢"""

    def setup_method(self):
        self.trie = TrieDictionary()
        self.trie.add_all(["中华", "中华人民共和国", "中心思想"])

    def test_is_dictionary(self):
        """測試實作 Dictionary 介面"""
        assert isinstance(self.trie, Dictionary)

    def test_contains_inserted_words(self):
        """插入的詞都查得到"""
        for word in ["中华", "中华人民共和国", "中心思想"]:
            assert self.trie.contains(word)

    def test_prefix_is_not_word(self):
        """前綴不是詞"""
        assert not self.trie.contains("中")
        assert not self.trie.contains("中华人民")
        assert not self.trie.contains("中心")

    def test_not_inserted(self):
        """未插入的詞查不到"""
        assert not self.trie.contains("华人")
        assert not self.trie.contains("思想")
        assert not self.trie.contains("中华人民共和国万岁")

    def test_add_strips_whitespace(self):
        """插入時去除首尾空白"""
        self.trie.add("  杨尚川\t\n")
        assert self.trie.contains("杨尚川")
        assert not self.trie.contains("  杨尚川")

    def test_add_strips_fullwidth_space(self):
        """全形空白與不換行空白也會去除"""
        self.trie.add("　杨尚昆 ")
        assert self.trie.contains("杨尚昆")
        assert self.trie.prefix("　杨尚") == ["杨尚昆"]

    def test_add_ignores_blank(self):
        """空字串與純空白不會插入"""
        before = len(self.trie)
        self.trie.add("")
        self.trie.add("   ")
        assert len(self.trie) == before
        assert self.trie.get_max_length() == 7

    def test_len_counts_distinct_words(self):
        """重複插入不重複計數"""
        self.trie.add("中华")
        assert len(self.trie) == 3

    def test_in_operator(self):
        """支援 in 運算子"""
        assert "中华" in self.trie
        assert "中" not in self.trie
        assert 123 not in self.trie

    def test_constructor_accepts_words(self):
        """建構子可直接帶入詞表"""
        trie = TrieDictionary(["APD", "APP"])
        assert trie.contains("APP")
        assert trie.get_max_length() == 3


class TestTrieDictionaryWindow:
    """視窗查詢"""

    def setup_method(self):
        self.trie = TrieDictionary(["中华", "人民", "共和国"])

    def test_window_hit(self):
        """文本中間的詞"""
        text = "中华人民共和国"
        assert self.trie.contains(text, 0, 2)
        assert self.trie.contains(text, 2, 2)
        assert self.trie.contains(text, 4, 3)

    def test_window_miss(self):
        """跨詞視窗查不到"""
        assert not self.trie.contains("中华人民共和国", 1, 2)

    def test_window_out_of_range(self):
        """超出範圍回傳 False 而不拋例外"""
        text = "中华人民"
        assert not self.trie.contains(text, -1, 2)
        assert not self.trie.contains(text, 0, 0)
        assert not self.trie.contains(text, 0, -3)
        assert not self.trie.contains(text, 3, 2)
        assert not self.trie.contains(text, 10, 2)

    def test_none_and_empty(self):
        """None 與空字串"""
        assert not self.trie.contains(None)
        assert not self.trie.contains("")

    def test_default_length_to_end(self):
        """只給 start 時查到文本結尾"""
        assert self.trie.contains("我爱共和国", 2)


class TestTriePrefix:
    """prefix 一字延伸"""

    def setup_method(self):
        self.trie = TrieDictionary()
        self.trie.add_all([
            "APDPlat", "APP", "APD",
            "杨尚川", "杨尚昆", "杨尚喜", "杨家将",
            "中华人民共和国", "中华人民打太极", "中华", "中心思想",
        ])

    def test_single_extension(self):
        """中华 只有一個延伸"""
        assert self.trie.prefix("中华") == ["中华人"]

    def test_multiple_extensions_sorted(self):
        """多個延伸依字元排序"""
        result = self.trie.prefix("中")
        assert result == sorted(["中华", "中心"])

        result = self.trie.prefix("杨尚")
        assert result == sorted(["杨尚川", "杨尚昆", "杨尚喜"])

    def test_ascii_extensions(self):
        """英文前綴"""
        assert self.trie.prefix("AP") == ["APD", "APP"]
        assert self.trie.prefix("APD") == ["APDP"]

    def test_prefix_strips_whitespace(self):
        """前綴去除首尾空白"""
        assert self.trie.prefix(" 中华 ") == ["中华人"]

    def test_blank_prefix(self):
        """空前綴回傳空列表"""
        assert self.trie.prefix("") == []
        assert self.trie.prefix("   ") == []
        assert self.trie.prefix(None) == []

    def test_missing_prefix(self):
        """不存在的前綴回傳空列表"""
        assert self.trie.prefix("北京") == []
        assert self.trie.prefix("中国") == []

    def test_leaf_has_no_extension(self):
        """葉節點沒有延伸"""
        assert self.trie.prefix("中心思想") == []

    def test_results_are_extensions_of_input(self):
        """每個結果都是輸入再多一個字，且本身是樹上的路徑"""
        for p in ["中", "中华人民", "杨", "A"]:
            for item in self.trie.prefix(p):
                assert item.startswith(p)
                assert len(item) == len(p) + 1
                assert self.trie.contains(item) or self.trie.prefix(item)


class TestTrieMaxLengthAndLifecycle:
    """max_length、clear、freeze"""

    def test_max_length_tracking(self):
        """插入長度 [3, 7, 2, 5] 後最大長度為 7"""
        trie = TrieDictionary()
        assert trie.get_max_length() == 0
        for word in ["abc", "abcdefg", "ab", "abcde"]:
            trie.add(word)
        assert trie.get_max_length() == 7

    def test_max_length_ignores_surrounding_whitespace(self):
        """最大長度以去除空白後計算"""
        trie = TrieDictionary()
        trie.add("   中华   ")
        assert trie.get_max_length() == 2

    def test_clear_resets_tree_and_max_length(self):
        """clear 清空樹與最大長度"""
        trie = TrieDictionary(["中华人民共和国", "中华"])
        trie.clear()
        assert not trie.contains("中华")
        assert trie.prefix("中") == []
        assert trie.get_max_length() == 0
        assert len(trie) == 0

        trie.add("人民")
        assert trie.contains("人民")
        assert trie.get_max_length() == 2

    def test_freeze_blocks_mutation(self):
        """freeze 後不可再修改"""
        trie = TrieDictionary(["中华"])
        trie.freeze()
        assert trie.frozen

        with pytest.raises(RuntimeError):
            trie.add("人民")
        with pytest.raises(RuntimeError):
            trie.add_all(["人民"])
        with pytest.raises(RuntimeError):
            trie.clear()

        assert trie.contains("中华")
        assert not trie.contains("人民")

    def test_children_sorted_regardless_of_insert_order(self):
        """子節點不論插入順序都保持排序"""
        trie = TrieDictionary()
        for word in ["az", "ac", "ay", "ab", "aa"]:
            trie.add(word)
        assert trie.prefix("a") == ["aa", "ab", "ac", "ay", "az"]
