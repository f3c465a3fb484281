from dsakit.trie import Trie


def test_source_example():
    trie = Trie()
    trie.insert("apple")
    trie.insert("app")
    assert trie.search("apple") is True
    assert trie.search("app") is True
    trie.remove("apple")
    assert trie.search("apple") is False
    assert trie.search("app") is True


def test_prefix_is_not_a_word():
    trie = Trie(["apple"])
    assert trie.search("app") is False
    assert trie.search("apples") is False


def test_remove_prefix_keeps_longer_word():
    trie = Trie(["apple", "app"])
    trie.remove("app")
    assert trie.search("app") is False
    assert trie.search("apple") is True


def test_remove_absent_word_is_ignored():
    trie = Trie(["cat"])
    trie.remove("dog")
    trie.remove("ca")
    trie.remove("cats")
    assert trie.search("cat") is True


def test_remove_then_reinsert():
    trie = Trie(["tree"])
    trie.remove("tree")
    assert trie.search("tree") is False
    trie.insert("tree")
    assert trie.search("tree") is True


def test_remove_leaves_sibling_branch():
    trie = Trie(["bat", "bad"])
    trie.remove("bat")
    assert trie.search("bad") is True
    assert trie.search("bat") is False


def test_contains():
    trie = Trie(["hello"])
    assert "hello" in trie
    assert "help" not in trie
    assert 5 not in trie


def test_empty_word():
    trie = Trie()
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True
    trie.remove("")
    assert trie.search("") is False