import pytest

from dstructs.trie import Trie


def test_insert_and_search():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple")
    assert "apple" in trie
    assert not trie.search("app")
    assert not trie.search("apples")


def test_prefix_and_longer_word():
    trie = Trie()
    trie.insert("car")
    trie.insert("cart")
    trie.remove("car")
    assert not trie.search("car")
    assert trie.search("cart")


def test_remove_longer_keeps_prefix():
    trie = Trie()
    trie.insert("car")
    trie.insert("cart")
    trie.remove("cart")
    assert trie.search("car")
    assert not trie.search("cart")


def test_remove_all_empties_trie():
    trie = Trie()
    words = ["bat", "bath", "ball"]
    for word in words:
        trie.insert(word)
    assert not trie.is_empty()
    for word in words:
        trie.remove(word)
    assert trie.is_empty()
    assert not any(word in trie for word in words)


def test_remove_missing_word_keeps_others():
    trie = Trie()
    trie.insert("dog")
    trie.remove("cat")
    trie.remove("do")
    assert trie.search("dog")


def test_reinsert_after_remove():
    trie = Trie()
    trie.insert("x")
    trie.remove("x")
    trie.insert("x")
    assert trie.search("x")


def test_invalid_characters():
    trie = Trie()
    with pytest.raises(ValueError):
        trie.insert("Hello")
    with pytest.raises(ValueError):
        trie.search("a1")
    assert "A" not in trie


def test_empty_word():
    trie = Trie()
    assert not trie.search("")
    trie.insert("")
    assert trie.search("")
    trie.remove("")
    assert trie.is_empty()