from utok.tokenization.trie import CharTrie


def test_common_prefix_search_shortest_first():
    trie = CharTrie(["abc", "a", "b", "ab"])
    assert trie.common_prefix_search("abcd") == ["a", "ab", "abc"]
    assert trie.common_prefix_search("b") == ["b"]


def test_common_prefix_search_no_match():
    trie = CharTrie(["ab"])
    assert trie.common_prefix_search("xyz") == []
    assert trie.common_prefix_search("") == []
    # "a" is only an inner node, not a stored piece.
    assert trie.common_prefix_search("a") == []


def test_membership_and_size():
    trie = CharTrie()
    trie.extend(["▁hi", "▁hi", "▁there"])
    assert len(trie) == 2
    assert "▁hi" in trie
    assert "▁h" not in trie
    assert "▁hit" not in trie
    assert 3 not in trie
