"""Character trie over vocabulary pieces."""

from __future__ import annotations

from typing import Dict, Iterable, List


class TrieNode:
    __slots__ = ("children", "is_leaf")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_leaf = False


class CharTrie:
    """Prefix tree used to enumerate every piece that starts a given suffix.

    Populated once at model construction; lookups never mutate it.
    """

    def __init__(self, pieces: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        self.extend(pieces)

    def extend(self, pieces: Iterable[str]) -> None:
        for piece in pieces:
            self.push(piece)

    def push(self, piece: str) -> None:
        node = self.root
        for ch in piece:
            node = node.children.setdefault(ch, TrieNode())
        if not node.is_leaf:
            node.is_leaf = True
            self._size += 1

    def common_prefix_search(self, text: str) -> List[str]:
        """Return every stored piece that is a prefix of ``text``, shortest first."""
        node = self.root
        prefixes: List[str] = []
        for end, ch in enumerate(text, start=1):
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            if node.is_leaf:
                prefixes.append(text[:end])
        return prefixes

    def __contains__(self, piece: object) -> bool:
        if not isinstance(piece, str):
            return False
        node = self.root
        for ch in piece:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_leaf

    def __len__(self) -> int:
        return self._size
