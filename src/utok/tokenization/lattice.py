"""Segmentation lattice and Viterbi decoding."""

from __future__ import annotations

from typing import List, Optional

BOS_NODE = 0
EOS_NODE = 1


class LatticeConsistencyError(RuntimeError):
    """A lattice position has candidate tokens but nothing ends there.

    Model population always inserts a single-character node at every position,
    so this signals a bug rather than bad input.
    """


class LatticeNode:
    __slots__ = ("token_id", "node_id", "pos", "length", "score", "prev", "backtrace_score")

    def __init__(self, token_id: int, node_id: int, pos: int, length: int, score: float) -> None:
        self.token_id = token_id
        self.node_id = node_id
        self.pos = pos
        self.length = length
        self.score = score
        # Arena index of the best predecessor, filled in by Viterbi.
        self.prev: Optional[int] = None
        self.backtrace_score = 0.0

    def __repr__(self) -> str:
        return (
            f"LatticeNode(token_id={self.token_id}, pos={self.pos}, length={self.length}, "
            f"score={self.score}, backtrace_score={self.backtrace_score})"
        )


class TokenLattice:
    """Candidate token spans over one input string.

    Positions count Unicode code points. Nodes live in the ``nodes`` arena;
    ``begin_nodes[p]`` and ``end_nodes[p]`` hold arena indices of nodes starting
    and ending at position ``p``. Node 0 is the BOS sentinel at position 0 and
    node 1 the EOS sentinel at position ``len(text)``, both of length 0.
    """

    def __init__(self, text: str, bos_token_id: int = -1, eos_token_id: int = -1) -> None:
        self.text = text
        self.length = len(text)
        self.nodes: List[LatticeNode] = []
        self.begin_nodes: List[List[int]] = [[] for _ in range(self.length + 1)]
        self.end_nodes: List[List[int]] = [[] for _ in range(self.length + 1)]

        self.nodes.append(LatticeNode(bos_token_id, BOS_NODE, 0, 0, 0.0))
        self.nodes.append(LatticeNode(eos_token_id, EOS_NODE, self.length, 0, 0.0))
        self.end_nodes[0].append(BOS_NODE)
        self.begin_nodes[self.length].append(EOS_NODE)

    def insert(self, pos: int, length: int, score: float, token_id: int) -> None:
        if length < 1 or pos < 0 or pos + length > self.length:
            raise ValueError(f"Span [{pos}, {pos + length}) is outside a lattice of length {self.length}")
        node_id = len(self.nodes)
        self.nodes.append(LatticeNode(token_id, node_id, pos, length, score))
        self.begin_nodes[pos].append(node_id)
        self.end_nodes[pos + length].append(node_id)

    def viterbi(self) -> List[LatticeNode]:
        """Return the best-scoring path, sentinels excluded, left to right."""
        nodes = self.nodes
        for pos in range(self.length + 1):
            starting = self.begin_nodes[pos]
            if not starting:
                continue
            ending = self.end_nodes[pos]
            if not ending:
                raise LatticeConsistencyError(
                    f"No lattice node ends at position {pos} of {self.text!r}"
                )
            for rnode_id in starting:
                rnode = nodes[rnode_id]
                best_id: Optional[int] = None
                best_score = 0.0
                for lnode_id in ending:
                    score = nodes[lnode_id].backtrace_score + rnode.score
                    # Strict comparison: ties keep the first candidate scanned.
                    if best_id is None or score > best_score:
                        best_id = lnode_id
                        best_score = score
                rnode.prev = best_id
                rnode.backtrace_score = best_score

        path: List[LatticeNode] = []
        node_id = nodes[EOS_NODE].prev
        while node_id is not None and node_id != BOS_NODE:
            node = nodes[node_id]
            path.append(node)
            node_id = node.prev
        path.reverse()
        return path

    def piece(self, node: LatticeNode) -> str:
        return self.text[node.pos : node.pos + node.length]

    def tokens(self) -> List[str]:
        return [self.piece(node) for node in self.viterbi()]

    def token_ids(self) -> List[int]:
        return [node.token_id for node in self.viterbi()]
