"""Dense vocabulary table for Unigram models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Piece:
    piece: str
    score: float


class VocabTable:
    """Ordered pieces with contiguous ids ``0..N-1``.

    When a piece string occurs twice, piece->id lookup resolves to the later id;
    both ids stay valid for id->piece lookup.
    """

    def __init__(self, pieces: Sequence[Piece]) -> None:
        if not pieces:
            raise ValueError("Vocabulary is empty.")
        self._pieces = tuple(pieces)
        self._piece_to_id = {entry.piece: idx for idx, entry in enumerate(self._pieces)}

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[object]]) -> "VocabTable":
        return cls([Piece(str(piece), float(score)) for piece, score in pairs])

    def __len__(self) -> int:
        return len(self._pieces)

    def __getitem__(self, idx: int) -> Piece:
        return self._pieces[idx]

    @property
    def pieces(self) -> list[str]:
        return [entry.piece for entry in self._pieces]

    @property
    def scores(self) -> list[float]:
        return [entry.score for entry in self._pieces]

    def id_of(self, piece: str) -> Optional[int]:
        return self._piece_to_id.get(piece)

    def piece_of(self, idx: int) -> Optional[str]:
        if 0 <= idx < len(self._pieces):
            return self._pieces[idx].piece
        return None

    def token_to_id(self) -> dict[str, int]:
        return dict(self._piece_to_id)
