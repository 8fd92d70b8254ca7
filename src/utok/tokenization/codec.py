"""Token/id translation and string reconstruction."""

from __future__ import annotations

from typing import Iterable, List, Optional

from utok.config import WORD_DELIMITER
from utok.tokenization.vocab import VocabTable


class TokenCodec:
    """Maps tokens to ids and back; lookup misses resolve to the unknown entry."""

    def __init__(
        self,
        vocab: VocabTable,
        unk_id: int,
        skip_tokens: Iterable[Optional[str]] = (),
        word_delimiter: str = WORD_DELIMITER,
        clean_up_tokenization_spaces: bool = True,
    ) -> None:
        self.vocab = vocab
        self.unk_id = unk_id
        self.unk_token = vocab[unk_id].piece
        self.skip_tokens = frozenset(token for token in skip_tokens if token is not None)
        self.word_delimiter = word_delimiter
        self.clean_up_tokenization_spaces = clean_up_tokenization_spaces

    def token_to_id(self, token: str) -> int:
        token_id = self.vocab.id_of(token)
        return self.unk_id if token_id is None else token_id

    def id_to_token(self, token_id: int) -> str:
        piece = self.vocab.piece_of(token_id)
        return self.unk_token if piece is None else piece

    def tokens_to_ids(self, tokens: Iterable[str]) -> List[int]:
        return [self.token_to_id(token) for token in tokens]

    def ids_to_tokens(self, ids: Iterable[int]) -> List[str]:
        return [self.id_to_token(token_id) for token_id in ids]

    def decode(self, ids: Iterable[int]) -> str:
        pieces = [piece for piece in self.ids_to_tokens(ids) if piece not in self.skip_tokens]
        text = "".join(pieces)
        if self.clean_up_tokenization_spaces:
            text = text.replace(self.word_delimiter, " ").strip()
        return text
