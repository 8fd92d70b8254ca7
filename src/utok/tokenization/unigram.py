"""Unigram (SentencePiece-style) segmentation model."""

from __future__ import annotations

from typing import List, Optional, Sequence

from utok.config import ModelConfig, ModelType
from utok.tokenization.lattice import TokenLattice
from utok.tokenization.trie import CharTrie
from utok.tokenization.vocab import VocabTable
from utok.utils.logging import get_logger

logger = get_logger(__name__)

# Unknown spans score this far below the worst real piece.
UNK_PENALTY = 10.0


class UnigramModel:
    """Maximum-score segmentation over a scored vocabulary.

    The vocabulary table, score array and trie are built here and never change
    afterwards, so one model can serve any number of callers. Every call to
    :meth:`tokenize` works on its own lattice.
    """

    model_type = ModelType.UNIGRAM
    fuse_unk = True

    def __init__(
        self,
        vocab: VocabTable,
        unk_id: int,
        bos_token: Optional[str] = None,
        eos_token: Optional[str] = None,
    ) -> None:
        if isinstance(unk_id, bool) or not isinstance(unk_id, int) or not 0 <= unk_id < len(vocab):
            raise ValueError(f"Invalid unk_id {unk_id!r} for a vocabulary of size {len(vocab)}")
        self.vocab = vocab
        self.unk_id = unk_id
        self.unk_token = vocab[unk_id].piece

        self.scores: List[float] = vocab.scores
        self.min_score = min(self.scores)
        self.unk_score = self.min_score - UNK_PENALTY
        self.scores[unk_id] = self.unk_score

        self.bos_token = bos_token
        self.bos_token_id = vocab.id_of(bos_token) if bos_token is not None else None
        self.eos_token = eos_token
        self.eos_token_id = vocab.id_of(eos_token) if eos_token is not None else None

        self.trie = CharTrie(vocab.pieces)
        logger.debug(
            "Built unigram model: %d pieces, min_score=%.4f, unk_score=%.4f",
            len(vocab),
            self.min_score,
            self.unk_score,
        )

    def populate_nodes(self, lattice: TokenLattice) -> None:
        text = lattice.text
        for begin_pos in range(lattice.length):
            has_single_char = False
            for piece in self.trie.common_prefix_search(text[begin_pos:]):
                token_id = self.vocab.id_of(piece)
                length = len(piece)
                lattice.insert(begin_pos, length, self.scores[token_id], token_id)
                if length == 1:
                    has_single_char = True
            if not has_single_char:
                lattice.insert(begin_pos, 1, self.unk_score, self.unk_id)

    def new_lattice(self, text: str) -> TokenLattice:
        return TokenLattice(
            text,
            self.bos_token_id if self.bos_token_id is not None else -1,
            self.eos_token_id if self.eos_token_id is not None else -1,
        )

    def tokenize(self, text: str) -> List[str]:
        lattice = self.new_lattice(text)
        self.populate_nodes(lattice)
        return lattice.tokens()

    def encode(self, texts: Sequence[str]) -> List[str]:
        """Tokenize each string on its own and concatenate the results."""
        tokens: List[str] = []
        for text in texts:
            tokens.extend(self.tokenize(text))
        return tokens


def build_model(
    config: ModelConfig,
    eos_token: Optional[str] = None,
    bos_token: Optional[str] = None,
) -> UnigramModel:
    """Instantiate the model named by ``config.type``."""
    if config.type is ModelType.UNIGRAM:
        vocab = VocabTable.from_pairs(config.vocab)
        return UnigramModel(vocab, config.unk_id, bos_token=bos_token, eos_token=eos_token)
    raise ValueError(f"Unsupported tokenizer model type: {config.type!r}")
