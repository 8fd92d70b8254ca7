"""Tokenization runtime package.

The Transformers adapter lives in :mod:`utok.tokenization.hf` and is imported
on demand.
"""

from utok.tokenization.codec import TokenCodec
from utok.tokenization.fusion import fuse_unk
from utok.tokenization.io import load_tokenizer, save_tokenizer
from utok.tokenization.lattice import LatticeConsistencyError, LatticeNode, TokenLattice
from utok.tokenization.tokenizer import UnigramTokenizer
from utok.tokenization.trie import CharTrie
from utok.tokenization.unigram import UnigramModel, build_model
from utok.tokenization.vocab import Piece, VocabTable

__all__ = [
    "CharTrie",
    "LatticeConsistencyError",
    "LatticeNode",
    "Piece",
    "TokenCodec",
    "TokenLattice",
    "UnigramModel",
    "UnigramTokenizer",
    "VocabTable",
    "build_model",
    "fuse_unk",
    "load_tokenizer",
    "save_tokenizer",
]
