"""utok: Unigram (SentencePiece-style) sub-word tokenization."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("utok")
except PackageNotFoundError:  # pragma: no cover - runtime fallback
    __version__ = "0.0.0"

from utok.config import ModelConfig, ModelType, TokenizerConfig
from utok.tokenization.tokenizer import UnigramTokenizer
from utok.tokenization.unigram import UnigramModel, build_model

__all__ = [
    "__version__",
    "ModelConfig",
    "ModelType",
    "TokenizerConfig",
    "UnigramModel",
    "UnigramTokenizer",
    "build_model",
]
