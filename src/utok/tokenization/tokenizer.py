"""High-level tokenizer interface."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from utok.config import ModelConfig, TokenizerConfig
from utok.tokenization.codec import TokenCodec
from utok.tokenization.fusion import fuse_unk
from utok.tokenization.io import load_tokenizer, save_tokenizer
from utok.tokenization.unigram import UnigramModel, build_model


class UnigramTokenizer:
    """Text <-> ids using a Unigram model, with a Transformers-style interface.

    Input text is used as given: callers are expected to have normalized it and
    replaced spaces with the word delimiter (``"▁"``) already.
    """

    model_input_names = ["input_ids", "attention_mask"]

    def __init__(self, model_config: ModelConfig, config: TokenizerConfig) -> None:
        self._model_config = model_config
        self._config = config
        self._model: UnigramModel = build_model(model_config, eos_token=config.eos_token, bos_token=config.bos_token)
        self._fuse_unk = self._model.fuse_unk and model_config.fuse_unk
        unk_token = config.unk_token or self._model.unk_token
        self._codec = TokenCodec(
            self._model.vocab,
            self._model.unk_id,
            skip_tokens=(unk_token, config.pad_token, config.eos_token),
            word_delimiter=config.word_delimiter,
            clean_up_tokenization_spaces=config.clean_up_tokenization_spaces,
        )

    @classmethod
    def from_dict(cls, model: dict[str, Any], config: dict[str, Any]) -> "UnigramTokenizer":
        return cls(ModelConfig.from_dict(model), TokenizerConfig.from_dict(config))

    @property
    def model(self) -> UnigramModel:
        return self._model

    @property
    def model_config(self) -> ModelConfig:
        return self._model_config

    @property
    def config(self) -> TokenizerConfig:
        return self._config

    @property
    def vocab_size(self) -> int:
        return len(self._model.vocab)

    def __len__(self) -> int:
        return self.vocab_size

    def get_vocab(self) -> dict[str, int]:
        return self._model.vocab.token_to_id()

    def tokenize(self, text: str) -> list[str]:
        tokens = self._model.encode([text])
        if self._fuse_unk:
            tokens = fuse_unk(tokens, self._codec.token_to_id, self._model.unk_id)
        return tokens

    def encode(self, text: str, add_special_tokens: bool = False) -> list[int]:
        ids = self._codec.tokens_to_ids(self.tokenize(text))
        if add_special_tokens and self.eos_token_id is not None:
            ids.append(self.eos_token_id)
        return ids

    def encode_batch(self, texts: Sequence[str], add_special_tokens: bool = False) -> list[list[int]]:
        return [self.encode(text, add_special_tokens=add_special_tokens) for text in texts]

    def decode(self, ids: Sequence[int]) -> str:
        return self._codec.decode(ids)

    def decode_batch(self, batch: Sequence[Sequence[int]]) -> list[str]:
        return [self.decode(ids) for ids in batch]

    def token_to_id(self, token: str) -> int:
        return self._codec.token_to_id(token)

    def id_to_token(self, token_id: int) -> str:
        return self._codec.id_to_token(token_id)

    def convert_tokens_to_ids(self, tokens: str | Sequence[str]) -> int | list[int]:
        if isinstance(tokens, str):
            return self._codec.token_to_id(tokens)
        return self._codec.tokens_to_ids(tokens)

    def convert_ids_to_tokens(self, ids: int | Sequence[int]) -> str | list[str]:
        if isinstance(ids, int):
            return self._codec.id_to_token(ids)
        return self._codec.ids_to_tokens(ids)

    def save_pretrained(self, output_dir: str | Path, metadata: dict[str, object] | None = None) -> list[Path]:
        return save_tokenizer(Path(output_dir), self._model_config, self._config, metadata=metadata)

    @classmethod
    def from_pretrained(cls, artifact_dir: str | Path, **overrides: Any) -> "UnigramTokenizer":
        """Load an artifact directory; ``overrides`` replace tokenizer_config.json values."""
        model_config, config, _manifest = load_tokenizer(Path(artifact_dir))
        if overrides:
            merged = config.to_dict()
            merged.update({key: value for key, value in overrides.items() if value is not None})
            config = TokenizerConfig.from_dict(merged)
        return cls(model_config, config)

    @property
    def unk_token(self) -> str:
        return self._codec.unk_token

    @property
    def unk_token_id(self) -> int:
        return self._model.unk_id

    @property
    def eos_token(self) -> str:
        return self._config.eos_token

    @property
    def eos_token_id(self) -> int | None:
        return self._model.eos_token_id

    @property
    def pad_token(self) -> str | None:
        return self._config.pad_token

    @property
    def pad_token_id(self) -> int | None:
        if self._config.pad_token is None:
            return None
        return self._model.vocab.id_of(self._config.pad_token)

    @property
    def bos_token(self) -> str | None:
        return self._config.bos_token

    @property
    def model_max_length(self) -> int:
        return self._config.model_max_length
