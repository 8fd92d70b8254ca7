"""Hugging Face Transformers tokenizer adapter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from transformers import PreTrainedTokenizer

from utok.config import ModelConfig, TokenizerConfig
from utok.tokenization.io import save_tokenizer
from utok.tokenization.tokenizer import UnigramTokenizer

_HF_SPECIAL_KEYS = ("unk_token", "eos_token", "pad_token", "bos_token")


class UnigramHFTokenizer(PreTrainedTokenizer):
    """Transformers-compatible wrapper around UnigramTokenizer."""

    vocab_files_names = {"tokenizer_file": "tokenizer.json"}
    model_input_names = ["input_ids", "attention_mask"]

    def __init__(self, model_config: ModelConfig, config: TokenizerConfig, **kwargs: Any) -> None:
        self._utok = UnigramTokenizer(model_config, config)
        hf_token_kwargs = {
            "unk_token": self._utok.unk_token,
            "eos_token": config.eos_token,
        }
        if config.pad_token is not None:
            hf_token_kwargs["pad_token"] = config.pad_token
        if config.bos_token is not None:
            hf_token_kwargs["bos_token"] = config.bos_token
        for key in _HF_SPECIAL_KEYS:
            kwargs.pop(key, None)
        kwargs.setdefault("model_max_length", config.model_max_length)
        kwargs.setdefault("clean_up_tokenization_spaces", False)
        super().__init__(**hf_token_kwargs, **kwargs)

    @property
    def utok(self) -> UnigramTokenizer:
        return self._utok

    @property
    def vocab_size(self) -> int:  # type: ignore[override]
        return self._utok.vocab_size

    def get_vocab(self) -> dict[str, int]:
        return self._utok.get_vocab()

    def _tokenize(self, text: str, **kwargs: Any) -> list[str]:
        return self._utok.tokenize(text)

    def _convert_token_to_id(self, token: str) -> int:
        return self._utok.token_to_id(token)

    def _convert_id_to_token(self, index: int) -> str:
        return self._utok.id_to_token(index)

    def convert_tokens_to_string(self, tokens: list[str]) -> str:
        text = "".join(tokens)
        return text.replace(self._utok.config.word_delimiter, " ").strip()

    def build_inputs_with_special_tokens(
        self,
        token_ids_0: list[int],
        token_ids_1: list[int] | None = None,
    ) -> list[int]:
        eos = [] if self._utok.eos_token_id is None else [self._utok.eos_token_id]
        if token_ids_1 is None:
            return list(token_ids_0) + eos
        return list(token_ids_0) + eos + list(token_ids_1) + eos

    def save_vocabulary(self, save_directory: str, filename_prefix: str | None = None) -> tuple[str, ...]:
        output_dir = Path(save_directory)
        paths = save_tokenizer(output_dir, self._utok.model_config, self._utok.config)
        return tuple(str(path) for path in paths)

    @classmethod
    def from_pretrained(cls, pretrained_model_name_or_path: str | Path, *args: Any, **kwargs: Any) -> "UnigramHFTokenizer":
        inner = UnigramTokenizer.from_pretrained(pretrained_model_name_or_path)
        return cls(inner.model_config, inner.config, **kwargs)
