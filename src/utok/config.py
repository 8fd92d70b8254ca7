from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import json

WORD_DELIMITER = "▁"


class ModelType(str, Enum):
    """Closed set of tokenizer model types.

    Only the Unigram model exists today. A new member plus a branch in
    :func:`utok.tokenization.unigram.build_model` is all another model type needs.
    """

    UNIGRAM = "Unigram"


def _parse_vocab(raw: Any) -> Tuple[Tuple[str, float], ...]:
    if not raw:
        raise ValueError("vocab must be a non-empty list of [piece, score] pairs")
    pairs = []
    for idx, entry in enumerate(raw):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"vocab entry {idx} must be a [piece, score] pair, got {entry!r}")
        piece, score = entry
        if not isinstance(piece, str):
            raise ValueError(f"vocab entry {idx}: piece must be a string, got {piece!r}")
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            raise ValueError(f"vocab entry {idx}: score must be a number, got {score!r}")
        pairs.append((piece, float(score)))
    return tuple(pairs)


def _token_content(value: Any) -> Optional[str]:
    # tokenizer_config.json may store special tokens as serialized AddedToken dicts.
    if value is None:
        return None
    if isinstance(value, dict):
        value = value.get("content")
    if not isinstance(value, str):
        raise ValueError(f"special token must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class ModelConfig:
    """The ``model`` section of a ``tokenizer.json`` artifact.

    Everything here is required and validated on construction: a tokenizer
    with a missing vocabulary or unknown id cannot decode correctly, so there
    are no silent defaults.
    """

    type: ModelType
    unk_id: int
    vocab: Tuple[Tuple[str, float], ...]
    fuse_unk: bool = True

    def __post_init__(self) -> None:
        try:
            model_type = ModelType(self.type)
        except ValueError:
            raise ValueError(f"Unsupported tokenizer model type: {self.type!r}") from None
        object.__setattr__(self, "type", model_type)
        object.__setattr__(self, "vocab", _parse_vocab(self.vocab))
        if self.unk_id is None:
            raise ValueError("unk_id must be provided")
        if isinstance(self.unk_id, bool) or not isinstance(self.unk_id, int):
            raise ValueError(f"unk_id must be an integer, got {self.unk_id!r}")
        if not 0 <= self.unk_id < len(self.vocab):
            raise ValueError(f"unk_id {self.unk_id} is out of range for a vocabulary of size {len(self.vocab)}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "unk_id": self.unk_id,
            "vocab": [[piece, score] for piece, score in self.vocab],
            "fuse_unk": self.fuse_unk,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "ModelConfig":
        if "type" not in d:
            raise ValueError("model type must be provided")
        return ModelConfig(
            type=d["type"],
            unk_id=d.get("unk_id"),
            vocab=d.get("vocab"),
            fuse_unk=bool(d.get("fuse_unk", True)),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @staticmethod
    def from_json(s: str) -> "ModelConfig":
        return ModelConfig.from_dict(json.loads(s))


@dataclass(frozen=True)
class TokenizerConfig:
    """Special tokens and decode options (``tokenizer_config.json``).

    ``unk_token`` defaults to the piece stored at the model's ``unk_id``.
    """

    eos_token: str
    unk_token: Optional[str] = None
    pad_token: Optional[str] = None
    bos_token: Optional[str] = None
    model_max_length: int = 512
    clean_up_tokenization_spaces: bool = True
    word_delimiter: str = field(default=WORD_DELIMITER)

    def __post_init__(self) -> None:
        if not self.eos_token:
            raise ValueError("eos_token must be provided")
        if not self.word_delimiter:
            raise ValueError("word_delimiter must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TokenizerConfig":
        return TokenizerConfig(
            eos_token=_token_content(d.get("eos_token")),
            unk_token=_token_content(d.get("unk_token")),
            pad_token=_token_content(d.get("pad_token")),
            bos_token=_token_content(d.get("bos_token")),
            model_max_length=int(d.get("model_max_length") or 512),
            clean_up_tokenization_spaces=bool(d.get("clean_up_tokenization_spaces", True)),
            word_delimiter=d.get("word_delimiter") or WORD_DELIMITER,
        )

    @staticmethod
    def from_json(s: str) -> "TokenizerConfig":
        return TokenizerConfig.from_dict(json.loads(s))
