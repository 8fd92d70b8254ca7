"""Serialization for tokenizer artifacts.

An artifact directory follows the Hugging Face layout:

- ``tokenizer.json``: the backend tokenizer; its ``model`` section carries the
  Unigram ``type``, ``unk_id`` and ``[piece, score]`` vocabulary.
- ``tokenizer_config.json``: special tokens and decode options.
- ``manifest.json``: optional, SHA-256 digests of the files above.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from tokenizers import Tokenizer, models

from utok.config import ModelConfig, TokenizerConfig
from utok.utils.hashing import sha256_file
from utok.utils.logging import get_logger

logger = get_logger(__name__)

TOKENIZER_FILE = "tokenizer.json"
CONFIG_FILE = "tokenizer_config.json"
MANIFEST_FILE = "manifest.json"


def _write_json(path: Path, payload: dict[str, object]) -> None:
    text = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    path.write_text(text + "\n", encoding="utf-8")


def _read_json(path: Path) -> dict[str, object]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return payload


def build_backend_tokenizer(model_config: ModelConfig) -> Tokenizer:
    """Build the equivalent ``tokenizers`` object used for the ``tokenizer.json`` file."""
    vocab = [(piece, score) for piece, score in model_config.vocab]
    return Tokenizer(models.Unigram(vocab, unk_id=model_config.unk_id))


def save_tokenizer(
    output_dir: Path,
    model_config: ModelConfig,
    tokenizer_config: TokenizerConfig,
    metadata: dict[str, object] | None = None,
) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    tokenizer_path = output_dir / TOKENIZER_FILE
    config_path = output_dir / CONFIG_FILE
    manifest_path = output_dir / MANIFEST_FILE

    build_backend_tokenizer(model_config).save(str(tokenizer_path))
    config = tokenizer_config.to_dict()
    config["tokenizer_class"] = "UnigramTokenizer"
    config["fuse_unk"] = model_config.fuse_unk
    _write_json(config_path, config)

    manifest = {
        "format_version": 1,
        "created_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "vocab_size": len(model_config.vocab),
        "metadata": metadata or {},
        "files": {
            TOKENIZER_FILE: sha256_file(tokenizer_path),
            CONFIG_FILE: sha256_file(config_path),
        },
    }
    _write_json(manifest_path, manifest)
    logger.info("Saved tokenizer artifact (%d pieces) to %s", len(model_config.vocab), output_dir)
    return [tokenizer_path, config_path, manifest_path]


def load_tokenizer(
    artifact_dir: Path,
) -> tuple[ModelConfig, TokenizerConfig, dict[str, object]]:
    tokenizer_path = artifact_dir / TOKENIZER_FILE
    config_path = artifact_dir / CONFIG_FILE
    manifest_path = artifact_dir / MANIFEST_FILE

    if not tokenizer_path.exists():
        raise FileNotFoundError(f"Cannot find {TOKENIZER_FILE} at {artifact_dir}")
    if not config_path.exists():
        raise FileNotFoundError(f"Cannot find {CONFIG_FILE} at {artifact_dir}")

    payload = _read_json(tokenizer_path)
    model_payload = payload.get("model")
    if not isinstance(model_payload, dict):
        raise ValueError(f"{tokenizer_path} has no 'model' section")
    config = _read_json(config_path)
    model_payload = dict(model_payload)
    model_payload.setdefault("fuse_unk", config.get("fuse_unk", True))

    model_config = ModelConfig.from_dict(model_payload)
    tokenizer_config = TokenizerConfig.from_dict(config)
    manifest = _read_json(manifest_path) if manifest_path.exists() else {}
    logger.debug("Loaded tokenizer artifact from %s (%d pieces)", artifact_dir, len(model_config.vocab))
    return model_config, tokenizer_config, manifest
