"""Arguments and helpers shared by the subcommands."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import yaml

from utok.tokenization.tokenizer import UnigramTokenizer
from utok.utils.logging import configure_logging


def add_artifact_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--artifact", required=True, help="Tokenizer artifact directory.")
    p.add_argument(
        "--config",
        default=None,
        help="Optional YAML mapping overriding tokenizer_config.json values (e.g. eos_token).",
    )


def add_logging_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--log-level", default=None, help="Logging level (e.g., INFO, DEBUG). Also respects UTOK_LOG_LEVEL env var.")


def setup_logging_from_args(args: argparse.Namespace) -> None:
    configure_logging(args.log_level)


def _load_config(path: str | None) -> dict[str, Any]:
    if not path:
        return {}
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("Tokenizer config must be a mapping.")
    if "tokenizer" in payload and isinstance(payload["tokenizer"], dict):
        return payload["tokenizer"]
    return payload


def load_tokenizer_from_args(args: argparse.Namespace) -> UnigramTokenizer:
    overrides = _load_config(args.config)
    return UnigramTokenizer.from_pretrained(args.artifact, **overrides)


def read_lines(path: str) -> list[str]:
    return Path(path).read_text(encoding="utf-8").splitlines()
