"""Encode text with a tokenizer artifact."""

from __future__ import annotations

import argparse
import json

from tqdm import tqdm

from utok.cli.common import (
    add_artifact_args,
    add_logging_args,
    load_tokenizer_from_args,
    read_lines,
    setup_logging_from_args,
)
from utok.utils.logging import get_logger

logger = get_logger(__name__)


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("encode", help="Encode text into ids or tokens.")
    add_artifact_args(parser)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--text", help="Text to encode.")
    source.add_argument("--input", help="File with one text per line.")
    parser.add_argument("--tokens", action="store_true", help="Print token strings instead of ids.")
    parser.add_argument("--add-special-tokens", action="store_true", help="Append the EOS id.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar.")
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    tokenizer = load_tokenizer_from_args(args)
    texts = [args.text] if args.text is not None else read_lines(args.input)
    logger.info("Encoding %d text(s) with a %d-piece vocabulary", len(texts), tokenizer.vocab_size)

    iterator = tqdm(texts, desc="Encoding", unit="lines") if args.progress else texts
    for text in iterator:
        if args.tokens:
            output = tokenizer.tokenize(text)
        else:
            output = tokenizer.encode(text, add_special_tokens=args.add_special_tokens)
        print(json.dumps(output, ensure_ascii=False))
    return 0
