"""Decode id sequences back to text."""

from __future__ import annotations

import argparse
import json

from utok.cli.common import (
    add_artifact_args,
    add_logging_args,
    load_tokenizer_from_args,
    read_lines,
    setup_logging_from_args,
)


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("decode", help="Decode ids into text.")
    add_artifact_args(parser)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--ids", help="Comma-separated ids, e.g. 5,17,3.")
    source.add_argument("--input", help="File with one JSON list of ids per line.")
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def _parse_ids(raw: str) -> list[int]:
    return [int(part) for part in raw.split(",") if part.strip()]


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    tokenizer = load_tokenizer_from_args(args)
    if args.ids is not None:
        batch = [_parse_ids(args.ids)]
    else:
        batch = [json.loads(line) for line in read_lines(args.input) if line.strip()]
    for text in tokenizer.decode_batch(batch):
        print(text)
    return 0
