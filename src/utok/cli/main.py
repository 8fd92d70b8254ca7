"""utok command-line entrypoint."""

from __future__ import annotations

import argparse

from utok.cli import bench, decode, encode


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="utok",
        description="Unigram sub-word tokenization.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode.add_parser(subparsers)
    decode.add_parser(subparsers)
    bench.add_parser(subparsers)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
