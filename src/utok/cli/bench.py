"""Tokenizer benchmarking command."""

from __future__ import annotations

import argparse
import time

import numpy as np

from utok.cli.common import (
    add_artifact_args,
    add_logging_args,
    load_tokenizer_from_args,
    read_lines,
    setup_logging_from_args,
)


def add_parser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    parser = subparsers.add_parser("bench", help="Benchmark tokenizer throughput.")
    add_artifact_args(parser)
    parser.add_argument("--input", required=True, help="Input text file.")
    parser.add_argument("--repeat", type=int, default=10, help="Repeat count.")
    parser.add_argument("--warmup", type=int, default=2, help="Warmup runs.")
    add_logging_args(parser)
    parser.set_defaults(func=run)
    return parser


def run(args: argparse.Namespace) -> int:
    setup_logging_from_args(args)
    tokenizer = load_tokenizer_from_args(args)

    lines = read_lines(args.input)
    if not lines:
        raise ValueError("Input is empty.")
    if args.repeat < 1:
        raise ValueError("--repeat must be at least 1.")

    for _ in range(args.warmup):
        for line in lines:
            tokenizer.encode(line)

    latencies = []
    total_tokens = 0
    start = time.perf_counter()
    for _ in range(args.repeat):
        for line in lines:
            t0 = time.perf_counter()
            total_tokens += len(tokenizer.encode(line))
            latencies.append(time.perf_counter() - t0)
    elapsed = time.perf_counter() - start

    tokens_per_sec = total_tokens / elapsed if elapsed else 0.0
    p50, p95, p99 = np.percentile(np.asarray(latencies) * 1e6, [50, 95, 99])
    print(f"tokens_per_sec={tokens_per_sec:.2f}")
    print(f"latency_us p50={p50:.1f} p95={p95:.1f} p99={p99:.1f}")
    return 0
