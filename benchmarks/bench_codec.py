#!/usr/bin/env python3
"""
Benchmark: IPP attribute encoding and decoding

Measures latency and throughput for:
  1. AttributeList.write of a printer-attributes response
  2. Parser.parse of the same bytes
  3. IppMessage.from_bytes with a document payload

Usage:
  $ python benchmarks/bench_codec.py --runs 2000 --attrs 200
"""
from __future__ import annotations

import argparse
import io
import time
from statistics import quantiles

from rich import box
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from ippwire import (
    Attribute,
    Collection,
    DelimiterTag,
    Integer,
    IppMessage,
    Keyword,
    ListOf,
    NameWithoutLanguage,
    Parser,
    StatusCode,
)


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------
def build_response(n_attrs: int) -> IppMessage:
    message = IppMessage.new_response(StatusCode.SUCCESSFUL_OK, request_id=1)
    group = DelimiterTag.PRINTER_ATTRIBUTES
    for i in range(n_attrs):
        kind = i % 4
        if kind == 0:
            value = NameWithoutLanguage(f"printer-{i}")
        elif kind == 1:
            value = ListOf([Keyword(f"value-{i}-{j}") for j in range(8)])
        elif kind == 2:
            value = Integer(i)
        else:
            value = Collection.from_members(
                {"media-size": Collection.from_members({"x-dimension": Integer(21000), "y-dimension": Integer(29700)})}
            )
        message.attributes.add(group, Attribute(f"attr-{i}", value))
    return message


# ---------------------------------------------------------------------------
# Benchmark helpers
# ---------------------------------------------------------------------------
def bench_encode(message: IppMessage, runs: int) -> dict:
    latencies = []
    for _ in tqdm(range(runs), desc="Encode"):
        start = time.perf_counter()
        message.attributes.to_bytes()
        latencies.append(time.perf_counter() - start)
    return {"latencies": latencies, "size": len(message.attributes.to_bytes())}


def bench_decode(message: IppMessage, runs: int) -> dict:
    data = message.header.to_bytes() + message.attributes.to_bytes()
    latencies = []
    for _ in tqdm(range(runs), desc="Decode"):
        start = time.perf_counter()
        Parser(io.BytesIO(data)).parse()
        latencies.append(time.perf_counter() - start)
    return {"latencies": latencies, "size": len(data)}


def bench_message(message: IppMessage, runs: int, payload_size: int) -> dict:
    message.payload = b"\x00" * payload_size
    data = message.to_bytes()
    latencies = []
    for _ in tqdm(range(runs), desc="Message"):
        start = time.perf_counter()
        IppMessage.from_bytes(data)
        latencies.append(time.perf_counter() - start)
    return {"latencies": latencies, "size": len(data)}


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------
UNITS = {
    "s": 1,
    "ms": 1e3,
    "us": 1e6,
    "ns": 1e9,
}


def summarise(latencies: list[float], size_bytes: int, unit: str = "us") -> dict[str, float]:
    if not latencies:
        return {"p50": float("nan"), "p95": float("nan"), "p99": float("nan"), "thr": 0.0}
    lat = [t * UNITS[unit] for t in latencies]
    cuts = quantiles(lat, n=100)
    throughput = (size_bytes * len(latencies)) / sum(latencies) / (2**20)  # MiB/s
    return {"p50": cuts[49], "p95": cuts[94], "p99": cuts[98], "thr": throughput}


def print_table(results: dict[str, dict[str, float]], unit: str = "us"):
    console = Console()
    table = Table(title="IPP Codec Benchmark Results", box=box.SIMPLE_HEAVY)
    table.add_column("Path")
    table.add_column(f"p50 ({unit}, ↓)")
    table.add_column(f"p95 ({unit}, ↓)")
    table.add_column(f"p99 ({unit}, ↓)")
    table.add_column("Throughput (MiB/s, ↑)")
    for k, v in results.items():
        table.add_row(k, f"{v['p50']:.2f}", f"{v['p95']:.2f}", f"{v['p99']:.2f}", f"{v['thr']:.1f}")
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--runs", type=int, default=1000)
    parser.add_argument("--attrs", type=int, default=100, help="Printer attributes per message")
    parser.add_argument("--payload", type=int, default=64 * 1024, help="Document bytes after the attributes")
    parser.add_argument("--unit", choices=list(UNITS), default="us")
    args = parser.parse_args()

    message = build_response(args.attrs)
    results = {}
    for label, res in (
        ("encode", bench_encode(message, args.runs)),
        ("decode", bench_decode(message, args.runs)),
        ("message", bench_message(message, args.runs, args.payload)),
    ):
        results[label] = summarise(res["latencies"], res["size"], args.unit)
    print_table(results, args.unit)


if __name__ == "__main__":
    main()
