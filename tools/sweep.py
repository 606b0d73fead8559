#!/usr/bin/env python3

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pandas as pd  # noqa: E402

from sorbent_core.sweep import band_counts, best_combination, sweep_frame  # noqa: E402


def _parse_fix(items: list[str]) -> dict[str, float]:
    fixed: dict[str, float] = {}
    for item in items:
        name, sep, raw = item.partition("=")
        if not sep:
            raise ValueError(f"--fix expects name=value, got {item!r}")
        try:
            fixed[name.strip()] = float(raw)
        except ValueError as exc:
            raise ValueError(f"--fix {name}: {raw!r} is not a number") from exc
    return fixed


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Evaluate every preset combination and print the results table."
    )
    ap.add_argument(
        "--fix",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Pin one input to a preset value (repeatable), e.g. --fix airflow=0.57",
    )
    ap.add_argument("--top", type=int, default=20, help="Rows to print, sorted by weekly swaps (0 = all).")
    args = ap.parse_args(argv)

    try:
        fixed = _parse_fix(args.fix)
        frame = sweep_frame(fixed)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    view = frame.sort_values("weekly_cartridge_swaps", kind="stable")
    if args.top > 0:
        view = view.head(args.top)

    print("OK")
    print("combinations:", len(frame))
    for band, n in band_counts(frame).items():
        print(f"band {band}:", n)
    best = best_combination(frame)
    print("best_weekly_cartridge_swaps:", round(float(best["weekly_cartridge_swaps"]), 6))
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(view.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
