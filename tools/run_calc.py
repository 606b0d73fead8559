#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from sorbent_core.engine import DegenerateResultError, evaluate_selection  # noqa: E402
from sorbent_core.presets import PRESET_FIELDS, canonical_value  # noqa: E402


def _flag(name: str) -> str:
    return "--" + name.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Evaluate one sorbent cartridge selection (preset values only)."
    )
    for field in PRESET_FIELDS:
        choices = ", ".join(f"{float(v):g}" for v in field.values)
        ap.add_argument(
            _flag(field.name),
            dest=field.name,
            type=float,
            default=field.default,
            help=f"{field.unit or 'dimensionless'}; one of: {choices} (default {field.default:g})",
        )
    ap.add_argument("--json", action="store_true", help="Print JSON instead of text.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    selection: dict[str, float] = {}
    try:
        for field in PRESET_FIELDS:
            selection[field.name] = canonical_value(field.name, getattr(args, field.name))
        evaluation = evaluate_selection(selection)
    except DegenerateResultError as exc:
        print(f"error: undefined result ({exc.field}): {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        payload = {
            "inputs": evaluation.inputs.as_dict(),
            "outputs": evaluation.outputs.as_dict(),
            "band": evaluation.band,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print("OK")
    for name, value in evaluation.inputs.as_dict().items():
        print(f"input {name}:", value)
    for name, value in evaluation.outputs.as_dict().items():
        print(f"{name}:", round(value, 6))
    print("band:", evaluation.band)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
