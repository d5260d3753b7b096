#!/usr/bin/env python3
"""
cli.py
Command-line entrypoint for EIP-4844 blob recovery (evaluation form -> coefficients).
"""

import argparse
import logging
import sys
from pathlib import Path

from config import load_config, DEFAULT_CONFIG
from runner import run_recovery
from utils import setup_basic_logger


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Recover blob polynomial coefficients from evaluation form."
    )
    p.add_argument(
        "--input",
        "-i",
        required=True,
        help="Path to a JSON file holding the evaluation vector.",
    )
    p.add_argument(
        "--out-dir",
        "-o",
        default="out",
        help="Directory to write outputs. Default: ./out",
    )
    p.add_argument(
        "--config",
        "-c",
        default=None,
        help="Optional JSON config file to override defaults.",
    )
    p.add_argument(
        "--transform",
        choices=["recursive", "iterative"],
        default=None,
        help="Transform implementation (overrides config).",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Minimize console output.",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    cfg = DEFAULT_CONFIG.copy()
    try:
        if args.config:
            cfg = load_config(args.config, base=cfg)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    if args.transform:
        cfg["transform"] = args.transform

    level = logging.DEBUG if args.verbose else getattr(logging, str(cfg.get("log_level", "INFO")).upper(), logging.INFO)
    setup_basic_logger(level=logging.WARNING if args.quiet and not args.verbose else level)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"ERROR: input file not found: {input_path}", file=sys.stderr)
        return 2

    try:
        run_recovery(str(input_path), out_dir=args.out_dir, config=cfg, quiet=args.quiet)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
