#!/usr/bin/env python3
"""
Parse a pasted job posting or candidate profile and print it as JSON.
Usage: intake-parse --kind job posting.txt
       cat posting.txt | intake-parse
"""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .logging_config import setup_logging
from .parser import RECORD_KINDS, example_text, parse_posting

logger = setup_logging("intake.cli")


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intake-parse",
        description="Extract a structured record from pasted recruiter text.",
    )
    parser.add_argument("path", nargs="?", default="-", help="Input file, '-' for stdin")
    parser.add_argument("--kind", choices=RECORD_KINDS, default="job")
    parser.add_argument("--example", action="store_true", help="Parse the built-in sample instead")
    parser.add_argument("--indent", type=int, default=2)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    if args.example:
        text = example_text(args.kind)
    else:
        try:
            text = read_input(args.path)
        except OSError as e:
            logger.error(f"Could not read input {args.path}: {e}")
            return 1

    record = parse_posting(text, kind=args.kind)
    print(json.dumps(record.to_payload(), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
