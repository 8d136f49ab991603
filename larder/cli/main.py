#!/usr/bin/env python3

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from dataclasses import asdict
from typing import TextIO

from larder.receipt.normalization import NormalizationRuleSet


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line, file=sys.stderr)


def _load_rules(rule_paths: list[str] | None) -> NormalizationRuleSet:
    from larder.runtime import load_name_rule_set

    return load_name_rule_set(tuple(rule_paths) if rule_paths else None)


def _read_names(names: list[str], stream: TextIO) -> list[str]:
    if names:
        return names
    return [line.strip() for line in stream if line.strip()]


def _cmd_normalize(args: argparse.Namespace) -> int:
    from larder.application.receipts import normalize_item_names
    from larder.receipt.formatter import format_normalization_table

    rule_set = _load_rules(args.rules)
    results = normalize_item_names(
        _read_names(args.names, sys.stdin),
        args.store,
        currency=args.currency,
        rule_set=rule_set,
    )

    if args.json:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        for line in format_normalization_table(results):
            print(line)
    return 0


def _cmd_receipt(args: argparse.Namespace) -> int:
    from larder.application.receipts import normalize_receipt
    from larder.receipt.extraction import parse_extracted_receipt, receipt_to_dict
    from larder.receipt.formatter import format_normalized_receipt

    rule_set = _load_rules(args.rules)
    if args.file == "-":
        payload = json.load(sys.stdin)
    else:
        with open(args.file, encoding="utf-8") as f:
            payload = json.load(f)

    receipt = normalize_receipt(parse_extracted_receipt(payload), rule_set=rule_set)

    if args.json:
        print(json.dumps(receipt_to_dict(receipt), ensure_ascii=False, indent=2))
    else:
        print(format_normalized_receipt(receipt))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Receipt item name normalization",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  normalize [name ...]       Normalize item names (one per line on stdin if none given)
  receipt <file>             Normalize every item of an extracted receipt JSON ('-' for stdin)

Rules:
  Bundled defaults are always loaded. config/name_rules.toml in the project
  root (LARDER_HOME or the working directory) is layered on top, or the
  files given with --rules instead.
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    normalize_parser = subparsers.add_parser("normalize", help="Normalize item names")
    normalize_parser.add_argument("names", nargs="*", help="Item names as printed on the receipt")
    normalize_parser.add_argument("--store", default=None, help="Store name, e.g. LIDL or ALPHAMEGA")
    normalize_parser.add_argument("--currency", default=None, help="Receipt currency (default: EUR prices only)")

    receipt_parser = subparsers.add_parser("receipt", help="Normalize an extracted receipt")
    receipt_parser.add_argument("file", help="Receipt JSON file, or '-' for stdin")

    for sub in (normalize_parser, receipt_parser):
        sub.add_argument(
            "--rules",
            action="append",
            default=None,
            metavar="PATH",
            help="Extra rules TOML layered over the defaults (repeatable)",
        )
        sub.add_argument("--json", action="store_true", help="Print JSON instead of text")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        from larder.runtime import set_log_level

        set_log_level(logging.DEBUG)

    try:
        if args.command == "normalize":
            return _cmd_normalize(args)
        if args.command == "receipt":
            return _cmd_receipt(args)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError and TOML decode errors are ValueErrors
        _print_error(str(exc))
        return 1

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
