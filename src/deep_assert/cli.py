"""Command-line entry point: compare two JSON files.

Usage::

    deep-assert expected.json actual.json -m "snapshot" --type-coercion

Prints the result string and exits 0 on pass, 1 on mismatch and 2 when an
input file cannot be read or parsed.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from deep_assert.api import compare
from deep_assert.config import CompareConfig, CyclePolicy

EXIT_PASS = 0
EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="deep-assert",
        description="Deep-compare two JSON documents and report the first difference.",
    )
    parser.add_argument("expected", type=Path, help="JSON file holding the expected value.")
    parser.add_argument("actual", type=Path, help="JSON file holding the actual value.")
    parser.add_argument(
        "-m",
        "--message",
        default=None,
        help="Label for the result line (defaults to the actual file name).",
    )
    parser.add_argument(
        "--cycle-policy",
        choices=[policy.value for policy in CyclePolicy],
        default=CyclePolicy.PAIR.value,
        help="How previously visited containers are recognised.",
    )
    parser.add_argument(
        "--type-coercion",
        action="store_true",
        help='Treat numeric strings as numbers ("123" equals 123).',
    )
    parser.add_argument(
        "--null-equals-missing",
        action="store_true",
        help="Treat keys whose value is null as absent.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _load(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        expected = _load(args.expected)
        actual = _load(args.actual)
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    config = CompareConfig(
        cycle_policy=CyclePolicy(args.cycle_policy),
        type_coercion=args.type_coercion,
        null_equals_missing=args.null_equals_missing,
    )
    message = args.message if args.message is not None else args.actual.name
    result = compare(message, expected, actual, config=config)
    print(result.describe())
    return EXIT_PASS if result.ok else EXIT_MISMATCH


if __name__ == "__main__":
    sys.exit(main())
