#!/usr/bin/env python3
"""Format a saved provider payload the way the API returns it.

Usage examples:

  # Ratios response saved from the provider
  python scripts/format_payload.py ratios.json --endpoint ratios

  # Quote from stdin
  curl -s "$QUOTE_URL" | python scripts/format_payload.py --endpoint quote

  # Check a quarterly request against an annual-only endpoint
  python scripts/format_payload.py km.json --endpoint key-metrics --period quarter

  # Compact output, debug logging
  python scripts/format_payload.py income.json --endpoint income-statement --indent 0 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add src/ to path so the script runs from a checkout
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

import structlog

from insight_format.endpoints import ENDPOINTS, format_endpoint_payload, validate_period
from insight_format.errors import InsightFormatError
from insight_format.logging_config import configure_logging

logger = structlog.get_logger("format_payload")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Format a provider JSON payload for display.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file to read. Default: stdin",
    )
    p.add_argument(
        "--endpoint",
        choices=sorted(ENDPOINTS),
        default="key-metrics",
        help="Provider endpoint the payload came from. Default: key-metrics",
    )
    p.add_argument("--period", default=None, help="Reporting period (annual, quarter).")
    p.add_argument("--symbol", default=None, help="Ticker, used in error messages.")
    p.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent; 0 for compact output. Default: 2",
    )
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level.",
    )
    return p


def read_payload(source: str) -> object:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text())


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(level=args.log_level)
        validate_period(args.endpoint, args.period)
        payload = read_payload(args.input)
        formatted = format_endpoint_payload(args.endpoint, payload, symbol=args.symbol)
    except (OSError, json.JSONDecodeError, RecursionError) as e:
        logger.error("could not read payload", source=args.input, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1
    except InsightFormatError as e:
        logger.error("could not format payload", endpoint=args.endpoint, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    indent = args.indent if args.indent > 0 else None
    try:
        # NaN and Infinity survive formatting but have no JSON spelling
        text = json.dumps(formatted, indent=indent, allow_nan=False)
    except (ValueError, RecursionError) as e:
        logger.error("could not write payload", endpoint=args.endpoint, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
