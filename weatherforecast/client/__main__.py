"""
Fetch the weather forecast and print it as a table.

Usage:
    python -m weatherforecast.client [--url URL] [--timeout SECONDS]
"""

import argparse
import asyncio
import logging
import sys

from weatherforecast.client.client import DEFAULT_BASE_URL, fetch_forecasts
from weatherforecast.client.display import render_forecasts
from weatherforecast.client.errors import ForecastClientError

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the weather forecast")
    parser.add_argument("--url", default=DEFAULT_BASE_URL,
                        help=f"Forecast service root (default: {DEFAULT_BASE_URL})")
    parser.add_argument("--timeout", type=float, default=30.0,
                        help="Request timeout in seconds")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        forecasts = asyncio.run(fetch_forecasts(base_url=args.url, timeout=args.timeout))
    except ForecastClientError as e:
        logger.debug(f"Forecast fetch failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Weather forecast")
    print(render_forecasts(forecasts))
    return 0


if __name__ == "__main__":
    sys.exit(main())
