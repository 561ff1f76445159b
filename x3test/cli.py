import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from x3test.config import (
    DEFAULT_DURATION,
    DEFAULT_OUTPUT,
    DEFAULT_SELECTOR_TIMEOUT_MS,
    DEFAULT_TRIGGER,
    FORMAT_DETAILED,
    FORMATS,
    Configuration,
)
from x3test.driver import SessionDriver
from x3test.errors import X3TestError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="x3test", description="Run X3D/X3DOM scene performance benchmark")
    parser.add_argument("--url", "-u", required=True, help="URL of the page with X3D scene")
    parser.add_argument("--duration", "-d", type=int, default=DEFAULT_DURATION, help="Duration of test in seconds")
    parser.add_argument("--output", "-o", default=DEFAULT_OUTPUT, help="Output file path")
    parser.add_argument(
        "--trigger",
        "-t",
        default=DEFAULT_TRIGGER,
        help="CSS selector for animation trigger (pass an empty string to skip the click)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=FORMAT_DETAILED,
        help="Per-second samples (detailed) or an averaged report (summary)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_SELECTOR_TIMEOUT_MS,
        help="How long to wait for the scene and trigger elements, in ms",
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log page console output and per-window samples")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def config_from_args(args: argparse.Namespace) -> Configuration:
    return Configuration(
        url=args.url,
        duration=args.duration,
        output_file=args.output,
        trigger_selector=args.trigger,
        format=args.format,
        headless=not args.headed,
        selector_timeout_ms=args.timeout,
    )


async def main_async(args: argparse.Namespace) -> None:
    await SessionDriver(config_from_args(args)).run()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.duration < 1:
        parser.error("--duration must be at least 1 second")

    configure_logging(args.verbose)
    try:
        asyncio.run(main_async(args))
    except X3TestError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
