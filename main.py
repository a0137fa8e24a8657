#!/usr/bin/env python3
"""HTTP Monitor - Entry point"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from http_monitor import VERSION, LineParser, ParseError, Reporter, Settings, TrafficMonitor, follow

console = Console()
logger = logging.getLogger("http_monitor")


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="HTTP Monitor - Live access log statistics and high-traffic alerting",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("-f", "--filename", default=defaults.filename,
                        help="Pathname to the access log file")
    parser.add_argument("--qps", type=float, default=defaults.rate_threshold,
                        help="Average requests per second that triggers a high-traffic alert")
    parser.add_argument("--top", type=int, default=defaults.top_n,
                        help="Dump the top N sections")
    parser.add_argument("--window", type=int, default=defaults.window_seconds,
                        help="High-traffic window length in seconds")
    parser.add_argument("--interval", type=float, default=defaults.report_interval,
                        help="Seconds between two stats dumps")
    parser.add_argument("--from-end", dest="from_start", action="store_false",
                        default=defaults.from_start,
                        help="Skip existing content and only follow new lines")
    parser.add_argument("--fail-fast", action="store_true", default=defaults.fail_fast,
                        help="Exit on the first line that cannot be parsed")
    parser.add_argument("-v", "--verbose", action="store_true", default=defaults.verbose,
                        help="Debug logging")
    parser.add_argument("--version", action="version", version=f"HTTP Monitor v{VERSION}")
    return parser


def settings_from_args(argv=None) -> Settings:
    parser = build_parser(Settings.from_env())
    args = parser.parse_args(argv)
    try:
        return Settings(
            filename=args.filename,
            rate_threshold=args.qps,
            top_n=args.top,
            window_seconds=args.window,
            report_interval=args.interval,
            from_start=args.from_start,
            fail_fast=args.fail_fast,
            verbose=args.verbose,
        )
    except ValueError as e:
        parser.error(str(e))


def run(settings: Settings, monitor: TrafficMonitor, lines) -> int:
    """Feed lines into the monitor; returns the process exit code"""
    parser = LineParser()
    for line in lines:
        if not line.strip():
            continue
        try:
            record = parser.parse(line)
        except ParseError as e:
            if settings.fail_fast:
                logger.error("Cannot parse log line: %s", e)
                return 1
            logger.warning("Skipping log line: %s", e)
            continue
        monitor.ingest(record)
    logger.debug("Parsed %d lines, skipped %d", parser.parsed, parser.failed)
    return 0


def main(argv=None):
    try:
        settings = settings_from_args(argv)
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/] {e}")
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    monitor = TrafficMonitor(window_seconds=settings.window_seconds,
                             rate_threshold=settings.rate_threshold)
    reporter = Reporter(monitor, console, interval=settings.report_interval, top_n=settings.top_n)

    if not Path(settings.filename).exists():
        console.print(f"[red]Error:[/] cannot tail file: {settings.filename}")
        sys.exit(1)

    reporter.start()
    try:
        code = run(settings, monitor, follow(settings.filename, from_start=settings.from_start))
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] cannot tail file: {e}")
        code = 1
    except KeyboardInterrupt:
        code = 0
    finally:
        reporter.stop(timeout=1.0)
    sys.exit(code)


if __name__ == "__main__":
    main()
