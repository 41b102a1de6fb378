"""CLI entry point for parsing and downloading monthly reports."""

import argparse
import logging

from meteo.config.loader import get_config_value, load_config
from meteo.config.schema import MeteoConfig
from meteo.errors import MeteoError
from meteo.ingest.archive_client import ArchiveClient
from meteo.models.report import merge_reports
from meteo.parsing.report import parse_report_file
from meteo.reporting.formatters import format_summary_json, format_summary_text
from meteo.reporting.summarizer import summarize


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="meteo",
        description="Monthly climatological summary parser",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # summary
    summary_p = sub.add_parser("summary", help="Summarize report files")
    summary_p.add_argument("files", nargs="+", help="Monthly report files")
    summary_p.add_argument(
        "--json", action="store_true", help="Print the summary as JSON"
    )

    # fetch
    fetch_p = sub.add_parser("fetch", help="Download reports from the archive")
    fetch_p.add_argument("--from-year", type=int, help="First year to fetch")
    fetch_p.add_argument("--to-year", type=int, help="Last year to fetch")
    fetch_p.add_argument("--dest", help="Destination directory")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. archive.max_retries")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "summary":
        return _cmd_summary(args)
    elif args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_summary(args) -> int:
    try:
        reports = [parse_report_file(path) for path in args.files]
        report = merge_reports(reports)
        summary = summarize(report)
    except (MeteoError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(format_summary_json(summary))
    else:
        print(format_summary_text(summary))
    return 0


def _cmd_fetch(config: MeteoConfig, args) -> int:
    archive = config.archive
    client = ArchiveClient(
        base_url=archive.base_url,
        user_agent=archive.user_agent,
        timeout=archive.timeout,
        max_retries=archive.max_retries,
        retry_base_delay=archive.retry_base_delay,
    )
    start = args.from_year or config.download.start_year
    end = args.to_year or config.download.end_year
    if end < start:
        print("Error: --to-year must not precede --from-year")
        return 1

    written = client.download_range(start, end, args.dest or config.download.dest_dir)
    print(f"Downloaded {len(written)} reports")
    return 0 if written else 1


def _cmd_config(config: MeteoConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        print(value)
        return 0
    print("Use: config show | config get key")
    return 1
