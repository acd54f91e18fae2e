"""Command line entry point for importing a quotation spreadsheet.

Loads a supplier spreadsheet, runs the ingestion pipeline and prints the
detected columns, the summary and the extracted items.

Usage:
    quote-ingest cotacao.xlsx
    quote-ingest cotacao.csv --json
    quote-ingest cotacao.csv --log-level DEBUG --log-format console

Exit codes:
    0  items imported
    1  file could not be loaded
    2  no valid rows found
"""
import argparse
import json
import sys
from typing import List, Optional

from quote_ingest.config import LogFormat, configure_logging, settings
from quote_ingest.errors.exceptions import GridLoadError
from quote_ingest.loaders.grid_loader import load_grid
from quote_ingest.services.ingestion.pipeline import IngestionPipeline, IngestionReport

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_NO_ITEMS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quote-ingest",
        description="Import a supplier quotation spreadsheet and summarize its items",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Human-readable report
  quote-ingest cotacao.xlsx

  # JSON document with mapping, summary and items
  quote-ingest cotacao.csv --json
        """,
    )
    parser.add_argument("file", help="Spreadsheet file (.csv, .txt, .xlsx, .xlsm)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON document instead of the text report",
    )
    parser.add_argument(
        "--delimiter",
        default=None,
        help="CSV delimiter (default: sniffed between ';' and ',')",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=[f.value for f in LogFormat],
        default=settings.log_format.value,
        help=f"Log format (default: {settings.log_format.value})",
    )
    return parser


def report_to_dict(report: IngestionReport) -> dict:
    return {
        "mapping": report.mapping.as_dict(),
        "summary": report.summary.model_dump(mode="json"),
        "items": [item.model_dump(mode="json") for item in report.items],
    }


def print_report(report: IngestionReport) -> None:
    summary = report.summary

    print("Detected columns:")
    for role, index in report.mapping.as_dict().items():
        print(f"  {role:<15} {'-' if index is None else index}")

    print()
    print(f"Items:       {summary.item_count}")
    print(f"Products:    {summary.distinct_products}")
    print(f"Suppliers:   {summary.distinct_suppliers}")
    print(f"Categories:  {summary.distinct_categories}")

    if summary.items_per_category:
        print()
        print("Items per category:")
        for category, count in summary.items_per_category.items():
            print(f"  {category:<20} {count}")

    if report.items:
        print()
        for item in report.items:
            supplier = item.supplier or "?"
            print(f"  {item.product[:40]:<40} {supplier[:20]:<20} {item.category:<14} {item.price_per_area}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, LogFormat(args.log_format))

    try:
        grid = load_grid(args.file, delimiter=args.delimiter)
    except GridLoadError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    report = IngestionPipeline().run(grid)

    if args.json:
        print(json.dumps(report_to_dict(report), ensure_ascii=False, indent=2))
    else:
        print_report(report)

    if report.is_empty:
        print("No valid rows found: check headers and price values.", file=sys.stderr)
        return EXIT_NO_ITEMS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
