"""
Batch Quote Calculator
======================

Quotes every shipment in a CSV file and writes flat quote records.

Input columns:
    weight_kg, service_tier, package_category, insurance_requested

Usage:
    python -m quote_engine.scripts.quote_batch shipments.csv
    python -m quote_engine.scripts.quote_batch shipments.csv -o quotes.csv
    python -m quote_engine.scripts.quote_batch shipments.csv --date 2026-10-18
    python -m quote_engine.scripts.quote_batch shipments.csv --dry-run
"""

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

import polars as pl

from quote_engine.data import CURRENCY
from quote_engine.engine import quotes_from_frame
from quote_engine.errors import InvalidInput
from quote_engine.version import VERSION


logger = logging.getLogger("quote_engine.scripts.quote_batch")


# =============================================================================
# CONFIGURATION
# =============================================================================

# Columns to write, in order
OUTPUT_COLUMNS = [
    # Identification
    "tracking_number",
    # Shipment
    "weight_kg", "service_tier", "package_category", "insurance_requested",
    # Costs
    "base_cost", "weight_cost", "handling_cost", "subtotal",
    "insurance_cost", "total_cost",
    # Delivery
    "delivery_date", "estimated_delivery_date",
    # Metadata
    "currency", "calculator_version",
]


# =============================================================================
# PIPELINE
# =============================================================================

def load_shipments(path: Path) -> pl.DataFrame:
    """Read shipments CSV. Column types are normalised by the pipeline."""
    return pl.read_csv(path)


def build_quotes(df: pl.DataFrame, quote_date: date | None = None) -> pl.DataFrame:
    """Quote all shipments and return the output records as a DataFrame."""
    if quote_date is None:
        clock = datetime.now
    else:
        clock = lambda: datetime.combine(quote_date, datetime.now().time())

    records = []
    for quote in quotes_from_frame(df, clock=clock):
        record = quote.to_record()
        record["currency"] = CURRENCY
        records.append({col: record[col] for col in OUTPUT_COLUMNS})

    return pl.DataFrame(records, schema=_output_schema())


def _output_schema() -> dict:
    schema = {col: pl.Utf8 for col in OUTPUT_COLUMNS}
    schema["weight_kg"] = pl.Float64
    schema["insurance_requested"] = pl.Boolean
    return schema


def print_summary(quotes: pl.DataFrame) -> None:
    """Print quote counts and totals by service tier."""
    summary = (
        quotes
        .with_columns(pl.col("total_cost").cast(pl.Float64))
        .group_by("service_tier")
        .agg([
            pl.len().alias("shipments"),
            pl.col("total_cost").sum().round(2).alias("total_cost"),
        ])
        .sort("service_tier")
    )
    print(summary)


# =============================================================================
# MAIN
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Quote a CSV of shipments")
    parser.add_argument("input", type=Path, help="Shipments CSV")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output CSV (default: <input>_quotes.csv)")
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Quote date YYYY-MM-DD (default: today)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Calculate and summarise, but write nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output = args.output or args.input.with_name(f"{args.input.stem}_quotes.csv")

    print("=" * 60)
    print(f"Batch Quote Calculator v{VERSION}")
    print("=" * 60)
    print(f"  Input:  {args.input}")
    print(f"  Output: {output}{'  [DRY RUN]' if args.dry_run else ''}")

    try:
        shipments = load_shipments(args.input)
        logger.info("Loaded %d shipment(s) with columns %s", len(shipments), shipments.columns)

        quotes = build_quotes(shipments, args.date)
    except InvalidInput as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    print()
    print_summary(quotes)

    if args.dry_run:
        print(f"\n  [DRY RUN] Would write {len(quotes):,} quotes to {output}")
        return 0

    quotes.write_csv(output)
    print(f"\n  Wrote {len(quotes):,} quotes to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
