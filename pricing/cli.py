#!/usr/bin/env python3
"""
Competitive Pricing CLI — dashboard numbers from the terminal, Excel export, API server.

USAGE:
  python -m pricing.cli summary                                   # All rows, EUR
  python -m pricing.cli summary --country ARGENTINA --currency LOCAL
  python -m pricing.cli options --country CHILE                   # Cascading filter values
  python -m pricing.cli export --country PERU --output report.xlsx
  python -m pricing.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from pricing.config import DATA_FILE, REPORTS_FOLDER
from pricing.data.store import DataStore
from pricing.data.schemas import CurrencyMode, FilterState, PriceType
from pricing.analytics.boxplot import compare_by_group
from pricing.analytics.filters import apply_filters, cascading_options
from pricing.analytics.promotions import analyze_promotions
from pricing.reports import pricing_report


def _build_filters(args) -> FilterState:
    """Build a FilterState from CLI args; empty values mean "all"."""
    return FilterState(
        country=getattr(args, "country", None) or None,
        competitor=getattr(args, "competitor", None) or None,
        segment=getattr(args, "segment", None) or None,
        kit_size=getattr(args, "kit_size", None) or None,
    )


def _load(args) -> DataStore:
    return DataStore().load(Path(args.data) if args.data else DATA_FILE)


def cmd_summary(args):
    """Print record count, promo KPIs and box-plot headline numbers."""
    store = _load(args)
    if not store.rows:
        print("  Nothing to summarize.")
        return

    filters = _build_filters(args)
    currency = CurrencyMode(args.currency)
    filtered = apply_filters(store.rows, filters)
    promo = analyze_promotions(filtered)

    print("\n" + "=" * 70)
    print("  COMPETITIVE PRICING — SUMMARY")
    print("=" * 70)
    print(f"  Filters:    {pricing_report.filter_label(filters)}")
    print(f"  Registros:  {len(filtered):,} of {store.row_count():,}")
    print(f"  Con promo:  {promo.with_promo_count} / {promo.total_count} ({promo.promo_share:.0f}%)")
    print(f"  Monto promedio promo:  {promo.avg_promo_amount:,.2f} EUR")
    print(f"  Desc. recurrente:      {promo.avg_recurring_promo_percent:.1f}%")
    print(f"  Desc. alta:            {promo.avg_alta_promo_percent:.1f}%")

    for pt in PriceType:
        comparisons = compare_by_group(store.rows, filters, pt, currency)
        print(f"\n  {pt.value.upper()} ({currency.value})")
        if not comparisons:
            print("    (no data)")
        for c in comparisons:
            print(f"    {c.label[:28]:<30}base {c.base.median:>12,.2f}  promo {c.promo.median:>12,.2f}"
                  f"  {c.percentage_diff:+6.1f}%")
    print()


def cmd_options(args):
    """Print the cascading option lists for the given selections."""
    store = _load(args)
    options = cascading_options(store.rows, _build_filters(args))
    for name, values in options.to_dict().items():
        print(f"\n{name.upper()} ({len(values)}):")
        for v in values:
            print(f"  {v}")


def cmd_export(args):
    """Write the Excel report."""
    store = _load(args)
    filters = _build_filters(args)
    out = Path(args.output) if args.output else REPORTS_FOLDER / "Pricing_Report.xlsx"
    path = pricing_report.generate_excel(store, out, filters, CurrencyMode(args.currency))
    print(f"  Saved {path}")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Competitive Pricing API on port {args.port}...")
    uvicorn.run("pricing.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--data", help="Raw dataset (.json/.xlsx/.csv); defaults to PRICING_DATA_FILE")
    p.add_argument("--country", help="Canonical country name, e.g. ARGENTINA")
    p.add_argument("--competitor", help="Competitor label")
    p.add_argument("--segment", help="Hogares | Negocios")
    p.add_argument("--kit-size", dest="kit_size", help="Kit size label")
    p.add_argument("--currency", choices=[c.value for c in CurrencyMode], default=CurrencyMode.EUR.value)


def main():
    parser = argparse.ArgumentParser(
        description="Competitive Pricing — competitor price and promotion analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    summary_parser = subparsers.add_parser("summary", help="Print dashboard numbers")
    _add_filter_args(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    options_parser = subparsers.add_parser("options", help="List cascading filter options")
    _add_filter_args(options_parser)
    options_parser.set_defaults(func=cmd_options)

    export_parser = subparsers.add_parser("export", help="Export Excel report")
    _add_filter_args(export_parser)
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
