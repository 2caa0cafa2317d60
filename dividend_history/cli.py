"""Command‑line interface for dividend_history.

Provides sub‑commands to show the trailing dividend history, growth rates and
split history for a single ticker, or just its chart series.
"""

import json
import logging
import sys

import click
import pandas as pd
from tabulate import tabulate

from . import config
from . import messages
from . import utils
from .models import DividendView
from .pipeline import DividendPipeline

__version__ = "1.0.0"

LANG_OPTION = click.option(
    "--lang",
    type=click.Choice(sorted(messages.MESSAGES)),
    default=config.DEFAULT_LANGUAGE,
    show_default=True,
    help="Language for labels and messages.",
)


@click.group()
@click.version_option(version=__version__, prog_name="dividend-history")
@click.option("--verbose", is_flag=True, help="Log provider calls and pipeline steps.")
def main(verbose):
    """Dividend history, growth rates and stock splits for a ticker."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def run_lookup(symbol: str, lang: str) -> DividendView:
    """Run the pipeline and stop with status 1 when no data was produced."""
    view = DividendPipeline(lang=lang).run(symbol)
    if not view.has_data:
        click.echo(view.error, err=True)
        echo_tips(lang)
        sys.exit(1)
    return view


def echo_tips(lang: str) -> None:
    t = messages.get_messages(lang)
    click.echo(f"\n{t['instructions']}:")
    click.echo(f"  {t['examples']}")
    for symbol, name in messages.EXAMPLE_SYMBOLS:
        click.echo(f"  {symbol} - {name}")
    click.echo(f"{t['notes']}:")
    for key in ("note1", "note2", "note3"):
        click.echo(f"  {t[key]}")


def chart_title(view: DividendView, lang: str) -> str:
    t = messages.get_messages(lang)
    if view.company_name:
        return f"{view.company_name} ({view.symbol}) {t['dividend_history']}"
    return t["dividend_history"]


@main.command()
@click.argument("symbol")
@LANG_OPTION
@click.option("--json", "as_json", is_flag=True, help="Print the view as JSON.")
def stats(symbol, lang, as_json):
    """Show dividend records, growth rates and splits for a single ticker."""
    view = run_lookup(symbol, lang)
    if as_json:
        click.echo(json.dumps(view.to_dict(), indent=2, ensure_ascii=False))
        return

    t = messages.get_messages(lang)
    click.echo(f"--- {chart_title(view, lang)} ---")

    click.echo(f"\n{t['dividend_growth']}:")
    growth_rows = [[utils.format_growth(value) for value in view.growth.values()]]
    growth_headers = [f"{years} {t['years']}" for years in view.growth]
    click.echo(tabulate(growth_rows, headers=growth_headers, tablefmt="simple"))

    click.echo(f"\n{t['dividend_records']}:")
    records = pd.DataFrame(
        {
            t["date"]: [messages.format_table_date(r.date) for r in view.records],
            t["adjusted_dividend"]: [f"{r.adj_dividend:.4f}" for r in view.records],
            t["payment_date"]: [
                messages.format_table_date(r.payment_date) if r.payment_date else "-" for r in view.records
            ],
        }
    )
    click.echo(tabulate(records, headers="keys", tablefmt="simple", showindex=False, disable_numparse=True))

    series = view.chart
    click.echo(f"\n{t['y_axis']}: ${series.y_axis_min:.4f} - ${series.y_axis_max:.4f}")

    click.echo(f"\n{t['stock_split_history']}:")
    if view.splits is None:
        click.echo(f"  {t['no_split_history']}")
    else:
        click.echo(tabulate(
            [(messages.format_table_date(s.date), s.ratio) for s in view.splits],
            headers=[t["date"], t["split_ratio"]], tablefmt="simple",
        ))


@main.command()
@click.argument("symbol")
@LANG_OPTION
def chart(symbol, lang):
    """Print the chart series (oldest first) and its y-axis bounds."""
    view = run_lookup(symbol, lang)
    t = messages.get_messages(lang)
    series = view.chart

    click.echo(chart_title(view, lang))
    rows = [(label, f"${value:.4f}") for label, value in zip(series.labels, series.values)]
    click.echo(tabulate(rows, headers=[t["date"], t["adjusted_dividend"]], tablefmt="simple"))
    click.echo(f"\n{t['y_axis']}: ${series.y_axis_min:.4f} - ${series.y_axis_max:.4f}")


if __name__ == "__main__":
    main()
