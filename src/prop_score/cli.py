"""CLI for scoring investment properties."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_filter_params, get_scoring_context, load_config
from .export import export_csv, export_json
from .filters import filter_properties
from .models import RawProperty, ScoredProperty
from .scoring import ScoringEngine

app = typer.Typer(
    name="prop-score",
    help="Score real-estate listings for rental, appreciation or short-term rental investing",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def load_properties(path: Path) -> list[RawProperty]:
    """Read raw properties from a JSON or YAML file.

    The file holds either a list of records or a mapping with a
    ``properties`` list.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f) if path.suffix.lower() == ".json" else yaml.safe_load(f)
    if isinstance(data, dict):
        data = data.get("properties", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of properties in {path}")
    return [RawProperty.from_dict(d) for d in data]


def _display_report(results: list[ScoredProperty], title: str, limit: int = 20) -> None:
    """Display ranked properties table."""
    if not results:
        console.print("[yellow]No properties to display.[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Rank", style="dim")
    table.add_column("Address", style="cyan")
    table.add_column("City", style="dim")
    table.add_column("Price", justify="right")
    table.add_column("Rent/mo", justify="right")
    table.add_column("NOI", justify="right")
    table.add_column("Cap", justify="right")
    table.add_column("CoC", justify="right")
    table.add_column("Value (end)", justify="right")
    table.add_column("Score", justify="right", style="bold")

    for i, r in enumerate(results[:limit], 1):
        p, m = r.property, r.metrics
        addr = p.address or p.id
        addr_display = addr[:30] + "..." if len(addr) > 30 else addr
        table.add_row(
            str(i),
            addr_display,
            p.city,
            f"{p.list_price or 0:,.0f}",
            f"{m.estimated_rent:,.0f}",
            f"{m.annual_noi:,.0f}",
            f"{m.cap_rate:.2%}",
            f"{m.cash_on_cash:.2%}",
            f"{m.projected_value_year_n:,.0f}",
            str(r.score),
        )

    console.print(table)


@app.command()
def score(
    listings_file: Path = typer.Argument(..., help="JSON or YAML file of raw properties"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", "-s", help="rental, appreciation or short_term_rental"
    ),
    horizon: Optional[int] = typer.Option(None, "--horizon", "-H", help="Holding period in years"),
    min_price: Optional[float] = typer.Option(None, "--min-price"),
    max_price: Optional[float] = typer.Option(None, "--max-price"),
    min_beds: Optional[float] = typer.Option(None, "--min-beds"),
    min_baths: Optional[float] = typer.Option(None, "--min-baths"),
    limit: int = typer.Option(20, "--limit", "-n", help="Max properties to show"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write full results to JSON"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write ranked results to CSV"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score and rank properties from a file."""
    _setup_logging(verbose)
    try:
        cfg = load_config(config_path)
        context = get_scoring_context(cfg, strategy=strategy, horizon_years=horizon)
        properties = load_properties(listings_file)
        bounds = get_filter_params(cfg)
        engine = ScoringEngine(context=context, config=cfg)
    except (ValueError, FileNotFoundError) as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(2)

    overrides = {"min_price": min_price, "max_price": max_price, "min_beds": min_beds, "min_baths": min_baths}
    bounds.update({k: v for k, v in overrides.items() if v is not None})
    filtered = filter_properties(properties, **bounds)
    console.print(f"[green]Loaded {len(properties)} properties, {len(filtered)} after filters[/green]")

    ranked = engine.rank(filtered)

    _display_report(
        ranked,
        title=f"Top Properties ({context.strategy.value}, {context.horizon_years}y)",
        limit=limit,
    )
    if json_path:
        export_json(ranked, json_path)
        console.print(f"  JSON: {json_path}")
    if csv_path:
        export_csv(ranked, csv_path)
        console.print(f"  CSV:  {csv_path}")


@app.command()
def assumptions(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Show the active assumption set."""
    try:
        context = get_scoring_context(load_config(config_path))
    except (ValueError, FileNotFoundError) as err:
        console.print(f"[red]{err}[/red]")
        raise typer.Exit(2)

    table = Table(title="Investment Assumptions")
    table.add_column("Name", style="cyan")
    table.add_column("Rate", justify="right")
    for name, rate in context.assumptions.to_dict().items():
        table.add_row(name, f"{rate:.2%}")
    console.print(table)
    console.print(f"[dim]Strategy: {context.strategy.value}, horizon: {context.horizon_years}y[/dim]")


if __name__ == "__main__":
    app()
