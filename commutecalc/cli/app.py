"""
Main CLI application for CommuteCalc
Provides commands for estimating commutes and managing config files
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from commutecalc.config.models import EstimateConfig
from commutecalc.config.parser import ConfigParser, ConfigParserError
from commutecalc.core.estimator import CommuteEstimator
from commutecalc.core.inputs import normalize_cities, normalize_home
from commutecalc.core.models import DurationStrategy, display_place
from commutecalc.core.schedule import TargetTimes
from commutecalc.distancematrix.client import DistanceMatrixClient

from .report import build_table, export_records

# Initialize Typer app
app = typer.Typer(
    name="commutecalc",
    help="CommuteCalc - Worst-case driving commute estimates",
    add_completion=False,
)

# Console for rich output
console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger once for the whole run"""
    logger = logging.getLogger("commutecalc")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger


def load_config(config_file: Optional[Path]) -> EstimateConfig:
    if config_file is None:
        return EstimateConfig()
    try:
        return ConfigParser.parse_config(config_file)
    except ConfigParserError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def estimate(
    cities: Optional[List[str]] = typer.Option(None, "--city", "-c", help="Destination city (repeatable)"),
    home: Optional[str] = typer.Option(None, "--home", help="Home address"),
    api_key: Optional[str] = typer.Option(None, "--api-key", envvar="GOOGLE_MAPS_API_KEY", help="Google Maps API key"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML/JSON configuration file"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help="Duration combination (sum/prefer_traffic)"),
    strict: bool = typer.Option(False, "--strict", help="Fail when a response has no duration"),
    timezone: Optional[str] = typer.Option(None, "--timezone", help="Timezone for the 9am/5pm targets"),
    output: Optional[Path] = typer.Option(None, "--output", help="Export results to file (CSV/JSON)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show diagnostic output"),
):
    """
    Estimate Monday 9am and Friday 5pm driving commutes

    Examples:
        commutecalc estimate --city "Bethesda MD" --city "Reston VA"
        commutecalc estimate --home "Silver Spring MD" --strategy prefer_traffic
        commutecalc estimate --config commute.yaml --output commutes.csv
    """
    logger = configure_logging(verbose)
    config = load_config(config_file)

    # Parse strategy
    strategy_enum = config.strategy
    if strategy:
        try:
            strategy_enum = DurationStrategy(strategy.lower())
        except ValueError:
            console.print(f"[red]Invalid strategy: {strategy}[/red]")
            console.print("Valid options: sum, prefer_traffic")
            raise typer.Exit(1)

    if not api_key:
        console.print("[red]A Google Maps API key is required[/red]")
        console.print("Pass --api-key or set the GOOGLE_MAPS_API_KEY environment variable")
        raise typer.Exit(1)

    try:
        client = DistanceMatrixClient(api_key=api_key)
        targets = TargetTimes.for_date(timezone=timezone or config.timezone)
        home_query = normalize_home(home or config.home)
        city_queries = normalize_cities(cities or config.cities)
    except Exception as e:
        console.print(f"[red]Setup error: {e}[/red]")
        raise typer.Exit(1)

    logger.info(
        "Home %s; arrive by %s; leave at %s",
        display_place(home_query),
        targets.monday_morning.isoformat(),
        targets.friday_evening.isoformat(),
    )

    estimator = CommuteEstimator(
        client=client,
        home=home_query,
        targets=targets,
        strategy=strategy_enum,
        strict=strict or config.strict,
        logger=logger,
    )

    try:
        records = asyncio.run(estimator.estimate_all(city_queries))
    except KeyboardInterrupt:
        console.print("\n[yellow]Estimate cancelled by user[/yellow]")
        raise typer.Exit(0)
    except Exception as e:
        console.print(f"[red]Error estimating commutes: {e}[/red]")
        raise typer.Exit(1)

    console.print(build_table(records, title=f"Commutes from {display_place(home_query)}"))

    if output:
        try:
            path = export_records(records, output)
        except Exception as e:
            console.print(f"[red]Error exporting results: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]Exported {len(records)} commutes to {path}[/green]")


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(Path("commute.yaml"), help="Where to write the template"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a template configuration file"""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    try:
        ConfigParser.save_file(ConfigParser.create_template_config(), path)
    except ConfigParserError as e:
        console.print(f"[red]Error writing configuration: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ Template configuration written to {path}[/green]")


@app.callback()
def callback():
    """
    CommuteCalc - Worst-case driving commute estimates

    Estimates how long a Monday-morning drive to each destination takes,
    when to leave home, and when you get back on Friday evening.
    """
    pass


def main():
    """Main entry point for CLI"""
    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    app()


if __name__ == "__main__":
    main()
