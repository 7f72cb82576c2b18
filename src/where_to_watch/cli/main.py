"""Main CLI entry point."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import ConfigManager
from ..core.estimation import DISTRIBUTOR_LABELS
from ..core.interfaces import IAvailabilityService, IHistoryStore, ITMDbService
from ..infrastructure import Container, setup_logging
from ..utils import (
    ConfigurationError,
    HistoryStoreError,
    MovieNotFoundError,
    WhereToWatchError,
)
from .render import render_history, render_report, render_search_page

logger = logging.getLogger(__name__)

# Commands that run without configuration or API access
STANDALONE_COMMANDS = {"init", "distributors"}


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="where-to-watch")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool) -> None:
    """Where to Watch - Find where a movie streams, and when it might."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    if ctx.invoked_subcommand in STANDALONE_COMMANDS:
        return

    # Tests may inject a ready container
    if "container" in ctx.obj:
        return

    try:
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Initialization error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("query")
@click.option("--page", "-p", type=click.IntRange(min=1), default=1, help="Result page")
@click.pass_context
def search(ctx: click.Context, query: str, page: int) -> None:
    """Search TMDb for movies by title."""
    container = ctx.obj["container"]

    try:
        asyncio.run(_run_search(container, query, page))
    except (ValueError, WhereToWatchError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("movie_id", type=click.IntRange(min=1))
@click.option(
    "--distributor",
    "-d",
    type=click.Choice(DISTRIBUTOR_LABELS, case_sensitive=False),
    help="Theatrical distributor, used to predict streaming when the studio is unknown",
)
@click.pass_context
def movie(ctx: click.Context, movie_id: int, distributor: Optional[str]) -> None:
    """Show details and where to watch a movie by TMDb ID."""
    container = ctx.obj["container"]

    try:
        asyncio.run(_run_movie(container, movie_id, distributor))
    except MovieNotFoundError:
        click.echo(f"Movie not found: {movie_id}", err=True)
        sys.exit(1)
    except WhereToWatchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
def distributors() -> None:
    """List distributors accepted by 'movie --distributor'."""
    for label in DISTRIBUTOR_LABELS:
        click.echo(label)


@cli.command()
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Number of searches to show")
@click.pass_context
def history(ctx: click.Context, limit: Optional[int]) -> None:
    """Show recent searches."""
    container = ctx.obj["container"]

    try:
        items = asyncio.run(container.get(IHistoryStore).recent_searches(limit))
    except WhereToWatchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    render_history(items)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        output.parent.mkdir(parents=True, exist_ok=True)

        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Set TMDB_API_KEY in your environment or .env file, or edit the file.")

    except Exception as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration summary."""
    config = ctx.obj["config"]

    click.echo("Where to Watch Status")
    click.echo("=" * 40)
    api_key = config.tmdb.api_key
    click.echo(f"TMDb Configured: {'✓' if api_key and not api_key.startswith('$') else '✗'}")
    click.echo(f"TMDb Language: {config.tmdb.language}")
    click.echo(f"Reference Region: {config.tmdb.region}")
    click.echo(f"History Enabled: {'✓' if config.history.enabled else '✗'}")
    if config.history.enabled:
        click.echo(f"History File: {config.history.path}")


async def _run_search(container: Container, query: str, page: int) -> None:
    """Run a search and record it in history."""
    try:
        tmdb = container.get(ITMDbService)  # type: ignore
        result = await tmdb.search_movies(query, page)
        render_search_page(result)
        try:
            await container.get(IHistoryStore).record_search(query)  # type: ignore
        except HistoryStoreError as e:
            logger.warning(f"Search not saved to history: {e}")
    finally:
        await container.close()


async def _run_movie(container: Container, movie_id: int, distributor: Optional[str]) -> None:
    """Build and print the availability report for a movie."""
    try:
        availability = container.get(IAvailabilityService)  # type: ignore
        report = await availability.build_report(movie_id, distributor)
        try:
            last_visit = await container.get(IHistoryStore).touch_visit(movie_id)  # type: ignore
        except HistoryStoreError as e:
            logger.warning(f"Visit not saved to history: {e}")
            last_visit = None
        render_report(report, last_visit, container.get_config().tmdb.image_base_url)
    finally:
        await container.close()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
