"""Plain-text rendering of search results and availability reports."""

from datetime import datetime
from typing import List, Optional

import click

from ..core.models import AvailabilityReport, SearchHistoryItem, SearchPage, WatchProvider
from ..utils import format_long_date, format_time_ago, tmdb_image_url
from ..utils.image_utils import TMDB_IMAGE_BASE_URL

ESTIMATE_DISCLAIMER = "(This is an estimate and subject to change)"
DISTRIBUTOR_DISCLAIMER = "(Guessed from TMDb release notes; may be inaccurate)"


def render_search_page(page: SearchPage) -> None:
    """Print one page of search results."""
    if not page.results:
        click.echo(f'No movies found for "{page.query}".')
        return

    click.echo(f'Results for "{page.query}" (page {page.page} of {max(page.total_pages, 1)})')
    click.echo("=" * 70)
    for result in page.results:
        year = result.year or "N/A"
        rating = f"{result.vote_average:.1f}" if result.vote_average else "N/A"
        click.echo(f"  [{result.tmdb_id}] {result.title} ({year})  rating: {rating}")

    if page.page < page.total_pages:
        click.echo(f"\nMore results: --page {page.page + 1}")


def _render_providers(title: str, providers: List[WatchProvider]) -> None:
    if not providers:
        return
    click.echo(f"{title}: {', '.join(p.provider_name for p in providers)}")


def render_report(
    report: AvailabilityReport,
    last_visit: Optional[datetime] = None,
    image_base_url: str = TMDB_IMAGE_BASE_URL,
) -> None:
    """Print movie details and where to watch it."""
    movie = report.movie

    click.echo(f"{movie.title} ({movie.year or 'N/A'})")
    click.echo("=" * 70)
    if movie.tagline:
        click.echo(movie.tagline)
    facts = []
    if movie.runtime:
        facts.append(f"{movie.runtime} min")
    if movie.vote_average:
        facts.append(f"rating {movie.vote_average:.1f}")
    if movie.genres:
        facts.append(", ".join(movie.genres))
    if facts:
        click.echo(" | ".join(facts))
    if movie.overview:
        click.echo(f"\n{movie.overview}")
    poster_url = tmdb_image_url(movie.poster_path, base_url=image_base_url)
    if poster_url:
        click.echo(f"Poster: {poster_url}")
    if movie.production_companies:
        click.echo(
            f"\nProduction: {', '.join(c.name for c in movie.production_companies)}"
        )
    if report.potential_distributors:
        click.echo(f"Possible distributors: {', '.join(report.potential_distributors)}")
        click.echo(DISTRIBUTOR_DISCLAIMER)

    click.echo(f"\nWhere to Watch ({report.region})")
    click.echo("-" * 70)

    _render_providers("Stream", report.providers.flatrate)

    studio = report.estimates.studio
    if not report.has_flatrate and studio is not None and studio.available:
        click.echo(
            f"Estimated streaming: based on the studio, this movie might arrive on "
            f"{studio.platform_name} around {format_long_date(studio.projected_date)}."
        )
        click.echo(ESTIMATE_DISCLAIMER)

    distributor = report.estimates.distributor
    if not report.has_flatrate and report.selected_distributor:
        if distributor is not None and distributor.available:
            click.echo(
                f"Prediction based on {report.selected_distributor}: movies from this "
                f"distributor often arrive on {distributor.platform_name} around "
                f"{format_long_date(distributor.projected_date)}."
            )
            click.echo(ESTIMATE_DISCLAIMER)
        else:
            click.echo(
                f"Selected: {report.selected_distributor}. "
                f"(No specific streaming estimate available for this distributor.)"
            )
    elif report.offer_distributor_selection:
        click.echo(
            "Know the distributor? Pass --distributor to predict when it will stream "
            "(see the 'distributors' command)."
        )

    _render_providers("Rent", report.providers.rent)
    _render_providers("Buy", report.providers.buy)

    if report.nothing_available:
        click.echo("Streaming information not available for this region.")
    if report.providers.link:
        click.echo(f"JustWatch: {report.providers.link}")

    click.echo("")
    if last_visit is not None:
        click.echo(f"Last visited: {format_time_ago(last_visit)}")
    else:
        click.echo("First time viewing this movie")


def render_history(items: List[SearchHistoryItem]) -> None:
    """Print recent searches."""
    if not items:
        click.echo("No recent searches")
        return
    click.echo("Recent Searches")
    for item in items:
        click.echo(f"  {item.query}  ({format_time_ago(item.timestamp)})")
