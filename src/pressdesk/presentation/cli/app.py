"""PressDesk CLI application using Typer.

Command-line access to the dashboard read models: inspect breadcrumb
trails, print normalized statistics, and run the API server.
"""

import asyncio
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pressdesk.application.queries import DashboardStatsQuery
from pressdesk.application.services import (
    NavigationState,
    format_compact_number,
    format_currency,
    format_percentage,
)
from pressdesk.infrastructure.metrics import MockMetricsSource, NullMetricsSource
from pressdesk_config.settings import get_settings

app = typer.Typer(
    name="pressdesk",
    help="PressDesk - content dashboard read-model CLI",
    no_args_is_help=True,
)
console = Console()


@app.command("breadcrumbs")
def show_breadcrumbs(
    paths: Annotated[list[str], typer.Argument(help="One or more route paths, visited in order")],
) -> None:
    """Print the breadcrumb trail for each route path."""
    state = NavigationState()
    for path in paths:
        trail = state.on_route_changed(path)

        table = Table(title=f"Breadcrumbs for [bold]{path}[/bold]")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Label", style="cyan")
        table.add_column("Href")
        table.add_column("Current", justify="center")
        for index, entry in enumerate(trail, start=1):
            table.add_row(str(index), entry.label, entry.href, "✓" if entry.is_last else "")

        if trail:
            console.print(table)
        else:
            console.print(f"[dim]No breadcrumbs for {path!r}[/dim]")


class StatsSource(str, Enum):
    """Metrics sources usable without a backend."""

    MOCK = "mock"
    NONE = "none"


_STATS_SOURCES: dict[StatsSource, type[MockMetricsSource] | type[NullMetricsSource]] = {
    StatsSource.MOCK: MockMetricsSource,
    StatsSource.NONE: NullMetricsSource,
}


@app.command("stats")
def show_stats(
    source: Annotated[
        StatsSource,
        typer.Option(help="Where the statistics come from"),
    ] = StatsSource.MOCK,
) -> None:
    """Print the normalized dashboard statistics."""
    metrics_source = _STATS_SOURCES[source]()

    stats = asyncio.run(DashboardStatsQuery.from_source(metrics_source).execute())

    summary = Table(title="Dashboard statistics")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", justify="right")
    summary.add_column("Change", justify="right")
    summary.add_row(
        "Articles",
        str(stats.total_articles),
        format_percentage(stats.articles_change),
    )
    summary.add_row(
        "Views",
        format_compact_number(stats.total_views),
        format_percentage(stats.views_change),
    )
    summary.add_row(
        "Revenue",
        format_currency(stats.total_revenue),
        format_percentage(stats.revenue_change),
    )
    summary.add_row(
        "Comments",
        str(stats.total_comments),
        format_percentage(stats.comments_change),
    )
    summary.add_row("Clicks", format_compact_number(stats.total_clicks), "")
    summary.add_row("Conversion rate", f"{stats.conversion_rate:.1f}%", "")
    console.print(summary)

    top = Table(title="Top performing articles")
    top.add_column("Title")
    top.add_column("Views", justify="right")
    top.add_column("Revenue", justify="right")
    for article in stats.top_performing_articles:
        top.add_row(article.title, str(article.views), format_currency(article.revenue))
    console.print(top)

    traffic = Table(title="Traffic sources")
    traffic.add_column("Source")
    traffic.add_column("Visits", justify="right")
    traffic.add_column("Share", justify="right")
    for item in stats.traffic_sources:
        traffic.add_row(item.source, format_compact_number(item.visits), f"{item.percentage:.0f}%")
    console.print(traffic)


@app.command("serve")
def serve(
    host: Annotated[Optional[str], typer.Option(help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pressdesk.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
