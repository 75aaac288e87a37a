"""CLI entry point for podcards."""

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podcards.config.logging import setup_logging
from podcards.config.manager import DEFAULT_CONFIG_FILENAME, ConfigManager
from podcards.config.schema import SiteConfig
from podcards.episodes.ordering import order_episodes
from podcards.pipeline import BuildOptions, SiteBuilder
from podcards.render.view import RenderState
from podcards.utils.errors import ConfigError, PodcardsError, PublishError
from podcards.utils.filters import truncate

app = typer.Typer(
    name="podcards",
    help="Render podcast episode data into a page of episode cards",
    no_args_is_help=True,
)
config_app = typer.Typer(name="config", help="Manage podcards configuration")
app.add_typer(config_app)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help=f"Config file (default: ./{DEFAULT_CONFIG_FILENAME})"),
]


def _load(ctx: typer.Context, config_file: Path | None) -> tuple[ConfigManager, SiteConfig]:
    """Load configuration and apply its log level."""
    manager = ConfigManager(config_file=config_file)
    config = manager.load_config()

    state = ctx.obj or {}
    setup_logging(
        verbose=state.get("verbose", False),
        log_file=state.get("log_file"),
        level=config.log_level,
    )
    return manager, config


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podcards - Render podcast episodes into a browsable page of cards."""
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podcards import __version__

    console.print(f"[bold cyan]podcards[/bold cyan] v{__version__}")


@app.command("build")
def build_site(
    ctx: typer.Context,
    config_file: ConfigOption = None,
    endpoint: Annotated[
        str | None,
        typer.Option("--endpoint", "-e", help="Episodes JSON URL or site-relative path"),
    ] = None,
    output_dir: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output directory")
    ] = None,
    template: Annotated[
        Path | None, typer.Option("--template", "-t", help="Page template (Jinja2)")
    ] = None,
    fragment: Annotated[
        str | None,
        typer.Option("--fragment", "-f", help="Episode to highlight, e.g. '#ep12'"),
    ] = None,
    no_static: Annotated[
        bool, typer.Option("--no-static", help="Skip copying the static directory")
    ] = False,
) -> None:
    """Build the episodes page.

    Examples:
        podcards build

        podcards build --endpoint https://example.com/episodes.json -o dist

        podcards build --fragment '#ep12'
    """
    try:
        manager, config = _load(ctx, config_file)

        options = BuildOptions(
            base_dir=manager.base_dir,
            endpoint=endpoint,
            output_dir=output_dir,
            template=template,
            fragment=fragment,
            copy_static=not no_static,
        )
        result = asyncio.run(SiteBuilder(config).build(options))

        if result.state == RenderState.LOADING:
            console.print(
                f"[red]✗[/red] Page template has no '{escape(config.render.container_id)}' "
                "mount point; episodes were not rendered"
            )
            sys.exit(1)

        if result.state == RenderState.EMPTY:
            console.print("[yellow]⚠[/yellow] No episodes loaded; page shows the empty notice")
        else:
            console.print(
                f"[green]✓[/green] Rendered [bold]{result.episode_count}[/bold] episode(s)"
            )
            if result.highlighted:
                console.print(f"[dim]  Highlighted #{result.highlighted}[/dim]")

        if result.static_files:
            console.print(f"[dim]  Copied {result.static_files} static file(s)[/dim]")
        console.print(f"[dim]  Wrote {result.output_file}[/dim]")

    except PublishError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)
    except PodcardsError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("episodes")
def list_episodes(
    ctx: typer.Context,
    config_file: ConfigOption = None,
    endpoint: Annotated[
        str | None,
        typer.Option("--endpoint", "-e", help="Episodes JSON URL or site-relative path"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List episodes in display order (newest first)."""
    try:
        manager, config = _load(ctx, config_file)
        source = SiteBuilder(config).create_source(
            BuildOptions(base_dir=manager.base_dir, endpoint=endpoint)
        )
        episodes = order_episodes(asyncio.run(source.fetch_episodes()))

        if json_output:
            data = [record.model_dump(by_alias=True, exclude_none=True) for record in episodes]
            print(json.dumps({"episodes": data, "total": len(data)}, indent=2, ensure_ascii=False))
            return

        if not episodes:
            console.print("[yellow]No episodes found.[/yellow]")
            return

        table = Table(title="[bold]Episodes[/bold]")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Title", style="bold")
        table.add_column("Platforms", style="green")
        table.add_column("Description", style="dim")

        for record in episodes:
            platforms = ", ".join(p for p, url in (record.links or {}).items() if url) or "—"
            description = truncate(record.description.strip(), 60) if record.has_description else "—"
            table.add_row(
                str(record.episode_number),
                escape(record.title),
                escape(platforms),
                escape(description),
            )

        console.print(table)
        console.print(f"\n[dim]Total: {len(episodes)} episode(s)[/dim]")

    except PodcardsError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@config_app.command("init")
def init_config(
    config_file: ConfigOption = None,
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing config file")
    ] = False,
) -> None:
    """Write a default configuration file."""
    try:
        path = ConfigManager(config_file=config_file).init_config(force=force)
        console.print(f"[green]✓[/green] Wrote default configuration to {path}")
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)


@config_app.command("show")
def show_config(config_file: ConfigOption = None) -> None:
    """Print the effective configuration."""
    try:
        config = ConfigManager(config_file=config_file).load_config()
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)

    data = config.model_dump(mode="json")
    print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True))


if __name__ == "__main__":
    app()
