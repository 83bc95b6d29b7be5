"""
Defines the command-line interface for the song source using Typer.
"""

import asyncio
import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from dj_youtube_source import __version__
from dj_youtube_source.exceptions import ConfigurationError
from dj_youtube_source.models.config import SourceConfig
from dj_youtube_source.source import YoutubeSource
from dj_youtube_source.storage.config_manager import ConfigManager

from .formatters import print_fetch_summary, print_results_table, print_validation_table

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=False,
        )
    ],
)
log = logging.getLogger("dj_youtube_source")

app = typer.Typer(
    name="dj-youtube",
    help="Search YouTube and fetch audio the way the DJ song source does.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "dj-youtube-source"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


def _auth_overrides(key: str | None, token: str | None) -> dict[str, str]:
    """Builds auth overrides from --key/--token; a token switches to OAuth."""
    if key and token:
        raise typer.BadParameter("Use either --key or --token, not both.")
    if key:
        return {"type": "key", "key": key}
    if token:
        return {"type": "oauth", "token": token}
    return {}


def _load_config(key: str | None, token: str | None) -> SourceConfig:
    return ConfigManager(CONFIG_FILE).load_config(_auth_overrides(key, token))


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
):
    """YouTube song source CLI"""
    if version:
        console.print(f"[bold]dj-youtube-source[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "INFO"
    if verbose >= 2:
        log_level = "DEBUG"
    logging.getLogger("dj_youtube_source").setLevel(log_level)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    key: str | None = typer.Option(None, "--key", help="YouTube Data API key."),
    token: str | None = typer.Option(None, "--token", help="OAuth access token."),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite existing credentials without asking."
    ),
):
    """Store YouTube Data API credentials in the configuration file."""
    settings = _auth_overrides(key, token)
    if not settings:
        console.print("[red]✗ Provide --key or --token.[/red]")
        raise typer.Exit(code=1)

    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    ConfigManager(CONFIG_FILE).save_new_config(settings)
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text search string."),
    max_results: int = typer.Option(
        10, "-n", "--max-results", min=1, max=50, help="Maximum number of results."
    ),
    key: str | None = typer.Option(None, "--key", help="Override the stored API key."),
    token: str | None = typer.Option(None, "--token", help="Use an OAuth token."),
):
    """Search YouTube for songs."""
    config = _load_config(key, token)

    async def _search_async():
        async with YoutubeSource() as source:
            await source.init(log, config)
            return await source.search(max_results, query)

    results = asyncio.run(_search_async())
    print_results_table(results, query)


@app.command()
def fetch(
    track_id: str = typer.Argument(..., help="Video id from the search results."),
    directory: Path = typer.Option(
        Path("."),
        "-d",
        "--dir",
        file_okay=False,
        help="Directory to store the downloaded file in.",
    ),
    key: str | None = typer.Option(None, "--key", help="Override the stored API key."),
    token: str | None = typer.Option(None, "--token", help="Use an OAuth token."),
):
    """Download the audio of a video."""
    config = _load_config(key, token)
    directory.mkdir(parents=True, exist_ok=True)

    async def _fetch_async():
        async with YoutubeSource() as source:
            await source.init(log, config)
            return await source.fetch(track_id, directory)

    path = Path(asyncio.run(_fetch_async()))
    print_fetch_summary(path, path.stat().st_size)


@app.command()
def validate():
    """Validate the current configuration."""
    try:
        config = ConfigManager(CONFIG_FILE).load_config()
    except ConfigurationError as e:
        console.print(f"[red]✗ Configuration is invalid: {e}[/red]")
        raise typer.Exit(code=1) from e
    print_validation_table(config, CONFIG_FILE)
