"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dj_youtube_source.models.config import SourceConfig
from dj_youtube_source.models.result import SearchResult
from dj_youtube_source.utils.formatting import format_size


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "AuthConfigError": [
            "• Run `dj-youtube init --key <API_KEY>` to store a key.",
            "• Or pass --key / --token directly on the command line.",
        ],
        "ConfigurationError": [
            "• Run `dj-youtube init` to create a configuration file.",
        ],
        "SearchError": [
            "• Check that your API key is valid and the YouTube Data API is enabled.",
            "• Your daily quota may be exhausted; try again tomorrow.",
            "• Check your internet connection.",
        ],
        "StreamInfoError": [
            "• The video may be private, removed, or region-locked.",
            "• Updating yt-dlp often fixes extraction failures.",
        ],
        "DurationLimitError": [
            "• Only videos up to 10 minutes long can be fetched.",
        ],
        "NoAudioRenditionError": [
            "• This video has no audio-only webm stream available.",
            "• Try another upload of the same song.",
        ],
        "DownloadError": [
            "• A network connection issue occurred during the download.",
            "• Please try again in a few minutes.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(Text("\n".join(suggestions)))

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_results_table(results: Sequence[SearchResult], query: str):
    """Displays search results, one row per video."""
    console = Console()
    if not results:
        console.print(f"[yellow]No results for[/yellow] '{query}'.")
        return

    table = Table(title=f"Results for '{query}'", box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Channel", style="magenta")

    for i, result in enumerate(results, start=1):
        table.add_row(str(i), result.id, result.title, result.artist or "")

    console.print(table)


def print_fetch_summary(path: Path, size_bytes: int):
    """Displays the location and size of a fetched file."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()
    table.add_row("File:", f"[dim]{path}[/dim]")
    table.add_row("Size:", format_size(size_bytes))
    console.print(
        Panel(table, title="[bold green]✓ Downloaded[/bold green]", border_style="green")
    )


def print_validation_table(config: SourceConfig, config_path: Path):
    """Displays a summary of the current settings, hiding the credential."""
    console = Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    auth = config.auth
    auth_method = "API key" if auth.type == "key" else "OAuth token"
    secret = auth.key if auth.type == "key" else auth.token

    table.add_row("Config File:", f"[dim]{config_path}[/dim]")
    table.add_row("Auth Method:", f"[green]{auth_method}[/green]")
    table.add_row("Credential:", f"{secret[:4]}… (hidden)")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Validated Settings[/bold green]",
            border_style="green",
        )
    )
