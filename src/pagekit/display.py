"""Rich terminal display — results, video details, errors."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pagekit.video import Video

console = Console()


def display_result(label: str, value: object) -> None:
    """Print a single labelled result."""
    text = Text(f"{label}: ", style="dim")
    text.append(str(value), style="bold bright_cyan")
    console.print(text)


def display_error(message: str, hint: str | None = None) -> None:
    console.print(f"[red]{message}[/red]")
    if hint:
        console.print(f"[dim]{hint}[/dim]")


def display_video(video: Video) -> None:
    """Show the URIs and markup derived from a video as a Rich panel."""
    table = Table(show_header=False, box=None, padding=(0, 1), expand=True)
    table.add_column("Field", style="dim", width=10, justify="right")
    table.add_column("Value", ratio=1)

    rows = [
        ("id", video.video_id),
        ("uri", video.uri),
        ("embed uri", video.embed_uri),
        ("image", video.image),
        ("embed", video.embed),
        ("link", video.link),
    ]
    for field, value in rows:
        table.add_row(field, Text(value or "—", style="bright_white" if value else "dim"))

    panel = Panel(
        table,
        title=f"[bold bright_magenta]{(video.provider or 'video').upper()}[/bold bright_magenta]",
        border_style="bright_magenta",
        padding=(0, 1),
    )
    console.print(panel)
