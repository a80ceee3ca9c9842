"""Rich terminal reporter — one table row per parsed URL."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from giturl.core.models import GitURL, Protocol
from giturl.core.parser import InvalidURLError

_PROTOCOL_STYLE = {
    Protocol.SSH: "bold green",
    Protocol.SCP: "green",
    Protocol.GIT: "bold magenta",
    Protocol.HTTP: "yellow",
    Protocol.HTTPS: "bold yellow",
    Protocol.FTP: "cyan",
    Protocol.FTPS: "bold cyan",
}


def _dash(value: str) -> str:
    return escape(value) if value else "-"


def render(
    urls: Sequence[GitURL],
    errors: Sequence[InvalidURLError] = (),
    *,
    show_raw: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print parsed URLs as a table, then any parse errors."""
    console = console or Console()

    if urls:
        table = Table(title="Git URLs", show_lines=False, title_style="bold", border_style="dim")
        if show_raw:
            table.add_column("URL", style="dim", overflow="fold")
        table.add_column("Protocol", justify="center")
        table.add_column("User", style="cyan")
        table.add_column("Host", style="magenta")
        table.add_column("Port", justify="right", style="green")
        table.add_column("Path")
        table.add_column("Repo", style="bold")

        for url in urls:
            row = [
                f"[{_PROTOCOL_STYLE[url.protocol]}]{url.protocol.value}[/]",
                _dash(url.user),
                escape(url.host),
                str(url.port) if url.port else "-",
                _dash(url.path),
                escape(url.repo),
            ]
            if show_raw:
                row.insert(0, escape(url.raw))
            table.add_row(*row)

        console.print(table)

    for err in errors:
        console.print(f"[bold red]Invalid URL:[/bold red] {escape(err.raw)}: {escape(err.reason)}")
