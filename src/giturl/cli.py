"""giturl CLI — Typer application with parse, convert, and init commands."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from giturl import __version__

app = typer.Typer(
    name="giturl",
    help="Parse git remote URLs and convert them between forms.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _load_config(config: Optional[str]):
    """Load config from cwd (or *config*), exit 2 on failure."""
    from giturl.config.loader import ConfigError, load_config

    try:
        return load_config(Path.cwd(), config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _report_invalid(exc) -> None:
    console.print(f"[bold red]Invalid URL:[/bold red] {escape(exc.raw)}: {escape(exc.reason)}")


def _parse_all(urls: List[str], verbose: bool):
    """Parse every URL; return (parsed, errors)."""
    from giturl.core.parser import InvalidURLError, classify, parse_with

    parsed = []
    errors = []
    for raw in urls:
        scheme = classify(raw)
        if verbose:
            console.print(f"[dim]{escape(raw)} → {scheme.protocol.value} parser[/dim]")
        try:
            parsed.append(parse_with(raw, scheme))
        except InvalidURLError as exc:
            errors.append(exc)
    return parsed, errors


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    urls: List[str] = typer.Argument(..., help="Git URLs to parse"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .giturl.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Break git URLs into protocol, user, host, port, path and repo."""
    from giturl.output import json_report, terminal

    cfg = _load_config(config)

    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    parsed, errors = _parse_all(urls, verbose)

    if cfg.output.format == "json":
        print(json_report.render(parsed, errors, show_raw=cfg.output.show_raw))
    else:
        terminal.render(parsed, show_raw=cfg.output.show_raw)
        for exc in errors:
            _report_invalid(exc)

    if errors:
        raise typer.Exit(code=2)


# ── convert ───────────────────────────────────────────────────────────────────


def _resolve_port(url, target, explicit: Optional[int], policy: str) -> int:
    from giturl.core.models import IMPLICIT_PORT, default_port_for

    if explicit is not None:
        return explicit
    if policy == "default":
        return default_port_for(target)
    if policy == "source":
        return url.port
    return IMPLICIT_PORT


@app.command()
def convert(
    urls: List[str] = typer.Argument(..., help="Git URLs to convert"),
    to: Optional[str] = typer.Option(None, "--to", "-t", help="Target form: ssh | git | http | https | ftp | ftps | scp"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="User for ssh/scp output (empty string drops it)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", min=0, max=65535, help="Explicit port (0 = none)"),
    port_policy: Optional[str] = typer.Option(None, "--port-policy", help="Port when --port is omitted: implicit | default | source"),
    suffix: Optional[bool] = typer.Option(None, "--suffix/--no-suffix", help="Append .git"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .giturl.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Rewrite git URLs in another form, one per line."""
    from giturl.config.schema import PORT_POLICIES, TARGETS
    from giturl.core.formatter import to_format
    from giturl.core.models import Protocol

    cfg = _load_config(config)

    # --- CLI overrides ---
    target = (to or cfg.convert.target).lower()
    if target not in TARGETS:
        console.print(f"[bold red]Invalid target:[/bold red] {escape(target)}")
        raise typer.Exit(code=2)
    policy = port_policy or cfg.convert.port_policy
    if policy not in PORT_POLICIES:
        console.print(f"[bold red]Invalid port policy:[/bold red] {escape(policy)}")
        raise typer.Exit(code=2)
    with_suffix = cfg.convert.with_suffix if suffix is None else suffix
    user_override = user if user is not None else cfg.convert.user
    protocol = Protocol(target)

    if verbose:
        console.print(f"[dim]Target: {target}[/dim]")
        console.print(f"[dim]Port policy: {policy}[/dim]")
        console.print(f"[dim]Suffix: {with_suffix}[/dim]")

    parsed, errors = _parse_all(urls, verbose)

    for url in parsed:
        print(
            to_format(
                url,
                protocol,
                user=url.user if user_override is None else user_override,
                port=_resolve_port(url, protocol, port, policy),
                with_suffix=with_suffix,
            )
        )

    for exc in errors:
        _report_invalid(exc)
    if errors:
        raise typer.Exit(code=2)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .giturl.toml"),
) -> None:
    """Generate a starter .giturl.toml in the current directory."""
    from giturl.config.defaults import DEFAULT_TOML
    from giturl.config.loader import CONFIG_FILENAME

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"giturl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """giturl — parse git remote URLs and convert them between forms."""
