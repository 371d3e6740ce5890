"""CLI interface for sheetscan."""

import json
import logging
import sys
from pathlib import Path

import click

from sheetscan.config import Config, parse_port
from sheetscan.exceptions import ConfigError
from sheetscan.scanner import KeywordScanOptions, Scanner, ScanOptions, ScanResult
from sheetscan.scanner.scanner import is_accessible


@click.group()
@click.option(
    "--root",
    type=click.Path(path_type=Path),
    envvar="SHEETSCAN_PROJECT_ROOT",
    help="Project root to scan (defaults to the current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, root: Path | None, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    try:
        config = Config.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if root is not None:
        config.project_root = root
    ctx.obj["config"] = config


@cli.command()
@click.argument("path", default="")
@click.option("--ext", "extensions", help="Comma-separated extensions, e.g. .pdf,.docx")
@click.option("--starts-with", help="Keep names starting with this prefix")
@click.option("--contains", help="Keep names containing this text")
@click.option("--latest-per-sheet", is_flag=True, help="Keep only the newest revision per sheet")
@click.option("--no-recursive", is_flag=True, help="Do not descend into subdirectories")
@click.option("--json", "as_json", is_flag=True, help="Print the JSON response envelope")
@click.pass_context
def scan(
    ctx: click.Context,
    path: str,
    extensions: str | None,
    starts_with: str | None,
    contains: str | None,
    latest_per_sheet: bool,
    no_recursive: bool,
    as_json: bool,
) -> None:
    """Scan PATH (relative to the project root) and list matching files."""
    config: Config = ctx.obj["config"]
    options = ScanOptions.from_query(
        config.project_root,
        path=path,
        extensions=extensions,
        name_starts_with=starts_with,
        name_contains=contains,
        latest_per_sheet=latest_per_sheet,
        recursive=not no_recursive,
    )
    result = Scanner().scan_path(options)
    _print_result(result, as_json, show_sheet=True)


@cli.command()
@click.argument("keywords", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON response envelope")
@click.pass_context
def keywords(ctx: click.Context, keywords: tuple[str, ...], as_json: bool) -> None:
    """Search the whole project root for names containing any KEYWORD."""
    config: Config = ctx.obj["config"]
    options = KeywordScanOptions.from_query(config.project_root, ",".join(keywords))
    result = Scanner().scan_keywords(options)
    _print_result(result, as_json, show_sheet=False)


@cli.command()
@click.pass_context
def count(ctx: click.Context) -> None:
    """Count all non-ignored files under the project root."""
    config: Config = ctx.obj["config"]
    click.echo(f"{Scanner().count_files(config.project_root):,}")


@cli.command("check-root")
@click.pass_context
def check_root(ctx: click.Context) -> None:
    """Report whether the project root is accessible."""
    config: Config = ctx.obj["config"]
    if is_accessible(config.project_root):
        click.echo(f"Accessible: {config.project_root}")
        return
    click.echo(f"Error: Project root not accessible: {config.project_root}", err=True)
    sys.exit(1)


@cli.command()
@click.option("--host", default=None, help="Interface to bind (default 0.0.0.0)")
@click.option("--port", default=None, help="Port to listen on (default 3456)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: str | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from sheetscan.server import create_app

    config: Config = ctx.obj["config"]
    try:
        if port is not None:
            config.server.port = parse_port(port)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if host:
        config.server.host = host

    click.echo(f"Sheet Scan API on http://{config.server.host}:{config.server.port}")
    click.echo(f"Project: {config.project_root}")
    uvicorn.run(create_app(config), host=config.server.host, port=config.server.port)


def _print_result(result: ScanResult, as_json: bool, show_sheet: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if not result.ok:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    if result.files:
        header = "Modified".ljust(18) + "Size".rjust(10) + "  "
        if show_sheet:
            header += "Sheet".ljust(14)
        header += "Path"
        click.echo(header)
        click.echo("-" * 80)

    for f in result.files:
        line = f"{f.record.modified.strftime('%Y-%m-%d %H:%M'):<18}{f.size_label:>10}  "
        if show_sheet:
            line += f"{_truncate(f.sheet or '', 13):<14}"
        line += f.record.relative_path
        click.echo(line)

    click.echo()
    click.echo(f"{result.count:,} files ({_format_duration(result.elapsed_seconds)})")
    if result.skipped:
        click.echo(f"Skipped {len(result.skipped):,} unreadable entries", err=True)


def _format_duration(seconds: float) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {secs}s"
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def _truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
