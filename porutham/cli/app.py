"""Typer application for the porutham command line interface."""

from __future__ import annotations

import json
from typing import Optional

import typer
import yaml

from porutham.config import config_path, ensure_default_config, load_settings, read_settings
from porutham.engine import (
    MatchReport,
    UnknownStarError,
    all_stars,
    calculate_compatibility,
    default_star,
)

app = typer.Typer(help="Nakshatra porutham compatibility tools.")
config_app = typer.Typer(help="Inspect the persisted configuration.")
app.add_typer(config_app, name="config")

_BAND_COLORS = {
    "high": typer.colors.GREEN,
    "medium": typer.colors.YELLOW,
    "low": typer.colors.RED,
}


def _format_score(value: float) -> str:
    return f"{value:g}"


def _report_table(report: MatchReport) -> str:
    headers = ["Porutham", "Score", "Status", "Measures"]
    rows = [
        [
            item.name,
            f"{_format_score(item.score)}/{_format_score(item.max_score)}",
            item.status,
            item.description,
        ]
        for item in report.results
    ]
    widths = [max(len(row[idx]) for row in [headers, *rows]) for idx in range(len(headers))]
    lines = ["  ".join(text.ljust(widths[idx]) for idx, text in enumerate(headers))]
    lines.append("  ".join("-" * width for width in widths))
    for row in rows:
        lines.append("  ".join(text.ljust(widths[idx]) for idx, text in enumerate(row)))
    return "\n".join(lines)


@app.command("match")
def match(
    groom: str = typer.Argument(..., help="Groom's nakshatra."),
    bride: str = typer.Argument(..., help="Bride's nakshatra."),
    as_json: bool = typer.Option(False, "--json", help="Emit the report as JSON."),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--fallback",
        help="Reject unknown star names instead of substituting the default star.",
    ),
    normalize: Optional[bool] = typer.Option(
        None,
        "--normalize/--exact",
        help="Match star names ignoring case and surrounding whitespace.",
    ),
) -> None:
    """Run the ten-porutham check for GROOM and BRIDE."""

    try:
        cfg = read_settings().matching
    except (yaml.YAMLError, ValueError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
    try:
        report = calculate_compatibility(
            groom,
            bride,
            strict=cfg.strict if strict is None else strict,
            normalize=cfg.normalize_names if normalize is None else normalize,
        )
    except UnknownStarError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(2) from exc

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    typer.echo(
        f"Groom: {report.groom_star.name} ({report.groom_star.rashi})  "
        f"Bride: {report.bride_star.name} ({report.bride_star.rashi})  "
        f"Count: {report.count}"
    )
    for role in report.fallbacks:
        typer.secho(
            f"Unknown {role} star; using {default_star().name}.",
            fg=typer.colors.YELLOW,
            err=True,
        )
    typer.echo(_report_table(report))
    typer.secho(
        f"Total: {_format_score(report.total_score)}/{_format_score(report.total_possible)}"
        f"  {report.verdict}",
        fg=_BAND_COLORS.get(report.band),
        bold=True,
    )


@app.command("stars")
def stars(as_json: bool = typer.Option(False, "--json", help="Emit JSON.")) -> None:
    """List the 27 nakshatras in wheel order."""

    records = all_stars()
    if as_json:
        typer.echo(json.dumps([star.to_dict() for star in records], indent=2))
        return
    for star in records:
        typer.echo(
            f"{star.id:>2}  {star.name:<16} {star.rashi:<11} {star.gana:<9} "
            f"{star.yoni:<9} {star.rajju:<6} {star.lord}"
        )


@config_app.command("path")
def config_show_path() -> None:
    """Print the configuration file location."""

    typer.echo(str(config_path()))


@config_app.command("init")
def config_init() -> None:
    """Create the configuration file with defaults if it does not exist."""

    typer.echo(str(ensure_default_config()))


@config_app.command("show")
def config_show() -> None:
    """Print the effective configuration as YAML."""

    try:
        settings = load_settings()
    except (yaml.YAMLError, ValueError) as exc:
        typer.secho(f"Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc
    typer.echo(yaml.safe_dump(settings.model_dump(), sort_keys=False).rstrip())


@app.command("serve-api")
def serve_api(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload (development only)."),
    log_level: str = typer.Option("info", "--log-level", help="Log level for uvicorn."),
) -> None:
    """Run the HTTP service using uvicorn."""

    import uvicorn

    try:
        uvicorn.run(
            "porutham.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
        )
    except Exception as exc:  # pragma: no cover - runtime server failure
        typer.secho(f"uvicorn exited with an error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


__all__ = ["app"]
