"""Click-based CLI interface for zapcheck."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from zapcheck.config import load_config
from zapcheck.errors import ReportProcessingError
from zapcheck.formatters.sarif import render_sarif
from zapcheck.locator import ReportFile
from zapcheck.models import Severity
from zapcheck.report import render_json, render_table
from zapcheck.sensor import CollectingIssueSink, CollectingMetricsSink, ZapSensor

SEVERITY_CHOICES = [s.value for s in Severity]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(package_name="zapcheck")
@click.option("--config", "config_path", type=click.Path(), default=None,
              help="Path to .zapcheck.yml config file.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx, config_path, verbose):
    """zapcheck - OWASP ZAP report analysis."""
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.argument("project_root", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--report-path", type=str, default=None,
              help="ZAP XML report, relative to the project root.")
@click.option("--format", "fmt", type=click.Choice(["table", "json", "sarif"]), default="table")
@click.option("--severity", "min_severity", type=click.Choice(SEVERITY_CHOICES), default=None)
@click.option("--output", "-o", type=str, default=None, help="Write JSON report to file.")
@click.option("--strict/--no-strict", default=None, help="Skip alerts with unknown risk codes.")
@click.option("--exit-code", is_flag=True, help="Exit with code 1 if issues >= severity.")
@click.pass_context
def analyze(ctx, project_root, report_path, fmt, min_severity, output, strict, exit_code):
    """Parse a ZAP report and compute issues and risk measures."""
    try:
        config = load_config(ctx.obj.get("config_path"), project_root=project_root)
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    sev = Severity(min_severity) if min_severity else config.min_severity
    sensor = ZapSensor(
        source=ReportFile(report_path or config.report_path, project_root),
        issues=CollectingIssueSink(),
        measures=CollectingMetricsSink(),
        strict=config.strict_risk_codes if strict is None else strict,
        target=config.target,
    )

    try:
        result = sensor.execute()
    except ReportProcessingError as exc:
        raise click.ClickException(f"{exc} ({exc.__cause__})") from exc

    if fmt in ("json", "sarif"):
        if fmt == "sarif":
            text_out = render_sarif(result, min_severity=sev)
        else:
            text_out = render_json(result, min_severity=sev)
        if output:
            Path(output).write_text(text_out)
            click.echo(f"Report written to {output}")
        else:
            click.echo(text_out)
    else:
        render_table(result, min_severity=sev)
        if output:
            json_out = render_json(result, min_severity=sev)
            Path(output).write_text(json_out)
            click.echo(f"JSON report also written to {output}")

    if exit_code and any(i.severity >= sev for i in result.issues):
        sys.exit(1)
