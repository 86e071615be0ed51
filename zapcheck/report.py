"""Report generation - rich terminal tables and JSON output."""

import json
from datetime import datetime

from rich.console import Console
from rich.table import Table

from zapcheck.metrics import METRIC_NAMES, build_measures
from zapcheck.models import Issue, RunOutcome, RunResult, Severity

SEVERITY_COLORS = {
    Severity.CRITICAL: "bold red",
    Severity.MAJOR: "red",
    Severity.MINOR: "yellow",
    Severity.INFO: "dim",
}

OUTCOME_MESSAGES = {
    RunOutcome.REPORT_MISSING: "No ZAP report found at {path}, nothing to analyze.",
    RunOutcome.REPORT_EMPTY: "ZAP report {path} is empty, nothing to analyze.",
    RunOutcome.NO_FINDINGS: "ZAP report {path} contains no alerts.",
}


def filter_issues(result: RunResult, min_severity: Severity = Severity.INFO) -> list[Issue]:
    return [i for i in result.issues if i.severity >= min_severity]


def render_table(
    result: RunResult,
    min_severity: Severity = Severity.INFO,
    console: Console | None = None,
) -> None:
    console = console or Console()

    if result.outcome in OUTCOME_MESSAGES:
        message = OUTCOME_MESSAGES[result.outcome].format(path=result.report_path)
        console.print(f"\n[bold yellow]{message}[/]")
        _print_summary(console, result)
        return

    issues = sorted(filter_issues(result, min_severity), key=lambda i: i.severity.rank, reverse=True)

    if not issues:
        console.print("\n[bold green]No alerts above the severity threshold.[/]")
        _print_summary(console, result)
        return

    table = Table(title="ZAP Alerts", show_lines=True)
    table.add_column("Severity", width=10)
    table.add_column("Plugin", width=10)
    table.add_column("Details")

    for issue in issues:
        color = SEVERITY_COLORS[issue.severity]
        table.add_row(
            f"[{color}]{issue.severity.value}[/]",
            issue.rule_key,
            issue.message,
        )

    console.print()
    console.print(table)
    _print_summary(console, result)


def _print_summary(console: Console, result: RunResult) -> None:
    counts = result.counters.to_dict()

    parts = []
    for sev in Severity:
        count = counts[sev.value.lower()]
        if count > 0:
            color = SEVERITY_COLORS[sev]
            parts.append(f"[{color}]{sev.value}: {count}[/]")

    console.print(
        f"\n[bold]Summary:[/] {result.counters.total} alert(s) | {' | '.join(parts) if parts else 'Clean'}"
    )
    console.print(f"Risk score: {result.risk_score:g} | Duration: {result.duration_seconds:.2f}s")
    if result.skipped:
        console.print(f"[yellow]Skipped alerts with unknown risk code: {len(result.skipped)}[/]")
    console.print()


def render_json(result: RunResult, min_severity: Severity = Severity.INFO) -> str:
    measures = build_measures(result.counters, result.risk_score)
    output = {
        "$schema": "zapcheck-v1",
        "generated_at": datetime.now().isoformat(),
        "outcome": result.outcome.value,
        "report_path": result.report_path,
        "issues": [i.to_dict() for i in filter_issues(result, min_severity)],
        "measures": [
            {"key": key, "name": METRIC_NAMES[key], "value": value}
            for key, value in measures.items()
        ],
        "skipped": [f.plugin_id for f in result.skipped],
        "duration_seconds": result.duration_seconds,
    }

    return json.dumps(output, indent=2)
