"""SARIF v2.1.0 output formatter for ZAP issues."""

import json
from datetime import datetime, timezone

from zapcheck import __version__
from zapcheck.models import Issue, RunResult, Severity

SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/main/sarif-2.1/schema/sarif-schema-2.1.0.json"

SEVERITY_TO_SARIF_LEVEL = {
    Severity.CRITICAL: "error",
    Severity.MAJOR: "warning",
    Severity.MINOR: "note",
    Severity.INFO: "note",
}

ZAP_ALERT_URI = "https://www.zaproxy.org/docs/alerts/{plugin_id}/"


def _rule_id(issue: Issue) -> str:
    return f"zap/{issue.rule_key}"


def render_sarif(result: RunResult, min_severity: Severity = Severity.INFO) -> str:
    """Render the issues of a run as SARIF v2.1.0 JSON."""
    issues = [i for i in result.issues if i.severity >= min_severity]

    # One rule per plugin id; first occurrence sets the default level
    rules_map: dict[str, dict] = {}
    for issue in issues:
        rule_id = _rule_id(issue)
        if rule_id not in rules_map:
            rules_map[rule_id] = {
                "id": rule_id,
                "name": f"ZAP plugin {issue.rule_key}",
                "helpUri": ZAP_ALERT_URI.format(plugin_id=issue.rule_key),
                "defaultConfiguration": {
                    "level": SEVERITY_TO_SARIF_LEVEL[issue.severity]
                },
                "properties": {"tags": ["security", "zap"]},
            }

    sarif_results = []
    for issue in issues:
        sarif_results.append({
            "ruleId": _rule_id(issue),
            "level": SEVERITY_TO_SARIF_LEVEL[issue.severity],
            "message": {"text": issue.message or issue.rule_key},
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": result.report_path},
                    },
                    "logicalLocations": [{"name": issue.target, "kind": "module"}],
                }
            ],
            "properties": {"severity": issue.severity.value},
        })

    sarif = {
        "$schema": SARIF_SCHEMA,
        "version": "2.1.0",
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": "zapcheck",
                        "version": __version__,
                        "rules": list(rules_map.values()),
                    }
                },
                "results": sarif_results,
                "properties": {
                    "riskScore": result.risk_score,
                    "counters": result.counters.to_dict(),
                },
                "invocations": [
                    {
                        "executionSuccessful": True,
                        "endTimeUtc": datetime.now(timezone.utc).isoformat(),
                    }
                ],
            }
        ],
    }

    return json.dumps(sarif, indent=2)
