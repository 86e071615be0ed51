"""Run one ZAP report through parse, classify, format and aggregate."""

import logging
import time
from typing import BinaryIO, Protocol

from zapcheck.aggregator import RiskAggregator, ScoreFunction, inherited_risk_score
from zapcheck.classifier import classify
from zapcheck.errors import ClassificationError, ReportProcessingError, ResourceUnavailableError
from zapcheck.formatter import format_finding
from zapcheck.metrics import build_measures
from zapcheck.models import AggregateCounters, Issue, RunOutcome, RunResult
from zapcheck.parser import ReportParser

logger = logging.getLogger(__name__)

REMEDIATION_HINT = (
    "Can not process ZAP report. Ensure the report is located within the project "
    "workspace and that the report path is configured to reflect it "
    "(report_path in .zapcheck.yml or --report-path)."
)


class ReportSource(Protocol):
    def open(self) -> BinaryIO | None: ...


class IssueSink(Protocol):
    def save(self, issue: Issue) -> None: ...


class MetricsSink(Protocol):
    def save(self, metric: str, value: float) -> None: ...


class CollectingIssueSink:
    def __init__(self):
        self.issues: list[Issue] = []

    def save(self, issue: Issue) -> None:
        self.issues.append(issue)


class CollectingMetricsSink:
    def __init__(self):
        self.measures: dict[str, float] = {}

    def save(self, metric: str, value: float) -> None:
        self.measures[metric] = value


class ZapSensor:
    name = "OWASP Zap-Check"

    def __init__(
        self,
        source: ReportSource,
        issues: IssueSink,
        measures: MetricsSink,
        strict: bool = False,
        target: str = "project",
        score: ScoreFunction = inherited_risk_score,
    ):
        self.source = source
        self.issues = issues
        self.measures = measures
        self.strict = strict
        self.target = target
        self.score = score
        self.parser = ReportParser()

    def execute(self) -> RunResult:
        logger.info("Process ZAP report: %s", self.source)
        start = time.monotonic()
        result = self._run()
        result.duration_seconds = round(time.monotonic() - start, 3)
        self._save_measures(result.counters, result.risk_score)
        logger.info(
            "ZAP report processed (%s): %d issue(s) in %.3fs",
            result.outcome.value, len(result.issues), result.duration_seconds,
        )
        return result

    def _run(self) -> RunResult:
        report_path = str(self.source)
        try:
            stream = self.source.open()
        except ResourceUnavailableError as exc:
            logger.warning("Skipping ZAP report: %s", exc)
            stream = None
        if stream is None:
            return RunResult(outcome=RunOutcome.REPORT_MISSING, report_path=report_path)

        try:
            report = self.parser.parse(stream)
        except Exception as exc:
            raise ReportProcessingError(REMEDIATION_HINT) from exc

        if report is None:
            return RunResult(outcome=RunOutcome.REPORT_EMPTY, report_path=report_path)

        result = RunResult(outcome=RunOutcome.NO_FINDINGS, report_path=report_path)
        aggregator = RiskAggregator(self.score)
        for finding in report.site.findings:
            try:
                severity = classify(finding.risk_code, strict=self.strict)
            except ClassificationError as exc:
                logger.error("Skipping alert %s: %s", finding.plugin_id, exc)
                result.skipped.append(finding)
                continue
            issue = Issue(
                rule_key=finding.plugin_id,
                severity=severity,
                message=format_finding(finding),
                target=self.target,
            )
            self.issues.save(issue)
            result.issues.append(issue)
            aggregator.add(severity)

        if report.site.findings:
            result.outcome = RunOutcome.PROCESSED
        result.counters = aggregator.counters
        result.risk_score = aggregator.score()
        return result

    def _save_measures(self, counters: AggregateCounters, risk_score: float) -> None:
        for metric, value in build_measures(counters, risk_score).items():
            self.measures.save(metric, value)

    def __str__(self) -> str:
        return "OWASP Zed Attack Proxy"
