"""Data models for parsed ZAP reports, issues and run results."""

from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    CRITICAL = "CRITICAL"
    MAJOR = "MAJOR"
    MINOR = "MINOR"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        return {
            Severity.CRITICAL: 3,
            Severity.MAJOR: 2,
            Severity.MINOR: 1,
            Severity.INFO: 0,
        }[self]

    def __ge__(self, other: "Severity") -> bool:
        return self.rank >= other.rank

    def __gt__(self, other: "Severity") -> bool:
        return self.rank > other.rank

    def __le__(self, other: "Severity") -> bool:
        return self.rank <= other.rank

    def __lt__(self, other: "Severity") -> bool:
        return self.rank < other.rank


@dataclass(frozen=True)
class Finding:
    """One alert item from the report, fields kept as the scanner wrote them."""

    plugin_id: str
    risk_code: int
    confidence: str = ""
    description: str = ""
    uri: str = ""
    param: str = ""
    attack: str = ""
    evidence: str = ""
    name: str = ""
    solution: str = ""
    reference: str = ""
    other_info: str = ""
    cwe_id: str = ""
    wasc_id: str = ""


@dataclass(frozen=True)
class Site:
    name: str | None = None
    host: str | None = None
    port: str | None = None
    ssl: str | None = None
    findings: tuple[Finding, ...] = ()


@dataclass(frozen=True)
class Report:
    site: Site
    version: str | None = None
    generated: str | None = None


@dataclass(frozen=True)
class Issue:
    rule_key: str
    severity: Severity
    message: str
    target: str

    def to_dict(self) -> dict:
        return {
            "rule_key": self.rule_key,
            "severity": self.severity.value,
            "message": self.message,
            "target": self.target,
        }


@dataclass
class AggregateCounters:
    critical: int = 0
    major: int = 0
    minor: int = 0
    info: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "critical": self.critical,
            "major": self.major,
            "minor": self.minor,
            "info": self.info,
            "total": self.total,
        }


class RunOutcome(Enum):
    """How a run ended when it did not fail."""

    REPORT_MISSING = "report-missing"
    REPORT_EMPTY = "report-empty"
    NO_FINDINGS = "no-findings"
    PROCESSED = "processed"


@dataclass
class RunResult:
    outcome: RunOutcome
    report_path: str
    issues: list[Issue] = field(default_factory=list)
    counters: AggregateCounters = field(default_factory=AggregateCounters)
    risk_score: float = 0.0
    skipped: list[Finding] = field(default_factory=list)
    duration_seconds: float = 0.0

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "report_path": self.report_path,
            "issues": [i.to_dict() for i in self.issues],
            "counters": self.counters.to_dict(),
            "risk_score": self.risk_score,
            "skipped": [f.plugin_id for f in self.skipped],
            "duration_seconds": self.duration_seconds,
        }
