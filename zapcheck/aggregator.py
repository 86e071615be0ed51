"""Severity counters and the weighted risk score."""

from collections.abc import Callable, Iterable
from typing import assert_never

from zapcheck.models import AggregateCounters, Severity

ScoreFunction = Callable[[int, int, int], float]

CRITICAL_WEIGHT = 5
MAJOR_WEIGHT = 3
MINOR_WEIGHT = 1


def inherited_risk_score(critical: int, major: int, minor: int) -> float:
    """Weighted sum of critical, major and minor counts. INFO never counts."""
    if critical < 0 or major < 0 or minor < 0:
        raise ValueError("Risk score counts must be non-negative")
    return float(critical * CRITICAL_WEIGHT + major * MAJOR_WEIGHT + minor * MINOR_WEIGHT)


class RiskAggregator:
    """Accumulates severities one at a time."""

    def __init__(self, score: ScoreFunction = inherited_risk_score):
        self.counters = AggregateCounters()
        self._score = score

    def add(self, severity: Severity) -> None:
        match severity:
            case Severity.CRITICAL:
                self.counters.critical += 1
            case Severity.MAJOR:
                self.counters.major += 1
            case Severity.MINOR:
                self.counters.minor += 1
            case Severity.INFO:
                self.counters.info += 1
            case _:
                assert_never(severity)
        self.counters.total += 1

    def score(self) -> float:
        c = self.counters
        return self._score(c.critical, c.major, c.minor)


def aggregate(
    severities: Iterable[Severity],
    score: ScoreFunction = inherited_risk_score,
) -> tuple[AggregateCounters, float]:
    aggregator = RiskAggregator(score)
    for severity in severities:
        aggregator.add(severity)
    return aggregator.counters, aggregator.score()
