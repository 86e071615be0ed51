"""Measure keys reported for every run."""

from zapcheck.models import AggregateCounters

HIGH_RISK_ALERTS = "high_risk_alerts"
MEDIUM_RISK_ALERTS = "medium_risk_alerts"
LOW_RISK_ALERTS = "low_risk_alerts"
INFO_RISK_ALERTS = "info_risk_alerts"
TOTAL_ALERTS = "total_alerts"
IDENTIFIED_RISK_SCORE = "identified_risk_score"

METRIC_NAMES: dict[str, str] = {
    HIGH_RISK_ALERTS: "High Risk Alerts",
    MEDIUM_RISK_ALERTS: "Medium Risk Alerts",
    LOW_RISK_ALERTS: "Low Risk Alerts",
    INFO_RISK_ALERTS: "Info Risk Alerts",
    TOTAL_ALERTS: "Total Alerts",
    IDENTIFIED_RISK_SCORE: "Identified Risk Score",
}


def build_measures(counters: AggregateCounters, risk_score: float) -> dict[str, float]:
    """Map counters and score onto measure keys, in reporting order."""
    return {
        HIGH_RISK_ALERTS: float(counters.critical),
        MEDIUM_RISK_ALERTS: float(counters.major),
        LOW_RISK_ALERTS: float(counters.minor),
        INFO_RISK_ALERTS: float(counters.info),
        TOTAL_ALERTS: float(counters.total),
        IDENTIFIED_RISK_SCORE: float(risk_score),
    }
