"""Configuration file support for zapcheck (.zapcheck.yml)."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from zapcheck.models import Severity

DEFAULT_CONFIG_NAME = ".zapcheck.yml"
DEFAULT_REPORT_PATH = "zaproxy-report.xml"


@dataclass
class Config:
    """zapcheck configuration loaded from .zapcheck.yml."""

    report_path: str = DEFAULT_REPORT_PATH
    severity_threshold: str = "INFO"
    strict_risk_codes: bool = False
    target: str = "project"

    @property
    def min_severity(self) -> Severity:
        return Severity(self.severity_threshold)


def load_config(config_path: str | None = None, project_root: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Priority: explicit --config path > .zapcheck.yml in project root > defaults.
    """
    path = None

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    elif project_root:
        candidate = Path(project_root) / DEFAULT_CONFIG_NAME
        if candidate.exists():
            path = candidate

    if path is None:
        return Config()

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must be a YAML mapping, got {type(raw).__name__}")

    return _parse_config(raw)


def _parse_config(raw: dict) -> Config:
    """Parse and validate raw YAML dict into a Config object."""
    config = Config()

    if "report_path" in raw:
        val = raw["report_path"]
        if not isinstance(val, str) or not val.strip():
            raise ValueError("report_path must be a non-empty string")
        config.report_path = val

    if "severity_threshold" in raw:
        sev = raw["severity_threshold"]
        valid = {s.value for s in Severity}
        if sev not in valid:
            raise ValueError(f"severity_threshold must be one of {valid}, got '{sev}'")
        config.severity_threshold = sev

    if "strict_risk_codes" in raw:
        val = raw["strict_risk_codes"]
        if not isinstance(val, bool):
            raise ValueError("strict_risk_codes must be a boolean")
        config.strict_risk_codes = val

    if "target" in raw:
        val = raw["target"]
        if not isinstance(val, str):
            raise ValueError("target must be a string")
        config.target = val

    return config
