"""Tests for configuration file support."""

import pytest

from zapcheck.config import Config, load_config
from zapcheck.models import Severity


class TestConfig:
    def test_default_config(self):
        config = Config()
        assert config.min_severity == Severity.INFO
        assert config.report_path == "zaproxy-report.xml"
        assert config.strict_risk_codes is False
        assert config.target == "project"

    def test_load_from_file(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("""\
report_path: build/zap/report.xml
severity_threshold: MAJOR
strict_risk_codes: true
target: webapp
""")
        config = load_config(config_path=str(cfg_file))
        assert config.report_path == "build/zap/report.xml"
        assert config.min_severity == Severity.MAJOR
        assert config.strict_risk_codes is True
        assert config.target == "webapp"

    def test_load_from_project_root(self, tmp_path):
        (tmp_path / ".zapcheck.yml").write_text("severity_threshold: MINOR\n")
        config = load_config(project_root=str(tmp_path))
        assert config.severity_threshold == "MINOR"

    def test_no_config_file_returns_defaults(self, tmp_path):
        config = load_config(project_root=str(tmp_path))
        assert config == Config()

    def test_empty_config_file(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("")
        assert load_config(config_path=str(cfg_file)) == Config()

    def test_explicit_config_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(config_path=str(tmp_path / "missing.yml"))

    def test_invalid_yaml(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text(": : invalid: [\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(config_path=str(cfg_file))

    def test_not_a_mapping(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must be a YAML mapping"):
            load_config(config_path=str(cfg_file))

    def test_invalid_severity(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("severity_threshold: HIGH\n")
        with pytest.raises(ValueError, match="severity_threshold"):
            load_config(config_path=str(cfg_file))

    def test_invalid_report_path(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("report_path: 42\n")
        with pytest.raises(ValueError, match="report_path"):
            load_config(config_path=str(cfg_file))

    def test_invalid_strict_flag(self, tmp_path):
        cfg_file = tmp_path / ".zapcheck.yml"
        cfg_file.write_text("strict_risk_codes: maybe\n")
        with pytest.raises(ValueError, match="strict_risk_codes must be a boolean"):
            load_config(config_path=str(cfg_file))
