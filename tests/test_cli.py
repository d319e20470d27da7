# tests/test_cli.py
"""Tests for the command-line interface and configuration."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from social_audit.cli import build_report, main, print_results
from social_audit.config import AnalysisThresholds, Config, default_thresholds
from social_audit.models import RawMetadata
from social_audit.social_analyzer import evaluate_metadata


@pytest.fixture
def empty_results():
    """Scored results for a page with no tags."""
    return evaluate_metadata(RawMetadata())


class TestConfig:
    """Test cases for configuration."""

    def test_from_env(self, monkeypatch):
        """Test values are read from environment variables."""
        monkeypatch.setenv("BROWSER_TYPE", "firefox")
        monkeypatch.setenv("PAGE_TIMEOUT_MS", "45000")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("USER_AGENT", "CustomBot/1.0")

        config = Config.from_env()

        assert config.browser_type == "firefox"
        assert config.timeout == 45000
        assert config.log_level == "DEBUG"
        assert config.user_agent == "CustomBot/1.0"

    def test_defaults(self):
        """Test default thresholds match the rule sets."""
        assert default_thresholds == AnalysisThresholds()
        assert default_thresholds.og_title_max == 55
        assert default_thresholds.og_description_recommended == 55
        assert default_thresholds.og_description_max == 200
        assert default_thresholds.twitter_title_max == 70
        assert default_thresholds.twitter_description_max == 200
        assert default_thresholds.deduction_consider == 0.0


class TestCli:
    """Test cases for the CLI entry point."""

    def test_build_report(self, empty_results):
        """Test the JSON report shape."""
        report = build_report("https://example.com", empty_results)

        assert report["url"] == "https://example.com"
        assert report["score"] == 0.0
        assert report["priorities"]["ESSENTIAL"] == 4
        assert [r["uniqueName"] for r in report["results"]] == ["facebook", "twitter"]

    def test_json_output(self, empty_results, capsys):
        """Test JSON output is printed to stdout."""
        with patch("social_audit.cli.audit_url", AsyncMock(return_value=empty_results)) as audit:
            main(["https://example.com", "--output", "json"])

        audit.assert_awaited_once()
        report = json.loads(capsys.readouterr().out)
        assert report["url"] == "https://example.com"
        assert len(report["results"]) == 2

    def test_json_output_file(self, empty_results, tmp_path, capsys):
        """Test JSON output can be written to a file."""
        output_file = tmp_path / "report.json"
        with patch("social_audit.cli.audit_url", AsyncMock(return_value=empty_results)):
            main(["https://example.com", "-o", "json", "-f", str(output_file)])

        report = json.loads(output_file.read_text())
        assert report["score"] == 0.0
        assert "Results written to" in capsys.readouterr().out

    def test_text_output(self, empty_results, capsys):
        """Test text output lists scores and recommendations."""
        with patch("social_audit.cli.audit_url", AsyncMock(return_value=empty_results)):
            main(["https://example.com"])

        out = capsys.readouterr().out
        assert "Social Sharing Audit for: https://example.com" in out
        assert "Facebook sharing optimization: 0.00" in out
        assert "[ESSENTIAL]" in out

    def test_text_output_lists_urgent_first(self, capsys):
        """Test recommendations print from most to least urgent."""
        results = evaluate_metadata(RawMetadata(facebook={
            "og:title": "My Awesome Page",
            "og:description": "d" * 150,
        }))
        facebook = results[0]
        assert [r.priority.value for r in facebook.recommendations] == [
            "OPTIMIZATION", "ESSENTIAL",
        ]

        print_results("https://example.com", results[:1])

        lines = capsys.readouterr().out.splitlines()
        essential = next(i for i, line in enumerate(lines) if "[ESSENTIAL]" in line)
        optimization = next(i for i, line in enumerate(lines) if "[OPTIMIZATION]" in line)
        assert essential < optimization

    def test_browser_options_passed(self, empty_results):
        """Test CLI flags build the browser config."""
        with patch("social_audit.cli.audit_url", AsyncMock(return_value=empty_results)) as audit:
            main(["https://example.com", "--browser", "webkit", "--timeout", "5000", "--headed"])

        config = audit.call_args.args[1]
        assert config.browser_type == "webkit"
        assert config.timeout == 5000
        assert config.headless is False

    def test_failure_exits_nonzero(self, capsys):
        """Test navigation errors exit with status 1."""
        failing = AsyncMock(side_effect=RuntimeError("net::ERR_NAME_NOT_RESOLVED"))
        with patch("social_audit.cli.audit_url", failing):
            with pytest.raises(SystemExit) as exc_info:
                main(["https://this-domain-does-not-exist-12345.com"])

        assert exc_info.value.code == 1
        assert "ERR_NAME_NOT_RESOLVED" in capsys.readouterr().err
