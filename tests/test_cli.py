"""Tests for the command-line interface."""

import json

import pytest

from a11y_health import cli
from a11y_health.exceptions import ConfigurationError
from a11y_health.models.issues import CheckType, Severity, WcagLevel
from a11y_health.models.scoring import create_accessibility_issue
from a11y_health.services.health_checker import AccessibilityHealthChecker
from tests.fakes import FakeBrowserManager, RecordingAuditor


def parse(*argv):
    return cli.parse_configuration(cli.build_parser().parse_args(list(argv)))


@pytest.fixture
def fake_run(monkeypatch):
    """Run the CLI against fake pages; returns the auditor used."""
    auditor = RecordingAuditor(delay=0)
    created = []

    def factory(config):
        checker = AccessibilityHealthChecker(config, browser_manager=FakeBrowserManager(), auditor=auditor)
        created.append(checker)
        return checker

    monkeypatch.setattr(cli, "AccessibilityHealthChecker", factory)
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    auditor.created = created
    return auditor


class TestArguments:
    """Tests for flag to config translation."""

    def test_defaults(self):
        config = parse("https://example.com")
        assert config.wcag_level == WcagLevel.AA
        assert config.concurrent == 3

    def test_flags_override(self):
        config = parse(
            "https://example.com", "-l", "aaa", "-f", "json", "html", "-o", "out",
            "-c", "5", "-t", "10000", "--headless", "false", "--viewport", "1280x720",
            "--contrast", "7", "--heading-jump", "2", "-v",
        )
        assert config.wcag_level == WcagLevel.AAA
        assert [f.value for f in config.output.format] == ["json", "html"]
        assert config.output.output_dir == "out"
        assert config.output.verbose is True
        assert config.concurrent == 5
        assert config.timeout == 10000
        assert config.browser.headless is False
        assert (config.browser.viewport.width, config.browser.viewport.height) == (1280, 720)
        assert config.thresholds.color_contrast_ratio == 7
        assert config.thresholds.max_heading_jump == 2

    def test_enable_only(self):
        config = parse("https://example.com", "--enable-only", "alt-text", "form-labels")
        assert config.checks.enabled == [CheckType.ALT_TEXT, CheckType.FORM_LABELS]
        assert config.checks.disabled == []

    def test_disable(self):
        config = parse("https://example.com", "--disable", "color-contrast")
        assert not config.checks.is_enabled(CheckType.COLOR_CONTRAST)
        assert config.checks.is_enabled(CheckType.ALT_TEXT)

    def test_unknown_checker(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse("https://example.com", "--disable", "spelling")
        assert "Invalid checker: spelling" in str(exc_info.value)

    def test_bad_viewport(self):
        with pytest.raises(ConfigurationError):
            parse("https://example.com", "--viewport", "wide")

    def test_out_of_range_concurrency(self):
        with pytest.raises(ConfigurationError):
            parse("https://example.com", "-c", "20")

    def test_config_file_then_flags(self, tmp_path):
        """Flags win over the config file."""
        path = tmp_path / "a11y.json"
        path.write_text(json.dumps({"wcagLevel": "A", "concurrent": 2}))
        config = parse("https://example.com", "--config", str(path), "-c", "4")
        assert config.wcag_level == WcagLevel.A
        assert config.concurrent == 4


class TestUrls:
    """Tests for URL validation."""

    def test_adds_scheme(self):
        assert cli.validate_urls(["example.com"]) == ["https://example.com"]

    def test_keeps_valid_urls(self):
        assert cli.validate_urls(["http://localhost:3000/"]) == ["http://localhost:3000/"]

    def test_requires_a_url(self):
        with pytest.raises(ConfigurationError):
            cli.validate_urls([])

    def test_rejects_garbage(self):
        with pytest.raises(ConfigurationError):
            cli.validate_urls(["https://"])


class TestMain:
    """Tests for main() exit codes and output."""

    def test_list_checkers(self, capsys):
        assert cli.main(["--list-checkers"]) == 0
        out = capsys.readouterr().out
        for check_type in CheckType:
            assert check_type.value in out

    def test_clean_run_exits_zero(self, fake_run, capsys):
        code = cli.main(["https://example.com/a", "https://example.com/b"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Pages checked: 2" in out
        assert "No accessibility issues found! Great job!" in out

    def test_issues_exit_one(self, fake_run, capsys):
        fake_run.issues["https://example.com/a"] = [
            create_accessibility_issue(CheckType.ALT_TEXT, Severity.ERROR, WcagLevel.A, "Image missing alt attribute", "d")
        ]
        assert cli.main(["https://example.com/a"]) == 1

    def test_single_url_still_reports(self, fake_run, tmp_path):
        """A single URL goes through the full reporting path."""
        code = cli.main(["https://example.com/a", "-f", "json", "-o", str(tmp_path)])

        assert code == 0
        assert len(list(tmp_path.glob("accessibility-report-*.json"))) == 1

    def test_quick_summary_without_console(self, fake_run, tmp_path, capsys):
        cli.main(["https://example.com/a", "-f", "json", "-o", str(tmp_path)])
        out = capsys.readouterr().out
        assert "Quick Summary:" in out
        assert "Overall score: 100/100" in out

    def test_configuration_error_exits_one(self, fake_run, capsys):
        code = cli.main(["https://example.com", "-l", "B"])

        assert code == 1
        assert "Error: Invalid configuration" in capsys.readouterr().err
        assert fake_run.created == []

    def test_navigation_error_exits_one(self, fake_run, capsys):
        fake_run.failing.add("https://example.com/down")
        code = cli.main(["https://example.com/down"])

        assert code == 1
        assert "Failed to load https://example.com/down" in capsys.readouterr().err
