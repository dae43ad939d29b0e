# Tests for the command-line entry point and logging setup.
# Created: 2026-10-02

import logging
from unittest.mock import patch

import pytest
from rich.console import Console

from vivarium.__main__ import main, print_features
from vivarium.config import FeatureFlags, Settings, reset_settings
from vivarium.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    with patch("vivarium.__main__.setup_logging"):
        yield
    reset_settings()


def _render(settings: Settings) -> str:
    console = Console(record=True, width=120)
    print_features(settings, console=console)
    return console.export_text()


class TestPrintFeatures:
    def test_lists_every_feature(self):
        text = _render(Settings(features=FeatureFlags(todos=False)))
        assert "reptile-management" in text
        assert "user-management" in text
        assert "todos" in text

    def test_enabled_column(self):
        text = _render(Settings(features=FeatureFlags(todos=False)))
        todos_line = next(line for line in text.splitlines() if "todos" in line)
        assert "no" in todos_line


class TestMain:
    def test_features_flag_exits_without_serving(self):
        with (
            patch("vivarium.__main__.print_features") as printed,
            patch("vivarium.__main__.run_shell") as served,
        ):
            assert main(["--features"]) == 0
        printed.assert_called_once()
        served.assert_not_called()

    def test_host_and_port_override_settings(self, monkeypatch):
        monkeypatch.setenv("VIVARIUM_PORT", "9100")
        with patch("vivarium.__main__.run_shell") as served:
            main(["--host", "0.0.0.0"])
        _, kwargs = served.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9100
        assert kwargs["dev"] is False

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "vivarium" in capsys.readouterr().out


class TestLogging:
    def test_setup_is_idempotent(self):
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        try:
            setup_logging("DEBUG")
            setup_logging("WARNING")
            ours = [h for h in root.handlers if h.get_name() == "vivarium-rich"]
            assert len(ours) == 1
            assert root.level == logging.WARNING
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.setLevel(level)
            for handler in root.handlers[:]:
                if handler not in before:
                    root.removeHandler(handler)
