"""Tests for the console entry point and settings."""

import logging

import pytest

from ichess.app import main
from ichess.settings import AppSettings


class TestSettings:
    def test_defaults(self) -> None:
        settings = AppSettings.from_env({})
        assert settings.log_level == "WARNING"
        assert settings.show_banner

    def test_env_overrides(self) -> None:
        settings = AppSettings.from_env(
            {"ICHESS_LOG_LEVEL": "debug", "ICHESS_SHOW_BANNER": "no"}
        )
        assert settings.log_level == "DEBUG"
        assert not settings.show_banner

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ICHESS_SHOW_BANNER", "1")
        monkeypatch.setenv("ICHESS_LOG_LEVEL", "info")
        settings = AppSettings.from_env()
        assert settings.show_banner
        assert settings.log_level == "INFO"


    def test_unknown_env_level_ignored(self) -> None:
        settings = AppSettings.from_env({"ICHESS_LOG_LEVEL": "verbose"})
        assert settings.log_level == "WARNING"


@pytest.fixture
def bare_root_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip root handlers so ``logging.basicConfig`` really applies the level."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)


class TestMain:
    def test_shows_banner_and_board(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Inheritance Chess Engine" in out
        assert "8 | r |-n-|" in out
        assert "    a   b   c   d   e   f   g   h" in out

    def test_no_banner(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-banner"]) == 0
        assert "Inheritance Chess Engine" not in capsys.readouterr().out

    def test_banner_off_from_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("ICHESS_SHOW_BANNER", "false")
        assert main([]) == 0
        assert "Inheritance Chess Engine" not in capsys.readouterr().out

    def test_lists_moves(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-banner", "--moves", "g1"]) == 0
        assert "N on g1: f3 h3" in capsys.readouterr().out

    def test_boxed_in_piece(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-banner", "--moves", "a8"]) == 0
        assert "r on a8: (none)" in capsys.readouterr().out

    def test_empty_square(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--no-banner", "--moves", "e4"]) == 1
        assert "No piece on e4" in capsys.readouterr().out

    def test_bad_square(self) -> None:
        with pytest.raises(SystemExit) as info:
            main(["--moves", "z9"])
        assert info.value.code == 2

    @pytest.mark.usefixtures("bare_root_logger")
    def test_unknown_env_level_does_not_crash(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("ICHESS_LOG_LEVEL", "verbose")
        assert main(["--no-banner"]) == 0
        assert "8 | r |-n-|" in capsys.readouterr().out

    @pytest.mark.usefixtures("bare_root_logger")
    def test_unknown_level_flag_rejected(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as info:
            main(["--log-level", "verbose"])
        assert info.value.code == 2
        assert "unknown logging level" in capsys.readouterr().err

    def test_log_level_flag(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="ichess")
        assert main(["--no-banner", "--log-level", "debug", "--moves", "b1"]) == 0
        assert any("moves for" in r.getMessage() for r in caplog.records)
