from pathlib import Path
from types import SimpleNamespace

import pytest

from mongosh_clone import logging_utils
from mongosh_clone.config import get_settings
from mongosh_clone.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("ESCAPE_MODE", "OUTPUT_INDENT", "LOG_LEVEL", "LOG_PROFILE"):
        monkeypatch.delenv(f"MONGOSH_CLONE_{name}", raising=False)


def test_defaults() -> None:
    settings = get_settings()
    assert settings.escape_mode == "single"
    assert settings.output_indent == 2
    assert settings.log_level == "WARNING"
    assert settings.log_profile == "default"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGOSH_CLONE_ESCAPE_MODE", "parity")
    monkeypatch.setenv("MONGOSH_CLONE_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.escape_mode == "parity"
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("MONGOSH_CLONE_OUTPUT_INDENT=0\n", encoding="utf-8")
    assert get_settings().output_indent == 0


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONGOSH_CLONE_ESCAPE_MODE", "parity")
    assert get_settings(escape_mode="single").escape_mode == "single"


@pytest.mark.parametrize("overrides", [{"escape_mode": "double"}, {"log_level": "loud"}, {"output_indent": -1}])
def test_invalid_values_raise_configuration_error(overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigurationError):
        get_settings(**overrides)


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    removed: list[object] = []
    fake_logger = SimpleNamespace(
        remove=lambda *args: removed.append(args),
        add=lambda *args, **kwargs: 1,
        enable=lambda name: None,
    )
    monkeypatch.setattr(logging_utils, "_CONFIGURED", None)
    monkeypatch.setattr(logging_utils, "logger", fake_logger)

    logging_utils.configure_logging("info")
    logging_utils.configure_logging("INFO")
    assert logging_utils._CONFIGURED == ("default", "INFO")
    assert len(removed) == 1

    logging_utils.configure_logging("debug", profile="rich")
    assert logging_utils._CONFIGURED == ("rich", "DEBUG")
    assert len(removed) == 2
