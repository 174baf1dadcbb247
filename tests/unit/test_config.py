from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from binrec import config
from binrec.domain.models import to_float32

DEFAULT_RECORD_COUNT = 4
DEFAULT_MATCH_ID = 2
DEFAULT_OVERRIDE_SCORE = 100.0


def test_get_settings_defaults() -> None:
    settings = config.get_settings()

    assert settings.data_file == Path("data.bin")
    assert settings.record_count == DEFAULT_RECORD_COUNT
    assert settings.match_id == DEFAULT_MATCH_ID
    assert settings.override_score == DEFAULT_OVERRIDE_SCORE
    assert settings.log_level == "INFO"
    assert settings.log_json is False


def test_get_settings_is_cached() -> None:
    assert config.get_settings() is config.get_settings()


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("BINREC_DATA_FILE", "/tmp/people.bin")
    monkeypatch.setenv("BINREC_RECORD_COUNT", "10")
    monkeypatch.setenv("LOG_JSON", "true")
    config.get_settings.cache_clear()

    settings = config.get_settings()

    assert settings.data_file == Path("/tmp/people.bin")
    assert settings.record_count == 10
    assert settings.log_json is True


def test_dotenv_file_is_read(tmp_path, monkeypatch) -> None:
    # isolated_settings already chdir'd into tmp_path
    (tmp_path / ".env").write_text("BINREC_MATCH_ID=7\n", encoding="utf-8")
    config.get_settings.cache_clear()

    assert config.get_settings().match_id == 7


def test_negative_record_count_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("BINREC_RECORD_COUNT", "-1")
    with pytest.raises(ValidationError):
        config.Settings()


def test_fields_accept_python_names() -> None:
    settings = config.Settings(record_count=1, match_id=9)
    assert settings.record_count == 1
    assert settings.match_id == 9


@pytest.mark.parametrize("value", ["1e39", "nan", "inf"])
def test_unstorable_override_score_fails_at_startup(monkeypatch, value: str) -> None:
    monkeypatch.setenv("BINREC_OVERRIDE_SCORE", value)
    config.get_settings.cache_clear()

    with pytest.raises(ValidationError, match="float32|finite"):
        config.get_settings()


def test_override_score_is_rounded_to_float32(monkeypatch) -> None:
    monkeypatch.setenv("BINREC_OVERRIDE_SCORE", "17.4")
    config.get_settings.cache_clear()

    assert config.get_settings().override_score == to_float32(17.4)
