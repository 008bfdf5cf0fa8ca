"""Tests for typedash.core.config – YAML settings loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from typedash.core.config import CONFIG_ENV_VAR, Settings, default_config_path, load_settings
from typedash.core.words import RANDOM_WORD_URL


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Settings defaults
# ---------------------------------------------------------------------------

class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.duration_seconds == 60
        assert s.word_count == 20
        assert s.word_api_url == RANDOM_WORD_URL
        assert s.request_timeout == 5.0
        assert s.sound_enabled is True
        assert s.error_sound is None


# ---------------------------------------------------------------------------
# default_config_path
# ---------------------------------------------------------------------------

class TestDefaultConfigPath:
    def test_home_location(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert default_config_path() == Path.home() / ".typedash" / "config.yaml"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.yaml"))
        assert default_config_path() == tmp_path / "custom.yaml"


# ---------------------------------------------------------------------------
# load_settings – happy paths
# ---------------------------------------------------------------------------

class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(tmp_path / "nope.yaml") == Settings()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(_write(tmp_path, "")) == Settings()

    def test_full_file(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """
            duration_seconds: 30
            word_count: 40
            word_api_url: http://localhost:8000/word
            request_timeout: 2
            sound_enabled: false
            error_sound: /tmp/error.wav
            """,
        )
        s = load_settings(path)
        assert s.duration_seconds == 30
        assert s.word_count == 40
        assert s.word_api_url == "http://localhost:8000/word"
        assert s.request_timeout == 2.0
        assert s.sound_enabled is False
        assert s.error_sound == "/tmp/error.wav"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        s = load_settings(_write(tmp_path, "duration_seconds: 15\n"))
        assert s.duration_seconds == 15
        assert s.word_count == 20

    def test_env_override_used_when_no_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        path = _write(tmp_path, "word_count: 5\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_settings().word_count == 5

    def test_unparseable_yaml_falls_back(self, tmp_path: Path, caplog):
        path = _write(tmp_path, "duration_seconds: [unclosed\n")
        with caplog.at_level("WARNING"):
            assert load_settings(path) == Settings()
        assert "Could not load config" in caplog.text


# ---------------------------------------------------------------------------
# load_settings – invalid values
# ---------------------------------------------------------------------------

class TestLoadSettingsInvalid:
    def test_not_a_mapping(self, tmp_path: Path):
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            load_settings(_write(tmp_path, "- a\n- b\n"))

    def test_unknown_key(self, tmp_path: Path):
        with pytest.raises(ValueError, match="unknown setting"):
            load_settings(_write(tmp_path, "colour: red\n"))

    @pytest.mark.parametrize("value", ["0", "-5", "ten", "true", "1.5"])
    def test_bad_duration(self, tmp_path: Path, value: str):
        with pytest.raises(ValueError, match="duration_seconds"):
            load_settings(_write(tmp_path, f"duration_seconds: {value}\n"))

    def test_bad_word_count(self, tmp_path: Path):
        with pytest.raises(ValueError, match="word_count"):
            load_settings(_write(tmp_path, "word_count: 0\n"))

    def test_bad_timeout(self, tmp_path: Path):
        with pytest.raises(ValueError, match="request_timeout"):
            load_settings(_write(tmp_path, "request_timeout: -1\n"))

    def test_blank_url(self, tmp_path: Path):
        with pytest.raises(ValueError, match="word_api_url"):
            load_settings(_write(tmp_path, "word_api_url: ''\n"))

    def test_sound_enabled_must_be_bool(self, tmp_path: Path):
        with pytest.raises(ValueError, match="sound_enabled"):
            load_settings(_write(tmp_path, "sound_enabled: maybe\n"))
