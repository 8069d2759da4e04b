"""Tests for SettingsLoader."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from genbridge.settings import Settings, SettingsLoader, SettingsValidationError, load_settings

_VALID_YAML = """\
model:
  chat_model: gemini-2.5-flash
  api_key: test-key
  embedding_backend: litellm
  embedding_concurrency: 4
agent:
  system_prompt: Be brief.
  max_messages: 10
telemetry:
  enabled: true
"""


class TestSettingsLoader:
    def test_load_valid(self, tmp_path: Path) -> None:
        f = tmp_path / "genbridge.yaml"
        f.write_text(_VALID_YAML)
        settings = SettingsLoader(f).load()
        assert settings.model.chat_model == "gemini-2.5-flash"
        assert settings.model.embedding_backend == "litellm"
        assert settings.model.embedding_concurrency == 4
        assert settings.agent.system_prompt == "Be brief."
        assert settings.agent.max_messages == 10
        assert settings.agent.max_iterations == 10
        assert settings.telemetry.enabled is True

    def test_env_var_interpolation(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GENBRIDGE_TEST_KEY", "secret-123")
        f = tmp_path / "genbridge.yaml"
        f.write_text("model:\n  api_key: ${GENBRIDGE_TEST_KEY}\n")
        assert SettingsLoader(f).load().model.api_key == "secret-123"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert SettingsLoader(f).load() == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsValidationError, match="Cannot read"):
            SettingsLoader(tmp_path / "nope.yaml").load()

    def test_bad_yaml(self, tmp_path: Path) -> None:
        f = tmp_path / "bad.yaml"
        f.write_text("model: [unclosed\n")
        with pytest.raises(SettingsValidationError, match="YAML parse error"):
            SettingsLoader(f).load()

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(SettingsValidationError, match="mapping"):
            SettingsLoader(f).load()

    def test_validation_error(self, tmp_path: Path) -> None:
        f = tmp_path / "invalid.yaml"
        f.write_text("model:\n  embedding_backend: carrier-pigeon\n")
        with pytest.raises(SettingsValidationError, match="embedding_backend"):
            SettingsLoader(f).load()


class TestLoadSettings:
    def test_defaults_without_path(self) -> None:
        settings = load_settings()
        assert settings.model.chat_model == "gemini-2.0-flash"
        assert settings.agent.max_messages == 20
        assert settings.telemetry.enabled is False

    def test_with_path(self, tmp_path: Path) -> None:
        f = tmp_path / "genbridge.yaml"
        f.write_text(_VALID_YAML)
        assert load_settings(str(f)).model.api_key == "test-key"
