"""Tests for linplan.settings — profile precedence and error paths."""

from pathlib import Path

import click
import pytest
import tomlkit

import linplan.settings as settings_module
from linplan.settings import _list_profiles, get_settings


def _write_config(tmp_path: Path, config: dict) -> Path:
    config_path = tmp_path / "config.toml"
    config_path.write_text(tomlkit.dumps(config))
    return config_path


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Clear the lru_cache and keep real env vars and .env files out of the way."""
    settings_module._load_toml.cache_clear()
    monkeypatch.chdir(tmp_path)
    for var in ("LINPLAN_DEFAULT_PROFILE", "LINPLAN_API_KEY", "LINPLAN_TEAM_ID"):
        monkeypatch.delenv(var, raising=False)
    yield
    settings_module._load_toml.cache_clear()


class TestListProfiles:
    def test_returns_section_keys(self) -> None:
        config = {
            "default_profile": "work",
            "work": {"api_key": "lin_api_work"},
            "personal": {"api_key": "lin_api_personal"},
        }
        assert _list_profiles(config) == ["work", "personal"]

    def test_skips_scalar_keys(self) -> None:
        config = {"default_profile": "work", "work": {"api_key": "lin_api_work"}}
        assert _list_profiles(config) == ["work"]

    def test_empty_config(self) -> None:
        assert _list_profiles({}) == []


class TestGetSettings:
    def test_profile_arg_takes_precedence(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(
            tmp_path,
            {
                "default_profile": "personal",
                "work": {"api_key": "lin_api_work"},
                "personal": {"api_key": "lin_api_personal"},
            },
        )
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)

        s = get_settings(profile="work")
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_work"

    def test_env_var_takes_precedence_over_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(
            tmp_path,
            {
                "default_profile": "personal",
                "work": {"api_key": "lin_api_work"},
                "personal": {"api_key": "lin_api_personal"},
            },
        )
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)
        monkeypatch.setenv("LINPLAN_DEFAULT_PROFILE", "work")

        s = get_settings()
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_work"

    def test_toml_default_profile_used(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(
            tmp_path,
            {
                "default_profile": "personal",
                "work": {"api_key": "lin_api_work"},
                "personal": {"api_key": "lin_api_personal", "team_id": "team_p"},
            },
        )
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)

        s = get_settings()
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_personal"
        assert s.team_id == "team_p"

    def test_first_profile_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(tmp_path, {"work": {"api_key": "lin_api_first"}})
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)

        s = get_settings()
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_first"

    def test_env_overrides_profile_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(tmp_path, {"work": {"api_key": "lin_api_work", "team_id": "team_w"}})
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)
        monkeypatch.setenv("LINPLAN_TEAM_ID", "team_env")

        s = get_settings(profile="work")
        assert s.team_id == "team_env"
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_work"

    def test_missing_profile_exits(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(tmp_path, {"work": {"api_key": "lin_api_work"}})
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)

        with pytest.raises((SystemExit, click.exceptions.Exit)):
            get_settings(profile="nonexistent")

    def test_missing_api_key_exits(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_path = _write_config(tmp_path, {"work": {"team_id": "team_w"}})
        monkeypatch.setattr(settings_module, "CONFIG_PATH", config_path)

        with pytest.raises((SystemExit, click.exceptions.Exit)):
            get_settings(profile="work")

    def test_no_config_file_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings_module, "CONFIG_PATH", tmp_path / "nonexistent.toml")
        monkeypatch.setenv("LINPLAN_API_KEY", "lin_api_env")

        s = get_settings()
        assert s.api_key is not None
        assert s.api_key.get_secret_value() == "lin_api_env"
        assert s.team_id is None
