"""Linear credentials for linplan.

A profile is a TOML table in ~/.config/linplan/config.toml holding api_key and an
optional team_id used by the team-scoped CLI commands. LINPLAN_* env vars and a
local .env fill in or override whatever the active profile provides, so a
profile-less setup with only LINPLAN_API_KEY works too.
"""

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
import typer
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path.home() / ".config" / "linplan" / "config.toml"


class LinplanSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LINPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_profile: str | None = None

    # Linear
    api_key: SecretStr | None = None
    team_id: str | None = None  # default team for CLI commands


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/linplan/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    return tomlkit.load(CONFIG_PATH.open())


def _list_profiles(config: Mapping) -> list[str]:
    # tomlkit Table implements MutableMapping but not dict, so check Mapping
    return [k for k, v in config.items() if isinstance(v, Mapping)]


def get_settings(profile: str | None = None) -> LinplanSettings:
    """Resolve the active profile and return a fully populated LinplanSettings.

    Precedence (highest to lowest):
    1. profile argument (--profile CLI flag)
    2. LINPLAN_DEFAULT_PROFILE env var
    3. default_profile key in ~/.config/linplan/config.toml
    4. First profile defined in ~/.config/linplan/config.toml
    """
    toml_config = _load_toml()

    active = (
        profile
        or os.environ.get("LINPLAN_DEFAULT_PROFILE")
        or toml_config.get("default_profile")
        or ((_profiles := _list_profiles(toml_config)) and _profiles[0] or None)
    )

    profile_defaults: dict = {}
    if active:
        if active in toml_config and isinstance(toml_config[active], Mapping):
            profile_defaults = dict(toml_config[active])
        else:
            profiles = _list_profiles(toml_config)
            typer.echo(f"Profile '{active}' not found in {CONFIG_PATH}. Available: {profiles or '(none)'}")
            raise typer.Exit(1)

    # LINPLAN_API_KEY / LINPLAN_TEAM_ID win over the profile table
    from_env = LinplanSettings().model_dump(exclude_unset=True)
    settings = LinplanSettings(**{**profile_defaults, **from_env})

    if not settings.api_key:
        typer.echo(
            "Missing Linear credentials. Set LINPLAN_API_KEY or "
            f"api_key in the [{active or 'profile'}] section of {CONFIG_PATH}"
        )
        raise typer.Exit(1)

    return settings
