"""Plugin configuration models and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from orbgate.core.events import CONFIG_CHANGED, ConfigChanged, EventBus

CONFIG_GROUP = "testorbs"


class OrbGatePaths(BaseModel):
    """Resolved directories for orbgate runtime assets."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("ORBGATE_HOME", Path.home() / ".orbgate"))
    )

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure(self) -> None:
        for path in (self.base_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class OrbGateConfig(BaseModel):
    """User toggles exposed under the ``testorbs`` config group."""

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    block_hitpoints_orb: bool = Field(default=True, alias="blockHitpointsOrb")
    block_special_attack_orb: bool = Field(default=True, alias="blockSpecialAttackOrb")


class OrbGateSettings(BaseModel):
    app_name: str = "orbgate"
    paths: OrbGatePaths = Field(default_factory=OrbGatePaths)
    orbs: OrbGateConfig = Field(default_factory=OrbGateConfig)
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class ConfigManager:
    """Holds the live plugin config and announces changes on the bus."""

    def __init__(self, config: OrbGateConfig, events: EventBus, group: str = CONFIG_GROUP) -> None:
        self.group = group
        self.events = events
        self._config = config

    def get_config(self) -> OrbGateConfig:
        return self._config.model_copy()

    def set_configuration(self, group: str, key: str, value: Any) -> None:
        field_name = _resolve_key(key)
        updated = OrbGateConfig.model_validate(
            {**self._config.model_dump(), field_name: value}
        )
        self._config = updated
        self.events.emit(
            CONFIG_CHANGED,
            ConfigChanged(group=group, key=key, new_value=str(getattr(updated, field_name)).lower()),
        )


def _resolve_key(key: str) -> str:
    for name, info in OrbGateConfig.model_fields.items():
        if key in (name, info.alias):
            return name
    raise KeyError(key)


def _maybe_bool(value: str | None) -> bool | None:
    if value is None:
        return None
    lowered = value.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return None


def load_settings(env_path: Path | None = None) -> OrbGateSettings:
    """Load user settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if (block_hp := _maybe_bool(os.getenv('ORBGATE_BLOCK_HITPOINTS_ORB'))) is not None:
        overrides.setdefault('orbs', {})['block_hitpoints_orb'] = block_hp

    if (block_spec := _maybe_bool(os.getenv('ORBGATE_BLOCK_SPECIAL_ATTACK_ORB'))) is not None:
        overrides.setdefault('orbs', {})['block_special_attack_orb'] = block_spec

    if level := os.getenv('ORBGATE_LOG_LEVEL'):
        overrides['log_level'] = level.upper()

    settings = OrbGateSettings(**overrides)
    settings.paths.ensure()
    return settings
