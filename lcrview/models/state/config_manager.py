"""Settings persistence and environment overrides."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values, find_dotenv, load_dotenv
from pydantic import ValidationError

from lcrview.constants.defaults import ENV_FILE_DEFAULT, REGISTRY_HOST_IN_CONTAINER
from lcrview.constants.values import CONTAINER_MARKER_FILE
from lcrview.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "lcrview"
CONFIG_PATH = CONFIG_DIR / "settings.json"

# Environment variable -> settings field.
ENV_OVERRIDES: dict[str, str] = {
    "REGISTRY_HOST": "registry_host",
    "KUBERNETES_REGISTRY_HOST": "cluster_registry_host",
    "KUBERNETES_NAMESPACE": "namespace",
    "KUBERNETES_CONTROL_PLANE": "control_plane",
    "KUBERNETES_CONTROL_PLANE_PORT": "control_plane_port",
    "KUBE_CONTEXT": "kube_context",
    "KUBECTL_PATH": "kubectl_path",
    "MINIKUBE_PATH": "minikube_path",
    "GITHUB_OWNER": "github_owner",
    "GITHUB_REPO": "github_repo",
    "GITHUB_AUTH_TOKEN": "github_token",
    "GITHUB_BRANCH": "commit_branch",
    "LCRVIEW_LOG_FILE": "log_file",
    "LCRVIEW_LOG_LEVEL": "log_level",
}

# Never written to disk.
_SECRET_FIELDS = frozenset({"github_token"})


class ConfigManager:
    """Load, save and reset application settings."""

    @staticmethod
    def load(
        path: Path | None = None,
        environ: Mapping[str, str] | None = None,
        env_file: Path | None = None,
    ) -> AppSettings:
        """Load settings from the JSON file, then apply environment overrides.

        A missing file is not an error; defaults are used. Variables from a
        ``.env`` file fill in whatever the environment leaves unset. Without an
        explicit ``environ`` the nearest ``.env`` above the working directory is
        loaded into the process environment.

        Raises:
            ConfigLoadError: The file exists but is unreadable or invalid.
        """
        config_path = path or CONFIG_PATH
        env = _environment(environ, env_file)

        data: dict[str, Any] = {}
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc
            if not isinstance(data, dict):
                raise ConfigLoadError(f"{config_path} must contain a JSON object")

        if "registry_host" not in data and Path(CONTAINER_MARKER_FILE).exists():
            data["registry_host"] = REGISTRY_HOST_IN_CONTAINER

        for env_name, field_name in ENV_OVERRIDES.items():
            value = env.get(env_name)
            if value:
                data[field_name] = value

        try:
            return AppSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings: {exc}") from exc

    @staticmethod
    def save(settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk, without secrets.

        Raises:
            ConfigSaveError: The file could not be written.
        """
        config_path = path or CONFIG_PATH
        payload = settings.model_dump(exclude=set(_SECRET_FIELDS))
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.info("Saved settings to %s", config_path)
        return config_path

    @staticmethod
    def reset(path: Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults and return them."""
        settings = AppSettings()
        ConfigManager.save(settings, path)
        return settings


def _environment(
    environ: Mapping[str, str] | None,
    env_file: Path | None,
) -> Mapping[str, str]:
    if environ is None:
        dotenv_path = env_file or find_dotenv(ENV_FILE_DEFAULT, usecwd=True)
        if dotenv_path and load_dotenv(dotenv_path, override=False):
            logger.debug("Loaded environment from %s", dotenv_path)
        return os.environ
    if env_file is None or not env_file.exists():
        return environ
    file_values = {
        key: value for key, value in dotenv_values(env_file).items() if value is not None
    }
    return {**file_values, **environ}


__all__ = [
    "CONFIG_PATH",
    "ENV_OVERRIDES",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
