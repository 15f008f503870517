"""Unit tests for settings loading, saving and environment overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from lcrview.constants.defaults import REGISTRY_HOST_DEFAULT, REGISTRY_HOST_IN_CONTAINER
from lcrview.models.state import config_manager
from lcrview.models.state.app_settings import AppSettings, ConfigLoadError, ConfigSaveError
from lcrview.models.state.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def no_container_marker(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config_manager, "CONTAINER_MARKER_FILE", str(tmp_path / "absent"))


class TestLoad:
    """Tests for ConfigManager.load."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test that a missing settings file yields defaults."""
        settings = ConfigManager.load(tmp_path / "settings.json", environ={})
        assert settings == AppSettings()
        assert settings.registry_host == REGISTRY_HOST_DEFAULT

    def test_file_values_are_used(self, tmp_path: Path) -> None:
        """Test that values in the JSON file are applied."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"namespace": "apps", "commit_limit": 25}))
        settings = ConfigManager.load(path, environ={})
        assert settings.namespace == "apps"
        assert settings.commit_limit == 25

    def test_environment_overrides_file(self, tmp_path: Path) -> None:
        """Test that environment variables win over the file."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"registry_host": "file:5000"}))
        settings = ConfigManager.load(
            path,
            environ={
                "REGISTRY_HOST": "env:5000",
                "KUBERNETES_NAMESPACE": "staging",
                "GITHUB_AUTH_TOKEN": "secret",
                "GITHUB_OWNER": "",
            },
        )
        assert settings.registry_host == "env:5000"
        assert settings.namespace == "staging"
        assert settings.github_token == "secret"
        assert settings.github_owner == ""

    def test_container_marker_switches_registry_host(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the in-container registry default."""
        marker = tmp_path / ".dockerenv"
        marker.touch()
        monkeypatch.setattr(config_manager, "CONTAINER_MARKER_FILE", str(marker))
        settings = ConfigManager.load(tmp_path / "settings.json", environ={})
        assert settings.registry_host == REGISTRY_HOST_IN_CONTAINER

    @pytest.mark.parametrize(
        "content",
        ["{not json", "[1, 2]", json.dumps({"commit_limit": 0})],
    )
    def test_invalid_file_raises(self, tmp_path: Path, content: str) -> None:
        """Test that unreadable or invalid settings raise ConfigLoadError."""
        path = tmp_path / "settings.json"
        path.write_text(content)
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path, environ={})

    def test_dotenv_fills_unset_variables(self, tmp_path: Path) -> None:
        """Test that .env values apply and the environment still wins."""
        env_file = tmp_path / ".env"
        env_file.write_text(
            "KUBERNETES_NAMESPACE=from-dotenv\n"
            "KUBE_CONTEXT=minikube\n"
            "GITHUB_OWNER=octo\n"
        )
        settings = ConfigManager.load(
            tmp_path / "settings.json",
            environ={"KUBERNETES_NAMESPACE": "staging"},
            env_file=env_file,
        )
        assert settings.namespace == "staging"
        assert settings.kube_context == "minikube"
        assert settings.github_owner == "octo"

    def test_missing_dotenv_is_ignored(self, tmp_path: Path) -> None:
        """Test that an absent .env file leaves defaults in place."""
        settings = ConfigManager.load(
            tmp_path / "settings.json", environ={}, env_file=tmp_path / ".env"
        )
        assert settings == AppSettings()

    def test_dotenv_loads_into_process_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that without an explicit environ the .env file reaches os.environ."""
        fake_environ = {"REGISTRY_HOST": "env:5000"}
        monkeypatch.setattr(os, "environ", fake_environ)
        env_file = tmp_path / ".env"
        env_file.write_text("REGISTRY_HOST=dotenv:5000\nKUBERNETES_NAMESPACE=apps\n")

        settings = ConfigManager.load(tmp_path / "settings.json", env_file=env_file)

        assert settings.registry_host == "env:5000"
        assert settings.namespace == "apps"
        assert fake_environ["KUBERNETES_NAMESPACE"] == "apps"

    def test_control_plane_variables(self, tmp_path: Path) -> None:
        """Test that the control plane host and port map to settings."""
        settings = ConfigManager.load(
            tmp_path / "settings.json",
            environ={
                "KUBERNETES_CONTROL_PLANE": "10.0.0.1",
                "KUBERNETES_CONTROL_PLANE_PORT": "6443",
                "KUBERNETES_REGISTRY_HOST": "registry.lan:5000",
            },
        )
        assert settings.control_plane == "10.0.0.1"
        assert settings.control_plane_port == "6443"
        assert settings.cluster_registry_host == "registry.lan:5000"

    def test_cluster_registry_host_unset_by_default(self, tmp_path: Path) -> None:
        """Test that the cluster registry host is left for deploy-time detection."""
        settings = ConfigManager.load(tmp_path / "settings.json", environ={})
        assert settings.cluster_registry_host is None


class TestSave:
    """Tests for ConfigManager.save and reset."""

    def test_save_excludes_token(self, tmp_path: Path) -> None:
        """Test that the GitHub token is never written to disk."""
        path = tmp_path / "nested" / "settings.json"
        ConfigManager.save(AppSettings(github_token="secret", namespace="apps"), path)
        payload = json.loads(path.read_text())
        assert payload["namespace"] == "apps"
        assert "github_token" not in payload

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Test that saved settings load back unchanged."""
        path = tmp_path / "settings.json"
        settings = AppSettings(registry_host="reg:5000", kube_context="kind-dev")
        ConfigManager.save(settings, path)
        assert ConfigManager.load(path, environ={}) == settings

    def test_save_failure(self, tmp_path: Path) -> None:
        """Test that an unwritable path raises ConfigSaveError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "settings.json")

    def test_reset_writes_defaults(self, tmp_path: Path) -> None:
        """Test that reset overwrites customised settings."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"namespace": "apps"}))
        assert ConfigManager.reset(path) == AppSettings()
        assert ConfigManager.load(path, environ={}).namespace == "default"
