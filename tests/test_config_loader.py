"""Unit tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from bundlecat.config import DEFAULT_NAMESPACE, EnvVars, Settings, load_settings
from bundlecat.exceptions import ConfigError


def test_load_settings_defaults() -> None:
    settings = load_settings(env={})

    assert isinstance(settings, Settings)
    assert settings.namespace == DEFAULT_NAMESPACE == "rukpak-system"
    assert settings.kubeconfig is None
    assert settings.context is None
    assert settings.sort_payload_keys is True
    assert settings.log_level == "WARNING"


def test_load_settings_layers_file_env_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "bundlecat.toml"
    path.write_text(
        """
namespace = "from-file"
context = "kind-dev"
sort_payload_keys = false
log_level = "info"
""".strip()
    )
    env = {EnvVars.NAMESPACE: "from-env", EnvVars.KUBECONFIG: "/tmp/kubeconfig"}

    settings = load_settings(path, env=env, overrides={"context": "kind-prod", "namespace": None})

    assert settings.namespace == "from-env"
    assert settings.kubeconfig == "/tmp/kubeconfig"
    assert settings.context == "kind-prod"
    assert settings.sort_payload_keys is False
    assert settings.log_level == "INFO"


def test_load_settings_ignores_blank_env_values() -> None:
    settings = load_settings(env={EnvVars.NAMESPACE: "  ", EnvVars.CONTEXT: ""})

    assert settings.namespace == DEFAULT_NAMESPACE
    assert settings.context is None


def test_load_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_settings(tmp_path / "missing.toml", env={})

    assert "missing.toml: file not found" == str(exc.value)


def test_load_settings_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "broken.toml"
    path.write_text("namespace = \n")

    with pytest.raises(ConfigError) as exc:
        load_settings(path, env={})

    assert "failed to read TOML" in str(exc.value)


def test_load_settings_reports_unknown_and_invalid_fields(tmp_path: Path) -> None:
    path = tmp_path / "bundlecat.toml"
    path.write_text(
        """
namespace = ""
colour = "blue"
""".strip()
    )

    with pytest.raises(ConfigError) as exc:
        load_settings(path, env={})

    message = str(exc.value)
    assert message.startswith("bundlecat.toml: ")
    assert "namespace" in message
    assert "colour" in message


def test_load_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ConfigError) as exc:
        load_settings(env={EnvVars.LOG_LEVEL: "chatty"})

    assert "log_level" in str(exc.value)
