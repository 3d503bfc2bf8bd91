"""Functions for reading and validating bundlecat settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from pydantic import ValidationError

from ..exceptions import ConfigError
from .models import Settings


class EnvVars:
    """Environment variables consulted by load_settings."""

    NAMESPACE = "BUNDLECAT_NAMESPACE"
    KUBECONFIG = "BUNDLECAT_KUBECONFIG"
    CONTEXT = "BUNDLECAT_CONTEXT"
    LOG_LEVEL = "BUNDLECAT_LOG_LEVEL"


_ENV_FIELDS = {
    EnvVars.NAMESPACE: "namespace",
    EnvVars.KUBECONFIG: "kubeconfig",
    EnvVars.CONTEXT: "context",
    EnvVars.LOG_LEVEL: "log_level",
}


def load_settings(
    path: Optional[Path] = None,
    *,
    env: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Settings:
    """Merge defaults, the TOML file at *path*, the environment and *overrides*.

    Later sources win. ``None`` values in *overrides* are ignored so unset CLI
    flags fall through to the lower layers.
    """

    env = os.environ if env is None else env
    data: Dict[str, Any] = {}
    if path is not None:
        data.update(_load_toml(Path(path)))
    data.update(_env_values(env))
    if overrides:
        data.update({key: value for key, value in overrides.items() if value is not None})

    source = Path(path) if path is not None else Path("<settings>")
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(source, _format_validation_errors(exc)) from exc


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(path, "file not found") from exc
    except (tomllib.TOMLDecodeError, OSError) as exc:
        raise ConfigError(path, f"failed to read TOML: {exc}") from exc


def _env_values(env: Mapping[str, str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for name, field in _ENV_FIELDS.items():
        raw = env.get(name)
        if raw is None or not raw.strip():
            continue
        values[field] = raw.strip()
    return values


def _format_validation_errors(error: ValidationError) -> str:
    messages = []
    for err in error.errors(include_context=False):
        loc = ".".join(str(entry) for entry in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        if loc:
            messages.append(f"{loc}: {msg}")
        else:
            messages.append(msg)
    return "; ".join(messages)
