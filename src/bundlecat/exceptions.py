"""Custom exception hierarchy for bundlecat."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class BundlecatError(Exception):
    """Base error for the bundlecat package."""


class BundleNameError(BundlecatError):
    """Raised when the bundle name is missing or blank."""


class SelectorError(BundlecatError):
    """Raised when a label requirement fails validation."""


class ConfigError(BundlecatError):
    """Raised when a settings file fails validation."""

    def __init__(self, path: Path, message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"{self.path.name}: {self.message}")


class ClusterError(BundlecatError):
    """Raised when the cluster client cannot be loaded or a query fails."""


@dataclass
class PayloadDecodeError(BundlecatError):
    """Raised when a ConfigMap payload is not valid gzip-compressed UTF-8."""

    configmap: str
    key: str
    message: str

    def __post_init__(self) -> None:
        super().__init__(f"configmap {self.configmap}, key {self.key}: {self.message}")


class OutputError(BundlecatError):
    """Raised when the decoded stream cannot be written."""
