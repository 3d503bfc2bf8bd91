"""Pydantic models describing bundlecat settings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..logging_config import LOG_LEVELS


DEFAULT_NAMESPACE = "rukpak-system"


class Settings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    namespace: str = DEFAULT_NAMESPACE
    kubeconfig: Optional[str] = None
    context: Optional[str] = None
    sort_payload_keys: bool = True
    log_level: str = "WARNING"

    @field_validator("namespace")
    @classmethod
    def ensure_namespace(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("namespace must not be empty")
        return value

    @field_validator("kubeconfig", "context")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("log_level")
    @classmethod
    def ensure_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
