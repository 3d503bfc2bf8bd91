"""Label selectors used to find the ConfigMaps backing a bundle."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .exceptions import SelectorError


CONFIGMAP_TYPE_LABEL = "core.rukpak.io/configmap-type"
OWNER_KIND_LABEL = "core.rukpak.io/owner-kind"
OWNER_NAME_LABEL = "core.rukpak.io/owner-name"

CONFIGMAP_TYPE_OBJECT = "object"
OWNER_KIND_BUNDLE = "Bundle"

EQUALS = "="

_NAME_MAX_LENGTH = 63
_PREFIX_MAX_LENGTH = 253
_NAME_RE = re.compile(r"^([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9]$")
_DNS_LABEL_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


@dataclass(frozen=True)
class LabelRequirement:
    key: str
    operator: str
    values: Tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.key}{self.operator}{self.values[0]}"


@dataclass(frozen=True)
class LabelSelector:
    """Conjunction of label requirements, kept sorted by key."""

    requirements: Tuple[LabelRequirement, ...] = ()

    def add(self, *requirements: LabelRequirement) -> "LabelSelector":
        merged = self.requirements + tuple(requirements)
        return LabelSelector(tuple(sorted(merged, key=lambda req: req.key)))

    def empty(self) -> bool:
        return not self.requirements

    def __str__(self) -> str:
        return ",".join(str(req) for req in self.requirements)


def new_requirement(key: str, operator: str, values: Iterable[str]) -> LabelRequirement:
    """Validate and build a single label requirement.

    Only the equality operator is supported and it takes exactly one value.
    Keys and values follow the Kubernetes label syntax.
    """

    _validate_label_key(key)
    if operator != EQUALS:
        raise SelectorError(f"operator {operator!r} is not supported")
    values = tuple(values)
    if len(values) != 1:
        raise SelectorError(f"operator {operator!r} requires exactly one value for key {key!r}")
    for value in values:
        _validate_label_value(key, value)
    return LabelRequirement(key=key, operator=operator, values=values)


def new_bundle_configmap_selector(name: str) -> Optional[LabelSelector]:
    """Return the selector matching the object ConfigMaps owned by bundle *name*.

    Returns None when a requirement cannot be built; callers treat that as
    "match nothing".
    """

    try:
        configmap_type = new_requirement(CONFIGMAP_TYPE_LABEL, EQUALS, [CONFIGMAP_TYPE_OBJECT])
        owner_kind = new_requirement(OWNER_KIND_LABEL, EQUALS, [OWNER_KIND_BUNDLE])
        owner_name = new_requirement(OWNER_NAME_LABEL, EQUALS, [name])
    except SelectorError:
        return None
    return LabelSelector().add(configmap_type, owner_kind, owner_name)


def _validate_label_key(key: str) -> None:
    prefix, sep, name = key.rpartition("/")
    if sep:
        if not prefix or len(prefix) > _PREFIX_MAX_LENGTH:
            raise SelectorError(f"invalid label key {key!r}: prefix must be 1-{_PREFIX_MAX_LENGTH} characters")
        if not all(_DNS_LABEL_RE.match(part) for part in prefix.split(".")):
            raise SelectorError(f"invalid label key {key!r}: prefix must be a DNS subdomain")
    if not name or len(name) > _NAME_MAX_LENGTH:
        raise SelectorError(f"invalid label key {key!r}: name must be 1-{_NAME_MAX_LENGTH} characters")
    if not _NAME_RE.match(name):
        raise SelectorError(f"invalid label key {key!r}: name has invalid characters")


def _validate_label_value(key: str, value: str) -> None:
    if not isinstance(value, str):
        raise SelectorError(f"invalid value for {key!r}: expected a string")
    if value == "":
        return
    if len(value) > _NAME_MAX_LENGTH:
        raise SelectorError(f"invalid value for {key!r}: must be no more than {_NAME_MAX_LENGTH} characters")
    if not _NAME_RE.match(value):
        raise SelectorError(f"invalid value {value!r} for {key!r}")
