"""Unit tests for label selector construction."""

from __future__ import annotations

import pytest

from bundlecat.exceptions import SelectorError
from bundlecat.selector import (
    CONFIGMAP_TYPE_LABEL,
    EQUALS,
    OWNER_KIND_LABEL,
    OWNER_NAME_LABEL,
    LabelSelector,
    new_bundle_configmap_selector,
    new_requirement,
)


@pytest.mark.parametrize("name", ["combo-v0.0.1", "a", "my_bundle.v2", "x" * 63])
def test_bundle_selector_has_three_fixed_requirements(name: str) -> None:
    selector = new_bundle_configmap_selector(name)

    assert selector is not None
    assert len(selector.requirements) == 3
    assert [req.key for req in selector.requirements] == [
        CONFIGMAP_TYPE_LABEL,
        OWNER_KIND_LABEL,
        OWNER_NAME_LABEL,
    ]
    assert all(req.operator == EQUALS for req in selector.requirements)
    assert selector.requirements[2].values == (name,)


def test_bundle_selector_string() -> None:
    selector = new_bundle_configmap_selector("combo-v0.0.1")

    assert str(selector) == (
        "core.rukpak.io/configmap-type=object,"
        "core.rukpak.io/owner-kind=Bundle,"
        "core.rukpak.io/owner-name=combo-v0.0.1"
    )


@pytest.mark.parametrize("name", ["has space", "-leading", "trailing-", "x" * 64, "bad/slash"])
def test_bundle_selector_invalid_name_returns_none(name: str) -> None:
    assert new_bundle_configmap_selector(name) is None


def test_add_keeps_requirements_sorted_and_returns_new_selector() -> None:
    base = LabelSelector()
    zeta = new_requirement("zeta", EQUALS, ["1"])
    alpha = new_requirement("example.com/alpha", EQUALS, ["2"])

    selector = base.add(zeta, alpha)

    assert base.empty()
    assert [req.key for req in selector.requirements] == ["example.com/alpha", "zeta"]


def test_empty_value_is_allowed() -> None:
    req = new_requirement("flag", EQUALS, [""])
    assert str(req) == "flag="


@pytest.mark.parametrize(
    "key, operator, values",
    [
        ("", EQUALS, ["v"]),
        ("/name", EQUALS, ["v"]),
        ("Bad_Prefix/name", EQUALS, ["v"]),
        ("name", "in", ["v"]),
        ("name", "!=", ["v"]),
        ("name", EQUALS, ["a", "b"]),
        ("name", EQUALS, []),
        ("name", EQUALS, ["not valid"]),
    ],
)
def test_new_requirement_rejects_invalid_input(key: str, operator: str, values: list[str]) -> None:
    with pytest.raises(SelectorError):
        new_requirement(key, operator, values)
