"""Bundle unpacking pipeline: selector, fetch, decode, join."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List

from .cluster import list_bundle_configmaps
from .config import DEFAULT_NAMESPACE
from .decode import decode_configmaps
from .emit import join_fragments
from .exceptions import BundleNameError, SelectorError
from .selector import EQUALS, OWNER_NAME_LABEL, new_bundle_configmap_selector, new_requirement


logger = logging.getLogger(__name__)


@dataclass
class UnpackResult:
    bundle: str
    namespace: str
    configmap_count: int = 0
    fragments: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return join_fragments(self.fragments)

    @property
    def is_empty(self) -> bool:
        return not self.fragments


def unpack_bundle(
    core_api: Any,
    bundle: str,
    namespace: str = DEFAULT_NAMESPACE,
    sort_keys: bool = True,
) -> UnpackResult:
    """Fetch and decode the object ConfigMaps of *bundle*.

    Nothing is written here; every payload is decoded before the caller gets
    a result, so a bad payload never leaves partial output behind.
    """

    bundle = validate_bundle_name(bundle)
    selector = new_bundle_configmap_selector(bundle)
    configmaps = list_bundle_configmaps(core_api, selector, namespace)
    result = UnpackResult(bundle=bundle, namespace=namespace, configmap_count=len(configmaps))
    if not configmaps:
        logger.info("no configmaps found for bundle %s in %s", bundle, namespace)
        return result

    result.fragments = decode_configmaps(configmaps, sort_keys=sort_keys)
    logger.debug("bundle %s: %d fragment(s) from %d configmap(s)", bundle, len(result.fragments), len(configmaps))
    return result


def validate_bundle_name(bundle: str) -> str:
    """Reject names that are empty or cannot be used as the owner-name label value."""

    if bundle is None or not bundle.strip():
        raise BundleNameError("--bundle cannot be empty")
    try:
        new_requirement(OWNER_NAME_LABEL, EQUALS, [bundle])
    except SelectorError as exc:
        raise BundleNameError(f"--bundle {bundle!r} is not a valid label value: {exc}") from exc
    return bundle
