"""Kubernetes client loading and the ConfigMap query."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import yaml
from kubernetes import client, config
from kubernetes.client import ApiException
from kubernetes.config import ConfigException
from urllib3.exceptions import HTTPError

from .config import DEFAULT_NAMESPACE
from .exceptions import ClusterError
from .selector import LabelSelector


logger = logging.getLogger(__name__)


def load_core_api(*, kubeconfig: Optional[str] = None, context: Optional[str] = None) -> client.CoreV1Api:
    """Create a CoreV1Api client.

    An explicit kubeconfig or context always loads from kubeconfig. Otherwise
    in-cluster configuration is tried first, then the default kubeconfig.
    """

    try:
        if kubeconfig or context:
            config.load_kube_config(config_file=kubeconfig, context=context)
        else:
            try:
                config.load_incluster_config()
                logger.debug("using in-cluster configuration")
            except ConfigException:
                config.load_kube_config()
                logger.debug("using default kubeconfig")
    except (ConfigException, OSError, yaml.YAMLError, TypeError, ValueError) as exc:
        raise ClusterError(f"failed to load cluster configuration: {exc}") from exc

    return client.CoreV1Api()


def list_bundle_configmaps(
    core_api: Any,
    selector: Optional[LabelSelector],
    namespace: str = DEFAULT_NAMESPACE,
) -> List[client.V1ConfigMap]:
    """List the ConfigMaps in *namespace* matching *selector*.

    A None selector matches nothing and skips the API call.
    """

    if selector is None or selector.empty():
        logger.warning("no usable label selector; nothing to fetch")
        return []

    label_selector = str(selector)
    logger.debug("listing configmaps in %s with selector %s", namespace, label_selector)
    try:
        result = core_api.list_namespaced_config_map(namespace=namespace, label_selector=label_selector)
    except ApiException as exc:
        raise ClusterError(str(exc)) from exc
    except HTTPError as exc:
        raise ClusterError(f"failed to reach the cluster: {exc}") from exc

    items = list(getattr(result, "items", None) or [])
    logger.info("found %d configmap(s) in %s", len(items), namespace)
    return items
