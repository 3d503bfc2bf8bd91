"""Decoding of gzip-compressed ConfigMap payloads."""

from __future__ import annotations

import base64
import binascii
import gzip
import logging
import zlib
from typing import Iterable, List, Mapping, Union

from .exceptions import PayloadDecodeError


logger = logging.getLogger(__name__)

Payload = Union[str, bytes]


def decode_payload(value: Payload) -> str:
    """Gunzip a single payload and return its UTF-8 text.

    The Kubernetes client hands binary data over as base64 text; raw bytes are
    taken as already decoded. Raises ValueError for anything that is not a
    complete gzip stream of UTF-8 text.
    """

    if isinstance(value, str):
        try:
            raw = base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"invalid base64 data: {exc}") from exc
    else:
        raw = bytes(value)
    if not raw:
        raise ValueError("empty payload")

    try:
        data = gzip.decompress(raw)
    except (gzip.BadGzipFile, EOFError, zlib.error) as exc:
        raise ValueError(f"invalid gzip data: {exc}") from exc

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"payload is not UTF-8 text: {exc}") from exc


def decode_configmaps(configmaps: Iterable, sort_keys: bool = True) -> List[str]:
    """Decode every binary payload of every ConfigMap, in order.

    Within one ConfigMap payloads are taken by key when *sort_keys* is set,
    otherwise in the mapping's own order. The first bad payload aborts.
    """

    fragments: List[str] = []
    for configmap in configmaps:
        name = _configmap_name(configmap)
        binary_data: Mapping[str, Payload] = getattr(configmap, "binary_data", None) or {}
        keys = sorted(binary_data) if sort_keys else list(binary_data)
        for key in keys:
            try:
                fragments.append(decode_payload(binary_data[key]))
            except ValueError as exc:
                raise PayloadDecodeError(configmap=name, key=key, message=str(exc)) from exc
        logger.debug("decoded %d payload(s) from %s", len(keys), name)
    return fragments


def _configmap_name(configmap: object) -> str:
    metadata = getattr(configmap, "metadata", None)
    name = getattr(metadata, "name", None)
    return name or "<unnamed>"
