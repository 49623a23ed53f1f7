# gltfcheck document loader
# Reads a .gltf JSON document from a local path or an http(s) URL and materializes
# the entity graph. Only the JSON structure is loaded; referenced buffers, images
# and shaders are not fetched.
#
# Public API:
# - load_document(source, timeout_sec=30.0) -> GlTF

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from ..core.errors import DocumentLoadError, DocumentStructureError
from ..core.model import GlTF

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    lowered = source.lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def _http_get_text(url: str, timeout: float) -> str:
    """Execute HTTP GET with timeout."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.Timeout as e:
        raise DocumentLoadError(f"Request for {url} timed out after {timeout}s") from e
    except requests.RequestException as e:
        raise DocumentLoadError(f"Network error for {url}: {e}") from e
    if response.status_code != 200:
        raise DocumentLoadError(f"Fetching {url} failed with HTTP {response.status_code}")
    return response.text


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e


def parse_document(text: str, source: str = "<string>") -> GlTF:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"{source}: invalid JSON: {e}") from e
    try:
        return GlTF.from_dict(data)
    except DocumentStructureError as e:
        raise DocumentLoadError(f"{source}: {e}") from e


def load_document(source: str, timeout_sec: float = 30.0) -> GlTF:
    """
    Load a glTF document from a file path or http(s) URL.

    Raises:
        DocumentLoadError when the source cannot be read, is not JSON, or does
        not have the shape of a glTF document.
    """
    if _is_url(source):
        logger.debug(f"Fetching {source}")
        text = _http_get_text(source, timeout_sec)
    else:
        text = _read_text(source)
    return parse_document(text, source)


__all__ = ["load_document", "parse_document"]
