# gltfcheck utilities: configuration and document loading.

from .config import CheckConfig, load_config
from .loader import load_document, parse_document

__all__ = ["CheckConfig", "load_config", "load_document", "parse_document"]
