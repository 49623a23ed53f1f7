# gltfcheck configuration
#
# Responsibilities:
# - Resolve runtime options for the command-line linter
# - Built-in defaults, then an optional JSON config file, then environment variables;
#   command-line flags are applied last by the caller via CheckConfig.override()
# - Cross-platform config path resolution (Windows/Linux/legacy)
#
# Environment variables supported:
#   GLTFCHECK_STRICT     (truthy: "1", "true", "yes", "on")
#   GLTFCHECK_LOG_LEVEL  (DEBUG, INFO, WARNING, ERROR)
#   GLTFCHECK_FORMAT     ("text" or "json")
#   GLTFCHECK_TIMEOUT    (seconds, for documents loaded over http(s))
#
# Optional config file (JSON) search order:
#   1) %APPDATA%/gltfcheck/config.json (Windows)
#   2) $XDG_CONFIG_HOME/gltfcheck/config.json, default ~/.config/gltfcheck/config.json
#   3) ~/.gltfcheck/config.json (legacy fallback)

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _truthy(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    if val is None:
        return False
    s = str(val).strip().lower()
    return s in {"1", "true", "yes", "on"}


def _config_paths() -> List[str]:
    paths: List[str] = []
    # Windows
    appdata = os.environ.get("APPDATA")
    if appdata:
        paths.append(os.path.join(appdata, "gltfcheck", "config.json"))
    # Linux (XDG)
    home = os.path.expanduser("~")
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", os.path.join(home, ".config"))
    paths.append(os.path.join(xdg_config_home, "gltfcheck", "config.json"))
    # Legacy fallback
    paths.append(os.path.join(home, ".gltfcheck", "config.json"))
    return paths


def _load_config_file(paths: Optional[List[str]] = None) -> Dict[str, Any]:
    for path in paths if paths is not None else _config_paths():
        try:
            if os.path.isfile(path):
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        logger.debug(f"Loaded config file {path}")
                        return data
        except (OSError, ValueError) as ex:
            logger.warning(f"Failed reading config file {path}: {ex}")
    return {}


@dataclass(frozen=True)
class CheckConfig:
    strict: bool = False
    log_level: str = "WARNING"
    output_format: str = "text"
    request_timeout_sec: float = 30.0

    def override(self, **changes: Any) -> "CheckConfig":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def apply(self, values: Mapping[str, Any], source: str) -> "CheckConfig":
        """Apply raw string/JSON values; invalid entries are skipped with a warning."""
        cfg = self
        if values.get("strict") is not None:
            cfg = cfg.override(strict=_truthy(values["strict"]))
        level = values.get("log_level")
        if level is not None:
            level = str(level).strip().upper()
            if level in LOG_LEVELS:
                cfg = cfg.override(log_level=level)
            else:
                logger.warning(f"Ignoring log_level {level!r} from {source}")
        fmt = values.get("output_format")
        if fmt is not None:
            fmt = str(fmt).strip().lower()
            if fmt in OUTPUT_FORMATS:
                cfg = cfg.override(output_format=fmt)
            else:
                logger.warning(f"Ignoring output_format {fmt!r} from {source}")
        timeout = values.get("request_timeout_sec")
        if timeout is not None:
            try:
                to = float(timeout)
                if to >= 1.0:
                    cfg = cfg.override(request_timeout_sec=to)
                else:
                    logger.warning(f"Ignoring request_timeout_sec {timeout!r} from {source} (< 1s)")
            except (TypeError, ValueError):
                logger.warning(f"Ignoring request_timeout_sec {timeout!r} from {source}")
        return cfg


def _env_values() -> Dict[str, Any]:
    return {
        "strict": os.environ.get("GLTFCHECK_STRICT"),
        "log_level": os.environ.get("GLTFCHECK_LOG_LEVEL"),
        "output_format": os.environ.get("GLTFCHECK_FORMAT"),
        "request_timeout_sec": os.environ.get("GLTFCHECK_TIMEOUT"),
    }


def load_config(config_paths: Optional[List[str]] = None) -> CheckConfig:
    """
    Resolve the configuration with precedence (lowest first):
      1) built-in defaults
      2) config file
      3) environment variables
    """
    cfg = CheckConfig()
    cfg = cfg.apply(_load_config_file(config_paths), "config file")
    cfg = cfg.apply(_env_values(), "environment")
    logger.debug("Config resolved: %s", cfg)
    return cfg


__all__ = ["CheckConfig", "load_config", "OUTPUT_FORMATS", "LOG_LEVELS"]
