"""Configuration loading and overrides for the projgrammar CLI.

Precedence, lowest to highest: built-in Constants, YAML config file
(explicit ``--config`` or the first default location found), ``--set``
KEY=VALUE overrides, then ``--loglevel``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import yaml

from constants import Constants, ExitCodes

logger = logging.getLogger(__name__)

_AFFIX_KEYS = ("elf_suffix", "lib_prefix", "lib_suffix")


def default_config_paths() -> List[str]:
    """Return candidate config paths in lookup order."""
    user_dir = os.path.expanduser(Constants.USER_CONFIG_DIR)
    paths = [os.path.join(os.getcwd(), name) for name in Constants.CONFIG_FILE_NAMES]
    paths.extend(os.path.join(user_dir, name) for name in Constants.CONFIG_FILE_NAMES)
    return paths


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the YAML configuration mapping.

    An explicit path that cannot be read or parsed aborts with
    ``ExitCodes.FILE_ERROR``; missing default files are simply skipped.
    """
    if config_path:
        candidates = [config_path]
    else:
        candidates = [p for p in default_config_paths() if os.path.isfile(p)]
    if not candidates:
        return {}

    path = candidates[0]
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError:
        logging.error("Config file not found: %s, aborting", path)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except (OSError, yaml.YAMLError) as e:
        logging.error("Unable to read config file %s: %s, aborting", path, e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    if data is None:
        return {}
    if not isinstance(data, dict):
        logging.error("Config file %s must contain a mapping, aborting", path)
        sys.exit(ExitCodes.FILE_ERROR.value)
    logger.debug("Loaded configuration from %s", path)
    return data


def _set_path(cfg: Dict[str, Any], dotted_key: str, value: Any) -> None:
    node = cfg
    parts = dotted_key.split(".")
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    node[parts[-1]] = value


def apply_set_overrides(cfg: Dict[str, Any], overrides: List[str]) -> Dict[str, Any]:
    """Merge ``--set KEY=VALUE`` pairs (dotted keys) into ``cfg``.

    Raises:
        ValueError: If an override is not in KEY=VALUE form.
    """
    for item in overrides or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Invalid --set override '{item}', expected KEY=VALUE")
        _set_path(cfg, key.strip(), yaml.safe_load(value) if value else "")
    return cfg


def apply_toolchain_overrides(cfg: Dict[str, Any]) -> None:
    """Apply ``toolchains.<NAME>.*`` affix overrides onto Constants."""
    toolchains = cfg.get("toolchains") or {}
    if not isinstance(toolchains, dict):
        logger.warning("Ignoring 'toolchains' config: expected a mapping")
        return
    affixes = dict(Constants.TOOLCHAIN_AFFIXES)
    defaults = (Constants.DEFAULT_ELF_SUFFIX, Constants.DEFAULT_LIB_PREFIX, Constants.DEFAULT_LIB_SUFFIX)
    for name, entry in toolchains.items():
        if not isinstance(entry, dict):
            logger.warning("Ignoring toolchain '%s' config: expected a mapping", name)
            continue
        current = list(affixes.get(str(name), defaults))
        for index, key in enumerate(_AFFIX_KEYS):
            if key in entry:
                current[index] = "" if entry[key] is None else str(entry[key])
        affixes[str(name)] = tuple(current)
    Constants.TOOLCHAIN_AFFIXES = affixes


def configured_log_level(cfg: Dict[str, Any]) -> Optional[str]:
    """Return ``logging.level`` from config, if any."""
    section = cfg.get("logging")
    if isinstance(section, dict) and section.get("level"):
        return str(section["level"]).upper()
    return None
