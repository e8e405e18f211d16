"""Configuration loader and validator for layoutfix.

Provides ``load_config(path)`` which reads a JSON config (with
comment and trailing-comma tolerant sanitizer) and merges user
overrides from ``~/.config/layoutfix/config.json``.

Also provides ``validate_config(conf)`` which normalizes and
validates config keys, raising ``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

from layoutfix.core.errors import ConfigurationError
from layoutfix.core.languages import Language

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/layoutfix/config.json'

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'lang_from': Language.ENG.value,
    'lang_to': Language.UKR.value,
    'debug': False,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r"//.*$", "", s, flags=re.MULTILINE)
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _validate_tag(conf: dict, key: str, default: str) -> str:
    raw = conf.get(key, default)
    if not isinstance(raw, str):
        raise ValueError(f"Invalid '{key}': must be a language tag string")
    try:
        return Language.parse(raw).value
    except ConfigurationError as exc:
        raise ValueError(f"Invalid '{key}': {exc}") from None


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    defaults = dict(DEFAULT_CONFIG)
    out = dict(defaults)

    out['lang_from'] = _validate_tag(conf, 'lang_from', defaults['lang_from'])
    out['lang_to'] = _validate_tag(conf, 'lang_to', defaults['lang_to'])
    if out['lang_from'] == out['lang_to']:
        raise ValueError("Invalid 'lang_from'/'lang_to': languages should be different")

    dbg = conf.get('debug', defaults['debug'])
    if not isinstance(dbg, bool):
        raise ValueError("Invalid 'debug' flag: must be boolean")
    out['debug'] = dbg

    return out


def _read_and_merge(path: str, target_config: dict) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        logger.warning("Invalid config %s: top level must be a JSON object", path)
        return False

    # Validate the merged result so a file may override just one side of the pair
    merged = dict(target_config)
    merged.update({k: v for k, v in cfg.items() if k in DEFAULT_CONFIG})
    try:
        validated = validate_config(merged)
    except ValueError as verr:
        logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    logger.debug("Merged config from %s", path)
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/layoutfix/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)

    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(path):
        _read_and_merge(path, config)
    else:
        logger.debug("No config at %s, using defaults", path)

    return config
