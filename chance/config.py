"""YAML configuration for search defaults."""

import copy
from pathlib import Path
from typing import Any

import yaml

from chance.errors import ParseError
from chance.parsing import parse_integer, parse_values

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "search": {
        "values": None,
        "target": None,
        "dedupe": False,
        "strict_dedupe": False,
        "limit": None,
    },
    "output": {
        "tree": False,
        "progress": False,
    },
}

BOOLEAN_KEYS = {
    "search": ("dedupe", "strict_dedupe"),
    "output": ("tree", "progress"),
}


def load_config(config_path: Path | None = None) -> dict:
    """Load configuration from a YAML file merged over the defaults.

    Args:
        config_path: YAML file, or None for defaults only

    Returns:
        Config dict with ``search`` and ``output`` sections

    Raises:
        ParseError: If the file is not a mapping or holds invalid values
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    with open(config_path) as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ParseError(f"Config file {config_path} must contain a mapping")

    for section, defaults in config.items():
        overrides = loaded.get(section) or {}
        if not isinstance(overrides, dict):
            raise ParseError(f"Config section '{section}' must be a mapping")
        defaults.update({k: v for k, v in overrides.items() if k in defaults})

    return validate_config(config)


def validate_config(config: dict) -> dict:
    """Normalize config values in place, raising ParseError on bad types."""
    search = config["search"]
    if search["values"] is not None:
        search["values"] = parse_values(search["values"])
    if search["target"] is not None:
        search["target"] = parse_integer(search["target"], name="Target")
    if search["limit"] is not None:
        limit = parse_integer(search["limit"], name="Limit")
        if limit < 0:
            raise ParseError(f"Limit must not be negative, got {limit}")
        search["limit"] = limit

    for section, keys in BOOLEAN_KEYS.items():
        for key in keys:
            if not isinstance(config[section][key], bool):
                raise ParseError(f"{section}.{key} must be true or false")
    return config
