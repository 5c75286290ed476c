"""
Demo configuration: which components to build and which visitors to run.

Loaded from YAML via an intermediate dict, the same way in both directions:

    components: [A, B]
    log_level: WARNING
    traversals:
      - banner: "Client code works with all visitors via the base Visitor interface:"
        visitor: Visitor1

Every missing key falls back to the defaults, which reproduce the
two-visitor walkthrough. Validation happens here, before any traversal runs.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from ddvisit.examples import COMPONENT_VARIANTS, VISITORS


class ConfigError(ValueError):
    """Raised when a demo configuration is malformed or names unknown things."""
    pass


DEFAULT_COMPONENTS = ["A", "B"]

DEFAULT_BANNERS = [
    "Client code works with all visitors via the base Visitor interface:",
    "It allows the same client code to work with different types of visitors:",
]


@dataclass
class TraversalConfig:
    """
    One traversal of the component sequence.

    Properties:
        banner: Line printed before the traversal starts
        visitor: Registered visitor class name (e.g., "Visitor1")
    """

    banner: str
    visitor: str


def _default_traversals() -> List[TraversalConfig]:
    return [
        TraversalConfig(banner=DEFAULT_BANNERS[0], visitor="Visitor1"),
        TraversalConfig(banner=DEFAULT_BANNERS[1], visitor="Visitor2"),
    ]


@dataclass
class DemoConfig:
    """
    Complete demo configuration.

    Properties:
        components: Component variant tags, in traversal order
        traversals: Traversals to run, in order, over the same components
        log_level: Name of a standard logging level
    """

    components: List[str] = field(default_factory=lambda: list(DEFAULT_COMPONENTS))
    traversals: List[TraversalConfig] = field(default_factory=_default_traversals)
    log_level: str = "WARNING"


def _require_list(d: Dict[str, Any], key: str) -> List[Any] | None:
    value = d.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def traversal_from_dict(d: Any) -> TraversalConfig:
    if not isinstance(d, dict):
        raise ConfigError(f"Traversal entry must be a mapping, got {type(d).__name__}")
    if "visitor" not in d:
        raise ConfigError(f"Traversal entry is missing 'visitor': {d}")
    visitor = str(d["visitor"])
    if visitor not in VISITORS:
        raise ConfigError(f"Unknown visitor: {visitor!r} (known: {', '.join(VISITORS)})")
    banner = d.get("banner")
    if banner is None:
        banner = ""
    elif not isinstance(banner, str):
        raise ConfigError(f"Traversal banner must be a string, got {type(banner).__name__}")
    return TraversalConfig(banner=banner, visitor=visitor)


def traversal_to_dict(t: TraversalConfig) -> Dict[str, Any]:
    return {"banner": t.banner, "visitor": t.visitor}


def config_from_dict(d: Dict[str, Any] | None) -> DemoConfig:
    """
    Build and validate a DemoConfig.

    Args:
        d: Parsed mapping, or None for an empty document

    Returns:
        DemoConfig with defaults filled in

    Raises:
        ConfigError: On wrong shapes, unknown tags, visitors or log levels
    """
    if d is None:
        return DemoConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")

    cfg = DemoConfig()

    components = _require_list(d, "components")
    if components is not None:
        unknown = [tag for tag in components if not isinstance(tag, str) or tag not in COMPONENT_VARIANTS]
        if unknown:
            raise ConfigError(
                f"Unknown component tags: {unknown} (known: {', '.join(COMPONENT_VARIANTS)})"
            )
        cfg.components = list(components)

    traversals = _require_list(d, "traversals")
    if traversals is not None:
        cfg.traversals = [traversal_from_dict(t) for t in traversals]

    if d.get("log_level") is not None:
        level = str(d["log_level"]).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {d['log_level']!r}")
        cfg.log_level = level

    return cfg


def config_to_dict(cfg: DemoConfig) -> Dict[str, Any]:
    return {
        "components": list(cfg.components),
        "traversals": [traversal_to_dict(t) for t in cfg.traversals],
        "log_level": cfg.log_level,
    }


def config_from_yaml(s: str) -> DemoConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}")
    return config_from_dict(d)


def config_to_yaml(cfg: DemoConfig) -> str:
    return yaml.safe_dump(config_to_dict(cfg), sort_keys=False)


def load_config(filepath: str) -> DemoConfig:
    """
    Load a DemoConfig from a YAML file.

    Args:
        filepath: Path to the YAML file

    Returns:
        Validated DemoConfig
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            text = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")
    except UnicodeDecodeError:
        raise ConfigError(f"Config file is not valid UTF-8: {filepath}")
    return config_from_yaml(text)
