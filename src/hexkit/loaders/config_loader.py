"""Configuration — loads tunable defaults from config/hexkit.yaml.

Provides a single ``HexConfig`` dataclass that is loaded once at startup
and then passed wherever defaults are needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/hexkit.yaml"


@dataclass
class HexConfig:
    """All tunable defaults.

    Loaded from ``config/hexkit.yaml``.  Every field has a sensible default
    so the tools work even without the file.
    """

    # -- Grid --------------------------------------------------------
    grid_radius: int = 5
    default_tile: str = "plain"

    # -- Reachability ------------------------------------------------
    max_steps: int = 3

    # -- Weighted pathfinding ----------------------------------------
    base_cost: float = 1.0
    blocked_cost: float = 10_000.0

    # -- Logging -----------------------------------------------------
    log_level: str = "INFO"


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> HexConfig:
    """Load configuration from a YAML file.

    Missing keys fall back to dataclass defaults, unknown keys are ignored.
    If the file does not exist, a warning is logged and pure defaults are
    returned.
    """
    p = Path(path)
    if not p.exists():
        log.warning("Config not found at %s, using defaults", p)
        return HexConfig()

    with p.open() as f:
        raw = yaml.safe_load(f) or {}

    log.info("Loaded config from %s (%d keys)", p, len(raw))

    return HexConfig(**{
        k: v for k, v in raw.items()
        if k in HexConfig.__dataclass_fields__
    })
