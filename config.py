"""
Configuration for the weighting layer.

Holds the default cost attribute name, the reserved key prefix under which
costs are stored on vertices and edges, and an optional default edge-label
format. Can be loaded from a small YAML file:

    default_attribute: probability
    cost_prefix: "x-"
    label_format: "%0.2f"
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_ATTRIBUTE = "weight"
DEFAULT_COST_PREFIX = "x-"


@dataclass(frozen=True)
class WeightingConfig:
    """Settings shared by populate, cost lookup and the span/path queries.

    Attributes
    ----------
    default_attribute:
        Cost attribute used when a caller passes none (or an empty name).
    cost_prefix:
        Prefix of the reserved key holding a cost, e.g. ``"x-"`` stores the
        ``weight`` cost under ``"x-weight"``. Keeps costs apart from display
        attributes such as ``label`` or ``title``.
    label_format:
        printf-style format for edge labels when populate is not given one.
    """

    default_attribute: str = DEFAULT_ATTRIBUTE
    cost_prefix: str = DEFAULT_COST_PREFIX
    label_format: Optional[str] = None

    def validate(self) -> None:
        """Raise ValueError if the settings cannot address a cost attribute."""
        if not isinstance(self.default_attribute, str) or not self.default_attribute:
            raise ValueError("'default_attribute' must be a non-empty string.")
        if not isinstance(self.cost_prefix, str) or not self.cost_prefix:
            raise ValueError("'cost_prefix' must be a non-empty string.")
        if self.label_format is not None and not isinstance(self.label_format, str):
            raise ValueError("'label_format' must be a printf-style string or null.")

    def resolve(self, attr: Optional[str]) -> str:
        """Return attr, or the default attribute when attr is None or empty."""
        return attr or self.default_attribute

    def cost_key(self, attr: Optional[str] = None) -> str:
        """Reserved attribute key that stores the cost for attr."""
        return f"{self.cost_prefix}{self.resolve(attr)}"


def load_config(path: Path) -> WeightingConfig:
    """
    Read a WeightingConfig from YAML.

    Missing keys keep their defaults; an empty file gives WeightingConfig().

    Raises:
        ValueError: the file is not a mapping, has unknown keys, or fails
            WeightingConfig.validate().
    """
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Weighting config must be a mapping, got {type(data).__name__}.")

    known = {f.name for f in fields(WeightingConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown weighting config keys: {', '.join(unknown)}")

    config = WeightingConfig(**data)
    config.validate()
    return config
