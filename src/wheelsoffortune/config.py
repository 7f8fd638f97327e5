"""
Configuration & Global Constants
================================
This module serves as the central registry for the tunable numbers of the
artwork.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (ring fractions, fade steps, easing
   factors...) from being scattered across the model and controllers.
2. Overrides: It can load a JSON file of overrides so the look and feel of the
   artwork can be tweaked without touching the code.

Exports:
    ArtworkConfig: Dataclass holding every tunable parameter.
    MatchingStrategy: How restoration finds the particles of a wheel.
    load_config: Build an ArtworkConfig from a JSON file.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


# Global Constants
VISIBLE_APP_NAME = "Wheels of Fortune"
DEFAULT_WIDTH: int = 1280
DEFAULT_HEIGHT: int = 800
DEFAULT_FPS: int = 60
RESIZE_DEBOUNCE_MS: int = 150

MAX_ALPHA: float = 255.0


class MatchingStrategy(StrEnum):
    """How the restoration step decides which particles belong to a wheel."""
    PROXIMITY = "proximity"  # recompute ring positions and compare distances
    OWNER = "owner"  # use the owning wheel id recorded at spawn time


@dataclass(frozen=True)
class ArtworkConfig:
    """
    All tunable parameters of the artwork.
    Defaults reproduce the look of the original piece.
    """
    # --- Wheel rings ---
    spoke_count: int = 24
    spoke_inner_fraction: float = 0.55
    spoke_outer_fraction: float = 0.8
    spoke_width_fraction: float = 0.03
    outer_dot_count: int = 40
    outer_dot_fraction: float = 0.9
    outer_dot_size_fraction: float = 0.08

    # --- Fade-in of the inner pattern ---
    fade_step: float = 5.0

    # --- Drifting particles ---
    alpha_step: float = 2.0
    shrink_factor: float = 0.99
    spoke_size_multiplier: float = 5.0
    min_speed: float = 1.0
    max_speed: float = 3.0
    wind_x_range: tuple[float, float] = (-0.2, -0.05)
    wind_y_range: tuple[float, float] = (0.05, 0.2)
    max_rotation_speed: float = 0.05

    # --- Returning particles ---
    return_speed: float = 0.05
    rotation_damping: float = 0.05
    spoke_rest_divisor: float = 5.0
    arrival_epsilon: float = 1.0
    alpha_snap: float = 0.5

    # --- Restoration matching ---
    matching: MatchingStrategy = MatchingStrategy.PROXIMITY
    match_tolerance: float = 10.0

    # --- Layout ---
    wheel_count: int = 25
    min_radius_fraction: float = 0.04
    max_radius_fraction: float = 0.12
    max_attempts: int = 5000
    overlap_fraction: float = 0.4
    neighbour_factor: float = 1.5
    connect_factor: float = 1.3

    def validate(self) -> None:
        """Raise ValueError when a parameter is outside its meaningful range."""
        for name in ("spoke_count", "outer_dot_count", "wheel_count", "max_attempts"):
            if getattr(self, name) < 0:
                raise ValueError(f"'{name}' must not be negative.")
        if self.fade_step <= 0.0 or self.alpha_step <= 0.0:
            raise ValueError("'fade_step' and 'alpha_step' must be positive.")
        if not 0.0 < self.shrink_factor <= 1.0:
            raise ValueError("'shrink_factor' must be in (0, 1].")
        for name in ("return_speed", "rotation_damping"):
            if not 0.0 < getattr(self, name) <= 1.0:
                raise ValueError(f"'{name}' must be in (0, 1].")
        if self.min_speed > self.max_speed:
            raise ValueError("'min_speed' must not exceed 'max_speed'.")
        if not 0.0 < self.min_radius_fraction <= self.max_radius_fraction:
            raise ValueError("Radius fractions must satisfy 0 < min <= max.")
        if self.match_tolerance < 0.0 or self.arrival_epsilon <= 0.0:
            raise ValueError("Tolerances must be positive.")

    @property
    def particles_per_wheel(self) -> int:
        return self.spoke_count + self.outer_dot_count

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _coerce(name: str, raw: Any, default: Any) -> Any:
    """Convert a JSON value to the type of the matching default."""
    if isinstance(default, MatchingStrategy):
        try:
            return MatchingStrategy(raw)
        except ValueError:
            options = ", ".join(m.value for m in MatchingStrategy)
            raise ValueError(f"'{name}' must be one of: {options}.") from None
    if isinstance(default, tuple):
        if not isinstance(raw, (list, tuple)) or len(raw) != 2 or not all(_is_finite_number(v) for v in raw):
            raise ValueError(f"'{name}' must be a pair of finite numbers, got {raw!r}.")
        low, high = (float(v) for v in raw)
        return (min(low, high), max(low, high))
    if isinstance(default, bool) or not _is_finite_number(raw):
        raise ValueError(f"'{name}' must be a finite number, got {raw!r}.")
    if isinstance(default, int):
        if float(raw) != int(raw):
            raise ValueError(f"'{name}' must be an integer, got {raw!r}.")
        return int(raw)
    return float(raw)


def apply_overrides(base: ArtworkConfig, overrides: Dict[str, Any]) -> ArtworkConfig:
    """Return a copy of ``base`` with the known keys of ``overrides`` applied."""
    known = {f.name for f in fields(base)}
    changes: Dict[str, Any] = {}
    for key, raw in overrides.items():
        if key not in known:
            logger.warning(f"Ignoring unknown configuration key '{key}'.")
            continue
        changes[key] = _coerce(key, raw, getattr(base, key))

    config = replace(base, **changes)
    config.validate()
    return config


def load_config(path: Optional[str], base: Optional[ArtworkConfig] = None) -> ArtworkConfig:
    """
    Load configuration overrides from a JSON file.

    Args:
        path: Path to a JSON object of overrides. None returns the defaults.
        base: Config to apply the overrides on (defaults to ArtworkConfig()).

    Raises:
        ValueError: The file cannot be read or holds invalid values.
    """
    base = base or ArtworkConfig()
    if path is None:
        return base

    logger.info(f"Loading configuration from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ValueError(f"Cannot read configuration file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in configuration file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file '{path}' must contain a JSON object.")

    return apply_overrides(base, data)
