"""
Configuration
=============
Central registry for the tunable constants of the sketching tool.

The defaults live here as module constants. ``load_config`` builds the
runtime configuration, letting environment variables override each value:

    BEZIER_SKETCH_POINT_RADIUS   radius of newly created points (px)
    BEZIER_SKETCH_CLICK_RADIUS   pick distance for grabbing a point (px)
    BEZIER_SKETCH_SAMPLE_STEP    curve parameter step, 0.0001 <= step <= 1
    BEZIER_SKETCH_FRAME_MS       canvas frame interval (ms)
    BEZIER_SKETCH_UPDATE_URL     release JSON endpoint; unset disables the check
    BEZIER_SKETCH_LOG_LEVEL      logging level name, e.g. DEBUG
"""
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, TypeVar

from .errors import ConfigError

T = TypeVar("T")

# Global Constants
DEFAULT_POINT_RADIUS: float = 4.0
DEFAULT_CLICK_RADIUS: float = 20.0
DEFAULT_SAMPLE_STEP: float = 0.01
FRAME_INTERVAL_MS: int = 16

# 1e-4 already gives 10001 samples per curve per frame.
MIN_SAMPLE_STEP: float = 1e-4
MAX_SAMPLE_STEP: float = 1.0

ENV_PREFIX = "BEZIER_SKETCH_"


@dataclass(frozen=True)
class SceneConfig:
    """Values the scene needs at construction time."""
    point_radius: float = DEFAULT_POINT_RADIUS
    click_radius: float = DEFAULT_CLICK_RADIUS
    sample_step: float = DEFAULT_SAMPLE_STEP

    def validate(self) -> 'SceneConfig':
        for name in ("point_radius", "click_radius", "sample_step"):
            value = getattr(self, name)
            if not (value > 0 and math.isfinite(value)):
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if not MIN_SAMPLE_STEP <= self.sample_step <= MAX_SAMPLE_STEP:
            raise ConfigError(
                f"sample_step must be between {MIN_SAMPLE_STEP:g} and {MAX_SAMPLE_STEP:g}, "
                f"got {self.sample_step!r}")
        return self


@dataclass(frozen=True)
class AppConfig:
    scene: SceneConfig = field(default_factory=SceneConfig)
    frame_interval_ms: int = FRAME_INTERVAL_MS
    update_url: Optional[str] = None
    log_level: int = logging.INFO


def _read(environ: Mapping[str, str], name: str, convert: Callable[[str], T], default: T) -> T:
    key = ENV_PREFIX + name
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}") from e


def _log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(name)
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """
    Builds the application configuration from defaults and environment overrides.

    Args:
        environ: Mapping to read overrides from. Defaults to ``os.environ``.

    Returns:
        A validated AppConfig.

    Raises:
        ConfigError: If a variable cannot be parsed or is out of range.
    """
    if environ is None:
        environ = os.environ

    scene = SceneConfig(
        point_radius=_read(environ, "POINT_RADIUS", float, DEFAULT_POINT_RADIUS),
        click_radius=_read(environ, "CLICK_RADIUS", float, DEFAULT_CLICK_RADIUS),
        sample_step=_read(environ, "SAMPLE_STEP", float, DEFAULT_SAMPLE_STEP),
    ).validate()

    frame_ms = _read(environ, "FRAME_MS", int, FRAME_INTERVAL_MS)
    if frame_ms <= 0:
        raise ConfigError(f"{ENV_PREFIX}FRAME_MS must be positive, got {frame_ms}")

    return AppConfig(
        scene=scene,
        frame_interval_ms=frame_ms,
        update_url=_read(environ, "UPDATE_URL", str, None),
        log_level=_read(environ, "LOG_LEVEL", _log_level, logging.INFO),
    )
