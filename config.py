from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "disk")
COORDINATE_TYPES = ("float", "int")
MODES = ("layers", "hull")


class ConfigError(ValueError):
    pass


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class BenchmarkConfig:
    """
    Benchmark parameters.

    `coordinate_type` selects the numeric type of generated coordinates:
    "int" gives exact orientation tests (Python ints do not overflow),
    "float" may misclassify nearly collinear points.
    For integer coordinates the uniform square is [low, high] and the disk
    contains the lattice points within `radius`.
    """
    sizes: tuple[int, ...] = (20, 50, 100, 200, 500, 1000, 2000, 3000)
    trials: int = 250
    distribution: str = "uniform"
    coordinate_type: str = "float"
    low: float = 0.0
    high: float = 1.0
    radius: float = 1.0
    center: tuple[float, float] = field(default=(0.0, 0.0))
    mode: str = "layers"
    seed: int | None = 42

    def __post_init__(self):
        try:
            object.__setattr__(self, "sizes", tuple(int(n) for n in self.sizes))
            object.__setattr__(self, "center", tuple(self.center))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid sizes {self.sizes!r} or center {self.center!r}: {e}") from e
        self.validate()

    def validate(self):
        if not _is_integer(self.trials):
            raise ConfigError(f"Number of trials must be an integer: {self.trials!r}")
        if self.seed is not None and not _is_integer(self.seed):
            raise ConfigError(f"Seed must be an integer: {self.seed!r}")
        for name in ("low", "high", "radius"):
            if not _is_number(getattr(self, name)):
                raise ConfigError(f"{name} must be a number: {getattr(self, name)!r}")
        if len(self.center) != 2 or not all(_is_number(c) for c in self.center):
            raise ConfigError(f"Disk center must have two numeric coordinates: {self.center}")

        if not self.sizes:
            raise ConfigError("At least one point set size is required")
        if any(n < 0 for n in self.sizes):
            raise ConfigError(f"Point set sizes must be non-negative: {self.sizes}")
        if self.trials < 1:
            raise ConfigError(f"Number of trials must be positive: {self.trials}")
        if self.distribution not in DISTRIBUTIONS:
            raise ConfigError(f"Unknown distribution {self.distribution!r}, expected one of {DISTRIBUTIONS}")
        if self.coordinate_type not in COORDINATE_TYPES:
            raise ConfigError(
                f"Unknown coordinate type {self.coordinate_type!r}, expected one of {COORDINATE_TYPES}"
            )
        if self.mode not in MODES:
            raise ConfigError(f"Unknown mode {self.mode!r}, expected one of {MODES}")
        if self.high <= self.low:
            raise ConfigError(f"Empty bounding box: low={self.low}, high={self.high}")
        if self.integer and math.ceil(self.low) > math.floor(self.high):
            raise ConfigError(f"No integer coordinates between low={self.low} and high={self.high}")
        if self.radius <= 0:
            raise ConfigError(f"Disk radius must be positive: {self.radius}")

    @property
    def integer(self) -> bool:
        return self.coordinate_type == "int"

    def replace(self, **overrides) -> BenchmarkConfig:
        """
        Copy of the config with the given fields replaced. `None` values are ignored.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict | None) -> BenchmarkConfig:
        data = data or {}
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(config_path: str | Path) -> BenchmarkConfig:
    config_path = Path(config_path)
    logger.info("Loading configuration from: %s", config_path)

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping, got {type(data).__name__}")
    return BenchmarkConfig.from_dict(data)
