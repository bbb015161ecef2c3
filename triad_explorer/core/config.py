from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

Rgb = Tuple[int, int, int]

# Depth 6 already draws 729 leaves; activity for every depth is held in memory.
MAX_SUPPORTED_DEPTH = 6


@dataclass
class DepthConfig:
    min_depth: int = 0
    max_depth: int = 6
    initial_depth: int = 0

    def to_tuple(self) -> Tuple[int, int]:
        return self.min_depth, self.max_depth


@dataclass
class GeometryConfig:
    scale: float = 0.9  # root edge as a fraction of min(width, height)


@dataclass
class ActivityConfig:
    seed: Optional[int] = None
    transactions_per_triad: int = 1000
    thousands_separator: str = ","


@dataclass
class PaletteConfig:
    leaf_alpha: float = 0.8
    leaf_outline: Rgb = (68, 68, 68)
    leaf_outline_width: float = 1.0
    root_fill: Rgb = (255, 255, 255)
    root_alpha: float = 0.9
    root_outline: Rgb = (136, 136, 136)
    root_outline_width: float = 2.0
    dark_background: Rgb = (0, 0, 0)
    light_background: Rgb = (243, 244, 246)


@dataclass
class ViewConfig:
    dark_mode: bool = True
    history_size: int = 50
    canvas_width: int = 640
    canvas_height: int = 560
    device_pixel_ratio: float = 1.0


@dataclass
class ExplorerConfig:
    depth: DepthConfig = field(default_factory=DepthConfig)
    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    activity: ActivityConfig = field(default_factory=ActivityConfig)
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    view: ViewConfig = field(default_factory=ViewConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Dict[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, dict):
                continue
            for key, value in section_values.items():
                if not hasattr(section, key):
                    continue
                # JSON has no tuples; colors come back as lists.
                if isinstance(getattr(section, key), tuple) and isinstance(value, list):
                    value = tuple(value)
                setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "depth", self.depth
        yield "geometry", self.geometry
        yield "activity", self.activity
        yield "palette", self.palette
        yield "view", self.view

    def validate(self) -> None:
        self._check_types()
        depth = self.depth
        if depth.min_depth < 0:
            raise ValueError(f"min_depth must be >= 0, got {depth.min_depth}")
        if depth.max_depth < depth.min_depth:
            raise ValueError(f"max_depth ({depth.max_depth}) is below min_depth ({depth.min_depth})")
        if depth.max_depth > MAX_SUPPORTED_DEPTH:
            raise ValueError(f"max_depth must be <= {MAX_SUPPORTED_DEPTH}, got {depth.max_depth}")
        if not depth.min_depth <= depth.initial_depth <= depth.max_depth:
            raise ValueError(
                f"initial_depth {depth.initial_depth} outside [{depth.min_depth}, {depth.max_depth}]"
            )
        if not 0.0 < self.geometry.scale <= 1.0:
            raise ValueError(f"geometry scale must be in (0, 1], got {self.geometry.scale}")
        if self.activity.transactions_per_triad < 0:
            raise ValueError("transactions_per_triad must be non-negative")
        if self.view.canvas_width < 1 or self.view.canvas_height < 1:
            raise ValueError("canvas size must be at least 1x1")
        if self.view.device_pixel_ratio <= 0:
            raise ValueError(f"device_pixel_ratio must be positive, got {self.view.device_pixel_ratio}")
        if self.view.history_size < 1:
            raise ValueError("history_size must be at least 1")

    def _check_types(self) -> None:
        # JSON may carry any type; report it here rather than from a comparison later.
        for section, names in _INT_FIELDS.items():
            for name in names:
                value = getattr(getattr(self, section), name)
                if not _is_int(value):
                    raise ValueError(f"{section}.{name} must be an integer, got {value!r}")
        for section, names in _NUMBER_FIELDS.items():
            for name in names:
                value = getattr(getattr(self, section), name)
                if not (_is_int(value) or isinstance(value, float)):
                    raise ValueError(f"{section}.{name} must be a number, got {value!r}")
        for name in _COLOR_FIELDS:
            value = getattr(self.palette, name)
            if not (isinstance(value, tuple) and len(value) == 3 and all(_is_int(c) and 0 <= c <= 255 for c in value)):
                raise ValueError(f"palette.{name} must be three integers in 0..255, got {value!r}")
        seed = self.activity.seed
        if seed is not None and not _is_int(seed):
            raise ValueError(f"activity.seed must be an integer or null, got {seed!r}")
        if not isinstance(self.activity.thousands_separator, str):
            raise ValueError("activity.thousands_separator must be a string")
        if not isinstance(self.view.dark_mode, bool):
            raise ValueError(f"view.dark_mode must be true or false, got {self.view.dark_mode!r}")

    @classmethod
    def from_json(cls, raw: str) -> "ExplorerConfig":
        config = cls()
        if not raw.strip():
            return config
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Config JSON must be an object at the top level.")
        config.update_from_mapping(data)
        config.validate()
        return config


_INT_FIELDS = {
    "depth": ("min_depth", "max_depth", "initial_depth"),
    "activity": ("transactions_per_triad",),
    "view": ("canvas_width", "canvas_height", "history_size"),
}
_NUMBER_FIELDS = {
    "geometry": ("scale",),
    "palette": ("leaf_alpha", "leaf_outline_width", "root_alpha", "root_outline_width"),
    "view": ("device_pixel_ratio",),
}
_COLOR_FIELDS = ("leaf_outline", "root_fill", "root_outline", "dark_background", "light_background")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def load_config(path: Optional[Path] = None, *, seed: Optional[int] = None) -> ExplorerConfig:
    """Read an optional JSON config file and apply command-line overrides."""
    config = ExplorerConfig.from_json(path.read_text(encoding="utf-8")) if path is not None else ExplorerConfig()
    if seed is not None:
        config.activity.seed = seed
    config.validate()
    return config
