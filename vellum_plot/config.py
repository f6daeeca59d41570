from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
import math
import os
from pathlib import Path
import tomllib
from typing import Any, Mapping


_ENV_KEYS = {
    "width": "VELLUM_PLOT_WIDTH",
    "height": "VELLUM_PLOT_HEIGHT",
    "sample": "VELLUM_PLOT_SAMPLE",
    "log_level": "VELLUM_LOG_LEVEL",
}


@dataclass(frozen=True)
class PlotConfig:
    width: float = 640.0
    height: float = 360.0
    sample: int = 1
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not (math.isfinite(self.width) and math.isfinite(self.height)) or self.width <= 0 or self.height <= 0:
            raise ValueError(f"plot width/height must be finite and > 0, got {self.width}x{self.height}")
        if self.sample < 1:
            raise ValueError("sample must be >= 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log_level: {self.log_level!r}")

    def with_overrides(self, **overrides: Any) -> "PlotConfig":
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return replace(self, **_coerce_values(values, source="override"))


def load_config(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> PlotConfig:
    """Defaults, then the `[plot]` table of a TOML file, then environment variables."""
    config = PlotConfig()
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"config file not found: {config_path}")
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
        table = raw.get("plot", {})
        if not isinstance(table, dict):
            raise ValueError("config [plot] must be a table")
        unknown = set(table) - {f.name for f in fields(PlotConfig)}
        if unknown:
            raise ValueError(f"unknown config key(s): {', '.join(sorted(unknown))}")
        config = replace(config, **_coerce_values(table, source=str(config_path)))

    env = os.environ if env is None else env
    from_env = {key: env[var].strip() for key, var in _ENV_KEYS.items() if env.get(var, "").strip()}
    if from_env:
        config = replace(config, **_coerce_values(from_env, source="environment"))
    return config


def _coerce_values(values: Mapping[str, Any], *, source: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, raw in values.items():
        try:
            if key in ("width", "height"):
                out[key] = float(raw)
            elif key == "sample":
                out[key] = _coerce_int(raw)
            elif key == "log_level":
                out[key] = str(raw).upper()
            else:
                raise ValueError(f"unknown config key: {key}")
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid {key} from {source}: {raw!r}") from exc
    return out


def _coerce_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise TypeError("bool is not an integer")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError("expected an integer")
        return int(raw)
    return int(raw)
