from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

DEFAULT_CONFIG_PATH = Path("config/dashboard.yaml")


class SourceConfig(BaseModel):
    type: Literal["file", "http"] = "file"
    path: str = "data/input_data.json"
    url: str | None = None
    timeout: float = 30.0

    @model_validator(mode="after")
    def _require_url_for_http(self) -> "SourceConfig":
        if self.type == "http" and not self.url:
            raise ValueError("source.url is required when source.type is 'http'")
        return self


class InstrumentSpec(BaseModel):
    name: str
    color: str | None = None
    marker_size: int = 4


def _default_instruments() -> list[InstrumentSpec]:
    return [
        InstrumentSpec(name="Inst1", color="#17BECF"),
        InstrumentSpec(name="Inst2", color="#7F7F7F"),
    ]


class DisplayConfig(BaseModel):
    default_window_size: int = 10
    # Inclusive bounds enforced by the window-size input.
    min_window_size: int = Field(default=1, ge=1)
    max_window_size: int = 50
    show_moving_average: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> "DisplayConfig":
        if self.max_window_size < self.min_window_size:
            raise ValueError("display.max_window_size must be >= display.min_window_size")
        if not self.min_window_size <= self.default_window_size <= self.max_window_size:
            raise ValueError(
                f"display.default_window_size={self.default_window_size} outside "
                f"[{self.min_window_size}, {self.max_window_size}]"
            )
        return self


class NotificationConfig(BaseModel):
    timeout_seconds: float = Field(default=5.0, gt=0)
    # How several sanitization warnings from one load become a single message.
    aggregation: Literal["concat", "last"] = "concat"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class DashboardConfig(BaseModel):
    title: str = "Instrument Prices"
    source: SourceConfig = SourceConfig()
    instruments: list[InstrumentSpec] = Field(default_factory=_default_instruments, min_length=1)
    display: DisplayConfig = DisplayConfig()
    notifications: NotificationConfig = NotificationConfig()
    logging: LoggingConfig = LoggingConfig()

    @property
    def instrument_names(self) -> list[str]:
        return [spec.name for spec in self.instruments]


def load_config(path: str | Path | None = None) -> DashboardConfig:
    """Load the dashboard config; a missing file yields the defaults."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        return DashboardConfig()
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return DashboardConfig.model_validate(data)
