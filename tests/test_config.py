"""Tests for YAML configuration loading and validation."""
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from pricedash.config import DashboardConfig, load_config


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "dashboard.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == DashboardConfig()
    assert cfg.instrument_names == ["Inst1", "Inst2"]
    assert cfg.display.default_window_size == 10
    assert (cfg.display.min_window_size, cfg.display.max_window_size) == (1, 50)
    assert cfg.notifications.timeout_seconds == 5.0
    assert cfg.notifications.aggregation == "concat"


def test_repository_config_loads() -> None:
    cfg = load_config(Path(__file__).parents[1] / "config" / "dashboard.yaml")
    assert cfg.source.type == "file"
    assert [i.color for i in cfg.instruments] == ["#17BECF", "#7F7F7F"]


def test_partial_config_overrides(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, {"display": {"default_window_size": 20}, "notifications": {"aggregation": "last"}}))
    assert cfg.display.default_window_size == 20
    assert cfg.notifications.aggregation == "last"
    assert cfg.source.path == "data/input_data.json"


@pytest.mark.parametrize(
    "data",
    [
        {"display": {"default_window_size": 0}},
        {"display": {"default_window_size": 60}},
        {"display": {"min_window_size": 10, "max_window_size": 5}},
        {"source": {"type": "http"}},
        {"source": {"type": "ftp"}},
        {"instruments": []},
        {"notifications": {"timeout_seconds": 0}},
    ],
)
def test_invalid_config_rejected(tmp_path: Path, data) -> None:
    with pytest.raises(ValidationError):
        load_config(_write(tmp_path, data))
