"""Shared fixtures: sample instrument documents and config files."""
import json
from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

SAMPLE_DOCUMENT: Dict[str, Any] = {
    "Inst1": [
        {"date": "2024-01-03", "price": 30},
        {"date": "2024-01-01", "price": 10},
        {"date": "2024-01-02", "price": 20},
    ],
    "Inst2": [
        {"date": "2024-01-01", "price": 5.5},
        {"date": "invalid", "price": 7.0},
        {"date": "2024-01-02", "price": 6.5},
    ],
}


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def document_path(tmp_path: Path, sample_document: Dict[str, Any]) -> Path:
    path = tmp_path / "input_data.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path: Path, document_path: Path) -> Path:
    path = tmp_path / "dashboard.yaml"
    path.write_text(
        yaml.safe_dump({"source": {"type": "file", "path": str(document_path)}}),
        encoding="utf-8",
    )
    return path
