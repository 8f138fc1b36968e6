"""Connectors for the static JSON instrument document.

The document is a JSON object keyed by instrument name, each value a list of
``{"date": ..., "price": ...}`` entries. Entries are returned untouched;
cleaning them is the sanitizer's job.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

from pricedash.config import SourceConfig

from .base import Connector, SourceLoadError, check_document_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JSONFileConnector(Connector):
    path: str
    instruments: list[str] = field(default_factory=lambda: ["Inst1", "Inst2"])

    def load_document(self) -> dict[str, list[Any]]:
        try:
            text = Path(self.path).read_text(encoding="utf-8")
            document = json.loads(text)
        except (OSError, json.JSONDecodeError) as exc:
            raise SourceLoadError(f"Could not read {self.path}: {exc}") from exc

        doc = check_document_shape(document, self.instruments, self.path)
        logger.info(
            f"Loaded {self.path}: "
            + ", ".join(f"{name}={len(entries)}" for name, entries in doc.items())
        )
        return doc


@dataclass(frozen=True)
class HTTPJSONConnector(Connector):
    """Fetch the document over HTTP.

    Attributes:
        url: Absolute URL of the JSON document
        instruments: Instrument keys that must be present
        timeout_sec: HTTP request timeout in seconds
    """

    url: str
    instruments: list[str] = field(default_factory=lambda: ["Inst1", "Inst2"])
    timeout_sec: float = 30.0

    def load_document(self) -> dict[str, list[Any]]:
        logger.debug(f"Fetching instrument document: {self.url}")
        try:
            resp = requests.get(self.url, timeout=self.timeout_sec)
            resp.raise_for_status()
            document = resp.json()
        except requests.RequestException as exc:
            raise SourceLoadError(f"Request to {self.url} failed: {exc}") from exc
        except ValueError as exc:
            raise SourceLoadError(f"Response from {self.url} is not valid JSON: {exc}") from exc

        doc = check_document_shape(document, self.instruments, self.url)
        logger.info(
            f"Fetched {self.url}: "
            + ", ".join(f"{name}={len(entries)}" for name, entries in doc.items())
        )
        return doc


def connector_from_config(cfg: SourceConfig, instruments: list[str]) -> Connector:
    if cfg.type == "file":
        return JSONFileConnector(path=cfg.path, instruments=list(instruments))
    if cfg.type == "http":
        return HTTPJSONConnector(url=cfg.url, instruments=list(instruments), timeout_sec=cfg.timeout)
    raise ValueError(f"Unsupported source type: {cfg.type}")
