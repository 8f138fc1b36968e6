from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SourceLoadError(RuntimeError):
    """The instrument document could not be fetched or has the wrong shape."""


class Connector(ABC):
    """Loads the raw instrument document: a mapping of name -> list of entries."""

    @abstractmethod
    def load_document(self) -> dict[str, list[Any]]:
        raise NotImplementedError


def check_document_shape(document: Any, instruments: list[str], source: str) -> dict[str, list[Any]]:
    if not isinstance(document, dict):
        raise SourceLoadError(f"{source}: expected a JSON object, got {type(document).__name__}")

    missing = [name for name in instruments if name not in document]
    if missing:
        raise SourceLoadError(f"{source}: missing instrument(s) {missing}")

    for name in instruments:
        if not isinstance(document[name], list):
            raise SourceLoadError(
                f"{source}: instrument {name!r} must be a list, got {type(document[name]).__name__}"
            )

    return {name: document[name] for name in instruments}
