from .base import Connector, SourceLoadError
from .json_connector import HTTPJSONConnector, JSONFileConnector, connector_from_config

__all__ = [
    "Connector",
    "SourceLoadError",
    "JSONFileConnector",
    "HTTPJSONConnector",
    "connector_from_config",
]
