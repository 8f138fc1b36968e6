from .dates import parse_date
from .logs import configure_logging

__all__ = ["parse_date", "configure_logging"]
