from __future__ import annotations

import logging

from pricedash.config import LoggingConfig


def configure_logging(cfg: LoggingConfig | None = None) -> None:
    cfg = cfg or LoggingConfig()
    logging.basicConfig(level=getattr(logging, cfg.level.upper(), logging.INFO), format=cfg.format)
