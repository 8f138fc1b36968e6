"""Quick validation report for the configured instrument document."""

import argparse
import logging

from pricedash import load_config
from pricedash.connectors import SourceLoadError, connector_from_config
from pricedash.ingestion import sanitize
from pricedash.utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate the instrument price document")
    parser.add_argument("--config", default=None, help="Path to YAML config (default: config/dashboard.yaml)")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    configure_logging(cfg.logging)

    print("=" * 100)
    print("INSTRUMENT DATA VALIDATION REPORT")
    print("=" * 100)

    try:
        document = connector_from_config(cfg.source, cfg.instrument_names).load_document()
    except SourceLoadError as e:
        logger.error(f"Load failed: {e}")
        print(f"✗ ERROR: {e}")
        print("=" * 100)
        return 1

    all_valid = True
    for name in cfg.instrument_names:
        raw = document[name]
        series, warnings = sanitize(raw)
        status = "✓" if not warnings else "✗"

        date_start = series[0].date.strftime("%Y-%m-%d") if series else "N/A"
        date_end = series[-1].date.strftime("%Y-%m-%d") if series else "N/A"

        print(f"{status} {name:25} | {len(series):3d}/{len(raw):3d} kept | {date_start} to {date_end}")
        if warnings:
            all_valid = False
            for warn in warnings:
                print(f"  ⚠ {warn}")

    print("=" * 100)
    if all_valid:
        print("✓ All instruments validated successfully")
    else:
        print("✗ Some entries were rejected")
    print("=" * 100)

    return 0 if all_valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
