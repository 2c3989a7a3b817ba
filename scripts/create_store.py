#!/usr/bin/env python3
"""
CLI tool: Create or update a merchant store.

Creates the content schema if needed, then registers the store so
that its code can be used in the ``store`` query parameter and in
``/{store_code}/content/...`` routes.

Usage:
    python scripts/create_store.py ACME --name "Acme Corp" --languages en,fr
"""

import argparse
import logging
import sys

from app.core.config import settings
from app.domain.content.entities import MerchantStore
from app.infrastructure.content.bootstrap import build_engine, init_content_schema
from app.infrastructure.content.sql_store_repository import SqlStoreRepository
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Register a merchant store in the content database."""
    parser = argparse.ArgumentParser(description="Create or update a merchant store")
    parser.add_argument("code", help="Store code, e.g. ACME")
    parser.add_argument("--name", default=None, help="Display name (default: code)")
    parser.add_argument(
        "--languages",
        default="en",
        help="Comma-separated locale tags; the first is the default (default: en)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    configure_logging(level=args.log_level)

    languages = tuple(lang.strip() for lang in args.languages.split(",") if lang.strip())
    if not languages:
        logger.error("At least one language is required")
        return 1

    engine = build_engine(settings.database_url)
    try:
        init_content_schema(
            engine,
            default_store_code=settings.default_store_code,
            default_languages=settings.default_store_languages,
        )
        SqlStoreRepository(engine).save(
            MerchantStore(
                code=args.code,
                name=args.name or args.code,
                default_language=languages[0],
                languages=languages,
            )
        )
    except Exception:
        logger.exception("Could not save store %s", args.code)
        return 1
    finally:
        engine.dispose()

    logger.info("Store %s saved with languages %s", args.code, ",".join(languages))
    return 0


if __name__ == "__main__":
    sys.exit(main())
