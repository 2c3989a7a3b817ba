"""
Engine construction, schema creation and default store seeding.

Runs once at application startup. Idempotent.
"""

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from app.domain.content.entities import MerchantStore
from app.infrastructure.content.schema import metadata
from app.infrastructure.content.sql_store_repository import SqlStoreRepository

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine, creating the SQLite directory if needed."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, pool_pre_ping=True)


def init_content_schema(
    engine: Engine,
    default_store_code: str,
    default_languages: list[str],
) -> None:
    """Create content tables and seed the default store when missing.

    Args:
        engine: SQLAlchemy engine bound to the content database.
        default_store_code: Code of the store to seed.
        default_languages: Locale tags of the seeded store; the first one
            becomes its default language.
    """
    metadata.create_all(engine)

    repo = SqlStoreRepository(engine)
    if repo.get_by_code(default_store_code) is not None:
        return

    languages = tuple(default_languages) or ("en",)
    repo.save(
        MerchantStore(
            code=default_store_code,
            name=default_store_code.title(),
            default_language=languages[0],
            languages=languages,
        )
    )
    logger.info(
        "Seeded default store %s with languages %s",
        default_store_code,
        ",".join(languages),
    )
