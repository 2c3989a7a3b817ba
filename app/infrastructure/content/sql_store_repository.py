"""
Adapter: Merchant store repository.

Implements StoreRepository port on top of a SQLAlchemy engine.
"""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from app.domain.content.entities import MerchantStore
from app.domain.content.ports import StoreRepository
from app.infrastructure.content.schema import merchant_stores


class SqlStoreRepository(StoreRepository):
    """Reads and writes merchant stores in the merchant_stores table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_code(self, store_code: str) -> Optional[MerchantStore]:
        query = select(merchant_stores).where(merchant_stores.c.code == store_code)
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()

        if row is None:
            return None
        return MerchantStore(
            code=row["code"],
            name=row["name"],
            default_language=row["default_language"],
            languages=tuple(lang for lang in row["languages"].split(",") if lang),
        )

    def save(self, store: MerchantStore) -> None:
        languages = list(store.languages)
        if store.default_language not in languages:
            languages.insert(0, store.default_language)

        values = {
            "name": store.name,
            "default_language": store.default_language,
            "languages": ",".join(languages),
        }
        with self._engine.begin() as conn:
            result = conn.execute(
                update(merchant_stores)
                .where(merchant_stores.c.code == store.code)
                .values(**values)
            )
            if result.rowcount == 0:
                conn.execute(insert(merchant_stores).values(code=store.code, **values))
