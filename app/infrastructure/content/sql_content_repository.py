"""
Adapter: Content repository.

Implements ContentRepository port on top of a SQLAlchemy engine.
Pages, boxes and sections share the contents table; their localized
text lives in content_descriptions.
"""

import logging
from collections import defaultdict
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine

from app.domain.content.entities import Content, ContentDescription, ContentType
from app.domain.content.ports import ContentRepository
from app.infrastructure.content.schema import content_descriptions, contents

logger = logging.getLogger(__name__)


class SqlContentRepository(ContentRepository):
    """Reads and writes localized content rows."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_by_type(
        self, store_code: str, content_type: ContentType
    ) -> list[Content]:
        query = (
            select(contents)
            .where(contents.c.store_code == store_code)
            .where(contents.c.content_type == content_type.value)
            .order_by(contents.c.sort_order, contents.c.code)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
            descriptions = self._load_descriptions(conn, [row["id"] for row in rows])

        return [self._to_entity(row, descriptions[row["id"]]) for row in rows]

    def get_by_code(
        self, store_code: str, code: str, content_type: ContentType
    ) -> Optional[Content]:
        query = (
            select(contents)
            .where(contents.c.store_code == store_code)
            .where(contents.c.code == code)
            .where(contents.c.content_type == content_type.value)
        )
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
            if row is None:
                return None
            descriptions = self._load_descriptions(conn, [row["id"]])

        return self._to_entity(row, descriptions[row["id"]])

    def save(self, store_code: str, content: Content) -> None:
        with self._engine.begin() as conn:
            content_id = conn.execute(
                select(contents.c.id)
                .where(contents.c.store_code == store_code)
                .where(contents.c.code == content.code)
                .where(contents.c.content_type == content.content_type.value)
            ).scalar()

            if content_id is None:
                result = conn.execute(
                    insert(contents).values(
                        store_code=store_code,
                        code=content.code,
                        content_type=content.content_type.value,
                        visible=content.visible,
                        sort_order=content.sort_order,
                    )
                )
                content_id = result.inserted_primary_key[0]
            else:
                conn.execute(
                    update(contents)
                    .where(contents.c.id == content_id)
                    .values(visible=content.visible, sort_order=content.sort_order)
                )
                conn.execute(
                    delete(content_descriptions).where(
                        content_descriptions.c.content_id == content_id
                    )
                )

            if content.descriptions:
                conn.execute(
                    insert(content_descriptions),
                    [
                        {
                            "content_id": content_id,
                            "language": d.language,
                            "title": d.title,
                            "body": d.body,
                            "seo_metadata": dict(d.metadata),
                        }
                        for d in content.descriptions
                    ],
                )

        logger.debug(
            "Persisted %s %s (id=%s) with %d descriptions",
            content.content_type.value,
            content.code,
            content_id,
            len(content.descriptions),
        )

    @staticmethod
    def _load_descriptions(
        conn: Connection, content_ids: list[int]
    ) -> dict[int, list[ContentDescription]]:
        grouped: dict[int, list[ContentDescription]] = defaultdict(list)
        if not content_ids:
            return grouped

        query = (
            select(content_descriptions)
            .where(content_descriptions.c.content_id.in_(content_ids))
            .order_by(content_descriptions.c.id)
        )
        for row in conn.execute(query).mappings():
            grouped[row["content_id"]].append(
                ContentDescription(
                    language=row["language"],
                    title=row["title"],
                    body=row["body"] or "",
                    metadata=dict(row["seo_metadata"] or {}),
                )
            )
        return grouped

    @staticmethod
    def _to_entity(row, descriptions: list[ContentDescription]) -> Content:
        return Content(
            code=row["code"],
            content_type=ContentType(row["content_type"]),
            descriptions=tuple(descriptions),
            visible=bool(row["visible"]),
            sort_order=row["sort_order"],
        )
