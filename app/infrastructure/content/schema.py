"""SQLAlchemy metadata describing the content schema."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

metadata = MetaData()

merchant_stores = Table(
    "merchant_stores",
    metadata,
    Column("code", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("default_language", Text, nullable=False),
    # Comma-separated locale tags, in display order.
    Column("languages", Text, nullable=False),
)

contents = Table(
    "contents",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "store_code",
        Text,
        ForeignKey("merchant_stores.code", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("code", Text, nullable=False),
    Column("content_type", Text, nullable=False),
    Column("visible", Boolean, nullable=False, default=True),
    Column("sort_order", Integer, nullable=False, default=0),
    UniqueConstraint("store_code", "code", "content_type", name="uq_contents_code"),
)

Index("ix_contents_store_type", contents.c.store_code, contents.c.content_type)

content_descriptions = Table(
    "content_descriptions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "content_id",
        Integer,
        ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("language", Text, nullable=False),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False, default=""),
    Column("seo_metadata", JSON, nullable=True),
    UniqueConstraint("content_id", "language", name="uq_content_descriptions_lang"),
)

__all__ = ["metadata", "merchant_stores", "contents", "content_descriptions"]
