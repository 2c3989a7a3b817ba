"""
Domain entities for the content bounded context.

Entities represent merchant stores, localized content and stored assets.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from enum import Enum


class ContentType(Enum):
    """Kind of a content item."""

    BOX = "BOX"
    PAGE = "PAGE"
    SECTION = "SECTION"


class FileContentType(Enum):
    """Kind of an uploaded asset; also the storage folder name."""

    IMAGE = "IMAGE"
    STATIC_FILE = "STATIC_FILE"

    @classmethod
    def from_mime_type(cls, mime_type: str | None) -> "FileContentType":
        """Infer the asset kind from an upload MIME type."""
        if mime_type and mime_type.lower().startswith("image/"):
            return cls.IMAGE
        return cls.STATIC_FILE


@dataclass(frozen=True)
class MerchantStore:
    """A tenant: an isolated storefront owning its own content.

    Attributes:
        code: Unique store code (e.g. DEFAULT).
        name: Display name.
        default_language: Locale tag used when nothing else matches.
        languages: Ordered locale tags enabled for this store.
    """

    code: str
    name: str
    default_language: str
    languages: tuple[str, ...] = ()

    def supports(self, language: str) -> bool:
        """Return True if the locale tag is enabled for this store."""
        return language in self.languages


@dataclass(frozen=True)
class Language:
    """A locale resolved for the current request."""

    code: str


@dataclass(frozen=True)
class ContentDescription:
    """Localized text of a content item in one language."""

    language: str
    title: str
    body: str = ""
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Content:
    """A page, box or section owned by a merchant store.

    Unique by (store, code, content_type).
    """

    code: str
    content_type: ContentType
    descriptions: tuple[ContentDescription, ...] = ()
    visible: bool = True
    sort_order: int = 0

    def description_for(
        self, language: str, fallback_language: str
    ) -> ContentDescription | None:
        """Pick the description for a language.

        Falls back to the store default language, then to the first
        description available.
        """
        by_language = {d.language: d for d in self.descriptions}
        if language in by_language:
            return by_language[language]
        if fallback_language in by_language:
            return by_language[fallback_language]
        return self.descriptions[0] if self.descriptions else None


@dataclass(frozen=True)
class StoredFile:
    """An asset as found in storage."""

    name: str
    size: int
    content_type: str
    relative_path: str
