"""
Data Transfer Objects for the content application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class ContentDescriptionPayload:
    """Per-language text submitted for a page or box.

    Attributes:
        language: Locale tag; None means the request language.
        title: Page title or box name.
        body: HTML body.
        metadata: Free-form SEO metadata (title, description, keywords...).
    """

    title: str
    body: str = ""
    language: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PersistableContentPage:
    """Input DTO for creating or replacing a content page."""

    code: str
    descriptions: tuple[ContentDescriptionPayload, ...] = ()
    visible: bool = True
    sort_order: int = 0

    def with_code(self, code: str) -> "PersistableContentPage":
        """Return a copy whose code is replaced."""
        return replace(self, code=code)


@dataclass(frozen=True)
class PersistableContentBox:
    """Input DTO for creating or replacing a content box."""

    code: str
    descriptions: tuple[ContentDescriptionPayload, ...] = ()
    visible: bool = True
    sort_order: int = 0


@dataclass(frozen=True)
class ReadableContentPage:
    """Output DTO for a page localized to one language."""

    code: str
    title: str
    body: str
    language: str
    visible: bool = True
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ReadableContentBox:
    """Output DTO for a box localized to one language."""

    code: str
    name: str
    html: str
    language: str
    visible: bool = True


@dataclass(frozen=True)
class ContentFile:
    """An uploaded file on its way to storage.

    Attributes:
        name: Client file name, non-empty.
        content_type: MIME type reported by the client.
        file: Raw bytes.
    """

    name: str
    content_type: Optional[str]
    file: bytes = b""


@dataclass(frozen=True)
class ContentFolderItem:
    """Output DTO for one file of a folder listing."""

    name: str
    url: str
    size: int
    content_type: str


@dataclass(frozen=True)
class ContentFolder:
    """Output DTO for a folder listing."""

    path: Optional[str]
    files: tuple[ContentFolderItem, ...] = ()
