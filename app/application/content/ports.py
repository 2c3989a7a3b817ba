"""
Capability ports consumed by the HTTP layer.

The content facade is split into narrow interfaces so that each
handler depends only on what it calls, and tests can fake one
capability at a time.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.application.content.dtos import (
    ContentFile,
    ContentFolder,
    PersistableContentBox,
    PersistableContentPage,
    ReadableContentBox,
    ReadableContentPage,
)
from app.domain.content.entities import (
    ContentType,
    FileContentType,
    Language,
    MerchantStore,
)


class PageReader(ABC):
    """Read access to content pages."""

    @abstractmethod
    def list_pages(
        self, store: MerchantStore, language: Language
    ) -> list[ReadableContentPage]:
        """Return every page of the store localized to the language."""
        raise NotImplementedError

    @abstractmethod
    def find_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> Optional[ReadableContentPage]:
        """Return the page with this code, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def get_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentPage:
        """Return the page with this code.

        Raises:
            ContentNotFoundError: If the page does not exist.
        """
        raise NotImplementedError


class BoxReader(ABC):
    """Read access to content boxes."""

    @abstractmethod
    def list_boxes(
        self,
        content_type: ContentType,
        code_prefix: str,
        store: MerchantStore,
        language: Language,
    ) -> list[ReadableContentBox]:
        """Return boxes of a kind whose code starts with the prefix."""
        raise NotImplementedError

    @abstractmethod
    def get_box(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentBox:
        """Return the box with this code.

        Raises:
            ContentNotFoundError: If the box does not exist.
        """
        raise NotImplementedError


class FolderReader(ABC):
    """Read access to the asset folder tree."""

    @abstractmethod
    def get_folder(self, path: Optional[str], store: MerchantStore) -> ContentFolder:
        """Return the files stored under a path (root when blank)."""
        raise NotImplementedError


class PageWriter(ABC):
    """Write access to content pages."""

    @abstractmethod
    def save_page(
        self,
        page: PersistableContentPage,
        store: MerchantStore,
        language: Language,
    ) -> None:
        """Create or replace a page."""
        raise NotImplementedError


class BoxWriter(ABC):
    """Write access to content boxes."""

    @abstractmethod
    def save_box(
        self,
        box: PersistableContentBox,
        store: MerchantStore,
        language: Language,
    ) -> None:
        """Create or replace a box."""
        raise NotImplementedError


class AssetWriter(ABC):
    """Write access to uploaded assets."""

    @abstractmethod
    def add_file(self, file: ContentFile, store: MerchantStore) -> None:
        """Store a single uploaded file."""
        raise NotImplementedError

    @abstractmethod
    def add_files(self, files: list[ContentFile], store: MerchantStore) -> None:
        """Store several uploaded files."""
        raise NotImplementedError

    @abstractmethod
    def delete(
        self, store: MerchantStore, name: str, content_type: FileContentType
    ) -> None:
        """Remove a stored asset.

        Raises:
            ContentNotFoundError: If no such asset exists.
        """
        raise NotImplementedError


class StoreLookup(ABC):
    """Resolves a merchant store from its code."""

    @abstractmethod
    def get(self, store_code: str) -> MerchantStore:
        """Return the store.

        Raises:
            StoreNotFoundError: If the code is unknown.
        """
        raise NotImplementedError
