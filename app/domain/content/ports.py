"""
Port interfaces (ABCs) for the content bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.content.entities import (
    Content,
    ContentType,
    FileContentType,
    MerchantStore,
    StoredFile,
)


class StoreRepository(ABC):
    """Port for persisting and retrieving merchant stores."""

    @abstractmethod
    def get_by_code(self, store_code: str) -> Optional[MerchantStore]:
        """Return a store by code, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, store: MerchantStore) -> None:
        """Create or replace a store."""
        raise NotImplementedError


class ContentRepository(ABC):
    """Port for persisting and retrieving localized content."""

    @abstractmethod
    def list_by_type(
        self, store_code: str, content_type: ContentType
    ) -> list[Content]:
        """Return all content of a kind, ordered by sort order then code."""
        raise NotImplementedError

    @abstractmethod
    def get_by_code(
        self, store_code: str, code: str, content_type: ContentType
    ) -> Optional[Content]:
        """Return a content item, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, store_code: str, content: Content) -> None:
        """Upsert a content item and replace its descriptions."""
        raise NotImplementedError


class ContentFileStorage(ABC):
    """Port for storing asset bytes per store and asset kind."""

    @abstractmethod
    def write(
        self,
        store_code: str,
        file_type: FileContentType,
        name: str,
        data: bytes,
    ) -> StoredFile:
        """Persist bytes under a name, overwriting any previous file."""
        raise NotImplementedError

    @abstractmethod
    def list_folder(
        self, store_code: str, file_type: FileContentType, path: Optional[str]
    ) -> list[StoredFile]:
        """Return files directly under a folder, ordered by name.

        Args:
            store_code: Owning store.
            file_type: Asset kind, which selects the root folder.
            path: Relative folder path; None or empty means the root.

        Returns:
            Stored files; empty if the folder does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(
        self, store_code: str, file_type: FileContentType, name: str
    ) -> bool:
        """Delete a file. Returns False if it did not exist."""
        raise NotImplementedError
