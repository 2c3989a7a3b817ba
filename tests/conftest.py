"""
Shared fixtures for the content service tests.

Provides isolated settings (temporary SQLite database and media root)
and in-memory fakes for the facade capabilities and store lookup.
"""

from pathlib import Path
from typing import Optional

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.application.content.dtos import (
    ContentFile,
    ContentFolder,
    ContentFolderItem,
    PersistableContentBox,
    PersistableContentPage,
    ReadableContentBox,
    ReadableContentPage,
)
from app.application.content.ports import (
    AssetWriter,
    BoxReader,
    BoxWriter,
    FolderReader,
    PageReader,
    PageWriter,
    StoreLookup,
)
from app.core.config import Settings
from app.domain.content.entities import (
    ContentType,
    FileContentType,
    Language,
    MerchantStore,
)
from app.domain.content.errors import ContentNotFoundError, StoreNotFoundError
from app.interfaces.content.dependencies import (
    get_asset_writer,
    get_box_reader,
    get_box_writer,
    get_folder_reader,
    get_page_reader,
    get_page_writer,
    get_store_lookup,
)
from app.main import create_app


class FakeStoreLookup(StoreLookup):
    """Store lookup over a fixed set of stores, recording every call."""

    def __init__(self, stores: list[MerchantStore]) -> None:
        self._stores = {s.code: s for s in stores}
        self.calls: list[str] = []

    def get(self, store_code: str) -> MerchantStore:
        self.calls.append(store_code)
        if store_code not in self._stores:
            raise StoreNotFoundError(store_code)
        return self._stores[store_code]


class FakeContentFacade(
    PageReader, BoxReader, FolderReader, PageWriter, BoxWriter, AssetWriter
):
    """Records calls and serves canned results."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.pages: dict[str, ReadableContentPage] = {}
        self.boxes: dict[str, ReadableContentBox] = {}
        self.folder_files: tuple[ContentFolderItem, ...] = ()

    def list_pages(
        self, store: MerchantStore, language: Language
    ) -> list[ReadableContentPage]:
        self.calls.append(("list_pages", store.code, language.code))
        return list(self.pages.values())

    def find_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> Optional[ReadableContentPage]:
        self.calls.append(("find_page", code, store.code, language.code))
        return self.pages.get(code)

    def get_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentPage:
        page = self.find_page(code, store, language)
        if page is None:
            raise ContentNotFoundError(code)
        return page

    def list_boxes(
        self,
        content_type: ContentType,
        code_prefix: str,
        store: MerchantStore,
        language: Language,
    ) -> list[ReadableContentBox]:
        self.calls.append(
            ("list_boxes", content_type, code_prefix, store.code, language.code)
        )
        return [b for c, b in self.boxes.items() if c.startswith(code_prefix)]

    def get_box(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentBox:
        self.calls.append(("get_box", code, store.code, language.code))
        if code not in self.boxes:
            raise ContentNotFoundError(code)
        return self.boxes[code]

    def get_folder(self, path: Optional[str], store: MerchantStore) -> ContentFolder:
        self.calls.append(("get_folder", path, store.code))
        return ContentFolder(path=path, files=self.folder_files)

    def save_page(
        self,
        page: PersistableContentPage,
        store: MerchantStore,
        language: Language,
    ) -> None:
        self.calls.append(("save_page", page, store.code, language.code))

    def save_box(
        self,
        box: PersistableContentBox,
        store: MerchantStore,
        language: Language,
    ) -> None:
        self.calls.append(("save_box", box, store.code, language.code))

    def add_file(self, file: ContentFile, store: MerchantStore) -> None:
        self.calls.append(("add_file", file, store.code))

    def add_files(self, files: list[ContentFile], store: MerchantStore) -> None:
        self.calls.append(("add_files", files, store.code))

    def delete(
        self, store: MerchantStore, name: str, content_type: FileContentType
    ) -> None:
        self.calls.append(("delete", store.code, name, content_type))


DEFAULT_STORE = MerchantStore(
    code="DEFAULT", name="Default", default_language="en", languages=("en", "fr")
)
ACME_STORE = MerchantStore(
    code="ACME", name="Acme", default_language="fr", languages=("fr", "de")
)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings isolated under a temporary directory."""
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'content.db'}",
        media_root=tmp_path / "media",
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def fake_facade() -> FakeContentFacade:
    return FakeContentFacade()


@pytest.fixture
def fake_stores() -> FakeStoreLookup:
    return FakeStoreLookup([DEFAULT_STORE, ACME_STORE])


@pytest.fixture
def fake_app(
    test_settings: Settings,
    fake_facade: FakeContentFacade,
    fake_stores: FakeStoreLookup,
) -> FastAPI:
    """Application whose facade and store lookup are fakes."""
    app = create_app(test_settings)
    for dependency in (
        get_page_reader,
        get_box_reader,
        get_folder_reader,
        get_page_writer,
        get_box_writer,
        get_asset_writer,
    ):
        app.dependency_overrides[dependency] = lambda: fake_facade
    app.dependency_overrides[get_store_lookup] = lambda: fake_stores
    return app


@pytest.fixture
def client(fake_app: FastAPI) -> TestClient:
    """Client over the faked application; lifespan is not started."""
    return TestClient(fake_app, raise_server_exceptions=False)


@pytest.fixture
def live_client(test_settings: Settings):
    """Client over the fully wired application (SQLite + filesystem)."""
    with TestClient(create_app(test_settings)) as live:
        yield live
