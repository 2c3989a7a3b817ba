"""
Content facade: pages, boxes, folder listings and uploaded assets.

Input: merchant store and language resolved for the request.
Output: readable DTOs localized to the request language.
Side effects: writes to the content repository and file storage.
Failure cases: ContentNotFoundError, InvalidContentError,
LanguageNotSupportedError.
"""

import logging
from typing import Optional

from app.application.content.dtos import (
    ContentDescriptionPayload,
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
)
from app.domain.content.entities import (
    Content,
    ContentDescription,
    ContentType,
    FileContentType,
    Language,
    MerchantStore,
    StoredFile,
)
from app.domain.content.errors import (
    ContentNotFoundError,
    InvalidContentError,
    LanguageNotSupportedError,
)
from app.domain.content.ports import ContentFileStorage, ContentRepository

logger = logging.getLogger(__name__)


class ContentFacade(
    PageReader, BoxReader, FolderReader, PageWriter, BoxWriter, AssetWriter
):
    """Implements every content capability over a repository and a file store.

    Folder listings always read the store's image tree, the same tree
    that the storefront serves images from.
    """

    def __init__(
        self,
        content_repo: ContentRepository,
        file_storage: ContentFileStorage,
        public_url_prefix: str = "/static/files",
    ) -> None:
        self._content_repo = content_repo
        self._file_storage = file_storage
        self._public_url_prefix = public_url_prefix.rstrip("/")

    # ── Pages ────────────────────────────────────────────────────

    def list_pages(
        self, store: MerchantStore, language: Language
    ) -> list[ReadableContentPage]:
        pages = self._content_repo.list_by_type(store.code, ContentType.PAGE)
        logger.debug(
            "Listing %d pages for store=%s, lang=%s",
            len(pages),
            store.code,
            language.code,
        )
        return [self._to_readable_page(p, store, language) for p in pages]

    def find_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> Optional[ReadableContentPage]:
        content = self._content_repo.get_by_code(store.code, code, ContentType.PAGE)
        if content is None:
            return None
        return self._to_readable_page(content, store, language)

    def get_page(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentPage:
        page = self.find_page(code, store, language)
        if page is None:
            raise ContentNotFoundError(code)
        return page

    def save_page(
        self,
        page: PersistableContentPage,
        store: MerchantStore,
        language: Language,
    ) -> None:
        content = self._to_content(
            page.code,
            ContentType.PAGE,
            page.descriptions,
            page.visible,
            page.sort_order,
            store,
            language,
            require_descriptions=False,
        )
        self._content_repo.save(store.code, content)
        logger.info("Saved page code=%s for store=%s", page.code, store.code)

    # ── Boxes ────────────────────────────────────────────────────

    def list_boxes(
        self,
        content_type: ContentType,
        code_prefix: str,
        store: MerchantStore,
        language: Language,
    ) -> list[ReadableContentBox]:
        contents = self._content_repo.list_by_type(store.code, content_type)
        return [
            self._to_readable_box(c, store, language)
            for c in contents
            if c.code.startswith(code_prefix)
        ]

    def get_box(
        self, code: str, store: MerchantStore, language: Language
    ) -> ReadableContentBox:
        content = self._content_repo.get_by_code(store.code, code, ContentType.BOX)
        if content is None:
            raise ContentNotFoundError(code)
        return self._to_readable_box(content, store, language)

    def save_box(
        self,
        box: PersistableContentBox,
        store: MerchantStore,
        language: Language,
    ) -> None:
        content = self._to_content(
            box.code,
            ContentType.BOX,
            box.descriptions,
            box.visible,
            box.sort_order,
            store,
            language,
        )
        self._content_repo.save(store.code, content)
        logger.info("Saved box code=%s for store=%s", box.code, store.code)

    # ── Folders and assets ───────────────────────────────────────

    def get_folder(self, path: Optional[str], store: MerchantStore) -> ContentFolder:
        stored = self._file_storage.list_folder(
            store.code, FileContentType.IMAGE, path
        )
        return ContentFolder(
            path=path,
            files=tuple(
                self._to_folder_item(f, store, FileContentType.IMAGE) for f in stored
            ),
        )

    def add_file(self, file: ContentFile, store: MerchantStore) -> None:
        if not file.name or not file.name.strip():
            raise InvalidContentError("file name must not be empty")
        file_type = FileContentType.from_mime_type(file.content_type)
        stored = self._file_storage.write(store.code, file_type, file.name, file.file)
        logger.info(
            "Stored %s asset name=%s size=%d for store=%s",
            file_type.value,
            stored.name,
            stored.size,
            store.code,
        )

    def add_files(self, files: list[ContentFile], store: MerchantStore) -> None:
        # Validate the whole batch before writing anything.
        for file in files:
            if not file.name or not file.name.strip():
                raise InvalidContentError("file name must not be empty")
        for file in files:
            self.add_file(file, store)

    def delete(
        self, store: MerchantStore, name: str, content_type: FileContentType
    ) -> None:
        if not self._file_storage.remove(store.code, content_type, name):
            raise ContentNotFoundError(name)
        logger.info(
            "Deleted %s asset name=%s for store=%s",
            content_type.value,
            name,
            store.code,
        )

    # ── Mapping helpers ──────────────────────────────────────────

    def _to_content(
        self,
        code: str,
        content_type: ContentType,
        payloads: tuple[ContentDescriptionPayload, ...],
        visible: bool,
        sort_order: int,
        store: MerchantStore,
        language: Language,
        require_descriptions: bool = True,
    ) -> Content:
        if not code or not code.strip():
            raise InvalidContentError("code must not be empty")
        if require_descriptions and not payloads:
            raise InvalidContentError("at least one description is required")

        descriptions = []
        for payload in payloads:
            lang = payload.language or language.code
            if not store.supports(lang):
                raise LanguageNotSupportedError(lang, store.code)
            descriptions.append(
                ContentDescription(
                    language=lang,
                    title=payload.title,
                    body=payload.body,
                    metadata=dict(payload.metadata),
                )
            )
        return Content(
            code=code,
            content_type=content_type,
            descriptions=tuple(descriptions),
            visible=visible,
            sort_order=sort_order,
        )

    @staticmethod
    def _to_readable_page(
        content: Content, store: MerchantStore, language: Language
    ) -> ReadableContentPage:
        description = content.description_for(language.code, store.default_language)
        if description is None:
            return ReadableContentPage(
                code=content.code,
                title="",
                body="",
                language=language.code,
                visible=content.visible,
            )
        return ReadableContentPage(
            code=content.code,
            title=description.title,
            body=description.body,
            language=description.language,
            visible=content.visible,
            metadata=dict(description.metadata),
        )

    @staticmethod
    def _to_readable_box(
        content: Content, store: MerchantStore, language: Language
    ) -> ReadableContentBox:
        description = content.description_for(language.code, store.default_language)
        return ReadableContentBox(
            code=content.code,
            name=description.title if description else "",
            html=description.body if description else "",
            language=description.language if description else language.code,
            visible=content.visible,
        )

    def _to_folder_item(
        self, stored: StoredFile, store: MerchantStore, file_type: FileContentType
    ) -> ContentFolderItem:
        url = "/".join(
            [self._public_url_prefix, store.code, file_type.value, stored.relative_path]
        )
        return ContentFolderItem(
            name=stored.name,
            url=url,
            size=stored.size,
            content_type=stored.content_type,
        )
