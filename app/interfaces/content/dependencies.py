"""
Dependency injection for the content bounded context.

The request preamble lives here: every handler receives an explicit
RequestContext (resolved store and language) instead of relying on
implicit parameter binding. Facade capabilities are read from the
application state populated by the composition root in ``app.main``.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.application.content.language_resolver import LanguageResolver
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
from app.domain.content.entities import Language, MerchantStore
from app.interfaces.content.schemas import ContentNameRequest


@dataclass(frozen=True)
class RequestContext:
    """Store and language resolved for the current request."""

    store: MerchantStore
    language: Language


def get_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


def get_page_reader(request: Request) -> PageReader:
    return request.app.state.content_facade


def get_box_reader(request: Request) -> BoxReader:
    return request.app.state.content_facade


def get_folder_reader(request: Request) -> FolderReader:
    return request.app.state.content_facade


def get_page_writer(request: Request) -> PageWriter:
    return request.app.state.content_facade


def get_box_writer(request: Request) -> BoxWriter:
    return request.app.state.content_facade


def get_asset_writer(request: Request) -> AssetWriter:
    return request.app.state.content_facade


def get_store_lookup(request: Request) -> StoreLookup:
    return request.app.state.store_facade


def get_language_resolver(request: Request) -> LanguageResolver:
    return request.app.state.language_resolver


def _resolve_context(
    store_code: str,
    lang: Optional[str],
    accept_language: Optional[str],
    store_lookup: StoreLookup,
    resolver: LanguageResolver,
) -> RequestContext:
    store = store_lookup.get(store_code)
    language = resolver.resolve(store, lang=lang, accept_language=accept_language)
    return RequestContext(store=store, language=language)


def get_request_context(
    store: Optional[str] = Query(default=None, description="Merchant store code"),
    lang: Optional[str] = Query(default=None, description="Language code"),
    accept_language: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
    store_lookup: StoreLookup = Depends(get_store_lookup),
    resolver: LanguageResolver = Depends(get_language_resolver),
) -> RequestContext:
    """Resolve store (``store`` query, else the default store) and language."""
    return _resolve_context(
        store or settings.default_store_code,
        lang,
        accept_language,
        store_lookup,
        resolver,
    )


def get_path_request_context(
    store_code: str,
    lang: Optional[str] = Query(default=None, description="Language code"),
    accept_language: Optional[str] = Header(default=None),
    store_lookup: StoreLookup = Depends(get_store_lookup),
    resolver: LanguageResolver = Depends(get_language_resolver),
) -> RequestContext:
    """Resolve the store from the ``store_code`` path segment.

    Any ``store`` query parameter is ignored on these routes.
    """
    return _resolve_context(
        store_code, lang, accept_language, store_lookup, resolver
    )


async def get_content_name(
    request: Request,
    name: Optional[str] = Query(default=None),
    content_type: Optional[str] = Query(default=None, alias="contentType"),
) -> ContentNameRequest:
    """Bind the file to delete from query parameters, falling back to form fields.

    Raises:
        RequestValidationError: If a field is missing or invalid (422).
    """
    values = {"name": name, "contentType": content_type}
    if name is None or content_type is None:
        form = await request.form()
        for key in ("name", "contentType"):
            if values[key] is None and isinstance(form.get(key), str):
                values[key] = form[key]
    try:
        return ContentNameRequest.model_validate(
            {key: value for key, value in values.items() if value is not None}
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
