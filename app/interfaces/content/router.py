"""
FastAPI router for the content bounded context.

All routes delegate to the content facade. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
Mutating routes live under ``/private`` and are expected to sit
behind an external authentication filter.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, Response, UploadFile, status
from starlette.concurrency import run_in_threadpool

from app.application.content.dtos import (
    ContentDescriptionPayload,
    ContentFile,
    ContentFolder,
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
from app.core.config import Settings
from app.domain.content.entities import ContentType
from app.domain.content.errors import ContentNotFoundError
from app.domain.content.path_decoder import decode_content_path
from app.interfaces.content.dependencies import (
    RequestContext,
    get_asset_writer,
    get_box_reader,
    get_box_writer,
    get_content_name,
    get_folder_reader,
    get_page_reader,
    get_page_writer,
    get_path_request_context,
    get_request_context,
    get_settings,
)
from app.interfaces.content.schemas import (
    ContentDescriptionSchema,
    ContentFolderItemResponse,
    ContentFolderResponse,
    ContentNameRequest,
    ErrorResponse,
    PersistableContentBoxRequest,
    PersistableContentPageRequest,
    ReadableContentBoxResponse,
    ReadableContentPageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])

PATH_DESCRIPTION = "Percent-encoded UTF-8 folder path"


def _page_response(page: ReadableContentPage) -> ReadableContentPageResponse:
    return ReadableContentPageResponse(
        code=page.code,
        title=page.title,
        body=page.body,
        language=page.language,
        visible=page.visible,
        metadata=page.metadata,
    )


def _box_response(box: ReadableContentBox) -> ReadableContentBoxResponse:
    return ReadableContentBoxResponse(
        code=box.code,
        name=box.name,
        html=box.html,
        language=box.language,
        visible=box.visible,
    )


def _folder_response(folder: ContentFolder) -> ContentFolderResponse:
    return ContentFolderResponse(
        path=folder.path,
        files=[
            ContentFolderItemResponse(
                name=f.name, url=f.url, size=f.size, content_type=f.content_type
            )
            for f in folder.files
        ],
    )


def _descriptions(
    items: list[ContentDescriptionSchema],
) -> tuple[ContentDescriptionPayload, ...]:
    return tuple(
        ContentDescriptionPayload(
            language=d.language,
            title=d.title,
            body=d.body,
            metadata=dict(d.metadata),
        )
        for d in items
    )


async def _read_upload(upload: UploadFile) -> ContentFile:
    data = await upload.read()
    return ContentFile(
        name=upload.filename or "",
        content_type=upload.content_type,
        file=data,
    )


# ── Read endpoints ───────────────────────────────────────────────


@router.get(
    "/content/pages",
    response_model=list[ReadableContentPageResponse],
    summary="List content pages",
    description="Get the pages created for a given merchant store.",
)
def list_pages(
    ctx: RequestContext = Depends(get_request_context),
    reader: PageReader = Depends(get_page_reader),
) -> list[ReadableContentPageResponse]:
    """List every page of the store, localized."""
    pages = reader.list_pages(ctx.store, ctx.language)
    return [_page_response(p) for p in pages]


@router.get(
    "/content/summary",
    response_model=list[ReadableContentBoxResponse],
    summary="List page summaries",
    description="Get the summary boxes created for a given merchant store.",
)
def pages_summary(
    ctx: RequestContext = Depends(get_request_context),
    reader: BoxReader = Depends(get_box_reader),
    settings: Settings = Depends(get_settings),
) -> list[ReadableContentBoxResponse]:
    """List boxes whose code starts with the summary prefix."""
    boxes = reader.list_boxes(
        ContentType.BOX, settings.summary_prefix, ctx.store, ctx.language
    )
    return [_box_response(b) for b in boxes]


@router.get(
    "/content/boxes",
    response_model=list[ReadableContentBoxResponse],
    summary="List content boxes",
    description="Get the summary boxes created for a given merchant store.",
)
def list_boxes(
    ctx: RequestContext = Depends(get_request_context),
    reader: BoxReader = Depends(get_box_reader),
    settings: Settings = Depends(get_settings),
) -> list[ReadableContentBoxResponse]:
    """Same listing as /content/summary."""
    boxes = reader.list_boxes(
        ContentType.BOX, settings.summary_prefix, ctx.store, ctx.language
    )
    return [_box_response(b) for b in boxes]


@router.get(
    "/content/pages/{code}",
    response_model=Optional[ReadableContentPageResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Get a content page",
    description=(
        "Get page content by code. A missing page yields a null body unless "
        "strict page lookup is enabled."
    ),
)
def get_page(
    code: str,
    ctx: RequestContext = Depends(get_request_context),
    reader: PageReader = Depends(get_page_reader),
    settings: Settings = Depends(get_settings),
) -> Optional[ReadableContentPageResponse]:
    """Return a single page, or null when it does not exist."""
    page = reader.find_page(code, ctx.store, ctx.language)
    if page is None:
        if settings.strict_page_lookup:
            raise ContentNotFoundError(code)
        logger.debug("Page not found [%s] for store [%s]", code, ctx.store.code)
        return None
    return _page_response(page)


@router.get(
    "/content/boxes/{code}",
    response_model=ReadableContentBoxResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a content box",
)
def get_box(
    code: str,
    ctx: RequestContext = Depends(get_request_context),
    reader: BoxReader = Depends(get_box_reader),
) -> ReadableContentBoxResponse:
    """Return a single box by code."""
    return _box_response(reader.get_box(code, ctx.store, ctx.language))


@router.get(
    "/content/folder",
    response_model=ContentFolderResponse,
    summary="List a content folder",
)
def folder(
    path: Optional[str] = Query(default=None, description=PATH_DESCRIPTION),
    ctx: RequestContext = Depends(get_request_context),
    reader: FolderReader = Depends(get_folder_reader),
) -> ContentFolderResponse:
    """List files of a folder; the root when no path is given."""
    decoded = decode_content_path(path)
    return _folder_response(reader.get_folder(decoded, ctx.store))


@router.get(
    "/{store_code}/content/images",
    response_model=ContentFolderResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get store content images",
)
def images(
    path: Optional[str] = Query(default=None, description=PATH_DESCRIPTION),
    ctx: RequestContext = Depends(get_path_request_context),
    reader: FolderReader = Depends(get_folder_reader),
) -> ContentFolderResponse:
    """List image files of the store named in the path."""
    decoded = decode_content_path(path)
    return _folder_response(reader.get_folder(decoded, ctx.store))


@router.get(
    "/{store_code}/content/{code}",
    response_model=ReadableContentBoxResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get store content by code",
)
def store_content(
    code: str,
    ctx: RequestContext = Depends(get_path_request_context),
    reader: BoxReader = Depends(get_box_reader),
) -> ReadableContentBoxResponse:
    """Return a single box of the store named in the path."""
    return _box_response(reader.get_box(code, ctx.store, ctx.language))


# ── Write endpoints ──────────────────────────────────────────────


@router.post(
    "/private/content",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
    summary="Upload a content file",
)
async def upload(
    file: UploadFile = File(...),
    ctx: RequestContext = Depends(get_request_context),
    writer: AssetWriter = Depends(get_asset_writer),
) -> Response:
    """Store one uploaded file as an image or static file."""
    content_file = await _read_upload(file)
    await run_in_threadpool(writer.add_file, content_file, ctx.store)
    return Response(status_code=status.HTTP_201_CREATED)


@router.post(
    "/private/files",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
    summary="Upload several content files",
)
async def upload_multiple_files(
    files: list[UploadFile] = File(...),
    ctx: RequestContext = Depends(get_request_context),
    writer: AssetWriter = Depends(get_asset_writer),
) -> Response:
    """Store every uploaded file; duplicate names overwrite earlier ones."""
    content_files = [await _read_upload(f) for f in files]
    await run_in_threadpool(writer.add_files, content_files, ctx.store)
    return Response(status_code=status.HTTP_201_CREATED)


def _save_page(
    request: PersistableContentPageRequest,
    page_code: Optional[str],
    ctx: RequestContext,
    writer: PageWriter,
) -> Response:
    page = PersistableContentPage(
        code=request.code or "",
        descriptions=_descriptions(request.descriptions),
        visible=request.visible,
        sort_order=request.sort_order,
    )
    if page_code:
        page = page.with_code(page_code)
    writer.save_page(page, ctx.store, ctx.language)
    return Response(status_code=status.HTTP_200_OK)


@router.post(
    "/private/content/page",
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
    summary="Create or update a content page",
)
def save_page(
    request: PersistableContentPageRequest,
    page_code: Optional[str] = Query(default=None, alias="pageCode"),
    ctx: RequestContext = Depends(get_request_context),
    writer: PageWriter = Depends(get_page_writer),
) -> Response:
    """Upsert a page; ``pageCode`` overrides the body code."""
    return _save_page(request, page_code, ctx, writer)


@router.post(
    "/private/content/page/{page_code}",
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
    summary="Create or update a content page by code",
)
def save_page_by_code(
    page_code: str,
    request: PersistableContentPageRequest,
    ctx: RequestContext = Depends(get_request_context),
    writer: PageWriter = Depends(get_page_writer),
) -> Response:
    """Upsert a page whose code comes from the path."""
    return _save_page(request, page_code, ctx, writer)


@router.post(
    "/private/content/box",
    response_class=Response,
    responses={400: {"model": ErrorResponse}},
    summary="Create or update a content box",
)
def save_box(
    request: PersistableContentBoxRequest,
    ctx: RequestContext = Depends(get_request_context),
    writer: BoxWriter = Depends(get_box_writer),
) -> Response:
    """Upsert a box."""
    box = PersistableContentBox(
        code=request.code,
        descriptions=_descriptions(request.descriptions),
        visible=request.visible,
        sort_order=request.sort_order,
    )
    writer.save_box(box, ctx.store, ctx.language)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/private/content",
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a content file",
)
def delete(
    target: ContentNameRequest = Depends(get_content_name),
    ctx: RequestContext = Depends(get_request_context),
    writer: AssetWriter = Depends(get_asset_writer),
) -> Response:
    """Remove a stored image or static file.

    ``name`` and ``contentType`` come from the query string or a form body.
    """
    writer.delete(ctx.store, target.name, target.content_type)
    return Response(status_code=status.HTTP_200_OK)
