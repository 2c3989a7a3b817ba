"""
Pydantic schemas for content API request/response validation.

These schemas enforce input validation and define the API contract.
JSON field names are camelCase where the storefront clients expect it.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.content.entities import FileContentType

CODE_MAX_LEN = 100
LANGUAGE_PATTERN = r"^[a-z]{2,3}$"


class ContentDescriptionSchema(BaseModel):
    """Per-language text of a page or box.

    Attributes:
        language: Locale tag; defaults to the request language.
        title: Page title or box name.
        body: HTML body.
        metadata: SEO metadata (title, description, keywords, friendlyUrl...).
    """

    language: str | None = Field(default=None, pattern=LANGUAGE_PATTERN)
    title: str = Field(..., min_length=1, max_length=255)
    body: str = ""
    metadata: dict[str, str] = Field(default_factory=dict)


class PersistableContentPageRequest(BaseModel):
    """Request schema for the page upsert endpoint.

    ``code`` may be omitted when the route supplies ``pageCode``.
    A page may be saved without descriptions and translated later.
    """

    model_config = ConfigDict(populate_by_name=True)

    code: str | None = Field(default=None, max_length=CODE_MAX_LEN)
    visible: bool = True
    sort_order: int = Field(default=0, alias="sortOrder")
    descriptions: list[ContentDescriptionSchema] = Field(default_factory=list)


class PersistableContentBoxRequest(BaseModel):
    """Request schema for the box upsert endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    code: str = Field(..., min_length=1, max_length=CODE_MAX_LEN)
    visible: bool = True
    sort_order: int = Field(default=0, alias="sortOrder")
    descriptions: list[ContentDescriptionSchema] = Field(..., min_length=1)


class ReadableContentPageResponse(BaseModel):
    """A page localized to the request language."""

    code: str
    title: str
    body: str
    language: str
    visible: bool
    metadata: dict[str, str]


class ReadableContentBoxResponse(BaseModel):
    """A box localized to the request language."""

    code: str
    name: str
    html: str
    language: str
    visible: bool


class ContentFolderItemResponse(BaseModel):
    """A single file of a folder listing."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    url: str
    size: int
    content_type: str = Field(alias="contentType")


class ContentFolderResponse(BaseModel):
    """Response schema for folder listings."""

    path: str | None
    files: list[ContentFolderItemResponse]


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ContentNameRequest(BaseModel):
    """Identifies a stored file for deletion.

    Bound from query parameters or form fields.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1)
    content_type: FileContentType = Field(..., alias="contentType")
