"""
Domain-specific errors for the content bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class ContentDomainError(Exception):
    """Base error for all content domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ContentNotFoundError(ContentDomainError):
    """Raised when a page, box or stored asset does not exist."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Content not found: {code}")
        self.code = code


class StoreNotFoundError(ContentDomainError):
    """Raised when a merchant store code does not match any store."""

    def __init__(self, store_code: str) -> None:
        super().__init__(f"Merchant store not found: {store_code}")
        self.store_code = store_code


class LanguageNotSupportedError(ContentDomainError):
    """Raised when a requested language is not enabled for a store."""

    def __init__(self, language: str, store_code: str) -> None:
        super().__init__(
            f"Language {language} is not supported by store {store_code}"
        )
        self.language = language
        self.store_code = store_code


class InvalidContentError(ContentDomainError):
    """Raised when content or an asset request fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid content: {reason}")
        self.reason = reason


class ContentDecodingError(ContentDomainError):
    """Raised when a percent-encoded content path cannot be decoded."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot decode content path {path!r}: {reason}")
        self.path = path
        self.reason = reason
