"""
Per-request language resolution.

Precedence:
1. Explicit ``lang`` parameter, which must be enabled for the store.
2. First ``Accept-Language`` entry whose primary subtag the store supports.
3. The store default language.
"""

import logging
from typing import Optional

from app.domain.content.entities import Language, MerchantStore
from app.domain.content.errors import LanguageNotSupportedError

logger = logging.getLogger(__name__)


def parse_accept_language(header: Optional[str]) -> list[str]:
    """Return primary language subtags from an Accept-Language header.

    Entries are ordered by quality value (highest first); entries with
    q=0 and the ``*`` wildcard are dropped.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, entry in enumerate(header.split(",")):
        parts = [p.strip() for p in entry.split(";")]
        tag = parts[0]
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in parts[1:]:
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag.split("-")[0].lower()))

    weighted.sort()
    return [tag for _, _, tag in weighted]


class LanguageResolver:
    """Resolves the effective language of a request against a store."""

    def resolve(
        self,
        store: MerchantStore,
        lang: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> Language:
        """Return the language to use for this request.

        Args:
            store: The already-resolved merchant store.
            lang: Value of the ``lang`` query parameter, if any.
            accept_language: Raw ``Accept-Language`` header, if any.

        Raises:
            LanguageNotSupportedError: If ``lang`` is not enabled for the store.
        """
        if lang:
            if not store.supports(lang):
                raise LanguageNotSupportedError(lang, store.code)
            return Language(code=lang)

        for candidate in parse_accept_language(accept_language):
            if store.supports(candidate):
                return Language(code=candidate)

        logger.debug(
            "Falling back to default language %s for store=%s",
            store.default_language,
            store.code,
        )
        return Language(code=store.default_language)
