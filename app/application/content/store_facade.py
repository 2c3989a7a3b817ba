"""
Store facade: resolves the merchant store (tenant) for a request.

Input: store code.
Output: MerchantStore.
Failure cases: StoreNotFoundError.
"""

import logging

from app.application.content.ports import StoreLookup
from app.domain.content.entities import MerchantStore
from app.domain.content.errors import StoreNotFoundError
from app.domain.content.ports import StoreRepository

logger = logging.getLogger(__name__)


class StoreFacade(StoreLookup):
    """Looks merchant stores up by code."""

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def get(self, store_code: str) -> MerchantStore:
        store = self._store_repo.get_by_code(store_code)
        if store is None:
            logger.warning("Unknown store code: %s", store_code)
            raise StoreNotFoundError(store_code)
        return store
