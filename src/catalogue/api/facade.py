"""Catalog facade: orchestrates catalog reads and writes for the web layer.

Every operation needs a store and a language. Missing structural input raises
``InvalidArgumentError``; a missing or foreign catalog raises
``ResourceNotFoundError``; a duplicate code raises ``OperationNotAllowedError``.
"""

import structlog

from catalogue.api import mappers
from catalogue.api.schemas import ReadableCatalogList
from catalogue.catalog.services import CatalogEntryService, CatalogService, CatalogServiceError
from shared.errors import (
    OperationNotAllowedError,
    ResourceNotFoundError,
    ServiceRuntimeError,
    require,
)

logger = structlog.get_logger(__name__)


class CatalogFacade:
    def __init__(
        self,
        catalog_service: CatalogService | None = None,
        catalog_entry_service: CatalogEntryService | None = None,
    ) -> None:
        self.catalog_service = catalog_service or CatalogService()
        self.catalog_entry_service = catalog_entry_service or CatalogEntryService()

    def save_catalog(self, new_catalog, store, language):
        self._validate_catalog_store_and_language(new_catalog, store, language)

        if self.catalog_service.exists_by_code(new_catalog.code, store):
            raise OperationNotAllowedError(f"Catalog [{new_catalog.code}] already exists")

        catalog = mappers.to_catalog(new_catalog, store, language)
        self.catalog_service.save_or_update(catalog, store)
        logger.info("Catalog created", code=catalog.code, store=store.code)

        return mappers.to_readable_catalog(self._get_by_code(catalog.code, store), store, language)

    def delete_catalog(self, catalog_id, store, language) -> None:
        self._validate_store_and_language(store, language)
        catalog = self._get_by_id(catalog_id, store)
        try:
            self.catalog_service.delete(catalog)
        except CatalogServiceError as exc:
            raise ServiceRuntimeError(f"Error while deleting catalog id [{catalog_id}]") from exc
        logger.info("Catalog deleted", catalog_id=str(catalog_id), store=store.code)

    def get_catalog(self, code, store, language):
        self._validate_store_and_language(store, language)
        return mappers.to_readable_catalog(self._get_by_code(code, store), store, language)

    def get_catalog_by_id(self, catalog_id, store, language):
        self._validate_store_and_language(store, language)
        return mappers.to_readable_catalog(self._get_by_id(catalog_id, store), store, language)

    def update_catalog(self, catalog_id, patch, store, language) -> None:
        self._validate_catalog_store_and_language(patch, store, language)
        catalog = self._get_by_id(catalog_id, store)

        catalog.change_flags(visible=patch.visible, default_catalog=patch.default_catalog)
        self.catalog_service.save_or_update(catalog, store)

    def get_list_catalogs(self, code, store, language, page=0, count=10) -> ReadableCatalogList:
        self._validate_store_and_language(store, language)

        catalogs = self.catalog_service.get_catalogs(store, language, code, page, count)
        if catalogs.is_empty():
            return ReadableCatalogList()

        return ReadableCatalogList(
            items=[mappers.to_readable_catalog(catalog, store, language) for catalog in catalogs.items],
            records_total=catalogs.total,
            records_filtered=catalogs.total,
            total_pages=catalogs.total_pages,
            number=page,
        )

    def add_catalog_entry(self, entry, store, language):
        self._validate_store_and_language(store, language)
        require(entry, "PersistableCatalogEntry cannot be null")
        require(entry.catalog, "CatalogEntry.catalog cannot be null")

        catalog = self._get_by_code(entry.catalog, store)
        catalog_entry = mappers.to_catalog_entry(entry, store, language)
        self.catalog_entry_service.add(catalog_entry, catalog)

        return mappers.to_readable_entry(catalog_entry, catalog, store, language)

    def catalog_exists(self, code, store) -> bool:
        require(store, "MerchantStore cannot be null")
        return self.catalog_service.exists_by_code(code, store)

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _validate_catalog_store_and_language(self, catalog, store, language) -> None:
        require(catalog, "Catalog object cannot be null")
        self._validate_store_and_language(store, language)

    def _validate_store_and_language(self, store, language) -> None:
        require(store, "MerchantStore cannot be null")
        require(language, "Language cannot be null")

    def _get_by_id(self, catalog_id, store):
        catalog = self.catalog_service.get_by_id(catalog_id)
        if catalog is None or not catalog.belongs_to(store):
            raise ResourceNotFoundError(
                f"Catalog with id [{catalog_id}] not found or does not belong to the specified store"
            )
        return catalog

    def _get_by_code(self, code, store):
        catalog = self.catalog_service.get_by_code(code, store)
        if catalog is None:
            raise ResourceNotFoundError(f"Catalog with code [{code}] not found")
        return catalog
