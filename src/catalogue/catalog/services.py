"""Persistence services for catalogs, backed by the Protean repository."""

import math
from dataclasses import dataclass, field

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.catalog.catalog import Catalog

logger = structlog.get_logger(__name__)


class CatalogServiceError(Exception):
    """The catalog store rejected an operation."""


@dataclass
class CatalogPage:
    """One page of catalogs plus the counts needed to paginate."""

    items: list = field(default_factory=list)
    total: int = 0
    page: int = 0
    count: int = 0

    def is_empty(self) -> bool:
        return not self.items

    @property
    def total_pages(self) -> int:
        if self.count <= 0:
            return 0
        return math.ceil(self.total / self.count)


class CatalogService:
    def _repository(self):
        return current_domain.repository_for(Catalog)

    def _query(self, store):
        return self._repository()._dao.query.filter(store_code=store.code)

    def exists_by_code(self, code, store) -> bool:
        return bool(self._query(store).filter(code=code).all().items)

    def save_or_update(self, catalog, store) -> None:
        if catalog.store_code != store.code:
            raise ValidationError({"store_code": [f"Catalog [{catalog.code}] does not belong to store [{store.code}]"]})
        self._repository().add(catalog)

    def get_by_id(self, catalog_id) -> Catalog | None:
        try:
            return self._repository().get(catalog_id)
        except ObjectNotFoundError:
            return None

    def get_by_code(self, code, store) -> Catalog | None:
        matches = self._query(store).filter(code=code).all().items
        return matches[0] if matches else None

    def get_catalogs(self, store, language, code=None, page=0, count=10) -> CatalogPage:
        query = self._query(store)
        if code:
            query = query.filter(code__contains=code)
        results = query.order_by("code").offset(page * count).limit(count).all()
        logger.debug(
            "Listed catalogs",
            store=store.code,
            language=language.code,
            code=code,
            page=page,
            total=results.total,
        )
        return CatalogPage(items=list(results.items), total=results.total, page=page, count=count)

    def delete(self, catalog) -> None:
        repository = self._repository()
        try:
            if catalog.entries:
                catalog.clear_entries()
                repository.add(catalog)
            repository._dao.delete(catalog)
        except (ObjectNotFoundError, ValidationError) as exc:
            raise CatalogServiceError(f"Unable to delete catalog [{catalog.code}]") from exc


class CatalogEntryService:
    def add(self, entry, catalog) -> None:
        catalog.add_entry(entry)
        current_domain.repository_for(Catalog).add(catalog)
