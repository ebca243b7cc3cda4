"""Conversions between Catalogue wire schemas and domain records.

Plain functions: every input they need is passed in, nothing is cached
between calls.
"""

from catalogue.api.schemas import (
    PersistableCatalog,
    PersistableCatalogCategoryEntry,
    ReadableCatalog,
    ReadableCatalogCategoryEntry,
)
from catalogue.catalog.catalog import Catalog, CatalogCategoryEntry


def to_catalog(source: PersistableCatalog, store, language) -> Catalog:  # noqa: ARG001
    return Catalog.create(
        code=source.code,
        store_code=store.code,
        visible=source.visible,
        default_catalog=source.default_catalog,
    )


def to_catalog_entry(source: PersistableCatalogCategoryEntry, store, language) -> CatalogCategoryEntry:  # noqa: ARG001
    return CatalogCategoryEntry(
        category_code=source.category,
        visible=source.visible,
    )


def to_readable_entry(entry: CatalogCategoryEntry, catalog: Catalog, store, language) -> ReadableCatalogCategoryEntry:  # noqa: ARG001
    return ReadableCatalogCategoryEntry(
        id=str(entry.id),
        catalog=catalog.code,
        category=entry.category_code,
        visible=bool(entry.visible),
    )


def to_readable_catalog(catalog: Catalog, store, language) -> ReadableCatalog:
    return ReadableCatalog(
        id=str(catalog.id),
        code=catalog.code,
        visible=bool(catalog.visible),
        default_catalog=bool(catalog.default_catalog),
        store=catalog.store_code,
        creation_date=catalog.created_at,
        entries=[to_readable_entry(entry, catalog, store, language) for entry in catalog.entries],
    )
