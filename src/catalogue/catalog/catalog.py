"""Catalog aggregate root and its category entries."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, HasMany, String

from catalogue.domain import catalogue


@catalogue.entity(part_of="Catalog")
class CatalogCategoryEntry:
    """Links a category to the catalog that owns this entry."""

    category_code: String(required=True, max_length=100)
    visible: Boolean(default=True)
    created_at: DateTime()


@catalogue.aggregate
class Catalog:
    """A named, store-scoped grouping of categories.

    ``code`` is unique within a store. The merchant store is referenced by its
    code. Only the ``visible`` and ``default_catalog`` flags change after
    creation.
    """

    code: String(required=True, max_length=100)
    store_code: String(required=True, max_length=100)
    visible: Boolean(default=False)
    default_catalog: Boolean(default=False)
    entries: HasMany(CatalogCategoryEntry)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, code, store_code, visible=False, default_catalog=False):
        from catalogue.catalog.events import CatalogCreated

        now = datetime.now(UTC)
        catalog = cls(
            code=code,
            store_code=store_code,
            visible=visible,
            default_catalog=default_catalog,
            created_at=now,
            updated_at=now,
        )
        catalog.raise_(
            CatalogCreated(
                catalog_id=str(catalog.id),
                code=code,
                store_code=store_code,
                visible=visible,
                default_catalog=default_catalog,
            )
        )
        return catalog

    def belongs_to(self, store) -> bool:
        return self.store_code == store.code

    def change_flags(self, visible, default_catalog):
        from catalogue.catalog.events import CatalogVisibilityChanged

        self.visible = bool(visible)
        self.default_catalog = bool(default_catalog)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CatalogVisibilityChanged(
                catalog_id=str(self.id),
                code=self.code,
                visible=self.visible,
                default_catalog=self.default_catalog,
            )
        )

    def add_entry(self, entry):
        from catalogue.catalog.events import CatalogEntryAdded

        if entry.created_at is None:
            entry.created_at = datetime.now(UTC)
        self.add_entries(entry)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CatalogEntryAdded(
                catalog_id=str(self.id),
                entry_id=str(entry.id),
                category_code=entry.category_code,
                visible=entry.visible,
            )
        )

    def clear_entries(self):
        """Detach every category entry so the repository deletes their records."""
        if self.entries:
            self.remove_entries(list(self.entries))
