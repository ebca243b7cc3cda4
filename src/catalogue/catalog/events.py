"""Domain events for the Catalog aggregate."""

from protean.fields import Boolean, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Catalog")
class CatalogCreated:
    """A new catalog was created for a store."""

    __version__ = 1

    catalog_id: Identifier(required=True)
    code: String(required=True)
    store_code: String(required=True)
    visible: Boolean()
    default_catalog: Boolean()


@catalogue.event(part_of="Catalog")
class CatalogVisibilityChanged:
    """A catalog's visible or default flags were overwritten."""

    __version__ = 1

    catalog_id: Identifier(required=True)
    code: String(required=True)
    visible: Boolean()
    default_catalog: Boolean()


@catalogue.event(part_of="Catalog")
class CatalogEntryAdded:
    """A category entry was attached to a catalog."""

    __version__ = 1

    catalog_id: Identifier(required=True)
    entry_id: Identifier(required=True)
    category_code: String(required=True)
    visible: Boolean()
