"""Catalogue bounded context: store catalogs and their category entries.

A catalog is a store-scoped grouping of categories used to build storefront
navigation. Catalog codes are unique within a store.
"""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
