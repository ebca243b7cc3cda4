"""Catalogue domain API package."""

from catalogue.api.routes import catalog_router

__all__ = ["catalog_router"]
