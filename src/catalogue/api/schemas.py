"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class PersistableCatalog(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "summer-collection",
                    "visible": True,
                    "default_catalog": False,
                }
            ]
        }
    }

    code: str = Field(..., min_length=1, max_length=100)
    visible: bool = False
    default_catalog: bool = False


class UpdateCatalogRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"visible": True, "default_catalog": True}]}}

    visible: bool = False
    default_catalog: bool = False


class PersistableCatalogCategoryEntry(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "catalog": "summer-collection",
                    "category": "beachwear",
                    "visible": True,
                }
            ]
        }
    }

    catalog: str | None = Field(None, max_length=100)
    category: str = Field(..., min_length=1, max_length=100)
    visible: bool = True


class AddCatalogEntryRequest(BaseModel):
    category: str = Field(..., min_length=1, max_length=100)
    visible: bool = True


# --- Response Schemas ---


class ReadableCatalogCategoryEntry(BaseModel):
    id: str
    catalog: str
    category: str
    visible: bool = True


class ReadableCatalog(BaseModel):
    id: str
    code: str
    visible: bool = False
    default_catalog: bool = False
    store: str
    creation_date: datetime | None = None
    entries: list[ReadableCatalogCategoryEntry] = Field(default_factory=list)


class ReadableCatalogList(BaseModel):
    """A page of catalogs. An empty result is a list with no items and zero counts."""

    items: list[ReadableCatalog] = Field(default_factory=list)
    records_total: int = 0
    records_filtered: int = 0
    total_pages: int = 0
    number: int = 0


class CatalogExistsResponse(BaseModel):
    exists: bool


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
