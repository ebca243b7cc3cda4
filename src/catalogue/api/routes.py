"""FastAPI endpoints for catalog management."""

from fastapi import APIRouter, Depends, Query

from catalogue.api.facade import CatalogFacade
from catalogue.api.schemas import (
    AddCatalogEntryRequest,
    CatalogExistsResponse,
    PersistableCatalog,
    PersistableCatalogCategoryEntry,
    ReadableCatalog,
    ReadableCatalogCategoryEntry,
    ReadableCatalogList,
    StatusResponse,
    UpdateCatalogRequest,
)
from shared.context import Language, MerchantStore
from shared.web import current_language, current_store

catalog_router = APIRouter(prefix="/api/v1/private/catalogs", tags=["catalogs"])


def get_catalog_facade() -> CatalogFacade:
    return CatalogFacade()


@catalog_router.post("", status_code=201, response_model=ReadableCatalog)
async def create_catalog(
    body: PersistableCatalog,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> ReadableCatalog:
    return facade.save_catalog(body, store, language)


@catalog_router.get("", response_model=ReadableCatalogList)
async def list_catalogs(
    code: str | None = Query(default=None, description="Filter on a catalog code fragment"),
    page: int = Query(default=0, ge=0, description="Page index (0-based)"),
    count: int = Query(default=10, ge=1, le=100, description="Page size"),
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> ReadableCatalogList:
    return facade.get_list_catalogs(code, store, language, page, count)


@catalog_router.get("/unique", response_model=CatalogExistsResponse)
async def catalog_exists(
    code: str = Query(..., min_length=1),
    store: MerchantStore = Depends(current_store),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> CatalogExistsResponse:
    return CatalogExistsResponse(exists=facade.catalog_exists(code, store))


@catalog_router.get("/code/{code}", response_model=ReadableCatalog)
async def get_catalog_by_code(
    code: str,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> ReadableCatalog:
    return facade.get_catalog(code, store, language)


@catalog_router.get("/{catalog_id}", response_model=ReadableCatalog)
async def get_catalog(
    catalog_id: str,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> ReadableCatalog:
    return facade.get_catalog_by_id(catalog_id, store, language)


@catalog_router.patch("/{catalog_id}", response_model=StatusResponse)
async def update_catalog(
    catalog_id: str,
    body: UpdateCatalogRequest,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> StatusResponse:
    facade.update_catalog(catalog_id, body, store, language)
    return StatusResponse()


@catalog_router.delete("/{catalog_id}", response_model=StatusResponse)
async def delete_catalog(
    catalog_id: str,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> StatusResponse:
    facade.delete_catalog(catalog_id, store, language)
    return StatusResponse(status="deleted")


@catalog_router.post("/{code}/entries", status_code=201, response_model=ReadableCatalogCategoryEntry)
async def add_catalog_entry(
    code: str,
    body: AddCatalogEntryRequest,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    facade: CatalogFacade = Depends(get_catalog_facade),
) -> ReadableCatalogCategoryEntry:
    entry = PersistableCatalogCategoryEntry(catalog=code, category=body.category, visible=body.visible)
    return facade.add_catalog_entry(entry, store, language)
