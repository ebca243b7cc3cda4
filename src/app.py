"""Storefront FastAPI application: catalog management and shipping quotes.

Catalog requests run inside the Catalogue domain context. Shipping requests
only talk to the collaborators built by ``shipping.adapters``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from catalogue.domain import catalogue
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.context import default_registry
from shared.errors import register_error_handlers
from shared.logging import add_context, clear_context, configure_logging
from shipping.adapters import build_adapters

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the Protean config overlay (e.g. "test", "production").
configure_logging()
catalogue.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/v1/private/catalogs": catalogue,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Store catalogs and shipping quotes",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.store_registry = default_registry()
app.state.shipping_adapters = build_adapters()
register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Protean domain context for catalog requests."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import catalog_router  # noqa: E402
from shipping.api.routes import shipping_router  # noqa: E402

app.include_router(catalog_router)
app.include_router(shipping_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "catalogue": {"name": catalogue.name},
            },
            "stores": sorted(store.code for store in app.state.store_registry.stores()),
        }
    )
