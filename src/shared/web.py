"""FastAPI dependencies resolving the store, language and locale of a request."""

from fastapi import Depends, Query, Request

from shared.context import DEFAULT_STORE_CODE, Language, MerchantStore, StoreRegistry, default_registry
from shared.errors import ResourceNotFoundError


def get_store_registry(request: Request) -> StoreRegistry:
    registry = getattr(request.app.state, "store_registry", None)
    if registry is None:
        registry = default_registry()
        request.app.state.store_registry = registry
    return registry


def current_store(
    store: str = Query(default=DEFAULT_STORE_CODE, description="Merchant store code"),
    registry: StoreRegistry = Depends(get_store_registry),
) -> MerchantStore:
    merchant_store = registry.get_by_code(store)
    if merchant_store is None:
        raise ResourceNotFoundError(f"Store [{store}] not found")
    return merchant_store


def current_language(
    lang: str | None = Query(default=None, description="Language code"),
    store: MerchantStore = Depends(current_store),
    registry: StoreRegistry = Depends(get_store_registry),
) -> Language:
    return registry.language_for(store, lang)


def parse_accept_language(header: str | None) -> str | None:
    """Return the highest-priority language tag of an Accept-Language header.

    ``"fr-CA,fr;q=0.9,en;q=0.8"`` gives ``"fr_CA"``.
    """
    if not header:
        return None

    best_tag, best_weight = None, -1.0
    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        weight = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                weight = float(params[2:])
            except ValueError:
                weight = 0.0
        if weight > best_weight:
            best_tag, best_weight = tag, weight

    return best_tag.replace("-", "_") if best_tag else None


def request_locale(request: Request, language: Language = Depends(current_language)) -> str:
    return parse_accept_language(request.headers.get("accept-language")) or language.code
