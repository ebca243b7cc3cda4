"""FastAPI endpoints for shipping quotes."""

from fastapi import APIRouter, Depends, Header, Request

from shared.context import Language, MerchantStore
from shared.errors import error_response
from shared.web import current_language, current_store, request_locale
from shipping.adapters import ShippingAdapters, build_adapters
from shipping.api.schemas import AddressLocation, ErrorResponse, ReadableShippingSummary
from shipping.quote.handler import ShippingQuoteHandler, ShippingQuoteOutcome

shipping_router = APIRouter(prefix="/api/v1", tags=["shipping"])

_ERROR_RESPONSES = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def get_shipping_adapters(request: Request) -> ShippingAdapters:
    adapters = getattr(request.app.state, "shipping_adapters", None)
    if adapters is None:
        adapters = build_adapters()
        request.app.state.shipping_adapters = adapters
    return adapters


def get_shipping_quote_handler(adapters: ShippingAdapters = Depends(get_shipping_adapters)) -> ShippingQuoteHandler:
    return ShippingQuoteHandler(
        customers=adapters.customers,
        carts=adapters.carts,
        countries=adapters.countries,
        order_processing=adapters.order_processing,
        pricing=adapters.pricing,
        messages=adapters.messages,
    )


def _respond(outcome: ShippingQuoteOutcome):
    if outcome.ok:
        return outcome.summary
    return error_response(outcome.error, outcome.message)


@shipping_router.get(
    "/auth/cart/{code}/shipping",
    response_model=ReadableShippingSummary,
    responses=_ERROR_RESPONSES,
)
async def customer_cart_shipping(
    code: str,
    x_auth_user: str | None = Header(default=None),
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    locale: str = Depends(request_locale),
    handler: ShippingQuoteHandler = Depends(get_shipping_quote_handler),
):
    """Shipping options for a cart owned by the authenticated customer.

    The principal is the ``X-Auth-User`` header set by the authenticating gateway.
    """
    return _respond(handler.shipping_for_customer(code, x_auth_user, store, language, locale))


@shipping_router.post(
    "/cart/{code}/shipping",
    response_model=ReadableShippingSummary,
    responses=_ERROR_RESPONSES,
)
async def guest_cart_shipping(
    code: str,
    body: AddressLocation,
    store: MerchantStore = Depends(current_store),
    language: Language = Depends(current_language),
    locale: str = Depends(request_locale),
    handler: ShippingQuoteHandler = Depends(get_shipping_quote_handler),
):
    """Shipping options for a guest cart delivered to the given address."""
    return _respond(handler.shipping_for_guest(code, body, store, language, locale))
