"""Shipping quote handler: shipping options and pricing for a cart.

Two entry points share one computation:

* ``shipping_for_customer``: an authenticated customer quoting their own cart.
* ``shipping_for_guest``: an anonymous visitor quoting a cart for a delivery
  address. A transient customer carries the address through the computation.

Expected conditions (missing cart, missing principal or customer, cart owned
by someone else) return an error outcome straight away. Any other exception
is logged and reported as ``SERVICE_UNAVAILABLE`` without a summary.
"""

from dataclasses import dataclass

import structlog

from shared.errors import ErrorKind
from shipping.api.schemas import ReadableShippingSummary
from shipping.ports import (
    CartRepository,
    CountryDirectory,
    CustomerDirectory,
    MessageSource,
    OrderProcessing,
    PricingService,
)
from shipping.quote.labels import decorate_options
from shipping.quote.model import Country, Customer, Delivery
from shipping.quote.populator import populate_shipping_summary, readable_option

logger = structlog.get_logger(__name__)

QUOTE_ERROR_MESSAGE = "Error while getting shipping quote"


@dataclass(frozen=True)
class ShippingQuoteOutcome:
    summary: ReadableShippingSummary | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ShippingQuoteOutcome":
        return cls(error=error, message=message)


def _cart_not_found(code) -> ShippingQuoteOutcome:
    return ShippingQuoteOutcome.failure(ErrorKind.NOT_FOUND, f"Cart code {code} does not exist")


class ShippingQuoteHandler:
    def __init__(
        self,
        customers: CustomerDirectory,
        carts: CartRepository,
        countries: CountryDirectory,
        order_processing: OrderProcessing,
        pricing: PricingService,
        messages: MessageSource,
    ) -> None:
        self.customers = customers
        self.carts = carts
        self.countries = countries
        self.order_processing = order_processing
        self.pricing = pricing
        self.messages = messages

    def shipping_for_customer(self, code, principal_name, store, language, locale) -> ShippingQuoteOutcome:
        try:
            cart = self.carts.get_by_code(code, store)
            if cart is None:
                return _cart_not_found(code)

            if not principal_name:
                return ShippingQuoteOutcome.failure(ErrorKind.UNAUTHENTICATED, "User not logged in")

            customer = self.customers.get_by_nick(principal_name)
            if customer is None:
                logger.warning("Authenticated principal has no customer record", nick=principal_name)
                return ShippingQuoteOutcome.failure(ErrorKind.NOT_FOUND, f"Customer {principal_name} does not exist")

            # Same answer as a missing cart so other customers' carts stay invisible
            if not cart.is_owned_by(customer):
                return ShippingQuoteOutcome.failure(ErrorKind.NOT_FOUND, f"Cart does not exist for user {customer.nick}")

            return ShippingQuoteOutcome(summary=self._calculate(customer, cart, store, language, locale))
        except Exception as exc:
            return self._unavailable(exc, code)

    def shipping_for_guest(self, code, address, store, language, locale) -> ShippingQuoteOutcome:
        try:
            cart = self.carts.get_by_code(code, store)
            if cart is None:
                return _cart_not_found(code)

            customer = self._anonymous_customer(address, store)
            return ShippingQuoteOutcome(summary=self._calculate(customer, cart, store, language, locale))
        except Exception as exc:
            return self._unavailable(exc, code)

    def _anonymous_customer(self, address, store) -> Customer:
        country = self.countries.get_by_code(address.country_code)
        if country is None:
            logger.info(
                "Unknown delivery country, using store country",
                country_code=address.country_code,
                store_country=store.country_code,
            )
            country = self.countries.get_by_code(store.country_code) or Country(iso_code=store.country_code)
        return Customer.anonymous_for(Delivery(postal_code=address.postal_code, country=country))

    def _calculate(self, customer, cart, store, language, locale) -> ReadableShippingSummary:
        quote = self.order_processing.get_shipping_quote(customer, cart, store, language)
        summary = self.order_processing.get_shipping_summary(quote, store, language)

        readable = populate_shipping_summary(summary, store, language, self.pricing)
        if quote.shipping_options:
            options = decorate_options(quote.shipping_options, store, locale, self.messages)
            readable.shipping_options = [readable_option(option, store, self.pricing) for option in options]
            if quote.selected_shipping_option is not None:
                readable.selected_shipping_option = readable_option(quote.selected_shipping_option, store, self.pricing)

        logger.info(
            "Shipping quote computed",
            cart=cart.code,
            anonymous=customer.anonymous,
            options=len(readable.shipping_options),
            return_code=quote.shipping_return_code,
        )
        return readable

    def _unavailable(self, exc: Exception, code) -> ShippingQuoteOutcome:
        logger.exception(QUOTE_ERROR_MESSAGE, cart=code)
        return ShippingQuoteOutcome.failure(ErrorKind.SERVICE_UNAVAILABLE, f"{QUOTE_ERROR_MESSAGE} {exc}")
