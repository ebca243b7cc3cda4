"""Collaborator ports for the shipping quote handler.

The handler programs against these interfaces; adapters are chosen by
configuration (see ``shipping.adapters``).
"""

from abc import ABC, abstractmethod

from shipping.quote.model import Country, Customer, ShippingQuote, ShippingSummary, ShoppingCart


class LabelNotFoundError(LookupError):
    """No localized label is mapped for the requested key."""

    def __init__(self, key: str, locale: str) -> None:
        super().__init__(f"No label [{key}] for locale [{locale}]")
        self.key = key
        self.locale = locale


class CustomerDirectory(ABC):
    @abstractmethod
    def get_by_nick(self, nick: str) -> Customer | None:
        """Return the registered customer with this login name, if any."""
        ...


class CartRepository(ABC):
    @abstractmethod
    def get_by_code(self, code: str, store) -> ShoppingCart | None:
        """Return the cart with this code in the given store, if any."""
        ...


class CountryDirectory(ABC):
    @abstractmethod
    def get_by_code(self, iso_code: str | None) -> Country | None:
        """Return the country for an ISO 3166 alpha-2 code, or None when unknown."""
        ...


class OrderProcessing(ABC):
    @abstractmethod
    def get_shipping_quote(self, customer: Customer, cart: ShoppingCart, store, language) -> ShippingQuote:
        """Compute the shipping options available for a cart and delivery address."""
        ...

    @abstractmethod
    def get_shipping_summary(self, quote: ShippingQuote, store, language) -> ShippingSummary:
        """Price the selected option of a quote."""
        ...


class PricingService(ABC):
    @abstractmethod
    def get_display_amount(self, amount: float, store) -> str:
        """Format an amount in the store currency."""
        ...


class MessageSource(ABC):
    @abstractmethod
    def get_message(self, key: str, locale: str, args: list | tuple | None = None) -> str:
        """Resolve a localized label.

        Raises:
            LabelNotFoundError: when the key is not mapped for the locale or its fallbacks.
        """
        ...

    def get_message_or_default(self, key: str, locale: str, default: str, args: list | tuple | None = None) -> str:
        try:
            return self.get_message(key, locale, args)
        except LabelNotFoundError:
            return default
