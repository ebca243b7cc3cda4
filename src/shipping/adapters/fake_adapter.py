"""In-memory collaborators for development and testing.

They hold their data in plain dicts and compute rates from a fixed table.
``FakeOrderProcessing`` can be told to fail so callers can exercise their
error paths.
"""

from dataclasses import dataclass, field
from uuid import uuid4

from shipping.ports import (
    CartRepository,
    CountryDirectory,
    CustomerDirectory,
    LabelNotFoundError,
    MessageSource,
    OrderProcessing,
    PricingService,
)
from shipping.quote.model import Country, Customer, ShippingOption, ShippingQuote, ShippingSummary, ShoppingCart

COUNTRIES = {
    "US": "United States",
    "CA": "Canada",
    "MX": "Mexico",
    "GB": "United Kingdom",
    "FR": "France",
    "DE": "Germany",
    "ES": "Spain",
    "IT": "Italy",
    "BE": "Belgium",
    "NL": "Netherlands",
    "CH": "Switzerland",
    "JP": "Japan",
    "AU": "Australia",
    "BR": "Brazil",
    "IN": "India",
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
}


class InMemoryCustomerDirectory(CustomerDirectory):
    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._customers: dict[str, Customer] = {}
        for customer in customers or []:
            self.add(customer)

    def add(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer.id = str(uuid4())
        self._customers[customer.nick] = customer
        return customer

    def get_by_nick(self, nick: str) -> Customer | None:
        return self._customers.get(nick)


class InMemoryCartRepository(CartRepository):
    def __init__(self, carts: list[ShoppingCart] | None = None) -> None:
        self._carts: dict[tuple[str, str], ShoppingCart] = {}
        for cart in carts or []:
            self.add(cart)

    def add(self, cart: ShoppingCart) -> ShoppingCart:
        self._carts[(cart.store_code, cart.code)] = cart
        return cart

    def get_by_code(self, code: str, store) -> ShoppingCart | None:
        return self._carts.get((store.code, code))


class StaticCountryDirectory(CountryDirectory):
    def __init__(self, countries: dict[str, str] | None = None) -> None:
        self._countries = dict(COUNTRIES if countries is None else countries)

    def get_by_code(self, iso_code: str | None) -> Country | None:
        if not iso_code:
            return None
        code = iso_code.strip().upper()
        if code not in self._countries:
            return None
        return Country(iso_code=code, name=self._countries[code])


@dataclass(frozen=True)
class ModuleRate:
    """Rate table row: ``base + per_kg * weight`` for one module/option."""

    module_code: str
    option_code: str | None = None
    base: float = 0.0
    per_kg: float = 0.0
    delivery_days: int | None = None
    countries: frozenset[str] = field(default_factory=frozenset)

    def ships_to(self, iso_code: str | None) -> bool:
        return not self.countries or iso_code in self.countries


DEFAULT_RATES = (
    ModuleRate(module_code="flatRate", base=10.0, delivery_days=5),
    ModuleRate(module_code="weightBased", option_code="standard", base=5.0, per_kg=1.5, delivery_days=5),
    ModuleRate(module_code="weightBased", option_code="express", base=15.0, per_kg=3.0, delivery_days=2),
)


class FakeOrderProcessing(OrderProcessing):
    """Quotes every module of the rate table that ships to the delivery country.

    The cheapest option is selected. Carts whose subtotal reaches
    ``free_shipping_threshold`` ship for free.
    """

    def __init__(
        self,
        rates: tuple[ModuleRate, ...] | list[ModuleRate] = DEFAULT_RATES,
        handling_fee: float = 0.0,
        free_shipping_threshold: float | None = None,
        apply_tax_on_shipping: bool = False,
    ) -> None:
        self.rates = tuple(rates)
        self.handling_fee = handling_fee
        self.free_shipping_threshold = free_shipping_threshold
        self.apply_tax_on_shipping = apply_tax_on_shipping
        self.should_succeed = True
        self.failure_reason = "Shipping service unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Shipping service unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def get_shipping_quote(self, customer: Customer, cart: ShoppingCart, store, language) -> ShippingQuote:
        delivery = customer.delivery
        iso_code = delivery.country.iso_code if delivery and delivery.country else None
        self.calls.append(
            {
                "method": "get_shipping_quote",
                "cart": cart.code,
                "customer_id": customer.id,
                "anonymous": customer.anonymous,
                "country": iso_code,
                "postal_code": delivery.postal_code if delivery else None,
                "store": store.code,
                "language": language.code,
            }
        )
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)

        quote = ShippingQuote(
            delivery=delivery,
            handling_fees=self.handling_fee,
            apply_tax_on_shipping=self.apply_tax_on_shipping,
            free_shipping_amount=self.free_shipping_threshold,
        )
        if iso_code is None:
            quote.shipping_return_code = "NO_POSTAL_CODE"
            return quote

        free = self.free_shipping_threshold is not None and cart.subtotal >= self.free_shipping_threshold
        weight = cart.total_weight
        for rate in self.rates:
            if not rate.ships_to(iso_code):
                continue
            price = 0.0 if free else round(rate.base + rate.per_kg * weight, 2)
            quote.shipping_options.append(
                ShippingOption(
                    option_id=f"{rate.module_code}-{rate.option_code}" if rate.option_code else rate.module_code,
                    shipping_module_code=rate.module_code,
                    option_code=rate.option_code,
                    option_price=price,
                    estimated_delivery_days=rate.delivery_days,
                )
            )

        if not quote.shipping_options:
            quote.shipping_return_code = "NO_SHIPPING_TO_SELECTED_COUNTRY"
            return quote

        quote.free_shipping = free
        quote.selected_shipping_option = min(quote.shipping_options, key=lambda option: option.option_price)
        quote.shipping_module_code = quote.selected_shipping_option.shipping_module_code
        return quote

    def get_shipping_summary(self, quote: ShippingQuote, store, language) -> ShippingSummary:  # noqa: ARG002
        selected = quote.selected_shipping_option
        return ShippingSummary(
            shipping=selected.option_price if selected else 0.0,
            handling=quote.handling_fees,
            shipping_module=quote.shipping_module_code,
            shipping_option=selected.option_code if selected else None,
            free_shipping=quote.free_shipping,
            tax_on_shipping=quote.apply_tax_on_shipping,
            delivery=quote.delivery,
            selected_shipping_option=selected,
        )


class SimplePricingService(PricingService):
    def get_display_amount(self, amount: float, store) -> str:
        value = amount or 0.0
        symbol = CURRENCY_SYMBOLS.get(store.currency)
        if symbol is None:
            return f"{store.currency} {value:,.2f}"
        return f"{symbol}{value:,.2f}"


class BundleMessageSource(MessageSource):
    """Resolves labels from ``{locale: {key: template}}`` bundles.

    Lookup goes from the full locale (``fr_CA``) to its language (``fr``) and
    finally to the default locale. Templates use positional ``{0}`` arguments.
    """

    def __init__(self, bundles: dict[str, dict[str, str]], default_locale: str = "en") -> None:
        self.bundles = bundles
        self.default_locale = default_locale

    def _candidates(self, locale: str | None) -> list[str]:
        candidates = []
        if locale:
            candidates.append(locale)
            language = locale.replace("-", "_").split("_")[0]
            if language != locale:
                candidates.append(language)
        candidates.append(self.default_locale)
        return candidates

    def get_message(self, key: str, locale: str, args: list | tuple | None = None) -> str:
        for candidate in self._candidates(locale):
            template = self.bundles.get(candidate, {}).get(key)
            if template is not None:
                return template.format(*(args or ()))
        raise LabelNotFoundError(key, locale)
