import pytest
from shared.context import Language, MerchantStore
from shipping.adapters import ShippingAdapters
from shipping.adapters.fake_adapter import (
    BundleMessageSource,
    FakeOrderProcessing,
    InMemoryCartRepository,
    InMemoryCustomerDirectory,
    SimplePricingService,
    StaticCountryDirectory,
)
from shipping.labels import DEFAULT_BUNDLES
from shipping.quote.handler import ShippingQuoteHandler
from shipping.quote.model import CartItem, Country, Customer, Delivery, ShoppingCart


@pytest.fixture()
def store():
    return MerchantStore(code="DEFAULT", name="Default store", country_code="CA", currency="CAD", languages=("en", "fr"))


@pytest.fixture()
def language():
    return Language(code="en")


@pytest.fixture()
def locale():
    return "en"


@pytest.fixture()
def customer():
    return Customer(
        id="cust-001",
        nick="alice",
        delivery=Delivery(postal_code="H2X 1Y4", country=Country(iso_code="CA", name="Canada")),
    )


@pytest.fixture()
def other_customer():
    return Customer(
        id="cust-002",
        nick="bob",
        delivery=Delivery(postal_code="10001", country=Country(iso_code="US", name="United States")),
    )


@pytest.fixture()
def adapters(customer, other_customer):
    carts = InMemoryCartRepository(
        [
            ShoppingCart(
                code="cart-alice",
                store_code="DEFAULT",
                customer_id=customer.id,
                items=[CartItem(sku="TSHIRT", quantity=2, unit_price=20.0, weight=0.5)],
            ),
            ShoppingCart(
                code="cart-guest",
                store_code="DEFAULT",
                items=[CartItem(sku="MUG", quantity=1, unit_price=12.0, weight=1.0)],
            ),
        ]
    )
    return ShippingAdapters(
        customers=InMemoryCustomerDirectory([customer, other_customer]),
        carts=carts,
        countries=StaticCountryDirectory(),
        order_processing=FakeOrderProcessing(),
        pricing=SimplePricingService(),
        messages=BundleMessageSource(DEFAULT_BUNDLES),
    )


@pytest.fixture()
def handler(adapters):
    return ShippingQuoteHandler(
        customers=adapters.customers,
        carts=adapters.carts,
        countries=adapters.countries,
        order_processing=adapters.order_processing,
        pricing=adapters.pricing,
        messages=adapters.messages,
    )
