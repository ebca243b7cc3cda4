"""Shipping value types exchanged with the order-processing collaborators.

Quotes and summaries are computed per request and never persisted. The only
fields this context writes are the display fields of ``ShippingOption``.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Country:
    iso_code: str
    name: str = ""


@dataclass
class Delivery:
    postal_code: str | None = None
    country: Country | None = None


@dataclass
class Customer:
    """A registered customer, or an anonymous one carrying only a delivery address."""

    id: str | None = None
    nick: str | None = None
    anonymous: bool = False
    delivery: Delivery | None = None

    @classmethod
    def anonymous_for(cls, delivery: Delivery) -> "Customer":
        return cls(anonymous=True, delivery=delivery)


@dataclass(frozen=True)
class CartItem:
    sku: str
    quantity: int = 1
    unit_price: float = 0.0
    weight: float = 0.0


@dataclass
class ShoppingCart:
    code: str
    store_code: str
    customer_id: str | None = None
    items: list[CartItem] = field(default_factory=list)

    @property
    def subtotal(self) -> float:
        return round(sum(item.unit_price * item.quantity for item in self.items), 2)

    @property
    def total_weight(self) -> float:
        return sum(item.weight * item.quantity for item in self.items)

    def is_owned_by(self, customer: Customer) -> bool:
        return self.customer_id is not None and customer.id is not None and str(self.customer_id) == str(customer.id)


@dataclass
class ShippingOption:
    option_id: str
    shipping_module_code: str
    option_code: str | None = None
    option_price: float = 0.0
    estimated_delivery_days: int | None = None
    description: str | None = None
    note: str | None = None
    option_name: str | None = None


@dataclass
class ShippingQuote:
    shipping_module_code: str | None = None
    shipping_options: list[ShippingOption] = field(default_factory=list)
    selected_shipping_option: ShippingOption | None = None
    free_shipping: bool = False
    free_shipping_amount: float | None = None
    handling_fees: float = 0.0
    apply_tax_on_shipping: bool = False
    delivery: Delivery | None = None
    shipping_return_code: str | None = None


@dataclass
class ShippingSummary:
    shipping: float = 0.0
    handling: float = 0.0
    shipping_module: str | None = None
    shipping_option: str | None = None
    free_shipping: bool = False
    tax_on_shipping: bool = False
    delivery: Delivery | None = None
    selected_shipping_option: ShippingOption | None = None
