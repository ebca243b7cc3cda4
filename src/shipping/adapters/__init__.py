"""Shipping collaborator adapters, selected by the ``SHIPPING_ADAPTER`` variable."""

import os
from dataclasses import dataclass

from shipping.labels import DEFAULT_BUNDLES
from shipping.ports import (
    CartRepository,
    CountryDirectory,
    CustomerDirectory,
    MessageSource,
    OrderProcessing,
    PricingService,
)


@dataclass
class ShippingAdapters:
    customers: CustomerDirectory
    carts: CartRepository
    countries: CountryDirectory
    order_processing: OrderProcessing
    pricing: PricingService
    messages: MessageSource


def build_adapters() -> ShippingAdapters:
    """Build the collaborators named by ``SHIPPING_ADAPTER`` (default ``fake``)."""
    adapter = os.environ.get("SHIPPING_ADAPTER", "fake")
    if adapter == "fake":
        from shipping.adapters.fake_adapter import (
            BundleMessageSource,
            FakeOrderProcessing,
            InMemoryCartRepository,
            InMemoryCustomerDirectory,
            SimplePricingService,
            StaticCountryDirectory,
        )

        return ShippingAdapters(
            customers=InMemoryCustomerDirectory(),
            carts=InMemoryCartRepository(),
            countries=StaticCountryDirectory(),
            order_processing=FakeOrderProcessing(),
            pricing=SimplePricingService(),
            messages=BundleMessageSource(DEFAULT_BUNDLES),
        )
    raise ValueError(f"Unknown shipping adapter: {adapter}")
