"""Builds the readable shipping summary returned to storefront clients."""

from shipping.api.schemas import ReadableDelivery, ReadableShippingOption, ReadableShippingSummary
from shipping.quote.model import Delivery, ShippingOption, ShippingSummary


def readable_delivery(delivery: Delivery | None) -> ReadableDelivery | None:
    if delivery is None:
        return None
    return ReadableDelivery(
        postal_code=delivery.postal_code,
        country=delivery.country.iso_code if delivery.country else None,
    )


def readable_option(option: ShippingOption, store, pricing) -> ReadableShippingOption:
    return ReadableShippingOption(
        option_id=option.option_id,
        shipping_module_code=option.shipping_module_code,
        option_code=option.option_code,
        option_price=option.option_price,
        option_price_text=pricing.get_display_amount(option.option_price, store),
        estimated_delivery_days=option.estimated_delivery_days,
        description=option.description,
        note=option.note,
        option_name=option.option_name,
    )


def populate_shipping_summary(summary: ShippingSummary, store, language, pricing) -> ReadableShippingSummary:  # noqa: ARG001
    """Copy the priced summary fields and format amounts in the store currency."""
    target = ReadableShippingSummary(
        shipping=summary.shipping,
        handling=summary.handling,
        shipping_module=summary.shipping_module,
        shipping_option=summary.shipping_option,
        free_shipping=summary.free_shipping,
        tax_on_shipping=summary.tax_on_shipping,
        shipping_text=pricing.get_display_amount(summary.shipping, store),
        handling_text=pricing.get_display_amount(summary.handling, store),
        delivery=readable_delivery(summary.delivery),
    )
    if summary.selected_shipping_option is not None:
        target.selected_shipping_option = readable_option(summary.selected_shipping_option, store, pricing)
    return target
