"""Pydantic request/response schemas for the Shipping API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AddressLocation(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"postal_code": "H2X 1Y4", "country_code": "CA"}]}}

    postal_code: str | None = Field(None, max_length=20)
    country_code: str | None = Field(None, max_length=2)


class ReadableDelivery(BaseModel):
    postal_code: str | None = None
    country: str | None = None


class ReadableShippingOption(BaseModel):
    option_id: str
    shipping_module_code: str
    option_code: str | None = None
    option_price: float = 0.0
    option_price_text: str | None = None
    estimated_delivery_days: int | None = None
    description: str | None = None
    note: str | None = None
    option_name: str | None = None


class ReadableShippingSummary(BaseModel):
    shipping: float = 0.0
    handling: float = 0.0
    shipping_module: str | None = None
    shipping_option: str | None = None
    free_shipping: bool = False
    tax_on_shipping: bool = False
    shipping_text: str | None = None
    handling_text: str | None = None
    delivery: ReadableDelivery | None = None
    selected_shipping_option: ReadableShippingOption | None = None
    shipping_options: list[ReadableShippingOption] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    message: str
