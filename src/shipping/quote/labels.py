"""Localized display text for shipping options."""

import structlog

from shipping.ports import LabelNotFoundError, MessageSource
from shipping.quote.model import ShippingOption

logger = structlog.get_logger(__name__)

MODULE_KEY_PREFIX = "module.shipping."


def module_key(module_code: str) -> str:
    return f"{MODULE_KEY_PREFIX}{module_code}"


def note_key(module_code: str) -> str:
    return f"{module_key(module_code)}.note"


def decorate_option(option: ShippingOption, store, locale: str, messages: MessageSource) -> ShippingOption:
    """Fill description, note and option name of one option in place.

    The description is required. The note defaults to an empty string. Options
    with an option code take their name from the module's note label; when
    that label is missing the name is logged and left unset.
    """
    option.description = messages.get_message(module_key(option.shipping_module_code), locale, [store.name])

    key = note_key(option.shipping_module_code)
    option.note = messages.get_message_or_default(key, locale, "")

    if option.option_code and option.option_code.strip():
        try:
            option.option_name = messages.get_message(key, locale)
        except LabelNotFoundError:
            logger.warning("No shipping option label found", key=key, option_code=option.option_code, locale=locale)
    return option


def decorate_options(options: list[ShippingOption], store, locale: str, messages: MessageSource) -> list[ShippingOption]:
    return [decorate_option(option, store, locale, messages) for option in options]
