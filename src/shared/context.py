"""Merchant store and language context carried by every request.

Stores are looked up through a ``StoreRegistry``. The registry built by
``default_registry()`` knows a single store whose attributes come from the
``STORE_*`` environment variables.
"""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Language:
    code: str


@dataclass(frozen=True)
class MerchantStore:
    """A storefront. Two stores are the same store when their codes match."""

    code: str
    name: str = field(default="", compare=False)
    country_code: str = field(default="US", compare=False)
    default_language: str = field(default="en", compare=False)
    currency: str = field(default="USD", compare=False)
    languages: tuple[str, ...] = field(default=("en",), compare=False)


class StoreRegistry:
    """In-memory lookup of the stores served by this process."""

    def __init__(self, stores: list[MerchantStore] | None = None) -> None:
        self._stores: dict[str, MerchantStore] = {}
        for store in stores or []:
            self.register(store)

    def register(self, store: MerchantStore) -> None:
        self._stores[store.code] = store

    def get_by_code(self, code: str) -> MerchantStore | None:
        return self._stores.get(code)

    def stores(self) -> list[MerchantStore]:
        return list(self._stores.values())

    def language_for(self, store: MerchantStore, code: str | None) -> Language:
        """Return the requested language when the store supports it, else the store default."""
        if code and code in store.languages:
            return Language(code=code)
        return Language(code=store.default_language)


DEFAULT_STORE_CODE = "DEFAULT"


def store_from_env() -> MerchantStore:
    default_language = os.environ.get("STORE_LANGUAGE", "en")
    languages = os.environ.get("STORE_LANGUAGES", default_language)
    return MerchantStore(
        code=os.environ.get("STORE_CODE", DEFAULT_STORE_CODE),
        name=os.environ.get("STORE_NAME", "Default store"),
        country_code=os.environ.get("STORE_COUNTRY", "US"),
        default_language=default_language,
        currency=os.environ.get("STORE_CURRENCY", "USD"),
        languages=tuple(code.strip() for code in languages.split(",") if code.strip()),
    )


def default_registry() -> StoreRegistry:
    return StoreRegistry([store_from_env()])
