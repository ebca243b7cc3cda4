"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.api.schemas import PersistableCatalog
from pytest_bdd import given, parsers, then
from shared.context import MerchantStore
from shared.errors import StorefrontError


@pytest.fixture()
def error():
    """Container for captured facade errors."""
    return {"exc": None}


@pytest.fixture()
def stores():
    return {
        "DEFAULT": MerchantStore(code="DEFAULT", name="Default store"),
        "OUTLET": MerchantStore(code="OUTLET", name="Outlet store"),
    }


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('catalog "{code}" exists in store "{store_code}"'))
def catalog_exists(facade, stores, language, code, store_code):
    facade.save_catalog(PersistableCatalog(code=code), stores[store_code], language)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the request is rejected as "{kind}"'))
def request_rejected(error, kind):
    assert isinstance(error["exc"], StorefrontError)
    assert error["exc"].kind.value == kind


@then(parsers.cfparse('catalog "{code}" can be read in store "{store_code}"'))
def catalog_readable(facade, stores, language, code, store_code):
    assert facade.get_catalog(code, stores[store_code], language).code == code
