import os

import pytest
from shared.context import Language, MerchantStore


@pytest.fixture(scope="session")
def _catalogue_domain(request):
    """Initialize the catalogue domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(scope="session", autouse=True)
def setup_db(_catalogue_domain):
    from catalogue.utils.db import drop_db, setup_db

    setup_db(_catalogue_domain)

    yield

    drop_db(_catalogue_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_catalogue_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def store():
    return MerchantStore(code="DEFAULT", name="Default store", country_code="CA", currency="CAD", languages=("en", "fr"))


@pytest.fixture()
def other_store():
    return MerchantStore(code="OUTLET", name="Outlet store", country_code="US")


@pytest.fixture()
def language():
    return Language(code="en")


@pytest.fixture()
def facade():
    from catalogue.api.facade import CatalogFacade

    return CatalogFacade()
