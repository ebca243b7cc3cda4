"""Application tests for the catalog facade."""

import pytest
from catalogue.api.facade import CatalogFacade
from catalogue.api.schemas import PersistableCatalog, PersistableCatalogCategoryEntry, UpdateCatalogRequest
from catalogue.catalog.catalog import Catalog
from catalogue.catalog.services import CatalogService, CatalogServiceError
from protean.utils.globals import current_domain
from shared.errors import (
    InvalidArgumentError,
    OperationNotAllowedError,
    ResourceNotFoundError,
    ServiceRuntimeError,
)


class RecordingCatalogService(CatalogService):
    def __init__(self):
        self.saved = []

    def save_or_update(self, catalog, store):
        self.saved.append(catalog.code)
        super().save_or_update(catalog, store)


class FailingDeleteCatalogService(CatalogService):
    def delete(self, catalog):
        raise CatalogServiceError("database offline")


def _save(facade, store, language, **overrides):
    data = {"code": "summer", "visible": True, "default_catalog": False}
    data.update(overrides)
    return facade.save_catalog(PersistableCatalog(**data), store, language)


class TestSaveCatalog:
    def test_returns_readable_projection(self, facade, store, language):
        readable = _save(facade, store, language)
        assert readable.id is not None
        assert readable.code == "summer"
        assert readable.visible is True
        assert readable.default_catalog is False
        assert readable.store == store.code

    def test_save_then_get_round_trip(self, facade, store, language):
        _save(facade, store, language, code="winter", visible=False, default_catalog=True)
        fetched = facade.get_catalog("winter", store, language)
        assert fetched.code == "winter"
        assert fetched.visible is False
        assert fetched.default_catalog is True

    def test_duplicate_code_is_rejected_without_write(self, store, language):
        service = RecordingCatalogService()
        facade = CatalogFacade(catalog_service=service)
        _save(facade, store, language)
        assert service.saved == ["summer"]

        with pytest.raises(OperationNotAllowedError) as exc:
            _save(facade, store, language, visible=False)
        assert "already exists" in str(exc.value)
        assert service.saved == ["summer"]

        catalogs = current_domain.repository_for(Catalog)._dao.query.filter(code="summer").all().items
        assert len(catalogs) == 1
        assert catalogs[0].visible is True

    def test_same_code_allowed_in_another_store(self, facade, store, other_store, language):
        _save(facade, store, language)
        readable = _save(facade, other_store, language)
        assert readable.store == other_store.code

    def test_null_catalog_is_invalid(self, facade, store, language):
        with pytest.raises(InvalidArgumentError):
            facade.save_catalog(None, store, language)

    def test_null_store_is_invalid(self, facade, language):
        with pytest.raises(InvalidArgumentError) as exc:
            facade.save_catalog(PersistableCatalog(code="summer"), None, language)
        assert "MerchantStore" in str(exc.value)

    def test_null_language_is_invalid(self, facade, store):
        with pytest.raises(InvalidArgumentError) as exc:
            facade.save_catalog(PersistableCatalog(code="summer"), store, None)
        assert "Language" in str(exc.value)


class TestGetCatalog:
    def test_get_by_id(self, facade, store, language):
        saved = _save(facade, store, language)
        fetched = facade.get_catalog_by_id(saved.id, store, language)
        assert fetched.code == "summer"

    def test_get_by_id_from_other_store_is_not_found(self, facade, store, other_store, language):
        saved = _save(facade, store, language)
        with pytest.raises(ResourceNotFoundError):
            facade.get_catalog_by_id(saved.id, other_store, language)

    def test_get_by_unknown_id_is_not_found(self, facade, store, language):
        with pytest.raises(ResourceNotFoundError):
            facade.get_catalog_by_id("does-not-exist", store, language)

    def test_get_by_code_from_other_store_is_not_found(self, facade, store, other_store, language):
        _save(facade, store, language)
        with pytest.raises(ResourceNotFoundError):
            facade.get_catalog("summer", other_store, language)

    def test_get_requires_language(self, facade, store):
        with pytest.raises(InvalidArgumentError):
            facade.get_catalog("summer", store, None)


class TestUpdateCatalog:
    def test_overwrites_flags_only(self, facade, store, language):
        saved = _save(facade, store, language, visible=False, default_catalog=False)
        facade.update_catalog(saved.id, UpdateCatalogRequest(visible=True, default_catalog=True), store, language)

        fetched = facade.get_catalog_by_id(saved.id, store, language)
        assert fetched.code == "summer"
        assert fetched.visible is True
        assert fetched.default_catalog is True

    def test_code_in_patch_is_ignored(self, facade, store, language):
        saved = _save(facade, store, language)
        facade.update_catalog(saved.id, PersistableCatalog(code="renamed", visible=False), store, language)

        fetched = facade.get_catalog_by_id(saved.id, store, language)
        assert fetched.code == "summer"
        assert fetched.visible is False

    def test_update_in_other_store_is_not_found(self, facade, store, other_store, language):
        saved = _save(facade, store, language)
        with pytest.raises(ResourceNotFoundError):
            facade.update_catalog(saved.id, UpdateCatalogRequest(visible=False), other_store, language)

    def test_null_patch_is_invalid(self, facade, store, language):
        saved = _save(facade, store, language)
        with pytest.raises(InvalidArgumentError):
            facade.update_catalog(saved.id, None, store, language)


class TestDeleteCatalog:
    def test_delete(self, facade, store, language):
        saved = _save(facade, store, language)
        facade.delete_catalog(saved.id, store, language)

        with pytest.raises(ResourceNotFoundError):
            facade.get_catalog_by_id(saved.id, store, language)

    def test_delete_from_other_store_is_not_found_and_keeps_catalog(self, facade, store, other_store, language):
        saved = _save(facade, store, language)
        with pytest.raises(ResourceNotFoundError):
            facade.delete_catalog(saved.id, other_store, language)

        assert facade.get_catalog_by_id(saved.id, store, language).code == "summer"

    def test_persistence_failure_is_wrapped(self, store, language):
        facade = CatalogFacade(catalog_service=FailingDeleteCatalogService())
        saved = _save(facade, store, language)

        with pytest.raises(ServiceRuntimeError) as exc:
            facade.delete_catalog(saved.id, store, language)
        assert saved.id in str(exc.value)
        assert isinstance(exc.value.__cause__, CatalogServiceError)


class TestListCatalogs:
    def test_empty_store_returns_empty_list(self, facade, store, language):
        result = facade.get_list_catalogs(None, store, language, 0, 10)
        assert result is not None
        assert result.items == []
        assert result.records_total == 0
        assert result.total_pages == 0

    def test_lists_only_store_catalogs(self, facade, store, other_store, language):
        _save(facade, store, language, code="summer")
        _save(facade, store, language, code="winter")
        _save(facade, other_store, language, code="outlet")

        result = facade.get_list_catalogs(None, store, language, 0, 10)
        assert sorted(c.code for c in result.items) == ["summer", "winter"]
        assert result.records_total == 2
        assert result.total_pages == 1
        assert result.number == 0

    def test_pagination(self, facade, store, language):
        for code in ("a-cat", "b-cat", "c-cat"):
            _save(facade, store, language, code=code)

        first = facade.get_list_catalogs(None, store, language, 0, 2)
        second = facade.get_list_catalogs(None, store, language, 1, 2)
        assert [c.code for c in first.items] == ["a-cat", "b-cat"]
        assert [c.code for c in second.items] == ["c-cat"]
        assert first.total_pages == 2
        assert second.number == 1
        assert second.records_total == 3

    def test_code_filter(self, facade, store, language):
        _save(facade, store, language, code="summer")
        _save(facade, store, language, code="winter")

        result = facade.get_list_catalogs("summer", store, language, 0, 10)
        assert [c.code for c in result.items] == ["summer"]

    def test_code_filter_without_match_returns_empty_list(self, facade, store, language):
        _save(facade, store, language, code="summer")
        result = facade.get_list_catalogs("autumn", store, language, 0, 10)
        assert result.items == []


class TestAddCatalogEntry:
    def test_adds_entry_to_catalog(self, facade, store, language):
        _save(facade, store, language)
        entry = facade.add_catalog_entry(
            PersistableCatalogCategoryEntry(catalog="summer", category="beachwear"), store, language
        )
        assert entry.id is not None
        assert entry.catalog == "summer"
        assert entry.category == "beachwear"

        fetched = facade.get_catalog("summer", store, language)
        assert [e.category for e in fetched.entries] == ["beachwear"]

    def test_unknown_catalog_is_not_found(self, facade, store, language):
        with pytest.raises(ResourceNotFoundError):
            facade.add_catalog_entry(PersistableCatalogCategoryEntry(catalog="nope", category="beachwear"), store, language)

    def test_null_entry_is_invalid(self, facade, store, language):
        with pytest.raises(InvalidArgumentError):
            facade.add_catalog_entry(None, store, language)

    def test_entry_without_catalog_is_invalid(self, facade, store, language):
        with pytest.raises(InvalidArgumentError) as exc:
            facade.add_catalog_entry(PersistableCatalogCategoryEntry(category="beachwear"), store, language)
        assert "catalog" in str(exc.value)


class TestCatalogExists:
    def test_exists_after_save(self, facade, store, other_store, language):
        _save(facade, store, language)
        assert facade.catalog_exists("summer", store) is True
        assert facade.catalog_exists("summer", other_store) is False
        assert facade.catalog_exists("winter", store) is False
