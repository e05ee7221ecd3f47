# tests/test_service.py

"""
Unit tests for ProductService against a mocked store, pinning the order in
which checks run: session, id, existence, then validation.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from inventory_service.exceptions import (
    BadRequestError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)
from inventory_service.schemas import Identity
from inventory_service.service import ProductService, parse_product_id
from inventory_service.store import ProductStore
from tests._helpers import VALID_PRODUCT, product_body

USER = Identity(id="1", name="Administrador", email="admin@example.com")


@pytest.fixture
def store():
    return MagicMock(spec=ProductStore)


@pytest.fixture
def service(store):
    return ProductService(store)


@pytest.mark.parametrize("raw, expected", [("12", 12), (" 7 ", 7), ("-3", -3), (5, 5)])
def test_parse_product_id(raw, expected):
    assert parse_product_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1.5", "", "12abc", None, True])
def test_parse_product_id_rejects(raw):
    with pytest.raises(BadRequestError) as exc:
        parse_product_id(raw)
    assert exc.value.detail == "invalid id"


def test_unauthenticated_update_beats_bad_id(service, store):
    with pytest.raises(UnauthorizedError):
        service.update_product(None, "abc", {"nome": ""})
    assert store.method_calls == []


def test_unauthenticated_delete_beats_bad_id(service, store):
    with pytest.raises(UnauthorizedError):
        service.delete_product(None, "abc")
    assert store.method_calls == []


def test_bad_id_checked_before_store(service, store):
    with pytest.raises(BadRequestError):
        service.update_product(USER, "abc", VALID_PRODUCT)
    assert store.method_calls == []


def test_missing_product_beats_invalid_body(service, store):
    store.get.return_value = None
    with pytest.raises(NotFoundError):
        service.update_product(USER, "9", {"nome": ""})
    store.update.assert_not_called()


def test_invalid_body_never_reaches_write_path(service, store):
    store.get.return_value = MagicMock()
    with pytest.raises(BadRequestError) as exc:
        service.update_product(USER, "9", product_body(quantidade=-1))
    assert set(exc.value.detail) == {"quantidade"}
    store.update.assert_not_called()


def test_create_defaults_date_to_now(service, store):
    before = datetime.now().astimezone()
    service.create_product(USER, VALID_PRODUCT)
    payload, data = store.create.call_args.args
    assert payload.nome == "Arroz"
    assert data >= before


def test_update_keeps_stored_date_when_omitted(service, store):
    existing = MagicMock()
    existing.data = datetime(2024, 5, 1)
    store.get.return_value = existing

    service.update_product(USER, "9", VALID_PRODUCT)
    _, _, data = store.update.call_args.args
    assert data == datetime(2024, 5, 1)


def test_lookup_failure_is_internal(service, store):
    store.get.side_effect = RuntimeError("db gone")
    with pytest.raises(InternalError) as exc:
        service.get_product("1")
    assert "db gone" not in str(exc.value.detail)


def test_delete_failure_rolls_back(service, store):
    store.get.return_value = MagicMock()
    store.delete.side_effect = RuntimeError("locked")
    with pytest.raises(InternalError):
        service.delete_product(USER, "1")
    store.rollback.assert_called_once()


@pytest.mark.parametrize("raw", ["99999999999999999999", str(2**31), str(-(2**31) - 1)])
def test_ids_outside_key_range_are_not_found_without_store_access(service, store, raw):
    with pytest.raises(NotFoundError):
        service.get_product(raw)
    with pytest.raises(NotFoundError):
        service.update_product(USER, raw, VALID_PRODUCT)
    with pytest.raises(NotFoundError):
        service.delete_product(USER, raw)
    assert store.method_calls == []
