"""
Behaviour every resource shares: list, 404s, delete semantics, error body
"""
from unittest.mock import patch

import pytest

from nile.api.errors import http_error
from nile.core.exceptions import (
    ConflictError,
    InvalidPayloadError,
    NotFoundError,
    PersistenceError,
    ReferenceNotFoundError,
)

RESOURCES = ["customer", "business", "category", "product", "payment"]


@pytest.mark.parametrize("resource", RESOURCES)
def test_get_unknown_id_is_404(client, resource):
    response = client.get(f"/{resource}/4242")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "NOT_FOUND"


@pytest.mark.parametrize("resource", RESOURCES)
def test_delete_unknown_id_is_404(client, resource):
    assert client.delete(f"/{resource}/4242").status_code == 404


@pytest.mark.parametrize("resource", RESOURCES)
def test_empty_list_is_json_array(client, resource):
    response = client.get(f"/{resource}")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.parametrize("resource,payload", [
    ("customer", {"name": "Temp"}),
    ("business", {"name": "Temp Shop"}),
    ("category", {"name": "Temp Category"}),
])
def test_delete_then_get_is_404(client, resource, payload):
    location = client.post(f"/{resource}", json=payload).headers["location"]

    response = client.delete(location)

    assert response.status_code == 204
    assert response.content == b""
    assert client.get(location).status_code == 404


def test_delete_product_then_get_is_404(client, product):
    assert client.delete(f"/product/{product.id}").status_code == 204
    assert client.get(f"/product/{product.id}").status_code == 404


def test_business_requires_name(client):
    assert client.post("/business", json={"email": "x@y.test"}).status_code == 422


def test_persistence_failure_is_500(client):
    with patch("nile.services.base.BaseService.get_list", side_effect=PersistenceError("Error listing Customer")):
        response = client.get("/customer")

    assert response.status_code == 500
    assert response.json()["detail"] == {"code": "PERSISTENCE_FAILURE", "message": "Error listing Customer"}


def test_unexpected_failure_is_500(client):
    with patch("nile.services.base.BaseService.get_by_id", side_effect=RuntimeError("boom")):
        response = client.get("/category/1")

    assert response.status_code == 500
    assert response.json()["detail"]["code"] == "INTERNAL_ERROR"


def test_patch_category_merges_only_sent_fields(client, category):
    response = client.patch(f"/category/{category.id}", json={"description": "Phones"})

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == category.id
    assert data["name"] == "Electronics"
    assert data["description"] == "Phones"
    assert client.get(f"/category/{category.id}").json()["description"] == "Phones"


def test_patch_business_merges_only_sent_fields(client, business):
    response = client.patch(f"/business/{business.id}", json={"website": "https://acme.test", "name": None})

    assert response.status_code == 200
    data = response.json()
    assert data["website"] == "https://acme.test"
    assert data["name"] == "Acme Store"
    assert data["username"] == "acme"
    assert data["email"] == "shop@acme.test"


@pytest.mark.parametrize("resource", ["category", "business"])
def test_patch_unknown_id_is_404(client, resource):
    response = client.patch(f"/{resource}/4242", json={"name": "Nobody"})

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "NOT_FOUND"


@pytest.mark.parametrize("error,status_code", [
    (NotFoundError("Product", 1), 404),
    (ReferenceNotFoundError("Business", 1), 500),
    (ConflictError("duplicate transaction_id"), 500),
    (PersistenceError("Error saving Payment"), 500),
    (InvalidPayloadError("name cannot be null"), 422),
])
def test_error_status_mapping(error, status_code):
    exc = http_error(error)

    assert exc.status_code == status_code
    assert exc.detail == {"code": error.code, "message": error.message}
