"""Tests for supplier links on variants."""
import pytest

API = "/api/v1"


@pytest.fixture
def supplier(client, auth_headers):
    resp = client.post(
        f"{API}/suppliers",
        json={"email": "sales@mill.com", "first_name": "Tom", "last_name": "Mill"},
        headers=auth_headers,
    )
    return resp.get_json()["supplier"]


@pytest.fixture
def variant(make_product):
    return make_product(name="Blanket", stock=8)["variants"][0]


def _link(client, headers, supplier_id, variant_id, **extra):
    body = {"supplier_id": supplier_id, "variant_id": variant_id, "purchase_price": 5.5}
    body.update(extra)
    return client.post(f"{API}/variant-suppliers", json=body, headers=headers)


def test_link_variant_to_supplier(client, auth_headers, supplier, variant):
    resp = _link(client, auth_headers, supplier["id"], variant["id"], is_primary_supplier=True)
    assert resp.status_code == 201
    row = resp.get_json()["variant_supplier"]
    assert row["purchase_price"] == 5.5
    assert row["is_primary_supplier"] is True

    resp = client.get(f"{API}/variant-suppliers/{row['id']}", headers=auth_headers)
    assert resp.get_json()["variant_supplier"]["variant"]["variant_name"] == "Default"


def test_duplicate_link_conflicts(client, auth_headers, supplier, variant):
    assert _link(client, auth_headers, supplier["id"], variant["id"]).status_code == 201
    resp = _link(client, auth_headers, supplier["id"], variant["id"])
    assert resp.status_code == 409


def test_link_foreign_variant(client, other_headers, auth_headers, variant):
    theirs = client.post(
        f"{API}/suppliers",
        json={"email": "x@y.com", "first_name": "Xav", "last_name": "Yu"},
        headers=other_headers,
    ).get_json()["supplier"]
    resp = _link(client, other_headers, theirs["id"], variant["id"])
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == f"Variant with id {variant['id']} not found"


def test_supplier_variants_listing(client, auth_headers, supplier, variant):
    _link(client, auth_headers, supplier["id"], variant["id"])
    resp = client.get(f"{API}/suppliers/{supplier['id']}/variants", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["pagination"]["totalItems"] == 1
    item = body["variants"][0]
    assert item["variant"] == {
        "id": variant["id"],
        "variant_name": "Default",
        "product_id": variant["product_id"],
        "stock": 8,
    }


def test_update_link(client, auth_headers, supplier, variant):
    row = _link(client, auth_headers, supplier["id"], variant["id"]).get_json()
    url = f"{API}/variant-suppliers/{row['variant_supplier']['id']}"

    resp = client.patch(url, json={"purchase_price": 7}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["variant_supplier"]["purchase_price"] == 7.0

    resp = client.patch(url, json={}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "No data to update"

    resp = client.patch(url, json={"supplier_id": 1}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "supplier_id cannot be modified"


def test_deleting_product_removes_links(client, auth_headers, supplier, variant):
    row = _link(client, auth_headers, supplier["id"], variant["id"]).get_json()
    client.delete(f"{API}/products/{variant['product_id']}", headers=auth_headers)

    resp = client.get(
        f"{API}/variant-suppliers/{row['variant_supplier']['id']}", headers=auth_headers
    )
    assert resp.status_code == 404


def test_delete_link(client, auth_headers, supplier, variant):
    row = _link(client, auth_headers, supplier["id"], variant["id"]).get_json()
    url = f"{API}/variant-suppliers/{row['variant_supplier']['id']}"
    assert client.delete(url, headers=auth_headers).status_code == 204
    assert client.get(url, headers=auth_headers).status_code == 404
