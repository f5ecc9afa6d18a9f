"""Tests for variant endpoints."""
import pytest

API = "/api/v1"


@pytest.fixture
def product(make_product):
    return make_product(name="Hoodie", stock=6)


def _url(product_id, variant_id=None):
    url = f"{API}/products/{product_id}/variants"
    return f"{url}/{variant_id}" if variant_id is not None else url


def _create(client, headers, product_id, **body):
    return client.post(_url(product_id), json=body, headers=headers)


def test_create_variant(client, auth_headers, product):
    resp = _create(
        client,
        auth_headers,
        product["id"],
        variant_name="large",
        stock=4,
        selling_price_modifier=2.5,
        attributes={"size": "L"},
    )
    assert resp.status_code == 201
    variant = resp.get_json()["variant"]
    assert variant["variant_name"] == "Large"
    assert variant["is_default"] is False
    assert variant["stock"] == 4
    assert variant["selling_price_modifier"] == 2.5
    assert variant["attributes"] == {"size": "L"}
    assert variant["product_id"] == product["id"]


def test_create_variant_cannot_claim_default(client, auth_headers, product):
    resp = _create(
        client, auth_headers, product["id"], variant_name="Sneaky", is_default=True
    )
    assert resp.status_code == 201
    assert resp.get_json()["variant"]["is_default"] is False


def test_create_variant_on_missing_product(client, auth_headers):
    resp = _create(client, auth_headers, 999999, variant_name="Large")
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == "Product with id 999999 not found"


def test_create_variant_validation(client, auth_headers, product):
    resp = _create(client, auth_headers, product["id"], variant_name="XL", stock=-1)
    assert resp.status_code == 400
    msg = resp.get_json()["msg"]
    assert "variant_name" in msg
    assert "stock" in msg


def test_list_variants_default_first(client, auth_headers, product):
    _create(client, auth_headers, product["id"], variant_name="Large", stock=4)
    _create(client, auth_headers, product["id"], variant_name="Small", stock=2)

    resp = client.get(f"{_url(product['id'])}?sortBy=stock", headers=auth_headers)
    assert resp.status_code == 200
    names = [v["variant_name"] for v in resp.get_json()["variants"]]
    assert names == ["Default", "Small", "Large"]

    resp = client.get(
        f"{_url(product['id'])}?sortBy=stock&sortOrder=desc", headers=auth_headers
    )
    names = [v["variant_name"] for v in resp.get_json()["variants"]]
    assert names == ["Default", "Large", "Small"]
    assert resp.get_json()["pagination"]["totalItems"] == 3


def test_list_variants_search(client, auth_headers, product):
    _create(client, auth_headers, product["id"], variant_name="Crimson")
    resp = client.get(f"{_url(product['id'])}?search=crim", headers=auth_headers)
    assert [v["variant_name"] for v in resp.get_json()["variants"]] == ["Crimson"]


def test_list_variants_of_missing_product(client, auth_headers):
    resp = client.get(_url(999999), headers=auth_headers)
    assert resp.status_code == 404


def test_get_variant(client, auth_headers, product):
    default_id = product["variants"][0]["id"]
    resp = client.get(_url(product["id"], default_id), headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["variant"]["stock"] == 6


def test_get_variant_through_wrong_product(client, auth_headers, product, make_product):
    other = make_product(name="Beanie")
    default_id = product["variants"][0]["id"]
    resp = client.get(_url(other["id"], default_id), headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == (
        f"Variant with id {default_id} (of product {other['id']}) not found"
    )


def test_update_default_variant_stock(client, auth_headers, product):
    default_id = product["variants"][0]["id"]
    resp = client.patch(
        _url(product["id"], default_id),
        json={"stock": 11, "enable_stock_alerts": True, "min_stock_alert": 3},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    variant = resp.get_json()["variant"]
    assert variant["stock"] == 11
    assert variant["enable_stock_alerts"] is True

    resp = client.get(f"{API}/products/{product['id']}", headers=auth_headers)
    assert resp.get_json()["product"]["total_stock"] == 11


def test_update_variant_name(client, auth_headers, product):
    created = _create(client, auth_headers, product["id"], variant_name="Large").get_json()
    resp = client.patch(
        _url(product["id"], created["variant"]["id"]),
        json={"variant_name": "extra large"},
        headers=auth_headers,
    )
    assert resp.get_json()["variant"]["variant_name"] == "Extra large"


def test_delete_default_variant_refused(client, auth_headers, product):
    default_id = product["variants"][0]["id"]
    resp = client.delete(_url(product["id"], default_id), headers=auth_headers)
    assert resp.status_code == 400
    assert resp.get_json() == {"msg": "Cannot delete default variant"}


def test_delete_custom_variant(client, auth_headers, product):
    created = _create(client, auth_headers, product["id"], variant_name="Large", stock=2)
    variant_id = created.get_json()["variant"]["id"]

    resp = client.delete(_url(product["id"], variant_id), headers=auth_headers)
    assert resp.status_code == 204

    resp = client.get(f"{API}/products/{product['id']}", headers=auth_headers)
    body = resp.get_json()["product"]
    assert [v["variant_name"] for v in body["variants"]] == ["Default"]
    # back to the default variant's stock
    assert body["total_stock"] == 6
