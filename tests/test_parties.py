"""Tests for customer and supplier endpoints."""
import pytest

API = "/api/v1"


def _person(**overrides):
    body = {
        "email": "ana@acme.com",
        "first_name": "ana",
        "last_name": "garcía",
        "company": "acme",
        "phone": "+54 9 223 854-7123",
    }
    body.update(overrides)
    return body


@pytest.mark.parametrize("resource,key", [("customers", "customer"), ("suppliers", "supplier")])
def test_create_normalizes_fields(client, auth_headers, resource, key):
    resp = client.post(
        f"{API}/{resource}",
        json=_person(email="  Ana@ACME.com ", first_name="aNA"),
        headers=auth_headers,
    )
    assert resp.status_code == 201
    party = resp.get_json()[key]
    assert party["email"] == "ana@acme.com"
    assert party["first_name"] == "Ana"
    assert party["last_name"] == "García"
    assert party["company"] == "Acme"
    assert party["phone"] == "+5492238547123"


@pytest.mark.parametrize("resource", ["customers", "suppliers"])
def test_duplicate_email_conflicts(client, auth_headers, resource):
    assert client.post(f"{API}/{resource}", json=_person(), headers=auth_headers).status_code == 201
    resp = client.post(
        f"{API}/{resource}", json=_person(email="ANA@acme.com"), headers=auth_headers
    )
    assert resp.status_code == 409
    assert resp.get_json() == {"msg": "email is already in use, please use another one"}


def test_same_email_for_different_users(client, auth_headers, other_headers):
    assert client.post(f"{API}/customers", json=_person(), headers=auth_headers).status_code == 201
    assert client.post(f"{API}/customers", json=_person(), headers=other_headers).status_code == 201


def test_invalid_email_and_phone(client, auth_headers):
    resp = client.post(
        f"{API}/customers",
        json=_person(email="not-an-email", phone="12345"),
        headers=auth_headers,
    )
    assert resp.status_code == 400
    msg = resp.get_json()["msg"]
    assert "Must be a valid email" in msg
    assert "international format" in msg


def test_get_update_delete_customer(client, auth_headers):
    created = client.post(f"{API}/customers", json=_person(), headers=auth_headers)
    customer_id = created.get_json()["customer"]["id"]
    url = f"{API}/customers/{customer_id}"

    resp = client.patch(url, json={"last_name": "LÓPEZ"}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.get_json()["customer"]["last_name"] == "López"
    assert resp.get_json()["customer"]["first_name"] == "Ana"

    assert client.get(url, headers=auth_headers).status_code == 200
    assert client.delete(url, headers=auth_headers).status_code == 204

    resp = client.get(url, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == f"Customer with id {customer_id} not found"


def test_foreign_supplier_is_not_found(client, auth_headers, other_headers):
    created = client.post(f"{API}/suppliers", json=_person(), headers=other_headers)
    supplier_id = created.get_json()["supplier"]["id"]
    resp = client.get(f"{API}/suppliers/{supplier_id}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.get_json()["msg"] == f"Supplier with id {supplier_id} not found"


def test_list_search_and_sort(client, auth_headers):
    client.post(
        f"{API}/customers",
        json=_person(email="zoe@initech.com", first_name="zoe", last_name="adams", company="initech"),
        headers=auth_headers,
    )
    client.post(
        f"{API}/customers",
        json=_person(email="bob@acme.com", first_name="bob", last_name="young"),
        headers=auth_headers,
    )

    resp = client.get(f"{API}/customers?sortBy=last_name", headers=auth_headers)
    body = resp.get_json()
    assert [c["last_name"] for c in body["customers"]] == ["Adams", "Young"]
    assert body["pagination"]["totalItems"] == 2

    resp = client.get(f"{API}/customers?search=acme", headers=auth_headers)
    assert [c["first_name"] for c in resp.get_json()["customers"]] == ["Bob"]
