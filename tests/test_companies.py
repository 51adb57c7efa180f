"""Tests for /companies endpoints and company code generation."""

from __future__ import annotations

import pytest

from biztime.services.company_service import make_company_code


class TestMakeCompanyCode:
    def test_spaces_become_hyphens(self):
        assert make_company_code("Apple Inc") == "apple-inc"

    def test_punctuation_runs_collapse(self):
        assert make_company_code("  Foo & Bar!! Co. ") == "foo-bar-co"

    def test_already_a_slug(self):
        assert make_company_code("ibm") == "ibm"

    def test_nothing_alphanumeric(self):
        assert make_company_code("!!!") == ""


def test_list_companies_sorted_by_name(client):
    for name in ("Zebra Labs", "Acme", "Microsoft"):
        client.post("/companies", json={"name": name, "description": ""})

    response = client.get("/companies")

    assert response.status_code == 200
    assert response.json() == {
        "companies": [
            {"code": "acme", "name": "Acme"},
            {"code": "microsoft", "name": "Microsoft"},
            {"code": "zebra-labs", "name": "Zebra Labs"},
        ]
    }


def test_list_companies_empty(client):
    response = client.get("/companies")

    assert response.status_code == 200
    assert response.json() == {"companies": []}


def test_get_company_with_invoices_and_industries(client, seeded):
    response = client.get("/companies/apple")

    assert response.status_code == 200
    assert response.json() == {
        "company": {
            "code": "apple",
            "name": "Apple Computer",
            "description": "Maker of OSX.",
            "invoices": [1, 2],
        },
        "industries": [{"industry_code": "acct"}, {"industry_code": "tech"}],
    }


def test_get_company_invoice_ids_match_comp_code(client, seeded):
    response = client.get("/companies/ibm")

    assert response.json()["company"]["invoices"] == [3]


def test_get_company_without_invoices(client):
    client.post("/companies", json={"name": "Empty Co"})

    body = client.get("/companies/empty-co").json()

    assert body["company"]["invoices"] == []
    assert body["company"]["description"] is None
    assert body["industries"] == []


def test_create_company_slugifies_name(client):
    response = client.post(
        "/companies", json={"name": "Apple Inc", "description": "Phones"}
    )

    assert response.status_code == 201
    assert response.json() == {
        "company": {"code": "apple-inc", "name": "Apple Inc", "description": "Phones"}
    }


def test_create_company_with_colliding_code_fails(client):
    first = client.post("/companies", json={"name": "Apple Inc"})
    second = client.post("/companies", json={"name": "apple inc."})

    assert first.status_code == 201
    assert second.status_code == 500
    assert second.json()["error"]["status"] == 500


def test_create_company_name_without_letters_gets_empty_code(client):
    response = client.post("/companies", json={"name": "!!!"})

    assert response.status_code == 201
    assert response.json()["company"]["code"] == ""


def test_update_company(client, seeded):
    response = client.put(
        "/companies/apple", json={"name": "Apple", "description": "Phones now."}
    )

    assert response.status_code == 200
    assert response.json() == {
        "company": {"code": "apple", "name": "Apple", "description": "Phones now."}
    }
    assert client.get("/companies/apple").json()["company"]["name"] == "Apple"


def test_delete_company(client, seeded):
    response = client.delete("/companies/ibm")

    assert response.status_code == 200
    assert response.json() == {"status": "deleted"}
    assert client.get("/companies/ibm").status_code == 404


def test_delete_company_cascades_to_invoices(client, seeded):
    client.delete("/companies/ibm")

    invoices = client.get("/invoices").json()["invoices"]
    assert [inv["comp_code"] for inv in invoices] == ["apple", "apple"]


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("get", {}),
        ("put", {"json": {"name": "Ghost", "description": "boo"}}),
        ("delete", {}),
    ],
)
def test_unknown_company_is_not_found(client, seeded, method, kwargs):
    response = getattr(client, method)("/companies/nope", **kwargs)

    assert response.status_code == 404
    assert response.json() == {
        "error": {"message": "No such company: nope", "status": 404},
        "message": "No such company: nope",
    }
