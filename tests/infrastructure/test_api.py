"""HTTP contract tests for the FastAPI layer."""

import pytest
from fastapi.testclient import TestClient

from pim.infrastructure.api.app import create_app
from pim.infrastructure.config import Settings


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(data_dir=tmp_path, log_level="WARNING"))
    return TestClient(app)


@pytest.fixture
def chair(client):
    resp = client.post("/api/items", json={
        "name": "Velvet Accent Chair",
        "vendor": "Four Hands",
        "category": "Furniture",
        "cost": "450.00",
        "price": "895.00",
        "bwdPrice": "675.00",
        "quantity": 10,
    })
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def project(client):
    resp = client.post("/api/projects", json={"name": "Smith Residence", "clientName": "Alice Smith"})
    assert resp.status_code == 201
    return resp.json()


def _stock(client, item_id):
    return client.get(f"/api/items/{item_id}").json()["quantity"]


class TestItems:

    def test_created_item_uses_camel_case_and_decimal_strings(self, chair):
        assert chair["bwdPrice"] == "675.00"
        assert chair["imageUrl"] is None

    def test_invalid_body_is_400_with_field(self, client):
        resp = client.post("/api/items", json={"name": "Lamp", "vendor": "V", "category": "C", "cost": "1.00"})
        assert resp.status_code == 400
        assert resp.json()["field"] == "price"

    def test_domain_validation_is_400(self, client):
        resp = client.post("/api/items", json={
            "name": "Lamp", "vendor": "V", "category": "C", "cost": "1.00", "price": "abc",
        })
        assert resp.status_code == 400
        assert resp.json()["field"] == "price"

    def test_search(self, client, chair):
        assert len(client.get("/api/items", params={"search": "velvet"}).json()) == 1
        assert client.get("/api/items", params={"search": "lamp"}).json() == []

    def test_missing_item_is_404(self, client):
        resp = client.get("/api/items/99")
        assert resp.status_code == 404
        assert "not found" in resp.json()["message"]

    def test_patch(self, client, chair):
        resp = client.patch(f"/api/items/{chair['id']}", json={"quantity": 4})
        assert resp.status_code == 200
        assert resp.json()["quantity"] == 4


class TestProjectItems:

    def test_add_defaults(self, client, chair, project):
        resp = client.post(f"/api/projects/{project['id']}/items", json={"itemId": chair["id"]})

        assert resp.status_code == 201
        body = resp.json()
        assert body["quantity"] == 1
        assert body["status"] == "pulled"
        assert body["projectId"] == project["id"]
        assert _stock(client, chair["id"]) == 9

    def test_add_requires_item_id(self, client, project):
        resp = client.post(f"/api/projects/{project['id']}/items", json={"quantity": 2})
        assert resp.status_code == 400
        assert resp.json()["field"] == "itemId"

    def test_add_rejects_unknown_status(self, client, chair, project):
        resp = client.post(
            f"/api/projects/{project['id']}/items",
            json={"itemId": chair["id"], "status": "lost"},
        )
        assert resp.status_code == 400

    def test_add_to_unknown_project_is_404(self, client, chair):
        resp = client.post("/api/projects/42/items", json={"itemId": chair["id"]})
        assert resp.status_code == 404

    def test_update_and_return(self, client, chair, project):
        line = client.post(
            f"/api/projects/{project['id']}/items",
            json={"itemId": chair["id"], "quantity": 2},
        ).json()
        url = f"/api/projects/{project['id']}/items/{line['id']}"

        resp = client.patch(url, json={"quantity": 5})
        assert resp.status_code == 200
        assert _stock(client, chair["id"]) == 5

        resp = client.patch(url, json={"status": "returned"})
        assert resp.json()["status"] == "returned"
        assert _stock(client, chair["id"]) == 10

    def test_update_missing_line_is_404(self, client, project):
        resp = client.patch(f"/api/projects/{project['id']}/items/77", json={"notes": "x"})
        assert resp.status_code == 404

    def test_update_rejects_item_change(self, client, chair, project):
        line = client.post(
            f"/api/projects/{project['id']}/items", json={"itemId": chair["id"]}
        ).json()
        resp = client.patch(
            f"/api/projects/{project['id']}/items/{line['id']}", json={"itemId": 2}
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "itemId"

    def test_delete_restores_and_is_silent_when_absent(self, client, chair, project):
        line = client.post(
            f"/api/projects/{project['id']}/items",
            json={"itemId": chair["id"], "quantity": 3},
        ).json()
        url = f"/api/projects/{project['id']}/items/{line['id']}"

        assert client.delete(url).status_code == 204
        assert _stock(client, chair["id"]) == 10
        assert client.delete(url).status_code == 204

    def test_project_detail_embeds_items(self, client, chair, project):
        client.post(f"/api/projects/{project['id']}/items", json={"itemId": chair["id"]})
        detail = client.get(f"/api/projects/{project['id']}").json()
        assert detail["clientName"] == "Alice Smith"
        assert detail["items"][0]["item"]["name"] == "Velvet Accent Chair"

    def test_assignments(self, client, chair, project):
        client.post(f"/api/projects/{project['id']}/items", json={"itemId": chair["id"], "quantity": 2})
        rows = client.get(f"/api/items/{chair['id']}/projects").json()
        assert rows[0]["projectName"] == "Smith Residence"
        assert rows[0]["quantity"] == 2


class TestDeleteProject:

    def test_cascade_keeps_stock(self, client, chair, project):
        client.post(f"/api/projects/{project['id']}/items", json={"itemId": chair["id"], "quantity": 4})

        assert client.delete(f"/api/projects/{project['id']}").status_code == 204
        assert client.get(f"/api/projects/{project['id']}").status_code == 404
        assert _stock(client, chair["id"]) == 6

    def test_cascade_with_release(self, client, chair, project):
        client.post(f"/api/projects/{project['id']}/items", json={"itemId": chair["id"], "quantity": 4})

        resp = client.delete(f"/api/projects/{project['id']}", params={"release_stock": "true"})

        assert resp.status_code == 204
        assert _stock(client, chair["id"]) == 10


class TestExpenses:

    def test_record_and_summary(self, client):
        for cost, qty in (("45.00", 3), ("150.00", 2)):
            resp = client.post("/api/expenses", json={
                "description": "Purchase",
                "vendor": "Global Views",
                "category": "Accessories",
                "unitCost": cost,
                "quantity": qty,
                "purchaseDate": "2026-02-01T00:00:00Z",
            })
            assert resp.status_code == 201

        summary = client.get("/api/expenses/summary").json()
        assert summary == {"totalSpend": "435.00", "expenseCount": 2, "avgUnitCost": "97.50"}

    def test_line_total_above_maximum_is_400(self, client):
        resp = client.post("/api/expenses", json={
            "description": "Chandeliers",
            "vendor": "Arteriors",
            "category": "Lighting",
            "unitCost": "60000000.00",
            "quantity": 1000,
            "purchaseDate": "2026-02-01T00:00:00Z",
        })

        assert resp.status_code == 400
        assert resp.json()["field"] == "totalCost"
        assert client.get("/api/expenses").json() == []

    def test_unit_cost_above_maximum_is_400(self, client):
        resp = client.post("/api/expenses", json={
            "description": "Chandeliers",
            "vendor": "Arteriors",
            "category": "Lighting",
            "unitCost": "99999999999999999999999999.99",
            "quantity": 1000,
            "purchaseDate": "2026-02-01T00:00:00Z",
        })

        assert resp.status_code == 400
        assert resp.json()["field"] == "unitCost"

    def test_delete_missing_is_404(self, client):
        assert client.delete("/api/expenses/3").status_code == 404
