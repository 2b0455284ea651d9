"""
Integration Tests — Orders, Plans and Reconciliation Endpoints

Tests:
- POST/GET/DELETE /api/v1/production-orders
- POST/GET/PUT/DELETE /api/v1/production-plans
- GET /api/v1/production-plans/{id}/reconciliation
"""

from fastapi.testclient import TestClient


def _plan_body(style_id, order_id=None, layers=50):
    return {
        "plan_name": "Autumn run",
        "style_id": style_id,
        "linked_order_id": order_id,
        "layouts": [
            {
                "layout_name": "A",
                "ratios": [{"size": "100", "ratio": 1}, {"size": "110", "ratio": 1}],
                "tasks": [{"color": "red", "planned_layers": layers}],
            }
        ],
    }


class TestProductionOrders:
    def test_create_and_fetch_order(self, client: TestClient):
        resp = client.post(
            "/api/v1/production-orders",
            json={
                "style_number": "ST-7",
                "items": [
                    {"color": "red", "size": "100", "quantity": 50},
                    {"color": "red", "size": "110", "quantity": 50},
                ],
            },
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["order_number"].startswith("PO-")
        assert data["order_number"].endswith("-ST-7-01")
        assert data["style_number"] == "ST-7"
        assert len(data["items"]) == 2

        demand = client.get(f"/api/v1/production-orders/{data['id']}/demand").json()
        assert demand["demand"] == {"red": {"100": 50, "110": 50}}
        assert demand["total_required"] == 100

    def test_zero_quantity_rejected(self, client: TestClient):
        resp = client.post(
            "/api/v1/production-orders",
            json={"style_number": "ST-7", "items": [{"color": "red", "size": "M", "quantity": 0}]},
        )
        assert resp.status_code == 422

    def test_missing_order_is_404(self, client: TestClient):
        resp = client.get("/api/v1/production-orders/999")
        assert resp.status_code == 404
        body = resp.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    def test_delete_linked_order_returns_409(self, client: TestClient, order, plan):
        resp = client.delete(f"/api/v1/production-orders/{order.id}")
        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == "CONFLICT"

    def test_unplanned_orders(self, client: TestClient, order):
        resp = client.get("/api/v1/production-orders/unplanned")
        assert resp.status_code == 200
        assert [o["id"] for o in resp.json()] == [order.id]


class TestProductionPlans:
    def test_create_plan_and_reconcile_exact(self, client: TestClient, style, order):
        resp = client.post("/api/v1/production-plans", json=_plan_body(style.id, order.id))
        assert resp.status_code == 201
        plan_id = resp.json()["id"]

        recon = client.get(f"/api/v1/production-plans/{plan_id}/reconciliation")
        assert recon.status_code == 200
        data = recon.json()
        assert [c["verdict"] for c in data["cells"]] == ["EXACT", "EXACT"]
        assert data["is_fulfilled"] is True
        assert data["order_id"] == order.id

    def test_deficit_at_thirty_layers(self, client: TestClient, style, order):
        plan_id = client.post("/api/v1/production-plans", json=_plan_body(style.id, order.id, 30)).json()["id"]
        data = client.get(f"/api/v1/production-plans/{plan_id}/reconciliation?basis=planned").json()
        assert [c["verdict"] for c in data["cells"]] == ["DEFICIT", "DEFICIT"]
        assert [c["supplied"] for c in data["cells"]] == [30, 30]

    def test_invalid_basis(self, client: TestClient, plan):
        resp = client.get(f"/api/v1/production-plans/{plan.id}/reconciliation?basis=forecast")
        assert resp.status_code == 422

    def test_duplicate_sizes_rejected(self, client: TestClient, style):
        body = _plan_body(style.id)
        body["layouts"][0]["ratios"] = [{"size": "M", "ratio": 1}, {"size": "M", "ratio": 1}]
        resp = client.post("/api/v1/production-plans", json=body)
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_plan_by_order(self, client: TestClient, order, plan):
        resp = client.get(f"/api/v1/production-plans/by-order/{order.id}")
        assert resp.status_code == 200
        assert resp.json()["id"] == plan.id

    def test_search_plans(self, client: TestClient, plan):
        assert [p["id"] for p in client.get("/api/v1/production-plans?q=ST-1001").json()] == [plan.id]
        assert client.get("/api/v1/production-plans?q=nothing-like-this").json() == []

    def test_replace_layouts(self, client: TestClient, style, plan):
        body = _plan_body(style.id, layers=20)
        resp = client.put(
            f"/api/v1/production-plans/{plan.id}",
            json={"plan_name": "Reworked", "layouts": body["layouts"]},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["plan_name"] == "Reworked"
        assert data["layouts"][0]["tasks"][0]["planned_layers"] == 20

    def test_delete_plan_frees_order(self, client: TestClient, order, plan):
        assert client.delete(f"/api/v1/production-plans/{plan.id}").status_code == 204
        assert client.get(f"/api/v1/production-plans/{plan.id}").status_code == 404
        assert client.get(f"/api/v1/production-orders/{order.id}").status_code == 200

    def test_preview(self, client: TestClient, order):
        body = _plan_body(0, layers=30)
        resp = client.post(
            "/api/v1/production-plans/reconciliation/preview",
            json={"order_id": order.id, "layouts": body["layouts"]},
        )
        assert resp.status_code == 200
        assert resp.json()["verdict_counts"]["DEFICIT"] == 2

    def test_preview_with_duplicate_sizes_is_422(self, client: TestClient, order):
        body = _plan_body(0)
        body["layouts"][0]["ratios"].append({"size": "100", "ratio": 1})
        resp = client.post(
            "/api/v1/production-plans/reconciliation/preview",
            json={"order_id": order.id, "layouts": body["layouts"]},
        )
        assert resp.status_code == 422
        assert resp.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_supply(self, client: TestClient, plan):
        data = client.get(f"/api/v1/production-plans/{plan.id}/supply").json()
        assert data["planned"] == {"red": {"100": 50, "110": 50}}
        assert data["total_actual"] == 0
