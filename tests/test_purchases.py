"""Purchases: pending registration and the delivery transition."""

from decimal import Decimal

from barmanager.shared.database.models import Purchase, StockMovement
from conftest import current_quantity


def purchase_payload(supplier_id, *items, **extra):
    payload = {
        "supplier_id": supplier_id,
        "items": [
            {"product_id": product_id, "quantity": quantity, "unit_price": unit_price}
            for product_id, quantity, unit_price in items
        ],
    }
    payload.update(extra)
    return payload


class TestCreatePurchase:

    def test_purchase_starts_pending_without_stock_change(self, client, db_session, headers_a, product_a, supplier_a):
        response = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_a.id, (product_a.id, 24, "3.10"),
        ))

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["supplier_name"] == "Distribuidora Sul"
        assert data["delivered_at"] is None
        assert Decimal(data["total"]) == Decimal("74.40")
        assert current_quantity(db_session, product_a) == 10

    def test_total_must_match_items(self, client, headers_a, product_a, supplier_a):
        response = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_a.id, (product_a.id, 2, "3.00"), total="10.00",
        ))
        assert response.status_code == 400

    def test_supplier_of_other_company(self, client, db_session, headers_a, product_a, supplier_b):
        response = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_b.id, (product_a.id, 1, "3.00"),
        ))

        assert response.status_code == 404
        assert db_session.query(Purchase).count() == 0

    def test_product_of_other_company(self, client, db_session, headers_a, supplier_a, product_b):
        response = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_a.id, (product_b.id, 1, "3.00"),
        ))

        assert response.status_code == 404
        assert db_session.query(Purchase).count() == 0

    def test_list_and_detail(self, client, headers_a, product_a, supplier_a):
        created = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_a.id, (product_a.id, 1, "3.00"), (product_a.id, 2, "3.00"),
        )).json()

        listed = client.get("/api/purchases", headers=headers_a).json()
        assert [p["id"] for p in listed] == [created["id"]]
        assert listed[0]["item_count"] == 2

        detail = client.get(f"/api/purchases/{created['id']}", headers=headers_a).json()
        assert len(detail["items"]) == 2


class TestPurchaseStatus:

    def _purchase(self, client, headers, supplier, product, quantity=12):
        return client.post("/api/purchases", headers=headers, json=purchase_payload(
            supplier.id, (product.id, quantity, "3.00"),
        )).json()

    def test_delivery_increments_stock(self, client, db_session, headers_a, product_a, supplier_a):
        purchase = self._purchase(client, headers_a, supplier_a, product_a)

        response = client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "delivered"
        assert data["delivered_at"] is not None
        assert current_quantity(db_session, product_a) == 22

    def test_second_delivery_is_rejected(self, client, db_session, headers_a, product_a, supplier_a):
        purchase = self._purchase(client, headers_a, supplier_a, product_a)
        client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        response = client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        assert response.status_code == 400
        assert current_quantity(db_session, product_a) == 22
        movements = db_session.query(StockMovement).filter_by(movement_type="purchase_delivery").count()
        assert movements == 1

    def test_cancel_leaves_stock_untouched(self, client, db_session, headers_a, product_a, supplier_a):
        purchase = self._purchase(client, headers_a, supplier_a, product_a)

        response = client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "cancelled"})

        assert response.status_code == 200
        assert current_quantity(db_session, product_a) == 10

    def test_cancelled_cannot_be_delivered(self, client, db_session, headers_a, product_a, supplier_a):
        purchase = self._purchase(client, headers_a, supplier_a, product_a)
        client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "cancelled"})

        response = client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        assert response.status_code == 400
        assert current_quantity(db_session, product_a) == 10

    def test_back_to_pending_is_rejected(self, client, headers_a, product_a, supplier_a):
        purchase = self._purchase(client, headers_a, supplier_a, product_a)

        response = client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "pending"})
        assert response.status_code == 400

    def test_delivery_of_multiple_lines(self, client, db_session, headers_a, company_a, supplier_a, make_product):
        beer = make_product(company_a, code="B1", quantity=0)
        water = make_product(company_a, code="A1", name="Água", quantity=3)
        purchase = client.post("/api/purchases", headers=headers_a, json=purchase_payload(
            supplier_a.id, (beer.id, 6, "3.00"), (water.id, 12, "1.00"), (beer.id, 6, "3.00"),
        )).json()

        client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        assert current_quantity(db_session, beer) == 12
        assert current_quantity(db_session, water) == 15

    def test_missing_purchase(self, client, headers_a):
        response = client.patch("/api/purchases/777/status", headers=headers_a, json={"status": "delivered"})
        assert response.status_code == 404
