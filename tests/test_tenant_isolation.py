"""
Multi-tenant isolation

Company A holds a valid id of each of company B's rows and tries to read
or mutate it. Every attempt must look like the row does not exist (404)
and company B's data must stay untouched.
"""

from conftest import current_quantity


class TestProductIsolation:

    def test_list_only_own_products(self, client, headers_a, product_a, product_b):
        listed = client.get("/api/products", headers=headers_a).json()
        assert [p["id"] for p in listed] == [product_a.id]

    def test_foreign_product_read_update_delete(self, client, db_session, headers_a, product_b):
        assert client.get(f"/api/products/{product_b.id}", headers=headers_a).status_code == 404
        assert client.put(f"/api/products/{product_b.id}", headers=headers_a, json={"name": "X"}).status_code == 404
        assert client.delete(f"/api/products/{product_b.id}", headers=headers_a).status_code == 404
        assert client.get(f"/api/products/{product_b.id}/movements", headers=headers_a).status_code == 404

        db_session.expire_all()
        assert db_session.get(type(product_b), product_b.id).name == "Refrigerante"

    def test_cannot_sell_foreign_product(self, client, db_session, headers_a, product_b):
        response = client.post("/api/sales", headers=headers_a, json={
            "items": [{"product_id": product_b.id, "quantity": 1, "unit_price": "1.00"}],
        })

        assert response.status_code == 404
        assert current_quantity(db_session, product_b) == 10


class TestSalesIsolation:

    def test_foreign_sale(self, client, headers_a, headers_b, product_b):
        sale_b = client.post("/api/sales", headers=headers_b, json={
            "items": [{"product_id": product_b.id, "quantity": 1, "unit_price": "5.00"}],
        }).json()

        assert client.get("/api/sales", headers=headers_a).json() == []
        assert client.get(f"/api/sales/{sale_b['id']}", headers=headers_a).status_code == 404

        response = client.patch(f"/api/sales/{sale_b['id']}/status", headers=headers_a, json={"status": "cancelled"})
        assert response.status_code == 404
        assert client.get(f"/api/sales/{sale_b['id']}", headers=headers_b).json()["status"] == "pending"


class TestPurchaseIsolation:

    def test_cannot_deliver_foreign_purchase(self, client, db_session, headers_a, headers_b, product_b, supplier_b):
        purchase_b = client.post("/api/purchases", headers=headers_b, json={
            "supplier_id": supplier_b.id,
            "items": [{"product_id": product_b.id, "quantity": 5, "unit_price": "2.00"}],
        }).json()

        response = client.patch(f"/api/purchases/{purchase_b['id']}/status", headers=headers_a,
                                json={"status": "delivered"})

        assert response.status_code == 404
        assert current_quantity(db_session, product_b) == 10
        assert client.get("/api/purchases", headers=headers_a).json() == []
        assert client.get(f"/api/purchases/{purchase_b['id']}", headers=headers_a).status_code == 404


class TestSupplierAndFinancialIsolation:

    def test_foreign_supplier(self, client, headers_a, supplier_a, supplier_b):
        assert [s["id"] for s in client.get("/api/suppliers", headers=headers_a).json()] == [supplier_a.id]
        assert client.get(f"/api/suppliers/{supplier_b.id}", headers=headers_a).status_code == 404
        assert client.put(f"/api/suppliers/{supplier_b.id}", headers=headers_a, json={"name": "X"}).status_code == 404
        assert client.delete(f"/api/suppliers/{supplier_b.id}", headers=headers_a).status_code == 404

    def test_foreign_accounts(self, client, headers_a, headers_b):
        receivable = client.post("/api/accounts-receivable", headers=headers_b, json={
            "description": "B", "amount": "10.00", "due_date": "2026-11-01",
        }).json()
        payable = client.post("/api/accounts-payable", headers=headers_b, json={
            "description": "B", "amount": "10.00", "due_date": "2026-11-01",
        }).json()

        assert client.get("/api/accounts-receivable", headers=headers_a).json() == []
        assert client.get("/api/accounts-payable", headers=headers_a).json() == []
        assert client.patch(f"/api/accounts-receivable/{receivable['id']}/status", headers=headers_a,
                            json={"status": "paid"}).status_code == 404
        assert client.patch(f"/api/accounts-payable/{payable['id']}/status", headers=headers_a,
                            json={"status": "paid"}).status_code == 404


class TestSubUserScope:

    def test_sub_user_sees_own_company_data(self, client, sub_user_headers, product_a, product_b):
        listed = client.get("/api/products", headers=sub_user_headers).json()
        assert [p["id"] for p in listed] == [product_a.id]
