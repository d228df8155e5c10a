"""Supplier CRUD."""


class TestSuppliers:

    def test_create_and_list(self, client, headers_a, company_a):
        response = client.post("/api/suppliers", headers=headers_a, json={
            "name": "Ambev Distribuidora", "cnpj": "07.526.557/0001-00",
            "email": "vendas@distribuidora.com.br", "phone": "1133334444",
        })

        assert response.status_code == 201
        assert response.json()["company_id"] == company_a.id

        listed = client.get("/api/suppliers", headers=headers_a).json()
        assert [s["name"] for s in listed] == ["Ambev Distribuidora"]

    def test_name_is_required(self, client, headers_a):
        response = client.post("/api/suppliers", headers=headers_a, json={"cnpj": "1"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "name"

    def test_get_update_delete(self, client, headers_a, supplier_a):
        assert client.get(f"/api/suppliers/{supplier_a.id}", headers=headers_a).status_code == 200

        updated = client.put(f"/api/suppliers/{supplier_a.id}", headers=headers_a, json={"phone": "5130001000"})
        assert updated.status_code == 200
        assert updated.json()["phone"] == "5130001000"
        assert updated.json()["name"] == "Distribuidora Sul"

        assert client.delete(f"/api/suppliers/{supplier_a.id}", headers=headers_a).status_code == 204
        assert client.get(f"/api/suppliers/{supplier_a.id}", headers=headers_a).status_code == 404

    def test_supplier_with_purchases_cannot_be_deleted(self, client, headers_a, supplier_a, product_a):
        client.post("/api/purchases", headers=headers_a, json={
            "supplier_id": supplier_a.id,
            "items": [{"product_id": product_a.id, "quantity": 1, "unit_price": "3.00"}],
        })

        response = client.delete(f"/api/suppliers/{supplier_a.id}", headers=headers_a)
        assert response.status_code == 400

    def test_supplier_with_payables_cannot_be_deleted(self, client, headers_a, supplier_a):
        client.post("/api/accounts-payable", headers=headers_a, json={
            "supplier_id": supplier_a.id, "description": "Boleto", "amount": "10.00", "due_date": "2026-11-01",
        })

        response = client.delete(f"/api/suppliers/{supplier_a.id}", headers=headers_a)
        assert response.status_code == 400

    def test_null_name_is_ignored_on_update(self, client, headers_a, supplier_a):
        response = client.put(f"/api/suppliers/{supplier_a.id}", headers=headers_a, json={"name": None})

        assert response.status_code == 200
        assert response.json()["name"] == "Distribuidora Sul"
