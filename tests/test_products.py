"""Product catalogue: CRUD, per-tenant codes, stock movement history."""

from decimal import Decimal

from conftest import current_quantity


class TestProductCrud:

    def test_create_product(self, client, headers_a, company_a):
        response = client.post("/api/products", headers=headers_a, json={
            "code": " CERV-600 ",
            "name": "Cerveja 600ml",
            "category": "bebidas",
            "price": "12.90",
            "quantity": 24,
            "min_stock": 6,
        })

        assert response.status_code == 201
        data = response.json()
        assert data["code"] == "CERV-600"
        assert data["company_id"] == company_a.id
        assert data["category"] == "bebidas"
        assert Decimal(data["price"]) == Decimal("12.90")
        assert data["quantity"] == 24
        assert data["is_low_stock"] is False

    def test_invalid_category(self, client, headers_a):
        response = client.post("/api/products", headers=headers_a, json={
            "code": "X", "name": "X", "category": "eletronicos", "price": "1.00",
        })

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "category"

    def test_duplicate_code_in_same_company(self, client, headers_a, product_a):
        response = client.post("/api/products", headers=headers_a, json={
            "code": product_a.code, "name": "Outro", "category": "comidas", "price": "5.00",
        })
        assert response.status_code == 400

    def test_update_code_is_stripped_before_uniqueness_check(self, client, db_session, headers_a, company_a,
                                                             product_a, make_product):
        water = make_product(company_a, code="AGUA-01", name="Água Mineral")

        response = client.put(f"/api/products/{water.id}", headers=headers_a, json={"code": " CERV-01 "})

        assert response.status_code == 400
        db_session.expire_all()
        assert db_session.get(type(water), water.id).code == "AGUA-01"

    def test_update_rejects_blank_name(self, client, headers_a, product_a):
        response = client.put(f"/api/products/{product_a.id}", headers=headers_a, json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert response.json()["errors"][0]["field"] == "name"

    def test_update_strips_code(self, client, headers_a, product_a):
        response = client.put(f"/api/products/{product_a.id}", headers=headers_a, json={"code": " CERV-02 "})

        assert response.status_code == 200
        assert response.json()["code"] == "CERV-02"
        assert response.status_code == 400

    def test_same_code_in_other_company_is_allowed(self, client, headers_b, product_a):
        response = client.post("/api/products", headers=headers_b, json={
            "code": product_a.code, "name": "Cerveja", "category": "bebidas", "price": "7.00",
        })
        assert response.status_code == 201

    def test_list_and_get(self, client, headers_a, product_a):
        listed = client.get("/api/products", headers=headers_a).json()
        assert [p["id"] for p in listed] == [product_a.id]

        detail = client.get(f"/api/products/{product_a.id}", headers=headers_a)
        assert detail.status_code == 200
        assert detail.json()["name"] == "Cerveja Lata"

    def test_missing_product(self, client, headers_a):
        response = client.get("/api/products/9999", headers=headers_a)

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_update_product(self, client, headers_a, product_a):
        response = client.put(f"/api/products/{product_a.id}", headers=headers_a, json={
            "name": "Cerveja Lata 350ml", "price": "7.00", "min_stock": 12,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Cerveja Lata 350ml"
        assert data["min_stock"] == 12
        assert data["is_low_stock"] is True

    def test_update_cannot_touch_quantity(self, client, db_session, headers_a, product_a):
        response = client.put(f"/api/products/{product_a.id}", headers=headers_a, json={"quantity": 999})

        assert response.status_code == 400
        assert current_quantity(db_session, product_a) == 10

    def test_delete_product(self, client, headers_a, product_a):
        response = client.delete(f"/api/products/{product_a.id}", headers=headers_a)

        assert response.status_code == 204
        assert client.get(f"/api/products/{product_a.id}", headers=headers_a).status_code == 404

    def test_delete_product_with_sales_is_blocked(self, client, headers_a, product_a):
        client.post("/api/sales", headers=headers_a, json={
            "items": [{"product_id": product_a.id, "quantity": 1, "unit_price": "6.50"}],
        })

        response = client.delete(f"/api/products/{product_a.id}", headers=headers_a)
        assert response.status_code == 400

    def test_sub_user_can_manage_products(self, client, sub_user_headers):
        response = client.post("/api/products", headers=sub_user_headers, json={
            "code": "PORC-01", "name": "Porção de fritas", "category": "comidas", "price": "25.00",
        })
        assert response.status_code == 201


class TestStockMovements:

    def test_movements_follow_sales_and_deliveries(self, client, headers_a, product_a, supplier_a):
        client.post("/api/sales", headers=headers_a, json={
            "items": [{"product_id": product_a.id, "quantity": 3, "unit_price": "6.50"}],
        })
        purchase = client.post("/api/purchases", headers=headers_a, json={
            "supplier_id": supplier_a.id,
            "items": [{"product_id": product_a.id, "quantity": 12, "unit_price": "3.00"}],
        }).json()
        client.patch(f"/api/purchases/{purchase['id']}/status", headers=headers_a, json={"status": "delivered"})

        response = client.get(f"/api/products/{product_a.id}/movements", headers=headers_a)

        assert response.status_code == 200
        data = response.json()
        assert data["current_quantity"] == 19
        by_type = {m["movement_type"]: m for m in data["movements"]}
        assert by_type["sale"]["quantity_change"] == -3
        assert (by_type["sale"]["quantity_before"], by_type["sale"]["quantity_after"]) == (10, 7)
        assert by_type["purchase_delivery"]["quantity_change"] == 12
        assert by_type["purchase_delivery"]["reference_id"] == purchase["id"]

    def test_new_product_has_no_movements(self, client, headers_a, product_a):
        data = client.get(f"/api/products/{product_a.id}/movements", headers=headers_a).json()
        assert data["movements"] == []
