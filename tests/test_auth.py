"""Login, registration and token resolution."""

from datetime import timedelta

from barmanager.core.auth.actors import actor_from_company
from barmanager.core.auth.service import AuthService
from conftest import PASSWORD, auth_headers


class TestLogin:

    def test_company_login_returns_token_and_profile(self, client, company_a):
        response = client.post("/api/auth/login", json={"email": company_a.email, "password": PASSWORD})

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 24 * 60 * 60
        assert data["user"]["company_id"] == company_a.id
        assert data["user"]["actor_type"] == "company_admin"
        assert "manage_company" in data["user"]["capabilities"]

    def test_login_is_case_insensitive_on_email(self, client, company_a):
        response = client.post("/api/auth/login", json={"email": "ZE@BarDoZe.com.br", "password": PASSWORD})
        assert response.status_code == 200

    def test_wrong_password(self, client, company_a):
        response = client.post("/api/auth/login", json={"email": company_a.email, "password": "errada123"})

        assert response.status_code == 401
        assert response.json()["error_code"] == "UNAUTHORIZED"

    def test_unknown_email(self, client, db_session):
        response = client.post("/api/auth/login", json={"email": "nadie@nada.com", "password": PASSWORD})
        assert response.status_code == 401

    def test_inactive_company_is_forbidden(self, client, db_session, company_a):
        company_a.is_active = False
        db_session.commit()

        response = client.post("/api/auth/login", json={"email": "ze@bardoze.com.br", "password": PASSWORD})
        assert response.status_code == 403

    def test_sub_user_login(self, client, sub_user_a, company_a):
        response = client.post("/api/auth/login", json={"email": sub_user_a.email, "password": PASSWORD})

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["actor_type"] == "company_user"
        assert user["company_id"] == company_a.id
        assert user["company_name"] == "Bar do Zé"
        assert user["capabilities"] == ["tenant_data"]

    def test_inactive_sub_user_is_forbidden(self, client, db_session, sub_user_a):
        sub_user_a.is_active = False
        db_session.commit()

        response = client.post("/api/auth/login", json={"email": "garcom@bardoze.com.br", "password": PASSWORD})
        assert response.status_code == 403

    def test_system_admin_login(self, client, system_admin):
        response = client.post("/api/auth/login", json={"email": system_admin.email, "password": PASSWORD})

        assert response.status_code == 200
        assert "manage_tenants" in response.json()["user"]["capabilities"]

    def test_oauth2_form_login(self, client, company_a):
        response = client.post("/api/auth/token", data={"username": company_a.email, "password": PASSWORD})

        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_invalid_body_returns_structured_400(self, client, db_session):
        response = client.post("/api/auth/login", json={"email": "no-es-email", "password": "1"})

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "VALIDATION_ERROR"
        fields = {error["field"] for error in data["errors"]}
        assert {"email", "password"} <= fields


class TestRegister:

    def _payload(self, **overrides):
        payload = {
            "name": "Bar Novo",
            "cnpj": "44.444.444/0001-44",
            "email": "contato@barnovo.com.br",
            "phone": "11999990000",
            "password": "senha123",
            "confirm_password": "senha123",
        }
        payload.update(overrides)
        return payload

    def test_register_creates_company_and_token(self, client, db_session):
        response = client.post("/api/auth/register", json=self._payload())

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["actor_type"] == "company_admin"

        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == 200
        assert me.json()["cnpj"] == "44.444.444/0001-44"

    def test_password_mismatch(self, client, db_session):
        response = client.post("/api/auth/register", json=self._payload(confirm_password="outra123"))

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_duplicate_email(self, client, company_a):
        response = client.post("/api/auth/register", json=self._payload(email=company_a.email))

        assert response.status_code == 400
        assert "Email" in response.json()["message"]

    def test_duplicate_cnpj(self, client, company_a):
        response = client.post("/api/auth/register", json=self._payload(cnpj=company_a.cnpj))
        assert response.status_code == 400

    def test_email_of_sub_user_is_taken(self, client, sub_user_a):
        response = client.post("/api/auth/register", json=self._payload(email=sub_user_a.email))
        assert response.status_code == 400


class TestTokenResolution:

    def test_missing_token(self, client, db_session):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_garbage_token(self, client, db_session):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer no-es-un-jwt"})
        assert response.status_code == 401

    def test_expired_token(self, client, company_a):
        token = AuthService.create_access_token(
            actor_from_company(company_a), expires_delta=timedelta(minutes=-1)
        )
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_token_of_deactivated_company_is_rejected(self, client, db_session, company_a, headers_a):
        company_a.is_active = False
        db_session.commit()

        response = client.get("/api/products", headers=headers_a)
        assert response.status_code == 403

    def test_sub_user_token_of_deactivated_company(self, client, db_session, company_a, sub_user_headers):
        company_a.is_active = False
        db_session.commit()

        response = client.get("/api/products", headers=sub_user_headers)
        assert response.status_code == 403

    def test_deleted_principal(self, client, db_session, company_a):
        headers = auth_headers(actor_from_company(company_a))
        db_session.delete(company_a)
        db_session.commit()

        response = client.get("/api/auth/me", headers=headers)
        assert response.status_code == 401

    def test_logout(self, client, headers_a):
        response = client.post("/api/auth/logout", headers=headers_a)

        assert response.status_code == 200
        assert response.json()["success"] is True

    def test_health_is_public(self, client):
        assert client.get("/health").json()["status"] == "healthy"
