"""
Pytest fixtures for the BarManager API tests.

In-memory SQLite shared through a StaticPool, the get_db dependency
overridden, and two tenants plus a sub-user and a system administrator.
"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from barmanager.main import app
from barmanager.config.database import get_db
from barmanager.core.auth.actors import actor_from_company, actor_from_company_user
from barmanager.core.auth.service import AuthService
from barmanager.shared.database.models import Base, Company, CompanyUser, Product, Supplier

PASSWORD = "senha123"
# bcrypt is slow; one hash shared by every test account
PASSWORD_HASH = AuthService.get_password_hash(PASSWORD)

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope='function')
def db_session():
    """Fresh schema for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope='function')
def client(db_session):
    """Test client bound to the test database."""
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(actor) -> dict:
    return {"Authorization": f"Bearer {AuthService.create_access_token(actor)}"}


def _company(db_session, **kwargs) -> Company:
    company = Company(password_hash=PASSWORD_HASH, is_active=True, **kwargs)
    db_session.add(company)
    db_session.commit()
    return company


@pytest.fixture(scope='function')
def company_a(db_session):
    """Tenant A."""
    return _company(
        db_session, name="Bar do Zé", cnpj="11.111.111/0001-11",
        email="ze@bardoze.com.br", user_type="company_admin"
    )


@pytest.fixture(scope='function')
def company_b(db_session):
    """Tenant B."""
    return _company(
        db_session, name="Boteco da Ana", cnpj="22.222.222/0001-22",
        email="ana@botecodaana.com.br", user_type="company_admin"
    )


@pytest.fixture(scope='function')
def system_admin(db_session):
    return _company(
        db_session, name="SuperAdmin", cnpj="00.000.000/0001-00",
        email="admin@barmanager.com", user_type="system_admin"
    )


@pytest.fixture(scope='function')
def sub_user_a(db_session, company_a):
    """Sub-user of tenant A."""
    user = CompanyUser(
        company_id=company_a.id, name="Garçom", email="garcom@bardoze.com.br",
        password_hash=PASSWORD_HASH, user_type="company_user", is_active=True
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture(scope='function')
def headers_a(company_a):
    return auth_headers(actor_from_company(company_a))


@pytest.fixture(scope='function')
def headers_b(company_b):
    return auth_headers(actor_from_company(company_b))


@pytest.fixture(scope='function')
def sub_user_headers(sub_user_a):
    return auth_headers(actor_from_company_user(sub_user_a))


@pytest.fixture(scope='function')
def admin_headers(system_admin):
    return auth_headers(actor_from_company(system_admin))


@pytest.fixture(scope='function')
def make_product(db_session):
    """Factory: make_product(company, code=..., quantity=..., min_stock=...)."""
    def _make(company, code="CERV-01", name="Cerveja Lata", category="bebidas",
              price="6.50", quantity=10, min_stock=5):
        product = Product(
            company_id=company.id, code=code, name=name, category=category,
            price=Decimal(price), quantity=quantity, min_stock=min_stock
        )
        db_session.add(product)
        db_session.commit()
        return product
    return _make


@pytest.fixture(scope='function')
def product_a(company_a, make_product):
    return make_product(company_a)


@pytest.fixture(scope='function')
def product_b(company_b, make_product):
    return make_product(company_b, code="REFRI-01", name="Refrigerante")


@pytest.fixture(scope='function')
def supplier_a(db_session, company_a):
    supplier = Supplier(company_id=company_a.id, name="Distribuidora Sul", cnpj="33.333.333/0001-33")
    db_session.add(supplier)
    db_session.commit()
    return supplier


@pytest.fixture(scope='function')
def supplier_b(db_session, company_b):
    supplier = Supplier(company_id=company_b.id, name="Atacado Norte")
    db_session.add(supplier)
    db_session.commit()
    return supplier


def current_quantity(db_session, product) -> int:
    """Stock as committed by the API (bypasses the session identity map)."""
    db_session.expire_all()
    return db_session.get(Product, product.id).quantity
