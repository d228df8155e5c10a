# barmanager/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    Numeric, ForeignKey, UniqueConstraint, CheckConstraint, Index
)
from sqlalchemy.orm import relationship, declarative_base
from datetime import datetime

Base = declarative_base()

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at (hora local del servidor)"""
    created_at = Column(DateTime, nullable=False, default=datetime.now, index=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


# =====================================================
# MODELOS MULTITENANT
# =====================================================

class Company(Base, TimestampMixin):
    """Modelo de Empresa/Tenant. También es la cuenta de acceso del dueño."""
    __tablename__ = "companies"

    # Identificación
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    cnpj = Column(String(18), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    phone = Column(String(20))

    # Credenciales
    password_hash = Column(String(255), nullable=False)
    user_type = Column(String(20), nullable=False, default='company_admin')

    # Dirección y datos comerciales
    cep = Column(String(10))
    address = Column(String(255))
    address_number = Column(String(20))
    neighborhood = Column(String(100))
    city = Column(String(100))
    state = Column(String(50))
    website = Column(String(255))
    business_type = Column(String(100))
    owner_name = Column(String(255))
    owner_email = Column(String(255))
    owner_phone = Column(String(20))

    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("user_type IN ('company_admin', 'system_admin')", name="ck_companies_user_type"),
    )

    # Relationships
    users = relationship("CompanyUser", back_populates="company", cascade="all, delete-orphan")
    products = relationship("Product", back_populates="company", cascade="all, delete-orphan")
    sales = relationship("Sale", back_populates="company", cascade="all, delete-orphan")
    suppliers = relationship("Supplier", back_populates="company", cascade="all, delete-orphan")
    purchases = relationship("Purchase", back_populates="company", cascade="all, delete-orphan")


class CompanyUser(Base, TimestampMixin):
    """Sub-usuario de una empresa (creado por el administrador del sistema)"""
    __tablename__ = "company_users"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    user_type = Column(String(20), nullable=False, default='company_user')
    is_active = Column(Boolean, nullable=False, default=True)

    company = relationship("Company", back_populates="users")


# =====================================================
# PRODUCTOS E INVENTARIO
# =====================================================

class Product(Base, TimestampMixin):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    code = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False)
    category = Column(String(20), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # Stock: solo lo modifican ventas y entregas de compras
    quantity = Column(Integer, nullable=False, default=0)
    min_stock = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("company_id", "code", name="uq_products_company_code"),
        CheckConstraint("category IN ('bebidas', 'comidas', 'outros')", name="ck_products_category"),
    )

    company = relationship("Company", back_populates="products")
    movements = relationship("StockMovement", back_populates="product", cascade="all, delete-orphan")

    @property
    def is_low_stock(self) -> bool:
        return 0 < self.quantity <= self.min_stock

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0


class StockMovement(Base):
    """Registro de cada ajuste de stock (venta o entrega de compra)"""
    __tablename__ = "stock_movements"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    movement_type = Column(String(30), nullable=False)
    quantity_change = Column(Integer, nullable=False)
    quantity_before = Column(Integer, nullable=False)
    quantity_after = Column(Integer, nullable=False)
    reference_id = Column(Integer)
    notes = Column(Text)
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    product = relationship("Product", back_populates="movements")


# =====================================================
# VENTAS
# =====================================================

class Sale(Base, TimestampMixin):
    """Modelo de Venta"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    subtotal = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    total = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default='pending')

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid', 'cancelled')", name="ck_sales_status"),
        Index("ix_sales_company_created", "company_id", "created_at"),
    )

    company = relationship("Company", back_populates="sales")
    items = relationship("SaleItem", back_populates="sale", cascade="all, delete-orphan")


class SaleItem(Base):
    """Modelo de Item de Venta"""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    sale = relationship("Sale", back_populates="items")
    product = relationship("Product")


# =====================================================
# PROVEEDORES Y COMPRAS
# =====================================================

class Supplier(Base):
    """Modelo de Proveedor"""
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    cnpj = Column(String(18))
    email = Column(String(255))
    phone = Column(String(20))
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    company = relationship("Company", back_populates="suppliers")
    purchases = relationship("Purchase", back_populates="supplier")


class Purchase(Base, TimestampMixin):
    """Modelo de Compra (orden a proveedor)"""
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False, index=True)
    total = Column(Numeric(10, 2), nullable=False)
    status = Column(String(20), nullable=False, default='pending')
    delivered_at = Column(DateTime)

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'delivered', 'cancelled')", name="ck_purchases_status"),
    )

    company = relationship("Company", back_populates="purchases")
    supplier = relationship("Supplier", back_populates="purchases")
    items = relationship("PurchaseItem", back_populates="purchase", cascade="all, delete-orphan")


class PurchaseItem(Base):
    """Modelo de Item de Compra"""
    __tablename__ = "purchase_items"

    id = Column(Integer, primary_key=True, index=True)
    purchase_id = Column(Integer, ForeignKey("purchases.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    purchase = relationship("Purchase", back_populates="items")
    product = relationship("Product")


# =====================================================
# FINANZAS
# =====================================================

class AccountReceivable(Base, TimestampMixin):
    """Cuenta por cobrar"""
    __tablename__ = "accounts_receivable"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id"))
    description = Column(Text, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    due_date = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default='pending')

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid', 'overdue', 'cancelled')", name="ck_receivable_status"),
    )

    sale = relationship("Sale")


class AccountPayable(Base, TimestampMixin):
    """Cuenta por pagar"""
    __tablename__ = "accounts_payable"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"))
    description = Column(Text, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    due_date = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False, default='pending')

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid', 'overdue', 'cancelled')", name="ck_payable_status"),
    )

    supplier = relationship("Supplier")
