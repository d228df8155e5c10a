# barmanager/modules/products/repository.py
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from barmanager.shared.database.models import Product, SaleItem, PurchaseItem


class ProductsRepository:
    """Acceso a datos de productos, siempre filtrado por empresa"""

    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id

    def _query(self):
        return self.db.query(Product).filter(Product.company_id == self.company_id)

    def get_all(self) -> List[Product]:
        return self._query().order_by(Product.name).all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self._query().filter(Product.id == product_id).first()

    def get_by_code(self, code: str) -> Optional[Product]:
        return self._query().filter(Product.code == code).first()

    def create(self, data: Dict[str, Any]) -> Product:
        product = Product(company_id=self.company_id, **data)
        try:
            self.db.add(product)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(product)
        return product

    def update(self, product: Product, data: Dict[str, Any]) -> Product:
        for field, value in data.items():
            setattr(product, field, value)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        try:
            self.db.delete(product)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def has_transactions(self, product_id: int) -> bool:
        """¿El producto aparece en alguna venta o compra?"""
        in_sales = self.db.query(SaleItem.id).filter(
            SaleItem.company_id == self.company_id,
            SaleItem.product_id == product_id
        ).first()
        if in_sales:
            return True
        in_purchases = self.db.query(PurchaseItem.id).filter(
            PurchaseItem.company_id == self.company_id,
            PurchaseItem.product_id == product_id
        ).first()
        return in_purchases is not None
