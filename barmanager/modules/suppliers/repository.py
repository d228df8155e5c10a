from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from barmanager.shared.database.models import Supplier, Purchase, AccountPayable

class SuppliersRepository:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id

    def get_all(self) -> List[Supplier]:
        return self.db.query(Supplier).filter(
            Supplier.company_id == self.company_id
        ).order_by(Supplier.name).all()

    def get_by_id(self, supplier_id: int) -> Optional[Supplier]:
        return self.db.query(Supplier).filter(
            Supplier.id == supplier_id,
            Supplier.company_id == self.company_id
        ).first()

    def create(self, data: Dict[str, Any]) -> Supplier:
        supplier = Supplier(company_id=self.company_id, **data)
        try:
            self.db.add(supplier)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(supplier)
        return supplier

    def update(self, supplier: Supplier, data: Dict[str, Any]) -> Supplier:
        for field, value in data.items():
            setattr(supplier, field, value)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(supplier)
        return supplier

    def delete(self, supplier: Supplier) -> None:
        try:
            self.db.delete(supplier)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def is_referenced(self, supplier_id: int) -> bool:
        """¿Tiene compras o cuentas por pagar asociadas?"""
        purchase = self.db.query(Purchase.id).filter(
            Purchase.company_id == self.company_id,
            Purchase.supplier_id == supplier_id
        ).first()
        if purchase:
            return True
        payable = self.db.query(AccountPayable.id).filter(
            AccountPayable.company_id == self.company_id,
            AccountPayable.supplier_id == supplier_id
        ).first()
        return payable is not None
