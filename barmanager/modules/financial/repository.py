from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional, Type, Union
from datetime import datetime

from barmanager.shared.database.models import (
    AccountReceivable, AccountPayable, Sale, Supplier
)

AccountModel = Union[AccountReceivable, AccountPayable]

class AccountsRepository:
    """Acceso a cuentas por cobrar o por pagar de una empresa"""

    def __init__(self, db: Session, company_id: int, model: Type[AccountModel]):
        self.db = db
        self.company_id = company_id
        self.model = model

    def get_all(self) -> List[AccountModel]:
        return self.db.query(self.model).filter(
            self.model.company_id == self.company_id
        ).order_by(self.model.due_date.desc(), self.model.id.desc()).all()

    def get_by_id(self, account_id: int) -> Optional[AccountModel]:
        return self.db.query(self.model).filter(
            self.model.id == account_id,
            self.model.company_id == self.company_id
        ).first()

    def create(self, data: Dict[str, Any]) -> AccountModel:
        account = self.model(company_id=self.company_id, **data)
        try:
            self.db.add(account)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(account)
        return account

    def update_status(self, account: AccountModel, new_status: str) -> AccountModel:
        try:
            account.status = new_status
            account.updated_at = datetime.now()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(account)
        return account

    def sale_exists(self, sale_id: int) -> bool:
        return self.db.query(Sale.id).filter(
            Sale.id == sale_id,
            Sale.company_id == self.company_id
        ).first() is not None

    def supplier_exists(self, supplier_id: int) -> bool:
        return self.db.query(Supplier.id).filter(
            Supplier.id == supplier_id,
            Supplier.company_id == self.company_id
        ).first() is not None
