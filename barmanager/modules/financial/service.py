# barmanager/modules/financial/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from datetime import datetime, time
import logging

from barmanager.shared.database.models import AccountReceivable, AccountPayable
from .repository import AccountsRepository
from .schemas import (
    AccountReceivableCreate, AccountPayableCreate, AccountStatus,
    AccountReceivableResponse, AccountPayableResponse
)

logger = logging.getLogger(__name__)

def _due_datetime(data) -> datetime:
    return datetime.combine(data.due_date, time.min)

class ReceivablesService:
    def __init__(self, db: Session, company_id: int):
        self.company_id = company_id
        self.repository = AccountsRepository(db, company_id, AccountReceivable)

    async def list_accounts(self) -> List[AccountReceivableResponse]:
        return [AccountReceivableResponse.model_validate(a) for a in self.repository.get_all()]

    async def create_account(self, data: AccountReceivableCreate) -> AccountReceivableResponse:
        if data.sale_id is not None and not self.repository.sale_exists(data.sale_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Venta {data.sale_id} no encontrada"
            )
        account = self.repository.create({
            "sale_id": data.sale_id,
            "description": data.description,
            "amount": data.amount,
            "due_date": _due_datetime(data),
            "status": data.status.value
        })
        logger.info(f"Cuenta por cobrar {account.id} creada - Empresa {self.company_id}")
        return AccountReceivableResponse.model_validate(account)

    async def update_status(self, account_id: int, new_status: AccountStatus) -> AccountReceivableResponse:
        account = self.repository.get_by_id(account_id)
        if not account:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Cuenta por cobrar {account_id} no encontrada"
            )
        account = self.repository.update_status(account, new_status.value)
        return AccountReceivableResponse.model_validate(account)

class PayablesService:
    def __init__(self, db: Session, company_id: int):
        self.company_id = company_id
        self.repository = AccountsRepository(db, company_id, AccountPayable)

    def _build_response(self, account: AccountPayable) -> AccountPayableResponse:
        response = AccountPayableResponse.model_validate(account)
        if account.supplier is not None:
            response.supplier_name = account.supplier.name
        return response

    async def list_accounts(self) -> List[AccountPayableResponse]:
        return [self._build_response(a) for a in self.repository.get_all()]

    async def create_account(self, data: AccountPayableCreate) -> AccountPayableResponse:
        if data.supplier_id is not None and not self.repository.supplier_exists(data.supplier_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Proveedor {data.supplier_id} no encontrado"
            )
        account = self.repository.create({
            "supplier_id": data.supplier_id,
            "description": data.description,
            "amount": data.amount,
            "due_date": _due_datetime(data),
            "status": data.status.value
        })
        logger.info(f"Cuenta por pagar {account.id} creada - Empresa {self.company_id}")
        return self._build_response(account)

    async def update_status(self, account_id: int, new_status: AccountStatus) -> AccountPayableResponse:
        account = self.repository.get_by_id(account_id)
        if not account:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Cuenta por pagar {account_id} no encontrada"
            )
        account = self.repository.update_status(account, new_status.value)
        return self._build_response(account)
