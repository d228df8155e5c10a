from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import ReceivablesService, PayablesService
from .schemas import (
    AccountReceivableCreate, AccountPayableCreate, AccountStatusUpdate,
    AccountReceivableResponse, AccountPayableResponse
)

receivable_router = APIRouter()
payable_router = APIRouter()

# ==================== CUENTAS POR COBRAR ====================

@receivable_router.get("", response_model=List[AccountReceivableResponse])
async def list_receivables(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Cuentas por cobrar ordenadas por vencimiento (más lejano primero)"""
    return await ReceivablesService(db, company_id).list_accounts()

@receivable_router.post("", response_model=AccountReceivableResponse, status_code=status.HTTP_201_CREATED)
async def create_receivable(
    account_data: AccountReceivableCreate,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    return await ReceivablesService(db, company_id).create_account(account_data)

@receivable_router.patch("/{account_id}/status", response_model=AccountReceivableResponse)
async def update_receivable_status(
    status_data: AccountStatusUpdate,
    account_id: int = Path(..., description="ID de la cuenta por cobrar"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    return await ReceivablesService(db, company_id).update_status(account_id, status_data.status)

# ==================== CUENTAS POR PAGAR ====================

@payable_router.get("", response_model=List[AccountPayableResponse])
async def list_payables(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Cuentas por pagar ordenadas por vencimiento (más lejano primero)"""
    return await PayablesService(db, company_id).list_accounts()

@payable_router.post("", response_model=AccountPayableResponse, status_code=status.HTTP_201_CREATED)
async def create_payable(
    account_data: AccountPayableCreate,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    return await PayablesService(db, company_id).create_account(account_data)

@payable_router.patch("/{account_id}/status", response_model=AccountPayableResponse)
async def update_payable_status(
    status_data: AccountStatusUpdate,
    account_id: int = Path(..., description="ID de la cuenta por pagar"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    return await PayablesService(db, company_id).update_status(account_id, status_data.status)
