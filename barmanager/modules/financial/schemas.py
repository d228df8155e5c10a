# barmanager/modules/financial/schemas.py
from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal
from datetime import date, datetime
from enum import Enum


class AccountStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class AccountBase(BaseModel):
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    due_date: date = Field(..., description="Fecha de vencimiento (YYYY-MM-DD)")
    status: AccountStatus = AccountStatus.PENDING


class AccountReceivableCreate(AccountBase):
    sale_id: Optional[int] = Field(None, gt=0, description="Venta de la misma empresa")


class AccountPayableCreate(AccountBase):
    supplier_id: Optional[int] = Field(None, gt=0, description="Proveedor de la misma empresa")


class AccountStatusUpdate(BaseModel):
    status: AccountStatus


class AccountResponse(BaseModel):
    id: int
    company_id: int
    description: str
    amount: Decimal
    due_date: datetime
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AccountReceivableResponse(AccountResponse):
    sale_id: Optional[int] = None


class AccountPayableResponse(AccountResponse):
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
