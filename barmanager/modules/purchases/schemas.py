# barmanager/modules/purchases/schemas.py
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from enum import Enum

TOLERANCE = Decimal("0.01")


class PurchaseStatus(str, Enum):
    PENDING = "pending"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


# delivered y cancelled son terminales: la entrega acredita stock una sola vez
PURCHASE_TRANSITIONS = {
    PurchaseStatus.PENDING: {PurchaseStatus.DELIVERED, PurchaseStatus.CANCELLED},
    PurchaseStatus.DELIVERED: set(),
    PurchaseStatus.CANCELLED: set(),
}


class PurchaseItemCreate(BaseModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0, description="Cantidad comprada")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Costo unitario")
    total_price: Optional[Decimal] = Field(None, ge=0)

    @property
    def computed_total(self) -> Decimal:
        return (self.unit_price * self.quantity).quantize(TOLERANCE)

    @model_validator(mode="after")
    def check_total_price(self):
        if self.total_price is not None and abs(self.total_price - self.computed_total) > TOLERANCE:
            raise ValueError("total_price no coincide con quantity * unit_price")
        return self


class PurchaseCreateRequest(BaseModel):
    supplier_id: int = Field(..., gt=0)
    items: List[PurchaseItemCreate] = Field(..., min_length=1)
    total: Optional[Decimal] = Field(None, ge=0, description="Si se envía, debe ser la suma de los items")

    @property
    def computed_total(self) -> Decimal:
        return sum((item.computed_total for item in self.items), Decimal("0"))

    @model_validator(mode="after")
    def check_total(self):
        if self.total is not None and abs(self.total - self.computed_total) > TOLERANCE:
            raise ValueError(f"El total ({self.total}) no coincide con la suma de los items ({self.computed_total})")
        return self


class PurchaseStatusUpdate(BaseModel):
    status: PurchaseStatus


class PurchaseItemResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True


class PurchaseResponse(BaseModel):
    id: int
    company_id: int
    supplier_id: int
    supplier_name: Optional[str] = None
    total: Decimal
    status: str
    delivered_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
    items: List[PurchaseItemResponse]
    item_count: int
