# barmanager/modules/sales/schemas.py
from pydantic import BaseModel, Field, model_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from enum import Enum

TOLERANCE = Decimal("0.01")


class SaleStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


# Transiciones permitidas; cancelled es terminal
SALE_TRANSITIONS = {
    SaleStatus.PENDING: {SaleStatus.PAID, SaleStatus.CANCELLED},
    SaleStatus.PAID: {SaleStatus.CANCELLED},
    SaleStatus.CANCELLED: set(),
}


class SaleItemCreate(BaseModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0, description="Cantidad vendida")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Precio unitario informado por el cliente")
    total_price: Optional[Decimal] = Field(None, ge=0, description="Si se envía, debe ser quantity * unit_price")

    @property
    def computed_total(self) -> Decimal:
        return (self.unit_price * self.quantity).quantize(TOLERANCE)

    @model_validator(mode="after")
    def check_total_price(self):
        if self.total_price is not None and abs(self.total_price - self.computed_total) > TOLERANCE:
            raise ValueError("total_price no coincide con quantity * unit_price")
        return self


class SaleCreateRequest(BaseModel):
    items: List[SaleItemCreate] = Field(..., min_length=1, description="Items de la venta")
    subtotal: Optional[Decimal] = Field(None, ge=0, description="Si se envía, debe ser la suma de los items")
    discount: Decimal = Field(Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    total: Optional[Decimal] = Field(None, ge=0, description="Si se envía, debe ser subtotal - discount")
    status: SaleStatus = Field(SaleStatus.PENDING, description="pending o paid")

    @property
    def computed_subtotal(self) -> Decimal:
        return sum((item.computed_total for item in self.items), Decimal("0"))

    @property
    def computed_total(self) -> Decimal:
        return self.computed_subtotal - self.discount

    @model_validator(mode="after")
    def check_totals(self):
        if self.status == SaleStatus.CANCELLED:
            raise ValueError("Una venta no puede crearse cancelada")
        subtotal = self.computed_subtotal
        if self.subtotal is not None and abs(self.subtotal - subtotal) > TOLERANCE:
            raise ValueError(f"El subtotal ({self.subtotal}) no coincide con la suma de los items ({subtotal})")
        if self.discount > subtotal:
            raise ValueError("El descuento no puede ser mayor que el subtotal")
        if self.total is not None and abs(self.total - self.computed_total) > TOLERANCE:
            raise ValueError(f"El total ({self.total}) debe ser subtotal - descuento ({self.computed_total})")
        return self


class SaleStatusUpdate(BaseModel):
    status: SaleStatus


class SaleItemResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    total_price: Decimal

    class Config:
        from_attributes = True


class SaleResponse(BaseModel):
    id: int
    company_id: int
    subtotal: Decimal
    discount: Decimal
    total: Decimal
    status: str
    created_at: datetime
    updated_at: datetime
    items: List[SaleItemResponse]
    item_count: int
