# barmanager/modules/products/schemas.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from enum import Enum


class ProductCategory(str, Enum):
    """Categorías de producto"""
    BEBIDAS = "bebidas"
    COMIDAS = "comidas"
    OUTROS = "outros"


class ProductCreate(BaseModel):
    """Schema para crear producto. La cantidad inicial solo se fija aquí."""
    code: str = Field(..., min_length=1, max_length=50, description="Código / SKU")
    name: str = Field(..., min_length=1, max_length=255)
    category: ProductCategory
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    quantity: int = Field(0, ge=0, description="Stock inicial")
    min_stock: int = Field(0, ge=0, description="Stock mínimo para alerta")

    @field_validator('code', 'name')
    @classmethod
    def strip_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('No puede estar vacío')
        return v.strip()


class ProductUpdate(BaseModel):
    """
    Schema para actualizar producto.

    No incluye quantity: el stock solo cambia con ventas y entregas de compras.
    """
    code: Optional[str] = Field(None, min_length=1, max_length=50)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[ProductCategory] = None
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    min_stock: Optional[int] = Field(None, ge=0)

    class Config:
        extra = "forbid"

    @field_validator('code', 'name')
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.strip():
            raise ValueError('No puede estar vacío')
        return v.strip()


class ProductResponse(BaseModel):
    id: int
    company_id: int
    code: str
    name: str
    category: str
    price: Decimal
    quantity: int
    min_stock: int
    is_low_stock: bool
    is_out_of_stock: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StockMovementResponse(BaseModel):
    id: int
    product_id: int
    movement_type: str
    quantity_change: int
    quantity_before: int
    quantity_after: int
    reference_id: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class ProductMovementsResponse(BaseModel):
    product_id: int
    current_quantity: int
    movements: List[StockMovementResponse]
