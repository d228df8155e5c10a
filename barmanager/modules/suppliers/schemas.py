from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    cnpj: Optional[str] = Field(None, max_length=18)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)

class SupplierUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    cnpj: Optional[str] = Field(None, max_length=18)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)

class SupplierResponse(BaseModel):
    id: int
    company_id: int
    name: str
    cnpj: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
