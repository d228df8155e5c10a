from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

class CompanyUpdate(BaseModel):
    """Perfil editable de la empresa; solo se aplican los campos enviados"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    cnpj: Optional[str] = Field(None, min_length=14, max_length=18)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    cep: Optional[str] = Field(None, max_length=10)
    address: Optional[str] = Field(None, max_length=255)
    address_number: Optional[str] = Field(None, max_length=20)
    neighborhood: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=255)
    business_type: Optional[str] = Field(None, max_length=100)
    owner_name: Optional[str] = Field(None, max_length=255)
    owner_email: Optional[EmailStr] = None
    owner_phone: Optional[str] = Field(None, max_length=20)

    class Config:
        extra = "forbid"

class CompanyResponse(BaseModel):
    id: int
    name: str
    cnpj: str
    email: str
    phone: Optional[str] = None
    user_type: str
    cep: Optional[str] = None
    address: Optional[str] = None
    address_number: Optional[str] = None
    neighborhood: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    website: Optional[str] = None
    business_type: Optional[str] = None
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    owner_phone: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
