# barmanager/modules/system/schemas.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

# ===== EMPRESAS =====

class SystemCompanyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    cnpj: str = Field(..., min_length=14, max_length=18)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    password: Optional[str] = Field(None, min_length=6, description="Si se omite se usa la contraseña inicial por defecto")
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

class CompanyListItem(BaseModel):
    id: int
    name: str
    cnpj: str
    email: str
    phone: Optional[str] = None
    user_type: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True

# ===== SUB-USUARIOS =====

class CompanyUserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)

class CompanyUserResponse(BaseModel):
    id: int
    company_id: int
    name: str
    email: str
    user_type: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
