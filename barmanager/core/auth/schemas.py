from pydantic import BaseModel, EmailStr, Field, model_validator
from typing import List, Optional

class UserLogin(BaseModel):
    """Schema para login (empresa o sub-usuario)"""
    email: EmailStr = Field(..., description="Email de la empresa o del usuario")
    password: str = Field(..., min_length=6, description="Contraseña")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "contato@barzinho.com.br",
                "password": "senha123"
            }
        }

class CompanyRegister(BaseModel):
    """Schema para auto-registro de una empresa"""
    name: str = Field(..., min_length=1, max_length=255)
    cnpj: str = Field(..., min_length=14, max_length=18)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    password: str = Field(..., min_length=6)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Las contraseñas no coinciden")
        return self

class ActorProfile(BaseModel):
    """Perfil del actor autenticado"""
    id: int
    company_id: int
    company_name: str
    email: str
    cnpj: str
    actor_type: str
    capabilities: List[str]
    is_active: bool

class TokenResponse(BaseModel):
    """Schema para respuesta de token"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: ActorProfile
