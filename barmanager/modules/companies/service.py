# barmanager/modules/companies/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
import logging

from barmanager.core.auth.actors import Actor
from barmanager.core.auth.schemas import CompanyRegister
from barmanager.core.auth.service import AuthService
from barmanager.shared.database.models import Company
from .repository import CompaniesRepository
from .schemas import CompanyUpdate, CompanyResponse

logger = logging.getLogger(__name__)

class CompaniesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CompaniesRepository(db)

    def check_unique(self, email: Optional[str], cnpj: Optional[str], exclude_company_id: Optional[int] = None):
        if email and self.repository.email_taken(email, exclude_company_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email ya registrado"
            )
        if cnpj and self.repository.cnpj_taken(cnpj, exclude_company_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="CNPJ ya registrado"
            )

    def register_company(self, data: CompanyRegister) -> Company:
        """Crear un tenant (user_type company_admin)"""
        profile = data.model_dump(include={"name", "cnpj", "email", "phone"})
        return self.create_tenant(profile, data.password)

    def create_tenant(self, profile: Dict[str, Any], password: str) -> Company:
        """
        Alta de empresa con perfil (name, cnpj, email y campos opcionales).
        Usado por el auto-registro y por el administrador del sistema.
        """
        self.check_unique(profile["email"], profile["cnpj"])
        company = self.repository.create({
            **profile,
            "email": profile["email"].lower(),
            "password_hash": AuthService.get_password_hash(password),
            "user_type": "company_admin",
            "is_active": True
        })
        logger.info(f"Empresa registrada: {company.id} - {company.name}")
        return company

    async def update_own_company(self, actor: Actor, company_id: int, data: CompanyUpdate) -> CompanyResponse:
        """Cada empresa solo puede editar su propio perfil"""
        if company_id != actor.company_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Solo puede editar los datos de su propia empresa"
            )
        company = self.repository.get_by_id(company_id)
        if not company:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Empresa no encontrada"
            )

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if changes.get("email"):
            changes["email"] = changes["email"].lower()
        self.check_unique(changes.get("email"), changes.get("cnpj"), exclude_company_id=company.id)

        company = self.repository.update(company, changes)
        logger.info(f"Empresa {company.id} actualizada: {', '.join(changes) or 'sin cambios'}")
        return CompanyResponse.model_validate(company)
