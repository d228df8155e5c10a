# barmanager/modules/system/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from barmanager.config.settings import settings
from barmanager.core.auth.service import AuthService
from barmanager.modules.companies.service import CompaniesService
from barmanager.shared.database.models import Company, CompanyUser
from .repository import SystemRepository
from .schemas import (
    SystemCompanyCreate, CompanyListItem,
    CompanyUserCreate, CompanyUserResponse
)

logger = logging.getLogger(__name__)

class SystemService:
    """Gestión de tenants por el administrador del sistema"""

    def __init__(self, db: Session):
        self.db = db
        self.repository = SystemRepository(db)
        self.companies = CompaniesService(db)

    # ===== EMPRESAS =====

    async def list_companies(self, skip: int, limit: int, search: Optional[str]) -> List[CompanyListItem]:
        companies = self.repository.list_companies(skip, limit, search)
        return [CompanyListItem.model_validate(c) for c in companies]

    async def create_company(self, data: SystemCompanyCreate, admin_id: int) -> CompanyListItem:
        profile = data.model_dump(exclude={"password"})
        company = self.companies.create_tenant(
            profile, data.password or settings.default_company_password
        )
        logger.info(f"Empresa {company.id} creada por administrador {admin_id}")
        return CompanyListItem.model_validate(company)

    async def set_company_active(self, company_id: int, active: bool, admin_id: int) -> CompanyListItem:
        company = self._get_company_or_404(company_id)
        company = self.repository.set_company_active(company, active)
        logger.info(
            f"Empresa {company.id} {'activada' if active else 'desactivada'} por administrador {admin_id}"
        )
        return CompanyListItem.model_validate(company)

    # ===== SUB-USUARIOS =====

    async def list_users(self, company_id: int) -> List[CompanyUserResponse]:
        self._get_company_or_404(company_id)
        return [CompanyUserResponse.model_validate(u) for u in self.repository.list_users(company_id)]

    async def create_user(self, company_id: int, data: CompanyUserCreate) -> CompanyUserResponse:
        self._get_company_or_404(company_id)
        if self.companies.repository.email_taken(data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email ya registrado"
            )
        user = self.repository.create_user(
            company_id=company_id,
            name=data.name,
            email=data.email.lower(),
            password_hash=AuthService.get_password_hash(data.password)
        )
        logger.info(f"Sub-usuario {user.id} creado - Empresa {company_id}")
        return CompanyUserResponse.model_validate(user)

    async def set_user_active(self, company_id: int, user_id: int, active: bool) -> CompanyUserResponse:
        user = self._get_user_or_404(company_id, user_id)
        user = self.repository.set_user_active(user, active)
        return CompanyUserResponse.model_validate(user)

    async def delete_user(self, company_id: int, user_id: int) -> None:
        user = self._get_user_or_404(company_id, user_id)
        self.repository.delete_user(user)
        logger.info(f"Sub-usuario {user_id} eliminado - Empresa {company_id}")

    def _get_company_or_404(self, company_id: int) -> Company:
        company = self.repository.get_tenant(company_id)
        if not company:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Empresa {company_id} no encontrada"
            )
        return company

    def _get_user_or_404(self, company_id: int, user_id: int) -> CompanyUser:
        user = self.repository.get_user(company_id, user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Usuario {user_id} no encontrado en la empresa {company_id}"
            )
        return user
