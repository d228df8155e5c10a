from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional

from barmanager.shared.database.models import Company, CompanyUser

class CompaniesRepository:
    """Acceso a empresas. No filtra por tenant: lo usan el registro, el perfil propio y /system"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, company_id: int) -> Optional[Company]:
        return self.db.query(Company).filter(Company.id == company_id).first()

    def email_taken(self, email: str, exclude_company_id: Optional[int] = None) -> bool:
        """Un email identifica un único login: se revisan empresas y sub-usuarios"""
        email = email.lower()
        query = self.db.query(Company.id).filter(func.lower(Company.email) == email)
        if exclude_company_id is not None:
            query = query.filter(Company.id != exclude_company_id)
        if query.first():
            return True
        return self.db.query(CompanyUser.id).filter(
            func.lower(CompanyUser.email) == email
        ).first() is not None

    def cnpj_taken(self, cnpj: str, exclude_company_id: Optional[int] = None) -> bool:
        query = self.db.query(Company.id).filter(Company.cnpj == cnpj)
        if exclude_company_id is not None:
            query = query.filter(Company.id != exclude_company_id)
        return query.first() is not None

    def create(self, data: Dict[str, Any]) -> Company:
        company = Company(**data)
        try:
            self.db.add(company)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(company)
        return company

    def update(self, company: Company, data: Dict[str, Any]) -> Company:
        for field, value in data.items():
            setattr(company, field, value)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(company)
        return company
