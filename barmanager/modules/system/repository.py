from sqlalchemy import or_, func
from sqlalchemy.orm import Session
from typing import List, Optional

from barmanager.shared.database.models import Company, CompanyUser

class SystemRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_companies(self, skip: int = 0, limit: int = 100, search: Optional[str] = None) -> List[Company]:
        query = self.db.query(Company).filter(Company.user_type == 'company_admin')
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(or_(
                func.lower(Company.name).like(pattern),
                func.lower(Company.email).like(pattern),
                Company.cnpj.like(f"%{search}%")
            ))
        return query.order_by(Company.created_at.desc(), Company.id.desc()).offset(skip).limit(limit).all()

    def get_tenant(self, company_id: int) -> Optional[Company]:
        """Solo empresas cliente; la cuenta del administrador del sistema no se gestiona aquí"""
        return self.db.query(Company).filter(
            Company.id == company_id,
            Company.user_type == 'company_admin'
        ).first()

    def set_company_active(self, company: Company, active: bool) -> Company:
        try:
            company.is_active = active
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(company)
        return company

    def list_users(self, company_id: int) -> List[CompanyUser]:
        return self.db.query(CompanyUser).filter(
            CompanyUser.company_id == company_id
        ).order_by(CompanyUser.created_at.desc(), CompanyUser.id.desc()).all()

    def get_user(self, company_id: int, user_id: int) -> Optional[CompanyUser]:
        return self.db.query(CompanyUser).filter(
            CompanyUser.id == user_id,
            CompanyUser.company_id == company_id
        ).first()

    def create_user(self, company_id: int, name: str, email: str, password_hash: str) -> CompanyUser:
        user = CompanyUser(
            company_id=company_id,
            name=name,
            email=email,
            password_hash=password_hash,
            user_type='company_user',
            is_active=True
        )
        try:
            self.db.add(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def set_user_active(self, user: CompanyUser, active: bool) -> CompanyUser:
        try:
            user.is_active = active
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete_user(self, user: CompanyUser) -> None:
        try:
            self.db.delete(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
