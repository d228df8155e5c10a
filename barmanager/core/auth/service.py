from datetime import datetime, timedelta
from typing import Optional
import logging

from fastapi import HTTPException, status
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy import func
from sqlalchemy.orm import Session

from barmanager.config.settings import settings
from barmanager.shared.database.models import Company, CompanyUser
from .actors import (
    Actor, CompanySubUserActor, actor_from_company, actor_from_company_user
)
from .schemas import ActorProfile, TokenResponse

logger = logging.getLogger(__name__)

# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class AuthService:
    """Servicio de autenticación"""

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verificar contraseña"""
        try:
            # bcrypt solo considera los primeros 72 bytes
            encoded_password = plain_password.encode('utf-8')[:72].decode('utf-8', 'ignore')
            return pwd_context.verify(encoded_password, hashed_password)
        except ValueError as e:
            logger.warning(f"Hash de contraseña inválido: {e}")
            return False

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Generar hash de contraseña"""
        encoded_password = password.encode('utf-8')[:72].decode('utf-8', 'ignore')
        return pwd_context.hash(encoded_password)

    @staticmethod
    def create_access_token(actor: Actor, expires_delta: Optional[timedelta] = None) -> str:
        """Crear token de acceso para un actor ya resuelto"""
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)

        to_encode = {
            "sub": str(actor.principal_id),
            "actor_type": actor.actor_type.value,
            "company_id": actor.company_id,
            "email": actor.email,
            "exp": expire,
        }

        return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

    @staticmethod
    def verify_token(token: str) -> Optional[dict]:
        """Verificar y decodificar token"""
        try:
            return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        except JWTError:
            return None

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Actor:
        """
        Resolver credenciales en un actor.

        Orden de búsqueda: cuenta de empresa por email, luego sub-usuario.

        Raises:
            HTTPException 401: credenciales incorrectas
            HTTPException 403: empresa o usuario inactivo
        """
        email = email.lower()

        company = db.query(Company).filter(func.lower(Company.email) == email).first()
        if company is not None:
            if not AuthService.verify_password(password, company.password_hash):
                raise _invalid_credentials()
            if not company.is_active:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Empresa inactiva. Contacte al soporte."
                )
            logger.info(f"Login empresa {company.id} ({company.user_type})")
            return actor_from_company(company)

        user = db.query(CompanyUser).filter(func.lower(CompanyUser.email) == email).first()
        if user is not None:
            if not AuthService.verify_password(password, user.password_hash):
                raise _invalid_credentials()
            if not user.is_active:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Usuario inactivo. Contacte al administrador de la empresa."
                )
            if not user.company.is_active:
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail="Empresa inactiva. Contacte al soporte."
                )
            logger.info(f"Login sub-usuario {user.id} - Empresa {user.company_id}")
            return actor_from_company_user(user)

        raise _invalid_credentials()

    @staticmethod
    def build_profile(db: Session, actor: Actor) -> ActorProfile:
        company = db.query(Company).filter(Company.id == actor.company_id).first()
        if isinstance(actor, CompanySubUserActor):
            user = db.query(CompanyUser).filter(CompanyUser.id == actor.principal_id).first()
            is_active = bool(user and user.is_active)
        else:
            is_active = company.is_active
        return ActorProfile(
            id=actor.principal_id,
            company_id=actor.company_id,
            company_name=company.name,
            email=actor.email,
            cnpj=company.cnpj,
            actor_type=actor.actor_type.value,
            capabilities=sorted(c.value for c in actor.capabilities),
            is_active=is_active
        )

    @staticmethod
    def issue_token(db: Session, actor: Actor) -> TokenResponse:
        return TokenResponse(
            access_token=AuthService.create_access_token(actor),
            token_type="bearer",
            expires_in=settings.access_token_expire_minutes * 60,
            user=AuthService.build_profile(db, actor)
        )


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Email o contraseña incorrectos",
        headers={"WWW-Authenticate": "Bearer"},
    )
