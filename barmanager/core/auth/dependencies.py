from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional

from barmanager.config.database import get_db
from barmanager.shared.database.models import Company, CompanyUser
from .actors import (
    Actor, ActorType, Capability, has_capability,
    actor_from_company, actor_from_company_user
)
from .service import AuthService

security = HTTPBearer(auto_error=False)

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

def resolve_actor(payload: dict, db: Session) -> Actor:
    """Convertir el payload del token en un actor, validando que siga activo"""
    actor_type = payload.get("actor_type")
    try:
        principal_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise AuthenticationError("Payload del token inválido")

    if actor_type in (ActorType.COMPANY_ADMIN.value, ActorType.SYSTEM_ADMIN.value):
        company = db.query(Company).filter(Company.id == principal_id).first()
        if company is None or company.user_type != actor_type:
            raise AuthenticationError("Empresa no encontrada")
        if not company.is_active:
            raise AuthorizationError("Empresa inactiva. Contacte al soporte.")
        return actor_from_company(company)

    if actor_type == ActorType.COMPANY_USER.value:
        user = db.query(CompanyUser).filter(CompanyUser.id == principal_id).first()
        if user is None:
            raise AuthenticationError("Usuario no encontrado")
        if not user.is_active:
            raise AuthorizationError("Usuario inactivo. Contacte al administrador de la empresa.")
        if not user.company.is_active:
            raise AuthorizationError("Empresa inactiva. Contacte al soporte.")
        return actor_from_company_user(user)

    raise AuthenticationError("Payload del token inválido")

async def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Actor:
    """Obtener el actor actual desde el header Authorization"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Token de acceso requerido")

    payload = AuthService.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Token inválido o expirado")

    return resolve_actor(payload, db)

def require_capability(capability: Capability):
    """Factory para crear dependency que requiere una capacidad"""
    def capability_checker(actor: Actor = Depends(get_current_actor)) -> Actor:
        if not has_capability(actor, capability):
            raise AuthorizationError(
                f"Actor '{actor.actor_type.value}' sin permiso '{capability.value}'"
            )
        return actor
    return capability_checker

def get_current_company_id(
    actor: Actor = Depends(require_capability(Capability.TENANT_DATA))
) -> int:
    """Tenant usado para filtrar todas las consultas"""
    return actor.company_id

def get_company_manager(
    actor: Actor = Depends(require_capability(Capability.MANAGE_COMPANY))
) -> Actor:
    """Dependency para editar el perfil de la empresa"""
    return actor

def get_system_admin(
    actor: Actor = Depends(get_current_actor)
) -> Actor:
    """Dependency para rutas /system"""
    if not has_capability(actor, Capability.MANAGE_TENANTS):
        raise AuthorizationError(
            "Acceso denegado. Solo el administrador del sistema puede acceder a esta funcionalidad."
        )
    return actor
