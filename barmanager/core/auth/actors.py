# barmanager/core/auth/actors.py
"""
Actores autenticados.

Cada token se resuelve UNA vez, al autenticar, en uno de tres actores:

- CompanyAdminActor: la cuenta principal de la empresa (tenant)
- CompanySubUserActor: sub-usuario creado para una empresa
- SystemAdminActor: administrador global del sistema

Todos llevan el company_id usado para filtrar datos y un conjunto fijo de
capacidades; las rutas piden capacidades, no tipos de usuario.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, FrozenSet, Union

from barmanager.shared.database.models import Company, CompanyUser


class Capability(str, Enum):
    TENANT_DATA = "tenant_data"          # productos, ventas, compras, finanzas...
    MANAGE_COMPANY = "manage_company"    # editar el perfil de la propia empresa
    MANAGE_TENANTS = "manage_tenants"    # rutas /system


class ActorType(str, Enum):
    COMPANY_ADMIN = "company_admin"
    COMPANY_USER = "company_user"
    SYSTEM_ADMIN = "system_admin"


@dataclass(frozen=True)
class CompanyAdminActor:
    principal_id: int
    company_id: int
    email: str

    actor_type: ClassVar[ActorType] = ActorType.COMPANY_ADMIN
    capabilities: ClassVar[FrozenSet[Capability]] = frozenset({
        Capability.TENANT_DATA,
        Capability.MANAGE_COMPANY,
    })


@dataclass(frozen=True)
class CompanySubUserActor:
    principal_id: int
    company_id: int
    email: str

    actor_type: ClassVar[ActorType] = ActorType.COMPANY_USER
    capabilities: ClassVar[FrozenSet[Capability]] = frozenset({
        Capability.TENANT_DATA,
    })


@dataclass(frozen=True)
class SystemAdminActor:
    principal_id: int
    company_id: int
    email: str

    actor_type: ClassVar[ActorType] = ActorType.SYSTEM_ADMIN
    capabilities: ClassVar[FrozenSet[Capability]] = frozenset({
        Capability.TENANT_DATA,
        Capability.MANAGE_COMPANY,
        Capability.MANAGE_TENANTS,
    })


Actor = Union[CompanyAdminActor, CompanySubUserActor, SystemAdminActor]


def has_capability(actor: Actor, capability: Capability) -> bool:
    return capability in actor.capabilities


def actor_from_company(company: Company) -> Actor:
    """Cuenta de empresa: admin de la empresa o admin del sistema según user_type"""
    if company.user_type == ActorType.SYSTEM_ADMIN.value:
        return SystemAdminActor(principal_id=company.id, company_id=company.id, email=company.email)
    return CompanyAdminActor(principal_id=company.id, company_id=company.id, email=company.email)


def actor_from_company_user(user: CompanyUser) -> Actor:
    return CompanySubUserActor(principal_id=user.id, company_id=user.company_id, email=user.email)
