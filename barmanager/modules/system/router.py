# barmanager/modules/system/router.py
from fastapi import APIRouter, Depends, Query, Path, status
from sqlalchemy.orm import Session
from typing import List, Optional

from barmanager.config.database import get_db
from barmanager.core.auth.actors import Actor
from barmanager.core.auth.dependencies import get_system_admin
from barmanager.shared.schemas.common import ActiveUpdate, MessageResponse
from .service import SystemService
from .schemas import (
    SystemCompanyCreate, CompanyListItem,
    CompanyUserCreate, CompanyUserResponse
)

router = APIRouter()


# =====================================================
# COMPANIES - GESTIÓN DE EMPRESAS
# =====================================================

@router.get("/companies", response_model=List[CompanyListItem])
async def list_companies(
    skip: int = Query(0, ge=0, description="Registros a saltar"),
    limit: int = Query(100, ge=1, le=500, description="Máximo de registros"),
    search: Optional[str] = Query(None, description="Buscar por nombre, email o CNPJ"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    """
    Listar empresas cliente.

    **Permisos:** Solo administrador del sistema
    """
    service = SystemService(db)
    return await service.list_companies(skip, limit, search)


@router.post("/companies", response_model=CompanyListItem, status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: SystemCompanyCreate,
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    """
    Crear empresa cliente con su perfil completo.

    Sin `password` la cuenta queda con la contraseña inicial configurada.
    """
    service = SystemService(db)
    return await service.create_company(company_data, admin.principal_id)


@router.patch("/companies/{company_id}/status", response_model=CompanyListItem)
async def set_company_status(
    status_data: ActiveUpdate,
    company_id: int = Path(..., description="ID de la empresa"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    """Activar / desactivar empresa. Una empresa inactiva no puede autenticarse."""
    service = SystemService(db)
    return await service.set_company_active(company_id, status_data.active, admin.principal_id)


# =====================================================
# USERS - SUB-USUARIOS DE UNA EMPRESA
# =====================================================

@router.get("/companies/{company_id}/users", response_model=List[CompanyUserResponse])
async def list_company_users(
    company_id: int = Path(..., description="ID de la empresa"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    service = SystemService(db)
    return await service.list_users(company_id)


@router.post("/companies/{company_id}/users", response_model=CompanyUserResponse, status_code=status.HTTP_201_CREATED)
async def create_company_user(
    user_data: CompanyUserCreate,
    company_id: int = Path(..., description="ID de la empresa"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    service = SystemService(db)
    return await service.create_user(company_id, user_data)


@router.patch("/companies/{company_id}/users/{user_id}/status", response_model=CompanyUserResponse)
async def set_company_user_status(
    status_data: ActiveUpdate,
    company_id: int = Path(..., description="ID de la empresa"),
    user_id: int = Path(..., description="ID del sub-usuario"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    service = SystemService(db)
    return await service.set_user_active(company_id, user_id, status_data.active)


@router.delete("/companies/{company_id}/users/{user_id}", response_model=MessageResponse)
async def delete_company_user(
    company_id: int = Path(..., description="ID de la empresa"),
    user_id: int = Path(..., description="ID del sub-usuario"),
    admin: Actor = Depends(get_system_admin),
    db: Session = Depends(get_db)
):
    service = SystemService(db)
    await service.delete_user(company_id, user_id)
    return MessageResponse(message="Usuario eliminado exitosamente")
