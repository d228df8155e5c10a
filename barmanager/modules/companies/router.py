from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from barmanager.config.database import get_db
from barmanager.core.auth.actors import Actor
from barmanager.core.auth.dependencies import get_company_manager
from .service import CompaniesService
from .schemas import CompanyUpdate, CompanyResponse

router = APIRouter()

@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_data: CompanyUpdate,
    company_id: int = Path(..., description="ID de la empresa (debe ser la propia)"),
    actor: Actor = Depends(get_company_manager),
    db: Session = Depends(get_db)
):
    """
    Actualizar el perfil de la empresa autenticada.

    Los sub-usuarios no tienen permiso; otra empresa responde 403.
    """
    service = CompaniesService(db)
    return await service.update_own_company(actor, company_id, company_data)
