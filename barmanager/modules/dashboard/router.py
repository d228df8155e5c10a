from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import DashboardService
from .schemas import DashboardStats

router = APIRouter()

@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """
    Resumen de la empresa: ventas del día y del mes, conteos de inventario
    y saldos pendientes. Se calcula en cada llamada.
    """
    service = DashboardService(db, company_id)
    return await service.get_stats()
