# barmanager/modules/sales/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import SalesService
from .schemas import SaleCreateRequest, SaleResponse, SaleStatusUpdate

router = APIRouter()

@router.get("", response_model=List[SaleResponse])
async def list_sales(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Listar ventas de la empresa (más recientes primero) con sus items"""
    service = SalesService(db, company_id)
    return await service.list_sales()

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_sale(
    sale_data: SaleCreateRequest,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """
    Registrar venta

    **Incluye:**
    - Venta con subtotal, descuento y total calculados de los items
    - Descuento automático del stock de cada producto
    - Todo en una sola transacción

    **Nota:** el stock puede quedar negativo; no se valida contra el precio actual.
    """
    service = SalesService(db, company_id)
    return await service.create_sale(sale_data)

@router.get("/{sale_id}", response_model=SaleResponse)
async def get_sale(
    sale_id: int = Path(..., description="ID de la venta"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SalesService(db, company_id)
    return await service.get_sale(sale_id)

@router.patch("/{sale_id}/status", response_model=SaleResponse)
async def update_sale_status(
    status_data: SaleStatusUpdate,
    sale_id: int = Path(..., description="ID de la venta"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Marcar venta como pagada o cancelada"""
    service = SalesService(db, company_id)
    return await service.update_status(sale_id, status_data.status)
