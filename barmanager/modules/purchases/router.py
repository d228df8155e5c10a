from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import PurchasesService
from .schemas import PurchaseCreateRequest, PurchaseStatusUpdate, PurchaseResponse

router = APIRouter()

@router.get("", response_model=List[PurchaseResponse])
async def list_purchases(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Compras de la empresa, más recientes primero"""
    service = PurchasesService(db, company_id)
    return await service.list_purchases()

@router.post("", response_model=PurchaseResponse, status_code=status.HTTP_201_CREATED)
async def create_purchase(
    purchase_data: PurchaseCreateRequest,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """
    Registrar compra a un proveedor.

    La compra queda en 'pending'; el stock no cambia hasta la entrega.
    """
    service = PurchasesService(db, company_id)
    return await service.create_purchase(purchase_data)

@router.get("/{purchase_id}", response_model=PurchaseResponse)
async def get_purchase(
    purchase_id: int = Path(..., description="ID de la compra"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = PurchasesService(db, company_id)
    return await service.get_purchase(purchase_id)

@router.patch("/{purchase_id}/status", response_model=PurchaseResponse)
async def update_purchase_status(
    status_data: PurchaseStatusUpdate,
    purchase_id: int = Path(..., description="ID de la compra"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """
    Cambiar estado de la compra.

    - pending -> delivered: suma al stock la cantidad de cada item
    - pending -> cancelled: sin efecto en stock
    - delivered y cancelled son finales
    """
    service = PurchasesService(db, company_id)
    return await service.update_status(purchase_id, status_data.status)
