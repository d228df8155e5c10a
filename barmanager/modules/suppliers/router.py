from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import SuppliersService
from .schemas import SupplierCreate, SupplierUpdate, SupplierResponse

router = APIRouter()

@router.get("", response_model=List[SupplierResponse])
async def list_suppliers(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SuppliersService(db, company_id)
    return await service.list_suppliers()

@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
async def create_supplier(
    supplier_data: SupplierCreate,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SuppliersService(db, company_id)
    return await service.create_supplier(supplier_data)

@router.get("/{supplier_id}", response_model=SupplierResponse)
async def get_supplier(
    supplier_id: int = Path(..., description="ID del proveedor"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SuppliersService(db, company_id)
    return await service.get_supplier(supplier_id)

@router.put("/{supplier_id}", response_model=SupplierResponse)
async def update_supplier(
    supplier_data: SupplierUpdate,
    supplier_id: int = Path(..., description="ID del proveedor"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SuppliersService(db, company_id)
    return await service.update_supplier(supplier_id, supplier_data)

@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: int = Path(..., description="ID del proveedor"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = SuppliersService(db, company_id)
    await service.delete_supplier(supplier_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
