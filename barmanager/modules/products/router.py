# barmanager/modules/products/router.py
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.config.database import get_db
from barmanager.core.auth.dependencies import get_current_company_id
from .service import ProductsService
from .schemas import (
    ProductCreate, ProductUpdate, ProductResponse, ProductMovementsResponse
)

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
async def list_products(
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Listar productos de la empresa"""
    service = ProductsService(db, company_id)
    return await service.list_products()

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """
    Crear producto

    **Nota:** `quantity` es el stock inicial. Después solo lo modifican
    las ventas y las entregas de compras.
    """
    service = ProductsService(db, company_id)
    return await service.create_product(product_data)

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int = Path(..., description="ID del producto"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = ProductsService(db, company_id)
    return await service.get_product(product_id)

@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_data: ProductUpdate,
    product_id: int = Path(..., description="ID del producto"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Actualizar datos del producto (no el stock)"""
    service = ProductsService(db, company_id)
    return await service.update_product(product_id, product_data)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int = Path(..., description="ID del producto"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    service = ProductsService(db, company_id)
    await service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{product_id}/movements", response_model=ProductMovementsResponse)
async def get_product_movements(
    product_id: int = Path(..., description="ID del producto"),
    company_id: int = Depends(get_current_company_id),
    db: Session = Depends(get_db)
):
    """Historial de ajustes de stock (ventas y entregas de compras)"""
    service = ProductsService(db, company_id)
    return await service.get_movements(product_id)
