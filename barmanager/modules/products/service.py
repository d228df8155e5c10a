# barmanager/modules/products/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from barmanager.shared.database.models import Product
from barmanager.shared.services.inventory_service import InventoryService
from .repository import ProductsRepository
from .schemas import (
    ProductCreate, ProductUpdate, ProductResponse,
    ProductMovementsResponse, StockMovementResponse
)

logger = logging.getLogger(__name__)


class ProductsService:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id
        self.repository = ProductsRepository(db, company_id)

    def _get_or_404(self, product_id: int) -> Product:
        product = self.repository.get_by_id(product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Producto {product_id} no encontrado"
            )
        return product

    def _ensure_code_available(self, code: str, exclude_id: int = None) -> None:
        existing = self.repository.get_by_code(code)
        if existing and existing.id != exclude_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Ya existe un producto con el código '{code}'"
            )

    async def list_products(self) -> List[ProductResponse]:
        return [ProductResponse.model_validate(p) for p in self.repository.get_all()]

    async def get_product(self, product_id: int) -> ProductResponse:
        return ProductResponse.model_validate(self._get_or_404(product_id))

    async def create_product(self, data: ProductCreate) -> ProductResponse:
        self._ensure_code_available(data.code)
        values = data.model_dump()
        values["category"] = data.category.value
        product = self.repository.create(values)
        product_data = ProductResponse.model_validate(product)
        logger.info(f"Producto {product.id} creado - Empresa: {self.company_id}")
        return product_data

    async def update_product(self, product_id: int, data: ProductUpdate) -> ProductResponse:
        product = self._get_or_404(product_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if "code" in changes:
            self._ensure_code_available(changes["code"], exclude_id=product.id)
        if "category" in changes:
            changes["category"] = changes["category"].value
        product = self.repository.update(product, changes)
        return ProductResponse.model_validate(product)

    async def delete_product(self, product_id: int) -> None:
        product = self._get_or_404(product_id)
        if self.repository.has_transactions(product.id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El producto tiene ventas o compras registradas y no puede eliminarse"
            )
        self.repository.delete(product)
        logger.info(f"Producto {product_id} eliminado - Empresa: {self.company_id}")

    async def get_movements(self, product_id: int) -> ProductMovementsResponse:
        product = self._get_or_404(product_id)
        movements = InventoryService.get_movements(self.db, self.company_id, product.id)
        return ProductMovementsResponse(
            product_id=product.id,
            current_quantity=product.quantity,
            movements=[StockMovementResponse.model_validate(m) for m in movements]
        )
