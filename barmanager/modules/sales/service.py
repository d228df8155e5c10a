# barmanager/modules/sales/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from barmanager.shared.database.models import Sale
from .repository import SalesRepository
from .schemas import (
    SaleCreateRequest, SaleResponse, SaleItemResponse,
    SaleStatus, SALE_TRANSITIONS
)

logger = logging.getLogger(__name__)

class SalesService:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id
        self.repository = SalesRepository(db, company_id)

    async def create_sale(self, sale_data: SaleCreateRequest) -> SaleResponse:
        """
        Crear venta.

        Responsabilidades:
        - Delegar transacción (venta + items + stock) al repository
        - Construir respuesta
        """
        logger.info(
            f"Iniciando venta - Empresa: {self.company_id}, Items: {len(sale_data.items)}"
        )
        sale = self.repository.create_sale_atomic(sale_data)
        logger.info(f"Venta {sale.id} completada exitosamente - Total: {sale.total}")
        return self._build_response(sale)

    async def list_sales(self) -> List[SaleResponse]:
        return [self._build_response(sale) for sale in self.repository.get_all()]

    async def get_sale(self, sale_id: int) -> SaleResponse:
        return self._build_response(self._get_or_404(sale_id))

    async def update_status(self, sale_id: int, new_status: SaleStatus) -> SaleResponse:
        """Cambiar estado de la venta según SALE_TRANSITIONS"""
        sale = self._get_or_404(sale_id)
        current = SaleStatus(sale.status)

        if new_status not in SALE_TRANSITIONS[current]:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Transición de venta no permitida: {current.value} -> {new_status.value}"
            )

        sale = self.repository.update_status(sale, new_status.value)
        logger.info(f"Venta {sale_id}: {current.value} -> {new_status.value}")
        return self._build_response(sale)

    # MÉTODOS PRIVADOS HELPERS

    def _get_or_404(self, sale_id: int) -> Sale:
        sale = self.repository.get_by_id(sale_id)
        if not sale:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Venta {sale_id} no encontrada"
            )
        return sale

    def _build_response(self, sale: Sale) -> SaleResponse:
        return SaleResponse(
            id=sale.id,
            company_id=sale.company_id,
            subtotal=sale.subtotal,
            discount=sale.discount,
            total=sale.total,
            status=sale.status,
            created_at=sale.created_at,
            updated_at=sale.updated_at,
            items=[SaleItemResponse.model_validate(item) for item in sale.items],
            item_count=len(sale.items)
        )
