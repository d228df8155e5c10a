# barmanager/modules/purchases/service.py
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from barmanager.shared.database.models import Purchase
from .repository import PurchasesRepository
from .schemas import (
    PurchaseCreateRequest, PurchaseResponse, PurchaseItemResponse,
    PurchaseStatus, PURCHASE_TRANSITIONS
)

logger = logging.getLogger(__name__)

class PurchasesService:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id
        self.repository = PurchasesRepository(db, company_id)

    async def create_purchase(self, purchase_data: PurchaseCreateRequest) -> PurchaseResponse:
        logger.info(
            f"Registrando compra - Empresa: {self.company_id}, "
            f"Proveedor: {purchase_data.supplier_id}, Items: {len(purchase_data.items)}"
        )
        purchase = self.repository.create_purchase_atomic(purchase_data)
        return self._build_response(purchase)

    async def list_purchases(self) -> List[PurchaseResponse]:
        return [self._build_response(p) for p in self.repository.get_all()]

    async def get_purchase(self, purchase_id: int) -> PurchaseResponse:
        purchase = self.repository.get_by_id(purchase_id)
        if not purchase:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Compra {purchase_id} no encontrada"
            )
        return self._build_response(purchase)

    async def update_status(self, purchase_id: int, new_status: PurchaseStatus) -> PurchaseResponse:
        """
        Transición de estado. Solo desde 'pending'; al entregar se suma el
        stock de cada item en la misma transacción.
        """
        if new_status not in PURCHASE_TRANSITIONS[PurchaseStatus.PENDING]:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Estado destino inválido: {new_status.value}"
            )
        purchase = self.repository.update_status_atomic(purchase_id, new_status)
        return self._build_response(purchase)

    def _build_response(self, purchase: Purchase) -> PurchaseResponse:
        return PurchaseResponse(
            id=purchase.id,
            company_id=purchase.company_id,
            supplier_id=purchase.supplier_id,
            supplier_name=purchase.supplier.name if purchase.supplier else None,
            total=purchase.total,
            status=purchase.status,
            delivered_at=purchase.delivered_at,
            created_at=purchase.created_at,
            updated_at=purchase.updated_at,
            items=[PurchaseItemResponse.model_validate(item) for item in purchase.items],
            item_count=len(purchase.items)
        )
