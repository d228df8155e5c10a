from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from datetime import datetime
from fastapi import HTTPException
import logging

from barmanager.shared.database.models import Purchase, PurchaseItem, Supplier
from barmanager.shared.services.inventory_service import InventoryService
from .schemas import PurchaseCreateRequest, PurchaseStatus

logger = logging.getLogger(__name__)

class PurchasesRepository:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id
        self.inventory_service = InventoryService()

    def create_purchase_atomic(self, purchase_data: PurchaseCreateRequest) -> Purchase:
        """
        Registrar compra pendiente con sus items.

        No toca el stock: el inventario se acredita al pasar a 'delivered'.

        Raises:
            HTTPException: 404 si el proveedor o algún producto no es de la empresa
        """
        try:
            supplier = self.db.query(Supplier).filter(
                Supplier.id == purchase_data.supplier_id,
                Supplier.company_id == self.company_id
            ).first()
            if not supplier:
                raise HTTPException(
                    status_code=404,
                    detail=f"Proveedor {purchase_data.supplier_id} no encontrado"
                )

            # Valida pertenencia de los productos al tenant
            self.inventory_service.lock_products(
                self.db, self.company_id, [item.product_id for item in purchase_data.items]
            )

            purchase = Purchase(
                company_id=self.company_id,
                supplier_id=supplier.id,
                total=purchase_data.computed_total,
                status=PurchaseStatus.PENDING.value
            )
            self.db.add(purchase)
            self.db.flush()

            self.db.add_all([
                PurchaseItem(
                    purchase_id=purchase.id,
                    company_id=self.company_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.computed_total
                )
                for item in purchase_data.items
            ])

            self.db.commit()
            logger.info(f"Compra #{purchase.id} registrada - Proveedor {supplier.id}")

            return self.get_by_id(purchase.id)

        except HTTPException as e:
            logger.error(f"Error de negocio: {e.detail}")
            self.db.rollback()
            raise
        except Exception:
            logger.exception("Error en transacción de compra")
            self.db.rollback()
            raise

    def update_status_atomic(self, purchase_id: int, new_status: PurchaseStatus) -> Purchase:
        """
        Cambiar estado de una compra pendiente.

        Proceso:
        1. Bloquear la compra (SELECT FOR UPDATE) y verificar que siga 'pending'
        2. Si pasa a 'delivered': bloquear productos y sumar stock
        3. Actualizar estado y delivered_at
        4. Commit único

        El bloqueo de la fila de compra impide que dos entregas simultáneas
        acrediten el stock dos veces.

        Raises:
            HTTPException: 404 si no existe, 400 si el estado actual no es 'pending'
        """
        try:
            purchase = self.db.query(Purchase).filter(
                Purchase.id == purchase_id,
                Purchase.company_id == self.company_id
            ).with_for_update().first()
            if not purchase:
                raise HTTPException(status_code=404, detail=f"Compra {purchase_id} no encontrada")

            if purchase.status != PurchaseStatus.PENDING.value:
                raise HTTPException(
                    status_code=400,
                    detail=f"Transición de compra no permitida: {purchase.status} -> {new_status.value}"
                )

            now = datetime.now()

            if new_status == PurchaseStatus.DELIVERED:
                items = self.db.query(PurchaseItem).filter(
                    PurchaseItem.purchase_id == purchase.id,
                    PurchaseItem.company_id == self.company_id
                ).all()
                deltas = self.inventory_service.aggregate_quantities(
                    (item.product_id, item.quantity) for item in items
                )
                locked_products = self.inventory_service.lock_products(
                    self.db, self.company_id, deltas.keys()
                )
                self.inventory_service.apply_stock_changes(
                    self.db, self.company_id, locked_products, deltas,
                    movement_type="purchase_delivery",
                    reference_id=purchase.id,
                    notes=f"Entrega de compra #{purchase.id}"
                )
                purchase.delivered_at = now

            purchase.status = new_status.value
            purchase.updated_at = now

            self.db.commit()
            logger.info(f"Compra #{purchase.id}: pending -> {new_status.value}")

            return self.get_by_id(purchase.id)

        except HTTPException as e:
            logger.error(f"Error de negocio: {e.detail}")
            self.db.rollback()
            raise
        except Exception:
            logger.exception("Error en transición de compra")
            self.db.rollback()
            raise

    def get_all(self) -> List[Purchase]:
        return self.db.query(Purchase).options(
            selectinload(Purchase.items),
            selectinload(Purchase.supplier)
        ).filter(
            Purchase.company_id == self.company_id
        ).order_by(Purchase.created_at.desc(), Purchase.id.desc()).all()

    def get_by_id(self, purchase_id: int) -> Optional[Purchase]:
        return self.db.query(Purchase).options(
            selectinload(Purchase.items),
            selectinload(Purchase.supplier)
        ).filter(
            Purchase.id == purchase_id,
            Purchase.company_id == self.company_id
        ).first()
