from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from datetime import datetime
from fastapi import HTTPException
import logging

from barmanager.shared.database.models import Sale, SaleItem
from barmanager.shared.services.inventory_service import InventoryService
from .schemas import SaleCreateRequest

logger = logging.getLogger(__name__)

class SalesRepository:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id
        self.inventory_service = InventoryService()

    def create_sale_atomic(self, sale_data: SaleCreateRequest) -> Sale:
        """
        Crear venta con actualización de inventario en transacción atómica.

        Proceso:
        1. Bloquear productos (SELECT FOR UPDATE, solo de esta empresa)
        2. Crear Sale
        3. Crear SaleItems
        4. Descontar stock (quantity = quantity - n) y registrar movimientos
        5. Commit único

        Si cualquier paso falla no queda nada persistido.

        Raises:
            HTTPException: 404 si un producto no existe en la empresa
        """
        try:
            # PASO 1: BLOQUEAR productos del tenant
            product_ids = [item.product_id for item in sale_data.items]
            locked_products = self.inventory_service.lock_products(
                self.db, self.company_id, product_ids
            )

            # PASO 2: CREAR VENTA
            sale = Sale(
                company_id=self.company_id,
                subtotal=sale_data.computed_subtotal,
                discount=sale_data.discount,
                total=sale_data.computed_total,
                status=sale_data.status.value
            )
            self.db.add(sale)
            self.db.flush()  # Obtener sale.id
            logger.info(f"Venta creada con ID: {sale.id}")

            # PASO 3: CREAR SALE_ITEMS
            self.db.add_all([
                SaleItem(
                    sale_id=sale.id,
                    company_id=self.company_id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    total_price=item.computed_total
                )
                for item in sale_data.items
            ])
            logger.info(f"{len(sale_data.items)} items agregados")

            # PASO 4: DESCONTAR STOCK
            deltas = self.inventory_service.aggregate_quantities(
                (item.product_id, -item.quantity) for item in sale_data.items
            )
            self.inventory_service.apply_stock_changes(
                self.db, self.company_id, locked_products, deltas,
                movement_type="sale",
                reference_id=sale.id,
                notes=f"Venta #{sale.id}"
            )

            # PASO 5: COMMIT ÚNICO
            self.db.commit()
            logger.info(f"Transacción completada - Venta #{sale.id}")

            return self.get_by_id(sale.id)

        except HTTPException as e:
            logger.error(f"Error de negocio: {e.detail}")
            self.db.rollback()
            raise
        except Exception:
            logger.exception("Error en transacción de venta")
            self.db.rollback()
            raise

    def get_all(self) -> List[Sale]:
        return self.db.query(Sale).options(selectinload(Sale.items)).filter(
            Sale.company_id == self.company_id
        ).order_by(Sale.created_at.desc(), Sale.id.desc()).all()

    def get_by_id(self, sale_id: int) -> Optional[Sale]:
        return self.db.query(Sale).options(selectinload(Sale.items)).filter(
            Sale.id == sale_id,
            Sale.company_id == self.company_id
        ).first()

    def update_status(self, sale: Sale, new_status: str) -> Sale:
        """Cambiar estado. No afecta el stock."""
        try:
            sale.status = new_status
            sale.updated_at = datetime.now()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return self.get_by_id(sale.id)
