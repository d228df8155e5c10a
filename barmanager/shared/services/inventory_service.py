from typing import Dict, Iterable, List, Tuple
from datetime import datetime
import logging

from sqlalchemy.orm import Session
from fastapi import HTTPException

from barmanager.shared.database.models import Product, StockMovement

logger = logging.getLogger(__name__)

class InventoryService:
    """
    Ajustes de stock dentro de una transacción abierta por el llamador.

    Product.quantity solo se modifica aquí, y solo lo invocan la creación de
    ventas y la entrega de compras. Ninguno de los métodos hace commit.
    """

    @staticmethod
    def lock_products(
        db: Session,
        company_id: int,
        product_ids: Iterable[int]
    ) -> Dict[int, Product]:
        """
        Bloquear (SELECT FOR UPDATE) los productos del tenant.

        Un producto inexistente o de otra empresa se reporta como no encontrado.

        Raises:
            HTTPException 404: si algún producto no pertenece a la empresa
        """
        ids = sorted(set(product_ids))
        # Orden fijo de bloqueo para evitar deadlocks entre ventas concurrentes
        products = db.query(Product).filter(
            Product.company_id == company_id,
            Product.id.in_(ids)
        ).order_by(Product.id).with_for_update().all()

        found = {product.id: product for product in products}
        missing = [pid for pid in ids if pid not in found]
        if missing:
            raise HTTPException(
                status_code=404,
                detail=f"Productos no encontrados: {', '.join(str(pid) for pid in missing)}"
            )
        return found

    @staticmethod
    def aggregate_quantities(items: Iterable[Tuple[int, int]]) -> Dict[int, int]:
        """Sumar cantidades por producto: [(product_id, qty), ...] -> {product_id: qty}"""
        totals: Dict[int, int] = {}
        for product_id, quantity in items:
            totals[product_id] = totals.get(product_id, 0) + quantity
        return totals

    @staticmethod
    def apply_stock_changes(
        db: Session,
        company_id: int,
        locked_products: Dict[int, Product],
        deltas: Dict[int, int],
        movement_type: str,
        reference_id: int,
        notes: str
    ) -> List[StockMovement]:
        """
        Aplicar deltas de stock como expresión en BD (quantity = quantity + delta)
        y registrar un StockMovement por producto.

        No se limita a cero: una venta puede dejar stock negativo.
        """
        movements = []

        for product_id, delta in deltas.items():
            product = locked_products[product_id]
            quantity_before = product.quantity

            db.query(Product).filter(
                Product.id == product_id,
                Product.company_id == company_id
            ).update(
                {
                    Product.quantity: Product.quantity + delta,
                    Product.updated_at: datetime.now()
                },
                synchronize_session=False
            )
            db.refresh(product)

            if product.quantity < 0:
                logger.warning(
                    f"Stock negativo - Producto {product.id} ({product.code}): {product.quantity}"
                )

            movements.append(StockMovement(
                company_id=company_id,
                product_id=product_id,
                movement_type=movement_type,
                quantity_change=delta,
                quantity_before=quantity_before,
                quantity_after=product.quantity,
                reference_id=reference_id,
                notes=notes
            ))

        db.add_all(movements)
        return movements

    @staticmethod
    def get_movements(db: Session, company_id: int, product_id: int) -> List[StockMovement]:
        """Historial de movimientos de un producto (más recientes primero)"""
        return db.query(StockMovement).filter(
            StockMovement.company_id == company_id,
            StockMovement.product_id == product_id
        ).order_by(StockMovement.created_at.desc(), StockMovement.id.desc()).all()
