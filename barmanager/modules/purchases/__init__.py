# barmanager/modules/purchases/__init__.py
"""
Módulo de Compras - Pedidos a proveedores

- Registro de compras pendientes con items
- Entrega: acredita stock una sola vez (transacción atómica)
- Cancelación sin efecto en inventario
"""

from .router import router
from .service import PurchasesService
from .repository import PurchasesRepository

__all__ = [
    "router",
    "PurchasesService",
    "PurchasesRepository"
]
