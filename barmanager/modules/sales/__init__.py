# barmanager/modules/sales/__init__.py
"""
Módulo de Ventas

- Registro de ventas con items
- Actualización automática de inventario (descuento de stock)
- Cambio de estado: pending -> paid / cancelled

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Lógica de negocio de ventas
- repository.py: Acceso a datos y transacción atómica
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
