# barmanager/modules/products/__init__.py
"""
Módulo de Productos - Catálogo e Inventario

- CRUD de productos por empresa
- Stock mínimo para alertas de bajo stock
- Historial de movimientos de stock (solo lectura)

Arquitectura:
- router.py: Endpoints de productos
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
