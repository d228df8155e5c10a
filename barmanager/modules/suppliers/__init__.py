# barmanager/modules/suppliers/__init__.py
"""
Módulo de Proveedores - CRUD de proveedores por empresa
"""

from .router import router
from .service import SuppliersService
from .repository import SuppliersRepository

__all__ = [
    "router",
    "SuppliersService",
    "SuppliersRepository"
]
