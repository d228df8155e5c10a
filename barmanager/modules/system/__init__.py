# barmanager/modules/system/__init__.py
"""
Módulo System - Administración global de tenants

- Alta, listado y activación de empresas
- Sub-usuarios por empresa
- Solo accesible por el administrador del sistema
"""

from .router import router
from .service import SystemService
from .repository import SystemRepository

__all__ = [
    "router",
    "SystemService",
    "SystemRepository"
]
