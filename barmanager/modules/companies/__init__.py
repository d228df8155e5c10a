# barmanager/modules/companies/__init__.py
"""
Módulo de Empresas - Registro y perfil del tenant
"""

from .router import router
from .service import CompaniesService
from .repository import CompaniesRepository

__all__ = [
    "router",
    "CompaniesService",
    "CompaniesRepository"
]
