# barmanager/modules/dashboard/__init__.py
"""
Módulo Dashboard - Métricas agregadas por empresa
"""

from .router import router
from .service import DashboardService
from .repository import DashboardRepository

__all__ = [
    "router",
    "DashboardService",
    "DashboardRepository"
]
