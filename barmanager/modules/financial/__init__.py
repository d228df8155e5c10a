# barmanager/modules/financial/__init__.py
"""
Módulo Financiero - Cuentas por cobrar y por pagar
"""

from .router import receivable_router, payable_router
from .service import ReceivablesService, PayablesService
from .repository import AccountsRepository

__all__ = [
    "receivable_router",
    "payable_router",
    "ReceivablesService",
    "PayablesService",
    "AccountsRepository"
]
