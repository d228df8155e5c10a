# barmanager/api/v1/router.py
from fastapi import APIRouter
from barmanager.api.v1.auth import router as auth_router
from barmanager.modules.dashboard import router as dashboard_router
from barmanager.modules.products import router as products_router
from barmanager.modules.sales import router as sales_router
from barmanager.modules.suppliers import router as suppliers_router
from barmanager.modules.purchases import router as purchases_router
from barmanager.modules.financial import receivable_router, payable_router
from barmanager.modules.companies import router as companies_router
from barmanager.modules.system import router as system_router

# Router principal de la API
api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Dashboard"]
)

api_router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)

api_router.include_router(
    sales_router,
    prefix="/sales",
    tags=["Sales"]
)

api_router.include_router(
    suppliers_router,
    prefix="/suppliers",
    tags=["Suppliers"]
)

api_router.include_router(
    purchases_router,
    prefix="/purchases",
    tags=["Purchases"]
)

api_router.include_router(
    receivable_router,
    prefix="/accounts-receivable",
    tags=["Financial"]
)

api_router.include_router(
    payable_router,
    prefix="/accounts-payable",
    tags=["Financial"]
)

api_router.include_router(
    companies_router,
    prefix="/companies",
    tags=["Companies"]
)

api_router.include_router(
    system_router,
    prefix="/system",
    tags=["System - Administrador"]
)
