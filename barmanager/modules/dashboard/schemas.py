from pydantic import BaseModel, Field

class DashboardStats(BaseModel):
    daily_sales: str = Field(..., description="Ventas pagadas de hoy")
    orders: int = Field(..., description="Ventas creadas hoy (cualquier estado)")
    products: int
    monthly_revenue: str = Field(..., description="Ventas pagadas del mes")
    low_stock_products: int = Field(..., description="0 < stock <= stock mínimo")
    out_of_stock_products: int = Field(..., description="stock == 0")
    total_receivable: str = Field(..., description="Cuentas por cobrar pendientes")
    total_payable: str = Field(..., description="Cuentas por pagar pendientes")
