# barmanager/modules/dashboard/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Any, Dict, Optional
from datetime import datetime, timedelta

from barmanager.shared.database.models import (
    Sale, Product, AccountReceivable, AccountPayable
)
from barmanager.shared.schemas.common import money

class DashboardRepository:
    """Consultas agregadas del dashboard (solo lectura)"""

    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.company_id = company_id

    def get_stats(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Métricas del día (hora local) y del mes calendario.

        - Hoy: [00:00, 00:00 del día siguiente)
        - Mes: desde el día 1 a las 00:00
        """
        now = now or datetime.now()
        today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
        tomorrow_start = today_start + timedelta(days=1)
        month_start = today_start.replace(day=1)

        daily_sales = self.db.query(func.sum(Sale.total)).filter(
            Sale.company_id == self.company_id,
            Sale.status == 'paid',
            Sale.created_at >= today_start,
            Sale.created_at < tomorrow_start
        ).scalar()

        # Pedidos del día en cualquier estado
        orders = self.db.query(func.count(Sale.id)).filter(
            Sale.company_id == self.company_id,
            Sale.created_at >= today_start,
            Sale.created_at < tomorrow_start
        ).scalar()

        products = self.db.query(func.count(Product.id)).filter(
            Product.company_id == self.company_id
        ).scalar()

        monthly_revenue = self.db.query(func.sum(Sale.total)).filter(
            Sale.company_id == self.company_id,
            Sale.status == 'paid',
            Sale.created_at >= month_start
        ).scalar()

        low_stock_products = self.db.query(func.count(Product.id)).filter(
            Product.company_id == self.company_id,
            Product.quantity > 0,
            Product.quantity <= Product.min_stock
        ).scalar()

        out_of_stock_products = self.db.query(func.count(Product.id)).filter(
            Product.company_id == self.company_id,
            Product.quantity == 0
        ).scalar()

        total_receivable = self.db.query(func.sum(AccountReceivable.amount)).filter(
            AccountReceivable.company_id == self.company_id,
            AccountReceivable.status == 'pending'
        ).scalar()

        total_payable = self.db.query(func.sum(AccountPayable.amount)).filter(
            AccountPayable.company_id == self.company_id,
            AccountPayable.status == 'pending'
        ).scalar()

        return {
            "daily_sales": money(daily_sales),
            "orders": orders or 0,
            "products": products or 0,
            "monthly_revenue": money(monthly_revenue),
            "low_stock_products": low_stock_products or 0,
            "out_of_stock_products": out_of_stock_products or 0,
            "total_receivable": money(total_receivable),
            "total_payable": money(total_payable)
        }
