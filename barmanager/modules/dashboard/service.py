from sqlalchemy.orm import Session
import logging

from .repository import DashboardRepository
from .schemas import DashboardStats

logger = logging.getLogger(__name__)

class DashboardService:
    def __init__(self, db: Session, company_id: int):
        self.company_id = company_id
        self.repository = DashboardRepository(db, company_id)

    async def get_stats(self) -> DashboardStats:
        stats = self.repository.get_stats()
        logger.debug(f"Dashboard empresa {self.company_id}: {stats}")
        return DashboardStats(**stats)
