from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from barmanager.shared.database.models import Supplier
from .repository import SuppliersRepository
from .schemas import SupplierCreate, SupplierUpdate, SupplierResponse

class SuppliersService:
    def __init__(self, db: Session, company_id: int):
        self.db = db
        self.repository = SuppliersRepository(db, company_id)

    def get_or_404(self, supplier_id: int) -> Supplier:
        supplier = self.repository.get_by_id(supplier_id)
        if not supplier:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Proveedor {supplier_id} no encontrado"
            )
        return supplier

    async def list_suppliers(self) -> List[SupplierResponse]:
        return [SupplierResponse.model_validate(s) for s in self.repository.get_all()]

    async def get_supplier(self, supplier_id: int) -> SupplierResponse:
        return SupplierResponse.model_validate(self.get_or_404(supplier_id))

    async def create_supplier(self, data: SupplierCreate) -> SupplierResponse:
        supplier = self.repository.create(data.model_dump())
        return SupplierResponse.model_validate(supplier)

    async def update_supplier(self, supplier_id: int, data: SupplierUpdate) -> SupplierResponse:
        supplier = self.get_or_404(supplier_id)
        supplier = self.repository.update(supplier, data.model_dump(exclude_unset=True, exclude_none=True))
        return SupplierResponse.model_validate(supplier)

    async def delete_supplier(self, supplier_id: int) -> None:
        supplier = self.get_or_404(supplier_id)
        if self.repository.is_referenced(supplier.id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="El proveedor tiene compras o cuentas por pagar y no puede eliminarse"
            )
        self.repository.delete(supplier)
