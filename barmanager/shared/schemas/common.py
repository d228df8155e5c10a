# barmanager/shared/schemas/common.py
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from decimal import Decimal

class BaseResponse(BaseModel):
    success: bool
    message: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

class FieldError(BaseModel):
    field: str
    message: str
    type: Optional[str] = None

class ErrorResponse(BaseResponse):
    success: bool = False
    error_code: Optional[str] = None
    errors: Optional[List[FieldError]] = None
    details: Optional[Dict[str, Any]] = None

class MessageResponse(BaseResponse):
    success: bool = True

class ActiveUpdate(BaseModel):
    """Body de activar/desactivar empresas y usuarios"""
    active: bool


def money(value: Optional[Decimal]) -> str:
    """Formatear montos agregados; "0" cuando no hay filas"""
    if value is None:
        return "0"
    return str(Decimal(value).quantize(Decimal("0.01")))
