# backend/app/schemas/product_schema.py
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.product import derive_status


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    unit: str
    category: str
    brand: str
    stock: int
    status: str
    image: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProductCreate(BaseModel):
    name: str
    unit: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    # validated by the service so the caller gets a precise message
    stock: Any = 0
    image: Optional[str] = None


class ProductUpdate(BaseModel):
    """
    Partial update: one optional slot per mutable attribute. Only the fields
    present in the request body (`model_fields_set`) are applied. `status`
    is not accepted; it always follows `stock`.
    """

    name: Optional[str] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    stock: Any = None
    image: Optional[str] = None


class ProductCandidate(BaseModel):
    """A normalized import row, ready for the duplicate check and insert."""

    name: str
    unit: str = "pcs"
    category: str = "Uncategorized"
    brand: str = "Unknown"
    stock: int = 0
    image: Optional[str] = None

    @property
    def status(self) -> str:
        return derive_status(self.stock)


class DuplicateOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    name: str
    existing_id: str = Field(alias="existingId")


class ImportResult(BaseModel):
    added: int = 0
    skipped: int = 0
    duplicates: List[DuplicateOut] = Field(default_factory=list)


class InventoryLogOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    product_id: str
    old_stock: int
    new_stock: int
    changed_by: str
    created_at: datetime
