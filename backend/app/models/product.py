import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String, func
from sqlalchemy.orm import validates

from app.db import Base

IN_STOCK = "In Stock"
OUT_OF_STOCK = "Out of Stock"


def derive_status(stock: int) -> str:
    return IN_STOCK if stock > 0 else OUT_OF_STOCK


def _utcnow():
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(256), nullable=False, index=True)
    unit = Column(String(32), nullable=False, default="pcs")
    category = Column(String(128), nullable=False, default="Uncategorized", index=True)
    brand = Column(String(128), nullable=False, default="Unknown")
    stock = Column(Integer, nullable=False, default=0)
    status = Column(String(16), nullable=False, default=OUT_OF_STOCK)
    image = Column(String(512), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    @validates("stock")
    def _sync_status(self, key, value):
        # status follows stock on every assignment, including the constructor
        self.status = derive_status(value)
        return value

    def __repr__(self):
        return f"<Product id={self.id} name={self.name} stock={self.stock}>"


# case-insensitive uniqueness; makes insert-if-absent atomic
Index("uq_products_name_lower", func.lower(Product.name), unique=True)
