import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from app.db import Base


class InventoryLog(Base):
    """Append-only record of a product's stock changing from one value to another."""

    __tablename__ = "inventory_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # plain reference, no FK: logs are kept after the product is deleted
    product_id = Column(String(36), nullable=False, index=True)
    old_stock = Column(Integer, nullable=False)
    new_stock = Column(Integer, nullable=False)
    changed_by = Column(String(128), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
