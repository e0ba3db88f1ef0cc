from typing import List

from sqlalchemy.orm import Session

from app.models.inventory_log import InventoryLog


class InventoryLogRepository:
    """Append and read stock-change history. Rows are never updated or deleted here."""

    def __init__(self, db: Session):
        self.db = db

    def append(self, product_id: str, old_stock: int, new_stock: int, changed_by: str) -> InventoryLog:
        entry = InventoryLog(
            product_id=product_id,
            old_stock=old_stock,
            new_stock=new_stock,
            changed_by=changed_by,
        )
        self.db.add(entry)
        return entry

    def for_product(self, product_id: str) -> List[InventoryLog]:
        return (
            self.db.query(InventoryLog)
            .filter(InventoryLog.product_id == product_id)
            .order_by(InventoryLog.created_at.desc())
            .all()
        )
