from typing import Any, List, Optional

from sqlalchemy.orm import Session

from app.models.inventory_log import InventoryLog
from app.models.product import Product
from app.repositories.inventory_log_repo import InventoryLogRepository
from app.repositories.product_repo import NameConflict, ProductRepository
from app.schemas.product_schema import ProductCandidate, ProductCreate, ProductUpdate
from app.services.duplicate_resolver import find_existing_id
from app.services.normalizer import DEFAULT_BRAND, DEFAULT_CATEGORY, DEFAULT_UNIT
from app.utils.logger import get_logger
from app.utils.transactions import row_transaction

log = get_logger("inventory.products")

STOCK_ERROR = "Stock must be a number >= 0"
# widest value a signed 64-bit INTEGER column holds
MAX_STOCK = 2**63 - 1
NAME_REQUIRED = "Product name is required"


class ProductNotFound(Exception):
    def __init__(self, message: str = "Product not found"):
        super().__init__(message)


class ProductValidationError(Exception):
    pass


def validate_stock(value: Any) -> int:
    """
    Strict stock check for API writes. Accepts non-negative integers, floats
    with no fractional part and integral numeric strings; rejects everything
    else (bool, None, "abc", 2.5, -1) rather than clamping.
    """
    if value is None or isinstance(value, bool):
        raise ProductValidationError(STOCK_ERROR)
    if isinstance(value, int):
        stock = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ProductValidationError(STOCK_ERROR)
        stock = int(value)
    elif isinstance(value, str):
        try:
            stock = int(value.strip())
        except ValueError:
            raise ProductValidationError(STOCK_ERROR)
    else:
        raise ProductValidationError(STOCK_ERROR)
    if stock < 0 or stock > MAX_STOCK:
        raise ProductValidationError(STOCK_ERROR)
    return stock


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)
        self.logs = InventoryLogRepository(db)

    def list_products(self, category: Optional[str] = None) -> List[Product]:
        if category == "all":
            category = None
        return self.repo.list_all(category=category)

    def search_products(self, name: str) -> List[Product]:
        return self.repo.search(name)

    def list_categories(self) -> List[str]:
        return self.repo.categories()

    def get_product(self, product_id: str) -> Product:
        p = self.repo.get(product_id)
        if not p:
            raise ProductNotFound()
        return p

    def create_product(self, payload: ProductCreate) -> Product:
        name = (payload.name or "").strip()
        if not name:
            raise ProductValidationError(NAME_REQUIRED)
        stock = validate_stock(payload.stock)
        if find_existing_id(self.repo, name):
            raise NameConflict()

        candidate = ProductCandidate(
            name=name,
            unit=payload.unit or DEFAULT_UNIT,
            category=payload.category or DEFAULT_CATEGORY,
            brand=payload.brand or DEFAULT_BRAND,
            stock=stock,
            image=payload.image or None,
        )
        with row_transaction(self.db):
            p = self.repo.insert(candidate)
        log.info("created product %s (%r)", p.id, p.name)
        return p

    def update_product(self, product_id: str, changes: ProductUpdate, changed_by: str) -> Product:
        """
        Apply a partial update. Everything is validated before the record is
        touched, so a rejected request leaves it unchanged. A stock change
        recomputes status and appends one inventory log row in the same commit.
        """
        p = self.get_product(product_id)
        supplied = changes.model_fields_set

        name = None
        if "name" in supplied:
            name = (changes.name or "").strip()
            if not name:
                raise ProductValidationError(NAME_REQUIRED)
            if find_existing_id(self.repo, name, exclude_id=p.id):
                raise NameConflict()

        stock = None
        if "stock" in supplied:
            stock = validate_stock(changes.stock)

        with row_transaction(self.db):
            if name is not None:
                p.name = name
            for attr in ("unit", "category", "brand"):
                value = getattr(changes, attr)
                if attr in supplied and value:
                    setattr(p, attr, value)
            if "image" in supplied:
                p.image = changes.image or None
            if stock is not None and stock != p.stock:
                self.logs.append(p.id, p.stock, stock, changed_by)
                p.stock = stock
            self.repo.flush()

        log.info("updated product %s fields=%s", p.id, sorted(supplied))
        return p

    def delete_product(self, product_id: str):
        p = self.get_product(product_id)
        with row_transaction(self.db):
            self.repo.delete(p)
        log.info("deleted product %s", product_id)

    def product_history(self, product_id: str) -> List[InventoryLog]:
        return self.logs.for_product(product_id)
