from typing import Iterable

from sqlalchemy.orm import Session

from app.models.product import Product
from app.repositories.product_repo import ProductRepository

CSV_HEADER = "name,unit,category,brand,stock,status,image"


def _q(value) -> str:
    # no escaping: a value containing '"' yields a malformed cell
    return f'"{value if value is not None else ""}"'


def render_product_line(p: Product) -> str:
    return ",".join(
        [_q(p.name), _q(p.unit), _q(p.category), _q(p.brand), str(p.stock), _q(p.status), _q(p.image)]
    )


def render_products_csv(products: Iterable[Product]) -> str:
    """Header line, a newline, then one line per product joined by newlines (no trailing newline)."""
    return CSV_HEADER + "\n" + "\n".join(render_product_line(p) for p in products)


class ExportService:
    def __init__(self, db: Session):
        self.repo = ProductRepository(db)

    def export_csv(self) -> str:
        return render_products_csv(self.repo.list_all())
