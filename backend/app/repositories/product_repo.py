from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.product import Product
from app.schemas.product_schema import ProductCandidate

NAME_INDEX = "uq_products_name_lower"


class StoreError(Exception):
    """A write the product store refused or could not perform."""


class NameConflict(StoreError):
    def __init__(self, message: str = "Product name already exists"):
        super().__init__(message)


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: str) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def find_by_name(self, name: str, exclude_id: Optional[str] = None) -> Optional[Product]:
        """
        Return the product whose name equals `name` ignoring case, or None.
        Full-value comparison on lower(name), the same expression the unique
        index is built on; `exclude_id` leaves one record out (used on update).
        """
        qry = self.db.query(Product).filter(func.lower(Product.name) == func.lower(name))
        if exclude_id is not None:
            qry = qry.filter(Product.id != exclude_id)
        return qry.first()

    def list_all(self, category: Optional[str] = None) -> List[Product]:
        query = self.db.query(Product)
        if category:
            query = query.filter(Product.category == category)
        return query.order_by(Product.name).all()

    def search(self, name: str) -> List[Product]:
        like = f"%{name}%"
        return self.db.query(Product).filter(Product.name.ilike(like)).order_by(Product.name).all()

    def categories(self) -> List[str]:
        rows = self.db.query(Product.category).distinct().order_by(Product.category).all()
        return [r[0] for r in rows]

    def insert(self, candidate: ProductCandidate) -> Product:
        p = Product(
            name=candidate.name,
            unit=candidate.unit,
            category=candidate.category,
            brand=candidate.brand,
            stock=candidate.stock,
            image=candidate.image,
        )
        self.db.add(p)
        self.flush()
        return p

    def delete(self, product: Product):
        self.db.delete(product)
        self.flush()

    def flush(self):
        """
        Flush pending writes, translating driver errors: a hit on the
        case-insensitive name index becomes NameConflict, anything else StoreError.
        The caller owns the transaction and must roll back after either.
        """
        try:
            self.db.flush()
        except IntegrityError as e:
            if NAME_INDEX in str(e.orig):
                raise NameConflict() from e
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        except OverflowError as e:
            # driver refuses ints wider than the INTEGER column
            raise StoreError(str(e)) from e
