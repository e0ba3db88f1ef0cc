from typing import Optional

from app.repositories.product_repo import ProductRepository


def find_existing_id(
    repo: ProductRepository, name: str, exclude_id: Optional[str] = None
) -> Optional[str]:
    """
    Id of the stored product whose name equals `name` ignoring case, else None.
    This is whole-name equality, not the substring match used by search.
    """
    existing = repo.find_by_name(name, exclude_id=exclude_id)
    return existing.id if existing else None
