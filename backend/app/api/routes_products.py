from typing import List, Optional

from fastapi import APIRouter, Depends, File, Header, HTTPException, Query, Response, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.db import get_db
from app.repositories.product_repo import NameConflict
from app.schemas.product_schema import (
    ImportResult,
    InventoryLogOut,
    ProductCreate,
    ProductOut,
    ProductUpdate,
)
from app.services.export_service import ExportService
from app.services.import_service import ImportService
from app.services.product_service import ProductNotFound, ProductService, ProductValidationError

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductOut], summary="List products")
def list_products(
    category: Optional[str] = Query(None, description="exact category; 'all' for no filter"),
    db: Session = Depends(get_db),
):
    return ProductService(db).list_products(category=category)


@router.get("/search", response_model=List[ProductOut], summary="Search products by name")
def search_products(name: str = Query("", description="case-insensitive substring"), db: Session = Depends(get_db)):
    return ProductService(db).search_products(name)


@router.get("/categories", response_model=List[str], summary="Distinct categories")
def list_categories(db: Session = Depends(get_db)):
    return ProductService(db).list_categories()


@router.get("/export", summary="Export all products as CSV")
def export_products(db: Session = Depends(get_db)):
    body = ExportService(db).export_csv()
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{settings.EXPORT_FILENAME}"'},
    )


@router.post("/import", response_model=ImportResult, summary="Bulk import products from CSV")
def import_products(file: Optional[UploadFile] = File(None), db: Session = Depends(get_db)):
    """
    multipart field `file` holding CSV text. Always 200 with a summary, even
    when every row was skipped: { "added": 1, "skipped": 2, "duplicates": [{"name", "existingId"}] }
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")
    text = file.file.read().decode("utf-8-sig", errors="replace")
    return ImportService(db).import_csv(text)


@router.get("/{product_id}", response_model=ProductOut, summary="Get product")
def get_product(product_id: str, db: Session = Depends(get_db)):
    try:
        return ProductService(db).get_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{product_id}/history", response_model=List[InventoryLogOut], summary="Stock change history")
def product_history(product_id: str, db: Session = Depends(get_db)):
    return ProductService(db).product_history(product_id)


@router.post("", response_model=ProductOut, status_code=201, summary="Create product")
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    try:
        return ProductService(db).create_product(payload)
    except (ProductValidationError, NameConflict) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{product_id}", response_model=ProductOut, summary="Update product")
def update_product(
    product_id: str,
    payload: ProductUpdate,
    x_changed_by: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    """
    payload: any subset of { "name", "unit", "category", "brand", "stock", "image" }
    `status` is recomputed from stock and cannot be set directly.
    """
    svc = ProductService(db)
    try:
        return svc.update_product(product_id, payload, changed_by=x_changed_by or settings.DEFAULT_CHANGED_BY)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (ProductValidationError, NameConflict) as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{product_id}", summary="Delete product")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    try:
        ProductService(db).delete_product(product_id)
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True}
