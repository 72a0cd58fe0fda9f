from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.schemas.products import ProductOut
from app.services import catalog

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products():
    return catalog.list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str):
    product = catalog.get_product(product_id)
    if not product:
        return JSONResponse(status_code=404, content={"error": "Product not found"})
    return product
