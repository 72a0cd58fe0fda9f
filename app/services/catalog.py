from typing import Dict, List, Optional

from app.schemas.products import ProductOut

PRODUCTS: List[ProductOut] = [
    ProductOut(
        id="lemon-pickle",
        name="Lemon Pickle",
        description="Tangy and spicy handcrafted lemon pickle made with fresh ingredients",
        price=250,
        image="/static/lemon-pickle.svg",
        tag="Bestseller",
    ),
    ProductOut(
        id="mango-pickle",
        name="Mango Pickle",
        description="Traditional mango pickle with authentic spices and rich flavor",
        price=300,
        image="/static/mango-pickle.svg",
        tag="Premium",
    ),
]

_by_id: Dict[str, ProductOut] = {p.id: p for p in PRODUCTS}


def list_products() -> List[ProductOut]:
    return list(PRODUCTS)


def get_product(product_id: str) -> Optional[ProductOut]:
    return _by_id.get(product_id)
