from fastapi import APIRouter

from app.api.routers import products as products_router
from app.api.routers import orders as orders_router
from app.api.routers import payments as payments_router

router = APIRouter()

# storefront routes
router.include_router(products_router.router)

# checkout routes
router.include_router(orders_router.router)
router.include_router(payments_router.router)
