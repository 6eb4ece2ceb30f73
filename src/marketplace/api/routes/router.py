# src/marketplace/api/routes/router.py
from fastapi import APIRouter

from marketplace.api.routes import favorites, products, users

api_router = APIRouter(prefix="/api")
api_router.include_router(products.router)
api_router.include_router(favorites.router)
api_router.include_router(users.router)
