from fastapi import APIRouter

from .endpoints.books import router as books_router
from .endpoints.health import router as health_router
from .endpoints.recommend import router as recommend_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(books_router)
api_router.include_router(recommend_router)
