"""데이터 접근 저장소."""

from app.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
