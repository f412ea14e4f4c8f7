"""
Pydantic 스키마 모듈
"""

from app.schemas.product import ProductRequest, ProductResponse

__all__ = [
    "ProductRequest",
    "ProductResponse",
]
