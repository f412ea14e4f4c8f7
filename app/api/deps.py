"""
FastAPI 의존성 주입 함수들

데이터베이스 세션, 서비스 객체 등의 의존성을 제공합니다.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.repositories.product_repository import ProductRepository
from app.services.product_service import ProductService


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """
    요청 단위 ProductService를 생성하는 의존성 함수

    Args:
        db: 데이터베이스 세션

    Returns:
        ProductService: 요청의 DB 세션에 바인딩된 서비스

    Example:
        @router.get("/products")
        def list_products(service: ProductService = Depends(get_product_service)):
            return service.get_all_products()
    """
    return ProductService(ProductRepository(db))
