"""상품 저장소 (Storage Access)."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Product

logger = logging.getLogger(__name__)

# INTEGER 컬럼이 표현할 수 있는 범위 (64-bit signed)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _in_int64_range(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _escape_like(value: str) -> str:
    """LIKE 패턴의 와일드카드 문자를 리터럴로 이스케이프합니다."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository:
    """products 테이블에 대한 CRUD 및 조건 조회."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, product: Product) -> Product:
        """
        상품을 저장합니다.

        id가 없으면 INSERT, 있으면 해당 id의 모든 컬럼을 UPDATE합니다
        (해당 id가 없으면 INSERT).

        Args:
            product: 저장할 Product 객체

        Returns:
            저장된 Product 객체 (INSERT 시 id 할당됨)

        Raises:
            SQLAlchemyError: DB 오류 시 (세션은 롤백됨)
        """
        product_id = product.id
        try:
            if product_id is None:
                self.db.add(product)
            else:
                product = self.db.merge(product)
            self.db.commit()
            self.db.refresh(product)
            return product

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to save product id=%s", product_id)
            raise

    def find_all(self) -> list[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        if not _in_int64_range(product_id):
            return None
        return self.db.query(Product).filter(Product.id == product_id).first()

    def exists_by_id(self, product_id: int) -> bool:
        if not _in_int64_range(product_id):
            return False
        return (
            self.db.query(Product.id).filter(Product.id == product_id).first()
            is not None
        )

    def delete_by_id(self, product_id: int) -> None:
        """
        id로 상품을 삭제합니다. 대상이 없으면 아무 일도 하지 않습니다.

        Raises:
            SQLAlchemyError: DB 오류 시 (세션은 롤백됨)
        """
        if not _in_int64_range(product_id):
            return

        try:
            self.db.query(Product).filter(Product.id == product_id).delete(
                synchronize_session="fetch"
            )
            self.db.commit()

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete product id=%s", product_id)
            raise

    def find_by_name_containing_ignore_case(self, name: str) -> list[Product]:
        """상품명에 name이 포함된 상품 목록 (대소문자 무시)"""
        pattern = f"%{_escape_like(name)}%"
        return (
            self.db.query(Product)
            .filter(Product.name.ilike(pattern, escape="\\"))
            .order_by(Product.id)
            .all()
        )

    def find_by_price_between(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[Product]:
        """min_price <= price <= max_price 인 상품 목록 (양 끝 포함)"""
        return (
            self.db.query(Product)
            .filter(Product.price.between(min_price, max_price))
            .order_by(Product.id)
            .all()
        )

    def find_by_quantity_greater_than(self, quantity: int) -> list[Product]:
        """재고 수량이 quantity보다 큰 상품 목록 (quantity 자체는 제외)"""
        if quantity >= INT64_MAX:
            return []
        quantity = max(quantity, INT64_MIN)
        return (
            self.db.query(Product)
            .filter(Product.quantity > quantity)
            .order_by(Product.id)
            .all()
        )
