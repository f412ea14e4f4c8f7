"""상품 관리 서비스."""

import logging
from decimal import Decimal
from typing import Optional

from app.core.exceptions import ProductNotFoundException
from app.models import Product
from app.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """상품 생성, 조회, 수정, 삭제 서비스."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def save_product(self, product: Product) -> Product:
        """
        상품을 저장합니다 (id가 없으면 생성, 있으면 전체 필드 갱신).

        Args:
            product: 저장할 Product 객체

        Returns:
            저장된 Product 객체
        """
        saved = self.repository.save(product)
        logger.info("Saved product id=%s name=%r", saved.id, saved.name)
        return saved

    def get_all_products(self) -> list[Product]:
        return self.repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.repository.find_by_id(product_id)

    def search_products_by_name(self, name: str) -> list[Product]:
        return self.repository.find_by_name_containing_ignore_case(name)

    def find_products_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[Product]:
        return self.repository.find_by_price_between(min_price, max_price)

    def find_products_with_quantity_greater_than(self, quantity: int) -> list[Product]:
        return self.repository.find_by_quantity_greater_than(quantity)

    def update_product(self, product_id: int, details: Product) -> Product:
        """
        기존 상품의 필드를 새 값으로 덮어쓰고 저장합니다.

        name, description, price, quantity만 복사하며 id는 변경하지 않습니다.

        Args:
            product_id: 수정할 상품 ID
            details: 새 필드 값을 담은 Product (id는 무시됨)

        Returns:
            수정된 Product 객체

        Raises:
            ProductNotFoundException: 상품이 존재하지 않는 경우
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            logger.warning("Update requested for missing product id=%s", product_id)
            raise ProductNotFoundException(product_id)

        product.name = details.name
        product.description = details.description
        product.price = details.price
        product.quantity = details.quantity

        updated = self.repository.save(product)
        logger.info("Updated product id=%s", updated.id)
        return updated

    def delete_product(self, product_id: int) -> None:
        """
        상품을 삭제합니다.

        Raises:
            ProductNotFoundException: 상품이 존재하지 않는 경우
        """
        if not self.repository.exists_by_id(product_id):
            logger.warning("Delete requested for missing product id=%s", product_id)
            raise ProductNotFoundException(product_id)

        self.repository.delete_by_id(product_id)
        logger.info("Deleted product id=%s", product_id)
