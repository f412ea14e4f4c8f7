"""
Product 모델
"""

from sqlalchemy import Column, Integer, Numeric, String, Text
from app.db.database import Base


class Product(Base):
    """
    상품 모델

    Attributes:
        id: 상품 고유 ID (Primary Key, 저장 시 자동 할당)
        name: 상품명 (Not Null)
        description: 상품 설명 (Nullable)
        price: 가격 (Not Null, 소수점 2자리) - 범위 조회 대상
        quantity: 재고 수량 (Not Null) - 임계값 조회 대상
    """

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        """Product 객체의 문자열 표현"""
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"

    def __str__(self) -> str:
        return f"Product: {self.name}"
