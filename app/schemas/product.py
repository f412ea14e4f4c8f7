"""
상품 관련 Pydantic 스키마

API 요청/응답 모델을 정의합니다.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ProductRequest(BaseModel):
    """
    상품 생성/수정 요청 스키마

    요청 본문에 id가 포함되어도 무시됩니다.

    Example:
        {
            "name": "Smartphone X",
            "description": "6.1 inch OLED",
            "price": 799.99,
            "quantity": 10
        }
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="상품명",
        examples=["Smartphone X"],
    )
    description: Optional[str] = Field(
        None,
        description="상품 설명 (선택)",
        examples=["6.1 inch OLED"],
    )
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="상품 가격 (0 이상, 소수점 2자리)",
        examples=[799.99],
    )
    quantity: int = Field(
        ...,
        ge=0,
        description="재고 수량 (0 이상)",
        examples=[10],
    )


class ProductResponse(BaseModel):
    """
    상품 정보 응답 스키마

    Example:
        {
            "id": 1,
            "name": "Smartphone X",
            "description": "6.1 inch OLED",
            "price": 799.99,
            "quantity": 10
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="상품 ID")
    name: str = Field(..., description="상품명")
    description: Optional[str] = Field(None, description="상품 설명")
    price: Decimal = Field(..., description="상품 가격")
    quantity: int = Field(..., description="재고 수량")

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        # 클라이언트는 숫자 타입의 price를 기대함
        return float(price)
