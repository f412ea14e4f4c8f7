"""
상품 CRUD API 엔드포인트

상품 생성, 조회, 수정, 삭제 및 조건 검색 기능을 제공합니다.
"""

from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from app.api.deps import get_product_service
from app.core.exceptions import ProductNotFoundException
from app.models import Product
from app.schemas.product import ProductRequest, ProductResponse
from app.services.product_service import ProductService


router = APIRouter()


@router.get("", response_model=List[ProductResponse])
def list_products(service: ProductService = Depends(get_product_service)):
    """
    모든 상품 목록을 조회합니다.

    Returns:
        List[ProductResponse]: 상품 목록 (id 순)
    """
    return service.get_all_products()


@router.get("/search", response_model=List[ProductResponse])
def search_products(
    name: str = Query(..., description="상품명에 포함될 문자열 (대소문자 무시)"),
    service: ProductService = Depends(get_product_service),
):
    """
    상품명으로 상품을 검색합니다.

    Example:
        GET /api/products/search?name=phone
        -> "Phone", "PHONE", "smartphone" 모두 매칭
    """
    return service.search_products_by_name(name)


@router.get("/price-range", response_model=List[ProductResponse])
def find_products_by_price_range(
    min_price: Decimal = Query(..., ge=0, description="최소 가격 (포함)"),
    max_price: Decimal = Query(..., ge=0, description="최대 가격 (포함)"),
    service: ProductService = Depends(get_product_service),
):
    """
    가격 범위로 상품을 조회합니다 (양 끝 포함).

    Raises:
        HTTPException 422: min_price가 max_price보다 큰 경우
    """
    if min_price > max_price:
        raise HTTPException(
            status_code=422,
            detail="min_price must be less than or equal to max_price",
        )

    return service.find_products_by_price_range(min_price, max_price)


@router.get("/quantity", response_model=List[ProductResponse])
def find_products_with_quantity_greater_than(
    greater_than: int = Query(..., description="이 값보다 재고가 많은 상품만 조회"),
    service: ProductService = Depends(get_product_service),
):
    """재고 수량이 greater_than보다 큰 상품을 조회합니다 (같은 값은 제외)."""
    return service.find_products_with_quantity_greater_than(greater_than)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """
    특정 상품의 상세 정보를 조회합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    product = service.get_product_by_id(product_id)

    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id {product_id} not found",
        )

    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    """
    새 상품을 생성합니다.

    Example:
        Request:
        ```json
        {
            "name": "Smartphone X",
            "description": "6.1 inch OLED",
            "price": 799.99,
            "quantity": 10
        }
        ```

        Response (201):
        ```json
        {
            "id": 1,
            "name": "Smartphone X",
            "description": "6.1 inch OLED",
            "price": 799.99,
            "quantity": 10
        }
        ```
    """
    product = Product(**product_data.model_dump())
    return service.save_product(product)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    """
    상품 정보를 수정합니다 (name, description, price, quantity 전체 덮어쓰기).

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        return service.update_product(
            product_id, Product(**product_data.model_dump())
        )

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
):
    """
    상품을 삭제합니다.

    Raises:
        HTTPException 404: 상품을 찾을 수 없는 경우
    """
    try:
        service.delete_product(product_id)

    except ProductNotFoundException as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
