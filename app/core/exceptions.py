"""
커스텀 예외 정의

애플리케이션 전역에서 사용되는 커스텀 예외 클래스들입니다.
"""


class ProductNotFoundException(Exception):
    """
    상품을 찾을 수 없을 때 발생하는 예외 (수정, 삭제 대상이 없는 경우)

    HTTP Status Code: 404 Not Found
    """

    def __init__(self, product_id: int):
        self.product_id = product_id
        self.message = f"Product with id {product_id} not found"
        super().__init__(self.message)
