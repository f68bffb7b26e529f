# app/domains/prd/__init__.py

"""
FastAPI 애플리케이션의 'prd' 도메인 패키지입니다.

'prd' 도메인은 상품 카테고리(ProductCategory)와 상품(Product)을 관리합니다.
카테고리는 상위 카테고리 ID로 계층을 이루며, 상품은 카테고리 ID를 소프트 참조합니다.
상품의 생성/삭제/카테고리 변경 시 카테고리별 상품 수(product_count)는
ARQ 백그라운드 작업(tasks.py)으로 다시 계산됩니다.

주요 서브모듈:
- `models.py`: product_categories, products 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 테이블에 대한 비동기 CRUD 및 조회 로직.
- `services.py`: 고유성/계층 검사, 상품 상태 전이 규칙.
- `tasks.py`: 카테고리 상품 수 동기화 작업.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "Product Catalog Domain"
__description__ = "Manages product categories and products."
__version__ = "0.1.0"
__all__ = []
