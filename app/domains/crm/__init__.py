# app/domains/crm/__init__.py

"""
FastAPI 애플리케이션의 'crm' 도메인 패키지입니다.

'crm' 도메인은 고객(Customer)과 주소(Address) 정보를 관리합니다.
고객은 이메일로, 주소는 도로명 + 도시 + 우편번호 조합으로 고유하게 식별됩니다.

주요 서브모듈:
- `models.py`: customers, addresses 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청 및 응답 유효성 검사를 위한 Pydantic 모델.
- `crud.py`: 테이블에 대한 비동기 CRUD 및 조회 로직.
- `services.py`: 고유성 검사 및 단일 필드 변경 규칙.
- `routers.py`: FastAPI API 엔드포인트 정의.
"""

__title__ = "Customer Relationship Domain"
__description__ = "Manages customers and addresses."
__version__ = "0.1.0"
__all__ = []
