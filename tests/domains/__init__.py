# tests/domains/__init__.py

"""
FastAPI 애플리케이션의 도메인별 테스트 스위트 패키지입니다.

주요 테스트 모듈:
- `test_org_n.py`: 'org' 도메인 (부서 및 그룹 관리)에 대한 테스트.
- `test_crm_n.py`: 'crm' 도메인 (고객 및 주소 관리)에 대한 테스트.
- `test_prd_n.py`: 'prd' 도메인 (상품 및 카테고리 관리)에 대한 테스트.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Commerce CRUD API Domain Tests"
__description__ = "Categorized tests for each business domain."
__version__ = "0.1.0" # 도메인 테스트 패키지의 내부 버전
__all__ = [] # 이 패키지에서 'from tests.domains import *' 시 내보낼 이름 목록.
