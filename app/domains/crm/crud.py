# app/domains/crm/crud.py

"""
'crm' 도메인의 CRUD(Create, Read, Update, Delete) 작업을 담당하는 모듈입니다.

고객(customers)과 주소(addresses) 테이블에 대한 데이터베이스 상호작용 로직을 캡슐화합니다.
"""

from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.crm import models as crm_models
from app.domains.crm import schemas as crm_schemas


# =============================================================================
# 1. customers 테이블 CRUD
# =============================================================================
class CRUDCustomer(CRUDBase[crm_models.Customer, crm_schemas.CustomerCreate, crm_schemas.CustomerUpdate]):
    def __init__(self):
        super().__init__(crm_models.Customer)

    async def get_customer_by_email(self, db: AsyncSession, *, email: str) -> Optional[crm_models.Customer]:
        return await self.get_by_attribute(db, attribute="email", value=email)


# =============================================================================
# 2. addresses 테이블 CRUD
# =============================================================================
class CRUDAddress(CRUDBase[crm_models.Address, crm_schemas.AddressCreate, crm_schemas.AddressUpdate]):
    def __init__(self):
        super().__init__(crm_models.Address)

    async def get_addresses_within_coordinates(
        self,
        db: AsyncSession,
        *,
        min_latitude: float,
        max_latitude: float,
        min_longitude: float,
        max_longitude: float,
    ) -> List[crm_models.Address]:
        """위도/경도 사각 영역 안(경계 포함)의 주소"""
        query = select(self.model).where(
            self.model.latitude.between(min_latitude, max_latitude),
            self.model.longitude.between(min_longitude, max_longitude),
        ).order_by(self.model.id)
        result = await db.execute(query)
        return list(result.scalars().all())


customer = CRUDCustomer()
address = CRUDAddress()
