# app/domains/crm/services.py

"""
'crm' 도메인의 비즈니스 규칙을 담당하는 서비스 모듈입니다.
"""

from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.service_base import CRUDServiceBase, UniqueRule
from . import crud, models, schemas


class CustomerService(CRUDServiceBase[models.Customer, schemas.CustomerCreate, schemas.CustomerUpdate]):
    entity_name = "Customer"
    unique_rules = (UniqueRule(("email",), "Email already exists: {email}"),)

    async def activate(self, db: AsyncSession, id: int) -> models.Customer:
        return await self._apply_patch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.Customer:
        return await self._apply_patch(db, id, active=False)


class AddressService(CRUDServiceBase[models.Address, schemas.AddressCreate, schemas.AddressUpdate]):
    """
    주소는 (street, city, postal_code) 조합이 고유해야 합니다.
    우편번호가 없는 주소끼리는 우편번호 NULL 값으로 비교합니다.
    """
    entity_name = "Address"
    unique_rules = (
        UniqueRule(
            ("street", "city", "postal_code"),
            "Address already exists with same street, city, and postal code",
        ),
    )

    async def activate(self, db: AsyncSession, id: int) -> models.Address:
        return await self._apply_patch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.Address:
        return await self._apply_patch(db, id, active=False)

    async def set_primary(self, db: AsyncSession, id: int) -> models.Address:
        return await self._apply_patch(db, id, is_primary=True)

    async def set_non_primary(self, db: AsyncSession, id: int) -> models.Address:
        return await self._apply_patch(db, id, is_primary=False)

    async def update_coordinates(
        self, db: AsyncSession, id: int, latitude: Optional[float], longitude: Optional[float]
    ) -> models.Address:
        return await self._apply_patch(db, id, latitude=latitude, longitude=longitude)


customer_service = CustomerService(crud.customer)
address_service = AddressService(crud.address)
