# app/domains/org/services.py

"""
'org' 도메인의 비즈니스 규칙을 담당하는 서비스 모듈입니다.

- 부서: 이름 고유성, 예산/직원 수 단일 필드 변경.
- 그룹: 이름 고유성, 인원 수 규칙(0 이상, 최대 인원 이하),
  모든 변경 시 마지막 활동 일시(last_activity_date) 갱신.
"""

import logging
from datetime import datetime, UTC
from typing import Any, Dict

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.exceptions import ValidationError
from app.core.service_base import CRUDServiceBase, UniqueRule
from . import crud, models, schemas

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 부서 (Department) 서비스
# =============================================================================
class DepartmentService(
    CRUDServiceBase[models.Department, schemas.DepartmentCreate, schemas.DepartmentUpdate]
):
    entity_name = "Department"
    unique_rules = (UniqueRule(("name",), "Department name already exists: {name}"),)

    async def activate(self, db: AsyncSession, id: int) -> models.Department:
        return await self._apply_patch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.Department:
        return await self._apply_patch(db, id, active=False)

    async def update_budget(self, db: AsyncSession, id: int, budget: float) -> models.Department:
        db_obj = await self.get_or_404(db, id)
        if budget < 0:
            raise ValidationError("Budget must be greater than or equal to 0")
        return await self._save(db, db_obj, {"budget": budget})

    async def update_employee_count(self, db: AsyncSession, id: int, employee_count: int) -> models.Department:
        db_obj = await self.get_or_404(db, id)
        if employee_count < 0:
            raise ValidationError("Employee count must be greater than or equal to 0")
        return await self._save(db, db_obj, {"employee_count": employee_count})


# =============================================================================
# 2. 그룹 (Group) 서비스
# =============================================================================
class GroupService(CRUDServiceBase[models.Group, schemas.GroupCreate, schemas.GroupUpdate]):
    entity_name = "Group"
    unique_rules = (UniqueRule(("name",), "Group name already exists: {name}"),)

    @staticmethod
    def _check_member_limit(member_count: int, max_members: int | None) -> None:
        if member_count < 0:
            raise ValidationError("Member count cannot be negative")
        if max_members is not None and member_count > max_members:
            raise ValidationError(f"Member count cannot exceed max members limit: {max_members}")

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.now(UTC)
        data["created_date"] = now
        data["last_activity_date"] = now
        if data.get("current_member_count") is None:
            data["current_member_count"] = 0
        self._check_member_limit(data["current_member_count"], data.get("max_members"))
        return data

    def prepare_update(self, db_obj: models.Group, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("current_member_count") is None:
            data["current_member_count"] = db_obj.current_member_count
        self._check_member_limit(data["current_member_count"], data.get("max_members"))
        data["last_activity_date"] = datetime.now(UTC)
        return data

    async def _touch(self, db: AsyncSession, id: int, **changes: Any) -> models.Group:
        """지정된 필드와 함께 마지막 활동 일시를 갱신합니다."""
        return await self._apply_patch(db, id, last_activity_date=datetime.now(UTC), **changes)

    async def activate(self, db: AsyncSession, id: int) -> models.Group:
        return await self._touch(db, id, active=True)

    async def deactivate(self, db: AsyncSession, id: int) -> models.Group:
        return await self._touch(db, id, active=False)

    async def make_public(self, db: AsyncSession, id: int) -> models.Group:
        return await self._touch(db, id, is_public=True)

    async def make_private(self, db: AsyncSession, id: int) -> models.Group:
        return await self._touch(db, id, is_public=False)

    async def update_tags(self, db: AsyncSession, id: int, tags: str | None) -> models.Group:
        return await self._touch(db, id, tags=tags)

    async def update_last_activity(self, db: AsyncSession, id: int) -> models.Group:
        return await self._touch(db, id)

    async def update_member_count(self, db: AsyncSession, id: int, member_count: int) -> models.Group:
        db_obj = await self.get_or_404(db, id)
        self._check_member_limit(member_count, db_obj.max_members)
        return await self._save(
            db, db_obj, {"current_member_count": member_count, "last_activity_date": datetime.now(UTC)}
        )

    async def add_member(self, db: AsyncSession, id: int) -> models.Group:
        db_obj = await self.get_or_404(db, id)
        if db_obj.max_members is not None and db_obj.current_member_count >= db_obj.max_members:
            logger.warning("Group %s is full (%s members)", id, db_obj.max_members)
            raise ValidationError(f"Group has reached maximum capacity: {db_obj.max_members}")
        return await self._save(
            db, db_obj,
            {"current_member_count": db_obj.current_member_count + 1, "last_activity_date": datetime.now(UTC)},
        )

    async def remove_member(self, db: AsyncSession, id: int) -> models.Group:
        db_obj = await self.get_or_404(db, id)
        if db_obj.current_member_count <= 0:
            raise ValidationError("Group has no members to remove")
        return await self._save(
            db, db_obj,
            {"current_member_count": db_obj.current_member_count - 1, "last_activity_date": datetime.now(UTC)},
        )


department_service = DepartmentService(crud.department)
group_service = GroupService(crud.group)
