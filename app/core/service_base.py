# app/core/service_base.py

"""
도메인 서비스 계층의 공통 기반 클래스를 정의하는 모듈입니다.

서비스는 저장소(CRUDBase) 앞에서 비즈니스 규칙을 검사합니다.
- 고유성 규칙(UniqueRule)을 선언적으로 지정하면 생성/수정 시 자동으로 검사합니다.
  수정 시에는 해당 필드 값이 실제로 바뀐 경우에만 검사합니다.
- 참조 검증, 기본값 초기화, 삭제 전 검사는 훅 메서드를 재정의하여 추가합니다.
- 데이터베이스 고유 제약(IntegrityError)에 걸린 커밋은 롤백 후 ConflictError로 변환됩니다.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, NamedTuple, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase, ModelType, CreateSchemaType, UpdateSchemaType
from app.core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class UniqueRule(NamedTuple):
    """
    하나 이상의 필드 조합에 대한 고유성 규칙입니다.
    message는 필드 이름을 키로 format 됩니다. (예: "Email already exists: {email}")
    skip_empty가 True이면 모든 값이 비어 있을 때(None 또는 "") 검사를 건너뜁니다.
    """
    fields: Tuple[str, ...]
    message: str
    skip_empty: bool = False


class CRUDServiceBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    entity_name: str = "Record"
    unique_rules: Tuple[UniqueRule, ...] = ()

    def __init__(self, crud: CRUDBase[ModelType, CreateSchemaType, UpdateSchemaType]):
        self.crud = crud

    # -------------------------------------------------------------------------
    # 재정의용 훅
    # -------------------------------------------------------------------------
    async def validate_references(
        self, db: AsyncSession, data: Dict[str, Any], current: Optional[ModelType] = None
    ) -> None:
        """소프트 참조(다른 레코드의 ID) 검증. 기본 구현은 아무것도 하지 않습니다."""

    def prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """저장 직전 생성 데이터 보정 (타임스탬프, 카운터 초기화 등)."""
        return data

    def prepare_update(self, db_obj: ModelType, data: Dict[str, Any]) -> Dict[str, Any]:
        """저장 직전 수정 데이터 보정 (수정 일시 갱신 등)."""
        return data

    async def before_delete(self, db: AsyncSession, db_obj: ModelType) -> None:
        """삭제 전 검사. 기본 구현은 아무것도 하지 않습니다."""

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        return await self.crud.get_multi(db)

    async def get(self, db: AsyncSession, id: int) -> Optional[ModelType]:
        return await self.crud.get(db, id)

    async def get_or_404(self, db: AsyncSession, id: int) -> ModelType:
        db_obj = await self.crud.get(db, id)
        if db_obj is None:
            raise NotFoundError(f"{self.entity_name} not found with id: {id}")
        return db_obj

    # -------------------------------------------------------------------------
    # 변경
    # -------------------------------------------------------------------------
    async def create(self, db: AsyncSession, obj_in: CreateSchemaType) -> ModelType:
        data = obj_in.model_dump()
        await self._check_unique(db, data)
        await self.validate_references(db, data)
        data = self.prepare_create(data)
        async with self._integrity_guard(db):
            db_obj = await self.crud.create(db, obj_in=data)
        logger.info("%s created (id=%s)", self.entity_name, db_obj.id)
        return db_obj

    async def update(self, db: AsyncSession, id: int, obj_in: UpdateSchemaType) -> ModelType:
        """변경 가능한 모든 필드를 요청 값으로 교체합니다."""
        db_obj = await self.get_or_404(db, id)
        data = obj_in.model_dump()
        await self._check_unique(db, data, current=db_obj)
        await self.validate_references(db, data, current=db_obj)
        data = self.prepare_update(db_obj, data)
        db_obj = await self._save(db, db_obj, data)
        logger.info("%s updated (id=%s)", self.entity_name, id)
        return db_obj

    async def delete(self, db: AsyncSession, id: int) -> ModelType:
        db_obj = await self.get_or_404(db, id)
        await self.before_delete(db, db_obj)
        await self.crud.delete(db, id=id)
        logger.info("%s deleted (id=%s)", self.entity_name, id)
        return db_obj

    async def _apply_patch(self, db: AsyncSession, id: int, **changes: Any) -> ModelType:
        """ID로 조회(없으면 NotFoundError)한 뒤 지정된 필드만 변경합니다."""
        db_obj = await self.get_or_404(db, id)
        return await self._save(db, db_obj, changes)

    async def _save(self, db: AsyncSession, db_obj: ModelType, changes: Dict[str, Any]) -> ModelType:
        async with self._integrity_guard(db):
            return await self.crud.update(db, db_obj=db_obj, obj_in=changes)

    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------
    async def _check_unique(
        self, db: AsyncSession, data: Dict[str, Any], current: Optional[ModelType] = None
    ) -> None:
        for rule in self.unique_rules:
            values = {field: data.get(field) for field in rule.fields}
            if rule.skip_empty and all(value in (None, "") for value in values.values()):
                continue
            if current is not None and all(getattr(current, field) == value for field, value in values.items()):
                continue
            if await self.crud.exists_by(db, **values):
                logger.warning("%s uniqueness rejected: %s", self.entity_name, values)
                raise ConflictError(rule.message.format(**values))

    @asynccontextmanager
    async def _integrity_guard(self, db: AsyncSession) -> AsyncIterator[None]:
        # 사전 검사와 커밋 사이에 끼어든 중복 삽입은 DB 고유 제약이 막습니다.
        try:
            yield
        except IntegrityError as e:
            await db.rollback()
            logger.warning("%s integrity violation: %s", self.entity_name, e.orig)
            raise ConflictError(f"{self.entity_name} violates a uniqueness constraint") from e
