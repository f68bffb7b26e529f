# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

각 도메인의 crud.py는 이 클래스를 상속받아 모델별 저장소(Repository)를 만듭니다.
정확 일치, 대소문자 무시 부분 일치, LIKE 패턴, 범위/임계값, 정렬, 선택적 다중 조건 필터,
존재 여부/개수 조회를 공통으로 제공하며, 모든 메서드는 비동기(async)로 동작합니다.
"""

from typing import Generic, List, Optional, Type, TypeVar, Any, Dict, Sequence, Tuple, Union

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.

    정렬 키(order_by)는 필드 이름 문자열이며, '-' 접두사는 내림차순을 뜻합니다.
    (예: ("country", "city"), ("-created_date",))
    정렬 키가 없으면 id 오름차순으로 반환합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    # -------------------------------------------------------------------------
    # 내부 헬퍼
    # -------------------------------------------------------------------------
    def _column(self, attribute: str) -> Any:
        if not hasattr(self.model, attribute):
            raise AttributeError(f"Model {self.model.__name__} has no attribute '{attribute}'")
        return getattr(self.model, attribute)

    def _equals(self, attribute: str, value: Any) -> Any:
        # None은 SQL의 IS NULL 비교로 변환합니다.
        column = self._column(attribute)
        return column.is_(None) if value is None else column == value

    def _order_clauses(self, order_by: Sequence[str]) -> List[Any]:
        clauses = []
        for key in order_by:
            if key.startswith("-"):
                clauses.append(self._column(key[1:]).desc())
            else:
                clauses.append(self._column(key).asc())
        return clauses

    async def _fetch_all(
        self,
        db: AsyncSession,
        *conditions: Any,
        order_by: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ModelType]:
        query = select(self.model)
        if conditions:
            query = query.where(*conditions)
        if order_by:
            query = query.order_by(*self._order_clauses(order_by))
        elif hasattr(self.model, "id"):
            query = query.order_by(self.model.id)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        result = await db.execute(query)
        return list(result.scalars().all())

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------
    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 조회합니다. 필터링을 위한 키워드 인자(정확 일치)를 지원합니다.
        """
        conditions = [self._equals(field, value) for field, value in kwargs.items()]
        return await self._fetch_all(db, *conditions, skip=skip, limit=limit)

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        """정확 일치하는 첫 번째 레코드를 반환합니다. 없으면 None."""
        statement = select(self.model).where(self._equals(attribute, value)).limit(1)
        response = await db.execute(statement)
        return response.scalars().first()

    async def get_all_by(
        self, db: AsyncSession, *, order_by: Optional[Sequence[str]] = None, **filters: Any
    ) -> List[ModelType]:
        """모든 조건(정확 일치, None은 IS NULL)을 만족하는 레코드 목록을 반환합니다."""
        conditions = [self._equals(field, value) for field, value in filters.items()]
        return await self._fetch_all(db, *conditions, order_by=order_by)

    async def search_contains(
        self, db: AsyncSession, *, attribute: str, value: str, order_by: Optional[Sequence[str]] = None
    ) -> List[ModelType]:
        """대소문자를 무시한 부분 문자열 검색입니다. (와일드카드 문자는 이스케이프됩니다)"""
        condition = self._column(attribute).icontains(value, autoescape=True)
        return await self._fetch_all(db, condition, order_by=order_by)

    async def search_like(
        self, db: AsyncSession, *, attribute: str, pattern: str
    ) -> List[ModelType]:
        """SQL LIKE 패턴(%, _ 사용)을 그대로 적용합니다."""
        return await self._fetch_all(db, self._column(attribute).like(pattern))

    async def get_containing(
        self, db: AsyncSession, *, attribute: str, value: str
    ) -> List[ModelType]:
        """LIKE '%value%' 부분 문자열 검색입니다."""
        condition = self._column(attribute).contains(value, autoescape=True)
        return await self._fetch_all(db, condition)

    async def get_greater_than(
        self,
        db: AsyncSession,
        *,
        attribute: str,
        value: Any,
        inclusive: bool = False,
        order_by: Optional[Sequence[str]] = None,
        **filters: Any,
    ) -> List[ModelType]:
        column = self._column(attribute)
        conditions = [column >= value if inclusive else column > value]
        conditions.extend(self._equals(field, v) for field, v in filters.items())
        return await self._fetch_all(db, *conditions, order_by=order_by)

    async def get_less_than(
        self,
        db: AsyncSession,
        *,
        attribute: str,
        value: Any,
        inclusive: bool = False,
        order_by: Optional[Sequence[str]] = None,
        **filters: Any,
    ) -> List[ModelType]:
        column = self._column(attribute)
        conditions = [column <= value if inclusive else column < value]
        conditions.extend(self._equals(field, v) for field, v in filters.items())
        return await self._fetch_all(db, *conditions, order_by=order_by)

    async def get_between(
        self, db: AsyncSession, *, attribute: str, low: Any, high: Any,
        order_by: Optional[Sequence[str]] = None,
    ) -> List[ModelType]:
        """low <= attribute <= high (양 끝 포함)"""
        return await self._fetch_all(db, self._column(attribute).between(low, high), order_by=order_by)

    async def get_ordered(self, db: AsyncSession, *order_by: str) -> List[ModelType]:
        """전체 레코드를 주어진 정렬 키 순서로 반환합니다."""
        return await self._fetch_all(db, order_by=order_by)

    async def get_filtered(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None,             # 정확 일치 조건: {"attribute_name": value}
        ranges: Optional[Dict[str, Tuple[Any, Any]]] = None,  # 범위 조건: {"attribute_name": (min, max)}
        order_by: Optional[Sequence[str]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ModelType]:
        """
        다중 조건 조회. 값이 None인 조건은 무시됩니다.
        범위 조건은 양 끝을 포함하며, 한쪽 경계가 None이면 그쪽은 열린 범위가 됩니다.
        """
        conditions = []

        # 1. 다중 속성 필터링
        for attribute, value in (filters or {}).items():
            if value is not None:
                conditions.append(self._column(attribute) == value)

        # 2. 범위 필터링
        for attribute, (low, high) in (ranges or {}).items():
            column = self._column(attribute)
            if low is not None:
                conditions.append(column >= low)
            if high is not None:
                conditions.append(column <= high)

        return await self._fetch_all(db, *conditions, order_by=order_by, skip=skip, limit=limit)

    async def exists_by(self, db: AsyncSession, **fields: Any) -> bool:
        """주어진 필드 값 조합(None은 IS NULL)을 가진 레코드가 존재하는지 확인합니다."""
        conditions = [self._equals(field, value) for field, value in fields.items()]
        statement = select(self.model.id).where(*conditions).limit(1)
        result = await db.execute(statement)
        return result.first() is not None

    async def count_by(self, db: AsyncSession, **fields: Any) -> int:
        conditions = [self._equals(field, value) for field, value in fields.items()]
        statement = select(func.count()).select_from(self.model)
        if conditions:
            statement = statement.where(*conditions)
        result = await db.execute(statement)
        return result.scalar_one()

    # -------------------------------------------------------------------------
    # 변경
    # -------------------------------------------------------------------------
    async def create(
        self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        """
        db_obj = self.model.model_validate(obj_in)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]],
    ) -> ModelType:
        """
        기존 레코드를 업데이트합니다.
        스키마가 전달되면 명시적으로 설정된 필드만, dict가 전달되면 모든 키를 반영합니다.
        """
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(db_obj, key, value)

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 레코드를 삭제합니다.
        """
        db_obj = await db.get(self.model, id)
        if db_obj:
            await db.delete(db_obj)
            await db.commit()
        return db_obj
