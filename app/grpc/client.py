# app/grpc/client.py

"""
부서(Department) gRPC 서비스용 샘플 비동기 클라이언트입니다.

메시지는 protobuf가 아닌 JSON으로 직렬화되므로, .proto 파일로 생성한 protobuf 클라이언트와는
호환되지 않습니다. 이 서버와 통신하려면 이 클라이언트(또는 같은 JSON 메시지 형식)를 사용해야 합니다.

    async with DepartmentGrpcClient("localhost", 9090) as client:
        response = await client.create_department("Engineering", "R&D", "Alice")
"""

from typing import Any, Optional

import grpc

from . import messages as msg
from .department_servicer import RPC_REQUEST_TYPES, RPC_RESPONSE_TYPES
from .server import SERVICE_NAME


class DepartmentGrpcClient:
    def __init__(self, host: str = "localhost", port: int = 9090):
        self._channel = grpc.aio.insecure_channel(f"{host}:{port}")
        self._stubs = {
            rpc_name: self._channel.unary_unary(
                f"/{SERVICE_NAME}/{rpc_name}",
                request_serializer=msg.serialize,
                response_deserializer=msg.deserializer(RPC_RESPONSE_TYPES[rpc_name]),
            )
            for rpc_name in RPC_REQUEST_TYPES
        }

    async def __aenter__(self) -> "DepartmentGrpcClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._channel.close()

    async def call(self, rpc_name: str, **fields: Any):
        """임의의 RPC를 요청 필드로 호출합니다."""
        request = RPC_REQUEST_TYPES[rpc_name](**fields)
        return await self._stubs[rpc_name](request)

    # -------------------------------------------------------------------------
    # 자주 쓰는 호출
    # -------------------------------------------------------------------------
    async def get_all_departments(self) -> msg.DepartmentListResponse:
        return await self.call("GetAllDepartments")

    async def get_department_by_id(self, id: int) -> msg.DepartmentLookupResponse:
        return await self.call("GetDepartmentById", id=id)

    async def create_department(
        self, name: str, description: Optional[str], manager_name: str, **fields: Any
    ) -> msg.DepartmentResultResponse:
        department = msg.DepartmentMessage(
            name=name, description=description, manager_name=manager_name, **fields
        )
        return await self.call("CreateDepartment", department=department)

    async def search_departments_by_name(self, name: str) -> msg.DepartmentListResponse:
        return await self.call("SearchDepartmentsByName", name=name)

    async def get_active_departments(self) -> msg.DepartmentListResponse:
        return await self.call("GetActiveDepartments")

    async def activate_department(self, id: int) -> msg.DepartmentResultResponse:
        return await self.call("ActivateDepartment", id=id)

    async def update_department_budget(self, id: int, budget: float) -> msg.DepartmentResultResponse:
        return await self.call("UpdateDepartmentBudget", id=id, budget=budget)

    async def delete_department(self, id: int) -> msg.DeleteDepartmentResponse:
        return await self.call("DeleteDepartment", id=id)
