# app/grpc/server.py

"""
부서(Department) gRPC 서버를 구성하고 시작하는 모듈입니다.

protoc 코드 생성 없이 grpc.aio의 제네릭 핸들러로 서비스를 등록하며,
메시지는 JSON으로 직렬화됩니다. (app.grpc.messages 참고)
"""

import logging
from typing import Optional

import grpc

from app.core.config import settings

from . import messages as msg
from .department_servicer import DepartmentServicer, RPC_REQUEST_TYPES

logger = logging.getLogger(__name__)

SERVICE_NAME = "department.DepartmentService"


def build_generic_handler(servicer: DepartmentServicer) -> grpc.GenericRpcHandler:
    method_handlers = {
        rpc_name: grpc.unary_unary_rpc_method_handler(
            getattr(servicer, rpc_name),
            request_deserializer=msg.deserializer(request_cls),
            response_serializer=msg.serialize,
        )
        for rpc_name, request_cls in RPC_REQUEST_TYPES.items()
    }
    return grpc.method_handlers_generic_handler(SERVICE_NAME, method_handlers)


async def start_grpc_server(
    servicer: Optional[DepartmentServicer] = None,
    host: Optional[str] = None,
    port: Optional[int] = None,
) -> tuple[grpc.aio.Server, int]:
    """
    gRPC 서버를 시작하고 (서버, 실제 바인딩된 포트)를 반환합니다.
    port=0이면 운영체제가 빈 포트를 할당합니다.
    """
    server = grpc.aio.server()
    server.add_generic_rpc_handlers((build_generic_handler(servicer or DepartmentServicer()),))

    address = f"{host or settings.GRPC_HOST}:{settings.GRPC_PORT if port is None else port}"
    bound_port = server.add_insecure_port(address)
    await server.start()
    logger.info("gRPC 서버 시작: %s (port=%s)", SERVICE_NAME, bound_port)
    return server, bound_port


async def stop_grpc_server(server: grpc.aio.Server, grace: float = 5.0) -> None:
    await server.stop(grace)
    logger.info("gRPC 서버 종료 완료.")
