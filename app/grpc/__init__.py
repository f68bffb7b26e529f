# app/grpc/__init__.py

"""
부서(Department) 서비스의 gRPC 인터페이스 패키지입니다.

- messages: 요청/응답 메시지 (JSON 직렬화)
- department_servicer: RPC 구현
- server: grpc.aio 서버 구성
- client: 샘플 클라이언트
"""
