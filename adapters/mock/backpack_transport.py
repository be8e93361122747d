"""
Mock Backpack 전송 계층

테스트용 httpx 전송 계층. 실제 네트워크 없이 요청을 기록하고
등록된 응답을 반환.
"""

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

import httpx


@dataclass
class RecordedRequest:
    """기록된 요청"""

    method: str
    url: httpx.URL
    headers: httpx.Headers
    content: bytes

    @property
    def path(self) -> str:
        return self.url.path

    @property
    def query(self) -> str:
        return self.url.query.decode("ascii")

    @property
    def query_pairs(self) -> list[tuple[str, str]]:
        """디코딩된 query (key, value) 목록"""
        return parse_qsl(self.query, keep_blank_values=True)

    def json(self) -> Any:
        return json.loads(self.content) if self.content else None


@dataclass
class MockRoute:
    """등록된 응답"""

    status_code: int = 200
    json_data: Any = None
    text: str | None = None


@dataclass
class MockState:
    """Mock 상태 (메모리 내 저장)"""

    # (method, path) -> 응답
    routes: dict[tuple[str, str], MockRoute] = field(default_factory=dict)

    # 수신 순서대로 기록
    requests: list[RecordedRequest] = field(default_factory=list)

    # 다음 요청에서 발생시킬 전송 에러
    next_error: Exception | None = None


class MockBackpackTransport(httpx.AsyncBaseTransport):
    """Mock 전송 계층

    사용 예시:
    ```python
    transport = MockBackpackTransport()
    transport.add_response("GET", "/markets", json_data=[{"symbol": "SOL_USDC"}])

    client = BackpackRestClient(transport=transport)
    response = await client.call("/markets")
    assert transport.last_request.path == "/api/v1/markets"
    ```

    Args:
        base_path: 경로 등록 시 앞에 붙는 API 경로
    """

    def __init__(self, base_path: str = "/api/v1", state: MockState | None = None):
        self.base_path = base_path.rstrip("/")
        self.state = state or MockState()

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def add_response(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
    ) -> None:
        """응답 등록 (path는 base_path 제외)"""
        key = (method.upper(), f"{self.base_path}{path}")
        self.state.routes[key] = MockRoute(
            status_code=status_code,
            json_data=json_data,
            text=text,
        )

    def fail_next(self, error: Exception) -> None:
        """다음 요청에서 전송 에러 발생"""
        self.state.next_error = error

    @property
    def requests(self) -> list[RecordedRequest]:
        return self.state.requests

    @property
    def last_request(self) -> RecordedRequest:
        return self.state.requests[-1]

    # -------------------------------------------------------------------------
    # httpx.AsyncBaseTransport
    # -------------------------------------------------------------------------

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        content = await request.aread()

        if self.state.next_error is not None:
            error, self.state.next_error = self.state.next_error, None
            raise error

        self.state.requests.append(
            RecordedRequest(
                method=request.method,
                url=request.url,
                headers=request.headers,
                content=content,
            )
        )

        route = self.state.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"code": "RESOURCE_NOT_FOUND", "message": "Not found"},
                request=request,
            )

        if route.text is not None:
            return httpx.Response(route.status_code, text=route.text, request=request)
        if route.json_data is not None:
            return httpx.Response(route.status_code, json=route.json_data, request=request)
        return httpx.Response(route.status_code, request=request)
