"""
Backpack Exchange REST API 클라이언트

Ed25519 서명, catalog 기반 요청 디스패치.
응답은 해석하지 않고 httpx.Response 그대로 반환 (재시도/Rate Limit 없음).
"""

import logging
from decimal import Decimal
from enum import Enum
from types import TracebackType
from typing import Any, Callable
from urllib.parse import quote

import httpx

from adapters.backpack.catalog import Endpoint
from adapters.backpack.signing import (
    Identity,
    Params,
    TimestampSource,
    encode_params,
    sign_request,
)
from core.constants import BackpackEndpoints, Defaults
from core.types import HttpMethod, Instruction

logger = logging.getLogger(__name__)


def _jsonable(value: Any) -> Any:
    """JSON body 값 변환 (Decimal → 문자열, Enum → value)"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return format(value, "f")
    return value


def build_json_body(body: Params | None) -> dict[str, Any] | None:
    """서명에 사용한 것과 같은 필드로 JSON body 생성 (None 값 제외)"""
    if body is None:
        return None
    return {
        str(key): _jsonable(value)
        for key, value in body.items()
        if value is not None
    }


def decode_response(response: httpx.Response) -> Any:
    """응답 본문 디코딩

    JSON이면 파싱 결과, 아니면 텍스트, 본문이 없으면 None.
    상태 코드는 확인하지 않음.
    """
    if not response.content:
        return None

    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    return response.text


class BackpackRestClient:
    """Backpack REST API 클라이언트 (요청 디스패처)

    Args:
        public_key: base64 공개키 (X-API-Key)
        private_key: base64 Ed25519 개인키 (seed)
        base_url: REST API 베이스 URL
        window: 서명 유효 시간 (밀리초)
        timeout: 요청 타임아웃 (초)
        transport: httpx 전송 계층 (테스트용 MockTransport 주입)
        clock: 밀리초 타임스탬프 함수 (테스트용)

    Raises:
        ConfigurationError: 개인키 형식이 잘못된 경우 (생성 시점)

    사용 예시:
    ```python
    async with BackpackRestClient(public_key=pk, private_key=sk) as client:
        response = await client.call("/capital", instruction=Instruction.BALANCE_QUERY)
    ```
    """

    def __init__(
        self,
        public_key: str = "",
        private_key: str = "",
        base_url: str = BackpackEndpoints.PROD_REST_URL,
        window: int = Defaults.WINDOW_MS,
        timeout: float = Defaults.TIMEOUT_SEC,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], int] | None = None,
    ):
        self.identity = Identity.from_base64(public_key, private_key)
        self.base_url = base_url.rstrip("/")
        self.window = window
        self.timeout = timeout

        self._transport = transport
        self._timestamps = TimestampSource(clock)
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "BackpackRestClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def build_url(self, path: str, params: Params | None = None) -> str:
        """요청 URL 생성 (query는 서명과 같은 canonical 인코딩)"""
        url = f"{self.base_url}{path}"
        query = encode_params(params)
        if query:
            url = f"{url}?{query}"
        return url

    def auth_headers(
        self,
        instruction: Instruction | str,
        params: Params | None = None,
        body: Params | None = None,
    ) -> dict[str, str]:
        """새 타임스탬프로 인증 헤더 생성"""
        return sign_request(
            self.identity,
            instruction,
            params=params,
            body=body,
            timestamp=self._timestamps.next(),
            window=self.window,
        )

    async def call(
        self,
        path: str,
        method: HttpMethod | str = HttpMethod.GET,
        instruction: Instruction | str | None = None,
        params: Params | None = None,
        body: Params | None = None,
    ) -> httpx.Response:
        """API 요청 실행

        Args:
            path: API 경로 (예: /capital)
            method: HTTP 메서드
            instruction: 인증 operation identifier (None이면 공개 요청)
            params: query 파라미터
            body: JSON body 필드

        Returns:
            httpx.Response (상태 코드와 무관하게 그대로 반환)

        Raises:
            SigningError: 서명 실패 (요청 전송 안 함)
            httpx.TransportError: 네트워크 에러 (그대로 전파)
        """
        method = HttpMethod(method).value
        url = self.build_url(path, params)

        headers: dict[str, str] = {}
        if instruction is not None:
            headers.update(self.auth_headers(instruction, params, body))

        client = await self._get_client()

        logger.debug(
            "Backpack request",
            extra={
                "method": method,
                "path": path,
                "authenticated": instruction is not None,
            },
        )

        try:
            response = await client.request(
                method,
                url,
                headers=headers,
                json=build_json_body(body),
            )
        except httpx.TransportError as e:
            logger.error(
                "Request error",
                extra={"method": method, "path": path, "error": str(e)},
            )
            raise

        logger.debug(
            "Backpack response",
            extra={"path": path, "status_code": response.status_code},
        )

        return response

    async def request(
        self,
        endpoint: Endpoint,
        params: Params | None = None,
        body: Params | None = None,
    ) -> httpx.Response:
        """catalog 정의에 따른 요청 실행

        경로 템플릿 파라미터(예: /ticker/{symbol})는 params에서 꺼내 경로에 채움.

        Raises:
            ValueError: 필수 파라미터 또는 경로 파라미터 누락
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}

        path_values: dict[str, str] = {}
        for name in endpoint.path_params:
            if name not in query:
                raise ValueError(f"{endpoint.name}: path parameter '{name}' required")
            path_values[name] = quote(str(query.pop(name)), safe="")

        missing = [name for name in endpoint.required if name not in query]
        if missing:
            raise ValueError(f"{endpoint.name}: missing required parameters {missing}")

        if endpoint.has_body and body is None:
            raise ValueError(f"{endpoint.name}: request body required")

        return await self.call(
            endpoint.path.format(**path_values),
            method=endpoint.method,
            instruction=endpoint.instruction,
            params=query or None,
            body=body if endpoint.has_body else None,
        )
