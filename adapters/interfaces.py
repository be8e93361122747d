"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
"""

from typing import Any, Mapping, Protocol, TYPE_CHECKING, runtime_checkable

import httpx

if TYPE_CHECKING:
    from adapters.backpack.catalog import Endpoint


@runtime_checkable
class IBackpackDispatcher(Protocol):
    """catalog 기반 요청 디스패처 인터페이스

    리소스 그룹 API가 의존하는 유일한 기능.
    """

    async def request(
        self,
        endpoint: "Endpoint",
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """operation 실행

        Returns:
            해석하지 않은 원본 응답
        """
        ...
