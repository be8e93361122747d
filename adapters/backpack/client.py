"""
Backpack API 파사드

하나의 디스패처 위에 리소스 그룹을 속성으로 묶은 진입점.
"""

from typing import Callable

import httpx

from adapters.backpack.rest_client import BackpackRestClient
from adapters.backpack.resources import (
    AccountApi,
    AssetsApi,
    CapitalApi,
    MarketsApi,
    OrderApi,
    SystemApi,
    TradesApi,
)
from core.config.loader import Credentials, ExchangeConfig
from core.constants import BackpackEndpoints, Defaults


class BackpackAPI:
    """Backpack Exchange API 클라이언트

    자격 증명은 생성자로만 전달 (환경 변수를 직접 읽지 않음).

    사용 예시:
    ```python
    async with BackpackAPI(public_key=pk, private_key=sk) as bp:
        markets = await bp.markets.get_markets()
        balances = await bp.capital.get_balances()
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
        self.rest = BackpackRestClient(
            public_key=public_key,
            private_key=private_key,
            base_url=base_url,
            window=window,
            timeout=timeout,
            transport=transport,
            clock=clock,
        )

        self.assets = AssetsApi(self.rest)
        self.markets = MarketsApi(self.rest)
        self.system = SystemApi(self.rest)
        self.trades = TradesApi(self.rest)
        self.account = AccountApi(self.rest)
        self.capital = CapitalApi(self.rest)
        self.order = OrderApi(self.rest)

    @classmethod
    def from_credentials(
        cls,
        credentials: Credentials,
        **kwargs,
    ) -> "BackpackAPI":
        """Credentials로 생성"""
        return cls(
            public_key=credentials.public_key,
            private_key=credentials.private_key,
            **kwargs,
        )

    @classmethod
    def from_config(
        cls,
        config: ExchangeConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BackpackAPI":
        """ExchangeConfig로 생성"""
        return cls(
            public_key=config.credentials.public_key,
            private_key=config.credentials.private_key,
            base_url=config.rest_url,
            window=config.window_ms,
            timeout=config.timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        await self.rest.close()

    async def __aenter__(self) -> "BackpackAPI":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
