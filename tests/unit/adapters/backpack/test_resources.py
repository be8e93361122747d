"""
Backpack 리소스 그룹 / BackpackAPI 테스트
"""

from unittest.mock import AsyncMock

import httpx
import pytest

from adapters.backpack.client import BackpackAPI
from adapters.backpack.resources import MarketsApi, OrderApi
from adapters.interfaces import IBackpackDispatcher
from adapters.mock.backpack_transport import MockBackpackTransport
from core.config.loader import Credentials, ExchangeConfig
from core.types import KlineInterval, PriceType


class TestBackpackApiComposition:
    """파사드 구성 테스트"""

    def test_groups_share_dispatcher(self) -> None:
        api = BackpackAPI()

        for group in (
            api.assets, api.markets, api.system, api.trades,
            api.account, api.capital, api.order,
        ):
            assert group._dispatcher is api.rest

    def test_rest_client_is_dispatcher(self) -> None:
        api = BackpackAPI()

        assert isinstance(api.rest, IBackpackDispatcher)

    def test_from_credentials(self, public_key_b64: str, private_key_b64: str) -> None:
        api = BackpackAPI.from_credentials(
            Credentials(public_key=public_key_b64, private_key=private_key_b64),
            window=10000,
        )

        assert api.rest.identity.public_key == public_key_b64
        assert api.rest.window == 10000

    def test_from_config(self, private_key_b64: str) -> None:
        config = ExchangeConfig(
            rest_url="https://example.com/api/v1",
            window_ms=7000,
            timeout=5.0,
            credentials=Credentials(public_key="pub", private_key=private_key_b64),
        )

        api = BackpackAPI.from_config(config)

        assert api.rest.base_url == "https://example.com/api/v1"
        assert api.rest.window == 7000
        assert api.rest.timeout == 5.0


class TestPublicGroups:
    """공개 그룹 테스트"""

    @pytest.mark.asyncio
    async def test_get_markets(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        """공개 요청에는 X-Signature 없음"""
        mock_transport.add_response("GET", "/markets", json_data=[{"symbol": "SOL_USDC"}])

        markets = await backpack_api.markets.get_markets()

        assert markets == [{"symbol": "SOL_USDC"}]
        assert "X-Signature" not in mock_transport.last_request.headers

    @pytest.mark.asyncio
    async def test_get_klines(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/klines", json_data=[])

        await backpack_api.markets.get_klines(
            symbol="SUI_USDC",
            interval=KlineInterval.MINUTE_1,
            start_time=1746801907,
            price_type=PriceType.MARK,
        )

        assert mock_transport.last_request.query == (
            "interval=1m&priceType=Mark&startTime=1746801907&symbol=SUI_USDC"
        )

    @pytest.mark.asyncio
    async def test_get_depth_path(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/depth/SOL_USDC", json_data={"bids": [], "asks": []})

        depth = await backpack_api.markets.get_depth("SOL_USDC")

        assert depth == {"bids": [], "asks": []}
        assert mock_transport.last_request.path == "/api/v1/depth/SOL_USDC"

    @pytest.mark.asyncio
    async def test_ping_text(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/ping", text="pong")

        assert await backpack_api.system.ping() == "pong"

    @pytest.mark.asyncio
    async def test_assets_collateral_public(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/collateral", json_data=[])

        await backpack_api.assets.get_collateral()

        assert "X-Signature" not in mock_transport.last_request.headers

    @pytest.mark.asyncio
    async def test_historical_trades(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/historicalTrades/SOL_USDC", json_data=[])

        assert await backpack_api.trades.get_historical_trades("SOL_USDC") == []


class TestPrivateGroups:
    """인증 그룹 테스트"""

    @pytest.mark.asyncio
    async def test_capital_collateral_signed(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("GET", "/collateral", json_data={})

        await backpack_api.capital.get_collateral()

        assert "X-Signature" in mock_transport.last_request.headers

    @pytest.mark.asyncio
    async def test_update_account_patch(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("PATCH", "/account", status_code=200)

        result = await backpack_api.account.update_account({"autoLend": True})

        request = mock_transport.last_request
        assert result is None
        assert request.method == "PATCH"
        assert request.json() == {"autoLend": True}
        assert "X-Signature" in request.headers

    @pytest.mark.asyncio
    async def test_request_withdrawal_post(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("POST", "/withdrawal", json_data={"id": 1})
        data = {"address": "addr", "blockchain": "Solana", "quantity": "1", "symbol": "SOL"}

        result = await backpack_api.capital.request_withdrawal(data)

        assert result == {"id": 1}
        assert mock_transport.last_request.json() == data

    @pytest.mark.asyncio
    async def test_cancel_all_orders(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        mock_transport.add_response("DELETE", "/orders", json_data=[])

        await backpack_api.order.cancel_all_orders("SOL_USDC")

        request = mock_transport.last_request
        assert request.method == "DELETE"
        assert request.query == "symbol=SOL_USDC"

    @pytest.mark.asyncio
    async def test_error_response_decoded(
        self,
        backpack_api: BackpackAPI,
        mock_transport: MockBackpackTransport,
    ) -> None:
        """에러 응답도 본문 그대로 반환"""
        mock_transport.add_response(
            "GET", "/capital", status_code=401,
            json_data={"code": "UNAUTHORIZED", "message": "Invalid signature"},
        )

        result = await backpack_api.capital.get_balances()

        assert result["code"] == "UNAUTHORIZED"


class TestGroupDispatch:
    """그룹 메서드 → 디스패처 위임 테스트 (AsyncMock)"""

    @pytest.mark.asyncio
    async def test_get_open_order_delegates(self) -> None:
        dispatcher = AsyncMock()
        dispatcher.request.return_value = httpx.Response(200, json={"id": "7"})
        api = OrderApi(dispatcher)

        result = await api.get_open_order("7")

        assert result == {"id": "7"}
        endpoint = dispatcher.request.await_args.args[0]
        assert endpoint.name == "get_open_order"
        assert dispatcher.request.await_args.kwargs == {
            "params": {"orderId": "7"},
            "body": None,
        }

    @pytest.mark.asyncio
    async def test_get_open_interest_without_symbol(self) -> None:
        dispatcher = AsyncMock()
        dispatcher.request.return_value = httpx.Response(200, json=[])
        api = MarketsApi(dispatcher)

        await api.get_open_interest()

        assert dispatcher.request.await_args.kwargs["params"] == {"symbol": None}
