"""
Backpack 리소스 그룹 API

그룹별(Assets, Markets, System, Trades, Account, Capital, Order) 메서드 모음.
모든 메서드는 catalog 조회 → 디스패처 호출 → 응답 디코딩만 수행.
"""

from typing import Any

from adapters.backpack.catalog import get_endpoint
from adapters.backpack.rest_client import decode_response
from adapters.backpack.signing import Params
from adapters.interfaces import IBackpackDispatcher
from core.types import KlineInterval, PriceType, ResourceGroup


class _ResourceApi:
    """리소스 그룹 공통 호출부"""

    group: ResourceGroup

    def __init__(self, dispatcher: IBackpackDispatcher):
        self._dispatcher = dispatcher

    async def _invoke(
        self,
        name: str,
        params: Params | None = None,
        body: Params | None = None,
    ) -> Any:
        endpoint = get_endpoint(self.group, name)
        response = await self._dispatcher.request(endpoint, params=params, body=body)
        return decode_response(response)


class AssetsApi(_ResourceApi):
    """자산 정보 (공개)"""

    group = ResourceGroup.ASSETS

    async def get_assets(self) -> Any:
        return await self._invoke("get_assets")

    async def get_collateral(self) -> Any:
        """담보 자산 파라미터"""
        return await self._invoke("get_collateral")


class MarketsApi(_ResourceApi):
    """시장 데이터 (공개)"""

    group = ResourceGroup.MARKETS

    async def get_markets(self) -> Any:
        return await self._invoke("get_markets")

    async def get_market(self, symbol: str) -> Any:
        return await self._invoke("get_market", {"symbol": symbol})

    async def get_ticker(self, symbol: str) -> Any:
        return await self._invoke("get_ticker", {"symbol": symbol})

    async def get_tickers(self) -> Any:
        return await self._invoke("get_tickers")

    async def get_depth(self, symbol: str) -> Any:
        """호가창"""
        return await self._invoke("get_depth", {"symbol": symbol})

    async def get_klines(
        self,
        symbol: str,
        interval: KlineInterval | str,
        start_time: int | str,
        end_time: int | str | None = None,
        price_type: PriceType | str | None = None,
    ) -> Any:
        """캔들 조회

        Args:
            symbol: 마켓 심볼 (예: SUI_USDC)
            interval: 캔들 간격 (예: 1m)
            start_time: 시작 시각 (초 단위 epoch)
            end_time: 종료 시각 (초 단위 epoch)
            price_type: 가격 기준 (Last / Index / Mark)
        """
        return await self._invoke(
            "get_klines",
            {
                "symbol": symbol,
                "interval": interval,
                "startTime": start_time,
                "endTime": end_time,
                "priceType": price_type,
            },
        )

    async def get_mark_prices(self) -> Any:
        return await self._invoke("get_mark_prices")

    async def get_open_interest(self, symbol: str | None = None) -> Any:
        return await self._invoke("get_open_interest", {"symbol": symbol})

    async def get_funding_rates(self) -> Any:
        return await self._invoke("get_funding_rates")


class SystemApi(_ResourceApi):
    """시스템 상태 (공개)"""

    group = ResourceGroup.SYSTEM

    async def get_status(self) -> Any:
        return await self._invoke("get_status")

    async def ping(self) -> Any:
        return await self._invoke("ping")

    async def get_time(self) -> Any:
        """서버 시각 (밀리초)"""
        return await self._invoke("get_time")


class TradesApi(_ResourceApi):
    """체결 내역 (공개)"""

    group = ResourceGroup.TRADES

    async def get_recent_trades(self, symbol: str) -> Any:
        return await self._invoke("get_recent_trades", {"symbol": symbol})

    async def get_historical_trades(self, symbol: str) -> Any:
        return await self._invoke("get_historical_trades", {"symbol": symbol})


class AccountApi(_ResourceApi):
    """계정 설정 (인증)"""

    group = ResourceGroup.ACCOUNT

    async def get_account(self) -> Any:
        return await self._invoke("get_account")

    async def update_account(self, data: Params) -> Any:
        """계정 설정 변경 (예: {"autoLend": True, "leverageLimit": "5"})"""
        return await self._invoke("update_account", body=data)

    async def get_max_borrow_quantity(self, symbol: str) -> Any:
        return await self._invoke("get_max_borrow_quantity", {"symbol": symbol})

    async def get_max_order_quantity(self, symbol: str) -> Any:
        return await self._invoke("get_max_order_quantity", {"symbol": symbol})

    async def get_max_withdrawal_quantity(self, symbol: str) -> Any:
        return await self._invoke("get_max_withdrawal_quantity", {"symbol": symbol})


class CapitalApi(_ResourceApi):
    """잔고 / 입출금 (인증)"""

    group = ResourceGroup.CAPITAL

    async def get_balances(self) -> Any:
        return await self._invoke("get_balances")

    async def get_collateral(self) -> Any:
        """계정 담보 현황"""
        return await self._invoke("get_collateral")

    async def get_deposits(self) -> Any:
        return await self._invoke("get_deposits")

    async def get_deposit_address(self, asset: str) -> Any:
        return await self._invoke("get_deposit_address", {"asset": asset})

    async def get_withdrawals(self) -> Any:
        return await self._invoke("get_withdrawals")

    async def request_withdrawal(self, data: Params) -> Any:
        """출금 요청

        Args:
            data: address, blockchain, quantity, symbol 등 출금 필드
        """
        return await self._invoke("request_withdrawal", body=data)


class OrderApi(_ResourceApi):
    """주문 (인증)"""

    group = ResourceGroup.ORDER

    async def get_open_order(self, order_id: str) -> Any:
        return await self._invoke("get_open_order", {"orderId": order_id})

    async def execute_order(self, data: Params) -> Any:
        """주문 생성

        Args:
            data: symbol, side, orderType, quantity, price 등 주문 필드
        """
        return await self._invoke("execute_order", body=data)

    async def cancel_order(self, order_id: str) -> Any:
        return await self._invoke("cancel_order", {"orderId": order_id})

    async def get_open_orders(self, symbol: str | None = None) -> Any:
        return await self._invoke("get_open_orders", {"symbol": symbol})

    async def cancel_all_orders(self, symbol: str | None = None) -> Any:
        return await self._invoke("cancel_all_orders", {"symbol": symbol})
