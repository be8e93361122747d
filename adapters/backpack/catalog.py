"""
Backpack operation 카탈로그

operation 이름 → HTTP 메서드, 경로, instruction, 파라미터 정의.
순수 데이터 테이블이며 서명 로직은 없음.
"""

from dataclasses import dataclass
from string import Formatter

from adapters.backpack.errors import UnknownOperationError
from core.types import HttpMethod, Instruction, ResourceGroup


@dataclass(frozen=True)
class Endpoint:
    """operation 정의 (불변)

    Attributes:
        name: operation 이름 (예: get_markets)
        group: 리소스 그룹
        method: HTTP 메서드
        path: 경로 템플릿 (예: /ticker/{symbol})
        instruction: 인증 operation identifier (공개 API면 None)
        required: 필수 query 파라미터
        optional: 선택 query 파라미터
        has_body: JSON body 사용 여부
    """

    name: str
    group: ResourceGroup
    method: HttpMethod
    path: str
    instruction: Instruction | None = None
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    has_body: bool = False

    @property
    def authenticated(self) -> bool:
        """인증 필요 여부"""
        return self.instruction is not None

    @property
    def path_params(self) -> tuple[str, ...]:
        """경로 템플릿에 포함된 파라미터 이름"""
        return tuple(
            field_name
            for _, field_name, _, _ in Formatter().parse(self.path)
            if field_name
        )


_A = ResourceGroup.ASSETS
_M = ResourceGroup.MARKETS
_S = ResourceGroup.SYSTEM
_T = ResourceGroup.TRADES
_AC = ResourceGroup.ACCOUNT
_C = ResourceGroup.CAPITAL
_O = ResourceGroup.ORDER

GET = HttpMethod.GET
POST = HttpMethod.POST
PATCH = HttpMethod.PATCH
DELETE = HttpMethod.DELETE


ENDPOINTS: tuple[Endpoint, ...] = (
    # Assets
    Endpoint("get_assets", _A, GET, "/assets"),
    Endpoint("get_collateral", _A, GET, "/collateral"),

    # Markets
    Endpoint("get_markets", _M, GET, "/markets"),
    Endpoint("get_market", _M, GET, "/market", required=("symbol",)),
    Endpoint("get_ticker", _M, GET, "/ticker/{symbol}"),
    Endpoint("get_tickers", _M, GET, "/tickers"),
    Endpoint("get_depth", _M, GET, "/depth/{symbol}"),
    Endpoint(
        "get_klines", _M, GET, "/klines",
        required=("symbol", "interval", "startTime"),
        optional=("endTime", "priceType"),
    ),
    Endpoint("get_mark_prices", _M, GET, "/markPrices"),
    Endpoint("get_open_interest", _M, GET, "/openInterest", optional=("symbol",)),
    Endpoint("get_funding_rates", _M, GET, "/fundingRates"),

    # System
    Endpoint("get_status", _S, GET, "/status"),
    Endpoint("ping", _S, GET, "/ping"),
    Endpoint("get_time", _S, GET, "/time"),

    # Trades
    Endpoint("get_recent_trades", _T, GET, "/trades/{symbol}"),
    Endpoint("get_historical_trades", _T, GET, "/historicalTrades/{symbol}"),

    # Account
    Endpoint("get_account", _AC, GET, "/account", Instruction.ACCOUNT_QUERY),
    Endpoint(
        "update_account", _AC, PATCH, "/account", Instruction.ACCOUNT_UPDATE,
        has_body=True,
    ),
    Endpoint(
        "get_max_borrow_quantity", _AC, GET, "/maxBorrowQuantity",
        Instruction.MAX_BORROW_QUANTITY, required=("symbol",),
    ),
    Endpoint(
        "get_max_order_quantity", _AC, GET, "/maxOrderQuantity",
        Instruction.MAX_ORDER_QUANTITY, required=("symbol",),
    ),
    Endpoint(
        "get_max_withdrawal_quantity", _AC, GET, "/maxWithdrawalQuantity",
        Instruction.MAX_WITHDRAWAL_QUANTITY, required=("symbol",),
    ),

    # Capital
    Endpoint("get_balances", _C, GET, "/capital", Instruction.BALANCE_QUERY),
    Endpoint("get_collateral", _C, GET, "/collateral", Instruction.COLLATERAL_QUERY),
    Endpoint("get_deposits", _C, GET, "/deposits", Instruction.DEPOSIT_QUERY_ALL),
    Endpoint(
        "get_deposit_address", _C, GET, "/depositAddress",
        Instruction.DEPOSIT_ADDRESS_QUERY, required=("asset",),
    ),
    Endpoint("get_withdrawals", _C, GET, "/withdrawals", Instruction.WITHDRAWAL_QUERY_ALL),
    Endpoint(
        "request_withdrawal", _C, POST, "/withdrawal", Instruction.WITHDRAW,
        has_body=True,
    ),

    # Order
    Endpoint(
        "get_open_order", _O, GET, "/order", Instruction.ORDER_QUERY,
        required=("orderId",),
    ),
    Endpoint(
        "execute_order", _O, POST, "/order", Instruction.ORDER_EXECUTE,
        has_body=True,
    ),
    Endpoint(
        "cancel_order", _O, DELETE, "/order", Instruction.ORDER_CANCEL,
        required=("orderId",),
    ),
    Endpoint(
        "get_open_orders", _O, GET, "/orders", Instruction.ORDER_QUERY_ALL,
        optional=("symbol",),
    ),
    Endpoint(
        "cancel_all_orders", _O, DELETE, "/orders", Instruction.ORDER_CANCEL_ALL,
        optional=("symbol",),
    ),
)


# (group, name) → Endpoint
# get_collateral은 assets(공개)와 capital(인증) 두 그룹에 존재
_BY_KEY: dict[tuple[ResourceGroup, str], Endpoint] = {
    (endpoint.group, endpoint.name): endpoint for endpoint in ENDPOINTS
}


def get_endpoint(group: ResourceGroup | str, name: str) -> Endpoint:
    """그룹/이름으로 operation 조회

    Raises:
        UnknownOperationError: 카탈로그에 없는 경우
    """
    try:
        key = (ResourceGroup(group), name)
    except ValueError as e:
        raise UnknownOperationError(f"{group}.{name}") from e

    endpoint = _BY_KEY.get(key)
    if endpoint is None:
        raise UnknownOperationError(f"{key[0].value}.{name}")
    return endpoint


def endpoints_for(group: ResourceGroup | str) -> list[Endpoint]:
    """그룹에 속한 operation 목록 (정의 순서)"""
    group = ResourceGroup(group)
    return [endpoint for endpoint in ENDPOINTS if endpoint.group == group]
