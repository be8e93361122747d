"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class Instruction(str, Enum):
    """서명 요청 instruction (Backpack 정의 operation identifier)

    인증이 필요한 엔드포인트마다 정확히 하나씩 대응.
    값은 서명 메시지의 `instruction=` 필드에 그대로 들어감.
    """

    ACCOUNT_QUERY = "accountQuery"
    ACCOUNT_UPDATE = "accountUpdate"
    MAX_BORROW_QUANTITY = "maxBorrowQuantity"
    MAX_ORDER_QUANTITY = "maxOrderQuantity"
    MAX_WITHDRAWAL_QUANTITY = "maxWithdrawalQuantity"

    BALANCE_QUERY = "balanceQuery"
    COLLATERAL_QUERY = "collateralQuery"
    DEPOSIT_QUERY_ALL = "depositQueryAll"
    DEPOSIT_ADDRESS_QUERY = "depositAddressQuery"
    WITHDRAWAL_QUERY_ALL = "withdrawalQueryAll"
    WITHDRAW = "withdraw"

    ORDER_QUERY = "orderQuery"
    ORDER_QUERY_ALL = "orderQueryAll"
    ORDER_EXECUTE = "orderExecute"
    ORDER_CANCEL = "orderCancel"
    ORDER_CANCEL_ALL = "orderCancelAll"


class HttpMethod(str, Enum):
    """HTTP 메서드"""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ResourceGroup(str, Enum):
    """API 리소스 그룹"""

    ASSETS = "assets"
    MARKETS = "markets"
    SYSTEM = "system"
    TRADES = "trades"
    ACCOUNT = "account"
    CAPITAL = "capital"
    ORDER = "order"


class KlineInterval(str, Enum):
    """캔들 간격"""

    MINUTE_1 = "1m"
    MINUTE_3 = "3m"
    MINUTE_5 = "5m"
    MINUTE_15 = "15m"
    MINUTE_30 = "30m"
    HOUR_1 = "1h"
    HOUR_2 = "2h"
    HOUR_4 = "4h"
    HOUR_6 = "6h"
    HOUR_8 = "8h"
    HOUR_12 = "12h"
    DAY_1 = "1d"
    DAY_3 = "3d"
    WEEK_1 = "1w"
    MONTH_1 = "1month"


class PriceType(str, Enum):
    """캔들 가격 기준"""

    LAST = "Last"
    INDEX = "Index"
    MARK = "Mark"
