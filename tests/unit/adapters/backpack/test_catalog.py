"""
Backpack operation 카탈로그 테스트
"""

import pytest

from adapters.backpack.catalog import ENDPOINTS, Endpoint, endpoints_for, get_endpoint
from adapters.backpack.errors import UnknownOperationError
from core.types import HttpMethod, Instruction, ResourceGroup


class TestEndpoint:
    """Endpoint 데이터클래스 테스트"""

    def test_authenticated(self) -> None:
        endpoint = Endpoint(
            "get_account", ResourceGroup.ACCOUNT, HttpMethod.GET, "/account",
            Instruction.ACCOUNT_QUERY,
        )

        assert endpoint.authenticated is True

    def test_public(self) -> None:
        endpoint = Endpoint("get_markets", ResourceGroup.MARKETS, HttpMethod.GET, "/markets")

        assert endpoint.authenticated is False
        assert endpoint.instruction is None

    def test_path_params(self) -> None:
        endpoint = Endpoint("get_ticker", ResourceGroup.MARKETS, HttpMethod.GET, "/ticker/{symbol}")

        assert endpoint.path_params == ("symbol",)

    def test_no_path_params(self) -> None:
        endpoint = Endpoint("get_tickers", ResourceGroup.MARKETS, HttpMethod.GET, "/tickers")

        assert endpoint.path_params == ()

    def test_frozen(self) -> None:
        endpoint = get_endpoint(ResourceGroup.SYSTEM, "ping")

        with pytest.raises(AttributeError):
            endpoint.path = "/other"  # type: ignore


class TestCatalogInvariants:
    """카탈로그 전체 불변식"""

    def test_unique_group_name(self) -> None:
        keys = [(e.group, e.name) for e in ENDPOINTS]

        assert len(keys) == len(set(keys))

    def test_one_instruction_per_authenticated_endpoint(self) -> None:
        """인증 operation마다 서로 다른 instruction"""
        instructions = [e.instruction for e in ENDPOINTS if e.authenticated]

        assert len(instructions) == len(set(instructions))

    def test_every_instruction_used(self) -> None:
        used = {e.instruction for e in ENDPOINTS if e.authenticated}

        assert used == set(Instruction)

    def test_public_groups_unauthenticated(self) -> None:
        public_groups = {
            ResourceGroup.ASSETS,
            ResourceGroup.MARKETS,
            ResourceGroup.SYSTEM,
            ResourceGroup.TRADES,
        }

        for endpoint in ENDPOINTS:
            if endpoint.group in public_groups:
                assert not endpoint.authenticated, endpoint.name
            else:
                assert endpoint.authenticated, endpoint.name

    def test_http_methods(self) -> None:
        """읽기는 GET, 주문/출금은 POST, 계정 변경은 PATCH, 취소는 DELETE"""
        methods = {(e.group, e.name): e.method for e in ENDPOINTS}

        assert methods[(ResourceGroup.ORDER, "execute_order")] == HttpMethod.POST
        assert methods[(ResourceGroup.CAPITAL, "request_withdrawal")] == HttpMethod.POST
        assert methods[(ResourceGroup.ACCOUNT, "update_account")] == HttpMethod.PATCH
        assert methods[(ResourceGroup.ORDER, "cancel_order")] == HttpMethod.DELETE
        assert methods[(ResourceGroup.ORDER, "cancel_all_orders")] == HttpMethod.DELETE

        writes = {
            (ResourceGroup.ORDER, "execute_order"),
            (ResourceGroup.CAPITAL, "request_withdrawal"),
            (ResourceGroup.ACCOUNT, "update_account"),
            (ResourceGroup.ORDER, "cancel_order"),
            (ResourceGroup.ORDER, "cancel_all_orders"),
        }
        for key, method in methods.items():
            if key not in writes:
                assert method == HttpMethod.GET, key

    def test_body_only_on_writes(self) -> None:
        with_body = {e.name for e in ENDPOINTS if e.has_body}

        assert with_body == {"update_account", "request_withdrawal", "execute_order"}


class TestGetEndpoint:
    """get_endpoint 테스트"""

    def test_lookup(self) -> None:
        endpoint = get_endpoint(ResourceGroup.ORDER, "cancel_order")

        assert endpoint.method == HttpMethod.DELETE
        assert endpoint.path == "/order"
        assert endpoint.instruction == Instruction.ORDER_CANCEL
        assert endpoint.required == ("orderId",)

    def test_lookup_by_string_group(self) -> None:
        endpoint = get_endpoint("markets", "get_klines")

        assert endpoint.required == ("symbol", "interval", "startTime")
        assert endpoint.optional == ("endTime", "priceType")

    def test_collateral_in_two_groups(self) -> None:
        """get_collateral은 assets(공개)와 capital(인증) 양쪽에 존재"""
        public = get_endpoint(ResourceGroup.ASSETS, "get_collateral")
        private = get_endpoint(ResourceGroup.CAPITAL, "get_collateral")

        assert public.path == private.path == "/collateral"
        assert public.instruction is None
        assert private.instruction == Instruction.COLLATERAL_QUERY

    def test_unknown_name(self) -> None:
        with pytest.raises(UnknownOperationError):
            get_endpoint(ResourceGroup.ORDER, "explode")

    def test_unknown_group(self) -> None:
        with pytest.raises(UnknownOperationError):
            get_endpoint("futures", "get_markets")

    def test_unknown_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_endpoint(ResourceGroup.SYSTEM, "nope")


class TestEndpointsFor:
    """endpoints_for 테스트"""

    def test_system_group(self) -> None:
        names = [e.name for e in endpoints_for(ResourceGroup.SYSTEM)]

        assert names == ["get_status", "ping", "get_time"]

    def test_order_group(self) -> None:
        names = [e.name for e in endpoints_for("order")]

        assert names == [
            "get_open_order",
            "execute_order",
            "cancel_order",
            "get_open_orders",
            "cancel_all_orders",
        ]
