"""
어댑터 테스트 픽스처

공통 테스트 설정 및 픽스처 제공.
"""

import base64

import pytest
import pytest_asyncio
from nacl.signing import SigningKey

from adapters.backpack.client import BackpackAPI
from adapters.backpack.rest_client import BackpackRestClient
from adapters.mock.backpack_transport import MockBackpackTransport


# 고정 seed (0x00..0x1f)
TEST_SEED = bytes(range(32))
TEST_TIMESTAMP = 1700000000000


@pytest.fixture
def private_key_b64() -> str:
    """테스트용 base64 개인키"""
    return base64.b64encode(TEST_SEED).decode("ascii")


@pytest.fixture
def public_key_b64() -> str:
    """테스트용 base64 공개키 (개인키에서 유도)"""
    verify_key = SigningKey(TEST_SEED).verify_key
    return base64.b64encode(bytes(verify_key)).decode("ascii")


@pytest.fixture
def fixed_clock():
    """항상 같은 시각을 반환하는 시계"""
    return lambda: TEST_TIMESTAMP


@pytest.fixture
def mock_transport() -> MockBackpackTransport:
    """Mock 전송 계층"""
    return MockBackpackTransport()


@pytest_asyncio.fixture
async def rest_client(
    public_key_b64: str,
    private_key_b64: str,
    mock_transport: MockBackpackTransport,
):
    """Mock 전송 계층을 사용하는 REST 클라이언트"""
    client = BackpackRestClient(
        public_key=public_key_b64,
        private_key=private_key_b64,
        transport=mock_transport,
    )
    yield client
    await client.close()


@pytest_asyncio.fixture
async def backpack_api(
    public_key_b64: str,
    private_key_b64: str,
    mock_transport: MockBackpackTransport,
):
    """Mock 전송 계층을 사용하는 BackpackAPI"""
    api = BackpackAPI(
        public_key=public_key_b64,
        private_key=private_key_b64,
        transport=mock_transport,
    )
    yield api
    await api.close()
