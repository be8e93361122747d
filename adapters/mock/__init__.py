"""
Mock 어댑터

테스트용 Mock 구현체 제공.
"""

from adapters.mock.backpack_transport import MockBackpackTransport, RecordedRequest

__all__ = [
    "MockBackpackTransport",
    "RecordedRequest",
]
