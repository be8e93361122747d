"""
Backpack 어댑터

Backpack Exchange REST API 연동을 담당.
Ed25519 요청 서명과 catalog 기반 디스패치 지원.
"""

from adapters.backpack.catalog import ENDPOINTS, Endpoint, endpoints_for, get_endpoint
from adapters.backpack.client import BackpackAPI
from adapters.backpack.errors import (
    BackpackError,
    ConfigurationError,
    SigningError,
    UnknownOperationError,
)
from adapters.backpack.rest_client import BackpackRestClient, decode_response
from adapters.backpack.signing import (
    Identity,
    build_auth_headers,
    compose_message,
    encode_params,
    sign_request,
)

__all__ = [
    "BackpackAPI",
    "BackpackRestClient",
    "decode_response",
    # Catalog
    "ENDPOINTS",
    "Endpoint",
    "endpoints_for",
    "get_endpoint",
    # Signing
    "Identity",
    "build_auth_headers",
    "compose_message",
    "encode_params",
    "sign_request",
    # Errors
    "BackpackError",
    "ConfigurationError",
    "SigningError",
    "UnknownOperationError",
]
