"""
Backpack 요청 서명

인증 요청의 헤더 생성 파이프라인:
    encode_params → compose_message → Identity.sign → build_auth_headers

서명 메시지 형식:
    instruction=<id>&<정렬된 key=value ...>&timestamp=<ms>&window=<ms>

Ed25519 서명 (PyNaCl). 같은 키/메시지에 대해 항상 같은 서명.
"""

import base64
import binascii
import logging
import time
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Iterator, Mapping
from urllib.parse import quote_plus

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey

from adapters.backpack.errors import ConfigurationError, SigningError
from core.constants import AuthHeaders, Defaults, KeyLengths
from core.types import Instruction

logger = logging.getLogger(__name__)

Params = Mapping[str, Any]


# -------------------------------------------------------------------------
# Canonical Encoder
# -------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """파라미터 값을 문자열로 변환

    bool은 JSON 표기(true/false), Enum은 value 사용.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _form_quote(text: str) -> str:
    """application/x-www-form-urlencoded 인코딩

    영숫자와 `*-._`만 그대로 두고 공백은 `+`.
    """
    return quote_plus(text, safe="*").replace("~", "%7E")


def iter_pairs(
    params: Params | None = None,
    body: Params | None = None,
) -> Iterator[tuple[str, str]]:
    """query 파라미터 → body 필드 순으로 (key, value) 나열 (None 값 제외)"""
    for source in (params, body):
        if not source:
            continue
        for key, value in source.items():
            if value is None:
                continue
            yield str(key), format_value(value)


def encode_params(
    params: Params | None = None,
    body: Params | None = None,
) -> str:
    """파라미터를 정렬된 canonical 문자열로 인코딩

    query와 body를 합친 뒤(중복 키 유지) 각 key/value를 URL 인코딩하고,
    인코딩된 `key=value` 문자열 기준으로 정렬해 `&`로 연결.
    입력 순서와 무관하게 항상 같은 결과를 반환.

    Returns:
        인코딩 문자열 (파라미터가 없으면 빈 문자열)
    """
    pairs = [
        f"{_form_quote(key)}={_form_quote(value)}"
        for key, value in iter_pairs(params, body)
    ]
    pairs.sort()
    return "&".join(pairs)


# -------------------------------------------------------------------------
# Message Composer
# -------------------------------------------------------------------------

def compose_message(
    instruction: Instruction | str,
    params: Params | None,
    body: Params | None,
    timestamp: int,
    window: int,
) -> bytes:
    """서명 대상 메시지 생성

    timestamp/window는 정렬 대상이 아니며 항상 마지막에 붙음.
    """
    instruction_id = instruction.value if isinstance(instruction, Instruction) else instruction

    parts = [f"instruction={instruction_id}"]
    encoded = encode_params(params, body)
    if encoded:
        parts.append(encoded)
    parts.append(f"timestamp={timestamp}")
    parts.append(f"window={window}")

    return "&".join(parts).encode("utf-8")


def _now_ms() -> int:
    return int(time.time() * 1000)


class TimestampSource:
    """요청 타임스탬프 생성기 (밀리초)

    같은 밀리초 안에서 연속 호출해도 값이 겹치지 않도록
    직전 값보다 항상 큰 값을 반환.
    """

    def __init__(self, clock: Callable[[], int] | None = None):
        self._clock = clock or _now_ms
        self._last = 0

    def next(self) -> int:
        timestamp = max(int(self._clock()), self._last + 1)
        self._last = timestamp
        return timestamp


# -------------------------------------------------------------------------
# Signer
# -------------------------------------------------------------------------

def _decode_private_key(private_key: str) -> bytes:
    """base64 개인키를 32바이트 seed로 디코딩

    64바이트(seed + public key) 형식이면 앞 32바이트 사용.

    Raises:
        ConfigurationError: base64 형식 오류 또는 길이 불일치
    """
    try:
        key_bytes = base64.b64decode(private_key, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError("Private key is not valid base64") from e

    if len(key_bytes) == KeyLengths.EXPANDED:
        key_bytes = key_bytes[:KeyLengths.SEED]

    if len(key_bytes) != KeyLengths.SEED:
        raise ConfigurationError(
            f"Invalid private key length: {len(key_bytes)} bytes "
            f"(expected {KeyLengths.SEED} or {KeyLengths.EXPANDED})"
        )

    return key_bytes


@dataclass(frozen=True)
class Identity:
    """API 신원 (공개키 + 서명 키)

    클라이언트 수명 동안 불변. 개인키는 repr/로그에 노출하지 않음.

    빈 개인키로 만든 Identity는 0으로 채운 seed로 서명함.
    요청 형식은 정상이지만 서버에서 서명 검증에 실패함.
    """

    public_key: str
    _signing_key: SigningKey = field(repr=False, compare=False)
    is_placeholder: bool = False

    @classmethod
    def from_base64(cls, public_key: str = "", private_key: str = "") -> "Identity":
        """base64 키 문자열로 Identity 생성

        Raises:
            ConfigurationError: 개인키 형식이 잘못된 경우
        """
        private_key = (private_key or "").strip()

        if not private_key:
            logger.warning("Private key가 비어 있음, 인증 요청은 서버에서 거부됨")
            return cls(
                public_key=public_key or "",
                _signing_key=SigningKey(bytes(KeyLengths.SEED)),
                is_placeholder=True,
            )

        seed = _decode_private_key(private_key)
        try:
            signing_key = SigningKey(seed)
        except (CryptoError, TypeError, ValueError) as e:
            raise ConfigurationError("Private key rejected by Ed25519") from e

        return cls(public_key=public_key or "", _signing_key=signing_key)

    @property
    def derived_public_key(self) -> str:
        """개인키에서 유도한 공개키 (base64)

        설정된 public_key와 다르면 서버에서 서명 검증 실패.
        """
        return base64.b64encode(bytes(self._signing_key.verify_key)).decode("ascii")

    def sign(self, message: bytes) -> str:
        """메시지에 Ed25519 서명

        Returns:
            base64 인코딩된 서명 (64바이트)

        Raises:
            SigningError: 서명 계산 실패
        """
        try:
            signature = self._signing_key.sign(message).signature
        except (CryptoError, TypeError, ValueError) as e:
            raise SigningError(f"Ed25519 signing failed: {e}") from e

        if len(signature) != 64:
            raise SigningError(f"Unexpected signature length: {len(signature)}")

        return base64.b64encode(signature).decode("ascii")


# -------------------------------------------------------------------------
# Header Builder
# -------------------------------------------------------------------------

def build_auth_headers(
    identity: Identity,
    signature: str,
    timestamp: int,
    window: int,
) -> dict[str, str]:
    """인증 헤더 4종 생성"""
    return {
        AuthHeaders.TIMESTAMP: str(timestamp),
        AuthHeaders.WINDOW: str(window),
        AuthHeaders.API_KEY: identity.public_key,
        AuthHeaders.SIGNATURE: signature,
    }


def sign_request(
    identity: Identity,
    instruction: Instruction | str,
    params: Params | None = None,
    body: Params | None = None,
    timestamp: int | None = None,
    window: int = Defaults.WINDOW_MS,
) -> dict[str, str]:
    """인증 헤더 생성 (인코딩 → 메시지 조립 → 서명 → 헤더)

    Args:
        identity: 서명에 사용할 신원
        instruction: operation identifier
        params: query 파라미터
        body: body 필드
        timestamp: 밀리초 타임스탬프 (None이면 현재 시각)
        window: 서명 유효 시간 (밀리초)

    Returns:
        X-Timestamp / X-Window / X-API-Key / X-Signature 헤더
    """
    if timestamp is None:
        timestamp = _now_ms()

    message = compose_message(instruction, params, body, timestamp, window)
    signature = identity.sign(message)

    return build_auth_headers(identity, signature, timestamp, window)
