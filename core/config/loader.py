"""
설정 로더

secrets.yaml 또는 환경 변수에서 Backpack 자격 증명을 로드하고
거래소 연결 설정 생성.

클라이언트 자체는 환경 변수를 읽지 않음. 호출자가 이 모듈로 로드한
Credentials를 생성자에 명시적으로 전달해야 함.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from core.constants import BackpackEndpoints, Defaults, EnvVars, Paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """API 자격 증명 (base64 공개키 / 개인키)

    불변 데이터 구조. 개인키는 repr에 노출하지 않음.
    """

    public_key: str = ""
    private_key: str = field(default="", repr=False)

    @property
    def is_empty(self) -> bool:
        """공개키/개인키 모두 비어 있는지 여부"""
        return not self.public_key and not self.private_key


@dataclass(frozen=True)
class ExchangeConfig:
    """거래소 연결 설정

    자격 증명과 엔드포인트, 서명 윈도우 정보를 포함
    """

    rest_url: str
    window_ms: int
    timeout: float
    credentials: Credentials


class SecretsLoadError(Exception):
    """Secrets 로드 실패 예외"""

    pass


def _read_credential(section: Mapping[str, Any], key: str) -> str:
    """섹션에서 자격 증명 값 읽기 (없으면 빈 문자열)"""
    value = section.get(key)
    if value is None:
        logger.warning(
            "자격 증명 값이 없어 빈 문자열로 대체",
            extra={"key": key},
        )
        return ""
    return str(value).strip()


def load_secrets(path: Path | None = None) -> ExchangeConfig:
    """secrets.yaml 파일 로드

    형식:
        backpack:
          public_key: "<base64>"
          private_key: "<base64>"
          window_ms: 5000          # 선택
          rest_url: "https://..."  # 선택

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        ExchangeConfig 인스턴스

    Raises:
        SecretsLoadError: 파일이 없거나 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SECRETS_FILE

    if not path.exists():
        raise SecretsLoadError(f"secrets.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SecretsLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SecretsLoadError("secrets.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SecretsLoadError("secrets.yaml 최상위는 매핑이어야 합니다")

    section = data.get("backpack")
    if not isinstance(section, dict):
        raise SecretsLoadError("secrets.yaml에 'backpack' 설정이 없습니다")

    credentials = Credentials(
        public_key=_read_credential(section, "public_key"),
        private_key=_read_credential(section, "private_key"),
    )

    window_ms = section.get("window_ms", Defaults.WINDOW_MS)
    if isinstance(window_ms, bool) or not isinstance(window_ms, int) or window_ms <= 0:
        raise SecretsLoadError(
            f"유효하지 않은 window_ms입니다: {window_ms!r} (양의 정수 필요)"
        )

    timeout = section.get("timeout", Defaults.TIMEOUT_SEC)
    try:
        timeout = float(timeout)
    except (TypeError, ValueError) as e:
        raise SecretsLoadError(f"유효하지 않은 timeout입니다: {timeout!r}") from e

    return ExchangeConfig(
        rest_url=str(section.get("rest_url") or BackpackEndpoints.PROD_REST_URL),
        window_ms=window_ms,
        timeout=timeout,
        credentials=credentials,
    )


def load_credentials_from_env(env: Mapping[str, str] | None = None) -> Credentials:
    """환경 변수에서 자격 증명 로드

    PUBLIC_KEY / PRIVATE_KEY가 없으면 빈 문자열.
    빈 자격 증명으로 만든 클라이언트는 서버에서 서명 검증에 실패함.

    Args:
        env: 환경 변수 매핑 (None이면 os.environ)
    """
    if env is None:
        env = os.environ

    credentials = Credentials(
        public_key=env.get(EnvVars.PUBLIC_KEY, "").strip(),
        private_key=env.get(EnvVars.PRIVATE_KEY, "").strip(),
    )

    if credentials.is_empty:
        logger.warning("환경 변수에 자격 증명이 없습니다 (인증 요청은 거부됨)")

    return credentials


def get_exchange_config(credentials: Credentials) -> ExchangeConfig:
    """기본 엔드포인트/윈도우로 거래소 설정 생성"""
    return ExchangeConfig(
        rest_url=BackpackEndpoints.PROD_REST_URL,
        window_ms=Defaults.WINDOW_MS,
        timeout=Defaults.TIMEOUT_SEC,
        credentials=credentials,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml이 있으면 로드하고, 없으면 환경 변수로 대체
    """

    _instance: "Settings | None" = None
    _config: ExchangeConfig | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._config is None:
            path = secrets_path if secrets_path is not None else Paths.SECRETS_FILE
            if path.exists():
                self._config = load_secrets(path)
            else:
                logger.info(
                    "secrets.yaml 없음, 환경 변수 사용",
                    extra={"path": str(path)},
                )
                self._config = get_exchange_config(load_credentials_from_env())

    @property
    def credentials(self) -> Credentials:
        """API 자격 증명"""
        assert self._config is not None
        return self._config.credentials

    @property
    def exchange_config(self) -> ExchangeConfig:
        """거래소 설정"""
        assert self._config is not None
        return self._config

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
