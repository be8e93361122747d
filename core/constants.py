"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BackpackEndpoints:
    """Backpack Exchange API 엔드포인트 (고정값)

    공식 문서: https://docs.backpack.exchange
    """

    PROD_REST_URL: str = "https://api.backpack.exchange/api/v1"


class AuthHeaders:
    """인증 헤더 이름"""

    TIMESTAMP: str = "X-Timestamp"
    WINDOW: str = "X-Window"
    API_KEY: str = "X-API-Key"
    SIGNATURE: str = "X-Signature"


class Defaults:
    """기본값 상수"""

    EXCHANGE: str = "BACKPACK"

    # 서명 유효 시간 (밀리초)
    WINDOW_MS: int = 5000
    # HTTP 요청 타임아웃 (초)
    TIMEOUT_SEC: float = 30.0

    LOG_LEVEL: str = "INFO"


class EnvVars:
    """자격 증명 환경 변수 이름"""

    PUBLIC_KEY: str = "PUBLIC_KEY"
    PRIVATE_KEY: str = "PRIVATE_KEY"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"


class KeyLengths:
    """Ed25519 키 길이 (바이트)"""

    SEED: int = 32
    # seed + public key 형식 (일부 지갑 export 포맷)
    EXPANDED: int = 64
