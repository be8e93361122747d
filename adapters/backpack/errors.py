"""
Backpack 어댑터 에러

전송 계층 에러(httpx)는 감싸지 않고 그대로 전파.
2xx가 아닌 응답도 예외가 아니라 응답 그대로 반환됨.
"""


class BackpackError(Exception):
    """Backpack 어댑터 에러 베이스"""

    pass


class ConfigurationError(BackpackError):
    """자격 증명/설정 에러

    개인키 형식이 잘못된 경우 등. 네트워크 호출 전에 발생.
    """

    pass


class SigningError(BackpackError):
    """서명 계산 실패

    이 에러가 발생하면 요청은 전송되지 않음.
    """

    pass


class UnknownOperationError(BackpackError, KeyError):
    """카탈로그에 없는 operation 이름"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown Backpack operation: {name}")

    def __str__(self) -> str:
        return f"Unknown Backpack operation: {self.name}"
