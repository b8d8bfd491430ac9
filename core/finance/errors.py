"""
재무 분개 검증 예외

저장 전에 동기적으로 발생하며 호출자에게 그대로 전달됨.
code는 API 응답에 노출되는 안정적인 식별자.
"""


class ValidationError(Exception):
    """분개/계정 검증 실패"""

    code: str = "ValidationError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BothAmountsSet(ValidationError):
    """차변/대변 금액이 모두 양수"""

    code = "BothAmountsSet"


class NoAmountSet(ValidationError):
    """차변/대변 금액이 모두 없음"""

    code = "NoAmountSet"


class InvalidAmount(ValidationError):
    """금액이 0 이하이거나 계정이 비어 있음"""

    code = "InvalidAmount"


class EntryDecodeError(ValidationError):
    """저장된 레코드를 분개로 해석할 수 없음 (날짜/금액 형식 오류)"""

    code = "InvalidEntry"
