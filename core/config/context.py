"""
요청 단위 컨텍스트

역할/표시 설정을 세션 저장소에서 읽지 않고
호출마다 명시적으로 전달하기 위한 불변 객체.
"""

from dataclasses import dataclass

from core.constants import Defaults


@dataclass(frozen=True)
class RequestContext:
    """요청 컨텍스트

    Args:
        role: 요청 사용자 역할
        default_account_type: 유형이 없는 계정과목의 보고 유형
        finance_roles: 재무 기능 접근 가능 역할
    """

    role: str = Defaults.ROLE
    default_account_type: str = Defaults.ACCOUNT_TYPE
    finance_roles: tuple[str, ...] = Defaults.FINANCE_ROLES

    @property
    def can_access_finance(self) -> bool:
        return self.role in self.finance_roles

    def require_finance_access(self) -> None:
        """재무 기능 접근 권한 확인

        Raises:
            PermissionError: 접근 권한이 없는 역할인 경우
        """
        if not self.can_access_finance:
            raise PermissionError(f"Role '{self.role}' cannot access finance records")
