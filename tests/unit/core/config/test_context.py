"""
core/config/context.py 테스트

요청 컨텍스트와 재무 접근 권한
"""

import pytest

from core.config.context import RequestContext


class TestRequestContext:
    """RequestContext 테스트"""

    def test_default_is_administrator(self) -> None:
        """기본값은 관리자, 자산 유형"""
        context = RequestContext()

        assert context.role == "administrator"
        assert context.default_account_type == "asset"
        assert context.can_access_finance

    def test_non_admin_denied(self) -> None:
        """관리자가 아니면 PermissionError"""
        context = RequestContext(role="student")

        assert not context.can_access_finance
        with pytest.raises(PermissionError, match="student"):
            context.require_finance_access()

    def test_custom_finance_roles(self) -> None:
        """허용 역할 확장"""
        context = RequestContext(role="staff", finance_roles=("administrator", "staff"))

        context.require_finance_access()

    def test_frozen(self) -> None:
        context = RequestContext()

        with pytest.raises(AttributeError):
            context.role = "student"  # type: ignore
