"""
Web 서비스 패키지

도메인 결과를 API 응답 형태로 변환
"""

from web.services.finance_service import FinanceService

__all__ = ["FinanceService"]
