"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 Decimal 정밀도 유지를 위해 문자열로 반환.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")


class EntryResponse(BaseModel):
    """분개 응답"""

    id: str = Field(..., description="분개 ID")
    kind: str = Field(..., description="분개 유형")
    date: str = Field(..., description="거래일")
    account: str | None = Field(default=None, description="계정 코드")
    description: str = Field(default="", description="적요")
    debit_amount: str | None = Field(default=None, description="차변 금액 (양변 분개)")
    credit_amount: str | None = Field(default=None, description="대변 금액 (양변 분개)")
    amount: str | None = Field(default=None, description="금액 (단변 분개)")
    payment_method: str | None = Field(default=None, description="결제 수단")
    reference: str | None = Field(default=None, description="참조 번호")
    notes: str | None = Field(default=None, description="메모")


class AccountResponse(BaseModel):
    """계정과목 응답"""

    id: str = Field(..., description="레코드 ID")
    code: str = Field(..., description="계정 코드")
    name: str = Field(..., description="계정 이름")
    type: str | None = Field(default=None, description="계정 유형")


class AssetResponse(BaseModel):
    """고정자산 응답 (추가 필드 포함)"""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="레코드 ID")
    name: str = Field(..., description="자산 이름")
    value: str = Field(..., description="자산 가액")


class LedgerLineResponse(BaseModel):
    """총계정원장 라인 응답"""

    date: str = Field(..., description="거래일")
    account: str | None = Field(default=None, description="계정 코드")
    debit: str = Field(..., description="차변")
    credit: str = Field(..., description="대변")
    balance: str = Field(..., description="누적 잔액")
    source_type: str = Field(..., description="출처 (debtor/creditor/journal/income/expense)")
    entry_id: str = Field(default="", description="원 분개 ID")
    description: str = Field(default="", description="적요")
    reference: str | None = Field(default=None, description="참조 번호")


class TrialBalanceRowResponse(BaseModel):
    """시산표 행 응답"""

    code: str = Field(..., description="계정 코드")
    name: str = Field(..., description="계정 이름")
    type: str = Field(..., description="계정 유형")
    debit: str = Field(..., description="차변 합계")
    credit: str = Field(..., description="대변 합계")


class TrialBalanceResponse(BaseModel):
    """시산표 응답

    total_debit = total_credit는 보장되지 않음 (수입/지출은 상대 계정 없음).
    """

    rows: list[TrialBalanceRowResponse] = Field(default_factory=list, description="계정별 합계")
    total_debit: str = Field(..., description="차변 총계")
    total_credit: str = Field(..., description="대변 총계")
    period: dict[str, Any] = Field(default_factory=dict, description="조회 기간")


class IncomeStatementResponse(BaseModel):
    """손익계산서 응답"""

    income: str = Field(..., description="수입 합계")
    expenses: str = Field(..., description="지출 합계")
    net_income: str = Field(..., description="순이익")
    period: dict[str, Any] = Field(default_factory=dict, description="조회 기간")
