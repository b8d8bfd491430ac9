"""
요청 스키마 (Pydantic)

Web API 요청 데이터 파싱.
비즈니스 규칙 검증(차변/대변, 금액 > 0 등)은 core.finance.validation에서 수행.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RecordRequest(BaseModel):
    """저장 레코드(camelCase)로 변환 가능한 요청"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self, partial: bool = False) -> dict[str, Any]:
        """저장소 레코드 형태로 변환

        Args:
            partial: True면 요청에 포함된 필드만 (수정용)
        """
        data = self.model_dump(
            by_alias=True,
            exclude_unset=partial,
            exclude_none=not partial,
        )
        for key, value in data.items():
            if isinstance(value, Decimal):
                data[key] = str(value)
        return data


class EntryRequest(_RecordRequest):
    """분개 생성/수정 요청

    양변 분개(debtor/creditor/journal)는 debit_amount/credit_amount,
    단변 분개(income/expense)는 amount를 사용.
    """

    # ISO 날짜/시각 문자열 그대로 전달, 날짜 변환은 core.finance.entries.parse_date
    date: str | None = Field(default=None, description="거래일 (YYYY-MM-DD 또는 ISO 8601 시각)")
    account: str | None = Field(default=None, description="계정 코드")
    description: str | None = Field(default=None, description="적요")
    debit_amount: Decimal | None = Field(default=None, description="차변 금액")
    credit_amount: Decimal | None = Field(default=None, description="대변 금액")
    amount: Decimal | None = Field(default=None, description="금액 (수입/지출)")
    payment_method: str | None = Field(default=None, description="결제 수단")
    reference: str | None = Field(default=None, description="참조 번호")
    notes: str | None = Field(default=None, description="메모")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "date": "2024-01-05",
                    "account": "4000",
                    "description": "Term 1 tuition",
                    "amount": "200.00",
                    "paymentMethod": "bank",
                },
                {
                    "date": "2024-01-08",
                    "account": "1000",
                    "description": "Petty cash top-up",
                    "debitAmount": "150.00",
                },
            ]
        },
    )


class AccountRequest(_RecordRequest):
    """계정과목 생성/수정 요청"""

    code: str | None = Field(default=None, description="계정 코드")
    name: str | None = Field(default=None, description="계정 이름")
    type: str | None = Field(default=None, description="계정 유형 (asset/liability/equity/revenue/expense)")


class AssetRequest(_RecordRequest):
    """고정자산 생성/수정 요청

    name, value 외의 필드(category, location 등)는 그대로 저장.
    """

    name: str | None = Field(default=None, description="자산 이름")
    value: Decimal | None = Field(default=None, description="자산 가액")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
