"""
pytest 공통 fixture 정의

재무 원장 집계 테스트용 fixture
"""

import tempfile
from pathlib import Path

import pytest

from adapters.mock import InMemoryRecordStore
from core.types import Collections


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
database:
  path: data/test_finance.db

log_level: debug

web:
  host: 0.0.0.0
  port: 9000

finance:
  default_account_type: Expense
  roles:
    - administrator
    - staff
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def chart_of_accounts() -> list[dict]:
    """기본 계정과목표 레코드"""
    return [
        {"id": "acc_1000", "code": "1000", "name": "Cash", "type": "asset"},
        {"id": "acc_2000", "code": "2000", "name": "Accounts Receivable", "type": "asset"},
        {"id": "acc_3000", "code": "3000", "name": "Accounts Payable", "type": "liability"},
        {"id": "acc_4000", "code": "4000", "name": "Tuition Income", "type": "revenue"},
        {"id": "acc_5000", "code": "5000", "name": "Salary Expense", "type": "expense"},
    ]


@pytest.fixture
def record_store(chart_of_accounts: list[dict]) -> InMemoryRecordStore:
    """계정과목표만 저장된 인메모리 저장소"""
    return InMemoryRecordStore({Collections.CHART_OF_ACCOUNTS: chart_of_accounts})
