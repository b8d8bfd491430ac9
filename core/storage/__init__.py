"""
스토리지 모듈

컬렉션 기반 레코드 저장소 제공
"""

from core.storage.record_store import (
    DuplicateRecordError,
    RecordNotFoundError,
    RecordStore,
    generate_record_id,
)

__all__ = [
    "RecordStore",
    "RecordNotFoundError",
    "DuplicateRecordError",
    "generate_record_id",
]
