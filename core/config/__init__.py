"""
설정 패키지

settings.yaml 로더와 요청 단위 컨텍스트
"""

from core.config.context import RequestContext
from core.config.loader import (
    AppSettings,
    Settings,
    SettingsLoadError,
    get_settings,
    load_settings,
)

__all__ = [
    "AppSettings",
    "RequestContext",
    "Settings",
    "SettingsLoadError",
    "get_settings",
    "load_settings",
]
