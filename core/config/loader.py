"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from core.constants import Defaults, Paths
from core.types import AccountType, UserRole

logger = logging.getLogger(__name__)

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class AppSettings:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    db_path: Path
    log_level: str
    web_host: str
    web_port: int
    default_account_type: str
    finance_roles: tuple[str, ...]


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def default_settings() -> AppSettings:
    """파일이 없을 때 사용하는 기본 설정"""
    return AppSettings(
        db_path=Paths.DB_FILE,
        log_level=Defaults.LOG_LEVEL,
        web_host=Defaults.WEB_HOST,
        web_port=Defaults.WEB_PORT,
        default_account_type=Defaults.ACCOUNT_TYPE,
        finance_roles=Defaults.FINANCE_ROLES,
    )


def load_settings(path: Path | None = None) -> AppSettings:
    """settings.yaml 파일 로드

    파일이 없으면 기본 설정을 반환.

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppSettings 인스턴스

    Raises:
        SettingsLoadError: 형식이 잘못되었거나 값이 유효하지 않은 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    defaults = default_settings()

    if not path.exists():
        logger.info(f"settings.yaml 없음, 기본 설정 사용: {path}")
        return defaults

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return defaults

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml의 최상위는 매핑이어야 합니다")

    db_config = data.get("database", {}) or {}
    web_config = data.get("web", {}) or {}
    finance_config = data.get("finance", {}) or {}

    db_path = db_config.get("path")
    if db_path is None:
        resolved_db_path = defaults.db_path
    else:
        resolved_db_path = Path(db_path)
        if not resolved_db_path.is_absolute():
            resolved_db_path = path.parent / resolved_db_path

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise SettingsLoadError(f"유효하지 않은 log_level입니다: '{log_level}'")

    try:
        web_port = int(web_config.get("port", defaults.web_port))
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(f"web.port는 정수여야 합니다: {web_config.get('port')!r}") from e

    account_type = finance_config.get("default_account_type", defaults.default_account_type)
    try:
        account_type = AccountType(str(account_type).lower()).value
    except ValueError as e:
        valid_types = [t.value for t in AccountType]
        raise SettingsLoadError(
            f"유효하지 않은 default_account_type입니다: '{account_type}'. "
            f"유효한 값: {valid_types}"
        ) from e

    roles = finance_config.get("roles", list(defaults.finance_roles))
    if isinstance(roles, str):
        roles = [roles]
    try:
        finance_roles = tuple(UserRole(str(r).lower()).value for r in roles)
    except ValueError as e:
        valid_roles = [r.value for r in UserRole]
        raise SettingsLoadError(
            f"유효하지 않은 finance.roles입니다: {roles}. 유효한 값: {valid_roles}"
        ) from e

    return AppSettings(
        db_path=resolved_db_path,
        log_level=log_level,
        web_host=str(web_config.get("host", defaults.web_host)),
        web_port=web_port,
        default_account_type=account_type,
        finance_roles=finance_roles,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _settings: AppSettings | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._settings is None:
            self._settings = load_settings(settings_path)

    @property
    def db_path(self) -> Path:
        """DB 파일 경로"""
        assert self._settings is not None
        return self._settings.db_path

    @property
    def log_level(self) -> str:
        """로그 레벨 이름"""
        assert self._settings is not None
        return self._settings.log_level

    @property
    def web_host(self) -> str:
        assert self._settings is not None
        return self._settings.web_host

    @property
    def web_port(self) -> int:
        assert self._settings is not None
        return self._settings.web_port

    @property
    def default_account_type(self) -> str:
        """유형이 없는 계정과목에 적용할 유형"""
        assert self._settings is not None
        return self._settings.default_account_type

    @property
    def finance_roles(self) -> tuple[str, ...]:
        """재무 기능 접근 가능 역할"""
        assert self._settings is not None
        return self._settings.finance_roles

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._settings = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
