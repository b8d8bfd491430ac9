"""
로깅 설정

Web 서버와 CLI 스크립트가 같은 형식으로 로그를 남기도록 루트 로거를 구성.
파일 로그는 프로세스별 디렉토리(logs/web, logs/cli)에 자정마다 롤링.

    from core.logging import setup_logging
    setup_logging("web", console_level=settings.log_level)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Paths

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7

PROCESS_LOG_DIRS: dict[str, Path] = {
    "web": Paths.WEB_LOGS_DIR,
    "cli": Paths.CLI_LOGS_DIR,
}

# WARNING 이상만 남길 라이브러리 로거
NOISY_LOGGERS = [
    "aiosqlite",       # 쿼리마다 executing/completed
    "uvicorn.access",  # 요청마다 한 줄
    "multipart",
    "httpx",           # TestClient
    "httpcore",
]


def _resolve_level(level: int | str) -> int:
    """"DEBUG" 같은 이름 또는 숫자 레벨을 숫자로 변환"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def get_log_file_path(process_name: str, logs_dir: Path | None = None) -> Path:
    """프로세스별 로그 파일 경로 (등록되지 않은 이름은 logs/ 바로 아래)"""
    log_dir = logs_dir or PROCESS_LOG_DIRS.get(process_name, Paths.LOGS_DIR)
    return log_dir / f"{process_name}.log"


def _file_handler(log_file: Path, level: int, formatter: logging.Formatter) -> TimedRotatingFileHandler:
    handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.suffix = "%Y-%m-%d"  # web.log.2024-01-05
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    process_name: str,
    console_level: int | str = logging.INFO,
    file_level: int | str = logging.INFO,
    logs_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 초기화

    여러 번 호출해도 기존 핸들러를 교체하므로 중복 출력되지 않음.

    Args:
        process_name: "web" 또는 "cli" (로그 디렉토리/파일 이름)
        console_level: 콘솔 레벨 (숫자 또는 "INFO" 같은 이름)
        file_level: 파일 레벨
        logs_dir: 로그 디렉토리 (테스트용, None이면 프로세스별 기본 경로)

    Returns:
        루트 Logger
    """
    console_level = _resolve_level(console_level)
    file_level = _resolve_level(file_level)

    log_file = get_log_file_path(process_name, logs_dir)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.addHandler(_file_handler(log_file, file_level, formatter))

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"Logging ready: {process_name} "
        f"(console={logging.getLevelName(console_level)}, "
        f"file={log_file} {logging.getLevelName(file_level)})"
    )
    return root_logger
