"""
core/logging.py 테스트

로그 디렉토리/핸들러 구성 확인
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest

from core.constants import Paths
from core.logging import NOISY_LOGGERS, get_log_file_path, setup_logging


@pytest.fixture
def restore_root_logger():
    """테스트 후 루트 로거 핸들러 복원"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_handlers(self, tmp_path: Path, restore_root_logger) -> None:
        """콘솔 + daily 파일 핸들러"""
        root = setup_logging("cli", file_level=logging.DEBUG, logs_dir=tmp_path)

        file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
        assert len(root.handlers) == 2
        assert len(file_handlers) == 1
        assert file_handlers[0].level == logging.DEBUG
        assert (tmp_path / "cli.log").exists()

    def test_idempotent(self, tmp_path: Path, restore_root_logger) -> None:
        """여러 번 호출해도 핸들러 중복 없음"""
        setup_logging("cli", logs_dir=tmp_path)
        root = setup_logging("cli", logs_dir=tmp_path)

        assert len(root.handlers) == 2

    def test_noisy_loggers_quieted(self, tmp_path: Path, restore_root_logger) -> None:
        setup_logging("web", logs_dir=tmp_path)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestLogFilePath:
    """get_log_file_path 테스트"""

    def test_per_process_directory(self) -> None:
        assert get_log_file_path("web") == Paths.WEB_LOGS_DIR / "web.log"
        assert get_log_file_path("cli") == Paths.CLI_LOGS_DIR / "cli.log"

    def test_unregistered_process_uses_logs_root(self) -> None:
        assert get_log_file_path("seed") == Paths.LOGS_DIR / "seed.log"

    def test_explicit_directory(self, tmp_path: Path) -> None:
        assert get_log_file_path("web", tmp_path) == tmp_path / "web.log"


class TestLevelNames:
    """레벨 이름 문자열 지원 (settings.yaml log_level)"""

    def test_string_levels(self, tmp_path: Path, restore_root_logger) -> None:
        root = setup_logging("web", console_level="debug", file_level="WARNING", logs_dir=tmp_path)

        console = [h for h in root.handlers if not isinstance(h, TimedRotatingFileHandler)][0]
        file_handler = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)][0]
        assert console.level == logging.DEBUG
        assert file_handler.level == logging.WARNING

    def test_unknown_level(self, tmp_path: Path, restore_root_logger) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("web", console_level="LOUD", logs_dir=tmp_path)
