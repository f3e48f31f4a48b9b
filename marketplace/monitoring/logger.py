"""
로깅 시스템
loguru 기반 구조화 로깅
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    json_logs: bool = False,
    backup_count: int = 5,
    console_output: bool = True,
):
    """
    로깅 시스템 초기화

    Args:
        log_level: 로그 레벨
        log_file: 로그 파일 경로
        json_logs: JSON 형식 로그 사용 여부
        backup_count: 보관할 로그 파일 개수
        console_output: 콘솔 출력 여부
    """
    logger.remove()
    logger.configure(extra={"name": "marketplace"})

    level = log_level.upper()

    if console_output:
        if json_logs:
            logger.add(sys.stdout, level=level, format="{message}", serialize=True)
        else:
            logger.add(sys.stdout, level=level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_file),
            level=level,
            format="{message}" if json_logs else FILE_FORMAT,
            serialize=json_logs,
            rotation="100 MB",
            retention=backup_count,
            compression="zip",
        )

        # 에러 전용 로그 파일
        error_log = log_file.parent / f"{log_file.stem}_error{log_file.suffix}"
        logger.add(
            str(error_log),
            level="ERROR",
            format=FILE_FORMAT + "\n{exception}",
            rotation="1 day",
            retention="30 days",
            compression="zip",
        )


class LoggerAdapter:
    """컨텍스트 정보를 포함한 로거 어댑터"""

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = context or {}
        self._logger = logger.bind(name=name, **self.context)

    def bind(self, **kwargs) -> "LoggerAdapter":
        """새로운 컨텍스트 바인딩"""
        return LoggerAdapter(self.name, {**self.context, **kwargs})

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self._logger.error(message, **kwargs)

    def exception(self, message: str, **kwargs):
        self._logger.exception(message, **kwargs)


def get_logger(name: str, **context) -> LoggerAdapter:
    """
    로거 인스턴스 생성

    Args:
        name: 로거 이름
        **context: 컨텍스트 정보

    Returns:
        LoggerAdapter 인스턴스
    """
    return LoggerAdapter(name, context)
