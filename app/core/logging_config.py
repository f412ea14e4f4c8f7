"""
로깅 설정

표준 logging 모듈에 JSON 포맷터를 붙여 `app` 로거를 구성합니다.
각 모듈은 logging.getLogger(__name__)으로 하위 로거를 사용합니다.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

APP_LOGGER_NAME = "app"


class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 직렬화하는 포맷터"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """
    애플리케이션 로거 초기화

    Args:
        log_level: 로그 레벨 문자열 (DEBUG, INFO, WARNING, ...)

    Returns:
        구성된 `app` 로거
    """
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # 재호출 시 핸들러 중복 방지
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger
