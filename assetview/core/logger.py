"""日志配置：控制台 + 按天滚动的文件输出，每条记录附带请求 ID。

``LOG_JSON=true`` 时两个输出都改为单行 JSON，便于日志平台采集。
"""

import json
import logging
import logging.config
from contextvars import ContextVar
from typing import Optional

from .config import get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(request_id)s] %(message)s"

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: Optional[str]) -> None:
    _request_id_ctx.set(request_id)


class RequestIdFilter(logging.Filter):
    """把当前请求的 ID 写入日志记录，请求之外为 ``-``。"""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _request_id_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "request_id": getattr(record, "request_id", "-"),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_logging_config() -> dict:
    """根据当前配置生成 ``dictConfig`` 使用的字典。"""
    settings = get_settings()
    formatter = "json" if settings.log_json else "text"
    level = settings.log_level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": formatter,
            "filters": ["request_id"],
        },
        "file": {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "formatter": formatter,
            "filters": ["request_id"],
            "filename": str(settings.log_file_path),
            "when": "midnight",
            "backupCount": 14,
            "encoding": "utf-8",
            "delay": True,
        },
    }
    app_logger = {"handlers": list(handlers), "level": level, "propagate": False}
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"request_id": {"()": RequestIdFilter}},
        "formatters": {
            "text": {"format": TEXT_FORMAT},
            "json": {"()": JsonFormatter},
        },
        "handlers": handlers,
        "loggers": {name: dict(app_logger) for name in ("assetview", "uvicorn", "uvicorn.access")},
        "root": {"handlers": ["console"], "level": level},
    }


def setup_logging() -> None:
    """创建日志目录并应用日志配置。"""
    get_settings().log_file_path.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config())


logger = logging.getLogger("assetview")
