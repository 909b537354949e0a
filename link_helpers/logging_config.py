"""Logging setup for the application."""

import json
import logging
import os
from logging.handlers import RotatingFileHandler

TEXT_FORMAT = '%(asctime)s %(levelname)s [%(module)s] %(message)s'


class JsonFormatter(logging.Formatter):
    """JSON formatter for cleaner machine-parsable logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "module": record.module,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)


def setup_logging(app):
    """Configure the root logger from ``LOG_LEVEL``, ``LOG_FORMAT`` and ``APP_LOG_DIR``.

    A stream handler is always installed; a rotating file handler is added
    when ``APP_LOG_DIR`` is set. Calling this twice does not duplicate handlers.
    """
    level = app.config.get("LOG_LEVEL", "INFO")
    formatter = _build_formatter(app.config.get("LOG_FORMAT", "text"))

    logger = logging.getLogger()
    logger.setLevel(level)

    if not any(getattr(h, "_link_helpers_stream", False) for h in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler._link_helpers_stream = True
        logger.addHandler(stream_handler)
    for handler in logger.handlers:
        if getattr(handler, "_link_helpers_stream", False):
            handler.setFormatter(formatter)

    log_dir = app.config.get("APP_LOG_DIR")
    if not log_dir:
        return

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'app.log')

    file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == file_handler.baseFilename for h in logger.handlers):
        logger.addHandler(file_handler)
    else:
        file_handler.close()
