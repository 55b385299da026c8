"""Logging for the resume-agent service.

One named logger ("resume-agent") shared by every module. Records carry the
current request ID; pass ``extra={"stage": ...}`` to tag a pipeline step.
Output is colored console lines by default, or one JSON object per line when
LOG_FORMAT=json.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from resume_agent.config import load_settings
from resume_agent.middleware import request_id_var

LOGGER_NAME = "resume-agent"


def _stage(record: logging.LogRecord) -> str | None:
    return getattr(record, "stage", None)


class JSONFormatter(logging.Formatter):
    """One JSON document per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "request_id": request_id_var.get("-"),
            "msg": record.getMessage(),
            "where": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        stage = _stage(record)
        if stage:
            entry["stage"] = stage
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """Compact colored lines for local development."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[41m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        level = f"[{record.levelname:8s}]"
        if self.use_color:
            level = f"{self.LEVEL_COLORS.get(record.levelno, '')}{level}{self.RESET}"

        tag = request_id_var.get("-")
        stage = _stage(record)
        if stage:
            tag = f"{tag}:{stage}"

        line = f"{clock} {level} {record.name} [{tag}]: {record.getMessage()}"
        if record.exc_info and record.exc_info[0] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Configure the service logger once; repeated calls return it unchanged."""
    settings = load_settings()
    service_logger = logging.getLogger(name)
    service_logger.setLevel(logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO))

    if service_logger.handlers:
        return service_logger

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ConsoleFormatter(use_color=sys.stdout.isatty()))
    service_logger.addHandler(handler)

    return service_logger


logger = setup_logger()
