import json
import logging
import logging.config
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    Ids that tie a line to the cutting room (request, plan, task, order,
    worker, log) sit at the top level so log search can filter on them; any
    other ``extra=`` values are grouped under ``fields``.
    """

    RESERVED = {
        "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
        "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
        "created", "msecs", "relativeCreated", "thread", "threadName", "processName",
        "process", "message", "asctime", "taskName",
    }
    CONTEXT_KEYS = ("request_id", "plan_id", "task_id", "order_id", "worker_id", "log_id")

    def __init__(self, app_name: str = "cutrix"):
        super().__init__()
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "app": self.app_name,
            "logger": record.name,
            "event": record.getMessage(),
        }

        fields = {}
        for key, value in record.__dict__.items():
            if key in self.RESERVED or key.startswith("_"):
                continue
            if key in self.CONTEXT_KEYS:
                payload[key] = value
            else:
                fields[key] = value
        if fields:
            payload["fields"] = fields

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


def configure_logging(log_level: str = "INFO", log_format: str = "json", app_name: str = "cutrix") -> None:
    level = log_level.upper()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                },
                "json": {
                    "()": "cutrix.utils.logging.JsonFormatter",
                    "app_name": app_name,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if log_format.lower() == "json" else "standard",
                    "level": level,
                }
            },
            "loggers": {
                "sqlalchemy.engine": {"level": "WARNING"},
                "uvicorn.access": {"level": "WARNING"},
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )
