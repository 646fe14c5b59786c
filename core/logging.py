import logging
import os
import uuid
from contextvars import ContextVar
from enum import Enum
from logging.handlers import RotatingFileHandler

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

run_id_var: ContextVar[str] = ContextVar("run_id", default="-")


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


_LEVELS = {
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.SUCCESS: SUCCESS,
}


class RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = run_id_var.get("-")
        return True


class BuildLogger:
    """Logger handed to every build step instead of a module-level singleton."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("services")

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, severity: Severity, message: str) -> None:
        self._logger.log(_LEVELS[Severity(severity)], message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def warning(self, message: str) -> None:
        self.log(Severity.WARNING, message)

    def success(self, message: str) -> None:
        self.log(Severity.SUCCESS, message)


def new_run_id() -> str:
    run_id = uuid.uuid4().hex[:8]
    run_id_var.set(run_id)
    return run_id


def setup_logging(log_dir: str | None = None, level: int = logging.INFO) -> None:
    """Configure console and, optionally, rotating file logging for a build run."""
    log_format = "%(asctime)s [%(levelname)s] %(name)s [run=%(run_id)s]: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_path = os.path.join(log_dir, "services.log")
        file_handler = RotatingFileHandler(
            file_path, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
        )
        handlers.append(file_handler)

    filter_instance = RunIdFilter()
    for handler in handlers:
        handler.addFilter(filter_instance)

    logging.basicConfig(level=level, format=log_format, handlers=handlers, force=True)


__all__ = [
    "SUCCESS",
    "BuildLogger",
    "RunIdFilter",
    "Severity",
    "new_run_id",
    "run_id_var",
    "setup_logging",
]
