"""
Centralized logging configuration for the auroracast engine.

Provides human-readable console output and, when a log directory is
configured, structured JSON Lines logging to a rotating file. Library
modules use get_engine_logger(), which leaves the "auroracast" logger with
only a NullHandler; entry points such as scripts/aurora_report.py call
setup_logging() to attach real handlers.

Usage:
    from auroracast.logging_config import get_engine_logger
    log = get_engine_logger(__name__)
"""

import json
import logging
import os
import time
import uuid
from logging.handlers import RotatingFileHandler


# Module-level run_id bound to every log entry via RunIdFilter.
_run_id = None


def get_run_id():
    """Return the current run_id, generating one if needed."""
    global _run_id
    if _run_id is None:
        _run_id = str(uuid.uuid4())[:8]
    return _run_id


def set_run_id(run_id=None):
    """Set (or regenerate) the run_id."""
    global _run_id
    _run_id = run_id or str(uuid.uuid4())[:8]
    return _run_id


class RunIdFilter(logging.Filter):
    """Inject run_id into every log record."""

    def filter(self, record):
        record.run_id = get_run_id()
        return True


class JsonFormatter(logging.Formatter):
    """Format log records as JSON Lines for machine parsing."""

    def format(self, record):
        entry = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S.") +
                         f"{int(record.msecs):03d}",
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "run_id": getattr(record, "run_id", None),
            "message": record.getMessage(),
        }
        # Include structured extra fields if present.
        for key in ("step_name", "input_summary", "output_summary",
                    "timing_seconds", "warnings"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


# Track whether logging has been configured to avoid duplicate handlers.
_configured = False
_file_handler = None

logging.getLogger("auroracast").addHandler(logging.NullHandler())


def setup_logging(log_dir=None, console_level=None, file_level=logging.DEBUG):
    """Configure the auroracast logger with console and optional file handlers.

    Call once at an entry point. Subsequent calls are no-ops unless a
    log directory is supplied for the first time.

    Parameters
    ----------
    log_dir : str, optional
        Directory for ``auroracast.jsonl`` (JSON Lines at file_level,
        rotated at 10 MB). Default: AURORACAST_LOG_DIR env var; no file
        logging when neither is set.
    console_level : int, optional
        Console handler log level. Default: from LOG_LEVEL env var or INFO.
    file_level : int
        File handler log level. Default: DEBUG.
    """
    global _configured, _file_handler

    if console_level is None:
        env_level = os.environ.get("LOG_LEVEL", "INFO").upper()
        console_level = getattr(logging, env_level, logging.INFO)
    if log_dir is None:
        log_dir = os.environ.get("AURORACAST_LOG_DIR")

    logger = logging.getLogger("auroracast")

    if not _configured:
        logger.setLevel(logging.DEBUG)

        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(ConsoleFormatter())
        # Handler-level so records from child loggers get a run_id too.
        console.addFilter(RunIdFilter())
        logger.addHandler(console)

        _configured = True

    if log_dir and _file_handler is None:
        os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(
            os.path.join(log_dir, "auroracast.jsonl"),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=3,
        )
        fh.setLevel(file_level)
        fh.setFormatter(JsonFormatter())
        fh.addFilter(RunIdFilter())
        logger.addHandler(fh)
        _file_handler = fh


def reset_logging():
    """Reset all logging state, primarily for test isolation."""
    global _configured, _file_handler, _run_id

    logger = logging.getLogger("auroracast")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.addHandler(logging.NullHandler())

    _configured = False
    _file_handler = None
    _run_id = None


def get_engine_logger(name, log_dir=None):
    """Get a logger for an engine module.

    Handlers are attached only by setup_logging(); until an entry point
    calls it, records go nowhere unless the application configures logging.

    Parameters
    ----------
    name : str
        Logger name (typically ``__name__``, under the ``auroracast``
        namespace so it inherits the configured handlers).
    log_dir : str, optional
        If given, passed to setup_logging().

    Returns
    -------
    logging.Logger
    """
    if log_dir is not None:
        setup_logging(log_dir=log_dir)
    return logging.getLogger(name)


def log_step_summary(
    logger,
    step_name,
    status="success",
    input_summary=None,
    output_summary=None,
    timing_seconds=None,
    warnings_list=None,
):
    """Log a structured step summary at INFO level.

    Parameters
    ----------
    logger : logging.Logger
    step_name : str
    status : str
        "success", "skipped", or "error".
    input_summary : dict, optional
    output_summary : dict, optional
    timing_seconds : float, optional
    warnings_list : list[str], optional
    """
    parts = [f"[{step_name}] {status}"]
    if timing_seconds is not None:
        parts.append(f"({timing_seconds:.3f}s)")
    if output_summary:
        parts.append(f"output={output_summary}")

    extra = {"step_name": step_name}
    if input_summary:
        extra["input_summary"] = input_summary
    if output_summary:
        extra["output_summary"] = output_summary
    if timing_seconds is not None:
        extra["timing_seconds"] = timing_seconds
    if warnings_list:
        extra["warnings"] = warnings_list

    logger.info(" ".join(parts), extra=extra)


class StepTimer:
    """Context manager for timing a unit of work.

    Usage:
        with StepTimer() as t:
            do_work()
        print(t.elapsed)
    """

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = time.perf_counter() - self.start
