"""
Logging infrastructure for Candidate Intake.

Loguru sinks for the console, a rotating application log and a separate
audit trail of accepted and rejected submissions.
"""

import sys
from typing import Any

from loguru import logger

from candidate_intake.utils.config import get_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"

# Submission fields that never reach the audit trail
REDACTED_KEYS = {"file_content", "phone", "address", "password"}
REDACTED = "***REDACTED***"


def setup_logging() -> None:
    """Replace loguru's default handler with the configured sinks."""
    settings = get_settings()
    log_settings = settings.logging

    logger.remove()

    # Variable values in tracebacks may hold submission data
    diagnose = settings.debug and settings.environment == "development"

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )

    logger.add(
        log_file.parent / "audit.log",
        format=AUDIT_FORMAT,
        level="INFO",
        filter=lambda record: "audit_type" in record["extra"],
        rotation="1 week",
        retention="1 year",
        enqueue=True,
    )

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def get_logger(name: str) -> Any:
    """Logger bound to a module or class name."""
    return logger.bind(name=name)


def _redact(data: Any) -> Any:
    if isinstance(data, dict):
        return {
            k: REDACTED if str(k).lower() in REDACTED_KEYS else _redact(v)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_redact(item) for item in data]
    return data


def audit_log(action: str, details: dict[str, Any], audit_type: str = "INTAKE") -> None:
    """
    Write an intake event to the audit trail.

    Args:
        action: An ``AuditAction`` value, e.g. "candidate_added"
        details: Event details; CV content and contact fields are redacted
        audit_type: INTAKE for accepted submissions, REJECTION otherwise
    """
    logger.bind(audit_type=audit_type).info(f"{action} | {_redact(details)}")


class LoggerMixin:
    """Gives a class a ``logger`` bound to its class name."""

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger
