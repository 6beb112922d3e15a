"""Structured JSON logging for simulation runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "cashflow-sim"


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure root logging on stdout"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        formatter: logging.Formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_run_summary(name: str, days: int, duration_ms: float, **fields: Any) -> None:
    """Log structured run outcome"""
    logging.getLogger(SERVICE_NAME).info(
        "Simulation completed",
        extra={
            "scenario": name,
            "step": "run_complete",
            "days": days,
            "duration_ms": duration_ms,
            **fields,
        },
    )
