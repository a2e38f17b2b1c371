"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from arimma_credit.config import settings

NO_REQUEST_ID = "-"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter stamping every record with UTC time, level, service name
    and the request ID (NO_REQUEST_ID outside a request).
    """

    def __init__(self, *args: Any, service_name: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.service_name = service_name or settings.service_name

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = self.service_name
        log_record.setdefault("request_id", NO_REQUEST_ID)


def setup_logging(level: str = "INFO", service_name: str | None = None) -> None:
    """Route the root logger to stdout as one JSON object per line"""
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s", service_name=service_name)
    )
    logger.addHandler(handler)


def log_assessment(
    request_id: str,
    credit_score: int,
    risk_category: str,
    approved: bool,
    duration_ms: float,
) -> None:
    """Log structured assessment outcome for analysis"""
    logging.info(
        "Credit assessment completed",
        extra={
            "request_id": request_id,
            "step": "assessment_complete",
            "credit_score": credit_score,
            "risk_category": risk_category,
            "approval_outcome": "approved" if approved else "declined",
            "duration_ms": round(duration_ms, 3),
        },
    )
