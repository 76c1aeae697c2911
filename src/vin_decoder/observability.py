"""
Observability module for the VIN decoder
Structured JSON logging and decode events.
"""
import json
import logging
from datetime import datetime, timezone
from typing import List, Optional

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "vin"):
            log_entry["vin"] = record.vin
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def configure_logging(level: Optional[str] = None, json_logs: Optional[bool] = None) -> None:
    """
    Install a stream handler on the package logger.

    Defaults come from ``config``. Calling this again replaces the handler
    rather than stacking a second one.
    """
    from .config import config

    level = level or config.LOG_LEVEL
    json_logs = config.LOG_JSON if json_logs is None else json_logs

    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    package_logger = logging.getLogger("vin_decoder")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def log_decode_event(
    vin: str,
    status: str,
    region: Optional[str] = None,
    country: Optional[str] = None,
    manufacturer: Optional[str] = None,
    model_years: Optional[List[int]] = None,
    current_year: Optional[int] = None,
) -> None:
    """Log a structured decode event at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return

    event = {
        "event_type": "vin_decode",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "input": {
            "vin": vin,
            "current_year": current_year,
        },
        "output": {
            "status": status,
            "region": region,
            "country": country,
            "manufacturer": manufacturer,
            "model_years": model_years or [],
        },
    }

    # JSON payload for log aggregators
    logger.debug(f"DECODE_EVENT: {json.dumps(event)}")
