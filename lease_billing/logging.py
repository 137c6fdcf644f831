"""Structured logging configuration for lease-billing."""

import logging
import sys
from typing import Any

from lease_billing.config import BillingConfig

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(
    level: str | None = None,
    format_type: str | None = None,
    config: BillingConfig | None = None,
) -> None:
    """Configure logging for lease-billing.

    Explicit arguments win; anything left as ``None`` is taken from
    ``config`` (``BillingConfig()`` when no config is given), so
    ``setup_logging(config=BillingConfig.from_env())`` honours ``LOG_LEVEL``
    and ``LOG_FORMAT``.

    Parameters
    ----------
    level : str | None
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str | None
        Format type: "standard" or "json".
    config : BillingConfig | None
        Source of the defaults for ``level`` and ``format_type``.
    """
    config = config or BillingConfig()
    level = level or config.log_level
    format_type = format_type or config.log_format
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("lease_billing").setLevel(log_level)

    # Faker logs every provider lookup at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """JSON log formatter; Decimal, date and enum extras are rendered like billing records."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        import json
        from datetime import datetime, timezone

        from lease_billing.serialization import serialize_value

        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(serialize_value(record.extra))

        return json.dumps(log_data, default=str, ensure_ascii=False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``lease_billing`` namespace.

    Parameters
    ----------
    name : str
        Logger name (usually __name__). Names outside the package are
        prefixed with ``lease_billing.`` so ``setup_logging`` levels apply.

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    if name != "lease_billing" and not name.startswith("lease_billing."):
        name = f"lease_billing.{name}"
    return logging.getLogger(name)
