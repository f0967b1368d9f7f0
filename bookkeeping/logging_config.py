"""
Logging setup.

Services log through module loggers (``logging.getLogger(__name__)``)
using short event names and ``extra`` fields. This module only
decides where those records go and how they look.
"""

import logging

HANDLER_NAME = "bookkeeping"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Fields services attach through ``extra``; appended to the message
# so they survive the plain-text formatter.
CONTEXT_FIELDS = (
    "account_id",
    "account_type",
    "batch_id",
    "journal_ids",
    "journal_count",
    "entry_count",
    "setting_name",
)


class ContextFormatter(logging.Formatter):
    """Formatter that appends known ``extra`` fields as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{field}={getattr(record, field)}"
            for field in CONTEXT_FIELDS
            if hasattr(record, field)
        ]
        if context:
            message = f"{message} {' '.join(context)}"
        return message


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the ``bookkeeping`` logger."""
    root = logging.getLogger("bookkeeping")
    root.setLevel(level.upper())

    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(ContextFormatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
