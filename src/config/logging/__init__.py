"""Logging estruturado JSON do relay BRAGBook.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="bragbook_relay")
    logger = get_logger(__name__)

Regra: logs estruturados, nunca tokens nem query strings com credenciais.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
