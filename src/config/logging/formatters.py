"""Formatter JSON dos logs do relay.

Campos obrigatórios em todo record: asctime, level, logger, message,
correlation_id, service. Campos `extra` entram como chaves adicionais.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável no JSON de saída
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "INFO",
            "logger": "api.connectors.bragbook.relay_logging",
            "message": "relay_request_completed",
            "correlation_id": "abc-123",
            "service": "bragbook_relay",
            "target_host": "app.bragbookgallery.com",
            "elapsed_ms": 231.4
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
