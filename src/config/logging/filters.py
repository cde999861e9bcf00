"""Filters de logging para contexto e redação de segredos.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: bragbook_relay)

Tokens da API nunca podem aparecer em logs: SecretRedactionFilter
mascara valores conhecidos e qualquer credencial `Bearer ...`.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from utils.masking import MASK

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s\"',]+", re.IGNORECASE)
_QUERY_TOKEN_PATTERN = re.compile(r"((?:apiToken|apiTokens)=)[^&\s\"']+", re.IGNORECASE)

# Atributos padrão de LogRecord que não são `extra`
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id passado via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara segredos na mensagem, nos args e nos campos `extra`.

    Args:
        secrets: Valores literais a mascarar (ex: tokens configurados).
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        # Mais longos primeiro: um token nunca é mascarado pela metade
        self._secrets = tuple(sorted({s for s in secrets if s}, key=len, reverse=True))

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, MASK)
        text = _BEARER_PATTERN.sub(rf"\g<1>{MASK}", text)
        return _QUERY_TOKEN_PATTERN.sub(rf"\g<1>{MASK}", text)

    def filter(self, record: logging.LogRecord) -> bool:
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        if isinstance(record.msg, str):
            record.msg = self.redact(record.msg)
        for key, value in list(vars(record).items()):
            if key in _RESERVED_ATTRS:
                continue
            setattr(record, key, self._redact_value(value))
        return True

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.redact(value)
        if isinstance(value, list):
            return [self._redact_value(item) for item in value]
        if isinstance(value, dict):
            return {key: self._redact_value(item) for key, item in value.items()}
        return value
