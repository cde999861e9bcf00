"""Settings da API BRAGBook e do relay de teste.

As credenciais chegam da camada de armazenamento (fora deste serviço)
como listas paralelas separadas por vírgula. O relay só lê; nunca persiste.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from app.constants.bragbook import BRAGBOOK_API_BASE_URL

DEFAULT_TIMEOUT_MS: int = 30_000


@dataclass(frozen=True)
class BragBookSettings:
    """Configurações do relay da API BRAGBook.

    Attributes:
        api_base_url: Host da API upstream
        api_tokens: Tokens configurados, na ordem das conexões
        website_property_ids: Property ids, pareados por posição com api_tokens
        request_timeout_ms: Timeout do request upstream (ms)
        verify_tls: Verificação de certificado TLS
        diagnostics_enabled: Logs verbosos do relay (método, host, duração)
    """

    api_base_url: str = BRAGBOOK_API_BASE_URL
    api_tokens: tuple[str, ...] = ()
    website_property_ids: tuple[str, ...] = ()

    request_timeout_ms: int = DEFAULT_TIMEOUT_MS
    verify_tls: bool = True
    diagnostics_enabled: bool = False

    def validate(self) -> list[str]:
        """Valida configurações mínimas do relay.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("BRAGBOOK_API_BASE_URL deve começar com http:// ou https://")

        if not self.api_tokens:
            errors.append("BRAGBOOK_API_TOKENS não configurado")

        if len(self.api_tokens) != len(self.website_property_ids):
            errors.append(
                "BRAGBOOK_API_TOKENS e BRAGBOOK_WEBSITE_PROPERTY_IDS "
                "devem ter o mesmo número de itens"
            )

        if self.request_timeout_ms <= 0:
            errors.append("BRAGBOOK_API_TIMEOUT_MS deve ser > 0")

        return errors


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _parse_bool(raw: str, default: bool) -> bool:
    if not raw:
        return default
    return raw.strip().lower() in ("true", "1", "yes", "on")


def _load_from_env() -> BragBookSettings:
    """Carrega BragBookSettings a partir de variáveis de ambiente."""
    return BragBookSettings(
        api_base_url=os.getenv("BRAGBOOK_API_BASE_URL", BRAGBOOK_API_BASE_URL).rstrip("/"),
        api_tokens=_split_csv(os.getenv("BRAGBOOK_API_TOKENS", "")),
        website_property_ids=_split_csv(os.getenv("BRAGBOOK_WEBSITE_PROPERTY_IDS", "")),
        request_timeout_ms=int(os.getenv("BRAGBOOK_API_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
        verify_tls=_parse_bool(os.getenv("BRAGBOOK_API_VERIFY_TLS", ""), default=True),
        diagnostics_enabled=_parse_bool(os.getenv("BRAGBOOK_API_DIAGNOSTICS", ""), default=False),
    )


@lru_cache(maxsize=1)
def get_bragbook_settings() -> BragBookSettings:
    """Retorna instância cacheada de BragBookSettings."""
    return _load_from_env()
