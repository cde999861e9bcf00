"""Mascaramento de segredos para logs e exibição de requests."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

MASK = "***"
SECRET_KEYS = frozenset({"apitoken", "apitokens", "authorization", "token"})


def mask_secret(value: str, visible: int = 4) -> str:
    """Mantém só o prefixo do segredo.

    Exemplo:
        mask_secret("abc123456789") -> "abc1***"
    """
    if not value:
        return ""
    if len(value) <= visible:
        return MASK
    return f"{value[:visible]}{MASK}"


def mask_authorization(value: str) -> str:
    """Mascara o valor de um header Authorization preservando o esquema."""
    scheme, _, credentials = value.partition(" ")
    if not credentials:
        return mask_secret(value)
    return f"{scheme} {mask_secret(credentials)}"


def mask_url(url: str) -> str:
    """Mascara valores de query cujo nome indica segredo (ex: apiToken)."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (key, mask_secret(value) if key.lower() in SECRET_KEYS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs, safe="*")))


def mask_payload(payload: Any) -> Any:
    """Copia o payload JSON mascarando chaves sensíveis (recursivo)."""
    if isinstance(payload, dict):
        masked: dict[str, Any] = {}
        for key, value in payload.items():
            if str(key).lower() in SECRET_KEYS:
                masked[key] = _mask_value(value)
            else:
                masked[key] = mask_payload(value)
        return masked
    if isinstance(payload, list):
        return [mask_payload(item) for item in payload]
    return payload


def _mask_value(value: Any) -> Any:
    if isinstance(value, str):
        return mask_secret(value)
    if isinstance(value, list):
        return [_mask_value(item) for item in value]
    return MASK
