"""Utilitários compartilhados (sem dependências de camada)."""

from .masking import mask_authorization, mask_payload, mask_secret, mask_url

__all__ = [
    "mask_authorization",
    "mask_payload",
    "mask_secret",
    "mask_url",
]
