"""Normalizer BRAGBook: resultado bruto do relay → ResponseEnvelope.

Nunca lança: body que não é JSON segue como string original.
Classificar sucesso/erro pelo status é papel da apresentação.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from app.protocols.models import ResponseEnvelope

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import RawResponse


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Constante JSON não padrão: {name}")


def decode_body(raw_body: str | bytes) -> Any:
    """Tenta decodificar JSON estrito; devolve o original inalterado se falhar.

    NaN e Infinity são recusados: o envelope precisa voltar ao browser
    como JSON válido.
    """
    text = raw_body
    if isinstance(raw_body, bytes):
        try:
            text = raw_body.decode("utf-8")
        except UnicodeDecodeError:
            return raw_body.decode("utf-8", errors="replace")
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError):
        return text


def normalize(
    status: int,
    raw_body: str | bytes,
    raw_headers: Mapping[str, str] | None,
    elapsed_ms: float,
) -> ResponseEnvelope:
    """Monta o envelope uniforme.

    Args:
        status: Status HTTP, repassado sem alteração
        raw_body: Corpo bruto da resposta
        raw_headers: Headers da resposta
        elapsed_ms: Duração medida pelo relay
    """
    return ResponseEnvelope(
        status=status,
        body=decode_body(raw_body),
        headers=dict(raw_headers or {}),
        duration_ms=max(0.0, float(elapsed_ms)),
    )


def normalize_raw(raw: RawResponse) -> ResponseEnvelope:
    """Atalho para normalizar um RawResponse do relay."""
    return normalize(raw.status, raw.body, raw.headers, raw.elapsed_ms)
