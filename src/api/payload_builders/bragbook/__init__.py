"""Builders de request para a API BRAGBook (v1 e v2)."""

from api.payload_builders.bragbook.composer import compose
from api.payload_builders.bragbook.params import (
    coerce_param,
    parse_strict_int,
    resolve_params,
)

__all__ = [
    "coerce_param",
    "compose",
    "parse_strict_int",
    "resolve_params",
]
