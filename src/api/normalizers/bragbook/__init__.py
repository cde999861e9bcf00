"""Normalizer BRAGBook — envelope uniforme para respostas do relay."""

from .normalizer import decode_body, normalize, normalize_raw

__all__ = [
    "decode_body",
    "normalize",
    "normalize_raw",
]
