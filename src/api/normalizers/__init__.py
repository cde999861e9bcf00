"""Normalizers — conversão de respostas externas para modelos internos.

Estrutura:
- bragbook/: envelope uniforme da resposta do relay
"""

from .bragbook import decode_body, normalize, normalize_raw

__all__ = [
    "decode_body",
    "normalize",
    "normalize_raw",
]
