"""Coerção estrita de parâmetros brutos vindos do formulário de teste."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from api.connectors.bragbook.errors import InvalidParameter, MissingParameter
from app.constants.bragbook import ParamKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import EndpointDescriptor, ParamSpec

_INT_PATTERN = re.compile(r"[+-]?\d+")


def parse_strict_int(name: str, value: Any) -> int:
    """Converte para int sem aceitar valores parciais.

    Aceita int (não bool) ou string decimal com sinal opcional.
    "12abc", "1.5", "" e None são inválidos; nunca vira zero.

    Raises:
        InvalidParameter: Se o valor não é um inteiro.
    """
    if isinstance(value, bool):
        raise InvalidParameter(name, "must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if _INT_PATTERN.fullmatch(candidate):
            return int(candidate)
    raise InvalidParameter(name, "must be an integer")


def coerce_param(spec: ParamSpec, value: Any) -> int | str:
    """Aplica tipo e predicado de validade do ParamSpec."""
    if spec.kind is ParamKind.INT:
        number = parse_strict_int(spec.name, value)
        if spec.positive and number <= 0:
            raise InvalidParameter(spec.name, "must be positive")
        return number
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        raise InvalidParameter(spec.name, "must be a string")
    return str(value).strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_params(
    descriptor: EndpointDescriptor,
    raw_params: Mapping[str, Any],
) -> dict[str, int | str]:
    """Mescla defaults, valida obrigatórios e coage tipos.

    Parâmetros em branco contam como ausentes. Nomes desconhecidos são
    ignorados (o formulário envia todos os campos para qualquer endpoint).

    Returns:
        Dict nome → valor coagido, só com parâmetros presentes.

    Raises:
        MissingParameter: Primeiro obrigatório ausente, na ordem declarada.
        InvalidParameter: Valor com tipo ou predicado inválido.
    """
    resolved: dict[str, int | str] = {}
    for spec in descriptor.params:
        value = raw_params.get(spec.name)
        if _is_blank(value):
            value = spec.default
        if value is None:
            if spec.required:
                raise MissingParameter(spec.name)
            continue
        resolved[spec.name] = coerce_param(spec, value)
    return resolved
