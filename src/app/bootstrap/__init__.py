"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e conecta o
relay concreto ao use case de teste.

Uso:
    from app.bootstrap import initialize_app, create_api_test_use_case

    initialize_app()
    use_case = create_api_test_use_case()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    create_api_test_use_case,
    get_relay_executor,
    load_connections,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_bragbook_settings

SERVICE_NAME = "bragbook_relay"

logger = logging.getLogger(__name__)

__all__ = [
    "SERVICE_NAME",
    "create_api_test_use_case",
    "get_relay_executor",
    "initialize_app",
    "load_connections",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Inicializa logging JSON com correlation_id e redação de tokens.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        secrets=get_bragbook_settings().api_tokens,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"bragbook: {error}" for error in get_bragbook_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
