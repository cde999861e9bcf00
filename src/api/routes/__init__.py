"""Rotas HTTP do relay — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (tela de teste, health)
- Validação inicial do payload (pydantic)
- Delegação para use_cases

Estrutura:
- routes/api_test/: relay AJAX da tela de teste da API
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
