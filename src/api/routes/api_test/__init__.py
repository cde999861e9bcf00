"""Rotas da tela de teste da API BRAGBook."""
