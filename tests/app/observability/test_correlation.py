"""Testes do correlation_id por contexto."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import correlation_scope, get_correlation_id


def test_scope_sets_and_restores() -> None:
    assert get_correlation_id() == ""
    with correlation_scope("abc") as correlation_id:
        assert correlation_id == "abc"
        assert get_correlation_id() == "abc"
    assert get_correlation_id() == ""


def test_scope_generates_when_blank() -> None:
    with correlation_scope("  ") as correlation_id:
        assert len(correlation_id) == 36
        assert get_correlation_id() == correlation_id


@pytest.mark.asyncio
async def test_concurrent_tasks_are_isolated() -> None:
    async def _run(value: str) -> str:
        with correlation_scope(value):
            await asyncio.sleep(0)
            return get_correlation_id()

    assert await asyncio.gather(_run("a"), _run("b")) == ["a", "b"]
