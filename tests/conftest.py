"""Shared fixtures for srvdisco tests."""

from __future__ import annotations

import os

import pytest

from srvdisco import ServiceTarget, StaticResolver


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep SRVDISCO_ variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("SRVDISCO_"):
            monkeypatch.delenv(key)


@pytest.fixture
def api_resolver() -> StaticResolver:
    """Resolver answering _api._tcp.example.com with two targets."""
    resolver = StaticResolver()
    resolver.add(
        "api",
        "tcp",
        "example.com",
        ServiceTarget("a.example.com", 443),
        ServiceTarget("b.example.com", 443),
    )
    return resolver


@pytest.fixture
def failing_resolver() -> StaticResolver:
    """Resolver whose every lookup fails."""
    return StaticResolver(error=OSError("lookup _api._tcp.example.com: no such host"))
