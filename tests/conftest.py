"""Shared pytest fixtures and test doubles for typewise tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Coroutine, Generator
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Test doubles for structural categories
# ---------------------------------------------------------------------------


class HTMLDivElement:
    """Minimal stand-in for a DOM element."""

    nodeType = 1
    nodeName = "DIV"

    def __init__(self) -> None:
        self.innerHTML = ""
        self.ownerDocument = object()
        self.style = {}
        self.attributes = []
        self.nodeValue = None


class Observable:
    """Observable exposing the modern interop method."""

    def __observable__(self) -> Observable:
        return self

    def subscribe(self, observer: Any) -> None:
        return None


class LegacyObservable:
    """Observable exposing only the legacy string key."""

    def __init__(self) -> None:
        setattr(self, "@@observable", lambda: self)


class Awaitable:
    """Awaitable that is not a coroutine or future."""

    def __await__(self) -> Generator[None, None, int]:
        yield
        return 1


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


# ---------------------------------------------------------------------------
# Valid values with unusual protocols
# ---------------------------------------------------------------------------


class AmbiguousTruth:
    """Refuses a truth value, like a multi-element numpy array."""

    def __bool__(self) -> bool:
        raise ValueError("The truth value of an array with more than one element is ambiguous.")


class _SizedMeta(type):
    def __len__(cls) -> int:
        return 0

    def __getitem__(cls, key: Any) -> Any:
        return key

    def __iter__(cls) -> Any:
        return iter(())


class SizedByMetaclass(metaclass=_SizedMeta):
    """Its class has a length and can be iterated; its instances cannot."""


class Permissive:
    """Answers every attribute lookup with a no-op callable, like a mock."""

    def __getattr__(self, name: str) -> Any:
        return lambda *args, **kwargs: None


def _gen() -> Generator[int]:
    yield 1


async def _agen() -> AsyncGenerator[int]:
    yield 1


async def _coro() -> int:
    return 1


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def future() -> Generator[asyncio.Future[Any]]:
    """An unresolved asyncio future bound to a private loop."""
    loop = asyncio.new_event_loop()
    try:
        yield loop.create_future()
    finally:
        loop.close()


@pytest.fixture
def coroutine() -> Generator[Coroutine[Any, Any, int]]:
    """A never-awaited coroutine, closed after the test."""
    coro = _coro()
    try:
        yield coro
    finally:
        coro.close()


@pytest.fixture
def generator() -> Generator[Generator[int]]:
    gen = _gen()
    try:
        yield gen
    finally:
        gen.close()


@pytest.fixture
def async_generator() -> AsyncGenerator[int]:
    return _agen()
