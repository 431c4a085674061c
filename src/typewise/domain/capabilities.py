"""Capability detectors — structural checks the tag table cannot make.

A capability is a small interface (a set of required members) and a
conformance function that tests for it. These catch values that behave
like a category without inheriting from its canonical class: third-party
awaitables, observables from any reactive library, file-like wrappers,
element objects from any DOM implementation.

Dunder members are looked up on the value's type, the way the interpreter
resolves them. Ordinary members are looked up on the value itself.
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncGenerator, AsyncIterable, Awaitable, Generator, Iterable
from types import SimpleNamespace
from typing import Any, Protocol, Self, TypeGuard

from typewise.domain.primitives import primitive_type_name

# Checked in order; the second is the legacy string key.
OBSERVABLE_KEYS: tuple[str, ...] = ("__observable__", "@@observable")

NODE_TYPE_ELEMENT = 1
DOM_PROPERTIES_TO_CHECK: tuple[str, ...] = (
    "innerHTML",
    "ownerDocument",
    "style",
    "attributes",
    "nodeValue",
)

_PLAIN_OBJECT_TYPES: tuple[type, ...] = (object, SimpleNamespace)


class ObservableLike(Protocol):
    """An observable exposes itself through its interop method."""

    def __observable__(self) -> Self: ...

    def subscribe(self, observer: Any) -> Any: ...


class StreamLike(Protocol):
    """A file-like object that can be read from or written to."""

    def read(self, *args: Any) -> Any: ...

    def write(self, data: Any) -> Any: ...


class HtmlElementLike(Protocol):
    """The DOM element members the element check relies on."""

    nodeType: int
    nodeName: str
    innerHTML: str
    ownerDocument: Any
    style: Any
    attributes: Any
    nodeValue: Any


def special_method(kind: type, name: str) -> Any:
    """Find *name* in the class hierarchy of *kind*, skipping its metaclass.

    This is how the interpreter resolves ``len()``, ``iter()`` and the other
    dunder protocols: an ``Enum`` class has ``__len__`` through ``EnumType``,
    its members do not.
    """
    for klass in kind.__mro__:
        if name in vars(klass):
            return vars(klass)[name]
    return None


def _has_method(value: object, name: str) -> bool:
    if name.startswith("__") and name.endswith("__"):
        return callable(special_method(type(value), name))
    return callable(getattr(value, name, None))


def is_object(value: object) -> bool:
    """Anything that is not a primitive, callables included."""
    return primitive_type_name(value) is None


def is_plain_object(value: object) -> bool:
    """A literal attribute bag: an instance of exactly ``object`` or ``SimpleNamespace``.

    Subclasses are excluded, which also rules out custom iteration and
    custom type tags. Dicts are maps, not plain objects: check decoded JSON
    objects with ``is_map``.
    """
    return type(value) in _PLAIN_OBJECT_TYPES


def is_promise_like(value: object) -> TypeGuard[Awaitable[Any]]:
    """A non-class object that can be awaited."""
    return is_object(value) and not inspect.isclass(value) and inspect.isawaitable(value)


def is_observable(value: object) -> TypeGuard[ObservableLike]:
    """True if the value's observable interop method returns the value itself."""
    if value is None or inspect.isclass(value):
        return False
    for key in OBSERVABLE_KEYS:
        method = getattr(value, key, None)
        if method is not None:
            return callable(method) and method() is value
    return False


def is_iterable(value: object) -> TypeGuard[Iterable[Any]]:
    return value is not None and _has_method(value, "__iter__")


def is_async_iterable(value: object) -> TypeGuard[AsyncIterable[Any]]:
    return value is not None and _has_method(value, "__aiter__")


def is_generator(value: object) -> TypeGuard[Generator[Any, Any, Any]]:
    """Iterable and exposes the generator protocol (``__next__`` and ``throw``)."""
    return is_iterable(value) and _has_method(value, "__next__") and _has_method(value, "throw")


def is_async_generator(value: object) -> TypeGuard[AsyncGenerator[Any, Any]]:
    """Async-iterable and exposes ``__anext__`` and ``athrow``."""
    return (
        is_async_iterable(value)
        and _has_method(value, "__anext__")
        and _has_method(value, "athrow")
    )


def is_stream(value: object) -> TypeGuard[StreamLike]:
    """A readable or writable file-like object that is not an observable.

    An observable that also exposes ``read`` or ``write`` is not a stream.
    """
    return (
        is_object(value)
        and not inspect.isclass(value)
        and (_has_method(value, "read") or _has_method(value, "write"))
        and not is_observable(value)
    )


def is_html_element(value: object) -> TypeGuard[HtmlElementLike]:
    """Conjunction of weak DOM signals; no single tag is stable across implementations."""
    if not is_object(value):
        return False
    node_type = getattr(value, "nodeType", None)
    if isinstance(node_type, bool) or node_type != NODE_TYPE_ELEMENT:
        return False
    return (
        isinstance(getattr(value, "nodeName", None), str)
        and not is_plain_object(value)
        and all(hasattr(value, name) for name in DOM_PROPERTIES_TO_CHECK)
    )
