"""Tests for structural capability detectors."""

from __future__ import annotations

import asyncio
import enum
import io
from types import SimpleNamespace
from typing import Any

from tests.conftest import (
    AmbiguousTruth,
    Awaitable,
    HTMLDivElement,
    LegacyObservable,
    Observable,
    Permissive,
    SizedByMetaclass,
)
from typewise.domain.capabilities import (
    is_async_generator,
    is_async_iterable,
    is_generator,
    is_html_element,
    is_iterable,
    is_object,
    is_observable,
    is_plain_object,
    is_promise_like,
    is_stream,
    special_method,
)


class Color(enum.Enum):
    RED = 1


class TestIsObject:
    def test_non_primitives(self) -> None:
        assert is_object([])
        assert is_object(len)
        assert is_object(object())

    def test_primitives(self) -> None:
        assert not is_object(None)
        assert not is_object("a")
        assert not is_object(1)


class TestPlainObject:
    def test_bare_instances(self) -> None:
        assert is_plain_object(object())
        assert is_plain_object(SimpleNamespace(a=1))

    def test_rejects_subclasses_and_containers(self) -> None:
        class Custom:
            pass

        assert not is_plain_object(Custom())
        assert not is_plain_object({})
        assert not is_plain_object([])
        assert not is_plain_object(None)


class TestPromiseLike:
    def test_coroutine(self, coroutine: Any) -> None:
        assert is_promise_like(coroutine)

    def test_future(self, future: asyncio.Future[Any]) -> None:
        assert is_promise_like(future)

    def test_custom_awaitable(self) -> None:
        assert is_promise_like(Awaitable())

    def test_class_is_not_promise_like(self) -> None:
        assert not is_promise_like(Awaitable)
        assert not is_promise_like(object())


class TestObservable:
    def test_modern_key(self) -> None:
        assert is_observable(Observable())

    def test_legacy_key(self) -> None:
        assert is_observable(LegacyObservable())

    def test_must_return_itself(self) -> None:
        class Liar:
            def __observable__(self) -> object:
                return object()

        assert not is_observable(Liar())

    def test_class_and_plain_values(self) -> None:
        assert not is_observable(Observable)
        assert not is_observable(None)
        assert not is_observable([])

    def test_truth_value_is_not_consulted(self) -> None:
        assert not is_observable(AmbiguousTruth())
        assert not is_stream(AmbiguousTruth())

    def test_permissive_attributes_do_not_fake_it(self) -> None:
        assert not is_observable(Permissive())


class TestIteration:
    def test_iterable(self) -> None:
        assert is_iterable([])
        assert is_iterable("abc")
        assert is_iterable({})
        assert not is_iterable(1)
        assert not is_iterable(None)

    def test_metaclass_protocols_belong_to_the_class(self) -> None:
        assert is_iterable(SizedByMetaclass)
        assert not is_iterable(SizedByMetaclass())
        assert not is_iterable(Color.RED)
        assert is_iterable(Color)

    def test_special_method_skips_metaclass(self) -> None:
        assert special_method(list, "__len__") is list.__len__
        assert special_method(Color, "__len__") is None
        assert special_method(type(Color), "__len__") is not None

    def test_generator(self, generator: Any) -> None:
        assert is_generator(generator)
        assert not is_generator(iter([]))

    def test_async_generator(self, async_generator: Any) -> None:
        assert is_async_iterable(async_generator)
        assert is_async_generator(async_generator)
        assert not is_async_generator([])


class TestStream:
    def test_file_like(self) -> None:
        assert is_stream(io.StringIO())
        assert is_stream(io.BytesIO())

    def test_observable_with_write_is_not_stream(self) -> None:
        class Subject(Observable):
            def write(self, data: Any) -> None:
                return None

        assert not is_stream(Subject())

    def test_class_is_not_stream(self) -> None:
        assert not is_stream(io.StringIO)
        assert not is_stream("read")


class TestHtmlElement:
    def test_element(self) -> None:
        assert is_html_element(HTMLDivElement())

    def test_missing_property(self) -> None:
        element = HTMLDivElement()
        del element.nodeValue
        assert not is_html_element(element)

    def test_wrong_node_type(self) -> None:
        element = HTMLDivElement()
        element.nodeType = 3
        assert not is_html_element(element)

    def test_boolean_node_type(self) -> None:
        element = HTMLDivElement()
        element.nodeType = True
        assert not is_html_element(element)

    def test_plain_object_is_rejected(self) -> None:
        bag = SimpleNamespace(
            nodeType=1,
            nodeName="DIV",
            innerHTML="",
            ownerDocument=None,
            style=None,
            attributes=None,
            nodeValue=None,
        )
        assert not is_html_element(bag)
