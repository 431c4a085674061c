"""Tests for the object tag resolver."""

from __future__ import annotations

import array
import asyncio
import collections
import concurrent.futures
import datetime
import re
import weakref
from multiprocessing.shared_memory import SharedMemory
from typing import Any
from urllib.parse import urlparse, urlsplit

import pytest
from pydantic import AnyUrl

from tests.conftest import HTMLDivElement
from typewise.domain.tags import get_object_type, typed_array_type
from typewise.domain.types import TypeName


class _Ref:
    pass


class TestGetObjectType:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ([], TypeName.ARRAY),
            (b"", TypeName.BUFFER),
            ((1, 2), TypeName.TUPLE),
            (re.compile("a"), TypeName.REG_EXP),
            (datetime.date(2024, 1, 1), TypeName.DATE),
            (datetime.datetime(2024, 1, 1), TypeName.DATE),
            (ValueError("x"), TypeName.ERROR),
            ({}, TypeName.MAP),
            (collections.OrderedDict(), TypeName.MAP),
            (set(), TypeName.SET),
            (frozenset(), TypeName.SET),
            (weakref.WeakKeyDictionary(), TypeName.WEAK_MAP),
            (weakref.WeakValueDictionary(), TypeName.WEAK_MAP),
            (weakref.WeakSet(), TypeName.WEAK_SET),
            (bytearray(), TypeName.ARRAY_BUFFER),
            (memoryview(b"ab"), TypeName.DATA_VIEW),
            (urlparse("https://example.com/a"), TypeName.URL),
            (urlsplit("https://example.com/a"), TypeName.URL),
            (AnyUrl("https://example.com"), TypeName.URL),
        ],
        ids=lambda v: type(v).__name__,
    )
    def test_tagged_builtins(self, value: object, expected: TypeName) -> None:
        assert get_object_type(value) == expected

    def test_weak_ref(self) -> None:
        target = _Ref()
        assert get_object_type(weakref.ref(target)) == TypeName.WEAK_REF

    def test_futures(self, future: asyncio.Future[Any]) -> None:
        assert get_object_type(future) == TypeName.PROMISE
        assert get_object_type(concurrent.futures.Future()) == TypeName.PROMISE

    def test_generators(self, generator: Any, async_generator: Any) -> None:
        assert get_object_type(generator) == TypeName.GENERATOR
        assert get_object_type(async_generator) == TypeName.ASYNC_GENERATOR

    def test_shared_memory(self) -> None:
        block = SharedMemory(create=True, size=16)
        try:
            assert get_object_type(block) == TypeName.SHARED_ARRAY_BUFFER
        finally:
            block.close()
            block.unlink()

    def test_html_element(self) -> None:
        assert get_object_type(HTMLDivElement()) == TypeName.HTML_ELEMENT

    def test_element_name_without_structure(self) -> None:
        class HTMLSpanElement:
            pass

        assert get_object_type(HTMLSpanElement()) is None

    @pytest.mark.parametrize("value", [object(), len, 1, None])
    def test_unrecognized(self, value: object) -> None:
        assert get_object_type(value) is None


class TestTypedArrayType:
    @pytest.mark.parametrize(
        "typecode,expected",
        [
            ("b", TypeName.INT8_ARRAY),
            ("B", TypeName.UINT8_ARRAY),
            ("h", TypeName.INT16_ARRAY),
            ("H", TypeName.UINT16_ARRAY),
            ("i", TypeName.INT32_ARRAY),
            ("I", TypeName.UINT32_ARRAY),
            ("q", TypeName.BIG_INT64_ARRAY),
            ("Q", TypeName.BIG_UINT64_ARRAY),
            ("f", TypeName.FLOAT32_ARRAY),
            ("d", TypeName.FLOAT64_ARRAY),
        ],
    )
    def test_typecodes(self, typecode: str, expected: TypeName) -> None:
        assert typed_array_type(array.array(typecode)) == expected
        assert get_object_type(array.array(typecode)) == expected

    def test_platform_long_follows_itemsize(self) -> None:
        value = array.array("l")
        expected = TypeName.BIG_INT64_ARRAY if value.itemsize == 8 else TypeName.INT32_ARRAY
        assert typed_array_type(value) == expected
