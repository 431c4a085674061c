"""Object tag resolver — the builtin category a non-primitive belongs to.

The tag of a value is the first recognized builtin in its class hierarchy,
so subclasses keep their base category (an ``OrderedDict`` is a ``Map``,
an exception subclass is an ``Error``). Only names from the closed
``TypeName`` set are ever returned; unrecognized values get ``None``.

Element objects are matched by class name first and confirmed
structurally, so every ``HTML<Kind>Element`` class collapses to one name.
"""

from __future__ import annotations

import array
import asyncio
import concurrent.futures
import datetime
import re
import types
import weakref
from collections.abc import Mapping, Set
from multiprocessing.shared_memory import SharedMemory
from typing import Any
from urllib.parse import (
    DefragResult,
    DefragResultBytes,
    ParseResult,
    ParseResultBytes,
    SplitResult,
    SplitResultBytes,
)

from pydantic import AnyUrl
from pydantic_core import Url

from typewise.domain.capabilities import is_html_element
from typewise.domain.types import TypeName

_HTML_ELEMENT_TAG = re.compile(r"HTML\w+Element")

URL_TYPES: tuple[type, ...] = (
    ParseResult,
    SplitResult,
    DefragResult,
    ParseResultBytes,
    SplitResultBytes,
    DefragResultBytes,
    AnyUrl,
    Url,
)

# Order matters: URL results are tuples, weak mappings are mappings.
TAGGED_TYPES: tuple[tuple[type | tuple[type, ...], TypeName], ...] = (
    (URL_TYPES, TypeName.URL),
    (list, TypeName.ARRAY),
    (bytes, TypeName.BUFFER),
    (tuple, TypeName.TUPLE),
    (types.GeneratorType, TypeName.GENERATOR),
    (types.AsyncGeneratorType, TypeName.ASYNC_GENERATOR),
    (re.Pattern, TypeName.REG_EXP),
    (datetime.date, TypeName.DATE),
    (BaseException, TypeName.ERROR),
    ((asyncio.Future, concurrent.futures.Future), TypeName.PROMISE),
    ((weakref.WeakKeyDictionary, weakref.WeakValueDictionary), TypeName.WEAK_MAP),
    (weakref.WeakSet, TypeName.WEAK_SET),
    (weakref.ref, TypeName.WEAK_REF),
    (Mapping, TypeName.MAP),
    (Set, TypeName.SET),
    (bytearray, TypeName.ARRAY_BUFFER),
    (memoryview, TypeName.DATA_VIEW),
    (SharedMemory, TypeName.SHARED_ARRAY_BUFFER),
)

_SIGNED_ARRAYS: dict[int, TypeName] = {
    1: TypeName.INT8_ARRAY,
    2: TypeName.INT16_ARRAY,
    4: TypeName.INT32_ARRAY,
    8: TypeName.BIG_INT64_ARRAY,
}

_UNSIGNED_ARRAYS: dict[int, TypeName] = {
    1: TypeName.UINT8_ARRAY,
    2: TypeName.UINT16_ARRAY,
    4: TypeName.UINT32_ARRAY,
    8: TypeName.BIG_UINT64_ARRAY,
}

_FLOAT_ARRAYS: dict[int, TypeName] = {
    4: TypeName.FLOAT32_ARRAY,
    8: TypeName.FLOAT64_ARRAY,
}


def typed_array_type(value: array.array[Any]) -> TypeName | None:
    """Map an ``array.array`` to its typed-array name by typecode and item size.

    ``'i'``/``'l'`` and friends vary in width across platforms, so the item
    size decides. Character arrays (``'u'``, ``'w'``) have no typed-array
    counterpart.
    """
    code = value.typecode
    if code in "bhilq":
        return _SIGNED_ARRAYS.get(value.itemsize)
    if code in "BHILQ":
        return _UNSIGNED_ARRAYS.get(value.itemsize)
    if code in "fd":
        return _FLOAT_ARRAYS.get(value.itemsize)
    return None


def get_object_type(value: object) -> TypeName | None:
    """Return the recognized tag of *value*, or None.

    Examples:
        >>> get_object_type({})
        <TypeName.MAP: 'Map'>
        >>> get_object_type(object()) is None
        True
    """
    if _HTML_ELEMENT_TAG.search(type(value).__name__) and is_html_element(value):
        return TypeName.HTML_ELEMENT
    if isinstance(value, array.array):
        return typed_array_type(value)
    for types_, name in TAGGED_TYPES:
        if isinstance(value, types_):
            return name
    return None
