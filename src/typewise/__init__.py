"""typewise — runtime type inspection and assertions.

``detect(value)`` names the category of any value. ``is_`` holds one
predicate per category or refinement, ``assert_`` the matching
assertions. Every predicate and assertion is also importable flat, as
``is_<name>`` and ``assert_<name>``::

    >>> from typewise import detect, is_, assert_
    >>> detect([1, 2])
    <TypeName.ARRAY: 'Array'>
    >>> is_.empty_string_or_whitespace("  ")
    True
    >>> assert_.any([is_.string, is_.number], None, 1)
"""

from __future__ import annotations

from typing import Any

from typewise.config.logging import configure_logging
from typewise.config.settings import TypewiseSettings
from typewise.domain.detect import detect
from typewise.domain.sentinels import UNDEFINED, UndefinedType
from typewise.domain.types import AssertionTypeDescription, TypeName
from typewise.errors import (
    BoxedPrimitiveError,
    ErrorPayload,
    InvalidArgumentError,
    TypeAssertionError,
    TypewiseError,
)
from typewise.services.assertions import ASSERTIONS, assert_all, assert_any, assert_array
from typewise.services.combinators import is_all, is_any
from typewise.services.namespace import Namespace, assert_, is_
from typewise.services.registry import PREDICATES

_FLAT: dict[str, Any] = {
    **{f"is_{name.rstrip('_')}": spec.predicate for name, spec in PREDICATES.items()},
    **{f"assert_{name.rstrip('_')}": assertion for name, assertion in ASSERTIONS.items()},
}


def __getattr__(name: str) -> Any:
    try:
        return _FLAT[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None


def __dir__() -> list[str]:
    return sorted({*globals(), *_FLAT})


__all__ = [
    "UNDEFINED",
    "AssertionTypeDescription",
    "BoxedPrimitiveError",
    "ErrorPayload",
    "InvalidArgumentError",
    "Namespace",
    "TypeAssertionError",
    "TypeName",
    "TypewiseError",
    "TypewiseSettings",
    "UndefinedType",
    "assert_",
    "assert_all",
    "assert_any",
    "assert_array",
    "configure_logging",
    "detect",
    "is_",
    "is_all",
    "is_any",
    *sorted(_FLAT),
]
