"""Read-only namespaces over the predicate table.

``is_`` exposes every predicate as an attribute (``is_.string(value)``)
and, when called directly, classifies its argument with ``detect``.
``assert_`` exposes the matching assertions. Both carry ``any`` and
``all``.

INVARIANT: For every name ``n`` in ``is_``, ``assert_.n`` exists and
raises exactly when ``is_.n`` returns False for the same arguments.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, NoReturn

from typewise.domain.detect import detect
from typewise.services.assertions import ASSERTIONS, assert_all, assert_any
from typewise.services.combinators import is_all, is_any
from typewise.services.registry import PREDICATES


class Namespace:
    """Attribute-style access to a fixed set of named callables."""

    __slots__ = ("_label", "_members", "_call")

    def __init__(
        self,
        label: str,
        members: Mapping[str, Callable[..., Any]],
        call: Callable[[object], Any] | None = None,
    ) -> None:
        object.__setattr__(self, "_label", label)
        object.__setattr__(self, "_members", MappingProxyType(dict(members)))
        object.__setattr__(self, "_call", call)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            return self._members[name]
        except KeyError:
            raise AttributeError(f"{self._label!r} has no member {name!r}") from None

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{self._label!r} is read-only")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{self._label!r} is read-only")

    def __call__(self, value: object) -> Any:
        if self._call is None:
            raise TypeError(f"{self._label!r} is not callable")
        return self._call(value)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __dir__(self) -> list[str]:
        return sorted(self._members)

    def __repr__(self) -> str:
        return f"<Namespace {self._label} ({len(self._members)} members)>"


is_ = Namespace(
    "is_",
    {**{name: spec.predicate for name, spec in PREDICATES.items()}, "any": is_any, "all": is_all},
    call=detect,
)

assert_ = Namespace(
    "assert_",
    {**ASSERTIONS, "any": assert_any, "all": assert_all},
)
