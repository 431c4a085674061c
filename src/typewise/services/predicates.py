"""Predicate library — pure ``value -> bool`` checks.

Each predicate is either a direct wrapper over the domain resolvers
(primitive classifier, tag resolver, capability detectors) or a composed
check over other predicates. Predicates never raise for a "no" answer;
only ``in_range`` raises, and only for a malformed range argument.

Every predicate here has a row in ``typewise.services.registry``, which
is where its assertion and message description come from.
"""

from __future__ import annotations

import datetime
import functools
import inspect
import math
import re
import types
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, TypeGuard

from pydantic import AnyUrl, TypeAdapter, ValidationError

from typewise.domain import capabilities, primitives
from typewise.domain.sentinels import UndefinedType
from typewise.domain.tags import get_object_type
from typewise.domain.types import TYPED_ARRAY_NAMES, TypeName
from typewise.errors import InvalidArgumentError
from typewise.services.combinators import is_any

Predicate = Callable[..., bool]

_NON_WHITESPACE = re.compile(r"\S")
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _is_object_of_type(name: TypeName) -> Callable[[object], bool]:
    def predicate(value: object) -> bool:
        return get_object_type(value) == name

    return predicate


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


def is_undefined(value: object) -> TypeGuard[UndefinedType]:
    return primitives.is_undefined(value)


def is_null(value: object) -> TypeGuard[None]:
    return value is None


def is_null_or_undefined(value: object) -> bool:
    return is_null(value) or is_undefined(value)


def is_string(value: object) -> TypeGuard[str]:
    return isinstance(value, str)


def is_boolean(value: object) -> TypeGuard[bool]:
    return isinstance(value, bool)


def is_symbol(value: object) -> TypeGuard[Enum]:
    return primitives.is_symbol(value)


def is_bigint(value: object) -> TypeGuard[int]:
    return primitives.is_big_int(value)


def is_number(value: object) -> TypeGuard[int | float]:
    """A float or a safe-range int; NaN is excluded."""
    if isinstance(value, float):
        return not math.isnan(value)
    return primitives.is_real(value) and not primitives.is_big_int(value)


def is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def is_positive_number(value: object) -> bool:
    return is_number(value) and value > 0


def is_negative_number(value: object) -> bool:
    return is_number(value) and value < 0


def is_integer(value: object) -> TypeGuard[int | float]:
    """A number with no fractional part (``3`` and ``3.0`` both count)."""
    if not is_number(value):
        return False
    return isinstance(value, int) or value.is_integer()


def is_safe_integer(value: object) -> TypeGuard[int | float]:
    """An integer exactly representable as a float: ``|value| <= 2**53 - 1``."""
    return is_integer(value) and abs(value) <= primitives.MAX_SAFE_INTEGER


def is_infinite(value: object) -> bool:
    return isinstance(value, float) and math.isinf(value)


def _is_absolute_mod_2(remainder: int) -> Callable[[object], bool]:
    def predicate(value: object) -> bool:
        return is_integer(value) and abs(value) % 2 == remainder

    return predicate


is_even_integer = _is_absolute_mod_2(0)
is_odd_integer = _is_absolute_mod_2(1)


def is_primitive(value: object) -> bool:
    return not capabilities.is_object(value)


def _truth(value: object) -> bool | None:
    try:
        return bool(value)
    except (ValueError, TypeError):
        return None


def is_truthy(value: object) -> bool:
    """True if ``bool(value)`` is True.

    Values whose truth is ambiguous (a multi-element numpy array) are
    neither truthy nor falsy.
    """
    return _truth(value) is True


def is_falsy(value: object) -> bool:
    return _truth(value) is False


def is_property_key(value: object) -> bool:
    """A string, number or symbol: the three kinds of attribute key."""
    return is_any([is_string, is_number, is_symbol], value)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def is_empty_string(value: object) -> bool:
    return is_string(value) and len(value) == 0


def is_non_empty_string(value: object) -> bool:
    return is_string(value) and len(value) > 0


def is_whitespace_string(value: object) -> bool:
    """Non-empty and made only of whitespace."""
    return is_non_empty_string(value) and _NON_WHITESPACE.search(value) is None


def is_empty_string_or_whitespace(value: object) -> bool:
    return is_empty_string(value) or is_whitespace_string(value)


def is_non_empty_string_and_not_whitespace(value: object) -> bool:
    return is_string(value) and not is_empty_string_or_whitespace(value)


def _parse_number(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float(int(text, 0))
    except (ValueError, OverflowError):
        return None


def is_numeric_string(value: object) -> bool:
    """A string holding a finite decimal, or a ``0x``/``0o``/``0b`` literal.

    Digit-group underscores (``"1_000"``) are Python literal syntax, not
    numeric text, and are rejected.

    Examples:
        >>> is_numeric_string("-3.2"), is_numeric_string("0x56"), is_numeric_string("inf")
        (True, True, False)
    """
    if not is_non_empty_string_and_not_whitespace(value):
        return False
    number = _parse_number(value)
    return number is not None and math.isfinite(number)


def is_url_string(value: object) -> bool:
    """A string that parses as an absolute URL."""
    if not is_string(value):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------


def is_function(value: object) -> TypeGuard[Callable[..., Any]]:
    """Callable and not a tagged builtin such as a weak reference."""
    return callable(value) and get_object_type(value) is None


def is_class(value: object) -> TypeGuard[type]:
    return inspect.isclass(value)


def is_async_function(value: object) -> bool:
    return inspect.iscoroutinefunction(value)


def is_generator_function(value: object) -> bool:
    return inspect.isgeneratorfunction(value)


def is_async_generator_function(value: object) -> bool:
    return inspect.isasyncgenfunction(value)


def is_bound_function(value: object) -> bool:
    """A callable with its receiver or arguments already bound."""
    if inspect.ismethod(value) or isinstance(value, functools.partial):
        return True
    return isinstance(value, types.BuiltinMethodType) and not isinstance(
        value.__self__, types.ModuleType | None
    )


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------


def is_array(value: object, predicate: Predicate | None = None) -> TypeGuard[list[Any]]:
    """A ``list``; when *predicate* is given, every element must satisfy it."""
    if not isinstance(value, list):
        return False
    if not callable(predicate):
        return True
    return all(predicate(element) for element in value)


def is_empty_array(value: object) -> bool:
    return is_array(value) and len(value) == 0


def is_non_empty_array(value: object) -> bool:
    return is_array(value) and len(value) > 0


is_tuple = _is_object_of_type(TypeName.TUPLE)


def is_valid_length(value: object) -> bool:
    return is_safe_integer(value) and value >= 0


def is_array_like(value: object) -> bool:
    """Indexable with a valid ``len()``: strings, lists, tuples, byte strings, ranges."""
    if is_null_or_undefined(value) or is_function(value) or isinstance(value, Mapping):
        return False
    kind = type(value)
    if not all(
        callable(capabilities.special_method(kind, name)) for name in ("__len__", "__getitem__")
    ):
        return False
    try:
        length = len(value)  # type: ignore[arg-type]
    except (ValueError, OverflowError):
        return False
    return is_valid_length(length)


def is_tuple_like(value: object, guards: Sequence[Predicate]) -> bool:
    """A list or tuple whose elements satisfy *guards* position by position.

    Lengths must match exactly; checking stops at the first mismatch.
    """
    if not isinstance(value, (list, tuple)) or not isinstance(guards, (list, tuple)):
        return False
    if len(value) != len(guards):
        return False
    return all(guard(element) for guard, element in zip(guards, value, strict=True))


# ---------------------------------------------------------------------------
# Binary data
# ---------------------------------------------------------------------------


def is_buffer(value: object) -> TypeGuard[bytes]:
    return isinstance(value, bytes)


is_array_buffer = _is_object_of_type(TypeName.ARRAY_BUFFER)
is_shared_array_buffer = _is_object_of_type(TypeName.SHARED_ARRAY_BUFFER)
is_data_view = _is_object_of_type(TypeName.DATA_VIEW)


def is_typed_array(value: object) -> bool:
    return get_object_type(value) in TYPED_ARRAY_NAMES


is_int8_array = _is_object_of_type(TypeName.INT8_ARRAY)
is_uint8_array = _is_object_of_type(TypeName.UINT8_ARRAY)
is_int16_array = _is_object_of_type(TypeName.INT16_ARRAY)
is_uint16_array = _is_object_of_type(TypeName.UINT16_ARRAY)
is_int32_array = _is_object_of_type(TypeName.INT32_ARRAY)
is_uint32_array = _is_object_of_type(TypeName.UINT32_ARRAY)
is_big_int64_array = _is_object_of_type(TypeName.BIG_INT64_ARRAY)
is_big_uint64_array = _is_object_of_type(TypeName.BIG_UINT64_ARRAY)
is_float32_array = _is_object_of_type(TypeName.FLOAT32_ARRAY)
is_float64_array = _is_object_of_type(TypeName.FLOAT64_ARRAY)


# ---------------------------------------------------------------------------
# Objects and collections
# ---------------------------------------------------------------------------

is_object = capabilities.is_object
is_plain_object = capabilities.is_plain_object

is_map = _is_object_of_type(TypeName.MAP)
is_set = _is_object_of_type(TypeName.SET)
is_weak_map = _is_object_of_type(TypeName.WEAK_MAP)
is_weak_set = _is_object_of_type(TypeName.WEAK_SET)
is_weak_ref = _is_object_of_type(TypeName.WEAK_REF)
is_reg_exp = _is_object_of_type(TypeName.REG_EXP)
is_date = _is_object_of_type(TypeName.DATE)
is_error = _is_object_of_type(TypeName.ERROR)
is_native_promise = _is_object_of_type(TypeName.PROMISE)
is_url_instance = _is_object_of_type(TypeName.URL)


def _slot_names(value: object) -> list[str]:
    names: list[str] = []
    for kind in type(value).__mro__:
        slots = kind.__dict__.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
    return names


def own_keys(value: object) -> list[object]:
    """Enumerable own keys: indices for array-likes, public attributes otherwise."""
    if is_array_like(value):
        return list(range(len(value)))  # type: ignore[arg-type]
    try:
        names = list(vars(value))
    except TypeError:
        names = [name for name in _slot_names(value) if hasattr(value, name)]
    return [name for name in names if not name.startswith("_")]


def is_empty_object(value: object) -> bool:
    """An object (not a map or set) without own enumerable keys."""
    return is_object(value) and not is_map(value) and not is_set(value) and not own_keys(value)


def is_non_empty_object(value: object) -> bool:
    return is_object(value) and not is_map(value) and not is_set(value) and bool(own_keys(value))


def is_empty_map(value: object) -> bool:
    return is_map(value) and len(value) == 0  # type: ignore[arg-type]


def is_non_empty_map(value: object) -> bool:
    return is_map(value) and len(value) > 0  # type: ignore[arg-type]


def is_empty_set(value: object) -> bool:
    return is_set(value) and len(value) == 0  # type: ignore[arg-type]


def is_non_empty_set(value: object) -> bool:
    return is_set(value) and len(value) > 0  # type: ignore[arg-type]


def is_direct_instance_of(instance: object, cls: type) -> bool:
    """``type(instance) is cls``; subclass instances do not count."""
    if is_null_or_undefined(instance):
        return False
    return type(instance) is cls


def _enum_values(enum_like: object) -> list[object]:
    if inspect.isclass(enum_like) and issubclass(enum_like, Enum):
        return [member.value for member in enum_like]
    if isinstance(enum_like, Mapping):
        return list(enum_like.values())
    return [getattr(enum_like, name) for name in own_keys(enum_like) if isinstance(name, str)]


def is_enum_case(value: object, enum_like: object) -> bool:
    """True if *value* is one of the enumerable values of *enum_like*."""
    if inspect.isclass(enum_like) and issubclass(enum_like, Enum) and isinstance(value, enum_like):
        return True
    return value in _enum_values(enum_like)


def is_valid_date(value: object) -> bool:
    """A date whose UTC offset, if any, can be computed."""
    if not is_date(value):
        return False
    if not isinstance(value, datetime.datetime):
        return True
    try:
        value.utcoffset()
    except (ValueError, TypeError):
        return False
    return True


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

is_iterable = capabilities.is_iterable
is_async_iterable = capabilities.is_async_iterable
is_generator = capabilities.is_generator
is_async_generator = capabilities.is_async_generator
is_observable = capabilities.is_observable
is_stream = capabilities.is_stream
is_html_element = capabilities.is_html_element


def is_promise(value: object) -> bool:
    """Native futures, or anything awaitable."""
    return is_native_promise(value) or capabilities.is_promise_like(value)


# ---------------------------------------------------------------------------
# Ranges and emptiness
# ---------------------------------------------------------------------------


def _bounds(range_: object) -> tuple[float, float]:
    if primitives.is_real(range_):
        return min(0, range_), max(0, range_)  # type: ignore[type-var]
    if isinstance(range_, (list, tuple)) and len(range_) == 2 and all(map(primitives.is_real, range_)):
        return min(range_), max(range_)
    raise InvalidArgumentError(f"Invalid range: {range_!r}")


def is_in_range(value: object, range_: float | Sequence[float]) -> bool:
    """Check *value* against an inclusive interval.

    A single number ``n`` means ``[min(0, n), max(0, n)]``. A pair means
    ``[min(a, b), max(a, b)]``, in either order.

    Raises:
        InvalidArgumentError: If *range_* is neither a number nor a pair of numbers.
    """
    low, high = _bounds(range_)
    return primitives.is_real(value) and low <= value <= high  # type: ignore[operator]


def is_empty(value: object) -> bool:
    """Falsy, or an empty string, list, object, map or set."""
    return (
        is_falsy(value)
        or is_empty_string(value)
        or is_empty_array(value)
        or is_empty_object(value)
        or is_empty_map(value)
        or is_empty_set(value)
    )


def is_empty_or_whitespace(value: object) -> bool:
    return is_empty(value) or is_whitespace_string(value)
