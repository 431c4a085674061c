"""Predicate table — one row per public check.

Each row pairs a predicate with the description its assertion reports.
The ``is_`` and ``assert_`` namespaces, the flat ``assert_*`` functions
and the combinators' description lookup are all derived from this one
table, so a predicate and its assertion cannot drift apart.

INVARIANT: ``PREDICATES`` and ``METHOD_TYPE_MAP`` are built once at import
time and never mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from typewise.domain.types import AssertionTypeDescription as D
from typewise.services import predicates as p


@dataclass(frozen=True)
class PredicateSpec:
    """A named predicate and its assertion description."""

    name: str
    predicate: Callable[..., bool]
    description: D


def _spec(name: str, description: D) -> PredicateSpec:
    return PredicateSpec(name=name, predicate=getattr(p, f"is_{name}"), description=description)


def _class_spec() -> PredicateSpec:
    # ``class`` is a keyword; the public name carries a trailing underscore.
    return PredicateSpec(name="class_", predicate=p.is_class, description=D.CLASS)


PREDICATE_SPECS: tuple[PredicateSpec, ...] = (
    # --- Primitives and numbers ---
    _spec("undefined", D.UNDEFINED),
    _spec("null", D.NULL),
    _spec("null_or_undefined", D.NULL_OR_UNDEFINED),
    _spec("string", D.STRING),
    _spec("number", D.NUMBER),
    _spec("positive_number", D.POSITIVE_NUMBER),
    _spec("negative_number", D.NEGATIVE_NUMBER),
    _spec("bigint", D.BIGINT),
    _spec("boolean", D.BOOLEAN),
    _spec("symbol", D.SYMBOL),
    _spec("nan", D.NAN),
    _spec("integer", D.INTEGER),
    _spec("safe_integer", D.INTEGER),
    _spec("infinite", D.INFINITE),
    _spec("even_integer", D.EVEN_INTEGER),
    _spec("odd_integer", D.ODD_INTEGER),
    _spec("primitive", D.PRIMITIVE),
    _spec("truthy", D.TRUTHY),
    _spec("falsy", D.FALSY),
    _spec("property_key", D.PROPERTY_KEY),
    # --- Strings ---
    _spec("empty_string", D.EMPTY_STRING),
    _spec("non_empty_string", D.NON_EMPTY_STRING),
    _spec("whitespace_string", D.WHITESPACE_STRING),
    _spec("empty_string_or_whitespace", D.EMPTY_STRING_OR_WHITESPACE),
    _spec("non_empty_string_and_not_whitespace", D.NON_EMPTY_STRING_AND_NOT_WHITESPACE),
    _spec("numeric_string", D.NUMERIC_STRING),
    _spec("url_string", D.URL_STRING),
    # --- Functions ---
    _spec("function", D.FUNCTION),
    _class_spec(),
    _spec("async_function", D.ASYNC_FUNCTION),
    _spec("generator_function", D.GENERATOR_FUNCTION),
    _spec("async_generator_function", D.ASYNC_GENERATOR_FUNCTION),
    _spec("bound_function", D.FUNCTION),
    # --- Sequences ---
    _spec("array", D.ARRAY),
    _spec("empty_array", D.EMPTY_ARRAY),
    _spec("non_empty_array", D.NON_EMPTY_ARRAY),
    _spec("tuple", D.TUPLE),
    _spec("array_like", D.ARRAY_LIKE),
    _spec("tuple_like", D.TUPLE_LIKE),
    _spec("valid_length", D.VALID_LENGTH),
    # --- Binary data ---
    _spec("buffer", D.BUFFER),
    _spec("array_buffer", D.ARRAY_BUFFER),
    _spec("shared_array_buffer", D.SHARED_ARRAY_BUFFER),
    _spec("data_view", D.DATA_VIEW),
    _spec("typed_array", D.TYPED_ARRAY),
    _spec("int8_array", D.INT8_ARRAY),
    _spec("uint8_array", D.UINT8_ARRAY),
    _spec("int16_array", D.INT16_ARRAY),
    _spec("uint16_array", D.UINT16_ARRAY),
    _spec("int32_array", D.INT32_ARRAY),
    _spec("uint32_array", D.UINT32_ARRAY),
    _spec("big_int64_array", D.BIG_INT64_ARRAY),
    _spec("big_uint64_array", D.BIG_UINT64_ARRAY),
    _spec("float32_array", D.FLOAT32_ARRAY),
    _spec("float64_array", D.FLOAT64_ARRAY),
    # --- Objects and collections ---
    _spec("object", D.OBJECT),
    _spec("plain_object", D.PLAIN_OBJECT),
    _spec("empty_object", D.EMPTY_OBJECT),
    _spec("non_empty_object", D.NON_EMPTY_OBJECT),
    _spec("direct_instance_of", D.DIRECT_INSTANCE),
    _spec("enum_case", D.ENUM_CASE),
    _spec("map", D.MAP),
    _spec("empty_map", D.EMPTY_MAP),
    _spec("non_empty_map", D.NON_EMPTY_MAP),
    _spec("set", D.SET),
    _spec("empty_set", D.EMPTY_SET),
    _spec("non_empty_set", D.NON_EMPTY_SET),
    _spec("weak_map", D.WEAK_MAP),
    _spec("weak_set", D.WEAK_SET),
    _spec("weak_ref", D.WEAK_REF),
    _spec("reg_exp", D.REG_EXP),
    _spec("date", D.DATE),
    _spec("valid_date", D.VALID_DATE),
    _spec("error", D.ERROR),
    _spec("url_instance", D.URL),
    # --- Capabilities ---
    _spec("iterable", D.ITERABLE),
    _spec("async_iterable", D.ASYNC_ITERABLE),
    _spec("generator", D.GENERATOR),
    _spec("async_generator", D.ASYNC_GENERATOR),
    _spec("promise", D.PROMISE),
    _spec("native_promise", D.NATIVE_PROMISE),
    _spec("observable", D.OBSERVABLE),
    _spec("stream", D.STREAM),
    _spec("html_element", D.HTML_ELEMENT),
    # --- Ranges and emptiness ---
    _spec("in_range", D.IN_RANGE),
    _spec("empty", D.EMPTY),
    _spec("empty_or_whitespace", D.EMPTY_OR_WHITESPACE),
)

PREDICATES: MappingProxyType[str, PredicateSpec] = MappingProxyType(
    {spec.name: spec for spec in PREDICATE_SPECS}
)

# Keyed by function identity; the combinators resolve a bare predicate here.
METHOD_TYPE_MAP: MappingProxyType[Callable[..., bool], D] = MappingProxyType(
    {spec.predicate: spec.description for spec in PREDICATE_SPECS}
)


def description_for(predicate: Callable[..., object], fallback: D) -> str:
    """Return the registered description of *predicate*, or *fallback*."""
    try:
        return METHOD_TYPE_MAP.get(predicate, fallback)  # type: ignore[call-overload]
    except TypeError:
        # Unhashable callables cannot be registered.
        return fallback
