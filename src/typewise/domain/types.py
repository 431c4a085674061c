"""Canonical type names and assertion descriptions.

``TypeName`` is the closed set ``detect`` draws from: exactly one member
per value. ``AssertionTypeDescription`` is the larger set used in error
messages, where a predicate often describes a refinement of a base type
("empty array", "even integer") rather than the type itself.

INVARIANT: Every ``TypeName`` value is also an ``AssertionTypeDescription``
value, so a plain type predicate can always describe itself.
"""

from __future__ import annotations

from enum import StrEnum


class TypeName(StrEnum):
    """Canonical names produced by ``detect``."""

    # --- Primitives ---
    NULL = "null"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    NAN = "NaN"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"

    # --- Resolved ahead of the tag table ---
    FUNCTION = "Function"
    OBSERVABLE = "Observable"
    ARRAY = "Array"
    BUFFER = "Buffer"
    OBJECT = "Object"

    # --- Object tags ---
    TUPLE = "Tuple"
    GENERATOR = "Generator"
    ASYNC_GENERATOR = "AsyncGenerator"
    REG_EXP = "RegExp"
    DATE = "Date"
    ERROR = "Error"
    PROMISE = "Promise"
    MAP = "Map"
    SET = "Set"
    WEAK_MAP = "WeakMap"
    WEAK_SET = "WeakSet"
    WEAK_REF = "WeakRef"
    URL = "URL"
    HTML_ELEMENT = "HTMLElement"
    ARRAY_BUFFER = "ArrayBuffer"
    SHARED_ARRAY_BUFFER = "SharedArrayBuffer"
    DATA_VIEW = "DataView"

    # --- Typed arrays ---
    INT8_ARRAY = "Int8Array"
    UINT8_ARRAY = "Uint8Array"
    INT16_ARRAY = "Int16Array"
    UINT16_ARRAY = "Uint16Array"
    INT32_ARRAY = "Int32Array"
    UINT32_ARRAY = "Uint32Array"
    BIG_INT64_ARRAY = "BigInt64Array"
    BIG_UINT64_ARRAY = "BigUint64Array"
    FLOAT32_ARRAY = "Float32Array"
    FLOAT64_ARRAY = "Float64Array"


PRIMITIVE_TYPE_NAMES: frozenset[TypeName] = frozenset(
    {
        TypeName.NULL,
        TypeName.UNDEFINED,
        TypeName.STRING,
        TypeName.NUMBER,
        TypeName.NAN,
        TypeName.BIGINT,
        TypeName.BOOLEAN,
        TypeName.SYMBOL,
    }
)

TYPED_ARRAY_NAMES: frozenset[TypeName] = frozenset(
    {
        TypeName.INT8_ARRAY,
        TypeName.UINT8_ARRAY,
        TypeName.INT16_ARRAY,
        TypeName.UINT16_ARRAY,
        TypeName.INT32_ARRAY,
        TypeName.UINT32_ARRAY,
        TypeName.BIG_INT64_ARRAY,
        TypeName.BIG_UINT64_ARRAY,
        TypeName.FLOAT32_ARRAY,
        TypeName.FLOAT64_ARRAY,
    }
)

OBJECT_TYPE_NAMES: frozenset[TypeName] = frozenset(TypeName) - PRIMITIVE_TYPE_NAMES


class AssertionTypeDescription(StrEnum):
    """Human-readable descriptions used in assertion messages."""

    # --- Refinements ---
    POSITIVE_NUMBER = "positive number"
    NEGATIVE_NUMBER = "negative number"
    CLASS = "Class"
    NUMERIC_STRING = "string with a number"
    NULL_OR_UNDEFINED = "null or undefined"
    ITERABLE = "Iterable"
    ASYNC_ITERABLE = "AsyncIterable"
    NATIVE_PROMISE = "native Promise"
    ENUM_CASE = "EnumCase"
    URL_STRING = "string with a URL"
    TRUTHY = "truthy"
    FALSY = "falsy"
    PRIMITIVE = "primitive"
    INTEGER = "integer"
    PLAIN_OBJECT = "plain object"
    TYPED_ARRAY = "TypedArray"
    ARRAY_LIKE = "array-like"
    TUPLE_LIKE = "tuple-like"
    STREAM = "Stream"
    INFINITE = "infinite number"
    EMPTY_ARRAY = "empty array"
    NON_EMPTY_ARRAY = "non-empty array"
    EMPTY_STRING = "empty string"
    EMPTY_STRING_OR_WHITESPACE = "empty string or whitespace"
    NON_EMPTY_STRING = "non-empty string"
    NON_EMPTY_STRING_AND_NOT_WHITESPACE = "non-empty string and not whitespace"
    EMPTY_OBJECT = "empty object"
    NON_EMPTY_OBJECT = "non-empty object"
    EMPTY_SET = "empty set"
    NON_EMPTY_SET = "non-empty set"
    EMPTY_MAP = "empty map"
    NON_EMPTY_MAP = "non-empty map"
    PROPERTY_KEY = "PropertyKey"
    EVEN_INTEGER = "even integer"
    ODD_INTEGER = "odd integer"
    DIRECT_INSTANCE = "direct instance"
    IN_RANGE = "in range"
    ANY_VALUE = "predicate returns truthy for any value"
    ALL_VALUES = "predicate returns truthy for all values"
    VALID_DATE = "valid Date"
    VALID_LENGTH = "valid length"
    WHITESPACE_STRING = "whitespace string"
    EMPTY = "empty"
    EMPTY_OR_WHITESPACE = "empty or whitespace"
    GENERATOR_FUNCTION = "GeneratorFunction"
    ASYNC_FUNCTION = "AsyncFunction"
    ASYNC_GENERATOR_FUNCTION = "AsyncGeneratorFunction"

    # --- Mirrors of TypeName ---
    NULL = "null"
    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    NAN = "NaN"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    SYMBOL = "symbol"
    FUNCTION = "Function"
    OBSERVABLE = "Observable"
    ARRAY = "Array"
    BUFFER = "Buffer"
    OBJECT = "Object"
    TUPLE = "Tuple"
    GENERATOR = "Generator"
    ASYNC_GENERATOR = "AsyncGenerator"
    REG_EXP = "RegExp"
    DATE = "Date"
    ERROR = "Error"
    PROMISE = "Promise"
    MAP = "Map"
    SET = "Set"
    WEAK_MAP = "WeakMap"
    WEAK_SET = "WeakSet"
    WEAK_REF = "WeakRef"
    URL = "URL"
    HTML_ELEMENT = "HTMLElement"
    ARRAY_BUFFER = "ArrayBuffer"
    SHARED_ARRAY_BUFFER = "SharedArrayBuffer"
    DATA_VIEW = "DataView"
    INT8_ARRAY = "Int8Array"
    UINT8_ARRAY = "Uint8Array"
    INT16_ARRAY = "Int16Array"
    UINT16_ARRAY = "Uint16Array"
    INT32_ARRAY = "Int32Array"
    UINT32_ARRAY = "Uint32Array"
    BIG_INT64_ARRAY = "BigInt64Array"
    BIG_UINT64_ARRAY = "BigUint64Array"
    FLOAT32_ARRAY = "Float32Array"
    FLOAT64_ARRAY = "Float64Array"
