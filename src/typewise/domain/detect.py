"""Type name resolver — ``detect`` maps any value to one ``TypeName``.

Resolution order (each step returns on match):
  1. Primitive classifier (null, undefined, boolean, string, NaN/number/bigint, symbol)
  2. Callables → their builtin tag if they have one (``WeakRef``), else ``Function``
  3. Observable capability → ``Observable``
  4. ``list`` → ``Array``
  5. ``bytes`` → ``Buffer``
  6. Object tag table (incl. typed arrays and the element special case)
  7. ctypes scalar wrapper → ``BoxedPrimitiveError``
  8. Fallback → ``Object``

INVARIANT: ``detect`` is total. Every value yields exactly one name, except
boxed primitives, which are rejected on purpose after every legitimate tag
has had a chance to match.
"""

from __future__ import annotations

import ctypes
import logging

from typewise.domain.capabilities import is_observable
from typewise.domain.primitives import primitive_type_name
from typewise.domain.tags import get_object_type
from typewise.domain.types import TypeName
from typewise.errors import BoxedPrimitiveError

logger = logging.getLogger(__name__)

# Every ctypes scalar (c_int, c_bool, c_double, c_char_p, ...) derives from this base.
_CTYPES_SCALAR: type = ctypes.c_int.__mro__[1]

BOXED_PRIMITIVE_MESSAGE = "Please don't use object wrappers for primitive types"


def is_boxed_primitive(value: object) -> bool:
    return isinstance(value, _CTYPES_SCALAR)


def detect(value: object) -> TypeName:
    """Return the canonical type name of *value*.

    Examples:
        >>> detect(None)
        <TypeName.NULL: 'null'>
        >>> detect([1, 2])
        <TypeName.ARRAY: 'Array'>
        >>> detect({})
        <TypeName.MAP: 'Map'>

    Raises:
        BoxedPrimitiveError: If *value* is a ctypes scalar wrapper.
    """
    primitive = primitive_type_name(value)
    if primitive is not None:
        return primitive

    if callable(value):
        return get_object_type(value) or TypeName.FUNCTION

    if is_observable(value):
        return TypeName.OBSERVABLE

    if isinstance(value, list):
        return TypeName.ARRAY

    if isinstance(value, bytes):
        return TypeName.BUFFER

    tag = get_object_type(value)
    if tag is not None:
        return tag

    if is_boxed_primitive(value):
        logger.debug("Rejected boxed primitive %s", type(value).__name__)
        raise BoxedPrimitiveError(BOXED_PRIMITIVE_MESSAGE)

    return TypeName.OBJECT
