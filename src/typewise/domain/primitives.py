"""Primitive classifier — the first stage of ``detect``.

Classifies by direct type inspection only. Anything that is not one of the
primitive kinds gets ``None`` back and is left to the later stages.

Numbers follow IEEE-754 double semantics: an ``int`` whose magnitude
exceeds ``MAX_SAFE_INTEGER`` cannot be represented exactly as a float and
is classified as ``bigint`` rather than ``number``.
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic_core import PydanticUndefined

from typewise.domain.sentinels import UNDEFINED
from typewise.domain.types import TypeName

MAX_SAFE_INTEGER = 2**53 - 1


def is_undefined(value: object) -> bool:
    """Check whether *value* is ``UNDEFINED`` or pydantic's undefined marker."""
    return value is UNDEFINED or value is PydanticUndefined


def is_real(value: object) -> bool:
    """``int`` or ``float`` of any magnitude, excluding ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_big_int(value: object) -> bool:
    """An ``int`` outside the exactly-representable float range."""
    return isinstance(value, int) and not isinstance(value, bool) and abs(value) > MAX_SAFE_INTEGER


def is_symbol(value: object) -> bool:
    """A member of a plain ``Enum``.

    Members of ``StrEnum``/``IntEnum`` and other mixed-in enums are
    strings and numbers first.
    """
    return isinstance(value, Enum) and not isinstance(value, (str, int, float))


def primitive_type_name(value: object) -> TypeName | None:
    """Return the primitive ``TypeName`` of *value*, or None for objects.

    Examples:
        >>> primitive_type_name(None)
        <TypeName.NULL: 'null'>
        >>> primitive_type_name(float("nan"))
        <TypeName.NAN: 'NaN'>
        >>> primitive_type_name([]) is None
        True
    """
    if value is None:
        return TypeName.NULL
    if is_undefined(value):
        return TypeName.UNDEFINED
    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return TypeName.BOOLEAN
    if isinstance(value, str):
        return TypeName.STRING
    if isinstance(value, float):
        return TypeName.NAN if math.isnan(value) else TypeName.NUMBER
    if isinstance(value, int):
        return TypeName.BIGINT if abs(value) > MAX_SAFE_INTEGER else TypeName.NUMBER
    if is_symbol(value):
        return TypeName.SYMBOL
    return None
