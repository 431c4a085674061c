"""The ``UNDEFINED`` sentinel — a value that is distinct from ``None``.

``None`` means "explicitly empty". ``UNDEFINED`` means "no value was
supplied at all", the way a missing key or an unset field does. Pydantic's
own ``PydanticUndefined`` plays the same role for model fields and is
classified identically.

INVARIANT: ``UNDEFINED`` is a process-wide singleton; copying or
unpickling it yields the same object.
"""

from __future__ import annotations

from typing import Final, Self


class UndefinedType:
    """Type of the ``UNDEFINED`` singleton."""

    __slots__ = ()

    _instance: UndefinedType | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Self:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = UndefinedType()
