"""Exception hierarchy and structured error payloads.

Two failure kinds reach callers:
- Assertion failures (``TypeAssertionError``) from every ``assert_*``.
- Invalid-argument failures (``InvalidArgumentError``) from the
  combinators and ``in_range`` when given a structurally invalid argument.

``detect`` adds a third, deliberate one: ``BoxedPrimitiveError`` for
ctypes scalar wrappers. All three are ``TypeError`` subclasses so callers
can catch on kind without importing this module.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ErrorPayload(BaseModel):
    """Structured, serializable form of a typewise error."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class TypewiseError(Exception):
    """Base class for every error raised by typewise."""

    code: ClassVar[str] = "TYPEWISE_ERROR"

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.message)


class TypeAssertionError(TypewiseError, TypeError):
    """Raised when an assertion's predicate does not hold.

    Attributes:
        expected: Descriptions of what was expected, deduplicated.
        received: Type names of the offending values, deduplicated.
    """

    code: ClassVar[str] = "TYPE_ASSERTION"

    def __init__(
        self,
        message: str,
        *,
        expected: tuple[str, ...] = (),
        received: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            code=self.code,
            message=self.message,
            detail={"expected": list(self.expected), "received": list(self.received)},
        )


class InvalidArgumentError(TypewiseError, TypeError, ValueError):
    """Raised for a non-callable predicate, no values, or a malformed range."""

    code: ClassVar[str] = "INVALID_ARGUMENT"


class BoxedPrimitiveError(TypewiseError, TypeError):
    """Raised by ``detect`` for object wrappers around primitive values."""

    code: ClassVar[str] = "BOXED_PRIMITIVE"
