"""Assertion library — raising counterparts of every predicate.

For each row of the predicate table there is one assertion
``assertion(value, *args, message=None) -> None`` that returns normally
when the predicate holds and raises ``TypeAssertionError`` otherwise.
The default message names the row's description and ``detect(value)``;
a caller-supplied *message* replaces it entirely.

``assert_array`` is the one hand-written assertion: instead of an
element predicate it takes an element assertion and runs it on every
element.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from types import MappingProxyType
from typing import Any

from typewise.domain.detect import detect
from typewise.domain.types import AssertionTypeDescription
from typewise.errors import TypeAssertionError
from typewise.output.formatters import type_error_message, type_error_message_multiple_values, unique
from typewise.services.combinators import Predicate, is_all, is_any, predicate_list
from typewise.services.predicates import is_array
from typewise.services.registry import PREDICATE_SPECS, PredicateSpec, description_for

logger = logging.getLogger(__name__)

Assertion = Callable[..., None]


def fail(description: str, value: object, message: str | None) -> TypeAssertionError:
    """Build the error for a single-value assertion that did not hold."""
    received = detect(value)
    logger.debug("Assertion failed: expected %s, received %s", description, received)
    return TypeAssertionError(
        message if message is not None else type_error_message(description, value),
        expected=(str(description),),
        received=(str(received),),
    )


def fail_multiple(
    expected: Sequence[str], values: Sequence[object], message: str | None
) -> TypeAssertionError:
    """Build the error for a combinator assertion that did not hold."""
    expected_types = tuple(unique(str(item) for item in expected))
    received_types = tuple(unique(str(detect(value)) for value in values))
    logger.debug("Assertion failed: expected %s, received %s", expected_types, received_types)
    return TypeAssertionError(
        message if message is not None else type_error_message_multiple_values(expected, values),
        expected=expected_types,
        received=received_types,
    )


def make_assertion(spec: PredicateSpec) -> Assertion:
    """Derive the assertion for one predicate table row."""

    def assertion(value: object, *args: Any, message: str | None = None) -> None:
        if not spec.predicate(value, *args):
            raise fail(spec.description, value, message)

    assertion.__name__ = assertion.__qualname__ = f"assert_{spec.name.rstrip('_')}"
    assertion.__doc__ = (
        f"Raise ``TypeAssertionError`` unless the value is ``{spec.description}``."
    )
    return assertion


def assert_array(
    value: object,
    assertion: Assertion | None = None,
    *,
    message: str | None = None,
) -> None:
    """Assert *value* is a list, then run *assertion* on every element.

    The element assertion receives *message* only when one was given, so
    element failures otherwise keep their own default message.
    """
    if not is_array(value):
        raise fail(AssertionTypeDescription.ARRAY, value, message)
    if assertion is None:
        return
    for element in value:
        if message is None:
            assertion(element)
        else:
            assertion(element, message=message)


def assert_any(
    predicate: Predicate | Sequence[Predicate],
    *values: object,
    message: str | None = None,
) -> None:
    """Assert that some predicate holds for some value.

    Examples:
        >>> from typewise.services.predicates import is_string, is_number
        >>> assert_any([is_string, is_number], None, 1)

    Raises:
        InvalidArgumentError: For an empty or non-callable predicate, or no values.
        TypeAssertionError: If no predicate holds for any value.
    """
    if is_any(predicate, *values):
        return
    expected = [
        description_for(check, AssertionTypeDescription.ANY_VALUE)
        for check in predicate_list(predicate)
    ]
    raise fail_multiple(expected, values, message)


def assert_all(predicate: Predicate, *values: object, message: str | None = None) -> None:
    """Assert that *predicate* holds for every value.

    Only the values that failed are reported as received.

    Raises:
        InvalidArgumentError: For a non-callable predicate, or no values.
        TypeAssertionError: If any value fails *predicate*.
    """
    if is_all(predicate, *values):
        return
    failing = [value for value in values if not predicate(value)]
    expected = [description_for(predicate, AssertionTypeDescription.ALL_VALUES)]
    raise fail_multiple(expected, failing, message)


ASSERTIONS: MappingProxyType[str, Assertion] = MappingProxyType(
    {
        spec.name: assert_array if spec.name == "array" else make_assertion(spec)
        for spec in PREDICATE_SPECS
    }
)
