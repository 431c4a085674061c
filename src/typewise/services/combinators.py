"""Predicate combinators — apply predicates across several values.

``is_any`` accepts one predicate or a list of them and holds when any
predicate holds for any value. ``is_all`` accepts exactly one predicate
and holds when it holds for every value. Both short-circuit.

Structural misuse (no values, an empty predicate list, a non-callable
predicate) is reported with ``InvalidArgumentError`` before any value is
inspected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from typewise.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Predicate = Callable[[object], object]


def predicate_list(predicate: Predicate | Sequence[Predicate]) -> list[Predicate]:
    """Normalize the first ``is_any`` argument to a non-empty list of callables."""
    predicates = list(predicate) if isinstance(predicate, (list, tuple)) else [predicate]
    if not predicates:
        logger.debug("Rejected empty predicate list")
        raise InvalidArgumentError("Invalid predicate list: expected at least one predicate")
    for item in predicates:
        if not callable(item):
            logger.debug("Rejected non-callable predicate %r", item)
            raise InvalidArgumentError(f"Invalid predicate: {item!r}")
    return predicates


def validate_values(values: Sequence[object]) -> None:
    if not values:
        logger.debug("Rejected combinator call without values")
        raise InvalidArgumentError("Invalid number of values")


def is_any(predicate: Predicate | Sequence[Predicate], *values: object) -> bool:
    """True if some predicate holds for some value.

    Examples:
        >>> is_any(callable, 1, len)
        True
        >>> is_any([callable, lambda v: v is None], 1, "a")
        False

    Raises:
        InvalidArgumentError: For an empty or non-callable predicate, or no values.
    """
    predicates = predicate_list(predicate)
    validate_values(values)
    return any(bool(check(value)) for check in predicates for value in values)


def is_all(predicate: Predicate, *values: object) -> bool:
    """True if *predicate* holds for every value.

    Raises:
        InvalidArgumentError: For a non-callable predicate (lists included), or no values.
    """
    if not callable(predicate):
        logger.debug("Rejected non-callable predicate %r", predicate)
        raise InvalidArgumentError(f"Invalid predicate: {predicate!r}")
    validate_values(values)
    return all(bool(predicate(value)) for value in values)
