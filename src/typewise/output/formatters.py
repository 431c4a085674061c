"""Assertion message formatting.

Single value::

    Expected value which is `string`, received value of type `number`.

Multiple values (the combinators)::

    Expected values which are `string` or `number`. Received values of types `null` and `Array`.

Expected descriptions and received type names are each deduplicated in
first-seen order before joining.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from typewise.domain.detect import detect


def unique(items: Iterable[str]) -> list[str]:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(items))


def _join(items: Sequence[str], conjunction: str) -> str:
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} {conjunction} {items[1]}"
    return f"{', '.join(items[:-1])}, {conjunction} {items[-1]}"


def join_with_disjunction(items: Sequence[str]) -> str:
    """Join as an English "or" list.

    Examples:
        >>> join_with_disjunction(["a", "b", "c"])
        'a, b, or c'
    """
    return _join(items, "or")


def join_with_conjunction(items: Sequence[str]) -> str:
    """Join as an English "and" list.

    Examples:
        >>> join_with_conjunction(["a", "b"])
        'a and b'
    """
    return _join(items, "and")


def _quote(text: str) -> str:
    return f"`{text}`"


def type_error_message(description: str, value: object) -> str:
    """Default message for a single-value assertion."""
    return f"Expected value which is {_quote(description)}, received value of type {_quote(detect(value))}."


def type_error_message_multiple_values(expected: Sequence[str], values: Sequence[object]) -> str:
    """Default message for ``assert_any`` / ``assert_all``."""
    expected_types = [_quote(item) for item in unique(expected)]
    received_types = [_quote(item) for item in unique(detect(value) for value in values)]
    plural = "s" if len(received_types) > 1 else ""
    return (
        f"Expected values which are {join_with_disjunction(expected_types)}. "
        f"Received values of type{plural} {join_with_conjunction(received_types)}."
    )
