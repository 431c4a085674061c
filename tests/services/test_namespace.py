"""Tests for the is_ / assert_ namespaces."""

from __future__ import annotations

import pytest

from typewise.domain.types import TypeName
from typewise.errors import TypeAssertionError
from typewise.services.namespace import Namespace, assert_, is_
from typewise.services.registry import PREDICATES


class TestIsNamespace:
    def test_members(self) -> None:
        assert is_.string("a")
        assert not is_.string(1)
        assert is_.class_(int)
        assert is_.any([is_.string, is_.number], None, 1)
        assert is_.all(is_.number, 1, 2)

    def test_call_detects(self) -> None:
        assert is_([]) == TypeName.ARRAY
        assert is_(None) == "null"

    def test_unknown_member(self) -> None:
        with pytest.raises(AttributeError, match="no member 'strng'"):
            is_.strng  # noqa: B018

    def test_read_only(self) -> None:
        with pytest.raises(AttributeError, match="read-only"):
            is_.string = lambda value: True  # type: ignore[method-assign]
        with pytest.raises(AttributeError, match="read-only"):
            del is_.string

    def test_introspection(self) -> None:
        assert "string" in is_
        assert "strng" not in is_
        assert len(is_) == len(PREDICATES) + 2
        assert "empty_or_whitespace" in dir(is_)
        assert repr(is_).startswith("<Namespace is_")


class TestAssertNamespace:
    def test_same_names_as_is(self) -> None:
        assert set(assert_) == set(is_)

    def test_members(self) -> None:
        assert_.string("a")
        with pytest.raises(TypeAssertionError):
            assert_.string(1)
        with pytest.raises(TypeAssertionError):
            assert_.all(is_.string, "a", 1)

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError, match="not callable"):
            assert_("a")


class TestNamespace:
    def test_members_are_copied(self) -> None:
        members = {"yes": lambda value: True}
        namespace = Namespace("custom", members)
        members["no"] = lambda value: False
        assert "no" not in namespace
        assert namespace.yes(1)
