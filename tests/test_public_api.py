"""Tests for the top-level typewise surface."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

import typewise
from typewise import UNDEFINED, TypeAssertionError, TypeName, assert_, detect, is_


class TestFlatNames:
    def test_flat_predicates_and_assertions(self) -> None:
        from typewise import assert_empty_string, is_class, is_empty_string

        assert is_empty_string("")
        assert is_class(int)
        assert_empty_string("")
        with pytest.raises(TypeAssertionError):
            assert_empty_string("a")

    def test_flat_names_match_namespaces(self) -> None:
        assert typewise.is_string is is_.string
        assert typewise.assert_string is assert_.string
        assert typewise.assert_class is assert_.class_

    def test_every_export_resolves(self) -> None:
        for name in typewise.__all__:
            assert getattr(typewise, name) is not None

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError):
            typewise.is_strng  # noqa: B018

    def test_dir_lists_flat_names(self) -> None:
        assert "is_safe_integer" in dir(typewise)
        assert "assert_any" in dir(typewise)


class TestScenarios:
    def test_detect(self) -> None:
        assert detect(None) == "null"
        assert detect(UNDEFINED) == "undefined"
        assert detect(float("nan")) == "NaN"
        assert detect([1, 2]) == "Array"
        assert detect({}) == TypeName.MAP

    def test_tuple_like(self) -> None:
        guards = [is_.number, is_.string, is_.boolean]
        assert is_.tuple_like([1, "a", True], guards)
        assert not is_.tuple_like([1, "a"], guards)

    def test_direct_instance_of(self) -> None:
        class A:
            pass

        class B(A):
            pass

        assert not is_.direct_instance_of(B(), A)
        assert is_.direct_instance_of(B(), B)

    def test_in_range(self) -> None:
        assert is_.in_range(3, 10)
        assert not is_.in_range(-3, -2)

    def test_assert_all_message(self) -> None:
        with pytest.raises(TypeAssertionError) as exc_info:
            assert_.all(is_.string, 1, 2, 3)
        assert "`string`" in str(exc_info.value)
        assert "`number`" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["", [], SimpleNamespace(), {}, set()])
    def test_empty_until_filled(self, value: object) -> None:
        assert is_.empty(value)
        if isinstance(value, str):
            value += "a"
        elif isinstance(value, list):
            value.append(1)
        elif isinstance(value, dict):
            value["k"] = 1
        elif isinstance(value, set):
            value.add(1)
        else:
            value.k = 1  # type: ignore[attr-defined]
        assert not is_.empty(value)
