"""Tests for kind resolution and type-directed coercion."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional

import pytest

from tablecast.decoding.coercer import coerce, describe, resolve_kind
from tablecast.models.diagnostics import FailureKind
from tablecast.models.markers import Byte, Double, FieldName, Float, Int, Long, Short
from tablecast.models.schema import FieldKind


class TestResolveKind:
    @pytest.mark.parametrize(
        ("annotation", "kind"),
        [
            (Byte, FieldKind.BYTE),
            (Short, FieldKind.SHORT),
            (Int, FieldKind.INT),
            (Long, FieldKind.LONG),
            (int, FieldKind.LONG),
            (Float, FieldKind.FLOAT),
            (Double, FieldKind.DOUBLE),
            (float, FieldKind.DOUBLE),
            (bool, FieldKind.BOOL),
            (str, FieldKind.STR),
            (dict[int, str], FieldKind.MAP),
            (dict, FieldKind.MAP),
            (list[int], FieldKind.LIST),
            (Annotated[Int, FieldName()], FieldKind.INT),
            (Optional[int], FieldKind.UNSUPPORTED),
            (Any, FieldKind.UNSUPPORTED),
            (set[int], FieldKind.UNSUPPORTED),
        ],
    )
    def test_kinds(self, annotation, kind):
        assert resolve_kind(annotation) is kind

    def test_width_from_pydantic_metadata(self):
        from tablecast.models.markers import IntWidth

        assert resolve_kind(int, (IntWidth(16), FieldName())) is FieldKind.SHORT


class TestDescribe:
    def test_map_descriptor_records_key_and_value_kinds(self):
        descriptor = describe("attrs", dict[Int, str])
        assert descriptor.kind is FieldKind.MAP
        assert descriptor.key_kind is FieldKind.INT
        assert descriptor.value_kind is FieldKind.STR

    def test_list_descriptor_records_element_kind(self):
        descriptor = describe("drops", list[Short])
        assert descriptor.value_kind is FieldKind.SHORT

    def test_bare_containers_have_no_element_kinds(self):
        assert describe("m", dict).key_kind is None
        assert describe("l", list).value_kind is None


class TestCoerce:
    @pytest.mark.parametrize("annotation", [Byte, Short, Int, Long, int])
    @pytest.mark.parametrize(("raw", "expected"), [("5", 5), ("5.7", 5), ("", 0), (5, 5), (Decimal("5.0"), 5)])
    def test_integer_kinds(self, annotation, raw, expected):
        assert coerce(raw, describe("f", annotation)).unwrap() == expected

    def test_integer_rejects_text(self):
        result = coerce("ten", describe("f", Int))
        assert result.failure is FailureKind.INVALID_VALUE
        assert "ten" in result.detail

    def test_integer_rejects_boolean(self):
        assert not coerce(True, describe("f", int)).ok

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("0", False), ("true", True), ("FALSE", False), (True, True), (0, False)])
    def test_boolean(self, raw, expected):
        assert coerce(raw, describe("f", bool)).unwrap() is expected

    def test_string_is_verbatim(self):
        assert coerce("  Sword of Dawn ", describe("f", str)).unwrap() == "  Sword of Dawn "

    def test_string_from_number_keeps_spelling(self):
        assert coerce(Decimal("1.50"), describe("f", str)).unwrap() == "1.50"

    def test_string_from_object_is_json_text(self):
        assert coerce({"a": 1}, describe("f", str)).unwrap() == '{"a":1}'

    @pytest.mark.parametrize(("raw", "expected"), [("2.5", 2.5), ("", 0.0), (Decimal("0.25"), 0.25), (3, 3.0)])
    def test_double(self, raw, expected):
        assert coerce(raw, describe("f", Double)).unwrap() == expected

    def test_unsupported_kind_fails_with_target(self):
        result = coerce("x", describe("f", set[int]))
        assert result.failure is FailureKind.UNSUPPORTED_TYPE
        assert result.target == set[int]

    def test_map_dispatch(self):
        assert coerce({"1": "a", "2": "b"}, describe("f", dict[int, str])).unwrap() == {1: "a", 2: "b"}

    def test_list_dispatch(self):
        assert coerce("[1, 2]", describe("f", list[int])).unwrap() == [1, 2]


def test_double_rejects_digit_separators():
    result = coerce("1_000", describe("f", Double))
    assert result.failure is FailureKind.INVALID_VALUE


def test_string_field_keeps_nested_number_spelling():
    assert coerce({"p": Decimal("1.50")}, describe("f", str)).unwrap() == '{"p":1.50}'
