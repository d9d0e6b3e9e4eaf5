"""Tests for attribute conversion and typed attribute values."""

import math

import pytest

from otel_xray.model.span_record import AttributeKind, AttributeValue
from otel_xray.translator.attributes import UnknownAttributePolicy, convert


def test_empty_attributes_are_absent():
    assert convert({}) is None
    assert convert(None) is None


def test_plain_values_projected():
    assert convert({"k": "v", "n": 5}) == {"k": "v", "n": 5}


def test_typed_values_projected():
    attributes = {
        "s": AttributeValue.string("text"),
        "b": AttributeValue.boolean(False),
        "i": AttributeValue.integer(-3),
        "f": AttributeValue.floating(2.5),
    }
    assert convert(attributes) == {"s": "text", "b": False, "i": -3, "f": 2.5}


def test_unknown_dropped_by_default():
    attributes = {"ok": 1, "tags": AttributeValue.unknown(("a", "b"))}
    assert convert(attributes) == {"ok": 1}


def test_unknown_kept_as_null():
    attributes = {"ok": 1, "tags": ["a", "b"]}
    assert convert(attributes, UnknownAttributePolicy.NULL) == {"ok": 1, "tags": None}


def test_only_unknown_dropped_is_absent():
    assert convert({"raw": b"\x00"}) is None


def test_result_is_new_mapping():
    attributes = {"k": "v"}
    result = convert(attributes)
    result["k"] = "changed"
    assert attributes == {"k": "v"}


def test_non_finite_floats_are_unknown():
    """NaN and infinities have no JSON form and are treated as unknown values."""
    assert convert({"x": math.nan}) is None
    assert convert({"x": math.inf, "y": AttributeValue.floating(-math.inf), "z": 1.0}) == {"z": 1.0}
    assert convert({"x": math.inf, "y": 1.0}, UnknownAttributePolicy.NULL) == {"x": None, "y": 1.0}


class TestAttributeValueOf:
    """Classification of plain Python values."""

    def test_bool_before_int(self):
        assert AttributeValue.of(True).kind is AttributeKind.BOOLEAN

    @pytest.mark.parametrize(
        "value, kind",
        [
            ("x", AttributeKind.STRING),
            (7, AttributeKind.INTEGER),
            (7.0, AttributeKind.FLOAT),
            ([1, 2], AttributeKind.UNKNOWN),
            (None, AttributeKind.UNKNOWN),
        ],
    )
    def test_kinds(self, value, kind):
        assert AttributeValue.of(value).kind is kind

    def test_passthrough(self):
        value = AttributeValue.integer(1)
        assert AttributeValue.of(value) is value


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
