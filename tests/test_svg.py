"""Tests for the SVG element tree and serializer."""
from __future__ import annotations

import math

import pytest

from wakatime_charts.visuals.svg import Node, format_number, serialize


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (540, "540"),
        (540.0, "540"),
        (4.5, "4.5"),
        (57.857142857, "57.857"),
        (0.0004, "0"),
        (135 / 2, "67.5"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_format_number_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        format_number(math.nan)


def test_empty_element_is_self_closed() -> None:
    node = Node("rect", {"width": 10, "rx": 4.5})
    assert serialize(node) == '<rect width="10" rx="4.5"/>'


def test_attributes_keep_insertion_order() -> None:
    node = Node("text", {"y": 1, "class": "nameText", "dominant-baseline": "middle"})
    assert serialize(node) == '<text y="1" class="nameText" dominant-baseline="middle"/>'


def test_nested_build_and_text() -> None:
    root = Node("svg")
    group = root.append("g", {"transform": "translate(20, 20)"})
    group.append("text", text="Python")

    assert serialize(root) == '<svg><g transform="translate(20, 20)"><text>Python</text></g></svg>'


def test_text_and_attributes_are_escaped() -> None:
    root = Node("text", {"data-name": 'a "b" <c>'}, text="C & C++ <3")

    markup = serialize(root)

    assert "C &amp; C++ &lt;3" in markup
    assert "&lt;c&gt;" in markup
    assert "<c>" not in markup

