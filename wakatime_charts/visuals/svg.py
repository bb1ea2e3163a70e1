"""Minimal SVG element tree and its serializer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from xml.sax.saxutils import escape, quoteattr

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

AttrValue = str | int | float


def format_number(value: float) -> str:
    """Format a coordinate compactly: ``540``, ``4.5``, ``27.875``."""
    if isinstance(value, bool):
        raise TypeError("boolean is not a valid SVG number")
    if not math.isfinite(value):
        raise ValueError(f"non-finite SVG number: {value!r}")
    rounded = round(float(value), 3)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.3f}".rstrip("0").rstrip(".")


def _format_attr(value: AttrValue) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


@dataclass
class Node:
    """One element: tag, ordered attributes, optional text, children."""

    tag: str
    attrs: dict[str, AttrValue] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    text: str = ""

    def append(self, tag: str, attrs: dict[str, AttrValue] | None = None, text: str = "") -> Node:
        """Append a child element and return it for further building."""
        child = Node(tag, dict(attrs or {}), text=text)
        self.children.append(child)
        return child

    def to_markup(self) -> str:
        attrs = "".join(
            f" {name}={quoteattr(_format_attr(value))}" for name, value in self.attrs.items()
        )
        if not self.text and not self.children:
            return f"<{self.tag}{attrs}/>"
        inner = escape(self.text) + "".join(child.to_markup() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def serialize(root: Node) -> str:
    """Render a composed tree to SVG markup."""
    return root.to_markup()
