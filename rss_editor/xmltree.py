"""
Immutable XML tree used by the normalizer.

`parse_xml` turns raw feed bytes into an `XmlNode` tree; everything else in
this module is a pure function over that tree, so extraction code can be
tested with trees built by hand through `node()`.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from .exceptions import XMLParseError


@dataclass(frozen=True)
class XmlNode:
    """
    One element: local name, attributes, child elements and text.

    `text` is the character data before the first child and `tail` the data
    following this element inside its parent, mirroring ElementTree.
    """
    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["XmlNode", ...] = ()
    text: str = ""
    tail: str = ""

    def get(self, attribute: str, default: str = "") -> str:
        return self.attributes.get(attribute, default)


def local_name(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    if ":" in tag:
        return tag.split(":", 1)[1]
    return tag


def node(name: str, *children: Union[XmlNode, str], **attributes: str) -> XmlNode:
    """
    Build a node by hand. String arguments become text: the first string
    before any element is the node's text, later ones the previous child's tail.
    """
    text = ""
    built = []
    for child in children:
        if isinstance(child, XmlNode):
            built.append(child)
        elif built:
            last = built[-1]
            built[-1] = XmlNode(last.name, last.attributes, last.children, last.text, last.tail + child)
        else:
            text += child
    return XmlNode(name=local_name(name), attributes=dict(attributes), children=tuple(built), text=text)


def from_element(element: ET.Element) -> XmlNode:
    """Convert an ElementTree element; iterative, so nesting depth is unbounded."""
    # Pre-order; walking it backwards visits every child before its parent.
    order = []
    stack = [element]
    while stack:
        current = stack.pop()
        order.append(current)
        stack.extend(current)

    built = {}
    for current in reversed(order):
        built[id(current)] = XmlNode(
            name=local_name(current.tag),
            attributes={local_name(k): v for k, v in current.attrib.items()},
            children=tuple(built.pop(id(child)) for child in current),
            text=current.text or "",
            tail=current.tail or "",
        )
    return built[id(element)]


def parse_xml(data: Union[str, bytes]) -> XmlNode:
    """
    Parse a complete XML document into an `XmlNode` tree.

    Raises XMLParseError when the document is not well-formed.
    """
    if isinstance(data, str) and data.startswith("\ufeff"):
        data = data[1:]
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise XMLParseError(f"Malformed XML document ({e})") from e
    # Tail text after the root element is outside the document.
    tree = from_element(root)
    return XmlNode(tree.name, tree.attributes, tree.children, tree.text)


def iter_descendants(root: XmlNode) -> Iterator[XmlNode]:
    """Yield every element below `root` in document order (pre-order)."""
    stack = list(reversed(root.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_named(root: XmlNode, name: str, include_self: bool = False) -> Iterator[XmlNode]:
    """Yield descendants whose local name is `name`, in document order."""
    if include_self and root.name == name:
        yield root
    for n in iter_descendants(root):
        if n.name == name:
            yield n


def find_first(root: XmlNode, name: str) -> Optional[XmlNode]:
    return next(iter_named(root, name), None)


def text_content(n: XmlNode) -> str:
    """Concatenated character data of `n` and all its descendants."""
    parts = []
    stack: List[Union[XmlNode, str]] = [n]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(current)
            continue
        parts.append(current.text)
        for child in reversed(current.children):
            stack.append(child.tail)
            stack.append(child)
    return "".join(parts)


def child_text(root: XmlNode, name: str) -> str:
    """Trimmed text of the first `name` descendant, or "" when there is none."""
    found = find_first(root, name)
    if found is None:
        return ""
    return text_content(found).strip()
