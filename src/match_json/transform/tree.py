"""
tree.py

Generic document tree for parsed XML responses.

The XML binding produces four kinds of node:

- ObjectNode: ordered mapping of child name -> node
- SequenceNode: ordered list of nodes (a tag repeated under one parent)
- LeafNode: text content of an element without children or attributes
- MissingNode: the sentinel returned for any lookup that finds nothing

Lookups never raise. `tree.get("ResultBlock").get("MatchDetails")` returns
MISSING at the first absent step, so callers check once at the end.
"""
from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Union

import xmltodict

# Key used for element text that sits next to attributes or child elements
TEXT_KEY = ""


class Node:
    """Base class for all tree nodes."""

    def get(self, key: str) -> "Node":
        return MISSING

    def text(self) -> str:
        return ""

    def is_missing(self) -> bool:
        return False

    def to_python(self) -> Any:
        raise NotImplementedError


class MissingNode(Node):
    _instance: Optional["MissingNode"] = None

    def __new__(cls) -> "MissingNode":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_missing(self) -> bool:
        return True

    def to_python(self) -> Any:
        return None

    def __repr__(self) -> str:
        return "MISSING"


MISSING = MissingNode()


class LeafNode(Node):
    def __init__(self, value: str = "") -> None:
        self.value = value

    def text(self) -> str:
        return self.value

    def to_python(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LeafNode({self.value!r})"


class SequenceNode(Node):
    def __init__(self, items: Optional[List[Node]] = None) -> None:
        self.items: List[Node] = list(items or [])

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]

    def __repr__(self) -> str:
        return f"SequenceNode({self.items!r})"


class ObjectNode(Node):
    def __init__(self, fields: Optional[Dict[str, Node]] = None) -> None:
        self.fields: Dict[str, Node] = dict(fields or {})

    def get(self, key: str) -> Node:
        return self.fields.get(key, MISSING)

    def set(self, key: str, node: Node) -> Node:
        """Set `key` to `node`.

        An existing key keeps its position; a new key is appended last.
        """
        self.fields[key] = node
        return node

    def keys(self) -> List[str]:
        return list(self.fields)

    def to_python(self) -> Dict[str, Any]:
        return {key: node.to_python() for key, node in self.fields.items()}

    def __repr__(self) -> str:
        return f"ObjectNode({self.fields!r})"


def as_sequence(node: Node) -> List[Node]:
    """Normalize a node that may have deserialized as one element or many.

    A SequenceNode yields its items, MISSING yields nothing, and any other
    node is treated as a sequence of one.
    """
    if isinstance(node, SequenceNode):
        return list(node.items)
    if node.is_missing():
        return []
    return [node]


def from_python(value: Any) -> Node:
    """Build a tree from the dict/list/str structure produced by xmltodict."""
    if isinstance(value, dict):
        return ObjectNode({str(k): from_python(v) for k, v in value.items()})
    if isinstance(value, list):
        return SequenceNode([from_python(v) for v in value])
    if value is None:
        return LeafNode("")
    return LeafNode(str(value))


def _empty_as_text(path, key, value):
    # xmltodict reports <Tag/> as None; the tree represents it as ""
    if value is None:
        return key, ""
    return key, value


def parse_document(xml_text: Union[str, bytes]) -> Node:
    """Parse an XML document into a tree rooted at the root element's content.

    The root element's own tag is dropped. Attributes become plain keys ahead
    of child elements. Raises xml.parsers.expat.ExpatError on malformed input.
    """
    parsed = xmltodict.parse(
        xml_text,
        attr_prefix="",
        cdata_key=TEXT_KEY,
        postprocessor=_empty_as_text,
    )
    # xmltodict always returns {root_tag: content} for a well-formed document
    (content,) = parsed.values()
    return from_python(content)


def unparse_document(data: Dict[str, Any]) -> str:
    """Render a {root_tag: content} mapping back to pretty-printed XML."""
    return xmltodict.unparse(data, pretty=True, indent="    ", cdata_key=TEXT_KEY)
