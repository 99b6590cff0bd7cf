"""
    Markup tree interface consumed by the inline document extractors.

    The markup parser is not part of this package. Parsers hand us trees whose nodes
    carry optional location metadata in one of two shapes:

    - plain: `{line, col}`, attached to text and comment nodes
    - element: `{startTag: {line, endOffset}, endTag: ...}`, attached to elements

    Both shapes are resolved into pydantic models once, when a tree is ingested,
    so that downstream code only ever deals with `PlainLocation | ElementLocation`.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Literal, Mapping, Protocol, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

class PlainLocation(BaseModel):
    """Location metadata of a text or comment node."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["plain"] = "plain"
    line: int = Field(ge=1) # 1-based
    col: int = Field(ge=0)
    start_offset: int|None = Field(default=None, alias="startOffset")
    end_offset: int|None = Field(default=None, alias="endOffset")

class TagLocation(BaseModel):
    """Location metadata of an element's start or end tag."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    line: int = Field(ge=1) # 1-based
    col: int|None = None
    start_offset: int|None = Field(default=None, alias="startOffset")
    end_offset: int = Field(ge=0, alias="endOffset")
        # ^^^ used as a column by the offset extractor, see get_location_offset_of_start_of_text_content

class ElementLocation(BaseModel):
    """Location metadata of an element node."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["element"] = "element"
    start_tag: TagLocation = Field(alias="startTag")
    end_tag: TagLocation|None = Field(default=None, alias="endTag")

LocationInfo = Union[PlainLocation, ElementLocation]

def parse_location_info(raw: Mapping[str, Any]|LocationInfo|None) -> LocationInfo|None:
    """Resolve raw parser location metadata into one of the two location shapes.
    The shape is determined structurally: a direct `line` field means a plain location,
    a nested `startTag`/`start_tag` record means an element location."""
    if raw is None or isinstance(raw, (PlainLocation, ElementLocation)):
        return raw
    if "line" in raw:
        return PlainLocation.model_validate(raw) # may raise ValidationError (a ValueError)
    if "startTag" in raw or "start_tag" in raw:
        return ElementLocation.model_validate(raw)
    raise ValueError(f"unrecognised location metadata shape: {dict(raw)!r}")

class TreeNode(Protocol):
    """The capabilities the extractors need from a tree node."""
    node_name: str
    child_nodes: Sequence['TreeNode']
    parent: 'TreeNode|None'
    location: LocationInfo|None
    data: str|None

COMMENT_NODE_NAME = "#comment"
TEXT_NODE_NAME = "#text"

@dataclass(eq=False) # nodes compare by identity
class MarkupNode:
    node_name: str # "#comment", "#text", "#document" or a tag name
    child_nodes: list['MarkupNode'] = field(default_factory=list)
    parent: 'MarkupNode|None' = field(default=None, repr=False)
    location: LocationInfo|None = None
    data: str|None = None # text of comment and text nodes
    attrs: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for child in self.child_nodes:
            child.parent = self

    def append_child(self, child: 'MarkupNode') -> 'MarkupNode':
        child.parent = self
        self.child_nodes.append(child)
        return child

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> 'MarkupNode':
        """Build a tree from a parse5-style mapping:
            {"nodeName": ..., "childNodes": [...], "data": ..., "attrs": [...], "__location": {...}}
        attrs may be a list of {"name", "value"} records or a plain dict."""
        raw_attrs = raw.get("attrs") or {}
        if isinstance(raw_attrs, Mapping):
            attrs = dict(raw_attrs)
        else:
            attrs = {attr["name"]: attr["value"] for attr in raw_attrs}
        node = cls(
            node_name=raw["nodeName"],
            location=parse_location_info(raw.get("__location")),
            data=raw.get("data"),
            attrs=attrs)
        for raw_child in raw.get("childNodes") or []:
            node.append_child(cls.from_mapping(raw_child))
        return node

def is_comment_node(node: TreeNode) -> bool:
    return node.node_name == COMMENT_NODE_NAME

def is_text_node(node: TreeNode) -> bool:
    return node.node_name == TEXT_NODE_NAME

def _root_of(node: TreeNode) -> TreeNode:
    while node.parent is not None:
        node = node.parent
    return node

def _preorder(root: TreeNode) -> list[TreeNode]:
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node)
        stack.extend(reversed(node.child_nodes))
    return result

def iter_preceding_nodes(node: TreeNode) -> Iterator[TreeNode]:
    """Yield every node that precedes `node` in document order, nearest first.

    This includes preceding siblings and their descendants, the node's ancestors,
    and the ancestors' preceding siblings, all the way up to the root.
    `node` itself is not yielded."""
    nodes = _preorder(_root_of(node))
    try:
        index = next(i for i, candidate in enumerate(nodes) if candidate is node)
    except StopIteration: # parent links and child lists disagree
        raise ValueError("node is not reachable from the root of its own tree") from None
    for i in range(index - 1, -1, -1):
        yield nodes[i]

def walk_all_prior(node: TreeNode, predicate: Callable[[TreeNode], bool]) -> list[TreeNode]:
    """All preceding nodes matching `predicate`, nearest first."""
    return [n for n in iter_preceding_nodes(node) if predicate(n)]

def document_order(root: TreeNode) -> dict[int, int]:
    """Map id(node) to the node's pre-order position within `root`."""
    return {id(node): i for i, node in enumerate(_preorder(root))}
