"""Node types and tree queries for the Markdown document model."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator


class NodeType(str, Enum):
    """Enumeration of Markdown node kinds."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TASK = "task"
    LIST = "list"
    LIST_ITEM = "list_item"
    TEXT = "text"


@dataclass(eq=False)
class Node:
    """Base node: an ordered child sequence plus a weak link to the parent.

    The child list is the only ownership path. ``parent`` is kept for upward
    lookups (for example "is this item inside an ordered list?") and is
    cleared whenever the node is detached.
    """

    node_type: ClassVar[NodeType]

    children: list[Node] = field(default_factory=list, init=False, repr=False)
    _parent_ref: weakref.ref | None = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> Node | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def add_child(self, child: Node) -> None:
        """Append ``child`` and point its parent link here.

        No cycle check is done: callers must never add a node below itself.
        """
        self.children.append(child)
        child._parent_ref = weakref.ref(self)

    def clear_children(self) -> None:
        """Detach every child and empty the child sequence."""
        for child in self.children:
            child._parent_ref = None
        self.children = []


@dataclass(eq=False)
class Document(Node):
    """Root of a Markdown document tree."""

    node_type: ClassVar[NodeType] = NodeType.DOCUMENT


@dataclass(eq=False)
class Heading(Node):
    """An ATX heading; owns every node up to the next heading of level <= its own."""

    node_type: ClassVar[NodeType] = NodeType.HEADING

    level: int
    title: str


@dataclass(eq=False)
class Task(Node):
    """A checkbox line."""

    node_type: ClassVar[NodeType] = NodeType.TASK

    checked: bool
    content: str


@dataclass(eq=False)
class Paragraph(Node):
    node_type: ClassVar[NodeType] = NodeType.PARAGRAPH

    content: str


@dataclass(eq=False)
class List(Node):
    node_type: ClassVar[NodeType] = NodeType.LIST

    ordered: bool = False


@dataclass(eq=False)
class ListItem(Node):
    node_type: ClassVar[NodeType] = NodeType.LIST_ITEM

    content: str


@dataclass(eq=False)
class Text(Node):
    """Raw text, written back verbatim."""

    node_type: ClassVar[NodeType] = NodeType.TEXT

    content: str


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and its descendants in pre-order."""
    yield root
    for child in root.children:
        yield from iter_nodes(child)


def find_headings(root: Node) -> list[Heading]:
    """Return every heading in the subtree, in document order."""
    return [node for node in iter_nodes(root) if isinstance(node, Heading)]


def find_heading_by_title(root: Node, title: str) -> Heading | None:
    """Find the first heading whose title matches ``title`` case-insensitively."""
    wanted = title.lower()
    for heading in find_headings(root):
        if heading.title.lower() == wanted:
            return heading
    return None


def find_tasks(root: Node) -> list[Task]:
    """Return every task in the subtree, however deeply nested."""
    return [node for node in iter_nodes(root) if isinstance(node, Task)]


def node_depth(node: Node) -> int:
    """Count the ancestor hops from ``node`` to the root of its tree."""
    depth = 0
    current = node.parent
    while current is not None:
        depth += 1
        current = current.parent
    return depth
