"""Parse Markdown text into the planner document tree."""

from __future__ import annotations

import re
import textwrap
from typing import Sequence

from planner.exceptions import ParseError
from planner.nodes import Document, Heading, List, ListItem, Node, Paragraph, Task, Text

try:
    from markdown_it import MarkdownIt
    from markdown_it.tree import SyntaxTreeNode
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "markdown-it-py is required for Markdown parsing (pip install markdown-it-py)."
    ) from exc


# A whole paragraph that reads like a task line, e.g. "-[x] Done".
_TASK_LINE_RE = re.compile(r"^\s*[-*+]\s*\[([ xX])\]\s*(.*)$")
# Checkbox marker at the start of a list item's own text.
_CHECKBOX_RE = re.compile(r"^\[([ xX])\](?:[ \t]+(.*))?$", re.DOTALL)
_LIST_TYPES = {"bullet_list", "ordered_list"}

_MARKDOWN = MarkdownIt("commonmark").enable("table")


def parse_markdown(content: str | bytes) -> Document:
    """Build a document tree from Markdown source.

    Headings own every block up to the next heading of the same or a
    higher level. Bytes are decoded as UTF-8.

    Raises:
        ParseError: If ``content`` is bytes that are not valid UTF-8.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"Markdown source is not valid UTF-8: {exc}") from exc

    source = content.replace("\r\n", "\n").replace("\r", "\n")
    tree = SyntaxTreeNode(_MARKDOWN.parse(source))
    lines = source.split("\n")

    document = Document()
    _attach_blocks(document, tree.children, lines, nested=False)
    return document


def parse_task(text: str) -> Task | None:
    """Return a Task when ``text`` is a single checkbox line, else None."""
    match = _TASK_LINE_RE.match(text)
    if not match:
        return None
    return Task(checked=match.group(1) != " ", content=match.group(2).strip())


def _attach_blocks(
    container: Node,
    blocks: Sequence[SyntaxTreeNode],
    lines: list[str],
    *,
    nested: bool,
) -> None:
    stack: list[Heading] = []

    for block in blocks:
        node = _convert_block(block, lines, nested=nested)
        if node is None:
            continue

        if isinstance(node, Heading):
            while stack and stack[-1].level >= node.level:
                stack.pop()
            (stack[-1] if stack else container).add_child(node)
            stack.append(node)
            continue

        target = stack[-1] if stack else container
        target.add_child(node)

        children = _nested_blocks(block)
        if not children:
            continue
        # Tasks keep no children: whatever sits below a checkbox item follows
        # it in the same container instead.
        owner = target if isinstance(node, Task) else node
        _attach_blocks(owner, children, lines, nested=True)


def _convert_block(
    block: SyntaxTreeNode, lines: list[str], *, nested: bool
) -> Node | None:
    if block.type == "heading":
        return Heading(level=int(block.tag[1]), title=_inline_text(block))

    if block.type == "paragraph":
        text = _inline_text(block)
        return parse_task(text) or Paragraph(content=text)

    if block.type in _LIST_TYPES:
        return List(ordered=block.type == "ordered_list")

    if block.type == "list_item":
        return _convert_list_item(block)

    raw = _raw_block_text(block, lines, dedent=nested)
    if not raw:
        return None
    return Text(content=raw)


def _convert_list_item(item: SyntaxTreeNode) -> Task | ListItem:
    text = _item_text(item)
    match = _CHECKBOX_RE.match(text)
    if match:
        return Task(checked=match.group(1) != " ", content=(match.group(2) or "").strip())
    return ListItem(content=text)


def _nested_blocks(block: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    if block.type in _LIST_TYPES:
        return list(block.children)
    if block.type == "list_item":
        children = list(block.children)
        if children and children[0].type == "paragraph":
            # The leading paragraph is the item's own text.
            return children[1:]
        return children
    return []


def _item_text(item: SyntaxTreeNode) -> str:
    if item.children and item.children[0].type == "paragraph":
        return _inline_text(item.children[0])
    return ""


def _inline_text(block: SyntaxTreeNode) -> str:
    for child in block.children:
        if child.type == "inline":
            return child.content.strip()
    return ""


def _raw_block_text(block: SyntaxTreeNode, lines: list[str], *, dedent: bool) -> str:
    if block.map is None:
        return block.content.strip()
    start, end = block.map
    raw = "\n".join(lines[start:end])
    if dedent:
        raw = textwrap.dedent(raw)
    return raw.strip("\n").rstrip()
