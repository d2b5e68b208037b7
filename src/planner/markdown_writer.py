"""Serialize the planner document tree back to Markdown."""

from __future__ import annotations

import textwrap
from typing import Mapping, Sequence

from planner.nodes import (
    Document,
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Task,
    Text,
    find_heading_by_title,
)


def write_document(document: Document) -> str:
    """Render a document to Markdown.

    Output is deterministic for a given tree and carries no leading or
    trailing whitespace.
    """
    return write_node(document)


def write_node(node: Node) -> str:
    """Render a single node and its subtree, trimmed."""
    parts: list[str] = []
    _write_node(parts, node, 0)
    return "".join(parts).strip()


def write_heading(level: int, title: str) -> str:
    """Render an ATX heading line; levels outside 1-6 fall back to 1."""
    if level < 1 or level > 6:
        level = 1
    return f"{'#' * level} {title}\n"


def _write_node(parts: list[str], node: Node, list_depth: int) -> None:
    if isinstance(node, Document):
        for index, child in enumerate(node.children):
            if index > 0:
                parts.append("\n")
            _write_node(parts, child, list_depth)

    elif isinstance(node, Heading):
        parts.append(write_heading(node.level, node.title))
        previous: Node | None = None
        for child in node.children:
            parts.append(_separator(previous, child))
            _write_node(parts, child, list_depth)
            previous = child

    elif isinstance(node, Task):
        # Children are never written: the checkbox line is the whole task.
        indent = "  " * max(list_depth - 1, 0)
        marker = "- [x] " if node.checked else "- [ ] "
        parts.append(f"{indent}{marker}{node.content}\n")

    elif isinstance(node, (Paragraph, Text)):
        parts.append(node.content)

    elif isinstance(node, List):
        for child in node.children:
            if isinstance(child, (Paragraph, Text)):
                # Blocks lifted out of a task item go back under that item,
                # indented past its marker so they stay out of the task line.
                block = textwrap.indent(child.content, "  " * (list_depth + 1))
                parts.append(f"\n{block}\n")
            else:
                _write_node(parts, child, list_depth + 1)

    elif isinstance(node, ListItem):
        _write_list_item(parts, node, list_depth)


def _separator(previous: Node | None, current: Node) -> str:
    """Pick the text written between two siblings under a heading."""
    if previous is None:
        return "\n"
    if isinstance(previous, Task):
        # The task line already ends in a newline.
        return "\n" if isinstance(current, Heading) else ""
    if isinstance(current, Heading):
        return "\n" if _ends_with_task(previous) else "\n\n"
    return "\n"


def _ends_with_task(node: Node) -> bool:
    return (
        isinstance(node, Heading)
        and bool(node.children)
        and isinstance(node.children[-1], Task)
    )


def _write_list_item(parts: list[str], item: ListItem, list_depth: int) -> None:
    indent = "  " * max(list_depth - 1, 0)
    parent = item.parent
    marker = "1. " if isinstance(parent, List) and parent.ordered else "- "
    parts.append(f"{indent}{marker}{item.content}\n")

    for child in item.children:
        if isinstance(child, (Paragraph, Text)):
            block = textwrap.indent(child.content, indent + "  ")
            parts.append(f"\n{block}\n")
        else:
            _write_node(parts, child, list_depth)


def create_heading_with_content(level: int, title: str, *children: Node) -> Heading:
    heading = Heading(level=level, title=title)
    for child in children:
        heading.add_child(child)
    return heading


def create_task_list(items: Mapping[str, bool]) -> List:
    """Build an unordered list of tasks from ``{content: checked}``."""
    task_list = List(ordered=False)
    for content, checked in items.items():
        task_list.add_child(Task(checked=checked, content=content))
    return task_list


def update_or_create_heading(document: Document, level: int, title: str) -> Heading:
    """Find a heading by title and set its level, or append a new one."""
    heading = find_heading_by_title(document, title)
    if heading is not None:
        heading.level = level
        return heading

    heading = Heading(level=level, title=title)
    document.add_child(heading)
    return heading


def write_list(items: Sequence[str], ordered: bool = False) -> str:
    lines = []
    for index, item in enumerate(items, start=1):
        prefix = f"{index}. " if ordered else "- "
        lines.append(f"{prefix}{item}\n")
    return "".join(lines)


def write_checkbox_list(items: Mapping[str, bool]) -> str:
    return "".join(
        f"- [{'x' if checked else ' '}] {item}\n" for item, checked in items.items()
    )


def write_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a pipe table; rows are padded or cut to the header width."""
    width = len(headers)
    lines = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join("---" for _ in headers) + " |",
    ]
    for row in rows:
        cells = list(row[:width]) + [""] * (width - len(row))
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines) + "\n"
