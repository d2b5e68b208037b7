"""Inspect how a Markdown note is split into planner nodes."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from planner.markdown_parser import parse_markdown
from planner.nodes import Heading, List, ListItem, Node, Paragraph, Task, Text, iter_nodes, node_depth


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect the node tree of a Markdown note.")
    parser.add_argument("--file", required=True, help="Local Markdown file path")
    parser.add_argument("--counts", action="store_true", help="Show only per-kind node counts")
    args = parser.parse_args()

    path = Path(args.file)
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    document = parse_markdown(path.read_bytes())

    if args.counts:
        for kind, count in collect_stats(document).most_common():
            print(f"{kind}: {count}")
        return

    for node in iter_nodes(document):
        print("  " * node_depth(node) + describe(node))


def collect_stats(root: Node) -> Counter:
    kinds = Counter()
    for node in iter_nodes(root):
        kinds[node.node_type.value] += 1
    return kinds


def describe(node: Node) -> str:
    kind = node.node_type.value
    if isinstance(node, Heading):
        return f"{kind} h{node.level}: {node.title}"
    if isinstance(node, Task):
        return f"{kind} [{'x' if node.checked else ' '}]: {node.content}"
    if isinstance(node, List):
        return f"{kind} ({'ordered' if node.ordered else 'bullet'})"
    if isinstance(node, (Paragraph, ListItem, Text)):
        first_line = node.content.splitlines()[0] if node.content else ""
        return f"{kind}: {first_line}"
    return kind


if __name__ == "__main__":
    main()
