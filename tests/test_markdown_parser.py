"""Tests for Markdown parsing into the document tree."""

from __future__ import annotations

import pytest

from planner.exceptions import ParseError
from planner.markdown_parser import parse_markdown, parse_task
from planner.nodes import (
    Heading,
    List,
    ListItem,
    Node,
    Paragraph,
    Task,
    Text,
    find_heading_by_title,
    find_headings,
    find_tasks,
    iter_nodes,
)


def _lists(root: Node) -> list[List]:
    return [node for node in iter_nodes(root) if isinstance(node, List)]


class TestParseMarkdown:
    """Tests for parse_markdown structure."""

    def test_empty_document(self) -> None:
        doc = parse_markdown("")
        assert doc.children == []

    def test_single_heading(self) -> None:
        """A heading carries its text as the title and has no text child."""
        doc = parse_markdown("# Title")

        assert len(doc.children) == 1
        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.title == "Title"
        assert heading.children == []

    def test_setext_heading(self) -> None:
        doc = parse_markdown("Title\n=====")

        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.title == "Title"

    def test_heading_with_paragraph(self) -> None:
        """Blocks after a heading become its children."""
        doc = parse_markdown("# Title\n\nThis is a paragraph.")

        heading = doc.children[0]
        assert len(heading.children) == 1
        para = heading.children[0]
        assert isinstance(para, Paragraph)
        assert para.content == "This is a paragraph."
        assert para.parent is heading

    def test_content_before_first_heading_attaches_to_document(self) -> None:
        doc = parse_markdown("Intro text.\n\n# Title")

        assert isinstance(doc.children[0], Paragraph)
        assert isinstance(doc.children[1], Heading)

    def test_nested_headings(self) -> None:
        """Deeper headings nest under the nearest shallower one."""
        doc = parse_markdown("# Level 1\n## Level 2\n### Level 3")

        headings = find_headings(doc)
        assert [heading.level for heading in headings] == [1, 2, 3]
        assert len(doc.children) == 1
        assert headings[1].parent is headings[0]
        assert headings[2].parent is headings[1]

    def test_heading_closes_deeper_and_equal_levels(self) -> None:
        """A heading pops every open heading of the same or a deeper level."""
        doc = parse_markdown("# A\n## B\n### C\n## D\n# E")

        a = find_heading_by_title(doc, "A")
        b = find_heading_by_title(doc, "B")
        assert [child.title for child in a.children] == ["B", "D"]
        assert [child.title for child in b.children] == ["C"]
        assert [child.title for child in doc.children] == ["A", "E"]

    def test_task_list(self) -> None:
        doc = parse_markdown(
            "# Tasks\n"
            "- [x] Completed task\n"
            "- [ ] Incomplete task\n"
            "- [X] Another completed task"
        )

        tasks = find_tasks(doc)
        assert [(task.checked, task.content) for task in tasks] == [
            (True, "Completed task"),
            (False, "Incomplete task"),
            (True, "Another completed task"),
        ]
        task_list = doc.children[0].children[0]
        assert isinstance(task_list, List)
        assert all(task.parent is task_list for task in tasks)

    def test_mixed_content(self) -> None:
        doc = parse_markdown(
            "# Week 51\n"
            "\n"
            "## Monday\n"
            "\n"
            "Morning tasks:\n"
            "- [x] Wake up early\n"
            "- [ ] Exercise\n"
            "\n"
            "### Notes\n"
            "Had a productive day.\n"
            "\n"
            "## Tuesday\n"
            "\n"
            "Todo list pending."
        )

        assert len(doc.children) == 1
        assert doc.children[0].title == "Week 51"

        monday = find_heading_by_title(doc, "Monday")
        assert monday is not None
        assert monday.level == 2
        assert isinstance(monday.children[0], Paragraph)
        assert monday.children[0].content == "Morning tasks:"

        assert len(find_tasks(doc)) == 2

        notes = find_heading_by_title(doc, "Notes")
        assert notes is not None
        assert notes.level == 3
        assert notes.parent is monday

    def test_lists(self) -> None:
        doc = parse_markdown(
            "# Lists\n\n## Unordered\n- Item 1\n- Item 2\n- Item 3\n\n"
            "## Ordered\n1. First\n2. Second\n3. Third"
        )

        lists = _lists(doc)
        assert len(lists) == 2
        assert not lists[0].ordered
        assert lists[1].ordered
        assert [item.content for item in lists[1].children] == ["First", "Second", "Third"]
        assert all(isinstance(item, ListItem) for item in lists[0].children)

    def test_nested_list_items(self) -> None:
        """Nested lists hang off the item that contains them."""
        doc = parse_markdown("- parent\n  - child")

        outer = doc.children[0]
        parent = outer.children[0]
        assert isinstance(parent, ListItem)
        assert parent.content == "parent"
        inner = parent.children[0]
        assert isinstance(inner, List)
        assert inner.children[0].content == "child"

    def test_nested_blocks_under_task_follow_the_task(self) -> None:
        """A task keeps no children; its nested list follows it instead."""
        doc = parse_markdown("- [ ] parent\n  - [x] child")

        outer = doc.children[0]
        parent_task, nested = outer.children
        assert isinstance(parent_task, Task)
        assert parent_task.children == []
        assert isinstance(nested, List)
        assert [(task.checked, task.content) for task in find_tasks(doc)] == [
            (False, "parent"),
            (True, "child"),
        ]

    def test_ordered_task_item(self) -> None:
        doc = parse_markdown("1. [x] Done")

        task = find_tasks(doc)[0]
        assert task.checked
        assert task.content == "Done"

    def test_task_content_keeps_inline_markup(self) -> None:
        doc = parse_markdown("- [ ] Read **two** chapters")

        assert find_tasks(doc)[0].content == "Read **two** chapters"

    def test_bracket_text_without_marker_is_list_item(self) -> None:
        """Only a single-character checkbox makes a task."""
        doc = parse_markdown("- [link] text")

        item = doc.children[0].children[0]
        assert isinstance(item, ListItem)
        assert item.content == "[link] text"

    def test_code_fence_kept_as_raw_text(self) -> None:
        doc = parse_markdown("# Notes\n\n```python\nprint('- [ ] not a task')\n```")

        heading = doc.children[0]
        fence = heading.children[0]
        assert isinstance(fence, Text)
        assert fence.content == "```python\nprint('- [ ] not a task')\n```"
        assert find_tasks(doc) == []

    def test_windows_newlines(self) -> None:
        doc = parse_markdown("# Title\r\n\r\n- [ ] Task\r\n")

        assert find_tasks(doc)[0].content == "Task"

    def test_accepts_utf8_bytes(self) -> None:
        doc = parse_markdown("# Café\n".encode("utf-8"))
        assert doc.children[0].title == "Café"

    def test_rejects_invalid_utf8(self) -> None:
        with pytest.raises(ParseError, match="not valid UTF-8"):
            parse_markdown(b"# Title\n\xff\xfe")


class TestParseTask:
    """Tests for single-line task detection."""

    @pytest.mark.parametrize(
        ("text", "checked", "content"),
        [
            ("- [x] Completed task", True, "Completed task"),
            ("- [X] Completed task", True, "Completed task"),
            ("- [ ] Incomplete task", False, "Incomplete task"),
            ("  - [x] Indented task", True, "Indented task"),
            ("-[ ] No space", False, "No space"),
        ],
    )
    def test_detects_tasks(self, text: str, checked: bool, content: str) -> None:
        task = parse_task(text)

        assert task is not None
        assert task.checked is checked
        assert task.content == content

    @pytest.mark.parametrize("text", ["- Regular item", "This is just text", "- [y] Other"])
    def test_rejects_non_tasks(self, text: str) -> None:
        assert parse_task(text) is None


def test_complex_document_structure() -> None:
    doc = parse_markdown(
        "# Project Plan\n\n"
        "## Overview\nThis is the project overview.\n\n"
        "## Tasks\n\n"
        "### High Priority\n- [x] Design architecture\n- [x] Set up repository\n"
        "- [ ] Implement core features\n\n"
        "### Low Priority\n- [ ] Add animations\n- [ ] Optimize performance\n\n"
        "## Notes\n\n"
        "### Meeting Notes\nDiscussed timeline and deliverables.\n\n"
        "### Ideas\n- Consider using caching\n- Add metrics collection"
    )

    project_plan = find_heading_by_title(doc, "Project Plan")
    assert project_plan is not None
    assert project_plan.level == 1

    level_two = [heading.title for heading in find_headings(doc) if heading.level == 2]
    assert level_two == ["Overview", "Tasks", "Notes"]

    tasks = find_tasks(doc)
    assert len(tasks) == 5
    assert sum(task.checked for task in tasks) == 2
