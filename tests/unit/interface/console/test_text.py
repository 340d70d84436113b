"""Unit tests for the plain-text fragment adapter."""

from threadview.domain.model.fragment import NO_COMMENTS
from threadview.domain.service import render, render_pages, render_view
from threadview.domain.value import ViewKind
from threadview.interface.console.text import (
    INDENT_WIDTH,
    TIMESTAMP_FORMAT,
    pages_to_text,
    tree_to_lines,
    view_to_text,
)
from tests.conftest import make_comment


def _stamp(comment) -> str:
    return comment.created_at.astimezone().strftime(TIMESTAMP_FORMAT)


class TestTreeToLines:
    """Tests for tree_to_lines."""

    def test_empty_tree_is_placeholder(self):
        assert tree_to_lines(render([])) == [NO_COMMENTS]

    def test_root_block_layout(self):
        """Header carries id, time and actions; content follows."""
        comment = make_comment(1, content="hello")

        lines = tree_to_lines(render([comment]))

        assert lines == [
            f"#1 | {_stamp(comment)} [Delete 1] [Reply 1]",
            "hello",
        ]

    def test_replies_are_indented_with_marker(self):
        reply = make_comment(2, content="re", parent_id=1)
        root = make_comment(1, content="hello", children=[reply])

        lines = tree_to_lines(render([root]))

        pad = " " * INDENT_WIDTH
        assert lines[2] == f"{pad}↳ #2 | {_stamp(reply)} [Delete 2] [Reply 2]"
        assert lines[3] == f"{pad}  re"

    def test_multiline_content_stays_under_block(self):
        reply = make_comment(2, content="one\ntwo", parent_id=1)
        root = make_comment(1, children=[reply])

        lines = tree_to_lines(render([root]))

        body_pad = " " * INDENT_WIDTH + "  "
        assert lines[-2:] == [f"{body_pad}one", f"{body_pad}two"]

    def test_nested_placeholders_are_not_printed(self):
        """Leaf comments are not each followed by the empty-state text."""
        reply = make_comment(2, content="re", parent_id=1)
        root = make_comment(1, content="hello", children=[reply])

        lines = tree_to_lines(render([root]))

        assert NO_COMMENTS not in lines
        assert len(lines) == 4


class TestPagesToText:
    """Tests for pages_to_text."""

    def test_current_page_is_starred(self):
        assert pages_to_text(render_pages(3, 2)) == "Pages: [1] [2*] [3]"


class TestViewToText:
    """Tests for view_to_text."""

    def test_root_view_with_pages(self):
        comment = make_comment(1, content="hi")
        view = render_view([comment], ViewKind.ROOT_PAGE, total_pages=2, page=1)

        text = view_to_text(view)

        assert text.splitlines() == [
            f"#1 | {_stamp(comment)} [Delete 1] [Reply 1]",
            "hi",
            "Pages: [1*] [2]",
        ]

    def test_subtree_view_has_heading(self):
        view = render_view([], ViewKind.SUBTREE, parent_id=4)

        assert view_to_text(view).splitlines() == ["Replies to #4", NO_COMMENTS]
