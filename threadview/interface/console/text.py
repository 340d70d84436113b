"""Plain-text adapter for display fragments.

Each nesting level is indented by INDENT_WIDTH spaces per INDENT_UNIT, so
relative indentation in the terminal follows the fragment's depth exactly.
"""

from threadview.domain.model import (
    CommentBlock,
    PageSelector,
    TreeFragment,
    ViewFragment,
)
from threadview.domain.model.fragment import INDENT_UNIT

# Spaces per nesting level
INDENT_WIDTH = 3

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def view_to_text(view: ViewFragment) -> str:
    """Render a whole view: heading, tree and page selector."""
    lines: list[str] = []
    if view.heading:
        lines.append(view.heading)
    lines.extend(tree_to_lines(view.tree))
    if view.pages is not None:
        lines.append(pages_to_text(view.pages))
    return "\n".join(lines)


def tree_to_lines(tree: TreeFragment, show_placeholder: bool = True) -> list[str]:
    """Render a tree fragment as indented lines.

    Args:
        tree: Fragment to render
        show_placeholder: Print the empty-state text; nested reply fragments
            pass False so leaf comments are not each followed by it
    """
    if tree.is_empty:
        if show_placeholder and tree.placeholder is not None:
            return [tree.placeholder.text]
        return []

    lines: list[str] = []
    for block in tree.blocks:
        lines.extend(_block_to_lines(block))
    return lines


def _block_to_lines(block: CommentBlock) -> list[str]:
    pad = " " * (block.indent // INDENT_UNIT * INDENT_WIDTH)
    actions = " ".join(f"[{a.label} {a.target}]" for a in block.actions)
    created = block.created_at.astimezone().strftime(TIMESTAMP_FORMAT)
    header = f"{pad}{block.marker}#{block.comment_id} | {created} {actions}"

    # Content lines line up under the text after the marker
    body_pad = pad + " " * len(block.marker)
    body = [f"{body_pad}{line}" for line in block.content.splitlines() or [""]]
    return [header, *body, *tree_to_lines(block.children, show_placeholder=False)]


def pages_to_text(pages: PageSelector) -> str:
    """Render page buttons; the current page is starred."""
    labels = [
        f"[{b.label}*]" if b.target == pages.current else f"[{b.label}]"
        for b in pages.buttons
    ]
    return "Pages: " + " ".join(labels)
