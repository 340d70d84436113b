"""Tree renderer.

Pure functions from a comment forest to display fragments. No I/O, no
mutation and no sorting: siblings keep the order the service returned.
"""

from threadview.domain.model import (
    Action,
    ActionKind,
    Comment,
    CommentBlock,
    PageSelector,
    Placeholder,
    TreeFragment,
    ViewFragment,
)
from threadview.domain.model.fragment import INDENT_UNIT, REPLY_MARKER
from threadview.domain.value import CommentId, ViewKind


def render(forest: list[Comment], depth: int = 0) -> TreeFragment:
    """Render a forest at the given depth.

    Each comment becomes a block indented by depth * INDENT_UNIT; replies are
    nested inside their parent's block one level deeper. An empty forest
    renders the fixed placeholder rather than nothing.

    Args:
        forest: Comments in display order
        depth: Nesting level of the forest's top comments

    Returns:
        TreeFragment with one block per top comment
    """
    if not forest:
        return TreeFragment(placeholder=Placeholder())
    return TreeFragment(blocks=tuple(_render_comment(c, depth) for c in forest))


def _render_comment(comment: Comment, depth: int) -> CommentBlock:
    children = render(comment.children, depth + 1)
    return CommentBlock(
        comment_id=comment.id,
        content=comment.content,
        created_at=comment.created_at,
        depth=depth,
        indent=depth * INDENT_UNIT,
        marker=REPLY_MARKER if depth > 0 else "",
        actions=(
            Action(kind=ActionKind.DELETE, target=comment.id, label="Delete"),
            Action(kind=ActionKind.REPLY, target=comment.id, label="Reply"),
        ),
        children=children,
    )


def render_pages(total_pages: int, current: int) -> PageSelector | None:
    """Render page buttons 1..total_pages, or None when there is one page."""
    if total_pages <= 1:
        return None
    return PageSelector(
        buttons=tuple(
            Action(kind=ActionKind.PAGE, target=p, label=str(p))
            for p in range(1, total_pages + 1)
        ),
        current=current,
    )


def render_view(
    forest: list[Comment],
    view_kind: ViewKind,
    *,
    total_pages: int = 0,
    page: int = 1,
    parent_id: CommentId | None = None,
    search_query: str = "",
) -> ViewFragment:
    """Render everything the tree container shows for one view.

    Page buttons only ever appear on root pages.
    """
    if view_kind is ViewKind.SUBTREE:
        return ViewFragment(
            tree=render(forest),
            heading=f"Replies to #{parent_id}",
        )

    heading = f'Search: "{search_query}"' if search_query else None
    return ViewFragment(
        tree=render(forest),
        pages=render_pages(total_pages, page),
        heading=heading,
    )
